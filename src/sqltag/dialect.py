"""Dialect enum: RDBMS ごとのプレースホルダ形式."""

from __future__ import annotations

from enum import Enum


class Dialect(Enum):
    """RDBMS ごとのプレースホルダ形式.

    SQLITE と MYSQL は同じプレースホルダ ``?`` を使用するが、
    接続先を区別できるよう別メンバーとして定義する。
    """

    SQLITE = ("sqlite", "?")
    POSTGRESQL = ("postgresql", "$n")
    MYSQL = ("mysql", "?")
    ORACLE = ("oracle", ":n")

    def __init__(self, dialect_id: str, placeholder_fmt: str) -> None:
        self._dialect_id = dialect_id
        self._placeholder_fmt = placeholder_fmt

    @property
    def placeholder(self) -> str:
        """プレースホルダ形式を返す（``n`` は 1 始まりの位置番号）."""
        return self._placeholder_fmt

    @property
    def is_numbered(self) -> bool:
        """プレースホルダに位置番号が付くか."""
        return "n" in self._placeholder_fmt

    def placeholder_for(self, index: int) -> str:
        """index 番目（1 始まり）の値に対応するプレースホルダを返す.

        Args:
            index: 平坦化後の values 内での位置（1 始まり）

        Returns:
            プレースホルダ文字列

        Examples:
            >>> Dialect.POSTGRESQL.placeholder_for(2)
            '$2'
            >>> Dialect.SQLITE.placeholder_for(2)
            '?'

        """
        match self:
            case Dialect.POSTGRESQL:
                return f"${index}"
            case Dialect.ORACLE:
                return f":{index}"
            case _:
                return "?"
