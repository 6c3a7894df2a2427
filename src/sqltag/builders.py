"""リストや生 SQL から Fragment を作るヘルパー."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from sqltag.exceptions import EmptyListError, NonUniformLengthError
from sqltag.fragment import Fragment


def join(
    values: Iterable[Any],
    separator: str = ",",
    prefix: str = "",
    suffix: str = "",
) -> Fragment:
    """値のリストを区切り文字で連結した Fragment を作る.

    Args:
        values: 値または Fragment のリスト
        separator: 区切り文字
        prefix: 先頭に付ける文字列
        suffix: 末尾に付ける文字列

    Returns:
        Fragment

    Raises:
        EmptyListError: values が空の場合

    Examples:
        >>> query = sql("SELECT * FROM books WHERE id IN (", join([1, 2, 3]), ")")
        >>> query.text
        'SELECT * FROM books WHERE id IN ($1,$2,$3)'

    """
    items = list(values)
    if not items:
        msg = (
            "Expected `join([])` to be called with an array of multiple elements, "
            "but got an empty array"
        )
        raise EmptyListError(msg)
    return Fragment([prefix, *[separator] * (len(items) - 1), suffix], items)


def bulk(
    rows: Sequence[Sequence[Any]],
    separator: str = ",",
    prefix: str = "",
    suffix: str = "",
) -> Fragment:
    """行のリストを ``(v1,v2,...)`` のグループとして連結した Fragment を作る.

    Args:
        rows: 行（同じ長さの値リスト）のリスト
        separator: 区切り文字（行内・行間の両方に使用）
        prefix: 先頭に付ける文字列
        suffix: 末尾に付ける文字列

    Returns:
        Fragment

    Raises:
        EmptyListError: rows が空、または先頭行が空の場合
        NonUniformLengthError: 行の長さが先頭行と異なる場合

    Examples:
        >>> bulk([[1, 2, 3], [5, 2, 3]]).text
        '($1,$2,$3),($4,$5,$6)'

    """
    length = len(rows[0]) if rows else 0
    if length == 0:
        msg = (
            "Expected `bulk([][])` to be called with a nested array of multiple elements, "
            "but got an empty array"
        )
        raise EmptyListError(msg)

    groups: list[Fragment] = []
    for index, row in enumerate(rows):
        if len(row) != length:
            msg = f"Expected `bulk([{index}][])` to have a length of {length}, but got {len(row)}"
            raise NonUniformLengthError(msg)
        groups.append(join(row, separator, "(", ")"))
    return join(groups, separator, prefix, suffix)


def raw(value: str) -> Fragment:
    """値を持たない生の SQL 断片を作る.

    文字列はそのまま SQL に埋め込まれる。利用者入力を渡してはならない。
    """
    return Fragment([value], [])


empty = raw("")
"""何も出力しない Fragment（任意句の省略に使う）."""
