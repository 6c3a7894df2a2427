"""Fragment: 入れ子にできる SQL 断片."""

from __future__ import annotations

import re
import string
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from sqltag.dialect import Dialect
from sqltag.exceptions import ArityError
from sqltag.validation import check_in_lists


class _BindParam:
    """後からバインドするパラメータの目印."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "BIND_PARAM"

    def __reduce__(self) -> str:
        # copy / pickle でも同一オブジェクトを返す
        return "BIND_PARAM"


BIND_PARAM = _BindParam()
"""``bind()`` で後から値を与えるスロットを表すセンチネル（同一性で比較する）."""


@dataclass
class Query:
    """DB ドライバに渡す SQL 文字列とパラメータ."""

    sql: str
    params: list[Any] = field(default_factory=list)


@dataclass(frozen=True)
class FragmentSnapshot:
    """デバッグ表示用のスナップショット."""

    sql: str
    """``?`` 形式."""

    statement: str
    """``:n`` 形式."""

    text: str
    """``$n`` 形式."""

    values: list[Any]
    """平坦化されたバインド値."""


class Fragment:
    """リテラル文字列と値が交互に並ぶ不変の SQL 断片.

    ``texts[0] values[0] texts[1] ... values[n-1] texts[n]`` の並びを保持する。
    値として渡された Fragment は構築時にその場へ展開されるため、
    構築後の ``values`` に Fragment が含まれることはない。

    Examples:
        >>> sub = sql("SELECT id FROM authors WHERE name = ", "Blake", "")
        >>> query = sql("SELECT * FROM books WHERE author_id IN (", sub, ")")
        >>> query.text
        'SELECT * FROM books WHERE author_id IN (SELECT id FROM authors WHERE name = $1)'
        >>> query.values
        ('Blake',)

    """

    __slots__ = ("bind_params", "texts", "values")

    texts: tuple[str, ...]
    values: tuple[Any, ...]
    bind_params: int

    def __init__(self, raw_texts: Sequence[str], raw_values: Sequence[Any]) -> None:
        """初期化（入れ子の Fragment を平坦化する）.

        Args:
            raw_texts: リテラル文字列の並び（N 個）
            raw_values: 値または Fragment の並び（N-1 個）

        Raises:
            ArityError: raw_texts が空、または個数の関係が N / N-1 でない場合

        """
        if len(raw_texts) - 1 != len(raw_values):
            if not raw_texts:
                msg = "Expected at least 1 string"
                raise ArityError(msg)
            msg = f"Expected {len(raw_texts)} strings to have {len(raw_texts) - 1} values"
            raise ArityError(msg)

        size = sum(len(v.values) if isinstance(v, Fragment) else 1 for v in raw_values)
        texts: list[str] = [""] * (size + 1)
        values: list[Any] = [None] * size
        bind_params = 0

        texts[0] = raw_texts[0]
        # 値は常に2つの文字列の間にあるため、後続リテラルは raw_texts[i + 1]
        pos = 0
        for i, child in enumerate(raw_values):
            raw_text = raw_texts[i + 1]
            if isinstance(child, Fragment):
                # 子の先頭文字列は現在の文字列に連結する
                texts[pos] += child.texts[0]
                for value, text in zip(child.values, child.texts[1:]):
                    values[pos] = value
                    pos += 1
                    texts[pos] = text
                texts[pos] += raw_text
                bind_params += child.bind_params
            else:
                values[pos] = child
                pos += 1
                texts[pos] = raw_text
                if child is BIND_PARAM:
                    bind_params += 1

        object.__setattr__(self, "texts", tuple(texts))
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "bind_params", bind_params)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __reduce__(self) -> tuple[type[Fragment], tuple[tuple[str, ...], tuple[Any, ...]]]:
        # 平坦化済みなので texts / values からそのまま再構築できる
        return (type(self), (self.texts, self.values))

    def __repr__(self) -> str:
        """デバッグ用の文字列表現."""
        return f"Fragment(text={self.text!r}, values={list(self.values)!r})"

    @property
    def sql(self) -> str:
        """``?`` プレースホルダ形式の SQL."""
        return self.render(Dialect.SQLITE)

    @property
    def text(self) -> str:
        """``$1, $2, ...`` プレースホルダ形式の SQL."""
        return self.render(Dialect.POSTGRESQL)

    @property
    def statement(self) -> str:
        """``:1, :2, ...`` プレースホルダ形式の SQL."""
        return self.render(Dialect.ORACLE)

    def render(self, dialect: Dialect) -> str:
        """Dialect のプレースホルダ形式で SQL を組み立てる.

        プレースホルダの番号は values 内の位置だけで決まる。
        同じ値が複数回現れても番号は共有しない。

        Args:
            dialect: RDBMS 方言

        Returns:
            SQL 文字列

        """
        return self._render(dialect.placeholder_for)

    def _render(self, placeholder: Callable[[int], str]) -> str:
        parts = [self.texts[0]]
        for index, text in enumerate(self.texts[1:], start=1):
            parts.append(placeholder(index))
            parts.append(text)
        return "".join(parts)

    def bind(self, *params: Any) -> list[Any]:
        """BIND_PARAM を左から順に params で置き換えた値リストを返す.

        Args:
            *params: バインドする値（bind_params 個）

        Returns:
            新しい値リスト（Fragment 自体は変更しない）

        Raises:
            ArityError: params の個数が bind_params と一致しない場合

        """
        if len(params) != self.bind_params:
            msg = f"Expected {self.bind_params} parameters to be bound, but got {len(params)}"
            raise ArityError(msg)
        supplied = iter(params)
        return [next(supplied) if value is BIND_PARAM else value for value in self.values]

    def to_query(self, *params: Any, dialect: Dialect = Dialect.SQLITE) -> Query:
        """DB ドライバに渡せる Query を作る.

        Args:
            *params: BIND_PARAM に割り当てる値
            dialect: RDBMS 方言

        Returns:
            Query

        """
        return Query(sql=self.render(dialect), params=self.bind(*params))

    def inspect(self) -> FragmentSnapshot:
        """デバッグ用のスナップショットを返す."""
        return FragmentSnapshot(
            sql=self.sql,
            statement=self.statement,
            text=self.text,
            values=list(self.values),
        )


def _is_template(obj: Any) -> bool:
    """PEP 750 のテンプレート文字列（t-string）か."""
    return hasattr(obj, "strings") and hasattr(obj, "interpolations")


def sql(*parts: Any, strict: bool = False) -> Fragment:
    """リテラルと値を交互に並べて Fragment を作る.

    Args:
        *parts: ``text0, value0, text1, ..., textN`` の並び、
            または t-string（``string.templatelib.Template``）1 つ
        strict: True の場合、``IN (`` 直後にリストを直接渡していないか検査する

    Returns:
        Fragment

    Raises:
        ArityError: リテラルと値の個数が合わない場合
        TypeError: リテラル位置に文字列以外が渡された場合

    Examples:
        >>> sql("SELECT * FROM books WHERE author = ", "Blake", "").text
        'SELECT * FROM books WHERE author = $1'

        Python 3.14 以降は t-string をそのまま渡せる:

        >>> name = "Blake"
        >>> sql(t"SELECT * FROM books WHERE author = {name}").sql  # doctest: +SKIP
        'SELECT * FROM books WHERE author = ?'

    """
    if len(parts) == 1 and _is_template(parts[0]):
        template = parts[0]
        # 変換指定・書式指定は無視する（値は不透明）
        fragment = Fragment(template.strings, [item.value for item in template.interpolations])
    else:
        texts = parts[0::2]
        for text in texts:
            if not isinstance(text, str):
                msg = f"Expected literal SQL text, but got {type(text).__name__}"
                raise TypeError(msg)
        fragment = Fragment(texts, parts[1::2])
    if strict:
        check_in_lists(fragment)
    return fragment


_formatter = string.Formatter()


def _auto_numbered(field_name: str) -> bool:
    return not re.match(r"[A-Za-z0-9_]", field_name)


def format_sql(fmt: str, /, *args: Any, strict: bool = False, **kwargs: Any) -> Fragment:
    """``str.format`` 形式のテンプレートから Fragment を作る.

    置換フィールドはすべてバインド値（Fragment なら展開）になり、
    SQL 文字列に埋め込まれることはない。``{{`` ``}}`` はリテラルの波括弧。

    Args:
        fmt: テンプレート文字列
        *args: 位置指定フィールドの値
        strict: True の場合、``IN (`` 直後にリストを直接渡していないか検査する
        **kwargs: 名前付きフィールドの値

    Returns:
        Fragment

    Examples:
        >>> format_sql("SELECT * FROM books WHERE author = {name}", name="Blake").text
        'SELECT * FROM books WHERE author = $1'

    """
    texts = [""]
    values: list[Any] = []
    next_auto_field = 0
    for literal_text, field_name, _format_spec, _conversion in _formatter.parse(fmt):
        texts[-1] += literal_text
        if field_name is None:
            continue
        if _auto_numbered(field_name):
            field_name = f"{next_auto_field}{field_name}"
            next_auto_field += 1
        value, _ = _formatter.get_field(field_name, args, kwargs)
        values.append(value)
        texts.append("")
    fragment = Fragment(texts, values)
    if strict:
        check_in_lists(fragment)
    return fragment
