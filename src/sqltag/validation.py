"""IN 句へのリスト直接指定の検査（任意）."""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from sqltag.exceptions import ListValueError

if TYPE_CHECKING:
    from sqltag.fragment import Fragment

logger = logging.getLogger(__name__)

# 値の直前が "IN (" で終わっているか
IN_OPEN_PATTERN = re.compile(r"\bIN\s*\(\s*$", re.IGNORECASE)

_LIST_TYPES = (list, tuple, set, frozenset)


def check_in_lists(fragment: Fragment, *, warn_only: bool = False) -> None:
    """``IN (`` の直後にリストが 1 つの値として渡されていないか検査する.

    リストは 1 つのバインド値として扱われるため、``IN (?)`` に
    配列がそのまま渡され、多くのドライバで意図しない結果になる。
    要素ごとに展開するには ``join()`` を使う。

    既定の構築処理では呼ばれない。``sql(..., strict=True)`` で有効になる。

    Args:
        fragment: 検査対象
        warn_only: True の場合は例外を送出せず警告ログを出す

    Raises:
        ListValueError: 該当する値があり、warn_only が False の場合

    """
    for index, value in enumerate(fragment.values):
        if not isinstance(value, _LIST_TYPES):
            continue
        if not IN_OPEN_PATTERN.search(fragment.texts[index]):
            continue
        msg = (
            f"Value {index + 1} is a {type(value).__name__} inside IN (...); "
            "use join() to expand it into separate values"
        )
        if warn_only:
            logger.warning(msg)
            continue
        raise ListValueError(msg)
