"""sqltag例外クラス."""


class SqltagError(Exception):
    """sqltagの基底例外."""


class ArityError(SqltagError, TypeError):
    """リテラル数と値の数、またはバインドパラメータ数が一致しない."""


class EmptyListError(SqltagError, ValueError):
    """空のリストを join / bulk に渡した."""


class NonUniformLengthError(SqltagError, ValueError):
    """bulk の行ごとの要素数が揃っていない."""


class ListValueError(SqltagError, TypeError):
    """IN 句にリストを直接渡した（strict モード）."""
