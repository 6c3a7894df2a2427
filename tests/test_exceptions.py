"""例外クラスのテスト."""

import pytest

from sqltag.exceptions import (
    ArityError,
    EmptyListError,
    ListValueError,
    NonUniformLengthError,
    SqltagError,
)


class TestExceptionHierarchy:
    """例外クラスの継承関係を検証する."""

    def test_sqltag_error_is_exception(self) -> None:
        assert issubclass(SqltagError, Exception)

    def test_arity_error_is_type_error(self) -> None:
        assert issubclass(ArityError, SqltagError)
        assert issubclass(ArityError, TypeError)

    def test_empty_list_error_is_value_error(self) -> None:
        assert issubclass(EmptyListError, SqltagError)
        assert issubclass(EmptyListError, ValueError)

    def test_non_uniform_length_error_is_value_error(self) -> None:
        assert issubclass(NonUniformLengthError, SqltagError)
        assert issubclass(NonUniformLengthError, ValueError)

    def test_list_value_error_is_type_error(self) -> None:
        assert issubclass(ListValueError, SqltagError)
        assert issubclass(ListValueError, TypeError)


class TestExceptionCatch:
    """基底例外で子例外をキャッチできることを検証する."""

    def test_catch_arity_error_as_sqltag_error(self) -> None:
        with pytest.raises(SqltagError):
            raise ArityError("arity")

    def test_catch_empty_list_error_as_sqltag_error(self) -> None:
        with pytest.raises(SqltagError):
            raise EmptyListError("empty")

    def test_catch_non_uniform_length_error_as_sqltag_error(self) -> None:
        with pytest.raises(SqltagError):
            raise NonUniformLengthError("ragged")


class TestExceptionMessage:
    """例外メッセージが保持されることを検証する."""

    def test_sqltag_error_message(self) -> None:
        err = SqltagError("test message")
        assert str(err) == "test message"

    def test_arity_error_message(self) -> None:
        err = ArityError("Expected at least 1 string")
        assert str(err) == "Expected at least 1 string"
