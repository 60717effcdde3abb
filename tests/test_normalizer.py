"""
Tests for the storage error normalizer.

Covers message extraction from arbitrary values and the mapping of
storage exceptions to Result failures.
"""

from collections.abc import Mapping

import pytest
from sqlalchemy.exc import (
    ArgumentError,
    CompileError,
    DataError,
    IntegrityError,
    OperationalError,
    StatementError,
)

from backlog.shared.errors.normalizer import (
    get_error_message,
    handle_storage_error,
    is_error_with_message,
    to_error_with_message,
)
from backlog.shared.result import Err, ErrorCode


def _raised(err: Exception) -> Exception:
    """Give ``err`` a real traceback."""
    try:
        raise err
    except Exception as caught:
        return caught


class _WithMessage:
    def __init__(self, message):
        self.message = message


class _Unprintable:
    def __str__(self):
        raise RuntimeError("no string form")


class _BrokenMessage(Exception):
    @property
    def message(self):
        raise RuntimeError("message unavailable")


class _BrokenMapping(Mapping):
    def __getitem__(self, key):
        raise RuntimeError("lookup failed")

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


class TestGetErrorMessage:
    """Tests for best-effort message extraction."""

    def test_object_with_message_attribute(self) -> None:
        assert get_error_message(_WithMessage("disk full")) == "disk full"

    def test_mapping_with_message_key(self) -> None:
        assert get_error_message({"message": "bad input", "code": 7}) == "bad input"

    def test_none_is_null(self) -> None:
        assert get_error_message(None) == "null"

    def test_missing_argument_is_empty(self) -> None:
        assert get_error_message() == ""

    def test_non_string_message_is_serialized(self) -> None:
        """A numeric ``message`` does not count; the whole mapping is serialized."""
        assert get_error_message({"message": 42}) == '{"message": 42}'

    def test_primitives_are_serialized(self) -> None:
        assert get_error_message(42) == "42"
        assert get_error_message("plain") == '"plain"'
        assert get_error_message([1, "a"]) == '[1, "a"]'

    def test_circular_structure_falls_back_to_str(self) -> None:
        """Self-referential values terminate with their generic string form."""
        loop = []
        loop.append(loop)

        assert get_error_message(loop) == str(loop)

    def test_circular_mapping_falls_back_to_str(self) -> None:
        loop = {}
        loop["self"] = loop

        assert get_error_message(loop) == str(loop)

    def test_plain_exception_uses_str(self) -> None:
        assert get_error_message(ValueError("boom")) == "boom"

    def test_unprintable_object_uses_repr(self) -> None:
        value = _Unprintable()

        assert get_error_message(value) == object.__repr__(value)

    def test_raising_message_property_falls_back_to_str(self) -> None:
        value = _BrokenMessage("from args")

        assert get_error_message(value) == "from args"

    def test_raising_mapping_lookup_falls_back_to_str(self) -> None:
        value = _BrokenMapping()

        assert get_error_message(value) == str(value)


class TestToErrorWithMessage:
    """Tests for coercion into a has-a-message value."""

    def test_returns_same_object_when_it_has_a_message(self) -> None:
        err = _WithMessage("kept")

        assert to_error_with_message(err) is err

    def test_wraps_other_values(self) -> None:
        wrapped = to_error_with_message(3.5)

        assert wrapped.message == "3.5"
        assert isinstance(wrapped, Exception)

    def test_is_error_with_message(self) -> None:
        assert is_error_with_message(_WithMessage("x"))
        assert is_error_with_message({"message": "x"})
        assert not is_error_with_message(_WithMessage(None))
        assert not is_error_with_message(ValueError("no message attribute"))
        assert not is_error_with_message(None)

    def test_is_error_with_message_never_raises(self) -> None:
        assert not is_error_with_message(_BrokenMessage("x"))
        assert not is_error_with_message(_BrokenMapping())


class TestHandleStorageError:
    """Tests for storage exception classification."""

    @pytest.mark.parametrize(
        ("err", "message"),
        [
            (
                IntegrityError(
                    "INSERT INTO x (name) VALUES (?)",
                    ("secret",),
                    Exception("UNIQUE constraint failed: x.name"),
                ),
                "UNIQUE constraint failed: x.name",
            ),
            (DataError("INSERT INTO x", {}, Exception("value too long")), "value too long"),
        ],
    )
    def test_known_request_errors_are_bad_request(self, err, message) -> None:
        err = _raised(err)

        result = handle_storage_error(err)

        assert isinstance(result, Err)
        assert result.error.code is ErrorCode.BAD_REQUEST
        assert result.error.message == message
        assert isinstance(result.error.cause, str)
        assert type(err).__name__ in result.error.cause

    def test_statement_and_parameters_stay_in_cause(self) -> None:
        err = _raised(
            IntegrityError(
                "INSERT INTO x (name) VALUES (?)",
                ("secret",),
                Exception("UNIQUE constraint failed: x.name"),
            )
        )

        result = handle_storage_error(err)

        assert "INSERT INTO" not in result.error.message
        assert "secret" not in result.error.message
        assert "INSERT INTO x" in result.error.cause

    @pytest.mark.parametrize(
        ("err", "message"),
        [
            (
                OperationalError("SELECT 1", {}, Exception("database is locked")),
                "database is locked",
            ),
            (StatementError("bad parameter", "SELECT 1", {}, Exception("orig")), "orig"),
            (ArgumentError("not a column"), "not a column"),
            (CompileError("cannot render"), "cannot render"),
        ],
    )
    def test_unknown_and_validation_errors_are_server_faults(self, err, message) -> None:
        err = _raised(err)

        result = handle_storage_error(err)

        assert result.error.code is ErrorCode.INTERNAL_SERVER_ERROR
        assert result.error.message.startswith(message)
        assert "Traceback" in result.error.cause

    def test_arbitrary_error_keeps_original_as_cause(self) -> None:
        err = RuntimeError("connection pool exhausted")

        result = handle_storage_error(err)

        assert result.error.code is ErrorCode.INTERNAL_SERVER_ERROR
        assert result.error.message == "connection pool exhausted"
        assert result.error.cause is err

    def test_non_exception_value(self) -> None:
        thrown = {"message": "raised a dict"}

        result = handle_storage_error(thrown)

        assert result.error.code is ErrorCode.INTERNAL_SERVER_ERROR
        assert result.error.message == "raised a dict"
        assert result.error.cause is thrown

    def test_none_value(self) -> None:
        result = handle_storage_error(None)

        assert result.error.message == "null"
        assert result.error.cause is None

    def test_raising_message_property(self) -> None:
        err = _BrokenMessage("pool closed")

        result = handle_storage_error(err)

        assert isinstance(result, Err)
        assert result.error.code is ErrorCode.INTERNAL_SERVER_ERROR
        assert result.error.message == "pool closed"
        assert result.error.cause is err
