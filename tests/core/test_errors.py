"""Error hierarchy tests — codes, categories and serialization."""

from setkit.core.errors import (
    ErrorCategory,
    ErrorSeverity,
    ImmutableSetError,
    InvalidArgumentError,
    NotARecordError,
    SetKitError,
)


def test_leaf_errors_share_base():
    for err in (
        ImmutableSetError("frozenset", "take_random"),
        NotARecordError("int"),
        InvalidArgumentError("bad", "take_random"),
    ):
        assert isinstance(err, SetKitError)
        assert err.severity == ErrorSeverity.ERROR


def test_leaf_errors_match_builtin_handlers():
    assert isinstance(ImmutableSetError("frozenset", "take_random"), TypeError)
    assert isinstance(NotARecordError("int"), TypeError)
    assert isinstance(InvalidArgumentError("bad", "take_random"), ValueError)


def test_to_dict_envelope():
    err = NotARecordError("int")
    payload = err.to_dict()["error"]
    assert payload["code"] == "NOT_A_RECORD"
    assert payload["category"] == ErrorCategory.VALIDATION.value
    assert payload["severity"] == "error"
    assert payload["context"]["operation"] == "pluck"
    assert payload["context"]["debug_info"] == {"type": "int"}
    assert "int" in payload["message"]


def test_message_is_exception_text():
    err = ImmutableSetError("frozenset", "take_random")
    assert str(err) == "take_random requires a mutable set, got frozenset"
