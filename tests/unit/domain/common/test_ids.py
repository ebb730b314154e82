import pytest

from vocab_practice.domain.common.errors import ValidationError
from vocab_practice.domain.common.value_objects import CategoryId, SessionId, WordId


def test_word_id_must_be_positive() -> None:
    assert WordId(1).value == 1
    with pytest.raises(ValidationError, match="Word id must be positive"):
        WordId(0)


def test_ids_of_different_types_are_not_equal() -> None:
    assert WordId(7) != CategoryId(7)
    assert WordId(7) == WordId(7)


def test_session_id_parse_trims() -> None:
    assert SessionId.parse("  abc  ").value == "abc"


def test_session_id_accepts_any_format() -> None:
    """Test the token format is not checked, only its length."""
    assert SessionId("not-a-sess-prefix!").value == "not-a-sess-prefix!"
    assert SessionId("x" * 255).value == "x" * 255


def test_session_id_rejects_blank_and_too_long() -> None:
    with pytest.raises(ValidationError, match="session_id cannot be empty"):
        SessionId.parse("   ")
    with pytest.raises(ValidationError, match="at most 255 characters"):
        SessionId("x" * 256)


def test_ids_are_hashable_and_render_their_value() -> None:
    assert {WordId(3), WordId(3), CategoryId(3)} == {WordId(3), CategoryId(3)}
    assert str(WordId(3)) == "3"
    assert str(SessionId("sess_abc")) == "sess_abc"
