import pytest
from pydantic import ValidationError

from fragmark.models import Link, Scalar, Series, to_lines


def test_to_lines_wraps_string_as_scalar() -> None:
    assert to_lines("hello") == Scalar("hello")


def test_to_lines_wraps_sequence_as_series() -> None:
    assert to_lines(["a", "", None, "b"]) == Series(("a", "", None, "b"))
    assert to_lines(("a",)) == Series(("a",))


def test_to_lines_passes_variants_through() -> None:
    scalar = Scalar("x")
    series = Series(("x", "y"))

    assert to_lines(scalar) is scalar
    assert to_lines(series) is series


def test_to_lines_rejects_non_string_entries() -> None:
    with pytest.raises(TypeError, match="Lines entries must be str, got int"):
        to_lines(["a", 1])  # type: ignore[list-item]


def test_to_lines_rejects_other_types() -> None:
    with pytest.raises(TypeError, match="Expected str or sequence of str, got int"):
        to_lines(42)  # type: ignore[arg-type]


def test_variants_are_frozen() -> None:
    scalar = Scalar("x")

    with pytest.raises(AttributeError):
        scalar.text = "y"  # type: ignore[misc]


def test_link_defaults() -> None:
    link = Link()

    assert link.url is None
    assert link.inner is None
    assert link.title is None


def test_link_coerce_accepts_mapping_and_instance() -> None:
    link = Link(url="u", inner="i")

    assert Link.coerce(link) is link
    assert Link.coerce({"url": "u", "inner": "i", "title": "t"}) == Link(url="u", inner="i", title="t")


def test_link_coerce_rejects_invalid_field_types() -> None:
    with pytest.raises(ValidationError):
        Link.coerce({"url": 1, "inner": "i"})


def test_link_is_frozen() -> None:
    link = Link(url="u", inner="i")

    with pytest.raises(ValidationError):
        link.url = "other"  # type: ignore[misc]
