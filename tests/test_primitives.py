"""Tests for the low-level combinators."""

from __future__ import annotations

import pytest

from fragmark.models import Scalar, Series
from fragmark.primitives import br, escape_attribute, i, join, lines, t, tag, tag_each, trim, wrap, wrap_each


def test_escape_attribute_replaces_every_special_character() -> None:
    assert escape_attribute('&<>"[]()`') == "&amp;&lt;&gt;&quot;&#91;&#93;&#40;&#41;&#96;"


def test_escape_attribute_does_not_double_escape() -> None:
    assert escape_attribute("<") == "&lt;"
    assert escape_attribute("a & b") == "a &amp; b"


def test_escape_attribute_leaves_other_text_alone() -> None:
    assert escape_attribute("plain 'text'") == "plain 'text'"


def test_lines_returns_string_unchanged() -> None:
    assert lines("  keep\n\nme ") == "  keep\n\nme "


def test_lines_drops_falsy_entries() -> None:
    assert lines(["a", "", None, "b", ""]) == "a\nb"
    assert lines([]) == ""
    assert lines(["", None]) == ""


def test_lines_accepts_variants() -> None:
    assert lines(Scalar("x")) == "x"
    assert lines(Series(("x", "", "y"))) == "x\ny"


def test_join_keeps_blank_entries() -> None:
    assert join(["a", "", "b", ""]) == "a\n\nb\n"
    assert join(["a", None, "b"]) == "a\n\nb"


def test_join_preserves_entry_count() -> None:
    items = ["", "x", "", ""]

    assert join(items, sep="|").count("|") == len(items) - 1


def test_join_custom_separator_and_scalar() -> None:
    assert join(["a", "b"], ", ") == "a, b"
    assert join("a\nb", ", ") == "a\nb"


def test_trim_strips_edge_whitespace() -> None:
    assert trim(" \t\n text  here \n\t ") == "text  here"
    assert trim("") == ""
    assert trim("   ") == ""


def test_trim_strips_unicode_whitespace() -> None:
    assert trim("\u00a0x\u00a0") == "x"
    assert trim("\ufeff\u2028x y\u3000") == "x y"
    assert trim("\u00a0\ufeff") == ""


@pytest.mark.parametrize(("prefix", "suffix"), [("", ""), ("<", ">"), ("**", "**")])
def test_wrap_empty_item_is_empty(prefix: str, suffix: str) -> None:
    assert wrap(prefix, suffix, "") == ""
    assert wrap(prefix, suffix, None) == ""


def test_wrap_non_empty_item() -> None:
    assert wrap("(", ")", "x") == "(x)"
    assert wrap(item="x") == "x"


def test_wrap_each_filters_empty_entries() -> None:
    assert wrap_each("[", "]", ["a", "", None, "b"]) == ["[a]", "[b]"]


def test_wrap_each_scalar_yields_single_element() -> None:
    assert wrap_each("[", "]", "a") == ["[a]"]
    assert wrap_each("[", "]", "") == [""]


def test_tag() -> None:
    assert tag("div", "") == ""
    assert tag("div", "x") == "<div>x</div>"


def test_tag_each() -> None:
    assert tag_each("li", ["a", "", "b"]) == ["<li>a</li>", "<li>b</li>"]
    assert tag_each("li", "") == [""]


def test_i_renders_when_condition_holds() -> None:
    assert i(True, lambda: ["a", "", "b"]) == "a\nb"
    assert i(1, lambda: "x") == "x"


def test_i_does_not_call_thunk_when_condition_fails() -> None:
    calls: list[str] = []

    def thunk() -> str:
        calls.append("called")
        return "x"

    assert i(False, thunk) == ""
    assert i(None, thunk) == ""
    assert i("", thunk) == ""
    assert calls == []


def test_i_guards_invalid_branch() -> None:
    data: dict[str, str] = {}

    assert i("name" in data, lambda: data["name"]) == ""


def test_t_joins_phrases_with_space() -> None:
    assert t(["Hello", "", None, "world"]) == "Hello world"
    assert t("as is") == "as is"
    assert t([]) == ""


def test_br() -> None:
    assert br() == "<br/>"
