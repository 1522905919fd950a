from __future__ import annotations

import pytest

from adapters.text_entry import TextEntry
from core.evaluator import INCONCLUSIVE, EvalResult, Outcome, evaluate, normalize_text
from core.patterns import BlockPattern, compile_pattern_text


class CountingEntry:
    """Entry that records how often the text was read."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.reads = 0

    def get_text(self) -> str:
        self.reads += 1
        return self.text

    def get_reacted_by_name(self) -> None:
        return None

    def is_suggested(self) -> bool:
        return False

    def contains_content_credentials(self) -> bool:
        return False


def test_regex_match_reason() -> None:
    result = evaluate(compile_pattern_text("/sp[ae]m/"), TextEntry("This is spem"))

    assert result == EvalResult(Outcome.MATCH, "Matches pattern: /sp[ae]m/")


def test_no_match_is_inconclusive() -> None:
    assert evaluate(compile_pattern_text("spam"), TextEntry("legit")) == INCONCLUSIVE


def test_allow_inverts_and_passes_inconclusive_through() -> None:
    root = compile_pattern_text("!important")

    assert evaluate(root, TextEntry("this is important")) == EvalResult(
        Outcome.UNMATCH, "Matches pattern: important"
    )
    assert evaluate(root, TextEntry("no relation")) == INCONCLUSIVE


def test_first_decisive_result_wins() -> None:
    root = compile_pattern_text("spam\n!spam")

    assert evaluate(root, TextEntry("spam")).outcome is Outcome.MATCH


def test_later_directives_are_not_evaluated_after_a_decision() -> None:
    root = compile_pattern_text("first\nsecond\nthird")
    entry = CountingEntry("first")

    evaluate(root, entry)

    assert entry.reads == 1


def test_reacted_by_name() -> None:
    root = compile_pattern_text("$react John")

    assert evaluate(root, TextEntry("x", reacted_by_name="John Doe")) == EvalResult(
        Outcome.MATCH, "Reacted by user: John"
    )
    assert evaluate(root, TextEntry("John", reacted_by_name="Mary Sue")) == INCONCLUSIVE
    assert evaluate(root, TextEntry("John")) == INCONCLUSIVE


def test_reacted_by_name_is_not_quote_normalized() -> None:
    root = compile_pattern_text("$react O'Brien")

    assert evaluate(root, TextEntry("x", reacted_by_name="O\u2019Brien")) == INCONCLUSIVE


def test_curly_quotes_match_straight_quotes() -> None:
    root = compile_pattern_text("don't\n\"quoted\"")

    assert evaluate(root, TextEntry("don\u2018t do this")).outcome is Outcome.MATCH
    assert evaluate(root, TextEntry("don\u2019t do this")).outcome is Outcome.MATCH
    assert evaluate(root, TextEntry("This is \u201cquoted\u201d text")).outcome is Outcome.MATCH


def test_nested_directives_follow_document_order() -> None:
    root = compile_pattern_text("!keep\n  hide\nother")

    assert evaluate(root, TextEntry("keep hide")).outcome is Outcome.UNMATCH
    assert evaluate(root, TextEntry("hide")).outcome is Outcome.MATCH
    assert evaluate(root, TextEntry("other")).outcome is Outcome.MATCH


def test_empty_block_is_inconclusive() -> None:
    assert evaluate(BlockPattern(), TextEntry("anything")) == INCONCLUSIVE


def test_unknown_node_is_an_error() -> None:
    with pytest.raises(AssertionError):
        evaluate("not a pattern", TextEntry("x"))  # type: ignore[arg-type]


def test_normalize_text() -> None:
    assert normalize_text("\u2018a\u2019 \u201cb\u201d") == "'a' \"b\""
