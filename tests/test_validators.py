from __future__ import annotations

from core.models import NO_DECISION, Decision, DecisionKind, Settings
from frontend.validators import (
    describe_decision,
    describe_invalid_directives,
    describe_pending_reload,
    describe_pending_save,
)


def test_valid_patterns_have_no_description() -> None:
    assert describe_invalid_directives("spam\n/Top [0-9]+/i ; comment\n!keep") == ""


def test_ignored_lines_are_listed_with_their_reason() -> None:
    text = "spam\n!\n  /ok/q ; bad flag\n/([a-z]/"

    summary = describe_invalid_directives(text).splitlines()

    assert summary[0] == "3 line(s) ignored:"
    assert summary[1] == "- ! (empty directive)"
    assert summary[2] == "- /ok/q (unsupported regex flag 'q')"
    assert summary[3].startswith("- /([a-z]/ (invalid regex: ")


def test_long_lists_are_truncated() -> None:
    text = "\n".join(f"/({index}/" for index in range(7))

    summary = describe_invalid_directives(text).splitlines()

    assert summary[0] == "7 line(s) ignored:"
    assert len(summary) == 7
    assert summary[-1] == "... and 2 more"


def test_describe_decision() -> None:
    assert describe_decision(Decision(DecisionKind.HIDE, "Post is suggested")) == "Hidden: Post is suggested"
    assert describe_decision(Decision(DecisionKind.SHOW, "Matches pattern: ok")) == "Allowed: Matches pattern: ok"
    assert describe_decision(NO_DECISION) == "No decision (entry left untouched)"


def test_pending_save_mentions_target_and_ignored_lines() -> None:
    clean = Settings(filter_patterns="spam")
    broken = Settings(filter_patterns="spam\n/([a-z]/\n!")

    assert describe_pending_save(clean, "filter_settings.json", "exit") == (
        "Save settings to filter_settings.json before exit?"
    )
    assert describe_pending_save(broken, "filter_settings.json", "exit") == (
        "Save settings to filter_settings.json before exit?\n2 pattern line(s) will be ignored."
    )
    assert describe_pending_save(None, "custom", "exit") == "Save settings to custom before exit?"


def test_pending_reload_mentions_target() -> None:
    assert describe_pending_reload("filter_settings.json") == (
        "Unsaved changes will be lost; settings are re-read from filter_settings.json."
    )
