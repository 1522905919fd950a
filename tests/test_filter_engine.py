from __future__ import annotations

from adapters.text_entry import TextEntry
from core.filter_engine import CompiledPatternCache, FilterEngine
from core.models import Decision, DecisionKind, Settings


def _engine(patterns: str = "", **flags: bool) -> FilterEngine:
    return FilterEngine(Settings(filter_patterns=patterns, **flags))


def test_empty_or_comment_only_patterns_decide_nothing() -> None:
    for patterns in ("", "; one\n\n; two\n"):
        decision = _engine(patterns).decide(TextEntry("any content"))
        assert decision == Decision(DecisionKind.NOTHING)


def test_match_hides_with_reason() -> None:
    decision = _engine("spam\nadvertisement").decide(TextEntry("Check out this advertisement"))

    assert decision == Decision(DecisionKind.HIDE, "Matches pattern: advertisement")
    assert decision.hidden


def test_first_match_wins() -> None:
    assert _engine("spam\n!spam").decide(TextEntry("This is spam")).hidden


def test_allow_shows_and_inconclusive_falls_through() -> None:
    engine = _engine("!important")

    shown = engine.decide(TextEntry("this is important"))
    assert shown == Decision(DecisionKind.SHOW, "Matches pattern: important")
    assert shown.shown
    assert engine.decide(TextEntry("no relation")).kind is DecisionKind.NOTHING


def test_allow_before_deny() -> None:
    engine = _engine("!important\nspam")

    assert engine.should_hide(TextEntry("This is spam"))
    assert not engine.should_hide(TextEntry("This is important spam"))


def test_flags_apply_only_when_patterns_are_inconclusive() -> None:
    engine = _engine("!allowed", hide_suggested=True)

    assert engine.decide(TextEntry("this is allowed content", suggested=True)).kind is DecisionKind.SHOW
    assert engine.decide(TextEntry("other content", suggested=True)) == Decision(
        DecisionKind.HIDE, "Post is suggested"
    )


def test_content_credentials_checked_before_suggested() -> None:
    engine = _engine(hide_suggested=True, hide_content_credentials=True)
    entry = TextEntry("normal", suggested=True, content_credentials=True)

    assert engine.decide(entry) == Decision(DecisionKind.HIDE, "Post contains content credentials")


def test_flags_off_leave_entries_alone() -> None:
    entry = TextEntry("normal", suggested=True, content_credentials=True)

    assert _engine().decide(entry).kind is DecisionKind.NOTHING


def test_react_scoping() -> None:
    engine = _engine("!$react John\nspam")

    assert engine.decide(TextEntry("spam", reacted_by_name="John Doe")).kind is DecisionKind.SHOW
    assert engine.decide(TextEntry("spam", reacted_by_name="Mary Sue")).kind is DecisionKind.HIDE


def test_regex_with_emoji_text() -> None:
    assert _engine("/emoji/").should_hide(TextEntry("Check out this emoji 😀"))


def test_property_escapes_and_named_groups_hide() -> None:
    engine = _engine(r"/\p{Lu}{3}/" + "\n" + "/(?<w>spam)/")

    assert engine.decide(TextEntry("ABC news")) == Decision(DecisionKind.HIDE, r"Matches pattern: /\p{Lu}{3}/")
    assert engine.decide(TextEntry("spam")) == Decision(DecisionKind.HIDE, "Matches pattern: /(?<w>spam)/")
    assert engine.decide(TextEntry("Abc eggs")).kind is DecisionKind.NOTHING


def test_invalid_regex_never_matches() -> None:
    assert _engine("/[invalid/").decide(TextEntry("some text")).kind is DecisionKind.NOTHING


def test_cache_recompiles_only_when_text_changes() -> None:
    cache = CompiledPatternCache()

    first = cache.get("spam")
    assert cache.get("spam") is first
    assert cache.get("eggs") is not first


def test_update_settings_switches_patterns() -> None:
    engine = _engine("spam")
    entry = TextEntry("spam and eggs")
    assert engine.should_hide(entry)

    engine.update_settings(Settings(filter_patterns="!eggs"))

    assert engine.decide(entry).kind is DecisionKind.SHOW


def test_compiling_twice_gives_same_decisions() -> None:
    entry = TextEntry("important spam", reacted_by_name="Jane")
    patterns = "$react Bob\n!important\nspam"

    assert _engine(patterns).decide(entry) == _engine(patterns).decide(entry)
