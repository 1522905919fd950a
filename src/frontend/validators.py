"""Validation and formatting helpers for the settings editor."""

from __future__ import annotations

from typing import Optional

from core.models import Decision, DecisionKind, Settings
from core.patterns import directive_errors, find_invalid_directives

MAX_LISTED_DIRECTIVES = 5


def describe_invalid_directives(filter_patterns: str) -> str:
    """Summarize lines that will be ignored and why, or "" when every line compiles."""

    errors = directive_errors(filter_patterns)
    if not errors:
        return ""
    listed = errors[:MAX_LISTED_DIRECTIVES]
    lines = [f"{len(errors)} line(s) ignored:"]
    lines.extend(f"- {directive} ({reason})" for directive, reason in listed)
    if len(errors) > len(listed):
        lines.append(f"... and {len(errors) - len(listed)} more")
    return "\n".join(lines)


def describe_decision(decision: Decision) -> str:
    if decision.kind is DecisionKind.HIDE:
        return f"Hidden: {decision.reason}"
    if decision.kind is DecisionKind.SHOW:
        return f"Allowed: {decision.reason}"
    return "No decision (entry left untouched)"


def describe_pending_save(settings: Optional[Settings], target: str, action: str) -> str:
    """Body text for the prompt shown before `action` discards unsaved settings."""

    text = f"Save settings to {target} before {action}?"
    if settings is None:
        return text
    ignored = len(find_invalid_directives(settings.filter_patterns))
    if ignored:
        text += f"\n{ignored} pattern line(s) will be ignored."
    return text


def describe_pending_reload(target: str) -> str:
    return f"Unsaved changes will be lost; settings are re-read from {target}."
