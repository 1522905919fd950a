"""Shared constants for the Textual UI."""

from __future__ import annotations

LINKEDIN_BLUE = "#0A66C2"
