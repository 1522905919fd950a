"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

DEFAULT_SKIP_URL_FRAGMENTS = ("/feed/update/",)


@dataclass(frozen=True)
class HostConfig:
    """Host page settings for the filtering pass."""

    # Pages whose URL contains any of these are left alone (single-post views).
    skip_url_fragments: Tuple[str, ...] = DEFAULT_SKIP_URL_FRAGMENTS
