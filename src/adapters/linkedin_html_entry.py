"""LinkedIn feed HTML adapter.

Wraps BeautifulSoup elements of a saved feed page so the core only sees the
SocialMediaEntry / FeedEntry ports. Selectors mirror LinkedIn's feed markup.
"""

from __future__ import annotations

from typing import List, Optional

from bs4 import BeautifulSoup, Tag

ENTRY_SELECTOR = '[role="article"],.news-module__storyline'
NEWS_CLASS = "news-module__storyline"
POST_TEXT_SELECTOR = ".break-words"
HEADER_SELECTOR = ".update-components-header"
ACTOR_NAME_SELECTOR = (
    ".update-components-actor__meta .update-components-actor__title span.visually-hidden"
)
CONTENT_CREDENTIALS_SELECTOR = "#content-credentials"
PROFILE_LINK_FRAGMENT = "/in/"
SUGGESTED_MARKER = "Suggested"

HIGHLIGHT_COLOR = "#ff00ff"
HIGHLIGHT_BORDER = "border: #f0f 5px solid !important"


def load_page(html: str) -> BeautifulSoup:
    """Parse a saved feed page."""

    return BeautifulSoup(html, "html.parser")


def is_element_post(element: Tag) -> bool:
    return element.get("role") == "article"


def is_element_news(element: Tag) -> bool:
    return NEWS_CLASS in (element.get("class") or [])


def is_element_a_match(element: Tag) -> bool:
    return is_element_post(element) or is_element_news(element)


def query_all_elements(root: Tag) -> List[Tag]:
    return root.select(ENTRY_SELECTOR)


def query_all_entries(root: Tag) -> List["LinkedInHtmlEntry"]:
    return [LinkedInHtmlEntry(element) for element in query_all_elements(root)]


def _all_element_text(element: Tag) -> str:
    # Joining trimmed text nodes keeps words in adjacent inline elements apart.
    parts = [text.strip() for text in element.strings if text.strip()]
    return " ".join(parts)


def _owner_document(element: Tag) -> BeautifulSoup:
    for parent in element.parents:
        if isinstance(parent, BeautifulSoup):
            return parent
    return BeautifulSoup("", "html.parser")


class LinkedInHtmlEntry:
    """One feed post or news item backed by an HTML element."""

    def __init__(self, element: Tag) -> None:
        self._element = element

    @property
    def element(self) -> Tag:
        return self._element

    def contains_content_credentials(self) -> bool:
        return bool(self._element.select(CONTENT_CREDENTIALS_SELECTOR))

    def is_suggested(self) -> bool:
        return any(
            SUGGESTED_MARKER in header.get_text()
            for header in self._element.select(HEADER_SELECTOR)
        )

    def get_text(self) -> str:
        if is_element_news(self._element):
            return self._element.get_text()
        if is_element_post(self._element):
            # Includes the text of reposted content.
            return "".join(
                "\n" + _all_element_text(part)
                for part in self._element.select(POST_TEXT_SELECTOR)
            )
        return ""

    def get_posted_by_name(self) -> Optional[str]:
        if not is_element_post(self._element):
            return None
        name = self._element.select_one(ACTOR_NAME_SELECTOR)
        if name is None:
            return None
        return name.get_text().strip()

    def get_update_reason(self) -> Optional[str]:
        if not is_element_post(self._element):
            return None
        text = "".join(header.get_text().strip() for header in self._element.select(HEADER_SELECTOR))
        return text or None

    def get_reacted_by_name(self) -> Optional[str]:
        if not is_element_post(self._element):
            return None
        # The first profile link with text in the header is the reactor.
        for link in self._element.select(f"{HEADER_SELECTOR} a"):
            text = link.get_text().strip()
            if text and PROFILE_LINK_FRAGMENT in (link.get("href") or ""):
                return text
        return None

    def hide(self) -> None:
        self._element.decompose()

    def highlight(self, reason: Optional[str]) -> None:
        document = _owner_document(self._element)
        banner = document.new_tag("div")
        banner.string = f"Matched: {reason}" if reason else "Matched"
        banner["style"] = f"background-color: {HIGHLIGHT_COLOR}; text-align: center"
        self._element.insert(0, banner)

        style = (self._element.get("style") or "").strip().rstrip(";")
        self._element["style"] = f"{style}; {HIGHLIGHT_BORDER}" if style else HIGHLIGHT_BORDER
        self._element["data-filtered"] = "true"

    def is_filtered(self) -> bool:
        return self._element.get("data-filtered") == "true"
