"""Strip unsafe markup from rendered Markdown before it reaches a page."""

from __future__ import annotations

import nh3

GENERIC_ATTRIBUTES = frozenset({"id", "class", "lang", "title"})
EXTRA_TAG_ATTRIBUTES: dict[str, frozenset[str]] = {
    "div": frozenset({"data-language"}),
}


def _allowed_attributes() -> dict[str, set[str]]:
    """Return nh3's default allowlist widened for heading anchors and highlighting.

    ``id`` survives so same-document links can target the heading ids emitted
    by the ``toc`` extension; ``class`` and ``data-language`` keep Pygments
    markup styleable.
    """
    attributes = {tag: set(names) for tag, names in nh3.ALLOWED_ATTRIBUTES.items()}
    attributes["*"] = set(attributes.get("*", set())) | GENERIC_ATTRIBUTES
    for tag, names in EXTRA_TAG_ATTRIBUTES.items():
        attributes[tag] = attributes.get(tag, set()) | names
    return attributes


class HtmlSanitizer:
    """Thin wrapper around :func:`nh3.clean` with the site's allowlist."""

    def __init__(self) -> None:
        self._attributes = _allowed_attributes()

    def sanitize(self, html: str) -> str:
        """Return ``html`` reduced to the allowed tags and attributes."""
        if not html:
            return ""
        return nh3.clean(html, attributes=self._attributes)


__all__ = ["GENERIC_ATTRIBUTES", "HtmlSanitizer"]
