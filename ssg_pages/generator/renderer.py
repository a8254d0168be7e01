"""Render Markdown documents into HTML fragments with highlighted code.

``HtmlContentRenderer`` wraps a single Python-Markdown instance configured
with the extension set site pages rely on: fenced and highlighted code,
tables, footnotes, definition lists, abbreviations, attribute lists, and
heading ids from ``toc``. Every highlighted block, fenced or indented, is
tagged with a ``data-language`` attribute so themes can label it.

Examples
--------
>>> renderer = HtmlContentRenderer()
>>> renderer.render("# Title")
'<h1 id="title">Title</h1>'
>>> renderer.render("   ")
''
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CODEHILITE_CLASS = "codehilite"
LANG_PREFIX = "language-"
FENCE_LINE_PATTERN = re.compile(r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
FENCE_INFO_PATTERN = re.compile(r"^[ \t]*(?P<lang>[A-Za-z0-9_+#.-]*)(?P<extra>.*)$")

MARKDOWN_EXTENSIONS = (
    "fenced_code",
    "codehilite",
    "tables",
    "footnotes",
    "def_list",
    "abbr",
    "attr_list",
    "sane_lists",
    "toc",
)


class LanguageTaggedHtmlFormatter(HtmlFormatter):
    """Pygments HTML formatter that records the block language on its ``div``.

    Python-Markdown's ``codehilite`` passes ``lang_str`` (``language-<name>``)
    to a formatter class given as ``pygments_formatter``. Indented blocks
    arrive as ``text`` because language guessing is disabled.
    """

    def __init__(self, **options: typ.Any) -> None:
        lang_str = options.pop("lang_str", None) or ""
        super().__init__(**options)
        self.language = lang_str.removeprefix(LANG_PREFIX) or "text"

    def _wrap_div(
        self, inner: cabc.Iterable[tuple[int, str]]
    ) -> cabc.Iterator[tuple[int, str]]:
        css_class = escape(self.cssclass, quote=True)
        language = escape(self.language, quote=True)
        yield 0, f'<div class="{css_class}" data-language="{language}">'
        yield from inner
        yield 0, "</div>\n"


class HtmlContentRenderer:
    """Render Markdown with the full extension set and consistent styling."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize the Markdown converter for ``pygments_style``.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass=CODEHILITE_CLASS)
        self._md = Markdown(
            extensions=list(MARKDOWN_EXTENSIONS),
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": CODEHILITE_CLASS,
                    "lang_prefix": LANG_PREFIX,
                    "pygments_style": pygments_style,
                    "pygments_formatter": LanguageTaggedHtmlFormatter,
                },
                "toc": {"permalink": False},
            },
        )

    @property
    def stylesheet(self) -> str:
        """Return the CSS rules for highlighted code blocks."""
        return self._formatter.get_style_defs(f".{CODEHILITE_CLASS}")

    def render(self, text: str) -> str:
        """Convert ``text`` to an HTML fragment; blank input yields ``""``."""
        normalized = normalize_fences(text)
        if not normalized.strip():
            return ""
        return self._md.reset().convert(normalized)


def normalize_fences(text: str) -> str:
    """Outdent fence lines and drop trailing info after the language name.

    Python-Markdown only recognises unindented fences whose info string is a
    bare language, so ``  ```python title="x"`` becomes ``````python`` and
    ``````rust,no_run`` becomes ``````rust``. Lines inside an open block are
    left alone, as are backtick lines whose info contains a backtick (inline
    code, not a fence) and info strings that do not start with a language.
    """
    lines = text.splitlines(keepends=True)
    closing: str | None = None
    for index, line in enumerate(lines):
        body = line.rstrip("\r\n")
        match = FENCE_LINE_PATTERN.match(body)
        if match is None:
            continue
        fence, info = match["fence"], match["info"]
        ending = line[len(body) :]
        if closing is not None:
            if fence == closing and not info.strip():
                lines[index] = f"{fence}{ending}"
                closing = None
            continue
        if fence.startswith("`") and "`" in info:
            continue
        closing = fence
        info_match = FENCE_INFO_PATTERN.match(info)
        language, extra = (info_match["lang"], info_match["extra"]) if info_match else ("", info)
        if extra and not extra[0].isspace() and not extra.startswith(","):
            continue
        lines[index] = f"{fence}{language}{ending}"
    return "".join(lines)


__all__ = [
    "MARKDOWN_EXTENSIONS",
    "HtmlContentRenderer",
    "LanguageTaggedHtmlFormatter",
    "normalize_fences",
]
