"""Tests for Markdown rendering and HTML sanitization of page content."""

from __future__ import annotations

from bs4 import BeautifulSoup

from ssg_pages.generator.renderer import HtmlContentRenderer, normalize_fences
from ssg_pages.generator.sanitizer import HtmlSanitizer

MARKDOWN = """# Getting started

Term
:   Definition

  ```python title="demo.py"
print("hi")
```

~~~
plain text
~~~
"""

NESTED_FENCE = '~~~markdown\n```python title="demo.py"\nprint(1)\n```\n~~~\n'


def _code_blocks(markdown: str) -> list:
    soup = BeautifulSoup(HtmlContentRenderer().render(markdown), "html.parser")
    return soup.find_all("div", class_="codehilite")


def test_normalize_fences_strips_indent_and_info() -> None:
    """Indented openers lose their indent and any text after the language."""
    assert normalize_fences('  ```python title="x"\nprint(1)\n```') == (
        "```python\nprint(1)\n```"
    ), "expected a bare language fence"


def test_normalize_fences_strips_rustdoc_labels() -> None:
    """Comma-separated labels after the language are dropped."""
    assert normalize_fences("```rust,no_run\nfn main() {}\n```\n") == (
        "```rust\nfn main() {}\n```\n"
    ), "expected the rustdoc label to be removed"


def test_normalize_fences_keeps_inline_backtick_lines() -> None:
    """A paragraph opening with triple-backtick code is not a fence."""
    text = "```code``` and the rest of the sentence\n"
    assert normalize_fences(text) == text, "expected the line to be untouched"


def test_render_keeps_text_after_inline_backtick_code() -> None:
    """Inline code at the start of a line keeps the rest of the paragraph."""
    soup = BeautifulSoup(
        HtmlContentRenderer().render("```code``` and the rest of the sentence\n"),
        "html.parser",
    )
    assert soup.code is not None, "expected an inline code span"
    assert soup.code.get_text() == "code", f"unexpected code span {soup.code!r}"
    assert "and the rest of the sentence" in soup.get_text(), (
        "expected the sentence to survive rendering"
    )


def test_normalize_fences_leaves_nested_fences_alone() -> None:
    """Fence-like lines inside an open block are sample content."""
    assert normalize_fences(NESTED_FENCE) == NESTED_FENCE, (
        "expected the inner fence to be kept verbatim"
    )


def test_render_keeps_fence_sample_inside_block() -> None:
    """A Markdown sample showing a fenced block renders verbatim."""
    blocks = _code_blocks(NESTED_FENCE)
    assert len(blocks) == 1, f"expected one outer block, got {len(blocks)}"
    assert blocks[0].get("data-language") == "markdown", "expected outer language"
    assert '```python title="demo.py"' in blocks[0].get_text(), (
        "expected the inner info string to be preserved"
    )


def test_indented_block_is_tagged_as_text() -> None:
    """Indented code blocks do not borrow the next fence's language."""
    blocks = _code_blocks("Intro\n\n    indented = True\n\n```python\nprint(1)\n```\n")
    assert [block.get("data-language") for block in blocks] == ["text", "python"], (
        "expected each block to carry its own language"
    )


def test_render_tags_highlighted_blocks() -> None:
    """Code blocks are highlighted and labelled with their language."""
    soup = BeautifulSoup(HtmlContentRenderer().render(MARKDOWN), "html.parser")
    blocks = soup.find_all("div", class_="codehilite")
    assert [block.get("data-language") for block in blocks] == ["python", "text"], (
        "expected one labelled block per fence"
    )
    assert soup.find("h1")["id"] == "getting-started", "expected a toc heading id"
    assert soup.find("dl") is not None, "expected a definition list"


def test_render_blank_input() -> None:
    """Whitespace-only documents render to an empty fragment."""
    assert HtmlContentRenderer().render("\n  \n") == "", "expected empty output"


def test_stylesheet_uses_configured_style() -> None:
    """The Pygments CSS is scoped to codehilite blocks."""
    css = HtmlContentRenderer("friendly").stylesheet
    assert ".codehilite" in css, "expected codehilite-scoped rules"


def test_sanitizer_drops_scripts_and_handlers() -> None:
    """Script elements and event handler attributes are removed."""
    cleaned = HtmlSanitizer().sanitize('<p onclick="steal()">hi</p><script>bad()</script>')
    assert cleaned == "<p>hi</p>", f"unexpected sanitized output {cleaned!r}"


def test_sanitizer_keeps_ids_classes_and_links() -> None:
    """Heading ids, highlight markup, and local hrefs survive."""
    html = (
        '<h2 id="setup">Setup</h2>'
        '<div class="codehilite" data-language="python"><pre>x</pre></div>'
        '<a href="guide.md">guide</a>'
    )
    soup = BeautifulSoup(HtmlSanitizer().sanitize(html), "html.parser")
    assert soup.h2["id"] == "setup", "expected heading id kept"
    assert soup.div.get("data-language") == "python", "expected language kept"
    assert soup.a["href"] == "guide.md", "expected href kept"


def test_sanitizer_empty_input() -> None:
    """Empty input stays empty."""
    assert HtmlSanitizer().sanitize("") == "", "expected empty output"
