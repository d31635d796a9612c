"""Tests for Markdown body rendering.

These tests cover :class:`docs_site.generator.MarkdownRenderer`: suppression
of the leading heading, admonition containers, Pygments highlighting with the
language alias table, the escaped fallback for unknown or failing lexers,
raw HTML pass-through, and rewriting of links between documents.

Usage
-----
Run ``pytest tests/test_renderer.py -v``. ``pytest-mock`` provides the
``mocker`` fixture used to force a lexer failure.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from docs_site.generator import MarkdownRenderer

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Return a renderer with the default style and aliases."""
    return MarkdownRenderer()


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_leading_heading_is_suppressed(renderer: MarkdownRenderer) -> None:
    html = renderer.render("# Title\n\nHello")
    assert "<h1" not in html, "leading heading should be removed"
    assert html == "<p>Hello</p>"


def test_only_first_heading_is_suppressed(renderer: MarkdownRenderer) -> None:
    html = renderer.render("# First\n\nBody\n\n# Second\n")
    assert "First" not in html
    assert "<h1>Second</h1>" in html


def test_lower_level_leading_heading_is_kept(renderer: MarkdownRenderer) -> None:
    assert "<h2>Sub</h2>" in renderer.render("## Sub\n\ntext")


def test_empty_body_renders_empty(renderer: MarkdownRenderer) -> None:
    assert renderer.render("") == ""
    assert renderer.render("# Only a title\n") == ""


@pytest.mark.parametrize("directive", ["Note", "Warning", "Tip"])
def test_admonition_container(renderer: MarkdownRenderer, directive: str) -> None:
    html = renderer.render(f"::: {directive}\nBe careful.\n:::")
    css = f"alert alert-{directive.lower()}"
    assert f'<div class="{css}">' in html
    container = _soup(html).find("div", class_=f"alert-{directive.lower()}")
    assert container is not None
    assert container.p is not None
    assert container.p.get_text() == "Be careful."


def test_admonition_accepts_parameter_text(renderer: MarkdownRenderer) -> None:
    html = renderer.render("::: Warning Heads up\nMind the gap.\n:::")
    assert '<div class="alert alert-warning">' in html
    assert "Mind the gap." in html


def test_admonition_spans_several_blocks(renderer: MarkdownRenderer) -> None:
    html = renderer.render("::: Note\n\nfirst\n\nsecond\n\n:::\n\nafter")
    soup = _soup(html)
    container = soup.find("div", class_="alert-note")
    assert container is not None
    assert [p.get_text() for p in container.find_all("p")] == ["first", "second"]
    outside = [p.get_text() for p in soup.find_all("p", recursive=False)]
    assert outside == ["after"]


def test_content_after_closing_marker_stays_outside(renderer: MarkdownRenderer) -> None:
    soup = _soup(renderer.render("::: Tip\ninside\n:::\nafter"))
    container = soup.find("div", class_="alert-tip")
    assert container is not None
    assert container.get_text(strip=True) == "inside"
    assert soup.find_all("p", recursive=False)[-1].get_text() == "after"


@pytest.mark.parametrize(
    "markdown",
    ["::: Notes\ntext\n:::", "::: Danger\ntext\n:::", "::: note\ntext\n:::"],
)
def test_unknown_directive_renders_literally(
    renderer: MarkdownRenderer, markdown: str
) -> None:
    html = renderer.render(markdown)
    assert "alert" not in html
    assert ":::" in html


def test_unclosed_container_renders_literally(renderer: MarkdownRenderer) -> None:
    html = renderer.render("::: Tip\ntext")
    assert "alert" not in html
    assert "::: Tip" in html


def test_code_inside_admonition_is_highlighted(renderer: MarkdownRenderer) -> None:
    html = renderer.render("::: Note\n\n```python\nprint('hi')\n```\n\n:::")
    container = _soup(html).find("div", class_="alert-note")
    assert container is not None
    assert container.find("code", class_="language-python") is not None


def test_fenced_code_is_highlighted(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```python\nprint('hi')\n```")
    soup = _soup(html)
    pre = soup.find("pre", class_="hljs")
    assert pre is not None
    code = pre.find("code", class_="language-python")
    assert code is not None
    assert code.find("span") is not None, "expected Pygments token spans"


def test_alias_resolves_lexer_but_keeps_tag(renderer: MarkdownRenderer) -> None:
    """``sh`` highlights with the bash lexer and keeps its own class name."""
    html = renderer.render("```sh\necho hi\n```")
    code = _soup(html).find("code", class_="language-sh")
    assert code is not None
    assert code.find("span") is not None
    assert "language-bash" not in html


def test_configured_alias_extends_table() -> None:
    renderer = MarkdownRenderer(language_aliases={"py3": "python"})
    code = _soup(renderer.render("```py3\nx = 1\n```")).find("code", class_="language-py3")
    assert code is not None
    assert code.find("span") is not None


def test_unknown_language_is_escaped(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```nosuchlang\n<b>x</b>\n```")
    assert "&lt;b&gt;x&lt;/b&gt;" in html
    assert "<b>" not in html
    code = _soup(html).find("code", class_="language-nosuchlang")
    assert code is not None
    assert code.find("span") is None


def test_untagged_fence_uses_bare_code(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```\na < b\n```")
    assert '<pre class="hljs"><code>a &lt; b\n</code></pre>' in html


def test_lexer_failure_falls_back_to_escaped_text(
    renderer: MarkdownRenderer, mocker: MockerFixture
) -> None:
    mocker.patch(
        "docs_site.generator.highlighting.highlight",
        side_effect=RuntimeError("lexer exploded"),
    )
    html = renderer.render("```python\nif a < b: pass\n```")
    code = _soup(html).find("code", class_="language-python")
    assert code is not None
    assert code.get_text() == "if a < b: pass\n"
    assert "a &lt; b" in html


def test_indented_fence_in_list_is_highlighted(renderer: MarkdownRenderer) -> None:
    html = renderer.render(
        "- **Example** shows a fence\n\n"
        "  ```rust,no_run\n"
        '  fn main() { println!("hi"); }\n'
        "  ```\n"
    )
    code = _soup(html).find("code", class_="language-rust")
    assert code is not None
    assert code.get_text().startswith("fn main()")


def test_raw_inline_html_passes_through(renderer: MarkdownRenderer) -> None:
    html = renderer.render("Press <kbd>Ctrl</kbd> then <slot/> here.")
    assert "<kbd>Ctrl</kbd>" in html
    assert "<slot/>" in html


def test_bare_urls_and_mentions_are_not_linked(renderer: MarkdownRenderer) -> None:
    html = renderer.render("Ping @someone or visit example.com today.")
    assert "<a" not in html


def test_relative_doc_links_are_rewritten(renderer: MarkdownRenderer) -> None:
    html = renderer.render(
        "[Install](./start-install.md#step) and "
        "[Reference](../api/api-quick-reference.md) and "
        "[Site](https://example.com/page.md)",
        slug="docs/core-intro",
    )
    hrefs = [anchor["href"] for anchor in _soup(html).find_all("a")]
    assert hrefs == [
        "/docs/docs/start-install#step",
        "/docs/api/api-quick-reference",
        "https://example.com/page.md",
    ]


def test_links_untouched_without_slug(renderer: MarkdownRenderer) -> None:
    html = renderer.render("[Install](./start-install.md)")
    assert 'href="./start-install.md"' in html


def test_rendering_is_deterministic(renderer: MarkdownRenderer) -> None:
    body = "# T\n\n::: Note\nA\n:::\n\n```ts\nconst a = 1;\n```\n"
    assert renderer.render(body) == renderer.render(body)


def test_stylesheet_targets_wrapper_class(renderer: MarkdownRenderer) -> None:
    assert ".hljs" in renderer.stylesheet


def test_code_block_helper(renderer: MarkdownRenderer) -> None:
    assert renderer.code_block("x", None) == '<pre class="hljs"><code>x</code></pre>'


def test_admonition_can_follow_paragraph_line(renderer: MarkdownRenderer) -> None:
    """An opener directly under a paragraph line still starts a container."""
    soup = _soup(renderer.render("Intro line\n::: Note\ninside\n:::"))
    paragraphs = soup.find_all("p", recursive=False)
    assert [p.get_text() for p in paragraphs] == ["Intro line"]
    container = soup.find("div", class_="alert-note")
    assert container is not None, "expected a note container after the paragraph"
    assert container.get_text(strip=True) == "inside"
    assert ":::" not in soup.get_text()


def test_nested_admonitions(renderer: MarkdownRenderer) -> None:
    """An inner container's closing line does not close the outer one."""
    html = renderer.render(
        "::: Note\nouter\n\n::: Tip\ninner\n:::\n\nstill outer\n\n:::\n\nafter"
    )
    soup = _soup(html)
    note = soup.find("div", class_="alert-note")
    assert note is not None
    tip = note.find("div", class_="alert-tip")
    assert tip is not None, "expected the tip inside the note"
    assert tip.get_text(strip=True) == "inner"
    assert [p.get_text() for p in note.find_all("p", recursive=False)] == [
        "outer",
        "still outer",
    ]
    assert [p.get_text() for p in soup.find_all("p", recursive=False)] == ["after"]
    assert ":::" not in soup.get_text()


def test_longer_closing_fence(renderer: MarkdownRenderer) -> None:
    html = renderer.render("````python\nx\n`````\n")
    code = _soup(html).find("code", class_="language-python")
    assert code is not None, "a longer closing run should still close the fence"
    assert code.get_text() == "x\n"
    assert "`" not in html


def test_shorter_run_does_not_close_fence(renderer: MarkdownRenderer) -> None:
    html = renderer.render("````text\n```\nstill code\n````\n")
    code = _soup(html).find("code", class_="language-text")
    assert code is not None
    assert code.get_text() == "```\nstill code\n"


def test_four_space_indented_fence_in_list(renderer: MarkdownRenderer) -> None:
    html = renderer.render("- item\n\n    ```python\n    x = 1\n    ```\n")
    code = _soup(html).find("code", class_="language-python")
    assert code is not None, "expected the list fence to be highlighted"
    assert code.get_text() == "x = 1\n"


def test_unclosed_fence_runs_to_end(renderer: MarkdownRenderer) -> None:
    html = renderer.render("Before\n\n```python\nx = 1")
    soup = _soup(html)
    assert soup.p is not None
    assert soup.p.get_text() == "Before"
    code = soup.find("code", class_="language-python")
    assert code is not None, "an unclosed fence should render as code"
    assert code.get_text() == "x = 1\n"
    assert "```" not in html


def test_backticks_in_info_string_are_not_a_fence(renderer: MarkdownRenderer) -> None:
    html = renderer.render("```inline``` text\n\nNext paragraph.")
    assert "hljs" not in html
    assert "<p>Next paragraph.</p>" in html
