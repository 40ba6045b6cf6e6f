"""Tests for tree-to-text rendering."""

import pytest
from bs4 import BeautifulSoup

from linguainrete.exceptions import MalformedDocumentError
from linguainrete.renderer import NodeKind, classify, render, render_text
from linguainrete.text_stream import BOLD_OFF, BOLD_ON, ITALIC_OFF, ITALIC_ON, Style


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def test_text_without_emphasis_has_no_markers():
    soup = _soup('<div><span>uno</span> <a href="/x">due</a><br>tre</div>')
    stream = render(soup.div)
    assert stream.markers == []
    assert "\x1b" not in stream.flatten()
    assert stream.flatten() == "uno due\ntre"


def test_bold_and_italic_markers():
    soup = _soup("<p><strong>parola</strong> s. f. <em>fig.</em></p>")
    assert render_text(soup.p) == f"{BOLD_ON}parola{BOLD_OFF} s. f. {ITALIC_ON}fig.{ITALIC_OFF}\n"


def test_b_and_i_are_emphasis_too():
    soup = _soup("<span><b>x</b><i>y</i></span>")
    assert render_text(soup.span) == f"{BOLD_ON}x{BOLD_OFF}{ITALIC_ON}y{ITALIC_OFF}"


def test_superscript_content_is_dropped():
    soup = _soup("<p>abc<sup>1 <strong>nota</strong></sup>def</p>")
    stream = render(soup.p)
    assert stream.flatten() == "abcdef\n"
    assert stream.markers == []


def test_link_keeps_visible_text_only():
    soup = _soup('<a href="https://www.treccani.it/vocabolario/casa">casa</a>')
    assert render_text(soup.a) == "casa"


def test_paragraph_and_line_break_terminators():
    soup = _soup("<div><p>uno<br>due</p><p>tre</p></div>")
    assert render_text(soup.div) == "uno\ndue\ntre\n"


def test_entities_are_decoded_once():
    soup = _soup("<p>R&amp;amp;D, fish&amp;notes, caff&egrave;</p>")
    assert render(soup.p).plain_text() == "R&amp;D, fish&notes, caffè\n"


def test_escaped_markup_stays_literal():
    soup = _soup("<p>tag &amp;lt;b&amp;gt; &lt;i&gt;</p>")
    assert render_text(soup.p) == "tag &lt;b&gt; <i>\n"


@pytest.mark.parametrize("node", [None, 42, "<p>testo</p>"])
def test_render_rejects_non_nodes(node):
    with pytest.raises(MalformedDocumentError):
        render(node)


def test_comment_only_input_renders_empty():
    soup = _soup("<!-- solo commento -->")
    comment = soup.contents[0]
    assert classify(comment) is NodeKind.IGNORED
    assert render(comment).tokens == []


def test_comments_are_ignored():
    soup = _soup("<p>a<!-- nascosto -->b</p>")
    assert render_text(soup.p) == "ab\n"


def test_unknown_tags_are_transparent():
    soup = _soup("<section><article><mark>testo</mark></article></section>")
    assert render_text(soup.section) == "testo"


def test_nested_emphasis_is_balanced():
    soup = _soup("<p><strong>a<em>b<strong></strong></em>c</strong></p>")
    text = render_text(soup.p)
    assert text.count(BOLD_ON) == text.count(BOLD_OFF) == 2
    assert text.count(ITALIC_ON) == text.count(ITALIC_OFF) == 1
    assert text.index(ITALIC_ON) < text.index(ITALIC_OFF) < text.rindex(BOLD_OFF)


def test_source_order_is_preserved():
    soup = _soup("<div>uno <em>due</em> tre <strong>quattro</strong> cinque</div>")
    stream = render(soup.div)
    assert stream.plain_text() == "uno due tre quattro cinque"
    assert [run.style for run in stream.runs] == [
        Style.PLAIN, Style.ITALIC, Style.PLAIN, Style.BOLD, Style.PLAIN,
    ]


def test_classify_node_kinds():
    soup = _soup("<div><strong>a</strong><sup>1</sup><span>b</span><table></table>c</div>")
    kinds = [classify(child) for child in soup.div.children]
    assert kinds == [
        NodeKind.BOLD,
        NodeKind.SUPERSCRIPT,
        NodeKind.GENERIC,
        NodeKind.GENERIC,
        NodeKind.TEXT,
    ]
