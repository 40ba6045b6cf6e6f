"""Tests for the stylesheet-leak cleanup pass."""

from linguainrete.sanitizer import sanitize


def test_leaked_style_block_is_removed():
    assert sanitize(".css-1x2y3z{color:#333;font-size:1rem;}parola") == "parola"


def test_several_blocks_keep_text_between():
    text = "prima .css-a{margin:0} mezzo .css-b .x{padding:0} dopo"
    assert sanitize(text) == "prima  mezzo  dopo"


def test_ordinary_text_untouched():
    text = "Il file style.css non c'entra; {parentesi} restano."
    assert sanitize(text) == text


def test_braces_on_other_lines_untouched():
    text = "voce .css-a\n{non uno stile}"
    assert sanitize(text) == text


def test_empty_text():
    assert sanitize("") == ""
