"""Tests for synonym listing extraction."""

import textwrap

import pytest
from bs4 import BeautifulSoup

from linguainrete.exceptions import MalformedDocumentError
from linguainrete.synonyms import (
    SynonymGroup,
    SynonymLabel,
    capitalize_word,
    extract_groups,
    extract_synonyms,
    split_fallback_text,
    unique_in_order,
)


def _soup(html):
    return BeautifulSoup(textwrap.dedent(html), "html.parser")


def test_capitalize_word():
    assert capitalize_word("lENTO") == "Lento"
    assert capitalize_word("dolce-VITA") == "Dolce-vita"
    assert capitalize_word("") == ""


def test_unique_in_order_is_case_insensitive_and_trims():
    assert unique_in_order(["rapido", " Rapido ", "", "  ", "svelto", "RAPIDO"]) == ["rapido", "svelto"]


def test_group_format():
    group = SynonymGroup(SynonymLabel.ANTONYMS, ["lento", "pigro"])
    assert group.format() == "Contrari: lento, pigro"


def test_heading_synonyms_are_deduplicated_first_seen_wins():
    soup = _soup(
        '''
        <div class="contenuto">
          <h3>Sinonimi di veloce</h3>
          <ul>
            <li><a href="/rapido">rapido</a></li>
            <li><a href="/rapido">Rapido</a></li>
            <li><a href="/svelto">svelto</a></li>
          </ul>
        </div>
        '''
    )
    assert extract_synonyms(soup, "veloce") == "Veloce\nSinonimi: rapido, svelto"


def test_all_three_groups_in_fixed_order():
    soup = _soup(
        '''
        <div class="contenuto">
          <h4>Vedi anche</h4>
          <p><a>fretta</a></p>
          <h3>Contrari</h3>
          <p><a>lento</a>, <a>tardo</a></p>
          <h3>Sinonimo</h3>
          <p><a>rapido</a></p>
        </div>
        '''
    )
    assert extract_synonyms(soup, "VELOCE") == (
        "Veloce\n"
        "Sinonimi: rapido\n"
        "Contrari: lento, tardo\n"
        "Vedi anche: fretta"
    )


def test_class_token_fallback():
    soup = _soup(
        '''
        <div class="contenuto">
          <p class="sinonimi"><a>allegro</a> <a>gioioso</a></p>
          <p class="vedianche"><a>gioia</a></p>
        </div>
        '''
    )
    groups = extract_groups(soup.div)
    assert [(g.label, g.items) for g in groups] == [
        (SynonymLabel.SYNONYMS, ["allegro", "gioioso"]),
        (SynonymLabel.ANTONYMS, []),
        (SynonymLabel.SEE_ALSO, ["gioia"]),
    ]


def test_style_signature_paragraph_fallback():
    soup = _soup(
        '''
        <main>
          <div class="bg-[#EFF2F1] rounded">
            <p><a>casa</a>, <a>abitazione</a></p>
          </div>
        </main>
        '''
    )
    assert extract_synonyms(soup, "dimora") == "Dimora\nSinonimi: casa, abitazione"


def test_anchor_text_is_entity_decoded_once():
    soup = _soup('<div class="contenuto"><p class="sinonimi"><a>perch&eacute;</a></p></div>')
    assert extract_synonyms(soup, "poiché") == "Poiché\nSinonimi: perché"


def test_escaped_anchor_text_stays_literal():
    soup = _soup(
        '<div class="contenuto"><p class="sinonimi">'
        '<a>fish&amp;not</a><a>fish&amp;amp;notes</a></p></div>'
    )
    assert extract_synonyms(soup, "pesce") == "Pesce\nSinonimi: fish&not, fish&amp;notes"


def test_text_fallback_when_no_links():
    soup = _soup(
        '<div class="contenuto"><p>Sinonimo di Lento, lento, pigro Vedi anche: tardo</p></div>'
    )
    assert extract_synonyms(soup, "lento") == "Lento:\nlento, pigro, tardo"


def test_text_fallback_has_no_style_markers():
    soup = _soup(
        '<div class="contenuto"><p>Sinonimo di Lento, <strong>pigro</strong>, tardo</p></div>'
    )
    assert extract_synonyms(soup, "lento") == "Lento:\npigro, tardo"


def test_text_fallback_empty_is_not_found():
    soup = _soup('<div class="contenuto"><p>Sinonimo di Lento</p></div>')
    assert extract_synonyms(soup, "lento") is None


def test_split_fallback_text_drops_antonym_span():
    text = "Sinonimo di Lento, pigro Contrario di Lento veloce, rapido Vedi anche: tardo"
    assert split_fallback_text(text, "lento") == ["pigro", "tardo"]


def test_split_fallback_text_deduplicates_case_insensitively():
    text = "Sinonimo di Lento, pigro, Pigro, calmo"
    assert split_fallback_text(text, "LENTO") == ["pigro", "calmo"]


def test_non_tree_input_is_rejected():
    with pytest.raises(MalformedDocumentError):
        extract_synonyms(None, "lento")
