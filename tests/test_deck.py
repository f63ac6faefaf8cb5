"""
Tests for cards.deck module.
"""

import random

import pytest
from pydantic import ValidationError

from librecards.cards.deck import Deck, DeckDefinition, DeckExhaustedError


def test_cards_get_ids_in_definition_order():
    deck = Deck(DeckDefinition(templates=["T"], cards=["a", "b", "c"]), rng=random.Random(1))

    drawn = deck.draw_cards(3)

    assert sorted((c.id, c.content) for c in drawn) == [(1, "a"), (2, "b"), (3, "c")]


def test_same_seed_same_order(small_deck_definition):
    first = Deck(small_deck_definition, rng=random.Random(3)).draw_cards(10)
    second = Deck(small_deck_definition, rng=random.Random(3)).draw_cards(10)

    assert first == second


def test_discards_are_reshuffled_when_pile_runs_out():
    deck = Deck(DeckDefinition(templates=["T"], cards=["a", "b"]), rng=random.Random(1))
    hand = deck.draw_cards(2)
    deck.discard_cards(hand)

    again = deck.draw_cards(2)

    assert sorted(c.id for c in again) == [1, 2]


def test_drawing_more_than_left_raises_without_drawing(deck):
    left = deck.cards_left

    with pytest.raises(DeckExhaustedError):
        deck.draw_cards(left + 1)
    assert deck.cards_left == left


def test_templates_cycle_through_discards():
    deck = Deck(DeckDefinition(templates=["T"], cards=["a"]))
    template = deck.draw_template()

    with pytest.raises(DeckExhaustedError):
        deck.draw_template()

    deck.discard_template(template)
    assert deck.draw_template() == template


def test_from_yaml(tmp_path):
    path = tmp_path / "deck.yaml"
    path.write_text("name: tiny\ntemplates:\n  - 'Why? <BLANK>'\ncards:\n  - Bees\n  - Jazz hands\n")

    deck = Deck.from_yaml(str(path))

    assert deck.name == "tiny"
    assert deck.cards_left == 2
    assert deck.draw_template().content == "Why? <BLANK>"


@pytest.mark.parametrize("data", [
    {"templates": [], "cards": ["a"]},
    {"templates": ["T"], "cards": []},
    {"cards": ["a"]},
])
def test_invalid_definitions_rejected(data):
    with pytest.raises(ValidationError):
        DeckDefinition.model_validate(data)
