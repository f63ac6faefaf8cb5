"""
Shared fixtures for the LibreCards tests.

Collaborators are replaced by spec'd mocks so the orchestrator can be
checked call by call without a deck or a real lobby.
"""

import random
import uuid
from unittest.mock import Mock

import pytest

from librecards.cards.deck import Deck, DeckDefinition
from librecards.core import CardState, GameStatus, JudgePicker, Lobby, Player


@pytest.fixture
def game_status():
    return Mock(spec=GameStatus)


@pytest.fixture
def card_state():
    mock = Mock(spec=CardState)
    mock.submissions = {}
    return mock


@pytest.fixture
def lobby():
    return Mock(spec=Lobby)


@pytest.fixture
def judge_picker():
    return Mock(spec=JudgePicker)


@pytest.fixture
def owner():
    return Player(uuid.uuid4(), name="owner")


@pytest.fixture
def judge():
    return Player(uuid.uuid4(), name="judge")


@pytest.fixture
def bystander():
    return Player(uuid.uuid4(), name="bystander")


@pytest.fixture
def small_deck_definition():
    return DeckDefinition(
        name="test",
        templates=[f"Template {i} <BLANK>." for i in range(1, 4)],
        cards=[f"Card {i}" for i in range(1, 41)],
    )


@pytest.fixture
def deck(small_deck_definition):
    return Deck(small_deck_definition, rng=random.Random(7))
