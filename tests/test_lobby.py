"""
Tests for the in-memory lobby.
"""

import uuid

import pytest

from librecards.core import Player, StateConflictError
from librecards.lobby import InMemoryLobby


def test_owner_is_first_member(owner):
    lobby = InMemoryLobby(owner)

    assert lobby.owner_id == owner.id
    assert lobby.players == (owner,)


def test_enough_players_threshold(owner, judge, bystander):
    lobby = InMemoryLobby(owner, min_players=3)
    lobby.join(judge)
    assert not lobby.has_enough_players

    lobby.join(bystander)
    assert lobby.has_enough_players


def test_join_order_is_kept(owner, judge, bystander):
    lobby = InMemoryLobby(owner)
    lobby.join(bystander)
    lobby.join(judge)

    assert [p.name for p in lobby.players] == ["owner", "bystander", "judge"]


def test_join_twice_raises(owner, judge):
    lobby = InMemoryLobby(owner)
    lobby.join(judge)

    with pytest.raises(StateConflictError):
        lobby.join(Player(judge.id))


def test_leave(owner, judge):
    lobby = InMemoryLobby(owner)
    lobby.join(judge)

    lobby.leave(judge.id)

    assert lobby.players == (owner,)


def test_owner_cannot_leave(owner):
    lobby = InMemoryLobby(owner)

    with pytest.raises(StateConflictError):
        lobby.leave(owner.id)


def test_unknown_player_raises(owner):
    lobby = InMemoryLobby(owner)

    with pytest.raises(KeyError):
        lobby.get_player(uuid.uuid4())


def test_roster_cannot_be_edited_through_players(owner, judge):
    lobby = InMemoryLobby(owner)

    with pytest.raises(AttributeError):
        lobby.players.append(judge)


def test_min_players_below_two_rejected(owner):
    with pytest.raises(ValueError):
        InMemoryLobby(owner, min_players=1)
