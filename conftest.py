import pytest

from ttr_bot.helpers.colors import TrainColor
from ttr_bot.helpers.game_state import Deck, GameState
from ttr_bot.helpers.player_state import PlayerState
from ttr_bot.helpers.route import Route
from ttr_bot.helpers.route_network import RouteNetwork


def make_network(*rows):
    return RouteNetwork([Route(a, b, color, length) for a, b, color, length in rows])


def make_game_state(network, *players):
    return GameState(network, list(players), deck=Deck(cards=[]))


def assert_chain(chain, origin, destination):
    assert chain, "expected a non-empty chain"
    city = origin
    for route in chain:
        assert city in (route.origin, route.destination)
        city = route.other_end(city)
    assert city == destination


@pytest.fixture
def alice():
    return PlayerState("Alice")


@pytest.fixture
def bob():
    return PlayerState("Bob")


@pytest.fixture
def line_network():
    return make_network(
        ("A", "B", TrainColor.RED, 2),
        ("B", "C", TrainColor.BLUE, 3),
        ("C", "D", TrainColor.GREY, 1),
    )
