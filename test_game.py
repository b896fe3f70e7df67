import random
from collections import Counter

from conftest import make_game_state, make_network
from ttr_bot.game import Game
from ttr_bot.helpers.colors import TrainColor
from ttr_bot.helpers.game_state import Deck
from ttr_bot.helpers.route import DestinationCard
from ttr_bot.players import take_turn

RED = TrainColor.RED
GREEN = TrainColor.GREEN
LOCO = TrainColor.LOCOMOTIVE


def test_full_deck():
    deck = Deck(rng=random.Random(0))
    assert len(deck.face_up_cards) == 5
    cards = Counter(deck.draw_pile + deck.face_up_cards + deck.discard_pile)
    assert sum(cards.values()) == 110
    assert cards[LOCO] == 14
    assert cards[RED] == 12
    assert TrainColor.GREY not in cards


def test_draw_reshuffles_discard():
    deck = Deck(cards=[RED, RED], face_up_size=0)
    assert deck.draw(2) == [RED, RED]
    assert deck.draw(1) == []
    deck.discard([GREEN, GREEN, GREEN])
    assert deck.draw(5) == [GREEN, GREEN, GREEN]
    assert deck.discard_pile == []


def test_take_face_up_refills():
    deck = Deck(cards=[])
    deck.face_up_cards = [RED, GREEN]
    deck.draw_pile = [TrainColor.BLUE]
    assert deck.take_face_up(1) == GREEN
    assert deck.face_up_cards == [RED, TrainColor.BLUE]


def test_turn_draws_when_nothing_claimable(alice):
    network = make_network(("A", "B", RED, 3))
    state = make_game_state(network, alice)
    state.deck.face_up_cards = [TrainColor.BLUE, RED, LOCO, TrainColor.BLACK, TrainColor.WHITE]
    state.deck.draw_pile = [GREEN] * 5
    alice.tickets = [DestinationCard("A", "B", 4)]

    assert not take_turn(state, alice)

    assert alice.desired_colors == {RED}
    assert alice.hand == Counter({RED: 1, GREEN: 1})
    assert RED not in state.deck.face_up_cards
    assert not network.routes[0].is_claimed


def test_turn_claims_when_affordable(alice):
    network = make_network(("A", "B", RED, 3))
    state = make_game_state(network, alice)
    alice.hand = Counter({RED: 3})
    alice.tickets = [DestinationCard("A", "B", 4)]

    assert take_turn(state, alice)
    assert network.routes[0].claimed_by == "Alice"
    assert alice.hand_size == 0


def test_seeded_game_plays_out():
    game = Game(2, seed=7)
    scores = game.play_game(silent=True)

    assert len(scores) == 2
    for player in game.state.list_of_players:
        assert player.trains == 48 - sum(r.length for r in player.claimed_routes)
        assert all(r.claimed_by == player.name for r in player.claimed_routes)
        endpoints = set()
        for route in player.claimed_routes:
            endpoints.update((route.origin, route.destination))
        assert player.connected_cities == endpoints
    claimed = [r for r in game.state.network.routes if r.is_claimed]
    assert len(claimed) == sum(len(p.claimed_routes) for p in game.state.list_of_players)


def test_same_seed_same_game():
    assert Game(2, seed=3).play_game(silent=True) == Game(2, seed=3).play_game(silent=True)
