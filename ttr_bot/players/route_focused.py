from ..helpers.colors import TrainColor
from .claims import try_claim_from_targets
from .planner import refresh_targets

CARDS_PER_DRAW = 2


def find_face_up_card(deck, wanted):
    for i, card in enumerate(deck.face_up_cards):
        if card != TrainColor.LOCOMOTIVE and card in wanted:
            return i
    return None


def draw_cards(game_state, player, count=CARDS_PER_DRAW):
    deck = game_state.deck
    drawn = []
    for _ in range(count):
        idx = find_face_up_card(deck, player.desired_colors)
        if idx is not None:
            drawn.append(deck.take_face_up(idx))
        else:
            drawn.extend(deck.draw(1))
    player.add_cards(drawn)
    return drawn


def take_turn(game_state, player):
    """Claim a targeted route if the hand allows it, otherwise draw.

    Returns True when a route was claimed.
    """
    refresh_targets(game_state, player)
    if try_claim_from_targets(game_state, player):
        return True
    draw_cards(game_state, player)
    return False
