import random

from .colors import ORDINARY_COLORS, TrainColor
from .player_state import PlayerState

CARDS_PER_COLOR = 12
LOCOMOTIVE_CARDS = 14
FACE_UP_SIZE = 5
FACE_UP_LOCOMOTIVE_LIMIT = 3


def full_train_deck():
    cards = []
    for color in ORDINARY_COLORS:
        cards.extend([color] * CARDS_PER_COLOR)
    cards.extend([TrainColor.LOCOMOTIVE] * LOCOMOTIVE_CARDS)
    return cards


class Deck:
    """Train cards: the draw pile, the face-up display and the shared discard pile."""

    def __init__(self, cards=None, rng=None, face_up_size=FACE_UP_SIZE):
        self.rng = rng or random.Random()
        self.draw_pile = list(full_train_deck() if cards is None else cards)
        self.rng.shuffle(self.draw_pile)
        self.discard_pile = []
        self.face_up_size = face_up_size
        self.face_up_cards = []
        self.setup_face_up_cards()

    def __len__(self):
        return len(self.draw_pile)

    def reshuffle_discard(self):
        if not self.discard_pile:
            return False
        self.draw_pile.extend(self.discard_pile)
        self.discard_pile = []
        self.rng.shuffle(self.draw_pile)
        return True

    def draw(self, n=1):
        drawn = []
        for _ in range(n):
            if not self.draw_pile and not self.reshuffle_discard():
                break
            drawn.append(self.draw_pile.pop())
        return drawn

    def discard(self, cards):
        self.discard_pile.extend(cards)

    def setup_face_up_cards(self):
        self._deal_face_up_cards()
        while self._check_locomotive_reset():
            self._deal_face_up_cards()

    def take_face_up(self, index):
        card = self.face_up_cards.pop(index)
        self._refill_face_up()
        return card

    def _deal_face_up_cards(self):
        self.discard_pile.extend(self.face_up_cards)
        self.face_up_cards = []
        self._refill_face_up(reset=False)

    def _refill_face_up(self, reset=True):
        missing = self.face_up_size - len(self.face_up_cards)
        if missing > 0:
            self.face_up_cards.extend(self.draw(missing))
        if reset and self._check_locomotive_reset():
            self.setup_face_up_cards()

    def _check_locomotive_reset(self):
        loco_count = sum(1 for c in self.face_up_cards if c == TrainColor.LOCOMOTIVE)
        if loco_count >= FACE_UP_LOCOMOTIVE_LIMIT and len(self.face_up_cards) == self.face_up_size:
            # Only redeal when there are enough other cards to make a difference
            non_loco = sum(1 for c in self.draw_pile + self.discard_pile if c != TrainColor.LOCOMOTIVE)
            return non_loco >= self.face_up_size
        return False


class GameState:
    def __init__(self, network, players, tickets=(), deck=None, rng=None):
        self.rng = rng or random.Random()
        self.network = network
        self.list_of_players = [
            p if isinstance(p, PlayerState) else PlayerState(p) for p in players
        ]
        self.deck = deck if deck is not None else Deck(rng=self.rng)
        self.ticket_deck = list(tickets)
        self.rng.shuffle(self.ticket_deck)

    @property
    def discard_pile(self):
        return self.deck.discard_pile

    def draw_tickets(self, n=3):
        drawn = self.ticket_deck[:n]
        self.ticket_deck = self.ticket_deck[n:]
        return drawn
