from collections import Counter

from .colors import PlayerColor

STARTING_TRAINS = 48
FINAL_ROUND_TRAINS = 2


class PlayerState:
    def __init__(self, name, color=PlayerColor.RED, trains=STARTING_TRAINS):
        self.name = name
        self.color = color
        self.hand = Counter()
        self.trains = trains
        self.points = 0
        self.tickets = []
        self.claimed_routes = []
        # Grows with every claim, never reset
        self.connected_cities = set()
        # Recomputed every turn
        self.targeted_routes = []
        self.desired_colors = set()

    @property
    def hand_size(self):
        return sum(self.hand.values())

    @property
    def triggers_final_round(self):
        return self.trains <= FINAL_ROUND_TRAINS

    def add_cards(self, cards):
        self.hand.update(cards)

    def __repr__(self):
        return f"PlayerState({self.name!r}, trains={self.trains}, points={self.points})"
