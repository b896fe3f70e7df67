import random

from .board import load_board, load_tickets
from .helpers.colors import PlayerColor
from .helpers.game_state import GameState
from .helpers.player_state import PlayerState
from .helpers.search import is_owned_connected
from .players import take_turn

STARTING_CARDS = 4
STARTING_TICKETS = 3
MAX_TURNS = 1000


class Game:
    def __init__(self, num_players=2, network=None, tickets=None, seed=None):
        self.rng = random.Random(seed)
        network = network if network is not None else load_board()
        tickets = tickets if tickets is not None else load_tickets()
        colors = list(PlayerColor)
        players = [PlayerState(f"Player {i}", colors[i % len(colors)]) for i in range(num_players)]
        self.state = GameState(network, players, tickets, rng=self.rng)
        self.num_players = num_players
        self.current_player_idx = 0
        self.final_round = False
        self.final_round_starter = None
        self.game_over = False

        self._deal_initial_cards()

    def _deal_initial_cards(self):
        for player in self.state.list_of_players:
            player.add_cards(self.state.deck.draw(STARTING_CARDS))
            player.tickets = self.state.draw_tickets(STARTING_TICKETS)

    def get_current_player(self):
        return self.state.list_of_players[self.current_player_idx]

    def step(self):
        player = self.get_current_player()
        claimed = take_turn(self.state, player)

        if player.triggers_final_round and not self.final_round:
            self.final_round = True
            self.final_round_starter = self.current_player_idx

        self.current_player_idx = (self.current_player_idx + 1) % self.num_players

        if self.final_round and self.current_player_idx == self.final_round_starter:
            self.game_over = True
            self._final_scoring()
        return claimed

    def _final_scoring(self):
        network = self.state.network
        for player in self.state.list_of_players:
            for ticket in player.tickets:
                if is_owned_connected(network, ticket.origin, ticket.destination, player):
                    player.points += ticket.points
                else:
                    player.points -= ticket.points

    def play_game(self, silent=False):
        turn = 0
        while not self.game_over:
            player = self.get_current_player()
            claimed = self.step()

            if not silent:
                action = "claimed a route" if claimed else "drew cards"
                print(f"Turn {turn}: {player.name} {action}")

            turn += 1
            if turn > MAX_TURNS:
                if not silent:
                    print(f"Game exceeded {MAX_TURNS} turns, stopping")
                break

        if not silent:
            print(f"Game ended after {turn} turns")
            for player in self.state.list_of_players:
                print(f"{player.name}: {player.points} points, {player.trains} trains left")

        return [p.points for p in self.state.list_of_players]


if __name__ == "__main__":
    game = Game(2)
    game.play_game()
