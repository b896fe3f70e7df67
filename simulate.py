import logging
import statistics
from argparse import ArgumentParser
from collections import Counter

from ttr_bot.game import Game
from ttr_bot.helpers.search import is_owned_connected


def run_silent_game(num_players, seed):
    game = Game(num_players, seed=seed)
    scores = game.play_game(silent=True)
    network = game.state.network

    results = {
        'scores': scores,
        'trains_left': [p.trains for p in game.state.list_of_players],
        'routes_claimed': [],
        'tickets_completed': 0,
        'tickets_failed': 0,
        'finished': game.game_over,
    }
    for player in game.state.list_of_players:
        results['routes_claimed'].extend(player.claimed_routes)
        for ticket in player.tickets:
            if is_owned_connected(network, ticket.origin, ticket.destination, player):
                results['tickets_completed'] += 1
            else:
                results['tickets_failed'] += 1
    return results


def run_simulation(num_games=100, num_players=2, seed=0):
    all_scores = []
    route_popularity = Counter()
    tickets_completed = 0
    tickets_failed = 0
    unfinished = 0

    print(f"Running {num_games} games with {num_players} players...")
    for i in range(num_games):
        results = run_silent_game(num_players, seed + i)
        all_scores.extend(results['scores'])
        tickets_completed += results['tickets_completed']
        tickets_failed += results['tickets_failed']
        if not results['finished']:
            unfinished += 1
        for route in results['routes_claimed']:
            route_popularity[tuple(sorted([route.origin, route.destination]))] += 1

    print("\n" + "=" * 50)
    print("SIMULATION RESULTS")
    print("=" * 50)

    print(f"\nGames hitting the turn cap: {unfinished}/{num_games}")

    print(f"\n--- SCORES ---")
    print(f"Min: {min(all_scores)}, Max: {max(all_scores)}")
    print(f"Mean: {sum(all_scores)/len(all_scores):.1f}")
    if len(all_scores) > 1:
        print(f"Std: {statistics.stdev(all_scores):.1f}")

    print(f"\n--- TICKETS ---")
    total_tickets = tickets_completed + tickets_failed
    completion_rate = tickets_completed / total_tickets * 100 if total_tickets > 0 else 0
    print(f"Completed: {tickets_completed}, Failed: {tickets_failed}")
    print(f"Completion rate: {completion_rate:.1f}%")

    print(f"\n--- TOP 10 MOST CLAIMED ROUTES ---")
    for route, count in route_popularity.most_common(10):
        print(f"{route[0]} - {route[1]}: {count}")


def main():
    parser = ArgumentParser()
    parser.add_argument('--games', type=int, default=100)
    parser.add_argument('--players', type=int, default=2)
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--verbose', action='store_true', default=False)
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    run_simulation(args.games, args.players, args.seed)


if __name__ == "__main__":
    main()
