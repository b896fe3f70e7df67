from dataclasses import dataclass

from ..helpers.route import Route, RouteKey
from ..helpers.search import find_unclaimed_chain, is_owned_connected

MAX_TARGETS = 5


@dataclass
class RouteRank:
    key: RouteKey
    route: Route
    count: int = 0


def is_ticket_complete(network, player, ticket):
    return is_owned_connected(network, ticket.origin, ticket.destination, player)


def chain_for_ticket(network, player, ticket):
    """Free routes that would complete `ticket`, or [] if it is done or blocked.

    Extending what the player already has is tried first: from a connected
    city to the ticket's destination, then from the ticket's origin to a
    connected city. Otherwise the ticket is planned from scratch.
    """
    if is_ticket_complete(network, player, ticket):
        return []

    for city in sorted(player.connected_cities):
        chain = find_unclaimed_chain(network, city, ticket.destination)
        if chain:
            return chain
        chain = find_unclaimed_chain(network, ticket.origin, city)
        if chain:
            return chain

    return find_unclaimed_chain(network, ticket.origin, ticket.destination)


def drop_owned_duplicates(network, player, routes):
    owned = network.routes_owned_by(player)
    return [r for r in routes if not any(o.same_track(r) for o in owned)]


def rank_routes(routes, limit=MAX_TARGETS):
    ranks = {}
    for route in routes:
        rank = ranks.get(route.key)
        if rank is None:
            rank = ranks[route.key] = RouteRank(route.key, route)
        rank.count += 1
    # sorted() is stable, so equal ranks stay in the order they were first seen
    ordered = sorted(ranks.values(), key=lambda r: (-r.count, -r.key.length))
    return [r.route for r in ordered[:limit]]


def refresh_targets(game_state, player):
    network = game_state.network
    candidates = []
    # Lowest value tickets first
    for ticket in sorted(player.tickets, key=lambda t: t.points):
        candidates = chain_for_ticket(network, player, ticket)
        if candidates:
            break

    candidates = drop_owned_duplicates(network, player, candidates)
    player.targeted_routes = rank_routes(candidates)
    player.desired_colors = {r.color for r in player.targeted_routes}
    return player.targeted_routes


def wants_final_round(player):
    return player.triggers_final_round
