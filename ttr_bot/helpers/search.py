"""Connectivity queries over the route network.

Both questions the bot asks ("are these two cities joined?" and "which free
routes would join them?") run the same bidirectional frontier search. The
origin side and the destination side take turns growing by one whole layer
until some city has been reached from both. That city is the midpoint; the
parent maps kept on each side turn it back into a chain of routes.

The result is a feasible chain, not a shortest one. A search that has seen
SEARCH_CITY_CAP cities from the origin side gives up and reports the cities
as unreachable.
"""
import logging
from typing import NamedTuple

from .route_network import owned_by, unclaimed

logger = logging.getLogger(__name__)

SEARCH_CITY_CAP = 500


class Meeting(NamedTuple):
    midpoint: str
    # city -> (city one hop closer to that side's start, route used), start -> None
    from_origin: dict
    from_destination: dict


def meet(network, origin, destination, predicate):
    if origin not in network.graph or destination not in network.graph:
        return None
    if not network.routes_from(origin, predicate) or not network.routes_from(destination, predicate):
        return None

    parents = [{origin: None}, {destination: None}]
    frontiers = [[origin], [destination]]
    side = 0
    while len(parents[0]) < SEARCH_CITY_CAP:
        seen, other_seen = parents[side], parents[1 - side]
        layer = []
        for city in frontiers[side]:
            for route in network.routes_from(city, predicate):
                reached = route.other_end(city)
                if reached in seen:
                    continue
                seen[reached] = (city, route)
                if reached in other_seen:
                    return Meeting(reached, parents[0], parents[1])
                layer.append(reached)
        if not layer:
            return None
        frontiers[side] = layer
        side = 1 - side

    logger.debug("gave up joining %s and %s after %d cities", origin, destination, len(parents[0]))
    return None


def _walk_back(parents, city):
    routes = []
    while parents[city] is not None:
        city, route = parents[city]
        routes.append(route)
    return routes


def is_connected(network, origin, destination, predicate=unclaimed):
    if origin == destination:
        return True
    return meet(network, origin, destination, predicate) is not None


def is_owned_connected(network, origin, destination, player):
    return is_connected(network, origin, destination, owned_by(player))


def find_unclaimed_chain(network, origin, destination):
    """Unclaimed routes leading from origin to destination, in travel order.

    An empty list means no chain can be built right now.
    """
    if origin == destination:
        return []
    meeting = meet(network, origin, destination, unclaimed)
    if meeting is None:
        return []
    first_half = _walk_back(meeting.from_origin, meeting.midpoint)
    first_half.reverse()
    second_half = _walk_back(meeting.from_destination, meeting.midpoint)
    return first_half + second_half
