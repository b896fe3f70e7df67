import logging
import threading

import networkx as nx

from .errors import InvalidRouteError, RouteAlreadyClaimedError
from .route import Route

logger = logging.getLogger(__name__)


def unclaimed(route):
    return route.claimed_by is None


def owned_by(player):
    player_id = _player_id(player)

    def predicate(route):
        return route.claimed_by == player_id

    return predicate


def _player_id(player):
    return getattr(player, "name", player)


class RouteNetwork:
    """Every route on the board, and the only place claim state changes.

    Routes live on a MultiGraph, one keyed edge per route record. Readers filter
    its adjacency with a predicate; `claim` is the single write.
    """

    def __init__(self, routes=()):
        self.graph = nx.MultiGraph()
        self._routes = []
        self._lock = threading.Lock()
        for route in routes:
            self.add_route(route)

    def add_route(self, route):
        if not isinstance(route, Route):
            raise InvalidRouteError(f"expected a Route, got {route!r}")
        # Raises for lengths the point table does not cover
        route.point_value
        if route.origin == route.destination:
            raise InvalidRouteError(f"route {route} starts and ends in the same city")
        self.graph.add_edge(route.origin, route.destination, route=route)
        self._routes.append(route)
        return route

    @property
    def routes(self):
        return list(self._routes)

    @property
    def cities(self):
        return set(self.graph.nodes())

    def __len__(self):
        return len(self._routes)

    def __contains__(self, route):
        return any(r is route for r in self._routes)

    def routes_between(self, city1, city2, predicate=None):
        data = self.graph.get_edge_data(city1, city2, default={})
        routes = [d["route"] for d in data.values()]
        if predicate is not None:
            routes = [r for r in routes if predicate(r)]
        return routes

    def find_unclaimed_route(self, city1, city2):
        for route in self.routes_between(city1, city2, unclaimed):
            return route
        return None

    def find_owned_route(self, city1, city2, player):
        for route in self.routes_between(city1, city2, owned_by(player)):
            return route
        return None

    def routes_from(self, city, predicate):
        """Routes touching `city` that pass `predicate`, shortest first."""
        if city not in self.graph:
            return []
        routes = [route for _, _, route in self.graph.edges(city, data="route") if predicate(route)]
        return sorted(routes, key=lambda r: r.length)

    def neighbors(self, city, predicate):
        """(city, length) pairs reachable in one hop, one per city, shortest first."""
        best = {}
        for route in self.routes_from(city, predicate):
            other = route.other_end(city)
            if other not in best:
                best[other] = route.length
        return sorted(best.items(), key=lambda item: item[1])

    def routes_owned_by(self, player):
        predicate = owned_by(player)
        return [r for r in self._routes if predicate(r)]

    def find_matching_unclaimed(self, route):
        """The unclaimed record `route` stands for, or None.

        `route` may be the record itself, which only matches while it is free,
        or a detached route with the same city pair, colour and length.
        """
        if route in self:
            return None if route.is_claimed else route
        for candidate in self.routes_between(route.origin, route.destination, unclaimed):
            if candidate.same_track(route):
                return candidate
        return None

    def claim(self, route, player):
        with self._lock:
            record = self.find_matching_unclaimed(route)
            if record is None:
                raise RouteAlreadyClaimedError(route)
            record.claimed_by = _player_id(player)
        logger.debug("%s now owned by %s", record, record.claimed_by)
        return record
