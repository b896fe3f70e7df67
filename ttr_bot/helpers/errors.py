class TicketToRideError(Exception):
    pass


class InvalidRouteError(TicketToRideError, ValueError):
    """A route record the point table has no entry for, or a malformed board row."""


class RouteAlreadyClaimedError(TicketToRideError):
    """No unclaimed record matches the route a player tried to claim.

    Either another player got there first or the caller is holding a stale
    target. Callers should drop the target and replan rather than retry.
    """

    def __init__(self, route):
        super().__init__(f"no unclaimed route {route.origin} - {route.destination} "
                         f"({route.color}, {route.length}) left to claim")
        self.route = route
