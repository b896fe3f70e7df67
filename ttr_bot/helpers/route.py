from dataclasses import dataclass
from typing import NamedTuple, Optional

from .colors import TrainColor
from .errors import InvalidRouteError

ROUTE_POINTS = {1: 1, 2: 2, 3: 4, 4: 7, 5: 10, 6: 15}


def point_value(length):
    try:
        return ROUTE_POINTS[length]
    except KeyError:
        raise InvalidRouteError(f"route length {length!r} has no point value") from None


class RouteKey(NamedTuple):
    origin: str
    destination: str
    color: TrainColor
    length: int


@dataclass(eq=False)
class Route:
    """One claimable segment between two cities.

    Parallel routes between the same pair of cities are separate objects, so
    equality is identity. Use `key` or `same_track` to compare by value.
    """
    origin: str
    destination: str
    color: TrainColor
    length: int
    claimed_by: Optional[str] = None

    @property
    def key(self):
        return RouteKey(self.origin, self.destination, self.color, self.length)

    @property
    def point_value(self):
        return point_value(self.length)

    @property
    def is_claimed(self):
        return self.claimed_by is not None

    def joins(self, city1, city2):
        return ((self.origin == city1 and self.destination == city2)
                or (self.origin == city2 and self.destination == city1))

    def other_end(self, city):
        return self.destination if city == self.origin else self.origin

    def same_track(self, other):
        """Same unordered city pair, colour and length."""
        return (self.joins(other.origin, other.destination)
                and self.color == other.color
                and self.length == other.length)

    def __str__(self):
        return f"{self.origin} - {self.destination} ({self.length} {self.color})"


@dataclass(frozen=True)
class DestinationCard:
    origin: str
    destination: str
    points: int

    def __str__(self):
        return f"{self.origin} - {self.destination} ({self.points})"
