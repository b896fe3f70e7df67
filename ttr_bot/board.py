import csv
from pathlib import Path

from .helpers.colors import TrainColor
from .helpers.errors import InvalidRouteError
from .helpers.route import DestinationCard, Route
from .helpers.route_network import RouteNetwork

DATA_DIR = Path(__file__).parent.parent / 'data'


def parse_color(value):
    try:
        return TrainColor(value.strip().lower())
    except ValueError:
        raise InvalidRouteError(f"unknown route colour {value!r}") from None


def load_board(data_path=None):
    data_path = Path(data_path) if data_path else DATA_DIR / 'routes.csv'
    network = RouteNetwork()
    with open(data_path, 'r', newline='') as f:
        reader = csv.reader(f)
        next(reader)
        for line_no, row in enumerate(reader, start=2):
            if not row:
                continue
            try:
                city1, city2, carriages, color = row
                length = int(carriages)
            except ValueError:
                raise InvalidRouteError(f"{data_path}:{line_no}: malformed route row {row!r}") from None
            network.add_route(Route(city1.strip(), city2.strip(), parse_color(color), length))
    return network


def load_tickets(data_path=None):
    data_path = Path(data_path) if data_path else DATA_DIR / 'destinations.csv'
    tickets = []
    with open(data_path, 'r', newline='') as f:
        reader = csv.DictReader(f)
        for row in reader:
            tickets.append(DestinationCard(row['Source'], row['Target'], int(row['Points'])))
    return tickets


if __name__ == "__main__":
    board = load_board()
    print(f"{len(board)} routes between {len(board.cities)} cities")
