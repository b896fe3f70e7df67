import pytest

from conftest import assert_chain
from ttr_bot.board import load_board, load_tickets
from ttr_bot.helpers.colors import TrainColor
from ttr_bot.helpers.errors import InvalidRouteError
from ttr_bot.helpers.search import find_unclaimed_chain


def test_default_board():
    board = load_board()
    assert len(board) == 100
    assert len(board.cities) == 36
    assert all(1 <= r.length <= 6 for r in board.routes)
    assert not any(r.is_claimed for r in board.routes)
    assert len(board.routes_between("Atlanta", "Raleigh")) == 2


def test_default_tickets_use_board_cities():
    board = load_board()
    tickets = load_tickets()
    assert len(tickets) == 30
    for ticket in tickets:
        assert ticket.origin in board.cities
        assert ticket.destination in board.cities


def test_every_ticket_can_be_planned_on_an_empty_board():
    board = load_board()
    for ticket in load_tickets():
        assert_chain(find_unclaimed_chain(board, ticket.origin, ticket.destination),
                     ticket.origin, ticket.destination)


def test_load_custom_board(tmp_path):
    path = tmp_path / "routes.csv"
    path.write_text("Source,Target,Carriages,Color\nA,B,2,Grey\nB, C ,3,red\n")
    board = load_board(path)
    assert [r.key for r in board.routes] == [
        ("A", "B", TrainColor.GREY, 2),
        ("B", "C", TrainColor.RED, 3),
    ]


@pytest.mark.parametrize("row", ["A,B,7,red", "A,B,2,purple", "A,B,two,red", "A,B,2"])
def test_bad_rows_rejected(tmp_path, row):
    path = tmp_path / "routes.csv"
    path.write_text(f"Source,Target,Carriages,Color\n{row}\n")
    with pytest.raises(InvalidRouteError):
        load_board(path)


def test_load_custom_tickets(tmp_path):
    path = tmp_path / "destinations.csv"
    path.write_text("Source,Target,Points\nA,B,4\n")
    [ticket] = load_tickets(path)
    assert (ticket.origin, ticket.destination, ticket.points) == ("A", "B", 4)
