import logging

from ..helpers.colors import TrainColor
from ..helpers.errors import RouteAlreadyClaimedError

logger = logging.getLogger(__name__)


def pick_grey_color(player):
    """Most plentiful colour in hand that the player is not saving for, or None."""
    eligible = [
        (color, count) for color, count in player.hand.items()
        if count > 0 and color != TrainColor.LOCOMOTIVE and color not in player.desired_colors
    ]
    if not eligible:
        return None
    return max(eligible, key=lambda item: item[1])[0]


def cards_for_route(player, route, color):
    """Cards that would pay for `route` in `color`, locomotives first, or None."""
    have = player.hand[color]
    if have >= route.length:
        return [color] * route.length
    if color == TrainColor.LOCOMOTIVE:
        return None
    gap = route.length - have
    if player.hand[TrainColor.LOCOMOTIVE] < gap:
        return None
    return [TrainColor.LOCOMOTIVE] * gap + [color] * have


def claim_route(game_state, player, route, color):
    if route.color != TrainColor.GREY and color not in (route.color, TrainColor.LOCOMOTIVE):
        raise ValueError(f"{route} cannot be paid for with {color} cards")

    if route.length > player.trains:
        return False

    network = game_state.network
    record = network.find_matching_unclaimed(route)
    if record is None:
        raise RouteAlreadyClaimedError(route)

    spent = cards_for_route(player, record, color)
    if spent is None:
        return False

    record = network.claim(record, player)
    player.hand.subtract(spent)
    game_state.deck.discard(spent)

    player.connected_cities.update((record.origin, record.destination))
    player.claimed_routes.append(record)
    player.trains -= record.length
    player.points += record.point_value

    logger.info("%s claims the route %s to %s!", player.name, record.origin, record.destination)
    return True


def try_claim_from_targets(game_state, player):
    for route in list(player.targeted_routes):
        color = route.color
        if color == TrainColor.GREY:
            color = pick_grey_color(player)
            if color is None:
                continue
        try:
            if claim_route(game_state, player, route, color):
                return True
        except RouteAlreadyClaimedError:
            logger.debug("%s dropping stale target %s", player.name, route)
            player.targeted_routes.remove(route)
    return False
