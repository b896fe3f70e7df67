from .claims import claim_route, try_claim_from_targets
from .planner import refresh_targets
from .route_focused import take_turn

__all__ = ["claim_route", "refresh_targets", "take_turn", "try_claim_from_targets"]
