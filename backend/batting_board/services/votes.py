from __future__ import annotations
from typing import Literal, Sequence
import structlog
from batting_board.errors import ForbiddenError, NotFoundError, ValidationError
from batting_board.models.batting_order import BattingOrder
from batting_board.services.batting_orders import find_order

log = structlog.get_logger()

VoteType = Literal["up", "down"]
_OPPOSITE = {"up": "down", "down": "up"}


def cast_vote(orders: Sequence[BattingOrder], voter_id: str, order_id: str, vote_type: str) -> BattingOrder:
    """
    Apply one vote to the in-memory collection and return the target order.

    Each voter owns at most one upvote and one downvote across the whole
    collection. Voting the same way twice on the same order retracts the
    vote; voting on another order moves it there. Switching direction on the
    same order drops the opposite vote. The caller persists `orders`.
    """
    if vote_type not in _OPPOSITE:
        raise ValidationError("voteType must be 'up' or 'down'")
    if not voter_id:
        raise ValidationError("userId is required")
    target = find_order(orders, order_id)
    if target is None:
        raise NotFoundError("Batting order not found")
    if target.user_id == voter_id:
        raise ForbiddenError("You cannot vote on your own batting order")

    for other in orders:
        if other is target:
            continue
        ballots = other.votes_for(vote_type)
        if voter_id in ballots:
            ballots.remove(voter_id)

    same = target.votes_for(vote_type)
    opposite = target.votes_for(_OPPOSITE[vote_type])
    if voter_id in same:
        same.remove(voter_id)
        retracted = True
    else:
        same.append(voter_id)
        if voter_id in opposite:
            opposite.remove(voter_id)
        retracted = False

    log.info("vote_cast", order_id=target.id, voter_id=voter_id, vote_type=vote_type, retracted=retracted)
    return target
