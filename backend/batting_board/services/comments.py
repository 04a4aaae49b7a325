from __future__ import annotations
from typing import Any, Sequence
import structlog
from batting_board.errors import NotFoundError, ValidationError
from batting_board.models.batting_order import BattingOrder, Comment, CommentAuthor
from batting_board.services.batting_orders import find_order
from batting_board.services.ids import new_id, now_ms

log = structlog.get_logger()


def add_comment(
    orders: Sequence[BattingOrder],
    order_id: str,
    author_id: str,
    text: str | None,
    author: CommentAuthor | dict[str, Any] | None = None,
) -> Comment:
    """Append a comment to an order. Comments are never edited or removed."""
    body = (text or "").strip()
    if not body:
        raise ValidationError("Comment text must not be blank")
    if not author_id:
        raise ValidationError("userId is required")
    order = find_order(orders, order_id)
    if order is None:
        raise NotFoundError("Batting order not found")

    if isinstance(author, dict):
        author = CommentAuthor.model_validate(author)
    comment = Comment(id=new_id(), user_id=author_id, text=body, created_at=now_ms(), user=author)
    order.comments.append(comment)
    log.info("comment_added", order_id=order.id, comment_id=comment.id, user_id=author_id)
    return comment
