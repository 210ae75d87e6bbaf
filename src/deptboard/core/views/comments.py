"""
Comment feed, in the order the server returned it (newest first).
"""

from deptboard.core.store import StoreView
from deptboard.core.views.models import CommentItem, CommentsView
from deptboard.utils.dates import format_datetime

EMPTY_COMMENTS = "No comments yet. Be the first to share an opinion."


def build_comments(store: StoreView) -> CommentsView:
    items = [
        CommentItem(
            comment_id=comment.id,
            author=comment.display_author,
            content=comment.content,
            created=format_datetime(comment.created_at),
        )
        for comment in store.comments
    ]
    return CommentsView(items=items, placeholder=None if items else EMPTY_COMMENTS)
