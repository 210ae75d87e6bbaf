"""
Comment box: post and delete comments.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from deptboard.core.errors import ApiError
from deptboard.core.forms.base import FormController, Prompter
from deptboard.core.store import StateStore

logger = logging.getLogger(__name__)


class CommentFormController(FormController):
    """
    Controller for the inline comment form.

    The form is always visible, so there is no open/close cycle; a blank
    comment is dropped without contacting the server.
    """

    FIELDS = ("author", "content")
    SUBMIT_LABEL = "Post"
    BUSY_LABEL = "Posting..."

    def __init__(self, store: StateStore, prompter: Prompter) -> None:
        super().__init__()
        self.store = store
        self.prompter = prompter
        self.reset()
        self.state.is_open = True

    async def submit(self, values: Mapping[str, str | None] | None = None) -> bool:
        """
        Post the comment and reload the feed.

        Returns:
            True if the comment was posted
        """
        self.fill(values)
        content = self.fields.get("content", "")
        author = self.fields.get("author", "")

        with self.submit_control.busy(self.BUSY_LABEL):
            if not content.strip():
                return False
            try:
                await self.store.api.comments.create(
                    {"content": content, "author": author.strip() or None}
                )
                self.fields["content"] = ""
                await self.store.load_comments()
                return True
            except ApiError as e:
                logger.error("Comment save error: %s", e)
                self.prompter.alert(f"Failed to post comment. (Error: {e})")
                return False

    async def delete_comment(self, comment_id: str) -> bool:
        """Delete a comment after confirmation and reload the feed."""
        if not self.prompter.confirm("Delete this comment?"):
            return False
        try:
            await self.store.api.comments.delete(comment_id)
            await self.store.load_comments()
            return True
        except ApiError as e:
            logger.error("Comment delete error: %s", e)
            self.prompter.alert("Delete failed.")
            return False
