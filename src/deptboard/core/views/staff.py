"""
Staff directory cards.
"""

from collections.abc import Collection

from deptboard.core.store import StoreView
from deptboard.core.views.labels import initial
from deptboard.core.views.models import StaffCard, StaffView


def build_staff(store: StoreView, manager_positions: Collection[str] = ()) -> StaffView:
    """
    Build one card per user, in display order.

    Args:
        store: Snapshot to read
        manager_positions: Positions whose cards get the manager header

    Returns:
        StaffView
    """
    cards = [
        StaffCard(
            user_id=user.id,
            name=user.name,
            initial=initial(user.name),
            position=user.position,
            responsibilities=user.responsibilities,
            is_manager=user.position in manager_positions,
        )
        for user in store.users
    ]
    return StaffView(cards=cards)
