"""
Workload chart: number of tasks assigned to each user.
"""

from deptboard.core.store import StoreView
from deptboard.core.views.models import ChartDataset, ChartPayload, StatsView, WorkloadBar

WORKLOAD_COLOR = "#6366f1"


def build_stats(store: StoreView) -> StatsView:
    """
    Count tasks per assignee.

    One bar per user in display order, zero for users without tasks. Tasks
    whose assignee is unset or not a current user are not counted.
    """
    counts = {user.id: 0 for user in store.users}
    for task in store.tasks:
        if task.assignee_id in counts:
            counts[task.assignee_id] += 1

    bars = [
        WorkloadBar(user_id=user.id, name=user.name, count=counts[user.id])
        for user in store.users
    ]

    chart = ChartPayload(
        type="bar",
        labels=[bar.name for bar in bars],
        datasets=[
            ChartDataset(
                label="Assigned tasks",
                data=[bar.count for bar in bars],
                background_color=WORKLOAD_COLOR,
                border_radius=6,
                bar_thickness=32,
            )
        ],
        options={
            "responsive": True,
            "maintainAspectRatio": False,
            "plugins": {"legend": {"display": False}},
            "scales": {
                "y": {"beginAtZero": True, "grid": {"color": "#f1f5f9", "borderDash": [4, 4]}},
                "x": {"grid": {"display": False}},
            },
        },
    )
    return StatsView(bars=bars, chart=chart)
