"""
Tests for the Rich terminal renderer.
"""

from io import StringIO

import pytest
from rich.console import Console

from deptboard.core.router import Page, ViewRouter
from deptboard.core.views import build_comments, build_stats
from deptboard.dashboard import TerminalRenderer
from deptboard.dashboard.renderer import tone_color


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def renderer(output):
    return TerminalRenderer(Console(file=output, width=120))


@pytest.fixture
def router(store, renderer, desk_config, clock):
    return ViewRouter(store, renderer, config=desk_config, clock=clock)


def printed(renderer: TerminalRenderer, output: StringIO) -> str:
    renderer.print_page()
    return output.getvalue()


class TestRenderTarget:
    def test_records_section_nav_and_title(self, renderer, router):
        router.show_page("kanban")
        assert renderer.section is Page.KANBAN
        assert renderer.nav is Page.KANBAN
        assert renderer.title == "Kanban Board"
        assert Page.KANBAN in renderer.pages

    def test_unknown_page(self, renderer, router, output):
        router.show_page("nowhere")
        text = printed(renderer, output)
        assert "Department Dashboard" in text
        assert "Nothing to show" in text

    def test_static_page(self, renderer, router, output):
        router.show_page("files")
        assert "not available in the terminal" in printed(renderer, output)

    def test_unknown_view_type(self, renderer):
        with pytest.raises(TypeError):
            renderer.render_view(object())  # type: ignore[arg-type]


class TestPages:
    @pytest.mark.asyncio
    async def test_dashboard(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("dashboard")
        text = printed(renderer, output)
        assert "Due Soon" in text
        assert "Payroll review" in text
        assert "Archive budget files" not in text

    @pytest.mark.asyncio
    async def test_task_list(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("tasks")
        text = printed(renderer, output)
        assert "Budget report" in text
        assert "Order supplies" in text
        assert "On hold" in text

    @pytest.mark.asyncio
    async def test_task_list_placeholder(self, renderer, router, store, output):
        await store.load_all()
        router.set_task_filters(search="zzz")
        router.show_page("tasks")
        assert "No matching tasks." in printed(renderer, output)

    @pytest.mark.asyncio
    async def test_calendar_agenda(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("calendar")
        text = printed(renderer, output)
        assert "2024-05-03" in text
        assert "Alice - Budget report" in text

    @pytest.mark.asyncio
    async def test_kanban(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("kanban")
        text = printed(renderer, output)
        assert "Pending" in text
        assert "(3)" in text
        assert "Unassigned" in text

    @pytest.mark.asyncio
    async def test_staff(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("staff")
        text = printed(renderer, output)
        assert "3 staff members" in text
        assert "Payroll" in text
        assert "No responsibilities listed" in text

    def test_stats(self, renderer, store_view, output):
        renderer.render(Page.STATS, build_stats(store_view))
        renderer.show_section(Page.STATS)
        text = printed(renderer, output)
        assert "Assigned tasks" in text
        assert "Alice" in text

    @pytest.mark.asyncio
    async def test_comments(self, renderer, router, store, output):
        await store.load_all()
        router.show_page("community")
        text = printed(renderer, output)
        assert "Meeting moved to 3pm" in text
        assert "anonymous" in text

    def test_comments_placeholder(self, renderer, static_store, output):
        renderer.render(Page.COMMUNITY, build_comments(static_store()))
        renderer.show_section(Page.COMMUNITY)
        assert "No comments yet" in printed(renderer, output)


def test_tone_color():
    assert tone_color("rose") == "red"
    assert tone_color("emerald") == "green"
    assert tone_color("plaid") == "white"
