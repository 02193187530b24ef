"""Tests for the interactive frames viewer."""

import asyncio

from webrev.hunks import Hunk
from webrev.ui import FramesApp
from webrev.views import build_frames


def make_app() -> FramesApp:
    base = [f"line{i}" for i in range(1, 41)]
    head = list(base)
    head[9] = "LINE10"
    head[29] = "LINE30"
    hunks = [Hunk(10, ("-line10",), 10, ("+LINE10",)), Hunk(30, ("-line30",), 30, ("+LINE30",))]
    return FramesApp(build_frames(hunks, base, head), "a/file.txt", "b/file.txt")


class TestFramesApp:
    """Tests for FramesApp key bindings."""

    def test_navigation(self):
        async def run():
            app = make_app()
            async with app.run_test() as pilot:
                assert app.sub_title == "Diff BOF of 2"

                await pilot.press("j")
                assert app.position == 1
                assert app.sub_title == "Diff 1 of 2"
                assert app.row_offset == 9 - 2

                await pilot.press("j", "j", "j")
                assert app.position == 3
                assert app.sub_title == "Diff EOF of 2"

                await pilot.press("k")
                assert app.position == 2

                await pilot.press("b")
                assert app.position == 0
                assert app.row_offset == 0

                await pilot.press("e")
                assert app.sub_title == "Diff EOF of 2"

        asyncio.run(run())

    def test_scrolling_is_clamped(self):
        async def run():
            app = make_app()
            async with app.run_test() as pilot:
                await pilot.press("up")
                assert app.row_offset == 0

                await pilot.press("down", "down")
                assert app.row_offset == 2

                await pilot.press("pagedown", "pagedown", "pagedown")
                assert app.row_offset == app.max_offset

        asyncio.run(run())

    def test_quit(self):
        async def run():
            app = make_app()
            async with app.run_test() as pilot:
                await pilot.press("q")
            return app.return_code

        assert asyncio.run(run()) in (0, None)
