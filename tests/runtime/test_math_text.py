"""
Unit tests for math text rendering.
"""

from unittest.mock import MagicMock

import pytest

from eju_toolkit.runtime.math_text import MATH_DELIMITERS, MathRenderer, split_lines
from eju_toolkit.runtime.resources import ResourceLoader


@pytest.fixture
def fetcher():
    """Fetcher whose scripts load synchronously."""
    fetcher = MagicMock()
    fetcher.add_script.side_effect = lambda src, on_load: on_load()
    return fetcher


@pytest.fixture
def engine():
    return MagicMock()


class TestSplitLines:

    def test_split_on_newlines(self):
        assert split_lines("a\nb\n") == ["a", "b", ""]

    def test_none_is_single_empty_line(self):
        assert split_lines(None) == [""]

    def test_non_string_coerced(self):
        assert split_lines(42) == ["42"]


class TestMathRenderer:

    def test_delimiters_try_display_first(self):
        assert [d.to_dict() for d in MATH_DELIMITERS] == [
            {"left": "$$", "right": "$$", "display": True},
            {"left": "$", "right": "$", "display": False},
        ]

    def test_to_html_breaks_between_lines(self, engine):
        renderer = MathRenderer("a\nb", MagicMock(), engine)

        assert renderer.to_html() == "<div><span>a<br /></span><span>b</span></div>"

    def test_to_html_escapes_markup(self, engine):
        renderer = MathRenderer("$a<b$ & c", MagicMock(), engine)

        assert "<span>$a&lt;b$ &amp; c</span>" in renderer.to_html()

    def test_mount_typesets_once_ready(self, fetcher, engine):
        renderer = MathRenderer("$x$", ResourceLoader(fetcher), engine)

        renderer.mount()

        assert renderer.ready
        engine.render_math_in_element.assert_called_once_with(renderer, MATH_DELIMITERS)

    def test_mount_before_ready_does_not_typeset(self, engine):
        fetcher = MagicMock()
        renderer = MathRenderer("$x$", ResourceLoader(fetcher), engine)

        renderer.mount()

        assert not renderer.ready
        engine.render_math_in_element.assert_not_called()

    def test_many_renderers_share_one_acquisition(self, engine):
        fetcher = MagicMock()
        loader = ResourceLoader(fetcher)
        renderers = [MathRenderer(f"${i}$", loader, engine) for i in range(3)]
        for r in renderers:
            r.mount()

        # Finish the script chain by hand
        while not loader.is_ready:
            _, on_load = fetcher.add_script.call_args.args
            on_load()

        fetcher.add_stylesheet.assert_called_once()
        assert fetcher.add_script.call_count == 2
        assert all(r.typeset_count == 1 for r in renderers)

    def test_mount_twice_before_ready_typesets_once(self, engine):
        fetcher = MagicMock()
        loader = ResourceLoader(fetcher)
        renderer = MathRenderer("$x$", loader, engine)

        renderer.mount()
        renderer.mount()
        assert loader.pending == 1

        while not loader.is_ready:
            _, on_load = fetcher.add_script.call_args.args
            on_load()

        assert renderer.typeset_count == 1

    def test_set_text_when_ready_retypesets(self, fetcher, engine):
        renderer = MathRenderer("$x$", ResourceLoader(fetcher), engine)
        renderer.mount()

        renderer.set_text("$y$")

        assert renderer.text == "$y$"
        assert renderer.typeset_count == 2

    def test_set_text_when_unchanged_then_noop(self, fetcher, engine):
        renderer = MathRenderer("$x$", ResourceLoader(fetcher), engine)
        renderer.mount()

        renderer.set_text("$x$")

        assert renderer.typeset_count == 1

    def test_set_text_before_ready_only_updates_text(self, engine):
        renderer = MathRenderer("$x$", ResourceLoader(MagicMock()), engine)
        renderer.mount()

        renderer.set_text("$y$")

        assert renderer.lines == ["$y$"]
        engine.render_math_in_element.assert_not_called()

    def test_renderer_created_after_ready_is_ready(self, fetcher, engine):
        loader = ResourceLoader(fetcher)
        loader.ensure(MagicMock())

        renderer = MathRenderer("$x$", loader, engine)
        renderer.mount()

        assert renderer.typeset_count == 1
