"""
Unit tests for solution/why disclosure toggles.
"""

from eju_toolkit.runtime.disclosure import DisclosureController


class TestDisclosureController:

    def test_closed_by_default(self):
        disclosure = DisclosureController()

        assert not disclosure.is_open("q1")
        assert not disclosure.is_why_open("q1", 0)

    def test_toggle_returns_new_state(self):
        disclosure = DisclosureController()

        assert disclosure.toggle("q1") is True
        assert disclosure.toggle("q1") is False
        assert not disclosure.is_open("q1")

    def test_toggles_are_independent(self):
        disclosure = DisclosureController()

        disclosure.toggle("q1")
        disclosure.toggle_why("q1", 0)

        assert disclosure.is_open("q1")
        assert not disclosure.is_open("q2")
        assert disclosure.is_why_open("q1", 0)
        assert not disclosure.is_why_open("q1", 1)
        assert not disclosure.is_why_open("q2", 0)

    def test_closing_solution_keeps_why_state(self):
        disclosure = DisclosureController()
        disclosure.open("q1")
        disclosure.toggle_why("q1", 2)

        disclosure.close("q1")

        assert disclosure.is_why_open("q1", 2)

    def test_open_and_close_are_idempotent(self):
        disclosure = DisclosureController()

        disclosure.open("q1")
        disclosure.open("q1")
        assert disclosure.open_count == 1

        disclosure.close("q1")
        disclosure.close("q1")
        assert disclosure.open_count == 0

    def test_reset_closes_everything(self):
        disclosure = DisclosureController()
        disclosure.toggle("q1")
        disclosure.toggle_why("q2", 0)

        disclosure.reset()

        assert disclosure.open_count == 0
