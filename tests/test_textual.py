"""Tests for tickwork.textual — Textual integration layer."""

import pytest
from textual.css.query import NoMatches

from tickwork import Component
from tickwork import textual as ttx


class _MockWidget:
    def __init__(self):
        self.updates = []

    def update(self, content):
        self.updates.append(content)


class _MockApp:
    """Minimal mock matching the Textual App interface ttx needs."""

    def __init__(self, *, is_running=True, widgets=None):
        self.is_running = is_running
        self.widgets = widgets or {}

    def query_one(self, selector):
        try:
            return self.widgets[selector]
        except KeyError:
            raise NoMatches(selector) from None


class Label(Component):
    el = "#label"

    def get_state(self):
        return {"text": "hi"}

    def get_expressions(self):
        return {}

    def created(self):
        pass

    def render(self):
        return self.text


class TestTextualDocument:
    def test_publishes_to_widget(self, loop, drain):
        widget = _MockWidget()
        app = _MockApp(widgets={"#label": widget})
        label = Label.mount(ttx.TextualDocument(app), loop=loop)
        label.text = "bye"
        drain()
        assert widget.updates == ["bye"]

    def test_no_match_is_skipped(self):
        doc = ttx.TextualDocument(_MockApp())
        assert doc.query("#nothing") is None

    def test_not_running_is_skipped(self):
        app = _MockApp(is_running=False, widgets={"#label": _MockWidget()})
        assert ttx.TextualDocument(app).query("#label") is None

    def test_paused_is_skipped(self, loop, drain):
        widget = _MockWidget()
        app = _MockApp(widgets={"#label": widget})
        label = Label.mount(ttx.TextualDocument(app), loop=loop)
        with ttx.pause(app):
            drain()
        assert widget.updates == []
        label.text = "later"
        drain()
        assert widget.updates == ["later"]


class TestPause:
    def test_pause_restores_on_exception(self):
        app = _MockApp()
        assert ttx.is_safe(app)

        with pytest.raises(RuntimeError):
            with ttx.pause(app):
                assert not ttx.is_safe(app)
                raise RuntimeError("oops")

        assert ttx.is_safe(app)

    def test_multiple_apps_independent(self):
        app_a = _MockApp()
        app_b = _MockApp()
        with ttx.pause(app_a):
            assert not ttx.is_safe(app_a)
            assert ttx.is_safe(app_b)
