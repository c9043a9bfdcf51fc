"""Textual integration for tickwork. Opt-in — requires textual.

TextualDocument publishes component output into Textual widgets. A selector
that matches nothing, an app that is not running, or an app inside
``pause()`` all count as a missing target, so the publish is skipped.
"""

from contextlib import contextmanager

from textual.css.query import NoMatches

# Module-owned pause state — keyed by id(app) so multiple apps work in tests.
_paused_apps: set[int] = set()


@contextmanager
def pause(app):
    """Suspend publishing during widget replacement."""
    key = id(app)
    _paused_apps.add(key)
    try:
        yield
    finally:
        _paused_apps.discard(key)


def is_safe(app) -> bool:
    """Is the widget tree in a queryable state?"""
    return app.is_running and id(app) not in _paused_apps


class WidgetTarget:
    """Output target wrapping a widget with an update(content) method."""

    __slots__ = ("widget",)

    def __init__(self, widget):
        self.widget = widget

    def replace(self, content: str) -> None:
        self.widget.update(content)


class TextualDocument:
    """Document that resolves selectors against a Textual app's DOM."""

    def __init__(self, app):
        self.app = app

    def query(self, selector: str):
        if not is_safe(self.app):
            return None
        try:
            widget = self.app.query_one(selector)
        except NoMatches:
            return None
        return WidgetTarget(widget)
