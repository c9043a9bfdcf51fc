"""Tests for Cell and Tracker."""

import pytest

from tickwork._tracking import Tracker
from tickwork.computed import Computation
from tickwork.observable import Cell


class TestCell:
    def test_get_set(self):
        c = Cell("x", 42, Tracker())
        assert c.get() == 42
        c.set(100)
        assert c.get() == 100

    def test_read_outside_evaluation_records_nothing(self):
        c = Cell("x", 1, Tracker())
        c.get()
        assert c.dependents == ()

    def test_repeated_reads_record_once(self):
        tracker = Tracker()
        c = Cell("x", 2, tracker)
        runs = []

        def fn():
            runs.append(1)
            return c.get() + c.get() + c.get()

        comp = Computation("triple", fn, tracker)
        comp.update()
        assert c.dependents == (comp,)

        runs.clear()
        c.set(3)
        assert runs == [1]
        assert comp.value == 9

    def test_same_value_still_notifies(self):
        tracker = Tracker()
        c = Cell("x", 5, tracker)
        runs = []
        comp = Computation("watch", lambda: runs.append(c.get()), tracker)
        comp.update()
        c.set(5)
        assert runs == [5, 5]

    def test_write_records_nothing(self):
        tracker = Tracker()
        c = Cell("x", 0, tracker)
        comp = Computation("writer", lambda: c.set(1), tracker)
        comp.update()
        assert c.dependents == ()

    def test_first_read_order(self):
        tracker = Tracker()
        c = Cell("x", 0, tracker)
        a = Computation("a", lambda: c.get(), tracker)
        b = Computation("b", lambda: c.get(), tracker)
        a.update()
        b.update()
        a.update()
        assert c.dependents == (a, b)

    def test_repr(self):
        assert repr(Cell("x", 5, Tracker())) == "Cell(x=5)"


class TestTracker:
    def test_marker_cleared_after_evaluation(self):
        tracker = Tracker()
        comp = Computation("c", lambda: 1, tracker)
        seen = []
        with tracker.evaluating(comp):
            seen.append(tracker.active)
        assert seen == [comp]
        assert tracker.active is None

    def test_marker_restored_on_exception(self):
        tracker = Tracker()
        comp = Computation("c", lambda: 1 / 0, tracker)
        with pytest.raises(ZeroDivisionError):
            comp.update()
        assert tracker.active is None

    def test_trackers_are_independent(self):
        t1, t2 = Tracker(), Tracker()
        other = Cell("x", 1, t2)
        comp = Computation("c", lambda: other.get(), t1)
        comp.update()
        assert other.dependents == ()

    def test_nested_update_clears_marker(self):
        tracker = Tracker()
        x = Cell("x", 0, tracker)
        y = Cell("y", 0, tracker)
        z = Cell("z", 0, tracker)
        inner = Computation("inner", lambda: y.get(), tracker)
        inner.update()

        def outer_fn():
            x.get()
            y.set(1)
            return z.get()

        outer = Computation("outer", outer_fn, tracker)
        outer.update()
        assert x.dependents == (outer,)
        assert z.dependents == ()
        assert tracker.active is None
