"""Tests for parallel glyph task execution."""

import threading
import time

import pytest

from glyphspack.core.pool import run_glyph_tasks
from glyphspack.exceptions import GlyphTaskError, SchemaError


class TestRunGlyphTasks:
    """Tests for run_glyph_tasks."""

    def test_results_in_submission_order(self):
        """Test that results follow the input order, not completion order."""

        def task(item):
            time.sleep(0.01 * (5 - item))
            return item * 10

        assert run_glyph_tasks(task, [0, 1, 2, 3, 4], max_workers=5) == [0, 10, 20, 30, 40]

    def test_empty_input(self):
        """Test that no tasks means no results and no callbacks."""
        calls = []
        results = run_glyph_tasks(lambda item: item, [], progress_callback=calls.append)
        assert results == []
        assert calls == []

    def test_single_worker(self):
        assert run_glyph_tasks(str.upper, ["a", "b"], max_workers=1) == ["A", "B"]

    def test_progress_callback(self):
        """Test progress reports for every completed task."""
        calls = []
        lock = threading.Lock()

        def on_progress(completed, total, name):
            with lock:
                calls.append((completed, total, name))

        run_glyph_tasks(
            lambda item: item,
            ["A", "B", "C"],
            describe=lambda item: f"/{item}",
            max_workers=2,
            progress_callback=on_progress,
        )

        assert [call[0] for call in calls] == [1, 2, 3]
        assert {call[1] for call in calls} == {3}
        assert sorted(call[2] for call in calls) == ["/A", "/B", "/C"]

    def test_glyphspack_error_propagates_unchanged(self):
        error = SchemaError("glyphs/A_.glyph", "missing glyphname")

        def task(item):
            if item == "A":
                raise error
            return item

        with pytest.raises(SchemaError) as exc_info:
            run_glyph_tasks(task, ["A", "B"])
        assert exc_info.value is error

    def test_earliest_failure_wins(self):
        """Test that the first submitted failure is raised even if it finishes last."""

        def task(item):
            if item == 1:
                time.sleep(0.2)
                raise SchemaError(f"glyph{item}", "slow failure")
            if item == 3:
                raise SchemaError(f"glyph{item}", "fast failure")
            return item

        with pytest.raises(SchemaError, match="slow failure"):
            run_glyph_tasks(task, [0, 1, 2, 3], max_workers=4)

    def test_unexpected_error_wrapped(self):
        """Test that unexpected exceptions become GlyphTaskError."""

        def task(item):
            raise ValueError(f"bad value in {item}")

        with pytest.raises(GlyphTaskError) as exc_info:
            run_glyph_tasks(task, ["x"], describe=lambda item: f"glyph-{item}")

        error = exc_info.value
        assert error.glyph_name == "glyph-x"
        assert "bad value in x" in str(error)
        assert isinstance(error.__cause__, ValueError)

    def test_failure_cancels_pending_tasks(self):
        """Test that tasks not yet started are skipped after a failure."""
        started = []
        lock = threading.Lock()

        def task(item):
            with lock:
                started.append(item)
            if item == 0:
                raise SchemaError("glyph0", "fails first")
            time.sleep(0.05)
            return item

        with pytest.raises(SchemaError):
            run_glyph_tasks(task, list(range(50)), max_workers=1)

        assert len(started) < 50
