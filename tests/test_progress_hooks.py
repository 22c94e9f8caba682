import logging

import numpy as np

from moge.hooks import ProgressEvent, ProgressRecorder, log_progress, no_progress


def _event(percentage=50):
    return ProgressEvent(generation=5, max_generations=10, percentage=percentage, objectives=np.array([[1.0, 2.5], [3.0, 0.5]]))


def test_log_progress_info(caplog):
    with caplog.at_level(logging.INFO, logger="moge"):
        log_progress(_event(30))
    assert "30% performed" in caplog.text
    assert "2.5" not in caplog.text


def test_log_progress_debug_includes_objectives(caplog):
    with caplog.at_level(logging.DEBUG, logger="moge"):
        log_progress(_event())
    assert "Gen. 5" in caplog.text
    assert "1;2.5" in caplog.text
    assert "3;0.5" in caplog.text


def test_recorder_keeps_events_in_order():
    recorder = ProgressRecorder()
    recorder(_event(10))
    recorder(_event(20))
    assert recorder.percentages == [10, 20]
    assert recorder.events[0].generation == 5


def test_no_progress_is_silent(caplog):
    with caplog.at_level(logging.DEBUG, logger="moge"):
        assert no_progress(_event()) is None
    assert caplog.text == ""
