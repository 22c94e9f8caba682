from .progress import ProgressEvent, ProgressRecorder, ProgressSink, log_progress, no_progress

__all__ = ["ProgressEvent", "ProgressRecorder", "ProgressSink", "log_progress", "no_progress"]
