"""Testing utilities for CompositeLib consumers."""

from .fixtures import CallRecorder, RecordingChild

__all__ = ['CallRecorder', 'RecordingChild']
