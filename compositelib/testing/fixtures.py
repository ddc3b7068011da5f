"""Test fixtures for CompositeLib consumers.

These helpers build instrumented children so that tests can verify which
children a composite called, in which order, and with which arguments.
"""

from typing import Any, Dict, List, Optional, Tuple


class CallRecorder:
    """Shared, ordered log of calls made on recording children.

    Example:
        recorder = CallRecorder()
        c1 = RecordingChild("c1", recorder, returns={"size": 1})
        c2 = RecordingChild("c2", recorder, returns={"size": 2})
        ...
        assert recorder.names() == ["c1", "c2"]
    """

    def __init__(self):
        self.calls: List[Tuple[str, str, Tuple[Any, ...], Dict[str, Any]]] = []

    def record(self, child_name: str, method: str,
               args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> None:
        self.calls.append((child_name, method, args, kwargs))

    def names(self, method: Optional[str] = None) -> List[str]:
        """Child names in call order, optionally for one method only."""
        return [call[0] for call in self.calls if method is None or call[1] == method]

    def clear(self) -> None:
        self.calls.clear()

    def __len__(self) -> int:
        return len(self.calls)


class RecordingChild:
    """A duck-typed child that records every method call it receives.

    Any attribute that is not defined here resolves to a recording method.
    The method returns ``returns[name]`` (None when absent) or raises
    ``raises[name]`` if set.
    """

    def __init__(self, name: str, recorder: Optional[CallRecorder] = None,
                 returns: Optional[Dict[str, Any]] = None,
                 raises: Optional[Dict[str, BaseException]] = None):
        self.name = name
        self.recorder = recorder if recorder is not None else CallRecorder()
        self.returns = dict(returns or {})
        self.raises = dict(raises or {})

    def __getattr__(self, method: str):
        if method.startswith("__"):
            raise AttributeError(method)

        def recorded(*args, **kwargs):
            self.recorder.record(self.name, method, args, kwargs)
            if method in self.raises:
                raise self.raises[method]
            return self.returns.get(method)

        recorded.__name__ = method
        return recorded

    def __repr__(self) -> str:
        return f"RecordingChild({self.name!r})"
