"""
A small synchronous publish/subscribe primitive. Every emulator owns one Signal per event
category (status changes, iopub messages, kernel changes, ...).

- Callbacks are called as fn(sender, args), in the order they were connected
- .emit() runs every callback before returning, so an emission that is relayed through
  kernel -> session -> session context is fully observed by the time the triggering call returns
- .connect() returns a zero-argument function that deregisters the callback
"""
from typing import Any, Callable, Generic, List, TypeVar

T = TypeVar("T")

SignalCallback = Callable[[Any, T], Any]


class Signal(Generic[T]):
    def __init__(self, sender: Any, name: str = ""):
        self.sender = sender
        self.name = name
        self._callbacks: List[SignalCallback] = []

    def __repr__(self):
        return f"<Signal {self.name or '?'} callbacks={len(self._callbacks)}>"

    def __len__(self):
        return len(self._callbacks)

    def connect(self, fn: SignalCallback) -> Callable[[], bool]:
        # Connecting the same callback twice is a no-op, otherwise it would be called twice
        # per emission
        if fn not in self._callbacks:
            self._callbacks.append(fn)

        def deregister() -> bool:
            return self.disconnect(fn)

        return deregister

    def disconnect(self, fn: SignalCallback) -> bool:
        try:
            self._callbacks.remove(fn)
        except ValueError:
            return False
        return True

    def disconnect_all(self) -> None:
        self._callbacks.clear()

    def emit(self, args: T) -> None:
        # Iterate over a copy so callbacks can disconnect themselves mid-emission
        for fn in list(self._callbacks):
            fn(self.sender, args)
