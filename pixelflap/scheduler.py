"""Fire-once deferred callbacks driven by the game loop's clock."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .effects import Effects

Callback = Callable[[], Optional[Effects]]


@dataclass(order=True)
class _Timer:
    due_ms: float
    handle: int
    callback: Callback = field(compare=False)


class Scheduler:
    """Single-threaded timer queue.

    Nothing fires on its own: the loop calls :meth:`advance` once per frame
    with the elapsed time and collects the effects the callbacks return.
    """

    def __init__(self) -> None:
        self.now_ms = 0.0
        self._timers: List[_Timer] = []
        self._handles = itertools.count(1)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def call_later(self, delay_ms: float, callback: Callback) -> int:
        handle = next(self._handles)
        self._timers.append(_Timer(self.now_ms + delay_ms, handle, callback))
        self._timers.sort()
        return handle

    def cancel(self, handle: int) -> bool:
        for timer in self._timers:
            if timer.handle == handle:
                self._timers.remove(timer)
                return True
        return False

    def clear(self) -> None:
        self._timers = []

    def advance(self, elapsed_ms: float) -> Effects:
        self.now_ms += elapsed_ms
        effects: Effects = []
        while self._timers and self._timers[0].due_ms <= self.now_ms:
            timer = self._timers.pop(0)
            effects.extend(timer.callback() or [])
        return effects
