# src/switchcase/core/switch.py
from __future__ import annotations

from typing import Any, Callable, Generic, Hashable, Mapping, Optional, TypeVar

from switchcase.core import log
from switchcase.core.metrics import inc_counter

__all__ = ["Switch", "HashSwitch", "Producer"]

R = TypeVar("R")
V = TypeVar("V")

Producer = Callable[[], Optional[R]]


class _Base(Generic[R, V]):
    kind = "base"

    def __init__(self, value: V, result: Optional[R] = None):
        self.value = value
        self.result: Optional[R] = result
        self.matched = False
        self.l = log.get(self.kind)

    @classmethod
    def make(cls, value: V):
        return cls(value)

    def _ctx(self) -> dict:
        return {"kind": self.kind, "value": self.value, "result": self.result}

    def _hit(self, result: Optional[R]) -> None:
        self.result = result
        self.matched = True
        inc_counter("switch_match_total", kind=self.kind)
        self.l.debug("match value=%r result=%r", self.value, result, extra=self._ctx())

    def default(self, r: Producer) -> Optional[R]:
        """Runs if result is still None, then returns the result."""
        if self.result is None:
            self.result = r()
            inc_counter("switch_default_total", kind=self.kind)
            self.l.debug("default value=%r result=%r", self.value, self.result, extra=self._ctx())
        return self.result

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value!r}, result={self.result!r})"


class Switch(_Base[R, V]):
    """
    Works like a JavaScript switch...case statement, minus the fall-through:

        Switch.make(3).case(1, lambda: "1").case(3, lambda: "3").default(lambda: "X")

    Every matching case overwrites the result, so with duplicate candidates
    the last match wins.
    """
    kind = "switch"

    def case(self, comp: V, r: Producer) -> "Switch[R, V]":
        """Runs r() if the switch value equals comp."""
        if self.value == comp:
            self._hit(r())
        return self

    def into_map_dispatcher(self, table: Mapping[Any, Any]) -> "HashSwitch[R, Any]":
        hs: HashSwitch[R, Any] = HashSwitch(self.value, self.result)
        hs.matched = self.matched
        return hs.hash_case(table)


class HashSwitch(_Base[R, V]):
    """
    Map-backed switch: cases come in as one table of value -> result.
    Callable table values are producers and only run on a match.
    """
    kind = "hash_switch"

    def hash_case(self, table: Mapping[Hashable, Any]) -> "HashSwitch[R, V]":
        # keys are unique, so at most one entry can match
        if self.value in table:
            hit = table[self.value]
            self._hit(hit() if callable(hit) else hit)
        return self
