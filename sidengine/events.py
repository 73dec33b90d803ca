"""A two-phase event scheduler driving the emulated machine clock."""

from __future__ import annotations

import bisect
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum
from operator import attrgetter


class EventPhase(IntEnum):
    """Half-cycle phases: PHI1 for auxiliary chips, PHI2 for the CPU."""

    PHI1 = 0
    PHI2 = 1


class Event(ABC):
    """Something to be run by the scheduler at a given time."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.trigger_time = 0

    @abstractmethod
    def event(self) -> None:
        """Run the event; it may reschedule itself."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class EventCallback(Event):
    """An event that calls a function when it fires."""

    def __init__(self, name: str, callback: Callable[[], None]) -> None:
        super().__init__(name)
        self._callback = callback

    def event(self) -> None:
        self._callback()


_by_trigger = attrgetter("trigger_time")


class EventScheduler:
    """Keeps pending events ordered by trigger time on a double-rate clock.

    The internal clock runs at twice the visible clock; even ticks are PHI1,
    odd ticks PHI2.
    """

    def __init__(self) -> None:
        self._queue: list[Event] = []
        self._current_time = 0

    @property
    def current_time(self) -> int:
        """The internal (double-rate) clock value."""
        return self._current_time

    def _insert(self, event: Event) -> None:
        index = bisect.bisect_right(
            self._queue, event.trigger_time, key=_by_trigger
        )
        self._queue.insert(index, event)

    def schedule(
        self, event: Event, cycles: int, phase: EventPhase | None = None
    ) -> None:
        """Queue ``event`` to fire ``cycles`` cycles from now.

        Without ``phase`` the event fires in the current phase; with it, the
        next slot of that phase is used.
        """
        offset = 0 if phase is None else (self._current_time & 1) ^ int(phase)
        event.trigger_time = self._current_time + offset + (cycles << 1)
        self._insert(event)

    def cancel(self, event: Event) -> None:
        """Remove ``event`` from the queue if it is pending."""
        for index, pending in enumerate(self._queue):
            if pending is event:
                del self._queue[index]
                break

    def reset(self) -> None:
        """Drop all pending events and rewind the clock."""
        self._queue.clear()
        self._current_time = 0

    def clock(self) -> None:
        """Fire the next event, advancing the clock to its time."""
        if not self._queue:
            raise LookupError("no pending events")
        event = self._queue.pop(0)
        self._current_time = event.trigger_time
        event.event()

    def is_pending(self, event: Event) -> bool:
        """Tell whether ``event`` is waiting in the queue."""
        return any(pending is event for pending in self._queue)

    def get_time(self, phase: EventPhase) -> int:
        """Return the visible clock with respect to ``phase``."""
        return (self._current_time + (int(phase) ^ 1)) >> 1

    def phase(self) -> EventPhase:
        """Return the current clock phase."""
        return EventPhase(self._current_time & 1)

    def remaining(self, event: Event) -> int:
        """Internal ticks left before ``event`` fires."""
        return event.trigger_time - self._current_time