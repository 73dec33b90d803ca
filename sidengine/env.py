"""The machine environment that chips use to signal the rest of the system."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .events import EventScheduler


class C64Env(ABC):
    """Connects chip emulations to the machine they are part of.

    Subclasses route interrupts and bus signals. Every component shares the
    scheduler passed in here.
    """

    def __init__(self, scheduler: EventScheduler) -> None:
        self._scheduler = scheduler

    def scheduler(self) -> EventScheduler:
        """Return the event scheduler shared by all components."""
        return self._scheduler

    @abstractmethod
    def interrupt_irq(self, state: bool) -> None:
        """Raise or clear the IRQ line."""

    @abstractmethod
    def interrupt_nmi(self) -> None:
        """Trigger a non-maskable interrupt."""

    @abstractmethod
    def interrupt_rst(self) -> None:
        """Trigger a reset."""

    @abstractmethod
    def set_ba(self, state: bool) -> None:
        """Set the bus-available line."""

    @abstractmethod
    def lightpen(self, state: bool) -> None:
        """Set the light pen input."""