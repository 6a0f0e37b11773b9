"""Core building blocks: events, commands, their handlers, sensors and actuators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Something that happened, identified by a unique id."""

    id: int


@dataclass(frozen=True)
class Command:
    """An action to perform, identified by a unique id."""

    id: int


class EventHandler(ABC):
    """Anything that reacts to events."""

    @abstractmethod
    def on(self, event: Event) -> None:
        """React to ``event``."""


class CommandHandler(ABC):
    """Anything that executes commands."""

    @abstractmethod
    def handle(self, command: Command) -> None:
        """Execute ``command``."""


class Device(EventHandler, CommandHandler):
    """A complete device that both reacts to events and executes commands."""

    @abstractmethod
    def on(self, event: Event) -> None:
        """React to an event received by the device."""

    @abstractmethod
    def handle(self, command: Command) -> None:
        """Execute a command issued to the device."""


class Sensor(EventHandler):
    """An input device on a pin that forwards events to an optional handler.

    The ``handler`` attribute may be reassigned at any time; ``None`` means
    events are dropped.
    """

    def __init__(self, pin: int, handler: EventHandler | None = None) -> None:
        self.pin = pin
        self.handler = handler

    def on(self, event: Event) -> None:
        """Forward ``event`` to the handler, if one is set."""
        if self.handler is not None:
            self.handler.on(event)


class Actuator(CommandHandler):
    """An output device on a pin that forwards commands to an optional handler.

    The ``handler`` attribute may be reassigned at any time; ``None`` means
    commands are dropped.
    """

    def __init__(self, pin: int, handler: CommandHandler | None = None) -> None:
        self.pin = pin
        self.handler = handler

    def handle(self, command: Command) -> None:
        """Forward ``command`` to the handler, if one is set."""
        if self.handler is not None:
            self.handler.handle(command)