"""An RFID reader sensor that polls an RC522 chip over SPI."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import ClassVar, Protocol

from modestiot.core import Event, EventHandler, Sensor
from modestiot.rc522_chip import (
    ANTICOLLISION_COMMAND,
    CARD_PRESENT,
    DEFAULT_UID,
    REQUEST_COMMAND,
    UID_LENGTH,
)

_DUMMY = 0x00


class SpiBus(Protocol):
    """A full-duplex SPI link to a single chip."""

    def select(self) -> None:
        """Pull chip select low to start a session."""

    def deselect(self) -> None:
        """Release chip select to end the session."""

    def transfer(self, byte: int) -> int:
        """Send ``byte`` and return the byte received at the same time."""


class RfidReader(Sensor):
    """Polls for a card and raises :attr:`CARD_DETECTED_EVENT` when one is read."""

    CARD_DETECTED_EVENT: ClassVar[Event] = Event(1)

    def __init__(self, pin: int, handler: EventHandler | None, bus: SpiBus) -> None:
        super().__init__(pin, handler)
        self._bus = bus
        self._last_uid = DEFAULT_UID

    @contextmanager
    def _session(self) -> Iterator[SpiBus]:
        self._bus.select()
        try:
            yield self._bus
        finally:
            self._bus.deselect()

    def loop(self) -> bool:
        """Poll once; return whether a card was read and the event raised."""
        with self._session() as bus:
            bus.transfer(_DUMMY)
            bus.transfer(REQUEST_COMMAND)
            response = bus.transfer(_DUMMY)

        if response != CARD_PRESENT:
            return False

        with self._session() as bus:
            bus.transfer(_DUMMY)
            bus.transfer(ANTICOLLISION_COMMAND)
            uid = bytes(bus.transfer(_DUMMY) for _ in range(UID_LENGTH))

        self._last_uid = uid
        if self.handler is not None:
            self.handler.on(self.CARD_DETECTED_EVENT)
        return True

    def last_uid(self) -> bytes:
        """The UID of the last card read, or the simulated card's before any read."""
        return self._last_uid