"""A simulated RC522 RFID reader chip that answers over SPI one byte at a time."""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

REQUEST_COMMAND = 0x26
"""Asks whether a card is in the field."""

ANTICOLLISION_COMMAND = 0x93
"""Asks for the UID of the card in the field."""

CARD_PRESENT = 0x0A
"""Reply to :data:`REQUEST_COMMAND` when a card is present."""

NAK = 0x00
"""Reply when the chip has nothing to say."""

DEFAULT_UID = bytes((0xDE, 0xAD, 0xBE, 0xEF))
"""The UID of the card the simulated chip always sees."""

UID_LENGTH = 4


class Rc522Chip:
    """An RC522 chip with a card permanently in its field.

    Each :meth:`transfer` shifts out the byte prepared by the previous one
    while shifting in a command byte, exactly as a full-duplex SPI exchange.
    """

    def __init__(self, uid: Iterable[int] = DEFAULT_UID) -> None:
        uid = bytes(uid)
        if len(uid) != UID_LENGTH:
            raise ValueError(f"a UID holds {UID_LENGTH} bytes, got {len(uid)}")
        self.uid = uid
        self.selected = False
        self._out = NAK
        self._uid_pos: int | None = None
        logger.debug("SPI chip initialized")

    def select(self) -> None:
        """Pull chip select low: the chip starts listening with an empty reply."""
        logger.debug("SPI chip selected")
        self.selected = True
        self._out = NAK

    def deselect(self) -> None:
        """Release chip select: the session ends and any UID read is abandoned."""
        logger.debug("SPI chip deselected")
        self.selected = False
        self._uid_pos = None

    def transfer(self, byte: int) -> int:
        """Exchange one byte: return the pending reply and act on ``byte``."""
        if not self.selected:
            raise RuntimeError("chip is not selected")
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte: {byte}")

        reply = self._out
        if byte == REQUEST_COMMAND:
            self._out = CARD_PRESENT
            self._uid_pos = None
        elif byte == ANTICOLLISION_COMMAND:
            self._uid_pos = 0
            self._out = self._next_uid_byte()
        elif self._uid_pos is not None and self._uid_pos < UID_LENGTH:
            self._out = self._next_uid_byte()
        else:
            self._uid_pos = None
            self._out = NAK
        return reply

    def _next_uid_byte(self) -> int:
        assert self._uid_pos is not None
        value = self.uid[self._uid_pos]
        self._uid_pos += 1
        return value