"""A door lock driven by a servo motor."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from modestiot.core import Actuator, Command, CommandHandler

logger = logging.getLogger(__name__)

LOCKED_ANGLE = 0
UNLOCKED_ANGLE = 90


class Servo(ABC):
    """A servo motor that can be moved to an angle in degrees."""

    @abstractmethod
    def write(self, angle: int) -> None:
        """Move the servo to ``angle``."""


class RecordingServo(Servo):
    """A servo that remembers every angle it was moved to."""

    def __init__(self) -> None:
        self.angles: list[int] = []

    def write(self, angle: int) -> None:
        """Record a move to ``angle``."""
        self.angles.append(angle)


class ServoLock(Actuator):
    """A lock that opens and closes on command; it closes as soon as it is built."""

    UNLOCK_COMMAND: ClassVar[Command] = Command(2)
    LOCK_COMMAND: ClassVar[Command] = Command(1)

    def __init__(
        self,
        pin: int,
        handler: CommandHandler | None = None,
        servo: Servo | None = None,
    ) -> None:
        super().__init__(pin, handler)
        self.servo = servo if servo is not None else RecordingServo()
        self.servo.write(LOCKED_ANGLE)

    def handle(self, command: Command) -> None:
        """Open on :attr:`UNLOCK_COMMAND`, close on :attr:`LOCK_COMMAND`, ignore others."""
        if command == self.UNLOCK_COMMAND:
            self.servo.write(UNLOCKED_ANGLE)
            logger.info("[ServoLock] lock opened")
        elif command == self.LOCK_COMMAND:
            self.servo.write(LOCKED_ANGLE)
            logger.info("[ServoLock] lock closed")