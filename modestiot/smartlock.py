"""A smart lock: an RFID reader and a servo lock, with access checked by a web service."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from collections.abc import Callable, Iterable

from modestiot.core import Command, Device, Event
from modestiot.rc522_chip import UID_LENGTH
from modestiot.rfid_reader import RfidReader, SpiBus
from modestiot.servo_lock import Servo, ServoLock

logger = logging.getLogger(__name__)

RFID_READER_PIN = 5
LOCK_SERVO_PIN = 14
DEFAULT_ROOM_ID = 101
DEFAULT_URL = "https://example.com/api/validate-access"
HTTP_TIMEOUT = 5.0
CONNECTION_FAILED = -1
"""Status reported by :func:`http_post` when no HTTP response was received."""

Transport = Callable[[str, str], "tuple[int, str]"]


def encode_uid(uid: Iterable[int]) -> str:
    """Render a four-byte UID as eight upper-case hex digits."""
    uid = bytes(uid)
    if len(uid) != UID_LENGTH:
        raise ValueError(f"a UID holds {UID_LENGTH} bytes, got {len(uid)}")
    return uid.hex().upper()


def build_request_body(uid: Iterable[int], room_id: int = DEFAULT_ROOM_ID) -> str:
    """Build the compact JSON body sent to the access service."""
    document = {"rfid_uid": encode_uid(uid), "room_id": room_id}
    return json.dumps(document, separators=(",", ":"))


def http_post(url: str, body: str) -> tuple[int, str]:
    """POST a JSON ``body`` to ``url`` and return the status code and response text.

    Returns :data:`CONNECTION_FAILED` and an empty text when no response came back.
    """
    request = urllib.request.Request(
        url,
        data=body.encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urllib.request.urlopen(request, timeout=HTTP_TIMEOUT) as response:
            return response.status, response.read().decode("utf-8", errors="replace")
    except urllib.error.HTTPError as error:
        return error.code, error.read().decode("utf-8", errors="replace")
    except (urllib.error.URLError, OSError):
        return CONNECTION_FAILED, ""


def _always_connected() -> bool:
    return True


def _as_access(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return False


class SmartLockDevice(Device):
    """Opens the lock when a card the access service accepts is read, closes it otherwise."""

    def __init__(
        self,
        bus: SpiBus,
        servo: Servo | None = None,
        url: str = DEFAULT_URL,
        room_id: int = DEFAULT_ROOM_ID,
        transport: Transport = http_post,
        connected: Callable[[], bool] = _always_connected,
    ) -> None:
        self.url = url
        self.room_id = room_id
        self._transport = transport
        self._connected = connected
        self.rfid_reader = RfidReader(RFID_READER_PIN, self, bus)
        self.lock = ServoLock(LOCK_SERVO_PIN, self, servo)

    def on(self, event: Event) -> None:
        """On a card read, check the card and open or close the lock."""
        if event != RfidReader.CARD_DETECTED_EVENT:
            return
        uid = self.rfid_reader.last_uid()
        if self.validate_uid(uid):
            self.lock.handle(ServoLock.UNLOCK_COMMAND)
            logger.info("[SmartLockDevice] access granted")
        else:
            self.lock.handle(ServoLock.LOCK_COMMAND)
            logger.info("[SmartLockDevice] access denied")

    def handle(self, command: Command) -> None:
        """Report the lock state a lock or unlock command stands for."""
        if command in (ServoLock.LOCK_COMMAND, ServoLock.UNLOCK_COMMAND):
            state = "open" if command == ServoLock.UNLOCK_COMMAND else "closed"
            logger.info("[SmartLockDevice] lock state: %s", state)

    def trigger_rfid_event(self, event: Event) -> None:
        """Inject ``event`` into the RFID reader as if it had raised it."""
        self.rfid_reader.on(event)

    def validate_uid(self, uid: Iterable[int]) -> bool:
        """Ask the access service whether the card ``uid`` may open this room."""
        if not self._connected():
            logger.warning("[SmartLockDevice] network not connected")
            return False

        body = build_request_body(uid, self.room_id)
        logger.info("[SmartLockDevice] JSON sent: %s", body)

        status, text = self._transport(self.url, body)
        logger.info("[SmartLockDevice] HTTP status: %d", status)
        if status != 200:
            return False

        logger.info("[SmartLockDevice] raw response: %s", text)
        try:
            document = json.loads(text)
        except json.JSONDecodeError as error:
            logger.warning("[SmartLockDevice] could not parse JSON: %s", error)
            return False

        if not isinstance(document, dict):
            return False
        return _as_access(document.get("access", False))