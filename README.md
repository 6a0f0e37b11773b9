# modestiot

A small framework for building IoT devices out of **sensors** that raise
events and **actuators** that carry out commands. It also contains a
complete RFID smart lock that runs entirely in simulation.

## Concepts (`modestiot.core`)

- `Event` and `Command` are frozen dataclasses that hold an integer `id`.
  Two events, or two commands, are equal when their ids are equal.
- `EventHandler` is an abstract class. Subclasses react to events in `on(event)`.
- `CommandHandler` is an abstract class. Subclasses execute commands in
  `handle(command)`.
- `Device` is both an `EventHandler` and a `CommandHandler`.
- `Sensor(pin, handler=None)` passes every event it receives in `on` to its
  `handler`. When `handler` is `None`, the event is dropped. You can reassign
  `handler` at any time.
- `Actuator(pin, handler=None)` does the same for commands in `handle`.

## The smart lock

### `modestiot.rc522_chip`

`Rc522Chip(uid=DEFAULT_UID)` simulates an RC522 RFID chip that always has a
card in its field.

- `uid` must be exactly four bytes. Any other length raises `ValueError`.
- `select()` starts a session.
- `deselect()` ends it.
- `transfer(byte)` is a full-duplex exchange. It returns the reply prepared
  by the previous transfer and prepares the next reply from `byte`:
  - `REQUEST_COMMAND` (`0x26`) prepares `CARD_PRESENT` (`0x0A`).
  - `ANTICOLLISION_COMMAND` (`0x93`) prepares the first UID byte. The
    following transfers yield the remaining UID bytes.
  - Anything else prepares `NAK` (`0x00`).
- Calling `transfer` while the chip is not selected raises `RuntimeError`.
  A value outside 0–255 raises `ValueError`.

### `modestiot.rfid_reader`

`SpiBus` is a protocol with three methods: `select()`, `deselect()` and
`transfer(byte)`. `Rc522Chip` satisfies it.

`RfidReader(pin, handler, bus)` is a `Sensor`.

- `loop()` polls the bus once. If a card answers, it reads the four-byte
  UID, raises `RfidReader.CARD_DETECTED_EVENT` (`Event(1)`) to the handler,
  and returns `True`. Otherwise it returns `False`.
- `last_uid()` returns the last UID read. Before any read, it returns
  `DEFAULT_UID`.

### `modestiot.servo_lock`

- `Servo` is an abstract class with one method, `write(angle)`.
- `RecordingServo` stores every angle written in its `angles` list.
- `ServoLock(pin, handler=None, servo=None)` locks (angle 0) as soon as it
  is created. It then reacts to two commands:
  - `ServoLock.UNLOCK_COMMAND` (`Command(2)`) moves the servo to 90.
  - `ServoLock.LOCK_COMMAND` (`Command(1)`) moves it back to 0.
  - Any other command is ignored.
- When `servo` is not given, a `RecordingServo` is used.

### `modestiot.smartlock`

`SmartLockDevice(bus, servo=None, url=DEFAULT_URL, room_id=101, transport=http_post, connected=...)`
ties the pieces together. It holds an `RfidReader` on pin 5 as
`rfid_reader` and a `ServoLock` on pin 14 as `lock`.

When the reader raises `CARD_DETECTED_EVENT`, the device calls
`validate_uid(uid)`:

- It returns `False` if `connected()` is false.
- Otherwise it posts `build_request_body(uid, room_id)` to `url` through
  `transport(url, body)`, which must return a `(status, text)` pair.
- It returns `True` only when the status is 200 and the JSON reply carries a
  true `"access"` value.

The lock then opens when `validate_uid` returns `True` and closes otherwise.

Other members:

- `trigger_rfid_event(event)` feeds an event to the reader, as if the reader
  had raised it.
- `handle(command)` logs the lock state that a lock or unlock command stands
  for.

Helpers:

- `encode_uid(uid)` gives eight upper-case hex digits.
- `build_request_body(uid, room_id)` gives compact JSON such as
  `{"rfid_uid":"01020304","room_id":101}`.
- `http_post(url, body)` is the default transport, built on `urllib`. It
  returns `CONNECTION_FAILED` (`-1`) and an empty text when no response
  arrives.

### Example

```python
from modestiot.rc522_chip import Rc522Chip
from modestiot.servo_lock import RecordingServo
from modestiot.smartlock import SmartLockDevice

def transport(url, body):
    # stand-in for the access service: (status code, response text)
    return 200, '{"access": true}'

servo = RecordingServo()
device = SmartLockDevice(
    bus=Rc522Chip(bytes([0x01, 0x02, 0x03, 0x04])),
    servo=servo,
    url="http://localhost:8000/api/validate-access",
    room_id=101,
    transport=transport,
    connected=lambda: True,
)

device.rfid_reader.loop()   # True: card read, access granted
print(servo.angles)          # [0, 90]
```

Progress messages go to the standard `logging` module, under each module's
name.

## What it does not do

- It does not talk to real hardware. There is no GPIO, SPI or servo driver.
  To use real hardware, supply your own `SpiBus` and `Servo` implementations.
- It has no command-line program.
- It has no polling scheduler. Call `RfidReader.loop()` yourself, as often as
  you need.
- It does not manage network connections. The `connected` callable only
  reports whether the network is up.

## Running the tests

```
pip install -e .[test]
pytest
```