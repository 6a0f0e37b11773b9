import dataclasses

import pytest

from modestiot.core import (
    Actuator,
    Command,
    CommandHandler,
    Device,
    Event,
    EventHandler,
    Sensor,
)


class RecordingEventHandler(EventHandler):
    def __init__(self):
        self.events = []

    def on(self, event):
        self.events.append(event)


class RecordingCommandHandler(CommandHandler):
    def __init__(self):
        self.commands = []

    def handle(self, command):
        self.commands.append(command)


class RecordingDevice(Device):
    def __init__(self):
        self.events = []
        self.commands = []

    def on(self, event):
        self.events.append(event)

    def handle(self, command):
        self.commands.append(command)


def test_event_equality_by_id():
    assert Event(1) == Event(1)
    assert Event(1) != Event(2)
    assert Event(1).id == 1


def test_command_equality_by_id():
    assert Command(2) == Command(2)
    assert Command(1) != Command(2)
    assert Command(2).id == 2


def test_event_and_command_with_same_id_differ():
    assert Event(1) != Command(1)


def test_events_are_hashable_and_deduplicate():
    assert len({Event(1), Event(1), Event(2)}) == 2


def test_event_is_immutable():
    event = Event(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.id = 2
    assert event.id == 1
    assert event == Event(1)


def test_command_is_immutable():
    command = Command(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.id = 2
    assert command.id == 1
    assert command == Command(1)


@pytest.mark.parametrize("cls", [EventHandler, CommandHandler, Device])
def test_interfaces_cannot_be_instantiated(cls):
    with pytest.raises(TypeError):
        cls()


def test_device_requires_both_methods():
    class OnlyEvents(Device):
        def on(self, event):
            pass

    with pytest.raises(TypeError):
        OnlyEvents()

    device = RecordingDevice()
    Sensor(5, device).on(Event(3))
    assert device.events == [Event(3)]


def test_device_is_both_kinds_of_handler():
    device = RecordingDevice()
    device.on(Event(1))
    device.handle(Command(2))
    assert device.events == [Event(1)]
    assert device.commands == [Command(2)]
    assert isinstance(device, EventHandler) and isinstance(device, CommandHandler)


def test_sensor_forwards_events():
    handler = RecordingEventHandler()
    sensor = Sensor(5, handler)
    sensor.on(Event(1))
    sensor.on(Event(2))
    assert handler.events == [Event(1), Event(2)]
    assert sensor.pin == 5


def test_sensor_without_handler_drops_events():
    sensor = Sensor(5)
    sensor.on(Event(1))
    assert sensor.handler is None


def test_sensor_handler_can_be_replaced():
    first = RecordingEventHandler()
    second = RecordingEventHandler()
    sensor = Sensor(5, first)
    sensor.on(Event(1))
    sensor.handler = second
    sensor.on(Event(2))
    sensor.handler = None
    sensor.on(Event(1))
    assert first.events == [Event(1)]
    assert second.events == [Event(2)]


def test_actuator_forwards_commands():
    handler = RecordingCommandHandler()
    actuator = Actuator(14, handler)
    actuator.handle(Command(1))
    assert handler.commands == [Command(1)]
    assert actuator.pin == 14


def test_actuator_without_handler_drops_commands():
    actuator = Actuator(14)
    actuator.handle(Command(1))
    assert actuator.handler is None


def test_actuator_handler_can_be_replaced():
    first = RecordingCommandHandler()
    second = RecordingCommandHandler()
    actuator = Actuator(14, first)
    actuator.handle(Command(1))
    actuator.handler = second
    actuator.handle(Command(2))
    actuator.handler = None
    actuator.handle(Command(1))
    assert first.commands == [Command(1)]
    assert second.commands == [Command(2)]


def test_sensor_can_forward_to_device():
    device = RecordingDevice()
    Sensor(5, device).on(Event(1))
    Actuator(14, device).handle(Command(2))
    assert device.events == [Event(1)]
    assert device.commands == [Command(2)]