"""Event-driven sensors, command-driven actuators and a simulated RFID smart lock."""

__version__ = "0.1.0"