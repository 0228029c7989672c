"""Simulated RFID reader: tag detection by range and field of view."""

__version__ = "0.1.0"
