"""Twilio SMS/MMS command-line client with compact JSON output."""

__version__ = "1.0.0"
