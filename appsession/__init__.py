"""Appsession - client-side sessions that expire after inactivity."""

__version__ = "0.1.0"
