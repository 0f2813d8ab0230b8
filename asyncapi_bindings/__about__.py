"""Typed AsyncAPI protocol bindings for servers, channels, operations and messages."""

__version__ = "0.1.0"
