"""Adapters connecting the core to transports and the stdlib logging module."""
