"""Decoders for Linux inet_diag netlink messages, request bodies and socket attributes."""

__version__ = "0.1.0"