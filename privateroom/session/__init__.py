"""Session-to-room directory."""

from privateroom.session.directory import SessionDirectory

__all__ = ["SessionDirectory"]
