"""Session package."""

from cirrus.session.context import SessionContext

__all__ = ["SessionContext"]
