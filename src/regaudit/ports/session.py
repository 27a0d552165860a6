"""
Session identity port.

The emitter only needs to know who is logged in right now. Where that
identity lives (a context variable, a web session, a desktop login) is
up to the adapter.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class SessionUser:
    """
    Identity of the active user.

    Either field may be None when no one is logged in or the session
    carries a partial identity.
    """

    user_id: str | None = None
    name: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None and self.name is None


@runtime_checkable
class SessionProvider(Protocol):
    """Protocol for reading the currently active user."""

    def current_user(self) -> SessionUser:
        """
        Return the active user.

        Must not raise when no session exists; return an empty
        SessionUser instead.
        """
        ...
