"""
Session identity adapters.

SessionContext keeps the logged-in user in a context variable, so each
thread and each asyncio task sees its own identity without a global
singleton. StaticSession returns a fixed identity.
"""

from contextvars import ContextVar, Token
from typing import Any

from regaudit.ports.session import SessionUser

_ANONYMOUS = SessionUser()


class SessionContext:
    """
    Context-local session store implementing SessionProvider.

    Example:
        session = SessionContext()

        with session.login("U123", "John"):
            emitter.record(...)  # recorded as John
    """

    def __init__(self) -> None:
        self._user_var: ContextVar[SessionUser] = ContextVar(
            "session_user", default=_ANONYMOUS
        )

    def current_user(self) -> SessionUser:
        """Get the user for the current context (anonymous if unset)."""
        return self._user_var.get()

    def set_user(self, user_id: str | None, name: str | None) -> Token:
        """
        Set the user for the current context.

        Returns:
            A token that can be passed to reset() to restore the
            previous user.
        """
        return self._user_var.set(SessionUser(user_id=user_id, name=name))

    def reset(self, token: Token) -> None:
        """Restore the user that was active before set_user()."""
        self._user_var.reset(token)

    def clear(self) -> None:
        """Log out the current context."""
        self._user_var.set(_ANONYMOUS)

    def login(self, user_id: str | None, name: str | None) -> "SessionScope":
        """
        Scope a user to a block.

        Usage:
            with session.login("U123", "John") as user:
                ...
        """
        return SessionScope(self, SessionUser(user_id=user_id, name=name))


class SessionScope:
    """Context manager for a logged-in block."""

    def __init__(self, context: SessionContext, user: SessionUser) -> None:
        self._context = context
        self._user = user
        self._token: Token | None = None

    def __enter__(self) -> SessionUser:
        self._token = self._context.set_user(self._user.user_id, self._user.name)
        return self._user

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self._token is not None:
            self._context.reset(self._token)
            self._token = None
        return False

    async def __aenter__(self) -> SessionUser:
        return self.__enter__()

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        return self.__exit__(exc_type, exc_val, exc_tb)


class StaticSession:
    """Session provider that always returns the same user."""

    def __init__(self, user_id: str | None = None, name: str | None = None) -> None:
        self._user = SessionUser(user_id=user_id, name=name)

    def current_user(self) -> SessionUser:
        return self._user
