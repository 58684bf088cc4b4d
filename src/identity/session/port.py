"""Session port: abstract interface for resolving the calling user.

Authentication itself happens elsewhere (an auth proxy, an identity
service). Adapters only translate whatever that system hands us into a
``UserSession``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserSession:
    user_id: str


class SessionProvider(ABC):
    """Abstract interface for session adapters."""

    @abstractmethod
    def current_session(self, request=None) -> UserSession | None:
        """Return the caller's session, or None when nobody is signed in."""
        ...
