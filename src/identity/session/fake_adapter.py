"""Fake session provider: a fixed caller for testing and development."""

from identity.session.port import SessionProvider, UserSession


class FakeSessionProvider(SessionProvider):
    """Reports the configured user as signed in, or nobody."""

    def __init__(self, user_id: str | None = None):
        self.user_id = user_id

    def configure(self, user_id: str | None = None):
        """Switch the signed-in user; ``None`` signs everyone out."""
        self.user_id = user_id

    def current_session(self, request=None) -> UserSession | None:
        if self.user_id is None:
            return None
        return UserSession(user_id=self.user_id)
