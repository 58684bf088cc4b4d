"""Header session provider: trusts the user id forwarded by an auth proxy.

Only deploy behind a proxy that strips client-supplied copies of the header.
"""

from identity.session.port import SessionProvider, UserSession

USER_ID_HEADER = "X-User-Id"


class HeaderSessionProvider(SessionProvider):
    def __init__(self, header_name: str = USER_ID_HEADER):
        self.header_name = header_name

    def current_session(self, request=None) -> UserSession | None:
        if request is None:
            return None
        user_id = (request.headers.get(self.header_name) or "").strip()
        if not user_id:
            return None
        return UserSession(user_id=user_id)
