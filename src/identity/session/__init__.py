"""Session provider abstraction: pluggable caller identity resolution."""

from shared.config import get_settings

_provider_instance = None


def get_session_provider():
    """Return the configured session provider (singleton).

    Uses HeaderSessionProvider by default. Configure via the
    SESSION_PROVIDER environment variable ("header" or "fake").
    """
    global _provider_instance
    if _provider_instance is None:
        adapter = get_settings().session_provider
        if adapter == "header":
            from identity.session.header_adapter import HeaderSessionProvider

            _provider_instance = HeaderSessionProvider()
        elif adapter == "fake":
            from identity.session.fake_adapter import FakeSessionProvider

            _provider_instance = FakeSessionProvider()
        else:
            raise ValueError(f"Unknown session provider: {adapter}")
    return _provider_instance


def reset_session_provider():
    """Reset the session provider singleton (useful for testing)."""
    global _provider_instance
    _provider_instance = None
