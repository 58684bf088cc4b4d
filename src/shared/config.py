"""Runtime configuration read from environment variables.

Settings are resolved once per process. Tests call ``reset_settings()`` after
changing the environment.
"""

import os
from dataclasses import dataclass, field

_settings_instance = None

DEFAULT_PAYMENT_METHODS = ("PayPal", "Stripe", "CashOnDelivery")


def get_env() -> str:
    """Return the current environment name (development, test, staging, production)."""
    return (os.getenv("PROTEAN_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    database_url: str | None = None
    page_size: int = 10
    payment_methods: tuple[str, ...] = field(default=DEFAULT_PAYMENT_METHODS)
    session_provider: str = "header"

    @classmethod
    def from_env(cls) -> "Settings":
        methods = os.getenv("PAYMENT_METHODS")
        return cls(
            env=get_env(),
            database_url=os.getenv("DATABASE_URL") or None,
            page_size=int(os.getenv("PAGE_SIZE", cls.page_size)),
            payment_methods=(
                tuple(m.strip() for m in methods.split(",") if m.strip()) if methods else DEFAULT_PAYMENT_METHODS
            ),
            session_provider=os.getenv("SESSION_PROVIDER", cls.session_provider),
        )


def database_config(database_url: str | None) -> dict:
    """Translate a database URL into a Protean database provider entry.

    No URL means the in-memory provider.
    """
    if not database_url:
        return {"provider": "memory"}
    if database_url.startswith("sqlite"):
        return {"provider": "sqlite", "database_uri": database_url}
    if database_url.startswith("postgresql"):
        return {"provider": "postgresql", "database_uri": database_url}
    raise ValueError(f"Unsupported database URL: {database_url}")


def get_settings() -> Settings:
    """Return the process-wide settings (singleton)."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings.from_env()
    return _settings_instance


def reset_settings():
    """Reset the settings singleton (useful for testing)."""
    global _settings_instance
    _settings_instance = None
