"""Domain composition: configure and initialize the identity and ordering domains.

Both domains point at the same database. ``DATABASE_URL`` selects a SQLite or
PostgreSQL provider; without it each domain keeps its data in memory.
"""

import structlog
from protean.domain import Domain

from identity.domain import identity
from ordering.domain import ordering
from shared.config import database_config, get_settings

logger = structlog.get_logger(__name__)

DOMAINS = {"identity": identity, "ordering": ordering}

_initialized = False


def configure_domain(domain: Domain) -> None:
    """Apply environment settings to a domain's config before it is initialized."""
    settings = get_settings()
    domain.config["databases"]["default"] = database_config(settings.database_url)
    # Commands and events are handled in-process, inside the caller's request
    domain.config["event_processing"] = "sync"
    domain.config["command_processing"] = "sync"


def init_domains() -> dict[str, Domain]:
    """Configure and initialize every domain once per process."""
    global _initialized
    if not _initialized:
        for name, domain in DOMAINS.items():
            configure_domain(domain)
            domain.init()
            logger.debug("domain_initialized", domain=name)
        _initialized = True
    return DOMAINS
