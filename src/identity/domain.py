"""Identity bounded context: users and the checkout details they keep on file."""

import structlog
from protean.domain import Domain

identity = Domain(name="identity")

logger = structlog.get_logger(__name__)
