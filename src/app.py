"""Storefront FastAPI application.

Serves the ordering endpoints. Each request is wrapped in the domain context
its URL prefix belongs to; caller identity comes from the configured session
provider.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ordering.utils.logging import add_context, clear_context, configure_logging
from shared.config import get_settings
from shared.domains import init_domains
from shared.errors import AuthenticationRequired, InvalidPageRequest

configure_logging()

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay; DATABASE_URL picks the provider.
domains = init_domains()

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/orders": domains["ordering"],
    "/api/orders": domains["ordering"],
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="E-commerce storefront: order placement and order history",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Bind request logging context and push the matching domain context."""
    clear_context()
    add_context(request_id=request.headers.get("X-Request-Id") or uuid4().hex, path=request.url.path)
    try:
        domain = _resolve_domain(request.url.path)
        if domain is not None:
            with domain.domain_context():
                return await call_next(request)
        # Health check, docs
        return await call_next(request)
    finally:
        clear_context()


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.exception_handler(AuthenticationRequired)
async def authentication_required_handler(request: Request, exc: AuthenticationRequired):
    return JSONResponse(status_code=401, content={"detail": str(exc)})


@app.exception_handler(InvalidPageRequest)
async def invalid_page_request_handler(request: Request, exc: InvalidPageRequest):
    logger.info("bad_page_request", error=str(exc))
    return JSONResponse(status_code=400, content={"detail": str(exc)})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from ordering.api import api_order_router, order_router  # noqa: E402

app.include_router(order_router)
app.include_router(api_order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "env": get_settings().env,
            "domains": {name: {"name": domain.name} for name, domain in domains.items()},
        }
    )
