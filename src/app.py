"""Printz FastAPI application.

Brokers print jobs between students and print shops. Commands are processed
synchronously; every request runs inside the printing domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay from domain.toml.
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from printing.domain import printing  # noqa: E402
from printing.utils.logging import bind_request_context, clear_request_context

printing.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Printz API",
    description="Print-shop order brokering: pricing, order lifecycle and shop insights",
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
    """Push the printing domain context and tag log lines with a request id."""
    request_id = request.headers.get("X-Request-ID") or uuid4().hex
    bind_request_context(request_id=request_id, path=request.url.path, method=request.method)
    try:
        with printing.domain_context():
            response = await call_next(request)
    finally:
        clear_request_context()
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from printing.api import order_router, register_error_handlers, shop_router, student_router  # noqa: E402

app.include_router(order_router)
app.include_router(shop_router)
app.include_router(student_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {"printing": {"name": printing.name}},
        }
    )
