# api/interfaces/api/main.py
from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.infrastructure.config import get_settings
from api.interfaces.api.middleware.rate_limit import RateLimitMiddleware

app = FastAPI(
    title="Dossie Disciplinar API",
    debug=False,  # NUNCA True em producao
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routers
from api.interfaces.api.routes.comportamento_routes import router as comportamento_router  # noqa: E402
from api.interfaces.api.routes.fato_routes import router as fato_router  # noqa: E402
from api.interfaces.api.routes.painel_routes import router as painel_router  # noqa: E402

app.include_router(comportamento_router, prefix="/api")
app.include_router(fato_router, prefix="/api")
app.include_router(painel_router, prefix="/api")
