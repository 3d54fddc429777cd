# rescisao/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rescisao.application.dtos.rescisao_dto import campo_json
from rescisao.domain.calculo.exceptions import EntradaInvalidaError
from rescisao.infrastructure.config import get_settings
from rescisao.infrastructure.log import log
from rescisao.interfaces.api.middleware.rate_limit import RateLimitMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings = get_settings()
    log(f"api iniciada (rate_limit={settings.rate_limit_per_minute}/min)")
    yield


app = FastAPI(
    title="Calculadora de Rescisao API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
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


@app.exception_handler(EntradaInvalidaError)
async def entrada_invalida_handler(request: Request, exc: EntradaInvalidaError) -> JSONResponse:
    campo = campo_json(exc.campo)
    log(f"entrada rejeitada: {campo} ({exc.motivo})")
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": f"{campo}: {exc.motivo}", "field": campo},
    )


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

from rescisao.interfaces.api.routes.calculadora_routes import router as calculadora_router  # noqa: E402
from rescisao.interfaces.api.routes.health_routes import router as health_router  # noqa: E402

app.include_router(calculadora_router, prefix="/api")
app.include_router(health_router, prefix="/api")
