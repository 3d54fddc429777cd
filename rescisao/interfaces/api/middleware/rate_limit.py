# rescisao/interfaces/api/middleware/rate_limit.py
from __future__ import annotations

import secrets
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from rescisao.infrastructure.config import Settings, get_settings

_JANELA_SEGUNDOS = 60.0


def _chave_valida(request: Request, settings: Settings) -> bool:
    """X-API-Key so libera quando API_KEY esta configurada e a chave confere."""
    informada = request.headers.get("X-API-Key", "")
    if not settings.api_key or not informada:
        return False
    return secrets.compare_digest(informada.encode(), settings.api_key.encode())


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Janela deslizante de 1 minuto por IP de origem."""

    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = {}

    def _recentes(self, client_ip: str, now: float) -> list[float]:
        # IPs sem requisicao na janela saem do dicionario
        recentes = [t for t in self._requests.pop(client_ip, []) if now - t < _JANELA_SEGUNDOS]
        for ip in [ip for ip, ts in self._requests.items() if not ts or now - ts[-1] >= _JANELA_SEGUNDOS]:
            del self._requests[ip]
        return recentes

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()

        # 0 = sem limite (usado em testes)
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        # Integracoes servidor-a-servidor com a chave configurada passam direto
        if _chave_valida(request, settings):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        recentes = self._recentes(client_ip, now)

        if len(recentes) >= settings.rate_limit_per_minute:
            self._requests[client_ip] = recentes
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )

        recentes.append(now)
        self._requests[client_ip] = recentes
        return await call_next(request)
