# rescisao/infrastructure/log.py
#
# Logger do servico com tempo decorrido desde o start.
#
# Design decisions:
#   - Uma unica funcao log() para toda a camada HTTP; o motor de calculo nunca loga.
#   - Sem dependencias externas: stdout com flush para visibilidade imediata.
#   - API_LOG_ENABLED=false silencia as linhas (usado em testes ruidosos).
from __future__ import annotations

import sys
import time

from rescisao.infrastructure.config import get_settings

_start = time.monotonic()


def log(message: str) -> None:
    """Write a timestamped log line to stdout."""
    if not get_settings().log_enabled:
        return
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[rescisao {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
