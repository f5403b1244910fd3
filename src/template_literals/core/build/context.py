# src/template_literals/core/build/context.py
"""
Contexto de execução compartilhado de um build.

O `BuildContext` é o único estado compartilhado entre as renderizações
paralelas de um build. Ele consolida:

    - identidade do build (build_id, created_at)
    - configuração mesclada, já congelada, e seu hash
    - opções do build
    - eventos de log estruturados e warnings por template

Invariantes:
    - A configuração do contexto é somente-leitura
    - Logs sempre incluem `build_id` e `template_id`
    - Eventos e warnings podem ser registrados por várias threads
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

from .types import BuildOptions

logger = logging.getLogger(__name__)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


@dataclass
class BuildContext:
    build_id: str
    created_at: datetime
    config: Mapping[str, Any]
    config_hash: str
    options: BuildOptions

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, template_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "template_id": template_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        with self._lock:
            self.events.append(event)
        logger.log(_LEVELS.get(level.upper(), logging.INFO), "[%s] %s", template_id, message)

    def add_warning(self, *, template_id: str, message: str) -> None:
        with self._lock:
            self.warnings.setdefault(template_id, []).append(message)
