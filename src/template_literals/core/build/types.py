# src/template_literals/core/build/types.py
"""
Tipos canônicos do build de templates.

Componentes principais:
    - RenderStatus → enum de estados finais (SUCCESS, FAILED)
    - RenderResult → resultado imutável da renderização de um template
    - BuildOptions → opções imutáveis de um build
    - BuildResult  → resultado agregado, na ordem de entrada dos templates

Princípios fundamentais:
    - Tipos são estáveis e serializáveis (`to_dict`)
    - Nenhuma lógica de execução vive neste módulo
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

MAX_DEFAULT_JOBS = 8


class RenderStatus(str, Enum):
    """
    Estados finais possíveis da renderização de um template.

    Os valores são strings para facilitar serialização em JSON.

    Estados definidos:
        - SUCCESS: saída renderizada e gravada
        - FAILED: falha de load, render ou escrita (tolerada pelo build)
    """
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class RenderResult:
    """
    Resultado imutável da renderização de um template.

    Campos:
        - template_id: identificador do template (stem do arquivo)
        - source: caminho de origem ou descrição do callable
        - status: estado final
        - output_path: arquivo gravado (apenas em SUCCESS)
        - error: ErrorPayload serializado (apenas em FAILED)
    """
    template_id: str
    source: str
    status: RenderStatus
    output_path: Optional[str] = None
    error: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return self.status == RenderStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "template_id": self.template_id,
            "source": self.source,
            "status": self.status.value,
            "output_path": self.output_path,
            "error": self.error,
        }


@dataclass(frozen=True)
class BuildOptions:
    """
    Opções de um build.

    Campos:
        - outdir: diretório de saída (obrigatório; arquivos são sobrescritos)
        - indexes: layout `<outdir>/<nome>/index.html` em vez de `<nome>.html`
        - jobs: número de workers; `None` → um por template, até 8
    """
    outdir: Union[str, Path, None]
    indexes: bool = False
    jobs: Optional[int] = None

    def workers_for(self, n_templates: int) -> int:
        if self.jobs is not None and self.jobs > 0:
            return self.jobs
        return max(1, min(n_templates, MAX_DEFAULT_JOBS))


@dataclass(frozen=True)
class BuildResult:
    """Resultado agregado de um build (BuildResult v1).

    `created_at` é o instante de início em ISO 8601 (UTC); `events` e
    `warnings` são cópias do `BuildContext` ao fim do build.
    """

    build_id: str
    config_hash: str
    created_at: str
    results: Tuple[RenderResult, ...] = field(default_factory=tuple)
    events: Tuple[Dict[str, Any], ...] = field(default_factory=tuple)
    warnings: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    @property
    def successful(self) -> List[RenderResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> List[RenderResult]:
        return [r for r in self.results if not r.ok]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "build_id": self.build_id,
            "config_hash": self.config_hash,
            "created_at": self.created_at,
            "results": [r.to_dict() for r in self.results],
            "warnings": {k: list(v) for k, v in self.warnings.items()},
        }
