# src/template_literals/core/build/builder.py
"""
Builder de templates do template-literals.

Recebe a configuração já mesclada e um conjunto de templates, renderiza
cada template em paralelo e grava a saída no diretório configurado.

Política de execução:
    - A configuração é congelada antes de qualquer template rodar
    - Templates são renderizados em um pool de threads
    - Falhas de um template não interrompem os demais
    - O resultado preserva a ordem de entrada dos templates

Falhas fatais (levantadas antes de qualquer renderização):
    - `outdir` ausente
    - identificadores de template duplicados

Limites explícitos:
    - Não carrega nem mescla configuração (ver `core.config`)
    - Não imprime no console (responsabilidade da CLI)
"""

from __future__ import annotations

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from template_literals.core.config.frozen import freeze_config
from template_literals.core.config.hashing import compute_config_hash
from template_literals.core.errors import exception_to_payload

from .context import BuildContext
from .layout import OutputSink, normalize_output, output_path_for, write_output
from .registry import TemplateRegistry
from .template import Template
from .types import BuildOptions, BuildResult, RenderResult, RenderStatus

logger = logging.getLogger(__name__)


def _render_one(template: Template, ctx: BuildContext, sink: OutputSink) -> RenderResult:
    tid = template.id
    try:
        text = normalize_output(template.render(ctx.config))
        if not text:
            ctx.add_warning(template_id=tid, message="template produziu saída vazia")

        outfile = output_path_for(tid, ctx.options.outdir, indexes=ctx.options.indexes)
        sink(outfile, text)

    except Exception as exc:
        error = exception_to_payload(exc)
        ctx.log(template_id=tid, level="ERROR", message=error.message, error_type=error.type)
        return RenderResult(
            template_id=tid,
            source=template.source,
            status=RenderStatus.FAILED,
            error=error.to_dict(),
        )

    ctx.log(template_id=tid, level="DEBUG", message=f"gravado {outfile}")
    return RenderResult(
        template_id=tid,
        source=template.source,
        status=RenderStatus.SUCCESS,
        output_path=str(outfile),
    )


def generate_from_templates(
    templates: Iterable[Union[str, Path, Template]],
    config: Mapping[str, Any],
    options: BuildOptions,
    *,
    sink: Optional[OutputSink] = None,
) -> BuildResult:
    """
    Renderiza todos os templates com a mesma configuração e grava a saída.

    Args:
        templates: Caminhos de arquivos de template ou objetos `Template`.
        config: Configuração mesclada; é congelada antes do uso.
        options: Opções do build (outdir, layout, paralelismo).
        sink: Função de escrita `(path, text)`; padrão grava em disco.

    Returns:
        BuildResult: Um `RenderResult` por template, na ordem de entrada.

    Raises:
        ValueError: Se `options.outdir` não for informado.
        DuplicateTemplateIdError: Se dois templates tiverem o mesmo id.
    """
    if not options.outdir:
        raise ValueError("Missing required parameter: outdir")

    registry = TemplateRegistry.from_sources(templates)
    ordered = registry.list()

    outdir = Path(options.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    frozen = freeze_config(config)
    ctx = BuildContext(
        build_id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=frozen,
        config_hash=compute_config_hash(frozen),
        options=options,
    )
    logger.info(
        "build %s: %d template(s), config %s", ctx.build_id, len(ordered), ctx.config_hash[:12]
    )

    write = sink or write_output
    results: Dict[int, RenderResult] = {}
    if ordered:
        with ThreadPoolExecutor(max_workers=options.workers_for(len(ordered))) as executor:
            futures = {
                executor.submit(_render_one, template, ctx, write): index
                for index, template in enumerate(ordered)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

    return BuildResult(
        build_id=ctx.build_id,
        config_hash=ctx.config_hash,
        created_at=ctx.created_at.isoformat(),
        results=tuple(results[i] for i in range(len(ordered))),
        events=tuple(ctx.events),
        warnings={k: tuple(v) for k, v in ctx.warnings.items()},
    )
