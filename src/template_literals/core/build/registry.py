# src/template_literals/core/build/registry.py
"""
Registro de templates de um build (tabela de plugins).

O `TemplateRegistry` mapeia identificador de template → template, e
valida a integridade estrutural antes de qualquer renderização:

    - cada template possui um identificador não vazio
    - não existem identificadores duplicados (dois templates gravariam o
      mesmo arquivo de saída)
    - a ordem de registro é preservada para o relatório final

Limites explícitos:
    - Não importa arquivos de template (isso ocorre na renderização)
    - Não renderiza nem grava saída
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Union

from .template import CallableTemplate, RenderFunc, Template, as_template


class DuplicateTemplateIdError(ValueError):
    """
    Exceção levantada quando dois templates resolvem para o mesmo id.

    Exemplo: `site/about.py` e `blog/about.py` gravariam ambos
    `<outdir>/about.html`. A duplicidade é detectada no registro, antes
    de qualquer saída ser produzida.
    """


@dataclass
class TemplateRegistry:
    """Registro canônico de templates, na ordem de declaração."""

    _templates: Dict[str, Template] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_sources(cls, sources: Iterable[Union[str, Path, Template]]) -> "TemplateRegistry":
        registry = cls()
        for source in sources:
            registry.add(as_template(source))
        return registry

    def add(self, template: Template) -> None:
        template_id = getattr(template, "id", None)
        if not isinstance(template_id, str) or not template_id.strip():
            raise ValueError("template.id must be a non-empty string")

        if template_id in self._templates:
            raise DuplicateTemplateIdError(
                f"Duplicate template id: {template_id} "
                f"({self._templates[template_id].source} / {template.source})"
            )

        self._templates[template_id] = template
        self._order.append(template_id)

    def register(self, template_id: str, func: RenderFunc) -> None:
        self.add(CallableTemplate(id=template_id, func=func))

    def get(self, template_id: str) -> Template:
        return self._templates[template_id]

    def list(self) -> List[Template]:
        return [self._templates[tid] for tid in self._order]

    def __len__(self) -> int:
        return len(self._order)
