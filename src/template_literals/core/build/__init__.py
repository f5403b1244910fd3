# src/template_literals/core/build/__init__.py
"""
Estágio de renderização do template-literals.

Componentes:
    - template → contrato `Template`, `FileTemplate`, `CallableTemplate`
    - registry → `TemplateRegistry` (id → template, sem duplicatas)
    - context  → `BuildContext` (config congelada, eventos, warnings)
    - layout   → caminho de saída (plano/indexes) e normalização
    - builder  → `generate_from_templates` (render paralelo, falhas toleradas)
"""

from .builder import generate_from_templates
from .context import BuildContext
from .errors import TemplateError, TemplateLoadError, TemplateRenderError
from .layout import normalize_output, output_path_for, write_output
from .registry import DuplicateTemplateIdError, TemplateRegistry
from .template import (
    CallableTemplate,
    FileTemplate,
    Template,
    as_template,
    load_template,
    template_id_for,
)
from .types import BuildOptions, BuildResult, RenderResult, RenderStatus

__all__ = [
    "BuildContext",
    "BuildOptions",
    "BuildResult",
    "CallableTemplate",
    "DuplicateTemplateIdError",
    "FileTemplate",
    "RenderResult",
    "RenderStatus",
    "Template",
    "TemplateError",
    "TemplateLoadError",
    "TemplateRegistry",
    "TemplateRenderError",
    "as_template",
    "generate_from_templates",
    "load_template",
    "normalize_output",
    "output_path_for",
    "template_id_for",
    "write_output",
]
