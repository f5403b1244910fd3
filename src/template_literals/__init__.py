# src/template_literals/__init__.py
"""
template-literals — renderiza templates Python com uma configuração compartilhada.

Cada template é um arquivo Python que define `render(config) -> str`. A
configuração vem de um arquivo YAML/JSON opcional, ajustado por overrides
`caminho=valor` na linha de comando, e é entregue somente-leitura a todos
os templates.

Arquitetura em alto nível:
    - core.config → load, overrides, congelamento e hashing da configuração
    - core.build  → registro, renderização paralela e escrita da saída
    - cli         → interface `template-literals`
"""

from .core.build import BuildOptions, BuildResult, generate_from_templates
from .core.config import apply_overrides, load_config, resolve_config

__version__ = "1.0.0"

__all__ = [
    "BuildOptions",
    "BuildResult",
    "apply_overrides",
    "generate_from_templates",
    "load_config",
    "resolve_config",
]
