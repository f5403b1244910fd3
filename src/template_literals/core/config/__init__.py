# src/template_literals/core/config/__init__.py
"""
Camada de configuração do template-literals.

Este pacote monta a configuração única entregue a todos os templates de
um build:

    1. `load_config`     → lê o arquivo base (YAML ou JSON)
    2. `apply_overrides` → aplica overrides `caminho=valor` da CLI, em ordem
    3. `freeze_config`   → produz a visão somente-leitura compartilhada

Princípios fundamentais:
    - A configuração é montada inteira antes de qualquer template rodar
    - Erros de configuração nunca são silenciados
    - Nenhuma validação de schema: estruturas desconhecidas passam intactas

Invariantes:
    - A raiz da configuração é sempre um dicionário
    - Nenhuma mutação ocorre depois do congelamento
"""

from .errors import (
    ConfigError,
    ConfigLoadError,
    ConfigNotFoundError,
    IndexOutOfBoundsError,
    InvalidConfigRootTypeError,
    InvalidIndexSegmentError,
    MalformedOverrideError,
    OverrideError,
    PathConflictError,
)
from .frozen import freeze_config, thaw_config
from .hashing import compute_config_hash
from .loader import load_config, resolve_config
from .overrides import Override, apply_override, apply_overrides, decode_value, parse_override

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigNotFoundError",
    "IndexOutOfBoundsError",
    "InvalidConfigRootTypeError",
    "InvalidIndexSegmentError",
    "MalformedOverrideError",
    "OverrideError",
    "PathConflictError",
    "Override",
    "apply_override",
    "apply_overrides",
    "compute_config_hash",
    "decode_value",
    "freeze_config",
    "load_config",
    "parse_override",
    "resolve_config",
    "thaw_config",
]
