# src/template_literals/core/config/frozen.py
"""
Congelamento da configuração mesclada antes da renderização.

Depois que os overrides são aplicados, a mesma configuração é lida por
todos os templates, possivelmente em paralelo. Este módulo produz uma
visão somente-leitura recursiva dessa árvore:

    - dict  → `types.MappingProxyType`
    - list  → `tuple`
    - escalares são mantidos

Invariantes:
    - Qualquer tentativa de mutação via visão congelada levanta `TypeError`
    - A árvore original não é alterada nem compartilhada pela visão
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


def freeze_config(config: Mapping[str, Any]) -> Mapping[str, Any]:
    """Retorna uma cópia recursivamente imutável de `config`."""
    return _freeze(config)


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def thaw_config(config: Mapping[str, Any]) -> dict:
    """Converte uma visão congelada de volta para `dict`/`list` comuns."""
    return _thaw(config)


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(v) for v in value]
    return value
