# src/template_literals/core/config/hashing.py
"""
Hashing canônico da configuração mesclada.

O hash identifica a configuração efetiva entregue aos templates de um
build e é registrado no `BuildResult` e no log verboso, permitindo
comparar builds sem despejar a configuração inteira.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input
"""

import json
import hashlib
from typing import Any, Mapping


def _plain(value: Any) -> Any:
    # aceita a visão congelada (MappingProxyType/tuple) além de dict/list
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


def compute_config_hash(config: Mapping[str, Any]) -> str:
    """
    Gera um hash determinístico da configuração efetiva.

    Args:
        config (Mapping[str, Any]): Configuração mesclada (mutável ou congelada).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.

    Raises:
        TypeError: Se o objeto fornecido não for um mapeamento.
    """

    if not isinstance(config, Mapping):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        _plain(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    # strings JSON válidas podem conter surrogates isolados ("\ud800")
    return hashlib.sha256(canonical_json.encode("utf-8", "surrogatepass")).hexdigest()
