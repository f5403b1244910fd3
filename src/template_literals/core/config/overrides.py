# src/template_literals/core/config/overrides.py
"""
Motor canônico de overrides `caminho=valor` sobre a configuração.

Este módulo aplica, em ordem, uma sequência de overrides textuais vindos
da linha de comando sobre a configuração já carregada, mutando-a in-place.

Sintaxe de um override:
    - `caminho=valor`, separado no PRIMEIRO `=`
    - `caminho` é dividido em segmentos por `.`
    - um caminho inteiramente envolvido por um par de aspas iguais
      (`'a.b'` ou `"a.b"`) é uma única chave literal, sem divisão
    - `valor` é decodificado como JSON estrito; se falhar, vira string

Política de travessia:
    - mapeamento + chave ausente (segmento intermediário) → cria `{}`
    - sequência → o segmento deve ser índice `[0-9]+` com `0 <= i < len`
    - escalar no meio do caminho → erro estrutural
    - o segmento terminal sempre substitui o valor anterior (sem deep-merge)

Invariantes:
    - Chaves irmãs nunca são removidas
    - Sequências nunca crescem (apenas substituição ou travessia)
    - Um override que falha não deixa a configuração modificada
    - Overrides posteriores sobrescrevem efeitos de anteriores

Limites explícitos:
    - Não carrega arquivos
    - Não valida schema nem tipos da configuração
    - Não detecta conflitos entre overrides
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple, Union

from .errors import (
    IndexOutOfBoundsError,
    InvalidIndexSegmentError,
    MalformedOverrideError,
    PathConflictError,
)

logger = logging.getLogger(__name__)

_QUOTED_KEY = re.compile(r"^(['\"])(.+)\1$", re.DOTALL)
_INDEX_SEGMENT = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Override:
    """
    Override já interpretado, pronto para ser aplicado.

    Campos:
        - raw: texto original do override (usado em mensagens de erro)
        - path: segmentos do caminho, já sem aspas
        - value: valor decodificado (JSON ou string literal)
    """

    raw: str
    path: Tuple[str, ...]
    value: Any

    @property
    def key(self) -> str:
        return ".".join(self.path)


def _reject_constant(name: str) -> Any:
    # NaN/Infinity não fazem parte do JSON estrito
    raise ValueError(f"constante JSON não suportada: {name}")


def decode_value(raw_value: str) -> Any:
    """
    Decodifica o lado direito de um override.

    `true`, `42`, `{"x":1}` e `["a"]` viram valores tipados; qualquer texto
    que não seja JSON estrito (`hello`, `example.com`) é mantido como string.
    """
    try:
        return json.loads(raw_value, parse_constant=_reject_constant)
    except ValueError:
        return raw_value


def parse_override(raw: str) -> Override:
    """
    Interpreta um override textual `caminho=valor`.

    Decisões arquiteturais:
        - A divisão ocorre no primeiro `=`; o restante pertence ao valor
        - Aspas são removidas uma única vez, sobre a chave inteira
        - Uma chave entre aspas nunca é dividida em `.`

    Args:
        raw (str): Override bruto, ex.: `site.title="Home"`.

    Returns:
        Override: Caminho em segmentos e valor decodificado.

    Raises:
        MalformedOverrideError: Se não houver `=` ou a chave for vazia.
    """
    raw_key, sep, raw_value = raw.partition("=")
    if not sep:
        raise MalformedOverrideError(
            f'Override "{raw}" inválido: esperado formato chave=valor',
            override=raw,
        )
    if not raw_key:
        raise MalformedOverrideError(
            f'Override "{raw}" inválido: chave vazia', override=raw
        )

    quoted = _QUOTED_KEY.match(raw_key)
    if quoted:
        path: Tuple[str, ...] = (quoted.group(2),)
    else:
        path = tuple(raw_key.split("."))

    return Override(raw=raw, path=path, value=decode_value(raw_value))


def _index(seq: List[Any], segment: str, override: Override) -> int:
    if not _INDEX_SEGMENT.fullmatch(segment):
        raise InvalidIndexSegmentError(
            f'Falha ao processar "{override.raw}": segmento "{segment}" '
            f"não é um índice válido de lista",
            override=override.raw,
        )
    index = int(segment)
    if index >= len(seq):
        raise IndexOutOfBoundsError(
            f'Falha ao processar "{override.raw}": índice {index} fora dos '
            f"limites da lista (tamanho {len(seq)})",
            override=override.raw,
        )
    return index


def _conflict(node: Any, segment: str, override: Override) -> PathConflictError:
    return PathConflictError(
        f'Falha ao processar "{override.raw}": não é possível acessar '
        f'"{segment}" em valor do tipo {type(node).__name__}',
        override=override.raw,
    )


def apply_override(config: Dict[str, Any], override: Union[str, Override]) -> Dict[str, Any]:
    """
    Aplica um único override sobre `config`, in-place.

    A travessia percorre primeiro apenas nós existentes; mapeamentos
    intermediários só são criados depois do último ponto em que a
    operação pode falhar.

    Returns:
        Dict[str, Any]: O mesmo objeto `config`, para encadeamento.

    Raises:
        MalformedOverrideError: Override sem `=` ou com chave vazia.
        InvalidIndexSegmentError: Segmento não numérico sobre uma lista.
        IndexOutOfBoundsError: Índice `>= len(lista)`.
        PathConflictError: Caminho atravessa um valor escalar.
    """
    if isinstance(override, str):
        override = parse_override(override)

    segments = override.path
    last = len(segments) - 1
    node: Any = config

    depth = 0
    while depth < last:
        segment = segments[depth]
        if isinstance(node, list):
            node = node[_index(node, segment, override)]
        elif isinstance(node, dict):
            if segment not in node:
                break
            node = node[segment]
        else:
            raise _conflict(node, segment, override)
        depth += 1

    terminal = segments[last]
    if isinstance(node, list):
        node[_index(node, terminal, override)] = override.value
    elif isinstance(node, dict):
        # a partir daqui o caminho é novo: nenhum erro é possível
        for segment in segments[depth:last]:
            node[segment] = {}
            node = node[segment]
        node[terminal] = override.value
    else:
        raise _conflict(node, terminal, override)

    logger.debug("override aplicado: %s = %r", override.key, override.value)
    return config


def apply_overrides(config: Dict[str, Any], overrides: Iterable[str]) -> Dict[str, Any]:
    """
    Aplica uma sequência de overrides em ordem, mutando `config`.

    A política é abortar no primeiro override inválido: a exceção é
    propagada e nenhum override posterior é aplicado.

    Args:
        config (Dict[str, Any]): Configuração carregada (raiz `dict`).
        overrides (Iterable[str]): Overrides brutos `caminho=valor`.

    Returns:
        Dict[str, Any]: O mesmo objeto `config`, já mesclado.
    """
    for raw in overrides:
        apply_override(config, raw)
    return config
