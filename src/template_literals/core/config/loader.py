# src/template_literals/core/config/loader.py
"""
Loader canônico da configuração base do template-literals.

Este módulo é responsável por ler o arquivo de configuração informado
pelo usuário (`--config`) e produzir a árvore de configuração em memória
que depois recebe os overrides da linha de comando.

Política de formato:
    - extensão `.json` → decodificação JSON
    - qualquer outra extensão → decodificação YAML (PyYAML, `safe_load`)

Princípios fundamentais:
    - Exatamente uma leitura bloqueante por build
    - Nenhuma validação de schema ou de conteúdo além do parse
    - Falhas de leitura ou parse são fatais e preservam o diagnóstico

Invariantes:
    - O resultado é sempre um dicionário (`dict`)
    - Sem caminho de configuração, o resultado é `{}` (não é erro)
    - Arquivos vazios são interpretados como `{}`

Limites explícitos:
    - Não aplica overrides (ver `overrides.py`)
    - Não congela a configuração (ver `frozen.py`)
    - Não interage com templates ou com o build
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import yaml  # PyYAML

from .errors import (
    ConfigLoadError,
    ConfigNotFoundError,
    InvalidConfigRootTypeError,
)
from .overrides import apply_overrides

logger = logging.getLogger(__name__)


def _decode(text: str, *, path: Path) -> Any:
    """
    Decodifica o conteúdo textual conforme a extensão do arquivo.

    Raises:
        ConfigLoadError: Se o parser rejeitar o conteúdo.
    """
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigLoadError(
                f"JSON inválido em {path}: {exc}", path=str(path)
            ) from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(
            f"YAML inválido em {path}: {exc}", path=str(path)
        ) from exc


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Carrega a configuração base a partir de um arquivo YAML ou JSON.

    Decisões arquiteturais:
        - `None` (ou string vazia) significa "sem config": retorna `{}`
        - O formato é decidido apenas pela extensão, nunca pelo conteúdo
        - Erros do parser são encadeados na `ConfigLoadError`

    Args:
        path (Optional[str | Path]): Caminho do arquivo de configuração.

    Returns:
        Dict[str, Any]: Configuração base com raiz do tipo mapeamento.

    Raises:
        ConfigNotFoundError: Se o arquivo não existir.
        ConfigLoadError: Se o arquivo não puder ser lido ou decodificado.
        InvalidConfigRootTypeError: Se a raiz decodificada não for um `dict`.
    """
    if path is None or str(path) == "":
        logger.debug("Nenhum arquivo de config informado; usando config vazia")
        return {}

    config_file = Path(path)
    if not config_file.exists():
        raise ConfigNotFoundError(
            f"Arquivo de configuração não encontrado: {config_file}",
            path=str(config_file),
        )

    try:
        text = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(
            f"Falha ao ler {config_file}: {exc}", path=str(config_file)
        ) from exc

    data = _decode(text, path=config_file)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}",
            path=str(config_file),
        )

    logger.debug("Config carregada de %s (%d chaves na raiz)", config_file, len(data))
    return data


def resolve_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Carrega a configuração base e aplica os overrides em ordem.

    Este é o estágio de configuração completo de um build: qualquer
    exceção aqui é fatal e deve abortar o build antes da renderização.

    Raises:
        ConfigLoadError: Falha de leitura/decodificação do arquivo.
        OverrideError: Override malformado ou caminho inválido.
    """
    config = load_config(path)
    return apply_overrides(config, overrides)
