# src/template_literals/core/config/errors.py
"""
Exceções canônicas da camada de configuração do template-literals.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento da configuração base e a aplicação de overrides textuais
(`chave=valor`) vindos da linha de comando.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de configuração são sempre fatais para o build
    - Erros de override identificam exatamente o override que falhou

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção de override carrega o texto bruto em `.override`

Limites explícitos:
    - Não executa templates
    - Não realiza fallback ou recovery
    - Não formata mensagens para console (responsabilidade da CLI)
"""

from __future__ import annotations


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de qualquer falha do estágio de configuração
    (load + overrides), que sempre aborta o build antes da renderização.
    """


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

class ConfigLoadError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração não pode ser lido
    ou decodificado.

    O diagnóstico original (erro de I/O, erro do parser YAML/JSON) é
    preservado tanto na mensagem quanto via encadeamento (`__cause__`).

    Attributes:
        path (str | None): Caminho do arquivo que falhou.
    """

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ConfigLoadError):
    """Arquivo de configuração informado não existe."""


class InvalidConfigRootTypeError(ConfigLoadError):
    """
    Exceção levantada quando o conteúdo raiz decodificado não é um
    mapeamento (`dict`).

    Decisões arquiteturais:
        - A raiz da configuração é sempre um mapa chave-valor
        - Listas ou escalares na raiz são rejeitados, nunca encapsulados
    """


# ---------------------------------------------------------------------------
# Overrides
# ---------------------------------------------------------------------------

class OverrideError(ConfigError):
    """
    Exceção base para falhas na aplicação de um override `caminho=valor`.

    Attributes:
        override (str): Override bruto, exatamente como recebido.
    """

    def __init__(self, message: str, *, override: str):
        super().__init__(message)
        self.override = override


class MalformedOverrideError(OverrideError):
    """Override sem separador `=` ou com chave vazia."""


class InvalidIndexSegmentError(OverrideError):
    """
    Segmento não numérico usado onde o nó atual é uma sequência.

    Apenas inteiros base 10 não negativos (`[0-9]+`) são índices válidos.
    """


class IndexOutOfBoundsError(OverrideError):
    """
    Índice numérico fora dos limites da sequência.

    Decisões arquiteturais:
        - O índice deve satisfazer `0 <= indice < len(sequencia)`
        - `indice == len(sequencia)` também é rejeitado (sem append)
        - Sequências nunca crescem via override
    """


class PathConflictError(OverrideError):
    """
    O caminho atravessa um valor escalar (nem mapeamento, nem sequência).

    Exemplo de conflito:
        - config:   {"site": "example.com"}
        - override: site.domain=foo
    """
