"""
template-literals — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros reportados ao operador.
Exceções tipadas do core (config e build) são convertidas aqui em um
payload serializável, usado tanto pela CLI quanto pelos `RenderResult`
de templates que falharam.

Erros devem ser:

- explícitos
- serializáveis
- acionáveis
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ErrorPayload:
    """
    Payload canônico de erro do template-literals.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Estágio de configuração (fatal)
CONFIG_LOAD_ERROR = "CONFIG_LOAD_ERROR"
CONFIG_OVERRIDE_ERROR = "CONFIG_OVERRIDE_ERROR"

# Estágio de renderização (tolerado por template)
TEMPLATE_LOAD_ERROR = "TEMPLATE_LOAD_ERROR"
TEMPLATE_RENDER_ERROR = "TEMPLATE_RENDER_ERROR"

# Fallback
BUILD_EXECUTION_ERROR = "BUILD_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def config_load_error(
    *,
    message: str,
    path: Optional[str] = None,
    hint: str = "Verifique se o arquivo existe e se o conteúdo é YAML/JSON válido com um mapa na raiz.",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_LOAD_ERROR,
        message=message,
        details={"path": path},
        hint=hint,
    )


def config_override_error(
    *,
    message: str,
    override: str,
    reason: str,
    hint: str = "Use o formato chave=valor; índices de lista devem existir (0 <= i < tamanho).",
) -> ErrorPayload:
    return ErrorPayload(
        type=CONFIG_OVERRIDE_ERROR,
        message=message,
        details={"override": override, "reason": reason},
        hint=hint,
    )


def template_load_error(*, message: str, template: str) -> ErrorPayload:
    return ErrorPayload(
        type=TEMPLATE_LOAD_ERROR,
        message=message,
        details={"template": template},
        hint="O arquivo deve existir e definir uma função render(config) -> str.",
    )


def template_render_error(
    *,
    message: str,
    template: str,
    exc_type: Optional[str] = None,
) -> ErrorPayload:
    return ErrorPayload(
        type=TEMPLATE_RENDER_ERROR,
        message=message,
        details={"template": template, "exc_type": exc_type},
        hint="Verifique o template; chaves ausentes na config devem ser tratadas pelo próprio template.",
    )


def exception_to_payload(exc: BaseException) -> ErrorPayload:
    """Converte exceções do core em ErrorPayload (serializável, acionável).

    Regras:
    - Erros de config e de template mapeiam para seus códigos estáveis.
    - Outras exceções: encapsular como BUILD_EXECUTION_ERROR sem stack trace.
    """
    # imports locais evitam ciclo core.errors <-> subpacotes
    from template_literals.core.build.errors import (
        TemplateError,
        TemplateLoadError,
        TemplateRenderError,
    )
    from template_literals.core.config.errors import ConfigLoadError, OverrideError

    message = str(exc) or exc.__class__.__name__

    if isinstance(exc, OverrideError):
        return config_override_error(
            message=message,
            override=exc.override,
            reason=exc.__class__.__name__,
        )
    if isinstance(exc, ConfigLoadError):
        return config_load_error(message=message, path=exc.path)
    if isinstance(exc, TemplateLoadError):
        return template_load_error(message=message, template=exc.template)
    if isinstance(exc, TemplateRenderError):
        return template_render_error(
            message=message,
            template=exc.template,
            exc_type=exc.cause_type,
        )
    if isinstance(exc, TemplateError):
        return template_load_error(message=message, template=exc.template)

    return ErrorPayload(
        type=BUILD_EXECUTION_ERROR,
        message=message,
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o log técnico (--verbose) para diagnosticar a falha.",
    )
