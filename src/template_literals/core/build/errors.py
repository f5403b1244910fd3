# src/template_literals/core/build/errors.py
"""
Exceções do estágio de renderização.

Diferente dos erros de configuração, falhas de template são toleradas
individualmente: o builder as converte em `RenderResult` com status
FAILED e segue renderizando os demais templates.

Invariantes:
    - Toda exceção de template identifica o template em `.template`
"""

from __future__ import annotations

from typing import Optional


class TemplateError(Exception):
    """
    Exceção base para falhas associadas a um template específico.

    Attributes:
        template (str): Identificador ou caminho do template.
    """

    def __init__(self, message: str, *, template: str):
        super().__init__(message)
        self.template = template


class TemplateLoadError(TemplateError):
    """Arquivo inexistente, falha de import ou ausência de `render`."""


class TemplateRenderError(TemplateError):
    """
    A função `render` levantou exceção ou não retornou `str`.

    Attributes:
        cause_type (Optional[str]): Nome da classe da exceção original.
    """

    def __init__(self, message: str, *, template: str, cause_type: Optional[str] = None):
        super().__init__(message, template=template)
        self.cause_type = cause_type
