# src/template_literals/core/build/template.py
"""
Contrato canônico de template do template-literals.

Um template é uma unidade de renderização que recebe a configuração
mesclada (somente-leitura) e devolve o texto de saída. Duas formas são
suportadas:

    - `FileTemplate`: arquivo Python que define `render(config) -> str`,
      importado pelo caminho no momento da renderização
    - `CallableTemplate`: função registrada diretamente (uso programático)

Princípios fundamentais:
    - Templates não conhecem o builder, o layout de saída nem o disco
    - O identificador é o nome do arquivo sem a última extensão
    - Conformidade é garantida por duck typing (@runtime_checkable)

Invariantes:
    - `render` sempre retorna `str` ou levanta `TemplateError`
    - Falhas de import aparecem como `TemplateLoadError`
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, Mapping, Optional, Protocol, Union, runtime_checkable

from .errors import TemplateLoadError, TemplateRenderError

logger = logging.getLogger(__name__)

RENDER_ATTRIBUTE = "render"

RenderFunc = Callable[[Mapping[str, Any]], str]


@runtime_checkable
class Template(Protocol):
    """
    Contrato mínimo de um template.

    Atributos obrigatórios:
        - id: identificador estável (define o nome do arquivo de saída)
        - source: origem legível (caminho ou nome qualificado da função)
    """
    id: str
    source: str

    def render(self, config: Mapping[str, Any]) -> str:
        """Renderiza o template com a configuração congelada."""
        ...


def template_id_for(path: Union[str, Path]) -> str:
    """`pages/about.page.py` → `about.page` (remove apenas a última extensão)."""
    return Path(path).stem


def _call(template_id: str, func: RenderFunc, config: Mapping[str, Any]) -> str:
    try:
        output = func(config)
    except Exception as exc:
        raise TemplateRenderError(
            f"Template '{template_id}' falhou ao renderizar: {exc}",
            template=template_id,
            cause_type=exc.__class__.__name__,
        ) from exc

    if not isinstance(output, str):
        raise TemplateRenderError(
            f"Template '{template_id}' deve retornar str, recebido: "
            f"{type(output).__name__}",
            template=template_id,
            cause_type="TypeError",
        )
    return output


def _import_by_path(path: Path) -> ModuleType:
    # nome único por caminho: dois templates com o mesmo stem não colidem
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:12]
    module_name = f"template_literals._templates.{path.stem.replace('.', '_')}_{digest}"

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise TemplateLoadError(
            f"Não foi possível importar o template: {path}", template=str(path)
        )

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise TemplateLoadError(
            f"Falha ao importar o template {path}: {exc}", template=str(path)
        ) from exc
    return module


def load_template(path: Union[str, Path], *, name: Optional[str] = None) -> RenderFunc:
    """
    Importa um arquivo de template pelo caminho e devolve sua função `render`.

    Args:
        path: Caminho do arquivo Python do template.
        name: Nome usado nos erros; padrão é o caminho como recebido.

    Raises:
        TemplateLoadError: Arquivo inexistente, falha de import ou
            ausência de uma função `render`.
    """
    path = Path(path)
    name = name or str(path)
    if not path.is_file():
        raise TemplateLoadError(f"Arquivo de template não existe: {name}", template=name)

    logger.debug("resolvendo módulo: %s", path)
    module = _import_by_path(path.resolve())

    func = getattr(module, RENDER_ATTRIBUTE, None)
    if not callable(func):
        raise TemplateLoadError(
            f"Template {name} não define uma função '{RENDER_ATTRIBUTE}'",
            template=name,
        )
    return func


@dataclass(frozen=True)
class FileTemplate:
    """
    Template definido em um arquivo Python com `render(config) -> str`.

    `name` guarda o argumento exatamente como informado (`./src/page.py`),
    usado nos relatórios; `Path` normalizaria o prefixo `./`.
    """

    path: Path
    name: Optional[str] = None

    @property
    def id(self) -> str:
        return template_id_for(self.path)

    @property
    def source(self) -> str:
        return self.name or str(self.path)

    def load(self) -> RenderFunc:
        return load_template(self.path, name=self.source)

    def render(self, config: Mapping[str, Any]) -> str:
        return _call(self.id, self.load(), config)


@dataclass(frozen=True)
class CallableTemplate:
    """Template registrado diretamente como função."""

    id: str
    func: RenderFunc

    @property
    def source(self) -> str:
        module = getattr(self.func, "__module__", None) or "?"
        name = getattr(self.func, "__qualname__", None) or repr(self.func)
        return f"{module}.{name}"

    def render(self, config: Mapping[str, Any]) -> str:
        return _call(self.id, self.func, config)


def as_template(obj: Union[str, Path, Template]) -> Template:
    """Normaliza caminhos (`str`/`Path`) em `FileTemplate`; templates passam direto."""
    if isinstance(obj, (str, Path)):
        return FileTemplate(path=Path(obj), name=str(obj))
    if isinstance(obj, Template):
        return obj
    raise TypeError(
        f"Template deve ser caminho ou objeto com id/source/render, recebido: "
        f"{type(obj).__name__}"
    )
