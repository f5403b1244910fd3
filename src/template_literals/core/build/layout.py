# src/template_literals/core/build/layout.py
"""
Layout de saída e escrita dos arquivos renderizados.

Layouts suportados:
    - plano:   `<outdir>/<id>.html`
    - indexes: `<outdir>/<id>/index.html`, exceto o template `index`,
               que vai para `<outdir>/index.html`

Antes da escrita, a saída é normalizada: linhas compostas apenas de
espaços são esvaziadas e o texto é aparado nas extremidades.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Union

OUTPUT_EXTENSION = ".html"
INDEX_NAME = "index"

_BLANK_LINE = re.compile(r"\n[ ]+\n")

OutputSink = Callable[[Path, str], None]


def output_path_for(template_id: str, outdir: Union[str, Path], *, indexes: bool = False) -> Path:
    outdir = Path(outdir)
    if not indexes:
        return outdir / f"{template_id}{OUTPUT_EXTENSION}"
    # apenas o primeiro segmento do nome decide (`index.page` também é raiz)
    if template_id.split(".")[0] == INDEX_NAME:
        return outdir / f"{INDEX_NAME}{OUTPUT_EXTENSION}"
    return outdir / template_id / f"{INDEX_NAME}{OUTPUT_EXTENSION}"


def normalize_output(text: str) -> str:
    # uma única passada, como `re.sub` global: `\n  \n  \n` vira `\n\n  \n`
    return _BLANK_LINE.sub("\n\n", text).strip()


def write_output(path: Path, text: str) -> None:
    """Sink padrão: cria diretórios intermediários e sobrescreve o arquivo."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
