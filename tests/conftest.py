# tests/conftest.py
"""
Fixtures compartilhados para testes do template-literals.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdo de configuração YAML/JSON semelhante ao uso real
- configuração base já materializada (dict)
- caminhos para os templates de fixture em `tests/fixtures/templates`
- uma fábrica de templates escritos sob `tmp_path`

Decisões arquiteturais:
    - Conteúdo de configuração é fornecido como string; o teste decide
      se grava em disco (`tmp_path`) ou não
    - Templates de fixture são arquivos Python reais, importados pelo
      caminho exatamente como a CLI faz

Limites explícitos:
    - Não substituir testes de integração da CLI
    - Não conter lógica condicional complexa
"""

from pathlib import Path

import pytest

FIXTURE_TEMPLATES = Path(__file__).parent / "fixtures" / "templates"


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def site_config_yaml() -> str:
    """
    YAML de configuração base semelhante a um site real.

    Usado por:
        - Testes do loader (YAML)
        - Testes da CLI (`--config`)

    Returns:
        str: Conteúdo YAML com mapa na raiz.
    """
    return """\
site:
  title: Home
  domain: example.com
tags:
  - x
  - y
items:
  - name: first
    price: 10
  - name: second
    price: 20
"""


@pytest.fixture
def site_config_json() -> str:
    """JSON equivalente ao `site_config_yaml`."""
    return (
        '{"site": {"title": "Home", "domain": "example.com"}, '
        '"tags": ["x", "y"], '
        '"items": [{"name": "first", "price": 10}, {"name": "second", "price": 20}]}'
    )


@pytest.fixture
def site_config() -> dict:
    """Configuração base já carregada, para testes do motor de overrides."""
    return {
        "site": {"title": "Home", "domain": "example.com"},
        "tags": ["x", "y"],
        "items": [
            {"name": "first", "price": 10},
            {"name": "second", "price": 20},
        ],
    }


# =====================================================
# Template fixtures
# =====================================================

@pytest.fixture
def fixture_template():
    """
    Fábrica que resolve o caminho de um template de fixture pelo nome.

    Templates disponíveis: index, about, broken, no_render, not_str,
    mutating, config_dump.
    """

    def _path(name: str) -> Path:
        path = FIXTURE_TEMPLATES / f"{name}.py"
        assert path.is_file(), f"fixture template ausente: {path}"
        return path

    return _path


@pytest.fixture
def write_template(tmp_path: Path):
    """Fábrica que grava um template `render(config)` em `tmp_path/<dir>/<name>`."""

    def _write(name: str, body: str, *, subdir: str = "templates") -> Path:
        folder = tmp_path / subdir
        folder.mkdir(parents=True, exist_ok=True)
        path = folder / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write
