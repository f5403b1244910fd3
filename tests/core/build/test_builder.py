# tests/core/build/test_builder.py
"""
Testes do builder (generate_from_templates).

Os testes asseguram que:
- todos os templates recebem a mesma configuração, congelada
- falhas de um template não interrompem os demais
- o resultado preserva a ordem de entrada
- layout plano e `indexes` gravam nos caminhos esperados
- `outdir` ausente e ids duplicados abortam antes de qualquer saída

Decisões arquiteturais:
    - A renderização é paralela (pool de threads)
    - A escrita é delegada a um sink substituível
"""

import json
import threading
from datetime import datetime, timezone
from pathlib import Path

import pytest

from template_literals.core.build.builder import generate_from_templates
from template_literals.core.build.registry import DuplicateTemplateIdError
from template_literals.core.build.template import CallableTemplate
from template_literals.core.build.types import BuildOptions, RenderStatus
from template_literals.core.config.hashing import compute_config_hash
from template_literals.core.errors import TEMPLATE_LOAD_ERROR, TEMPLATE_RENDER_ERROR


def test_renders_flat_layout(tmp_path: Path, fixture_template, site_config):
    outdir = tmp_path / "dist"
    result = generate_from_templates(
        [fixture_template("index"), fixture_template("about")],
        site_config,
        BuildOptions(outdir=outdir),
    )

    assert [r.status for r in result.results] == [RenderStatus.SUCCESS, RenderStatus.SUCCESS]
    index_html = (outdir / "index.html").read_text(encoding="utf-8")
    assert index_html.startswith("<html>")
    assert "<h1>Home</h1>" in index_html
    assert "<p>x, y</p>" in index_html
    assert (outdir / "about.html").read_text(encoding="utf-8") == "<p>about anonymous</p>"


def test_renders_indexes_layout(tmp_path: Path, fixture_template, site_config):
    outdir = tmp_path / "dist"
    result = generate_from_templates(
        [fixture_template("index"), fixture_template("about")],
        site_config,
        BuildOptions(outdir=outdir, indexes=True),
    )

    assert (outdir / "index.html").is_file()
    assert (outdir / "about" / "index.html").is_file()
    assert result.results[1].output_path == str(outdir / "about" / "index.html")


def test_failures_are_tolerated_and_order_is_preserved(tmp_path: Path, fixture_template, site_config):
    sources = [
        fixture_template("broken"),
        fixture_template("index"),
        fixture_template("no_render"),
        tmp_path / "ghost.py",
        fixture_template("about"),
    ]
    result = generate_from_templates(sources, site_config, BuildOptions(outdir=tmp_path / "out"))

    assert [r.template_id for r in result.results] == ["broken", "index", "no_render", "ghost", "about"]
    assert [r.ok for r in result.results] == [False, True, False, False, True]
    assert [r.template_id for r in result.successful] == ["index", "about"]
    assert len(result.failed) == 3

    broken, _, no_render, ghost, _ = result.results
    assert broken.error["type"] == TEMPLATE_RENDER_ERROR
    assert broken.output_path is None
    assert no_render.error["type"] == TEMPLATE_LOAD_ERROR
    assert ghost.error["type"] == TEMPLATE_LOAD_ERROR
    assert not (tmp_path / "out" / "broken.html").exists()


def test_templates_receive_frozen_config(tmp_path: Path, fixture_template):
    config = {"title": "t"}
    result = generate_from_templates(
        [fixture_template("mutating")], config, BuildOptions(outdir=tmp_path)
    )
    assert result.results[0].status == RenderStatus.FAILED
    assert config == {"title": "t"}
    assert not (tmp_path / "mutating.html").exists()


def test_same_config_object_shared_by_all_templates(tmp_path: Path):
    seen = []
    lock = threading.Lock()

    def capture(config):
        with lock:
            seen.append(config)
        return "ok"

    templates = [CallableTemplate(id=f"page{i}", func=capture) for i in range(6)]
    generate_from_templates(templates, {"a": 1}, BuildOptions(outdir=tmp_path, jobs=3))

    assert len(seen) == 6
    assert all(cfg is seen[0] for cfg in seen)


def test_config_dump_matches_merged_config(tmp_path: Path, fixture_template, site_config):
    result = generate_from_templates(
        [fixture_template("config_dump")], site_config, BuildOptions(outdir=tmp_path)
    )
    dumped = json.loads(Path(result.results[0].output_path).read_text(encoding="utf-8"))
    assert dumped == site_config
    assert result.config_hash == compute_config_hash(site_config)


def test_custom_sink_receives_normalized_output(tmp_path: Path):
    written = {}

    def sink(path, text):
        written[path] = text

    page = CallableTemplate(id="page", func=lambda cfg: "\n  <p>hi</p>\n   \n")
    generate_from_templates([page], {}, BuildOptions(outdir=tmp_path), sink=sink)

    assert written == {tmp_path / "page.html": "<p>hi</p>"}
    assert not (tmp_path / "page.html").exists()


def test_sink_failure_is_a_failed_result(tmp_path: Path):
    def sink(path, text):
        raise OSError("disk full")

    page = CallableTemplate(id="page", func=lambda cfg: "x")
    result = generate_from_templates([page], {}, BuildOptions(outdir=tmp_path), sink=sink)
    assert result.results[0].status == RenderStatus.FAILED
    assert "disk full" in result.results[0].error["message"]


def test_empty_output_records_warning(tmp_path: Path):
    page = CallableTemplate(id="blank", func=lambda cfg: "   ")
    result = generate_from_templates([page], {}, BuildOptions(outdir=tmp_path))
    assert result.results[0].ok
    assert result.warnings == {"blank": ("template produziu saída vazia",)}


def test_events_are_recorded_per_template(tmp_path: Path, fixture_template):
    result = generate_from_templates(
        [fixture_template("broken")], {}, BuildOptions(outdir=tmp_path)
    )
    (event,) = result.events
    assert event["build_id"] == result.build_id
    assert event["template_id"] == "broken"
    assert event["level"] == "ERROR"
    assert event["error_type"] == TEMPLATE_RENDER_ERROR


def test_missing_outdir_raises_before_output(tmp_path: Path, fixture_template):
    with pytest.raises(ValueError, match="outdir"):
        generate_from_templates([fixture_template("index")], {}, BuildOptions(outdir=None))


def test_duplicate_ids_abort_before_output(tmp_path: Path, write_template):
    first = write_template("page.py", "def render(config):\n    return '1'\n", subdir="a")
    second = write_template("page.py", "def render(config):\n    return '2'\n", subdir="b")
    outdir = tmp_path / "dist"
    with pytest.raises(DuplicateTemplateIdError):
        generate_from_templates([first, second], {}, BuildOptions(outdir=outdir))
    assert not outdir.exists()


def test_no_templates_creates_outdir_only(tmp_path: Path):
    outdir = tmp_path / "dist" / "nested"
    result = generate_from_templates([], {}, BuildOptions(outdir=outdir))
    assert result.results == ()
    assert outdir.is_dir()


def test_result_to_dict_is_json_serializable(tmp_path: Path, fixture_template):
    result = generate_from_templates(
        [fixture_template("index"), fixture_template("broken")], {}, BuildOptions(outdir=tmp_path)
    )
    payload = json.loads(json.dumps(result.to_dict()))
    assert [r["status"] for r in payload["results"]] == ["success", "failed"]


@pytest.mark.parametrize("jobs, n, expected", [(None, 0, 1), (None, 3, 3), (None, 50, 8), (2, 50, 2)])
def test_workers_for(jobs, n, expected):
    assert BuildOptions(outdir="x", jobs=jobs).workers_for(n) == expected


def test_result_records_build_start_time(tmp_path: Path):
    before = datetime.now(timezone.utc)
    result = generate_from_templates([], {}, BuildOptions(outdir=tmp_path))
    started = datetime.fromisoformat(result.created_at)

    assert started.tzinfo is not None
    assert before <= started <= datetime.now(timezone.utc)
    assert result.to_dict()["created_at"] == result.created_at
