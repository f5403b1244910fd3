# src/template_literals/cli.py
"""
Interface de linha de comando `template-literals`.

Fluxo:
    1. separa os overrides (tudo após `--`) do restante dos argumentos
    2. carrega a config base e aplica os overrides (falha → exit 1)
    3. renderiza os templates e imprime `✔ arquivo` / `✘ arquivo`

Códigos de saída:
    - 0: build executado (mesmo que algum template tenha falhado)
    - 1: falha no estágio de configuração ou `--outdir` ausente
    - 2: argumentos inválidos (argparse)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Tuple

from template_literals.core.build import BuildOptions, BuildResult, generate_from_templates
from template_literals.core.config import ConfigError, apply_overrides, load_config
from template_literals.core.errors import exception_to_payload

logger = logging.getLogger("template_literals")

OVERRIDES_SEPARATOR = "--"
CHECK = "✔"
CROSS = "✘"

EPILOG = """\
  -- key1=value1 ...   Arguments after "--" are parsed as key=value pairs which
                       override those in the config file. Keys may use
                       dot-notation to specify nested paths (list items by
                       index, e.g. tags.0=x). Values may be provided as JSON.

Examples:
  template-literals --config config.yml --outdir dist ./src/my_page.py -- exclamations='["OW"]'
  template-literals --outdir dist ./src/my_page.py -- app_config.domain=example.com app_config.keys='{"client_id":"asdf123"}'
"""


def _setup_basic_logging(verbose: bool, quiet: bool) -> None:
    level = logging.WARNING
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def split_overrides(argv: List[str]) -> Tuple[List[str], List[str]]:
    """`[a, b, --, k=v]` → `([a, b], [k=v])`; só o primeiro `--` separa."""
    if OVERRIDES_SEPARATOR not in argv:
        return list(argv), []
    pos = argv.index(OVERRIDES_SEPARATOR)
    return list(argv[:pos]), list(argv[pos + 1:])


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="template-literals",
        description="Render Python template modules (render(config) -> str) into static HTML files.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="Template files; each must define render(config) -> str.",
    )
    parser.add_argument(
        "--config",
        "--data",
        "-c",
        dest="config",
        default=None,
        help="YAML or JSON config file passed to the render function of all templates.",
    )
    parser.add_argument(
        "--outdir",
        "-o",
        default=None,
        help="Path to output directory. Existing files will be overwritten.",
    )
    parser.add_argument(
        "--indexes",
        action="store_true",
        help="Write 'outdir/name/index.html' instead of 'outdir/name.html' "
        "('index.py' still goes to 'outdir/index.html').",
    )
    parser.add_argument(
        "--jobs",
        "-j",
        type=int,
        default=None,
        help="Number of templates rendered in parallel (default: one per template, up to 8).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Display verbose logging information.",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress all output except errors (useful for CI).",
    )
    return parser


def _report_fatal(summary: str, exc: Exception) -> None:
    payload = exception_to_payload(exc)
    logger.error("%s %s", summary, payload.message)
    if payload.hint:
        logger.error("hint: %s", payload.hint)


def _report(result: BuildResult, *, verbose: bool, quiet: bool) -> None:
    for item in result.results:
        if item.ok:
            if not quiet:
                print(f"{CHECK} {item.source}")
            continue
        print(f"{CROSS} {item.source}")
        if verbose and item.error:
            print(json.dumps(item.error, ensure_ascii=False, indent=2), file=sys.stderr)

    for template_id, messages in result.warnings.items():
        for message in messages:
            logger.warning("%s: %s", template_id, message)


def main(argv: List[str] | None = None) -> int:
    raw = list(sys.argv[1:] if argv is None else argv)
    cli_args, overrides = split_overrides(raw)

    # arquivos podem vir antes ou depois das opções (`a.py -o dist b.py`)
    args = build_parser().parse_intermixed_args(cli_args)
    _setup_basic_logging(args.verbose, args.quiet)

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        _report_fatal("Failed to load config file.", exc)
        return 1

    if not args.config:
        logger.info("Config not specified, empty object will be passed to templates")

    try:
        apply_overrides(config, overrides)
    except ConfigError as exc:
        _report_fatal("Failed to apply override.", exc)
        return 1

    if args.verbose:
        logger.debug("config:\n%s", json.dumps(config, ensure_ascii=False, default=str))

    options = BuildOptions(
        outdir=args.outdir,
        indexes=args.indexes,
        jobs=args.jobs,
    )

    try:
        result = generate_from_templates(args.files, config, options)
    except (ValueError, OSError) as exc:
        _report_fatal("Build aborted.", exc)
        return 1

    _report(result, verbose=args.verbose, quiet=args.quiet)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
