#!/usr/bin/env python3
"""
Run the Chuck Norris Facts build step from a shell build.

Build variables come from the process environment; the fact is printed to
stdout (the build console) and, with --env-file, appended as NAME=value so
later steps can load it.

Usage:
    cnf-fact --facts-url 'http://facts.example.com/random?job=${JOB_NAME}' \\
             --regex-pattern '^(.+)$' --var-name CNF
    cnf-fact --config step.yaml --env-file build.properties
    cnf-fact --config step.yaml --check     # validate fields only

step.yaml 範例::

    factsUrl: http://facts.example.com/random
    regexPattern: ^(.+)\\.$
    varName: CNF

Exit codes:
    0  step ran（取不到 fact 也是 0）
    1  --check found an invalid field
    2  missing / unreadable configuration
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cnf.core.config import settings
from cnf.core.enums import StepField, ValidationKind
from cnf.core.types import FactRequestConfig
from cnf.services.build_step import ChuckNorrisFactsStep
from cnf.services.descriptor import check_field

logger = logging.getLogger("cnf.cli")

# YAML key → FactRequestConfig field（camelCase 與 snake_case 皆可）
_YAML_KEYS = {
    "factsUrl": "facts_url",
    "facts_url": "facts_url",
    "regexPattern": "regex_pattern",
    "regex_pattern": "regex_pattern",
    "varName": "var_name",
    "var_name": "var_name",
}


def load_step_config(path: Path) -> dict[str, str]:
    """Load build step fields from a YAML file."""
    with open(path, encoding="utf-8") as f:
        raw: Any = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(raw).__name__}")

    fields: dict[str, str] = {}
    for key, value in raw.items():
        target = _YAML_KEYS.get(key)
        if target is None:
            logger.warning("Ignoring unknown key '%s' in %s", key, path)
            continue
        fields[target] = "" if value is None else str(value)
    return fields


def resolve_config(args: argparse.Namespace) -> FactRequestConfig:
    """CLI options > YAML file > STEP__* settings."""
    fields: dict[str, str] = {
        "facts_url": settings.step.facts_url,
        "regex_pattern": settings.step.regex_pattern,
        "var_name": settings.step.var_name,
    }
    if args.config:
        fields.update(load_step_config(Path(args.config)))
    for name in ("facts_url", "regex_pattern", "var_name"):
        value = getattr(args, name)
        if value is not None:
            fields[name] = value
    return FactRequestConfig(**fields)


# properties 跳脫：值中的換行不得產生額外的變數
_PROPERTIES_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
})
_PROPERTIES_KEY_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "=": "\\=",
    ":": "\\:",
    " ": "\\ ",
})


def escape_property(value: str, key: bool = False) -> str:
    """Escape ``value`` for a NAME=value properties line."""
    return value.translate(_PROPERTIES_KEY_ESCAPES if key else _PROPERTIES_ESCAPES)


def write_env_file(path: Path, variables: dict[str, str]) -> None:
    """Append NAME=value lines for downstream steps, one line per variable."""
    with open(path, "a", encoding="utf-8") as f:
        for key, value in variables.items():
            f.write(f"{escape_property(key, key=True)}={escape_property(value)}\n")


def run_checks(config: FactRequestConfig) -> int:
    values = {
        StepField.FACTS_URL: config.facts_url,
        StepField.REGEX_PATTERN: config.regex_pattern,
        StepField.VAR_NAME: config.var_name,
    }
    failed = False
    for field, value in values.items():
        result = check_field(field, value)
        print(f"{field.value}: {result.kind.value}" + (f" - {result.message}" if result.message else ""))
        failed = failed or result.kind is ValidationKind.ERROR
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnf-fact",
        description="Retrieve a Chuck Norris fact into a build variable",
    )
    parser.add_argument(
        "--facts-url", type=str, default=None,
        help="URL to GET; ${NAME} references are expanded from the environment",
    )
    parser.add_argument(
        "--regex-pattern", type=str, default=None,
        help="Pattern that must match the whole response; group 1 is the fact",
    )
    parser.add_argument(
        "--var-name", type=str, default=None,
        help="Build variable receiving the fact",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="YAML file with factsUrl / regexPattern / varName",
    )
    parser.add_argument(
        "--env-file", type=str, default=None,
        help="Append NAME=value for the published variable to this file",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="Validate the configuration without fetching",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = resolve_config(args)
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.check:
        return run_checks(config)

    missing = [
        name for name in ("facts_url", "regex_pattern", "var_name")
        if not getattr(config, name)
    ]
    if missing:
        print(
            f"Error: incomplete build step configuration ({', '.join(missing)})",
            file=sys.stderr,
        )
        return 2

    outcome = ChuckNorrisFactsStep(config).perform(dict(os.environ))
    for line in outcome.log:
        print(line)

    if args.env_file and outcome.variables:
        write_env_file(Path(args.env_file), outcome.variables)

    return 0


if __name__ == "__main__":
    sys.exit(main())
