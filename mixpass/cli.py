"""
Command-line interface and high-level generator functions.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from .clipboard import ClipboardCopier
from .config import GeneratorConfig, DEFAULT_CONFIG
from .entropy import RandomSource, SOURCE_KINDS, source_from_config
from .errors import ConfigError, MixPassError
from .generator import GenerationResult, generate_with_meta

logger = logging.getLogger(__name__)


@dataclass
class PasswordGenerationMeta:
    """
    Result of one config-driven generation.
    """

    password: str
    result: GenerationResult
    source_kind: str
    config: GeneratorConfig


def generate_password_with_meta(
    config: GeneratorConfig | None = None,
    source: RandomSource | None = None,
) -> PasswordGenerationMeta:
    """
    Validate the config, build its random source (unless one is given)
    and run the generator.
    """
    cfg = config or DEFAULT_CONFIG
    cfg.validate()

    src = source if source is not None else source_from_config(cfg)
    result = generate_with_meta(cfg.enabled_classes(), cfg.length, src)

    return PasswordGenerationMeta(
        password=result.password,
        result=result,
        source_kind=cfg.source if source is None else type(source).__name__,
        config=cfg,
    )


def generate_password(
    config: GeneratorConfig | None = None,
    source: RandomSource | None = None,
) -> str:
    return generate_password_with_meta(config, source).password


def generate_passwords(config: GeneratorConfig, count: int) -> List[str]:
    """
    Generate `count` passwords sharing one random source.
    """
    config.validate()
    if count < 1:
        raise ConfigError(f"count must be at least 1, got {count}")
    source = source_from_config(config)
    return [generate_password(config, source) for _ in range(count)]


# ---------- argument parsing ----------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mixpass",
        description="Generate passwords mixing lowercase, uppercase, digits and symbols.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--length", type=int, default=DEFAULT_CONFIG.length, help="Password length"
    )
    parser.add_argument(
        "--count", type=int, default=1, help="Number of passwords to generate"
    )

    parser.add_argument(
        "--no-lower", dest="lowercase", action="store_false", help="Exclude lowercase letters"
    )
    parser.add_argument(
        "--no-upper", dest="uppercase", action="store_false", help="Exclude uppercase letters"
    )
    parser.add_argument(
        "--no-digits", dest="digits", action="store_false", help="Exclude digits"
    )
    parser.add_argument(
        "--no-symbols", dest="symbols", action="store_false", help="Exclude symbols"
    )

    parser.add_argument(
        "--source",
        choices=SOURCE_KINDS,
        default=DEFAULT_CONFIG.source,
        help="Random source",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for the system source (reproducible output)"
    )
    parser.add_argument(
        "--copy", action="store_true", help="Copy the last password to the clipboard"
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON array")
    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging verbosity",
    )
    return parser


def config_from_args(args: argparse.Namespace, base: GeneratorConfig | None = None) -> GeneratorConfig:
    return replace(
        base or DEFAULT_CONFIG,
        length=args.length,
        lowercase=args.lowercase,
        uppercase=args.uppercase,
        digits=args.digits,
        symbols=args.symbols,
        source=args.source,
        seed=args.seed,
    )


def main(
    argv: Optional[Sequence[str]] = None,
    copier: ClipboardCopier | None = None,
) -> int:
    """
    Entry point for `mixpass`, `python -m mixpass.cli` or `run_mixpass.py`.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = config_from_args(args)
    if not cfg.enabled_classes():
        logger.warning("All character classes disabled; passwords will be empty")

    try:
        passwords = generate_passwords(cfg, args.count)
    except MixPassError as exc:
        logger.error(str(exc))
        return 2

    if args.json:
        print(json.dumps(passwords))
    else:
        for pw in passwords:
            print(pw)

    if args.copy:
        if not passwords[-1]:
            print("No password to copy.", file=sys.stderr)
            return 1
        outcome = (copier or ClipboardCopier()).copy(passwords[-1])
        if not outcome:
            print("Failed to copy password.", file=sys.stderr)
            return 1
        print(f"Password copied to clipboard ({outcome.method}).", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
