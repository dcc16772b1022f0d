"""Command-line entry point: generate Dutch IBANs.

Examples::

    iban-gen --count 5
    iban-gen --count 100 --random-bank --format json --seed 42
    iban-gen --count 1000 --output-dir output --pretty
"""

from __future__ import annotations

import argparse
import sys

from iban_gen.config import NL_SCHEME, GeneratorConfig
from iban_gen.exceptions import IbanGenError
from iban_gen.generators import IbanGenerator
from iban_gen.logging import get_logger, setup_logging
from iban_gen.sinks import ConsoleSink, JsonFileSink

logger = get_logger(__name__)


def build_parser(config: GeneratorConfig) -> argparse.ArgumentParser:
    """Build the argument parser, using ``config`` for defaults."""
    parser = argparse.ArgumentParser(
        prog="iban-gen",
        description="Generate synthetic Dutch IBANs with valid check digits",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=config.count,
        help=f"Number of IBANs to generate (default: {config.count})",
    )
    parser.add_argument(
        "--bank-code",
        type=str,
        default=config.bank_code,
        help=f"Four-letter bank code (default: {config.bank_code})",
    )
    parser.add_argument(
        "--random-bank",
        action="store_true",
        help="Pick a random Dutch bank per IBAN: " + ", ".join(sorted(NL_SCHEME.bank_codes)),
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format on stdout (default: text)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(config.output.json_output_dir) if config.output.json_output_dir else None,
        help="Write ibans.json to this directory instead of stdout",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        default=config.output.pretty_json,
        help="Pretty-print JSON output",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Log level (default: {config.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=config.log_format,
        help=f"Log format (default: {config.log_format})",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate IBANs and write them to stdout or a JSON file."""
    try:
        config = GeneratorConfig.from_env()
    except IbanGenError as exc:
        print(f"iban-gen: error: {exc}", file=sys.stderr)
        return 2

    parser = build_parser(config)
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_format)

    if args.count < 1:
        parser.error("--count must be at least 1")

    generator = IbanGenerator(seed=args.seed)
    try:
        if args.random_bank:
            ibans = list(generator.generate_random_bank(args.count))
        else:
            ibans = list(generator.generate_batch(args.count, args.bank_code))
    except IbanGenError as exc:
        print(f"iban-gen: error: {exc}", file=sys.stderr)
        return 2

    logger.info(
        "Generated %d IBANs",
        len(ibans),
        extra={"extra": {"count": len(ibans), "seed_given": args.seed is not None}},
    )

    if args.output_dir:
        sink = JsonFileSink(args.output_dir, pretty=args.pretty)
        path = sink.write_batch("ibans", ibans)
        sink.close()
        print(path)
    elif args.format == "json":
        sink = ConsoleSink(pretty=args.pretty)
        sink.write_batch("ibans", ibans)
    else:
        for iban in ibans:
            print(iban)

    return 0


if __name__ == "__main__":
    sys.exit(main())
