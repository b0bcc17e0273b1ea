#!/usr/bin/env python3
"""Format one or more numbers with a built-in locale format.

Usage:
    python scripts/format_number.py -123.45 --locale US --currency --field-length 10
    python scripts/format_number.py 678900000000 --locale IN
"""
import argparse
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from numstr_format.config import Settings
from numstr_format.errors import NumStrFormatError
from numstr_format.international.locale_defaults import available_locales
from numstr_format.models.schema import Justification, NumberFieldSpec
from numstr_format.pipeline import NumberFormatter
from numstr_format.utils.logging import bind_format_context, setup_logging


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Format numbers using locale number string conventions.")
    parser.add_argument("values", nargs="+", help="Numeric literals, e.g. -123.45")
    parser.add_argument("--locale", default=settings.default_locale, help=f"One of {', '.join(available_locales())}")
    parser.add_argument("--currency", action="store_true", default=settings.default_currency)
    parser.add_argument("--variant", default=settings.default_currency_variant, help="Named currency variant, e.g. 'minus' or 'paren'")
    parser.add_argument("--field-length", type=int, default=settings.default_field_length)
    parser.add_argument(
        "--justify",
        choices=[j.value for j in Justification],
        default=settings.default_justification.value,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    setup_logging(settings.log_level, json_output=False)

    # Negative literals look like options to argparse, so stop option parsing at them.
    args = build_parser(settings).parse_args(_protect_negative_values(argv if argv is not None else sys.argv[1:]))
    bind_format_context(locale=args.locale, variant=args.variant)

    try:
        formatter = NumberFormatter.from_locale(
            args.locale,
            currency=args.currency,
            variant=args.variant,
            field=NumberFieldSpec(length=args.field_length, justification=Justification(args.justify)),
        )
        for value in args.values:
            # Quote the result so padding spaces stay visible.
            print(f"'{formatter.format(value)}'")
    except NumStrFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _protect_negative_values(argv: list[str]) -> list[str]:
    options: list[str] = []
    values: list[str] = []
    expects_value = False
    for arg in argv:
        if expects_value:
            options.append(arg)
            expects_value = False
        elif arg.startswith("--"):
            options.append(arg)
            expects_value = "=" not in arg and arg not in ("--currency", "--help")
        elif arg == "-h":
            options.append(arg)
        else:
            values.append(arg)
    return options + ["--"] + values if values else options


if __name__ == "__main__":
    sys.exit(main())
