import argparse
from collections.abc import Sequence
from pathlib import Path
import sys

from loguru import logger

from .config import VerbalizerConfig
from .converter import NumberVerbalizer
from .errors import NumspeakError
from .options import Mode
from .profile import DecimalSeparator, Gender


def configure_logging(level: str) -> None:
    """Send numspeak's loguru output to stderr at ``level``."""
    logger.enable("numspeak")
    logger.remove()
    logger.add(sys.stderr, level=level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numspeak", description="Spell out numbers in words")
    parser.add_argument("number", nargs="?", help="Number to convert, e.g. 1234, -5 or 2.50")
    parser.add_argument("-l", "--locale", help="Locale code (default: from config, else 'en')")
    parser.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.PLAIN.value,
        help="Reading mode (default: plain)",
    )
    parser.add_argument(
        "--separator",
        choices=[style.value for style in DecimalSeparator],
        help="Decimal separator word style (default: the locale's own)",
    )
    parser.add_argument("--gender", choices=[gender.value for gender in Gender], help="Grammatical gender")
    parser.add_argument("--negative-prefix", help="Word used in place of the locale's minus")
    parser.add_argument("--currency", help="ISO 4217 currency code for currency mode (default: the locale's own)")
    parser.add_argument("--zero-tens", help="Alternate word for an empty tens place, e.g. 'le' for Vietnamese")
    parser.add_argument("--no-round", action="store_true", help="Truncate currency subunits instead of rounding")
    parser.add_argument("--include-and", action="store_true", help="British style 'and' after hundreds")
    parser.add_argument("--include-era", action="store_true", help="Add the AD marker to positive years")
    parser.add_argument("--config", type=Path, help="Path to a YAML configuration file")
    parser.add_argument("--list-locales", action="store_true", help="List available locales and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line entry point.

    Examples:
        $ numspeak 1999 --locale de --mode year
        neunzehnhundertneunundneunzig
        $ numspeak 2.50 -l pl -m currency
        dwa złote i pięćdziesiąt groszy
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    config = VerbalizerConfig.from_yaml(args.config) if args.config else VerbalizerConfig()
    configure_logging("DEBUG" if args.verbose else config.log_level)

    try:
        converter = NumberVerbalizer.from_config(config)
        if args.locale:
            converter.set_locale(args.locale)

        if args.list_locales:
            for code in converter.registry.available():
                profile = converter.registry.lookup(code)
                print(f"{code}\t{profile.name}")
            return 0

        if args.number is None:
            parser.error("the number argument is required")

        print(
            converter.convert(
                args.number,
                mode=args.mode,
                decimal_separator=args.separator,
                gender=args.gender,
                negative_prefix=args.negative_prefix,
                round_currency=not args.no_round,
                include_and=args.include_and,
                include_era=args.include_era,
                currency=args.currency,
                zero_tens=args.zero_tens,
            )
        )
    except NumspeakError as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
