"""
Numerus CLI — Конвертация значений и numeral из командной строки

Режимы:
- TERM-ы в аргументах: каждый конвертируется в другую форму, результат
  печатается построчно, затем выход (код 0 если всё сконвертировано)
- без TERM-ов: интерактивный REPL с prompt "numerus> "

Десятичное число (разделитель ',' или '.') кодируется в numeral,
всё остальное разбирается как numeral и печатается как float.

Numeral с ведущим "-" передаётся после "--", иначе argparse примет его за опцию.

Usage:
    python -m src.numerus 42 1,5 -- -XLII
    python -m src.numerus --pretty _CXX_VIII
    python -m src.numerus --json IS
    python -m src.numerus
"""

import argparse
import dataclasses
import logging
import re
import sys
from dataclasses import dataclass
from typing import Final, TextIO

import structlog

from src.numerus.codec.decoder import decode_fraction
from src.numerus.codec.encoder import encode_double
from src.numerus.codec.formatting import fmt_fraction, fmt_overline
from src.numerus.contracts import dump_conversion_record
from src.numerus.domain.conversion_record import ConversionRecord
from src.numerus.domain.errors import NumerusError, describe
from src.numerus.domain.fraction import Fraction
from src.numerus.math.twelfths import double_to_fraction, fraction_to_double

logger = structlog.get_logger(__name__)


# =============================================================================
# ТЕКСТЫ
# =============================================================================

PROMPT_TEXT: Final[str] = "numerus> "
WELCOME_TEXT: Final[str] = (
    "+-----------------+\n"
    "|  N V M E R V S  |\n"
    "+-----------------+\n"
)
INFO_TEXT: Final[str] = (
    "Numerus, conversion and manipulation of roman numerals.\n"
    "Command Line Interface. Extended numerals: vinculum _..._ (x1000),\n"
    "twelfths S (6/12) and . (1/12), zero NULLA.\n"
)
HELP_TEXT: Final[str] = (
    "To convert a decimal value to a roman numeral or vice-versa,\n"
    "just type it in the shell and press enter.\n"
    "Other Numerus commands are:\n\n"
    "pretty        switches on/off the pretty printing of long roman numerals\n"
    "              (with overlined notation instead of underscore notation)\n"
    "              and the pretty printing of values as integer and fractional part\n"
    "?, help       shows this help text\n"
    "info, about   shows information about Numerus\n"
    "exit, quit    ends this shell\n\n"
    "We also have: moo, ping, ave.\n"
)
MOO_TEXT: Final[str] = "This is not an easter egg.\n"
PING_TEXT: Final[str] = "Pong.\n"
AVE_TEXT: Final[str] = "Ave tibi!\n"
QUIT_TEXT: Final[str] = "Vale!\n"
PRETTY_ON_TEXT: Final[str] = "Pretty printing is enabled.\n"
PRETTY_OFF_TEXT: Final[str] = "Pretty printing is disabled.\n"
UNKNOWN_COMMAND_TEXT: Final[str] = "Unknown command or wrong roman numeral syntax:"

# "-12", "1,5", "-0.000", ".5"
_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[+-]?(\d+([.,]\d*)?|[.,]\d+)$")

_STATIC_COMMANDS: Final[dict[str, str]] = {
    "?": HELP_TEXT,
    "help": HELP_TEXT,
    "info": INFO_TEXT,
    "about": INFO_TEXT,
    "moo": MOO_TEXT,
    "ping": PING_TEXT,
    "ave": AVE_TEXT,
}
_QUIT_COMMANDS: Final[frozenset[str]] = frozenset({"exit", "quit"})


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


@dataclass(frozen=True)
class CliConfig:
    """
    Настройки вывода CLI.

    Attributes:
        pretty: Overline для numeral и fmt_fraction для значений
        crlf: "\\r\\n" вместо "\\n" в overline-представлении
        json_output: Один JSON документ ConversionRecord на TERM
        prompt: Приглашение REPL
    """

    pretty: bool = False
    crlf: bool = False
    json_output: bool = False
    prompt: str = PROMPT_TEXT

    def toggled_pretty(self) -> "CliConfig":
        return dataclasses.replace(self, pretty=not self.pretty)


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def first_word(line: str) -> str:
    """Первое слово строки в нижнем регистре ('' для пустой строки)."""
    words = line.split()
    return words[0].lower() if words else ""


def parse_decimal(term: str) -> float | None:
    """
    Разбор десятичного числа с ',' или '.' как разделителем.

    Returns:
        float или None, если term не является десятичным числом

    Examples:
        >>> parse_decimal("1,5")
        1.5
        >>> parse_decimal("-0,000")
        -0.0
        >>> parse_decimal("XLII") is None
        True
    """
    if not _DECIMAL_PATTERN.match(term):
        return None
    return float(term.replace(",", "."))


def convert_term(term: str, config: CliConfig) -> str:
    """
    Конвертация одного TERM в другую форму.

    Args:
        term: Десятичное число или numeral
        config: Настройки вывода

    Returns:
        Текст для печати (без завершающего перевода строки)

    Raises:
        NumerusError: Если конвертация невозможна
    """
    value = parse_decimal(term)
    if value is not None:
        fraction = double_to_fraction(value)
        logger.debug("term_encoded", term=term, fraction=fraction)
    else:
        fraction = decode_fraction(term)
        logger.debug("term_decoded", term=term, fraction=fraction)

    if config.json_output:
        return dump_conversion_record(ConversionRecord.from_fraction(fraction))
    if value is not None:
        return render_numeral(encode_double(value), config)
    return render_value(fraction, config)


def render_numeral(numeral: str, config: CliConfig) -> str:
    if config.pretty:
        return fmt_overline(numeral, crlf=config.crlf)
    return numeral


def render_value(fraction: Fraction, config: CliConfig) -> str:
    if config.pretty:
        return fmt_fraction(fraction)
    return f"{fraction_to_double(fraction):f}"


def run_terms(terms: list[str], config: CliConfig, out: TextIO | None = None) -> int:
    """
    Конвертация всех TERM-ов из аргументов командной строки.

    Returns:
        0 если каждый TERM сконвертирован, иначе 1
    """
    if out is None:
        out = sys.stdout
    status = 0
    for term in terms:
        try:
            print(convert_term(term, config), file=out)
        except NumerusError as e:
            logger.debug("conversion_failed", term=term, code=e.code.value)
            print(describe(e.code), file=out)
            status = 1
    return status


# =============================================================================
# REPL
# =============================================================================


def repl(
    config: CliConfig,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """
    Интерактивный цикл: prompt → команда или конверсия → вывод.

    Первое слово строки (в нижнем регистре) интерпретируется как команда;
    неизвестное слово конвертируется как TERM. EOF завершает цикл.

    Returns:
        Код выхода (всегда 0)
    """
    if stdin is None:
        stdin = sys.stdin
    if out is None:
        out = sys.stdout
    out.write(WELCOME_TEXT)

    while True:
        out.write(config.prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            logger.debug("end_of_input")
            out.write("\n")
            return 0

        command = first_word(line)
        if not command:
            continue
        if command in _QUIT_COMMANDS:
            out.write(QUIT_TEXT)
            return 0
        if command == "pretty":
            config = config.toggled_pretty()
            out.write(PRETTY_ON_TEXT if config.pretty else PRETTY_OFF_TEXT)
            continue
        if command in _STATIC_COMMANDS:
            out.write(_STATIC_COMMANDS[command])
            continue

        try:
            print(convert_term(command, config), file=out)
        except NumerusError as e:
            logger.debug("conversion_failed", term=command, code=e.code.value)
            print(f"{UNKNOWN_COMMAND_TEXT} {describe(e.code)}", file=out)


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numerus",
        description="Convert decimal values to roman numerals and vice-versa.",
    )
    parser.add_argument(
        "terms",
        nargs="*",
        metavar="TERM",
        help="Decimal value or roman numeral; starts a REPL when omitted",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Overline long numerals, print values as integer and fraction",
    )
    parser.add_argument(
        "--crlf", action="store_true", help="Use \\r\\n line endings in overlines"
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print one JSON conversion record per TERM",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if args.verbose else logging.WARNING
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    config = CliConfig(pretty=args.pretty, crlf=args.crlf, json_output=args.json_output)
    if args.terms:
        return run_terms(args.terms, config)

    logger.debug("repl_started")
    return repl(dataclasses.replace(config, pretty=True))
