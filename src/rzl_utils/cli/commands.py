"""Helper subcommands of the ``rzl-utils`` CLI.

Each command wraps one library helper and prints its result on stdout.
Type and value errors raised by the helpers are reported on stderr and end
the command with exit code 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import click

from rzl_utils import config
from rzl_utils.conversions.currency import parse_currency_string
from rzl_utils.errors import RzlUtilsError
from rzl_utils.formatters.currency import (
    NEGATIVE_STYLES,
    ROUNDING_MODES,
    CurrencyFormat,
    format_currency,
)
from rzl_utils.formatters.numbers import format_number
from rzl_utils.formatters.strings import CENSOR_MODES, censor_email
from rzl_utils.generators.ids import UUID_VERSIONS, random_ulid, random_uuid
from rzl_utils.generators.random_values import MAX_STR_LENGTH, RandomStrOptions, random_str
from rzl_utils.strings.cases import CASE_CONVERTERS, slugify
from rzl_utils.urls.pathname import normalize_pathname

from .helpers import error, warn

logger = logging.getLogger(__name__)

NO_ROUNDING = "none"


@contextmanager
def _reported() -> Iterator[None]:
    """Turn helper errors into an error message and exit code 1."""
    try:
        yield
    except (TypeError, ValueError, RzlUtilsError) as e:
        logger.debug("Helper rejected its input", exc_info=True)
        error(str(e))
        raise click.exceptions.Exit(1) from e


# ============================================================================
#                               Numbers
# ============================================================================


@click.command("format-number")
@click.argument("value")
@click.option("--separator", "-s", default=",", show_default=True, help="Thousands separator.")
def format_number_cmd(value: str, separator: str) -> None:
    """Group the digits of VALUE in thousands."""
    with _reported():
        click.echo(format_number(value, separator))


@click.command("format-currency")
@click.argument("value")
@click.option("--separator", default=".", show_default=True, help="Thousands separator.")
@click.option(
    "--decimal-separator", default=",", show_default=True, help="Fraction separator."
)
@click.option("--decimal/--no-decimal", default=False, help="Render fraction digits.")
@click.option(
    "--total-decimal",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Number of fraction digits.",
)
@click.option("--currency", "suffix_currency", default="", help='Text before the amount, e.g. "Rp ".')
@click.option("--suffix", "suffix_decimal", default="", help='Text after the amount, e.g. ".-".')
@click.option(
    "--rounding",
    type=click.Choice([*ROUNDING_MODES, NO_ROUNDING]),
    default="round",
    show_default=True,
    help="Rounding of the fraction digits; 'none' truncates.",
)
@click.option(
    "--negative",
    type=click.Choice(NEGATIVE_STYLES),
    default="dash",
    show_default=True,
    help="Style of negative amounts.",
)
@click.option("--indian", "indian_format", is_flag=True, help="Use Indian digit grouping.")
def format_currency_cmd(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    value: str,
    separator: str,
    decimal_separator: str,
    decimal: bool,
    total_decimal: int,
    suffix_currency: str,
    suffix_decimal: str,
    rounding: str,
    negative: str,
    indian_format: bool,
) -> None:
    """Format VALUE as a currency amount."""
    with _reported():
        options = CurrencyFormat(
            separator=separator,
            decimal_separator=decimal_separator,
            decimal=decimal,
            total_decimal=total_decimal,
            suffix_currency=suffix_currency,
            suffix_decimal=suffix_decimal,
            rounding=None if rounding == NO_ROUNDING else rounding,  # type: ignore[arg-type]
            negative=negative,  # type: ignore[arg-type]
            indian_format=indian_format,
        )
        click.echo(format_currency(value, options))


@click.command("parse-currency")
@click.argument("text")
def parse_currency_cmd(text: str) -> None:
    """Parse a formatted amount such as "Rp 15.000,10" into a number."""
    with _reported():
        click.echo(parse_currency_string(text))


# ============================================================================
#                               Strings
# ============================================================================


@click.command("case")
@click.argument("style", type=click.Choice(list(CASE_CONVERTERS)))
@click.argument("words", nargs=-1, required=True)
@click.option(
    "--ignore",
    "-i",
    "ignore_words",
    multiple=True,
    help="Word kept as is (repeatable).",
)
def case_cmd(style: str, words: tuple[str, ...], ignore_words: tuple[str, ...]) -> None:
    """Convert WORDS to the STYLE case."""
    with _reported():
        click.echo(CASE_CONVERTERS[style](words, ignore_words or None))


@click.command("slugify")
@click.argument("words", nargs=-1, required=True)
def slugify_cmd(words: tuple[str, ...]) -> None:
    """Turn WORDS into a URL slug."""
    with _reported():
        click.echo(slugify(words))


@click.command("censor-email")
@click.argument("email")
@click.option(
    "--mode",
    type=click.Choice(CENSOR_MODES),
    default="fixed",
    show_default=True,
    help="'fixed' always masks the same characters of a given address.",
)
def censor_email_cmd(email: str, mode: str) -> None:
    """Mask part of EMAIL."""
    with _reported():
        censored = censor_email(email, mode=mode)  # type: ignore[arg-type]
    if not censored:
        error(f"Not a valid email address: {email!r}")
        raise click.exceptions.Exit(1)
    click.echo(censored)


# ============================================================================
#                               URLs
# ============================================================================


@click.command("normalize-path")
@click.argument("value")
@click.option("--default", "default_path", default="/", show_default=True, help="Path for blank input.")
@click.option("--keep-trailing-slash", is_flag=True, help="Keep a trailing slash.")
def normalize_path_cmd(value: str, default_path: str, keep_trailing_slash: bool) -> None:
    """Normalize VALUE (a path or URL) to a clean pathname."""
    with _reported():
        click.echo(
            normalize_pathname(
                value, default_path=default_path, keep_trailing_slash=keep_trailing_slash
            )
        )


@click.command("base-url")
@click.argument("pathname", required=False)
@click.option(
    "--api",
    is_flag=True,
    help="Print a backend API URL (RZL_BACKEND_API_URL, RZL_PORT_BE) instead.",
)
def base_url_cmd(pathname: str | None, api: bool) -> None:
    """Print the configured origin, optionally followed by PATHNAME."""
    with _reported():
        if api:
            click.echo(config.create_be_api_url(pathname))
        elif pathname:
            click.echo(f"{config.get_base_url()}{normalize_pathname(pathname)}")
        else:
            click.echo(config.get_base_url())


# ============================================================================
#                               Random values
# ============================================================================


@click.command("random-str")
@click.option("--min-length", type=click.IntRange(1, MAX_STR_LENGTH), default=40, show_default=True)
@click.option("--max-length", type=click.IntRange(1, MAX_STR_LENGTH), default=None, help="Defaults to --min-length.")
@click.option("--kind", type=click.Choice(["string", "number"]), default="string", show_default=True)
@click.option("--charset", "replace_charset", default=None, help="Characters replacing the default set.")
@click.option("--add-chars", default="", help="Characters added to the set.")
@click.option("--allow-whitespace", is_flag=True, help="Keep whitespace in the character set.")
def random_str_cmd(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    min_length: int,
    max_length: int | None,
    kind: str,
    replace_charset: str | None,
    add_chars: str,
    allow_whitespace: bool,
) -> None:
    """Print a random string."""
    if kind == "number" and replace_charset and not replace_charset.strip().isdigit():
        warn("--charset is ignored with --kind number unless it only holds digits.")
    with _reported():
        options = RandomStrOptions(
            min_length=min_length,
            max_length=min_length if max_length is None else max_length,
            kind=kind,  # type: ignore[arg-type]
            avoid_whitespace=not allow_whitespace,
            replace_charset=replace_charset,
            add_chars=add_chars,
        )
        click.echo(random_str(options))


@click.command("uuid")
@click.option(
    "--uuid-version",
    "version",
    type=click.Choice(UUID_VERSIONS),
    default="v4",
    show_default=True,
    help="v4 is fully random, v7 is time ordered.",
)
@click.option("--monotonic", is_flag=True, help="Strictly increasing v7 identifiers.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, show_default=True)
def uuid_cmd(version: str, monotonic: bool, count: int) -> None:
    """Print one or more UUIDs."""
    with _reported():
        for _ in range(count):
            click.echo(random_uuid(version=version, monotonic=monotonic))  # type: ignore[arg-type]
    logger.debug("Generated %d UUID%s identifier(s)", count, version)


@click.command("ulid")
@click.option("--monotonic", is_flag=True, help="Strictly increasing identifiers.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, show_default=True)
def ulid_cmd(monotonic: bool, count: int) -> None:
    """Print one or more ULIDs."""
    with _reported():
        for _ in range(count):
            click.echo(random_ulid(monotonic=monotonic))
    logger.debug("Generated %d ULID identifier(s)", count)


COMMANDS = (
    format_number_cmd,
    format_currency_cmd,
    parse_currency_cmd,
    case_cmd,
    slugify_cmd,
    censor_email_cmd,
    normalize_path_cmd,
    base_url_cmd,
    random_str_cmd,
    uuid_cmd,
    ulid_cmd,
)
