"""
unitlex-tokens - Definitions File Token Dump
============================================

Scans a unit definitions file and prints the token stream, for checking
how the scanner sees a file before it reaches the parser.

Usage Examples
--------------
Dump the default definitions file (definitions.units):
    $ unitlex-tokens

Dump a specific file as a token listing with locations:
    $ unitlex-tokens units.dat -f list

Fail on the first lexical error:
    $ unitlex-tokens --strict units.dat
"""

import logging
from pathlib import Path
from typing import Optional

import click

from unitlex import __version__
from unitlex.cli.errors import handle_cli_exception
from unitlex.config import LexerConfig
from unitlex.lexer import TokenIterator, collect_errors, first_error, tokens
from unitlex.render import describe_tokens, render_tokens

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "list"], case_sensitive=False),
    default="text",
    help="text: reconstructed source (default). list: one token per line with location.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with an error at the first lexical error",
)
@click.option(
    "--max-errors",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of lexical errors to report (default: 100)",
)
@click.option(
    "--comment-char",
    default=None,
    help="Comment marker (default: '#'; empty string disables comments)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="unitlex-tokens")
def main(
    input_file: Optional[Path],
    output_format: str,
    strict: bool,
    max_errors: Optional[int],
    comment_char: Optional[str],
    verbose: bool,
) -> None:
    """
    Print the tokens of a unit definitions file.

    INPUT_FILE defaults to the configured definitions file
    (UNITLEX_DEFINITIONS, or definitions.units).

    \b
    Examples:
        unitlex-tokens                    # Scan definitions.units
        unitlex-tokens units.dat -f list  # Token listing
        unitlex-tokens --strict units.dat # Stop at first error
    """
    setup_logging(verbose)

    try:
        config = LexerConfig.from_env()
        if strict:
            config.strict = True
        if max_errors is not None:
            config.max_errors = max_errors
        if comment_char is not None:
            config.comment_char = comment_char or None

        path = input_file if input_file is not None else config.definitions_path
        logger.debug("scanning %s (encoding %s)", path, config.encoding)

        source = config.read_source(path)
        token_list = tokens(TokenIterator(source, config.policy()))

        if config.strict:
            first_error(token_list, source, str(path))

        if output_format == "list":
            click.echo(describe_tokens(token_list))
        else:
            rendered = render_tokens(token_list)
            click.echo(rendered, nl=not rendered.endswith("\n"))

        collector = collect_errors(token_list, source, str(path), config.max_errors)
        if collector.has_errors():
            click.echo(collector.report(), err=True)

        if verbose:
            click.echo(
                f"Scanned {len(token_list)} tokens, "
                f"{collector.error_count()} lexical error(s)",
                err=True,
            )

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Scan")


if __name__ == "__main__":
    main()
