"""pasteparse CLI: extract records from saved paste site pages.

Usage:
    pasteparse extract paste page.html          # Print the paste as JSON
    pasteparse extract user profile.html --trace
    pasteparse extract archive archive.html --indent 0
    pasteparse selectors                        # List the field selectors
"""

from __future__ import annotations

import json
import logging

import click
from lxml.etree import ParserError

from pasteparse.common.exceptions import ExtractionAssumptionException
from pasteparse.common.selector_trace import SelectorTrace
from pasteparse.context import BASE_URL, ExtractionContext
from pasteparse.document import load_document
from pasteparse.extractors import DOCUMENT_EXTRACTORS, from_html


@click.group()
@click.version_option(package_name="pasteparse")
@click.option(
    "--base-url",
    default=BASE_URL,
    show_default=True,
    envvar="PASTEPARSE_BASE_URL",
    help="Site origin stripped from canonical URLs.",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
@click.pass_context
def cli(ctx: click.Context, base_url: str, verbose: bool) -> None:
    """pasteparse: paste site HTML extraction CLI."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = ExtractionContext.create(base_url=base_url)


@cli.command()
@click.argument("kind", type=click.Choice(sorted(DOCUMENT_EXTRACTORS)))
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="JSON indentation (0 for compact output).",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Encoding of the saved page.",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Print the selector lookups to stderr.",
)
@click.pass_obj
def extract(
    context: ExtractionContext,
    kind: str,
    path: str,
    indent: int,
    encoding: str,
    trace: bool,
) -> None:
    """Extract a KIND record from the saved page at PATH.

    \b
    Examples:
        pasteparse extract paste saved/abc123.html
        pasteparse --base-url https://example.org extract user u.html
    """
    try:
        document = load_document(path, encoding=encoding)
    except (ParserError, UnicodeDecodeError) as e:
        raise click.ClickException(f"Could not parse {path}: {e}") from e

    with SelectorTrace() as observer:
        try:
            record = from_html(kind, document, context)
        except ExtractionAssumptionException as e:
            if trace:
                click.echo(observer.simple_tree(), err=True)
            raise click.ClickException(str(e)) from e

    if trace:
        click.echo(observer.simple_tree(), err=True)

    click.echo(
        json.dumps(
            record.to_json_dict(),
            indent=indent or None,
            ensure_ascii=False,
        )
    )


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_obj
def selectors(context: ExtractionContext, as_json: bool) -> None:
    """List the registered field selectors."""
    registry = context.registry
    if as_json:
        click.echo(
            json.dumps({name: registry.css(name) for name in registry}, indent=2)
        )
        return

    width = max(len(name) for name in registry)
    for name in registry:
        click.echo(f"{name:<{width}}  {registry.css(name)}")


def main() -> None:
    """Entry point for the ``pasteparse`` console script."""
    cli()
