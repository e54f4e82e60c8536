"""Main CLI entry point for ibancountry."""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ibancountry import __version__
from ibancountry.formats import COUNTRY_FORMATS, CountryFormat, IbanRegistry
from ibancountry.matcher import IbanCountryResult, classify, detect_country
from ibancountry.metrics import record_classification
from ibancountry.utils.config import get_settings
from ibancountry.utils.logging import configure_logging, get_logger

app = typer.Typer(
    name="ibancountry",
    help="🏦 Check IBAN addresses against the Swift registry country formats",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()
logger = get_logger(__name__)

_RESULT_STYLES = {
    IbanCountryResult.VALID: "green",
    IbanCountryResult.INVALID: "red",
    IbanCountryResult.COUNTRY_UNKNOWN: "yellow",
}


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]ibancountry[/bold blue] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """
    ibancountry - BBAN structure checks for IBAN addresses.

    Only the country code and the country-specific structure are checked,
    never the check digits.
    """
    settings = get_settings()
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        dev_mode=settings.dev_mode,
    )


@app.command()
def check(
    addresses: list[str] = typer.Argument(..., help="IBAN addresses, country code first"),
    json_output: bool = typer.Option(False, "--json", help="Print results as JSON"),
) -> None:
    """🔍 Classify addresses as valid, invalid or country_unknown.

    Exits with code 1 unless every address is valid.

    Examples:
        ibancountry check GB82WEST12345698765432

        ibancountry check DE44500105175407324931 ZZ44500105175407324931 --json
    """
    rows: list[tuple[str, CountryFormat | None, IbanCountryResult]] = []
    for address in addresses:
        result = classify(address)
        record_classification(result.value)
        rows.append((address, detect_country(address), result))

    valid_count = sum(1 for _, _, result in rows if result is IbanCountryResult.VALID)
    logger.info("addresses_checked", total=len(rows), valid=valid_count)

    if json_output:
        payload = [
            {
                "address": address,
                "country": fmt.code if fmt else None,
                "result": result.value,
            }
            for address, fmt, result in rows
        ]
        typer.echo(json.dumps(payload, indent=2))
    else:
        table = Table(title="IBAN country format check")
        table.add_column("Address", style="cyan")
        table.add_column("Country")
        table.add_column("Result")

        for address, fmt, result in rows:
            country = f"{fmt.code} ({fmt.country_name})" if fmt else "-"
            style = _RESULT_STYLES[result]
            table.add_row(escape(address), escape(country), f"[{style}]{result.value}[/{style}]")

        console.print(table)

    if valid_count != len(rows):
        raise typer.Exit(code=1)


@app.command()
def countries(
    code: Optional[str] = typer.Option(
        None, "--code", "-c", help="Show a single country (e.g. DE)"
    ),
) -> None:
    """📋 List registry countries and their BBAN formats."""
    if code:
        fmt = IbanRegistry.get_format(code)
        if fmt is None:
            console.print(f"[red]Unknown country code: {escape(code)}[/red]")
            raise typer.Exit(code=1)
        formats: tuple[CountryFormat, ...] = (fmt,)
    else:
        formats = COUNTRY_FORMATS

    table = Table(title=f"IBAN registry formats ({len(formats)})")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country")
    table.add_column("Format", no_wrap=True)
    table.add_column("Length", justify="right")

    for fmt in formats:
        table.add_row(
            fmt.code,
            fmt.country_name,
            f"{fmt.prefix().notation()}{fmt.remainder().notation()}",
            str(IbanRegistry.iban_length(fmt.code)),
        )

    console.print(table)


if __name__ == "__main__":
    app()
