"""Take Home CLI - Command-line interface for take-home pay estimates."""

import json
import logging
import os

import click
from rich.console import Console

from takehome import __version__
from takehome.sdk import (
    CalculatorInput,
    ConfigError,
    TaxRulesError,
    build_helpers,
    cities_by_state,
    compare_cities,
    compare_states,
    compute_taxes,
    get_input_defaults,
    load_tax_tables,
)
from takehome.sdk.taxes.local import city_name
from takehome.sdk.taxes.state import state_name

from .renderers.result_renderer import render_comparison, render_result
from .settings_commands import settings as settings_group


def _configure_logging() -> None:
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="take-home")
def cli():
    """Take Home - What you actually keep after taxes.

    Estimates federal, state, city, payroll, and sales taxes on wages,
    self-employment income, capital gains, and a purchase.

    Defaults for any calculator option can be stored with
    'take-home settings default FIELD VALUE'. Settings are loaded from:

    \b
    1. TAKE_HOME_CONFIG_PATH environment variable
    2. ~/.config/take-home/settings.json (XDG default)
    """
    _configure_logging()


cli.add_command(settings_group)


def calculator_options(f):
    """Options shared by every command that runs a calculation."""
    options = [
        click.option("--wages", type=float, help="W-2 wages per --wages-period."),
        click.option("--wages-period", type=click.Choice(["yearly", "weekly", "daily", "hourly"]),
                     help="Period of --wages (default: yearly)."),
        click.option("--business", "business_income", type=float, help="Self-employment profit per --business-period."),
        click.option("--business-period", type=click.Choice(["yearly", "monthly", "daily", "hourly"]),
                     help="Period of --business (default: yearly)."),
        click.option("--stocks", "stocks_amount", type=float, help="Capital gains for the year."),
        click.option("--short-term-pct", "short_term_percent", type=float,
                     help="Percent of gains that are short-term, 0-100 (default: 50)."),
        click.option("--purchase", "purchase_amount", type=float, help="Purchase amount for sales tax."),
        click.option("--state", help="Two-letter state code."),
        click.option("--city", help="City id (see 'take-home cities STATE')."),
        click.option("--filing-status", type=click.Choice(["single", "married"]), help="Filing status."),
        click.option("--federal-deduction/--no-federal-deduction", "use_federal_deduction", default=None,
                     help="Apply the federal standard deduction (default: on)."),
        click.option("--state-deduction/--no-state-deduction", "use_state_deduction", default=None,
                     help="Apply the state standard deduction (default: on)."),
        click.option("--year", help="Tax year of the rules to use (default: tax_year setting)."),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _build_input(fields: dict) -> CalculatorInput:
    # Options left unset (None) fall through to configured defaults
    try:
        return CalculatorInput(**get_input_defaults(fields))
    except ConfigError as e:
        raise click.ClickException(str(e))


def _load_tables(year):
    try:
        return load_tax_tables(year)
    except (TaxRulesError, ConfigError) as e:
        raise click.ClickException(str(e))


def _prepare(year, fields: dict):
    """Load tables and build the input from calculator options."""
    tables = _load_tables(year)
    inp = _build_input(fields)
    if inp.state and inp.state not in tables.states:
        raise click.BadParameter(f"Unknown state '{inp.state}'.", param_hint="--state")
    return inp, tables


@cli.command("calc")
@calculator_options
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text).")
def calc(year, output_format, **fields):
    """Calculate take-home pay and an itemized tax breakdown.

    Examples:

    \b
        take-home calc --wages 100000
        take-home calc --wages 45 --wages-period hourly --state NY --city nyc
        take-home calc --stocks 500000 --short-term-pct 0 --state WA --format json
    """
    inp, tables = _prepare(year, fields)
    result = compute_taxes(inp, tables)
    helpers = build_helpers(result, tables)

    if output_format == "json":
        click.echo(json.dumps({
            "input": inp.model_dump(),
            "result": result.model_dump(),
            "helpers": helpers.model_dump(),
        }, indent=2))
        return

    location = ""
    if result.state_code:
        location = state_name(result.state_code, tables) or result.state_code
        if result.city_id:
            location = f"{city_name(result.city_id, tables)}, {location}"
    render_result(Console(), inp, result, helpers, location)


@cli.group()
def compare():
    """Compare total tax across states or cities."""
    pass


@compare.command("states")
@calculator_options
@click.option("--top", type=int, default=0, help="Only show the first N rows.")
def compare_states_cmd(year, top, **fields):
    """Rank every state by total tax for the same income."""
    inp, tables = _prepare(year, fields)
    rows = compare_states(inp, tables)
    selected = next((r.total_tax for r in rows if r.state_code == inp.state), None)
    render_comparison(Console(), rows[:top] if top > 0 else rows, selected)


@compare.command("cities")
@calculator_options
@click.option("--top", type=int, default=0, help="Only show the first N rows.")
def compare_cities_cmd(year, top, **fields):
    """Rank every city with a local income tax by total tax."""
    inp, tables = _prepare(year, fields)
    rows = compare_cities(inp, tables)
    selected = None
    if inp.state:
        selected = compute_taxes(inp, tables).total_tax
    render_comparison(Console(), rows[:top] if top > 0 else rows, selected, by_city=True)


@cli.command("cities")
@click.argument("state")
@click.option("--year", help="Tax year of the rules to use.")
def cities(state, year):
    """List cities with a local income tax in STATE."""
    tables = _load_tables(year)
    state = state.strip().upper()
    if state not in tables.states:
        raise click.BadParameter(f"Unknown state '{state}'.", param_hint="STATE")

    found = cities_by_state(state, tables)
    if not found:
        click.echo(f"No cities with a local income tax in {tables.states[state].name}.")
        return
    for city in found:
        click.echo(f"  {city['id']:<16} {city['name']}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
