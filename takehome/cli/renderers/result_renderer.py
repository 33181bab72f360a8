"""Rich renderer for tax results and comparisons.

Transforms SDK results into formatted Rich tables.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from takehome.sdk.formatting import format_currency, format_whole
from takehome.sdk.periods import (
    HEADLINE_PERIOD_LABEL,
    PERIOD_ADJECTIVE,
    from_yearly,
    headline_period,
    periods_to_show,
)
from takehome.sdk.schemas import CalculatorInput, ComparisonRow, TaxHelpers, TaxResult


def render_result(
    console: Console,
    inp: CalculatorInput,
    result: TaxResult,
    helpers: TaxHelpers,
    location: str = "",
) -> None:
    """Render a full tax breakdown.

    Args:
        console: Rich Console instance
        inp: The input the result was computed from
        result: SDK output from compute_taxes()
        helpers: SDK output from build_helpers()
        location: Display name of the selected state/city
    """
    _render_headline(console, inp, result)
    _render_all_taxes(console, result, helpers, location)
    _render_income_only(console, result)
    _render_stocks_only(console, result)
    _render_periods(console, inp, result)


def _render_headline(console: Console, inp: CalculatorInput, result: TaxResult) -> None:
    period = headline_period(inp)
    label = "this year" if period == "yearly" else HEADLINE_PERIOD_LABEL.get(period, "a year")
    gross = from_yearly(result.total_amount - result.purchase_amount, period)
    net = from_yearly(result.final_total, period)
    fmt = format_whole if period in ("yearly", "weekly") else format_currency

    console.print(Panel(
        f"You think you made [bold]{fmt(gross)}[/bold] {label}.\n"
        f"After taxes you keep [bold green]{fmt(net)}[/bold green].",
        border_style="cyan",
    ))


def _render_all_taxes(console: Console, result: TaxResult, helpers: TaxHelpers, location: str) -> None:
    table = Table(title=f"Taxes{f' - {location}' if location else ''}", box=box.SIMPLE_HEAD)
    table.add_column("Tax")
    table.add_column("Amount", justify="right")
    table.add_column("How", style="dim")

    rows = [
        ("Federal", result.federal, helpers.federal),
        ("State", result.state, helpers.state),
        ("City", result.city, helpers.city),
        ("FICA", result.fica, helpers.fica),
        ("Self-employment", result.self_employment, helpers.self_employment),
        ("State disability", result.state_disability, helpers.state_disability),
        ("Capital gains (federal)", result.capital_gains, helpers.capital_gains),
    ]
    for name, amount, helper in rows:
        table.add_row(name, format_currency(amount), helper.replace("; ", "\n").replace(", ", "\n"))

    if result.purchase_amount > 0:
        rate = result.sales_tax_rate_percent
        how = f"{format_whole(result.purchase_amount)} at {rate:g}%" if rate is not None else "—"
        table.add_row("Sales tax", format_currency(result.sales), how)

    table.add_section()
    table.add_row("[bold]Total tax[/bold]", f"[bold]{format_currency(result.total_tax)}[/bold]", "")
    table.add_row("Take home", format_currency(result.final_total), "")
    if result.purchase_amount > 0:
        table.add_row("Purchase with tax", format_currency(result.purchase_total_with_tax), "")
    console.print(table)


def _render_income_only(console: Console, result: TaxResult) -> None:
    view = result.income_only
    table = Table(title="Income only", box=box.SIMPLE_HEAD, show_header=False)
    table.add_column("Tax")
    table.add_column("Amount", justify="right")
    for name, amount in [
        ("Federal", view.federal),
        ("State", view.state),
        ("City", view.city),
        ("FICA", view.fica),
        ("Self-employment", view.self_employment),
        ("State disability", view.state_disability),
    ]:
        table.add_row(name, format_currency(amount))
    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{format_currency(view.total)}[/bold]")
    console.print(table)


def _render_stocks_only(console: Console, result: TaxResult) -> None:
    if result.short_term_amount + result.long_term_amount <= 0:
        return
    view = result.stocks_only
    table = Table(title="Capital gains", box=box.SIMPLE_HEAD, show_header=False)
    table.add_column("Tax")
    table.add_column("Amount", justify="right")
    for name, amount in [
        ("Federal (short-term)", view.federal_short_term),
        ("State (short-term)", view.state_short_term),
        ("City (short-term)", view.city_short_term),
        ("Federal (long-term)", view.federal_long_term),
        ("State (long-term)", view.state_long_term),
        ("State (other)", view.state_other),
    ]:
        if amount != 0:
            table.add_row(name, format_currency(amount))
    table.add_section()
    table.add_row("[bold]Total[/bold]", f"[bold]{format_currency(view.total)}[/bold]")
    console.print(table)


def _render_periods(console: Console, inp: CalculatorInput, result: TaxResult) -> None:
    periods = periods_to_show(inp)
    if not periods:
        return
    table = Table(title="Per period", box=box.SIMPLE_HEAD)
    table.add_column("Period")
    table.add_column("Gross", justify="right")
    table.add_column("Tax", justify="right")
    table.add_column("Take home", justify="right")
    gross = result.total_amount - result.purchase_amount
    taxes = result.total_tax - result.sales
    for period in periods:
        table.add_row(
            PERIOD_ADJECTIVE.get(period, period),
            format_currency(from_yearly(gross, period)),
            format_currency(from_yearly(taxes, period)),
            format_currency(from_yearly(result.final_total, period)),
        )
    console.print(table)


def render_comparison(
    console: Console,
    rows: list[ComparisonRow],
    selected_total: Optional[float],
    by_city: bool = False,
) -> None:
    """Render ranked totals with the difference from the selected location."""
    table = Table(box=box.SIMPLE_HEAD)
    table.add_column("#", justify="right", style="dim")
    table.add_column("City" if by_city else "State")
    table.add_column("Total tax", justify="right")
    table.add_column("vs. yours", justify="right")

    for rank, row in enumerate(rows, start=1):
        name = f"{row.city_name}, {row.state_code}" if by_city else row.state_name
        table.add_row(str(rank), name, format_whole(row.total_tax), _format_diff(row.total_tax, selected_total))
    console.print(table)


def _format_diff(total: float, selected_total: Optional[float]) -> str:
    if selected_total is None:
        return ""
    diff = round(total - selected_total)
    if diff == 0:
        return "Same"
    if diff > 0:
        return f"[red]+{format_whole(diff)}[/red]"
    return f"[green]{format_whole(diff)}[/green]"
