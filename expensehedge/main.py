"""CLI entry point for ExpenseHedge."""

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from expensehedge.api.schemas.request import (
    ConsolationOptimizationRequest,
    ConsolationQuoteRequest,
    HedgeQuoteRequest,
    OptimizationRequest,
    SimulationRequest,
)
from expensehedge.api.services.hedge_service import HedgeService
from expensehedge.config import get_settings
from expensehedge.logger import get_logger

console = Console()
logger = get_logger(__name__)


def scenario_options(func):
    """Options shared by every recurring-expense command."""
    options = [
        click.option("--baseline", "-b", type=float, required=True, help="Monthly expense when the event does not occur"),
        click.option("--adverse", "-a", type=float, required=True, help="Monthly expense when the event occurs"),
        click.option("--probability", "-p", type=float, required=True, help="Chance the event occurs each month (0-1)"),
        click.option("--price", type=float, default=None, help="YES share price (default: the event probability)"),
        click.option("--months", "-m", type=int, default=12, help="Months to hedge (default: 12)"),
        click.option("--fee", type=float, default=None, help="Market fee rate (default: from settings)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _fail(message: str, error: Exception):
    logger.error(f"{message}: {error}", exc_info=True)
    console.print(f"[red]{message}:[/red] {error}")
    raise SystemExit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="expensehedge")
def cli():
    """ExpenseHedge: insurance for expense spikes via prediction markets.

    Size a YES position that pays out when your costs jump.
    """
    pass


@cli.command()
@scenario_options
@click.option("--ratio", "-r", type=float, default=0.8, help="Fraction of the extra expense to hedge (default: 0.8)")
def quote(baseline, adverse, probability, price, months, fee, ratio):
    """Show shares, premium and per-month outcomes for a hedge."""
    try:
        request = HedgeQuoteRequest(
            baseline_expense=baseline,
            adverse_expense=adverse,
            event_probability=probability,
            price=price,
            months=months,
            fee_rate=fee,
            hedge_ratio=ratio,
        )
    except ValidationError as e:
        _fail("Invalid input", e)

    result = HedgeService(get_settings()).quote(request)
    _display_quote(result.quote, result.total_premium, months)


@cli.command()
@scenario_options
@click.option("--ratio", "-r", type=float, default=0.8, help="Fraction of the extra expense to hedge (default: 0.8)")
@click.option("--runs", type=int, default=None, help="Monte Carlo trials (default: from settings)")
@click.option("--seed", type=int, default=None, help="Seed for reproducible results")
def simulate(baseline, adverse, probability, price, months, fee, ratio, runs, seed):
    """Compare hedged and unhedged totals with a Monte Carlo simulation."""
    logger.info("=" * 60)
    logger.info("Simulate command started")

    try:
        request = SimulationRequest(
            baseline_expense=baseline,
            adverse_expense=adverse,
            event_probability=probability,
            price=price,
            months=months,
            fee_rate=fee,
            hedge_ratio=ratio,
            runs=runs,
            seed=seed,
        )
    except ValidationError as e:
        _fail("Invalid input", e)

    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
            task = progress.add_task("Simulating outcomes...", total=None)
            report = HedgeService(get_settings()).simulate(request)
            progress.update(task, completed=True)
    except ValueError as e:
        _fail("Error", e)

    _display_quote(report.quote, report.quote.premium * months, months)
    _display_report(report)


@cli.command()
@scenario_options
@click.option("--steps", type=int, default=None, help="Ratio steps over 0-100% (default: from settings)")
@click.option("--runs", type=int, default=None, help="Trials per candidate ratio (default: from settings)")
@click.option("--seed", type=int, default=None, help="Seed for reproducible results")
def optimize(baseline, adverse, probability, price, months, fee, steps, runs, seed):
    """Find the hedge ratio that best protects the worst case."""
    logger.info("=" * 60)
    logger.info("Optimize command started")

    try:
        request = OptimizationRequest(
            baseline_expense=baseline,
            adverse_expense=adverse,
            event_probability=probability,
            price=price,
            months=months,
            fee_rate=fee,
            steps=steps,
            runs=runs,
            seed=seed,
        )
    except ValidationError as e:
        _fail("Invalid input", e)

    try:
        with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
            task = progress.add_task("Testing hedge ratios...", total=None)
            result = HedgeService(get_settings()).optimize(request)
            progress.update(task, completed=True)
    except ValueError as e:
        _fail("Error", e)

    _display_optimization(result, title="Optimal Hedge Ratio")


@cli.command()
@click.option("--entry-cost", "-e", type=float, required=True, help="What you already paid, win or lose")
@click.option("--consolation", "-c", type=float, required=True, help="Payout wanted if things go badly")
@click.option("--probability", "-p", type=float, required=True, help="Chance of the adverse outcome (0-1)")
@click.option("--price", type=float, default=None, help="YES share price (default: the probability)")
@click.option("--fee", type=float, default=None, help="Market fee rate (default: from settings)")
@click.option("--ratio", "-r", type=float, default=1.0, help="Fraction of the consolation to buy (default: 1.0)")
@click.option("--runs", type=int, default=None, help="Monte Carlo trials (default: from settings)")
@click.option("--seed", type=int, default=None, help="Seed for reproducible results")
@click.option("--optimize", "optimize_ratio", is_flag=True, help="Search for the best consolation ratio")
def consolation(entry_cost, consolation, probability, price, fee, ratio, runs, seed, optimize_ratio):
    """Hedge a single event emotionally: get paid something if it goes badly."""
    service = HedgeService(get_settings())

    try:
        if optimize_ratio:
            request = ConsolationOptimizationRequest(
                entry_cost=entry_cost,
                desired_consolation=consolation,
                event_probability=probability,
                price=price,
                fee_rate=fee,
                runs=runs,
                seed=seed,
            )
        else:
            request = ConsolationQuoteRequest(
                entry_cost=entry_cost,
                desired_consolation=consolation,
                event_probability=probability,
                price=price,
                fee_rate=fee,
                hedge_ratio=ratio,
                runs=runs,
                seed=seed,
            )
    except ValidationError as e:
        _fail("Invalid input", e)

    if optimize_ratio:
        _display_optimization(service.optimize_consolation(request), title="Optimal Consolation Ratio")
        return

    result = service.consolation(request)
    quote = result.quote

    table = Table(title="Consolation Hedge", show_header=True)
    table.add_column("Outcome", style="bold")
    table.add_column("Hedged", justify="right")
    table.add_column("Unhedged", justify="right")
    table.add_row("Event goes badly", f"${quote.outcome_if_adverse_event:,.2f}", f"${quote.unhedged_outcome_if_adverse_event:,.2f}")
    table.add_row("Event goes well", f"${quote.outcome_if_favorable_event:,.2f}", f"${quote.unhedged_outcome_if_favorable_event:,.2f}")

    console.print(
        Panel(
            f"[bold]Shares to buy:[/bold] {quote.shares:,.2f}\n"
            f"[bold]Premium:[/bold] ${quote.premium:,.2f}",
            title="Consolation",
            border_style="blue",
        )
    )
    console.print(table)
    _display_report(result.report)


def _display_quote(quote, total_premium: float, months: int):
    """Display the deterministic hedge economics."""
    console.print()
    console.print(
        Panel(
            f"[bold]Shares to buy per month:[/bold] {quote.shares:,.2f}\n"
            f"[bold]Premium per month:[/bold] ${quote.premium:,.2f}\n"
            f"[bold]Premium over {months} months:[/bold] ${total_premium:,.2f}",
            title="Hedge Quote",
            border_style="blue",
        )
    )

    table = Table(title="Monthly Outcomes", show_header=True)
    table.add_column("Scenario", style="bold")
    table.add_column("Hedged", justify="right")
    table.add_column("Unhedged", justify="right")
    table.add_row("Event occurs", f"${quote.hedged_outcome_if_event_true:,.2f}", f"${quote.unhedged_outcome_if_event_true:,.2f}")
    table.add_row("No event", f"${quote.hedged_outcome_if_event_false:,.2f}", f"${quote.unhedged_outcome_if_event_false:,.2f}")
    console.print(table)


def _display_report(report):
    """Display hedged vs. unhedged simulation statistics."""
    table = Table(title="Hedged vs Unhedged", show_header=True)
    table.add_column("Statistic", style="bold")
    table.add_column("Hedged", justify="right")
    table.add_column("Unhedged", justify="right")

    for label, field in [
        ("Mean outcome", "mean"),
        ("Median outcome", "median"),
        ("10% worst case", "worst_case_10"),
    ]:
        table.add_row(
            label,
            f"${getattr(report.hedged_stats, field):,.2f}",
            f"${getattr(report.unhedged_stats, field):,.2f}",
        )

    console.print()
    console.print(table)
    console.print(
        f"Hedging did better in [bold]{report.hedged_better:.1%}[/bold] of trials, "
        f"average improvement [bold]${report.average_improvement:,.2f}[/bold], "
        f"worst case improved by [bold]${report.worst_case_improvement:,.2f}[/bold]"
    )


def _display_optimization(result, title: str):
    """Display the chosen ratio and the sweep behind it."""
    console.print()
    console.print(
        Panel(
            f"[bold]Hedge ratio:[/bold] {result.optimal_ratio:.0%}\n"
            f"[bold]Worst-case improvement:[/bold] ${result.worst_case_improvement:,.2f}\n"
            f"[bold]Volatility reduction:[/bold] {result.volatility_reduction:.1f}%\n"
            f"[bold]Max drawdown reduction:[/bold] {result.max_drawdown_reduction:.1f}%\n"
            f"[bold]Risk score:[/bold] {result.risk_score:.1f}\n"
            f"[bold]Win percentage:[/bold] {result.win_percentage:.1f}%\n"
            f"[bold]Risk-adjusted return:[/bold] {result.sharpe_ratio:.3f}",
            title=title,
            border_style="green",
        )
    )

    table = Table(title="Candidates", show_header=True)
    table.add_column("Ratio", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Worst case", justify="right")
    table.add_column("Volatility", justify="right")
    table.add_column("Win %", justify="right")

    for candidate in result.candidates:
        style = "green" if candidate.ratio == result.optimal_ratio else None
        table.add_row(
            f"{candidate.ratio:.0%}",
            f"{candidate.risk_score:.1f}",
            f"${candidate.worst_case_improvement:,.2f}",
            f"{candidate.volatility_reduction:.1f}%",
            f"{candidate.win_percentage:.1f}%",
            style=style,
        )

    console.print(table)
    console.print(
        "[dim]Note: These are estimates only. No orders are placed. "
        "Always do your own research before placing bets.[/dim]"
    )


if __name__ == "__main__":
    cli()
