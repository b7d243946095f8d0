"""CLI entry point for the trade journal calculator."""

import json
import sys
from collections.abc import Callable
from typing import Any, TypeVar

import click

from trade_journal import __version__
from trade_journal.config import Settings, get_settings
from trade_journal.instruments import catalog
from trade_journal.journal.store import TradeJournalStore
from trade_journal.risk.calculator import compute
from trade_journal.risk.direction import analyze_direction
from trade_journal.risk.suggestions import suggest_levels
from trade_journal.schemas import TradeRecord
from trade_journal.types import CalculationResult, Category, Instrument
from trade_journal.utils.logging import get_logger, log_calculation, setup_logging


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show the version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Trade Journal - position sizing and risk calculator.

    Derives risk amount, lot size, pip distances and win/loss outcomes for
    forex, commodities, stocks, indices and crypto.
    """
    if version:
        click.echo(f"trade-journal version {__version__}")
        return

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _resolve_instrument(symbol: str | None, settings: Settings) -> Instrument:
    try:
        return catalog.get_strict(symbol or settings.default_symbol)
    except catalog.UnknownInstrumentError as exc:
        raise click.BadParameter(f"unknown instrument: {exc.args[0]}", param_hint="--symbol") from exc


F = TypeVar("F", bound=Callable[..., Any])


def _setup_options(func: F) -> F:
    """Attach the shared trade setup options."""
    options = [
        click.option("--symbol", "-s", default=None, help="Instrument symbol, e.g. EUR/USD"),
        click.option("--account", "-a", default=None, help="Account size"),
        click.option("--risk", "-r", default=None, help="Risk per trade in percent"),
        click.option("--entry", required=True, help="Entry price"),
        click.option("--exit", "exit_", required=True, help="Take-profit price"),
        click.option("--stop", required=True, help="Stop-loss price"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _run_calculation(
    settings: Settings,
    instrument: Instrument,
    account: str | None,
    risk: str | None,
    entry: str,
    exit_: str,
    stop: str,
) -> tuple[str | float, str | float, CalculationResult]:
    account_size = account if account is not None else settings.default_account_size
    risk_pct = risk if risk is not None else settings.default_risk_pct
    result = compute(account_size, risk_pct, instrument, entry, exit_, stop)
    log_calculation(
        get_logger("trade_journal.main"),
        symbol=instrument.symbol,
        direction=result.trade_direction.value,
        position_size=result.position_size,
        risk_amount=result.risk_amount,
        complete=result.is_complete,
    )
    return account_size, risk_pct, result


@cli.command()
@_setup_options
@click.option("--json", "as_json", is_flag=True, default=False, help="Print camelCase JSON")
def calc(
    symbol: str | None,
    account: str | None,
    risk: str | None,
    entry: str,
    exit_: str,
    stop: str,
    as_json: bool,
) -> None:
    """Calculate position size, risk and outcomes for one setup."""
    setup_logging()
    settings = get_settings()
    instrument = _resolve_instrument(symbol, settings)
    _, _, result = _run_calculation(settings, instrument, account, risk, entry, exit_, stop)

    if as_json:
        payload = {"symbol": instrument.symbol, "category": instrument.category.value}
        payload.update(result.to_dict())
        click.echo(json.dumps(payload))
        return

    click.echo(f"{instrument.symbol} ({instrument.category.value}) - {instrument.name}")
    click.echo(f"   Direction:       {result.trade_direction.value}")
    click.echo(f"   Risk amount:     ${result.risk_amount:,.2f}")
    click.echo(f"   Position size:   {result.position_size:,.4f}")
    click.echo(f"   Loss pips:       {result.loss_pips:,.1f}")
    click.echo(f"   Profit pips:     {result.profit_pips:,.1f}")
    click.echo(f"   Risk:reward:     1:{result.risk_reward_ratio:.2f}")
    click.echo(f"   If target hit:   +${result.profit_dollars:,.2f}")
    click.echo(f"   If stop hit:     -${result.loss_dollars:,.2f}")
    if not result.is_complete:
        click.echo("[INFO] Setup incomplete: check account, risk and price inputs")


@cli.command()
@click.option(
    "--category",
    "-c",
    type=click.Choice([catalog.ALL_CATEGORIES, *(c.value for c in Category)], case_sensitive=False),
    default=catalog.ALL_CATEGORIES,
    help="Category filter",
)
@click.option("--search", "term", default="", help="Symbol or name substring")
def instruments(category: str, term: str) -> None:
    """List catalog instruments."""
    matches = catalog.search(term, category)
    if not matches:
        click.echo("No instruments found")
        return
    for instrument in matches:
        click.echo(
            f"{instrument.symbol:<12} {instrument.category.value:<12} "
            f"pip={instrument.pip_size:g} pip_value={instrument.pip_value:g} "
            f"contract={instrument.contract_size:g}  {instrument.name}"
        )


@cli.command()
@click.option("--entry", required=True, help="Entry price")
@click.option("--exit", "exit_", required=True, help="Take-profit price")
@click.option("--stop", required=True, help="Stop-loss price")
def direction(entry: str, exit_: str, stop: str) -> None:
    """Detect trade direction from price placement."""
    analysis = analyze_direction(entry, exit_, stop)
    label = analysis.direction.value if analysis.direction else "UNKNOWN"
    click.echo(f"Direction:  {label}")
    click.echo(f"Confidence: {analysis.confidence:.0f}%")
    click.echo(f"Auto:       {'yes' if analysis.auto_detected else 'no'}")
    if analysis.summary:
        click.echo(analysis.summary)


@cli.command()
@click.option("--symbol", "-s", required=True, help="Instrument symbol")
@click.option("--entry", required=True, help="Entry price")
def suggest(symbol: str, entry: str) -> None:
    """Suggest target and stop levels for preset risk:reward ratios."""
    suggestions = suggest_levels(symbol, entry)
    if not suggestions:
        click.echo("Entry price must be positive")
        return
    for s in suggestions:
        click.echo(
            f"{s.name:<13} 1:{s.risk_reward:g}  target={s.exit_price:.5f} "
            f"stop={s.stop_loss:.5f}  ({s.description})"
        )


@cli.command()
@_setup_options
@click.option(
    "--status",
    type=click.Choice(["PLANNED", "ACTIVE", "WIN", "LOSS"]),
    default="PLANNED",
    help="Trade status",
)
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable)")
@click.option("--notes", default=None, help="Free-form notes")
def save(
    symbol: str | None,
    account: str | None,
    risk: str | None,
    entry: str,
    exit_: str,
    stop: str,
    status: str,
    tags: tuple[str, ...],
    notes: str | None,
) -> None:
    """Calculate a setup and save it to the trade journal."""
    setup_logging()
    logger = get_logger("trade_journal.main")
    settings = get_settings()
    instrument = _resolve_instrument(symbol, settings)
    account_size, risk_pct, result = _run_calculation(
        settings, instrument, account, risk, entry, exit_, stop
    )

    if not result.is_complete:
        logger.warning("trade_not_saved", symbol=instrument.symbol, reason="incomplete_setup")
        click.echo("[ERROR] Setup incomplete: nothing saved")
        sys.exit(1)

    try:
        record = TradeRecord.from_calculation(
            result,
            instrument,
            entry_price=entry,
            exit_price=exit_,
            stop_loss=stop,
            account_size=account_size,
            risk_percentage=risk_pct,
            status=status,  # type: ignore[arg-type]
            tags=tags,
            notes=notes,
        )
        settings.ensure_directories()
        TradeJournalStore(settings.journal_dir).append(record)
    except Exception as e:
        logger.exception("trade_save_failed", symbol=instrument.symbol, error=str(e))
        sys.exit(1)

    click.echo(
        f"[OK] Saved {record.trade_direction.value} {record.symbol} "
        f"lot size {record.lot_size:.4f} to {settings.journal_dir}"
    )


@cli.command()
def status() -> None:
    """Show the configuration summary."""
    setup_logging()
    settings = get_settings()

    click.echo("=" * 50)
    click.echo("Trade Journal - Status")
    click.echo("=" * 50)
    click.echo()

    click.echo("[Calculator Defaults]")
    click.echo(f"   Account size: {settings.default_account_size:,.2f}")
    click.echo(f"   Risk per trade: {settings.default_risk_pct}%")
    click.echo(f"   Instrument: {settings.default_symbol}")
    click.echo(f"   Catalog size: {len(catalog.CATALOG)} instruments")
    click.echo()

    click.echo("[Logging]")
    click.echo(f"   Log level: {settings.log_level}")
    click.echo(f"   Log format: {settings.log_format.value}")
    click.echo(f"   Journal dir: {settings.journal_dir}")
    click.echo()
    click.echo("=" * 50)


# Support python -m trade_journal.main
if __name__ == "__main__":
    cli()
