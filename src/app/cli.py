#!/usr/bin/env python3
"""
Perpetual-futures trade calculator CLI.

Computes margin, leverage, position size, PnL, fees and risk/reward for a
single leveraged trade setup.
"""

import argparse
import asyncio
import sys

from loguru import logger

from src.core.constants import (
    DEFAULT_FEE_RATE,
    DEFAULT_SETTINGS_FILE,
    EXCHANGE_RATE_CURRENCY,
    EXCHANGE_RATE_REFRESH_SECONDS,
)
from src.core.enums import PositionType
from src.core.exceptions.calculator import ConfigurationError
from src.core.models.config import CalculatorConstants, ExchangeRateConfig
from src.core.models.results import CalculationError, CalculationOutcome
from src.core.types.financial import (
    format_currency,
    format_leverage,
    format_quantity,
    format_ratio,
    format_signed_currency,
)
from src.infrastructure.exchange_rate import ExchangeRateClient, ExchangeRateRefresher
from src.infrastructure.storage import JsonFileSettingsStore

from .session import TradeCalculatorSession

INPUT_FLAGS = {
    "direction": "direction",
    "funds": "funds",
    "percent": "position_percent",
    "entry": "entry_price",
    "leverage": "manual_leverage",
    "liquidation": "preset_liquidation_price",
    "target": "target_price",
}


def setup_logging(debug: bool = False) -> None:
    """Configure logging with loguru."""
    logger.remove()

    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level,
    )


def render_report(
    outcome: CalculationOutcome,
    constants: CalculatorConstants,
    currency: str = EXCHANGE_RATE_CURRENCY,
) -> str:
    """Render a calculation outcome as text."""
    if isinstance(outcome, CalculationError):
        lines = [f"Error: {outcome.message}"]
        if outcome.margin is not None:
            lines.append(f"Margin:             {format_currency(outcome.margin)} USDT")
        return "\n".join(lines)

    leverage = outcome.leverage
    if leverage is None:
        leverage_text = format_leverage(None)
    else:
        leverage_text = f"{format_leverage(leverage.value)} ({leverage.source})"

    lines = [
        f"Fee rate:           {constants.fee_rate_percent:.2f}%",
        f"Margin:             {format_currency(outcome.margin)} USDT",
        f"Leverage:           {leverage_text}",
        f"Position size:      {format_quantity(outcome.position_size)}",
        f"Liquidation price:  {format_currency(outcome.actual_liquidation_price)}",
        f"Gross PnL:          {format_signed_currency(outcome.gross_pnl)} USDT",
        f"Total fee:          {format_currency(outcome.total_fee)} USDT",
        f"Net PnL:            {format_signed_currency(outcome.net_pnl)} USDT",
        f"Net PnL ({currency}):    {format_signed_currency(outcome.net_pnl_local)} {currency}",
        f"Risk/Reward:        {format_ratio(outcome.risk_reward_ratio)}",
    ]
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Leveraged perpetual-futures trade calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Short with manual leverage
  trade-calculator --direction short --funds 1000 --percent 10 --entry 60000 --leverage 10 --target 58000

  # Long with leverage derived from a liquidation price, saving the inputs
  trade-calculator --direction long --funds 500 --entry 50000 --liquidation 45000 --target 55000 --save

  # Re-run the last saved inputs with a live USD/TWD rate
  trade-calculator --load --fetch-rate
        """,
    )

    parser.add_argument(
        "--direction", choices=[p.value for p in PositionType], help="Position direction"
    )
    parser.add_argument("--funds", type=str, help="Available funds in USDT")
    parser.add_argument("--percent", type=str, help="Share of funds used as margin (1-100)")
    parser.add_argument("--entry", type=str, help="Entry price")
    parser.add_argument("--leverage", type=str, help="Manual leverage (1-125)")
    parser.add_argument(
        "--liquidation", type=str, help="Preset liquidation price used to derive leverage"
    )
    parser.add_argument("--target", type=str, help="Target exit price")

    parser.add_argument(
        "--fee-rate",
        type=float,
        default=DEFAULT_FEE_RATE,
        help=f"Fee rate per side (default: {DEFAULT_FEE_RATE})",
    )

    rate_group = parser.add_mutually_exclusive_group()
    rate_group.add_argument("--rate", type=float, help="Fixed USD to local-currency rate")
    rate_group.add_argument(
        "--fetch-rate", action="store_true", help="Fetch the USD to local-currency rate"
    )
    rate_group.add_argument(
        "--watch",
        action="store_true",
        help="Keep refreshing the exchange rate and recalculating until interrupted",
    )
    parser.add_argument(
        "--currency",
        type=str,
        default=EXCHANGE_RATE_CURRENCY,
        help=f"Local currency code (default: {EXCHANGE_RATE_CURRENCY})",
    )
    parser.add_argument(
        "--refresh-interval",
        type=float,
        default=EXCHANGE_RATE_REFRESH_SECONDS,
        help=f"Seconds between exchange rate refreshes in --watch mode (default: {EXCHANGE_RATE_REFRESH_SECONDS:g})",
    )

    parser.add_argument("--load", action="store_true", help="Start from the saved inputs")
    parser.add_argument("--save", action="store_true", help="Save the inputs after calculating")
    parser.add_argument(
        "--reset", action="store_true", help="Delete the saved inputs and use defaults"
    )
    parser.add_argument(
        "--settings-file",
        type=str,
        default=DEFAULT_SETTINGS_FILE,
        help=f"Settings file (default: {DEFAULT_SETTINGS_FILE})",
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def _collect_changes(args: argparse.Namespace) -> dict[str, str]:
    """Input fields given on the command line."""
    return {
        field: getattr(args, flag)
        for flag, field in INPUT_FLAGS.items()
        if getattr(args, flag) is not None
    }


async def _watch(session: TradeCalculatorSession, refresher: ExchangeRateRefresher) -> None:
    """Recalculate and print on every exchange rate refresh until cancelled."""

    def _on_update(_rate: float | None) -> None:
        outcome = session.calculate()
        print(render_report(outcome, session.constants, refresher.source.currency))
        print()

    refresher.on_update = _on_update
    await refresher.start()
    try:
        await asyncio.Event().wait()
    finally:
        await refresher.stop()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.debug)

    try:
        constants = CalculatorConstants(fee_rate=args.fee_rate)
        rate_config = ExchangeRateConfig(
            currency=args.currency.upper(), refresh_interval_seconds=args.refresh_interval
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    store = JsonFileSettingsStore(args.settings_file)
    session = TradeCalculatorSession(constants=constants, store=store)

    if args.reset:
        session.reset(forget_saved=True)
    elif args.load:
        session.load()
        logger.info(session.status_message)

    changes = _collect_changes(args)
    if changes:
        session.update(**changes)

    if args.watch:
        client = ExchangeRateClient(rate_config)
        session.refresher = ExchangeRateRefresher(client, rate_config.refresh_interval_seconds)
        try:
            asyncio.run(_watch(session, session.refresher))
        except KeyboardInterrupt:
            logger.info("Stopped")
        return 0

    if args.rate is not None:
        session.set_exchange_rate(args.rate)
    elif args.fetch_rate:
        session.set_exchange_rate(ExchangeRateClient(rate_config).get_rate())

    outcome = session.calculate()
    print(render_report(outcome, constants, rate_config.currency))

    if args.save and not session.save():
        logger.error(session.status_message)
        return 1

    return 1 if isinstance(outcome, CalculationError) else 0


if __name__ == "__main__":
    sys.exit(main())
