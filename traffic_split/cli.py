"""CLI for the payment traffic splitter.

Lets operators check a gateway split and watch how a batch of simulated
payments spreads across gateways before rolling the split out.
"""

import random
import sys
from decimal import Decimal
from typing import List, Optional, Tuple

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from traffic_split.config import Settings, parse_gateway_weights
from traffic_split.core import RoutingTable, build_entries, build_router
from traffic_split.domain import Payment
from traffic_split.exceptions import RoutingConfigurationError
from traffic_split.gateways import available_gateways
from traffic_split.monitoring import setup_logging

app = typer.Typer(
    name="traffic-split",
    help="Weighted payment traffic splitter - validate and simulate gateway splits",
    add_completion=False,
)

console = Console()

WEIGHTS_HELP = "Split override as code=weight pairs, e.g. 'paypal_payment_gateway=70,volt_payment_gateway=30'"


def _load_settings(verbose: bool) -> Settings:
    """Load settings and configure logging to stderr."""
    try:
        settings = Settings()
    except ValueError as e:
        console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise typer.Exit(1)

    if verbose:
        settings = settings.model_copy(update={"log_level": "DEBUG"})
    setup_logging(settings, stream=sys.stderr)
    return settings


def _resolve_weights(settings: Settings, weights: Optional[str]) -> List[Tuple[str, int]]:
    try:
        return parse_gateway_weights(weights) if weights else settings.get_gateway_weights()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def make_payment(rng: random.Random) -> Payment:
    """Generate a card payment in PLN with a random amount."""
    return Payment(
        amount=Decimal(rng.randint(100, 100_000)) / 100,
        currency="PLN",
        payment_method="card",
    )


@app.command()
def simulate(
    payments: int = typer.Option(
        1000,
        "--payments",
        "-n",
        min=1,
        help="Number of payments to route",
    ),
    weights: Optional[str] = typer.Option(
        None,
        "--weights",
        "-w",
        help=WEIGHTS_HELP,
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed for a reproducible run",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Route simulated payments and show how traffic was split."""
    settings = _load_settings(verbose)
    pairs = _resolve_weights(settings, weights)

    if seed is None:
        seed = settings.random_seed
    rng = random.Random(seed) if seed is not None else None

    try:
        router = build_router(settings, random_source=rng, gateway_weights=pairs)
    except RoutingConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    payment_rng = rng or random.Random()
    for _ in range(payments):
        router.route(make_payment(payment_rng))

    table = Table(title=f"Traffic split over {payments} payments")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Gateway", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Payments", justify="right")
    table.add_column("Share", justify="right", style="green")

    for index, ((code, weight), load) in enumerate(zip(pairs, router.traffic_loads()), start=1):
        table.add_row(str(index), code, f"{weight}%", str(load), f"{load / payments:.1%}")

    console.print(table)


@app.command()
def validate(
    weights: Optional[str] = typer.Option(
        None,
        "--weights",
        "-w",
        help=WEIGHTS_HELP,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """Check that a gateway split can be used for routing."""
    settings = _load_settings(verbose)
    pairs = _resolve_weights(settings, weights)

    try:
        routing_table = RoutingTable.build(build_entries(pairs))
    except RoutingConfigurationError as e:
        console.print(f"[red]Invalid split:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    split = ", ".join(f"{code}={weight}" for code, weight in pairs)
    console.print(
        f"[green]Valid split[/green] ({len(routing_table.entries)} gateways, "
        f"total {routing_table.total_weight}): {split}"
    )


@app.command()
def gateways() -> None:
    """List the gateway codes that can appear in a split."""
    for code in available_gateways():
        console.print(code)


@app.callback(invoke_without_command=True)
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Weighted payment traffic splitter."""
    if version:
        from traffic_split import __version__
        console.print(f"traffic-split v{__version__}")
        raise typer.Exit()


if __name__ == "__main__":
    app()
