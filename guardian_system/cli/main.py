"""Command line front-end for the Guardian content gating engine using Typer and Rich."""

from pathlib import Path
from typing import List

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from guardian_system.config.logging import get_logger
from guardian_system.config.settings import settings
from guardian_system.data_management.policy_store import PolicyStore
from guardian_system.data_management.schemas import (
    TIER_MAPPING_VERSION,
    AgeTier,
    ContentItem,
    tier_to_age_group,
)
from guardian_system.pipeline import ENGINE_NAME, VERSION, GuardianEngine

# Initialize CLI app
app = typer.Typer(
    help="Guardian CLI - age-tier content gating with the Guardian Score",
    add_completion=False,
)

console = Console()

logger = get_logger("cli")

_ITEMS_ADAPTER = TypeAdapter(List[ContentItem])


def _build_engine() -> GuardianEngine:
    try:
        store = PolicyStore.from_settings(settings.policy_path)
    except (OSError, ValidationError) as e:
        console.print(f"[red]✗[/red] Could not load policy {settings.policy_path}: {escape(str(e))}")
        logger.error(f"Policy load failed: {e}")
        raise typer.Exit(1)
    return GuardianEngine(policy_store=store)


def _load_items(items_file: Path) -> List[ContentItem]:
    try:
        return _ITEMS_ADAPTER.validate_json(items_file.read_text(encoding="utf-8"))
    except OSError as e:
        console.print(f"[red]✗[/red] Cannot read {items_file}: {escape(str(e))}")
        raise typer.Exit(1)
    except ValidationError as e:
        console.print(f"[red]✗[/red] Invalid content items in {items_file}:\n{escape(str(e))}")
        raise typer.Exit(1)


def _resolve_tier(tier: str) -> AgeTier:
    resolved = AgeTier.coerce(tier)
    if resolved.value != tier.strip().lower():
        console.print(
            f"[yellow]⚠[/yellow] Unknown tier '{escape(tier)}', using {resolved.display_name}"
        )
    return resolved


@app.command()
def evaluate(
    items_file: Path = typer.Argument(..., help="JSON list of content items"),
    tier: str = typer.Option(settings.default_tier, "--tier", "-t", help="Target age tier"),
    show_blocked: bool = typer.Option(False, "--show-blocked", help="Include blocked items"),
) -> None:
    """
    Evaluate content items for an age tier.

    Args:
        items_file: JSON file holding a list of content items
        tier: Age tier name (e.g. UNDER_8)
        show_blocked: List blocked items with their primary reason
    """
    age_tier = _resolve_tier(tier)
    items = _load_items(items_file)
    engine = _build_engine()
    logger.info(f"Evaluating {len(items)} items for {age_tier.value}")

    verdicts = engine.evaluate_many(items, age_tier)

    table = Table(title=f"Verdicts for {age_tier.display_name}", show_header=True, header_style="bold magenta")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Trust", style="yellow")
    table.add_column("Score", justify="right")
    table.add_column("Verdict")
    table.add_column("Reason", style="dim")

    for item, verdict in zip(items, verdicts):
        if not verdict.allowed and not show_blocked:
            continue
        status = "[green]✓ Allowed[/green]" if verdict.allowed else "[red]✗ Blocked[/red]"
        primary = verdict.primary_reason
        table.add_row(
            item.id,
            escape(item.title),
            verdict.trust_level.display_name,
            f"{verdict.score.total} ({verdict.score.grade.display_name})",
            status,
            escape(primary.message) if primary else "",
        )

    console.print(table)

    allowed = sum(1 for verdict in verdicts if verdict.allowed)
    console.print(f"\n[bold]{allowed}[/bold] of {len(verdicts)} items allowed")


@app.command()
def rank(
    items_file: Path = typer.Argument(..., help="JSON list of content items"),
    tier: str = typer.Option(settings.default_tier, "--tier", "-t", help="Target age tier"),
) -> None:
    """
    Filter content items for an age tier and rank them by Guardian Score.

    Args:
        items_file: JSON file holding a list of content items
        tier: Age tier name (e.g. UNDER_8)
    """
    age_tier = _resolve_tier(tier)
    items = _load_items(items_file)
    engine = _build_engine()

    ranked = engine.filter_and_rank(items, age_tier)

    table = Table(title=f"Ranked for {age_tier.display_name}", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Grade")

    for position, (item, verdict) in enumerate(ranked, start=1):
        table.add_row(
            str(position),
            item.id,
            escape(item.title),
            str(verdict.score.total),
            verdict.score.grade.display_name,
        )

    console.print(table)
    console.print(f"\n[bold]{len(ranked)}[/bold] of {len(items)} items passed")


@app.command()
def tiers() -> None:
    """Display the age tiers and their active policy values."""
    policy = _build_engine().policy_store.current

    table = Table(title="Age Tiers", show_header=True, header_style="bold magenta")
    table.add_column("Tier", style="cyan")
    table.add_column("Name")
    table.add_column("Strictness", justify="right")
    table.add_column("Required Score", justify="right", style="green")
    table.add_column("Max Duration", justify="right")
    table.add_column(f"Age Group (v{TIER_MAPPING_VERSION})", style="yellow")

    for tier in AgeTier:
        max_duration = policy.max_duration_seconds[tier]
        table.add_row(
            tier.name,
            tier.display_name,
            str(tier.strictness),
            str(policy.required_score(tier)),
            f"{max_duration // 60} min" if max_duration else "unrestricted",
            tier_to_age_group(tier).name,
        )

    console.print(table)


@app.command()
def status() -> None:
    """
    Display engine status and configuration.

    Shows logging settings, the active policy snapshot and the rule chain.
    """
    logger.info("Displaying system status")
    engine = _build_engine()
    info = engine.engine_info()

    table = Table(title="Guardian Status", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan", width=20)
    table.add_column("Status", style="green", width=15)
    table.add_column("Details", style="yellow")

    table.add_row("Engine", "✓ Ready", f"{info.name} {info.version}")

    policy_source = settings.policy_path or "built-in tables"
    table.add_row("Policy", "✓ Loaded", f"{info.policy_version} ({policy_source})")

    table.add_row("Rules", f"✓ {info.rules_count} active", ", ".join(info.rule_names))

    log_details = f"Level: {settings.log_level}, Format: {settings.log_format}"
    table.add_row("Logging", "✓ Active", log_details)

    table.add_row("Default Tier", "✓ Set", AgeTier.coerce(settings.default_tier).display_name)

    console.print(table)


@app.command()
def version() -> None:
    """Display version information."""
    console.print(f"[bold]{ENGINE_NAME}[/bold]")
    console.print(f"Version: {VERSION}")


if __name__ == "__main__":
    app()
