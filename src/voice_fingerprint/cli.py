"""Command-line interface for Voice Fingerprint."""

import logging
from datetime import datetime, timezone
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from voice_fingerprint import __version__
from voice_fingerprint.errors import VoicePrintError

console = Console()

_SEVERITY_STYLES = {"minor": "yellow", "moderate": "orange3", "major": "red", "low": "yellow", "medium": "orange3", "high": "red"}


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_voiceprint(path: str):
    from voice_fingerprint.voice import VoicePrint

    return VoicePrint.from_json(Path(path).read_text(encoding="utf-8"))


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", "-L", default=None, help="Logging level (defaults to VFP_LOG_LEVEL)")
def main(log_level: str | None) -> None:
    """Voice Fingerprint - Build and track a writer's voice profile."""
    from voice_fingerprint.config import get_settings

    _setup_logging(log_level or get_settings().log_level)


@main.command()
@click.argument("path", type=click.Path(exists=True))
def analyze(path: str) -> None:
    """Show the per-sample metrics for one text file."""
    from voice_fingerprint.engine import VoiceEngine
    from voice_fingerprint.ingest import load_sample

    engine = VoiceEngine()
    try:
        sample = load_sample(Path(path))
        with console.status(f"Analyzing {Path(path).name}..."):
            metrics = engine.analyze_sample(sample)
    except VoicePrintError as e:
        raise click.ClickException(str(e))

    table = Table(title=f"Sample Metrics: {sample.title} ({metrics.word_count:,} words)")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    for name, value in metrics.metric_values().items():
        table.add_row(name, f"{value:.4f}")
    table.add_row("tonal_profile", metrics.semantic.tonal_profile.value)
    console.print(table)

    if metrics.lexical.preferred_words:
        console.print(f"\n[bold]Preferred words:[/bold] {', '.join(w for w, _ in metrics.lexical.preferred_words)}")
    if metrics.degraded:
        console.print(f"[yellow]Degraded dimensions:[/yellow] {', '.join(metrics.degraded)}")


@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--user", "-u", required=True, help="Owner of the profile")
@click.option("--output", "-o", type=click.Path(), help="Output file for the VoicePrint (JSON)")
@click.option("--previous", "-p", type=click.Path(exists=True), help="Profile to rebuild (bumps the version)")
@click.option("--verbose", "-v", is_flag=True, help="Show progress")
def create(paths: tuple[str, ...], user: str, output: str | None, previous: str | None, verbose: bool) -> None:
    """Build a VoicePrint from several writing samples.

    Example:
        vfp create email.txt story.md essay.txt -u alice -o alice_voice.json
    """
    from voice_fingerprint.engine import VoiceEngine
    from voice_fingerprint.ingest import load_sample

    def progress_callback(progress):
        console.print(f"  [{progress.phase}] {progress.current}/{progress.total} {progress.message}")

    engine = VoiceEngine(progress_callback=progress_callback if verbose else None)

    try:
        samples = [load_sample(Path(p)) for p in paths]
        console.print(f"[bold]Building VoicePrint[/bold] for {user} from {len(samples)} samples\n")
        with console.status("Analyzing samples..."):
            if previous:
                prior = _load_voiceprint(previous)
                if prior.user_id != user:
                    raise click.ClickException(
                        f"{previous} belongs to {prior.user_id}, not {user}"
                    )
                voiceprint = engine.rebuild_voiceprint(prior, samples)
            else:
                voiceprint = engine.create_voiceprint(samples, user_id=user)
    except VoicePrintError as e:
        raise click.ClickException(str(e))

    console.print(voiceprint.summary())

    if output:
        output_path = Path(output)
        output_path.write_text(voiceprint.to_json(), encoding="utf-8")
        console.print(f"\n[green]OK[/green] VoicePrint saved to {output_path}")


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--profile", "-p", "profile_path", required=True, type=click.Path(exists=True), help="VoicePrint JSON")
def drift(path: str, profile_path: str) -> None:
    """Check a new text file for drift from a stored VoicePrint."""
    from voice_fingerprint.engine import VoiceEngine
    from voice_fingerprint.ingest import load_sample

    engine = VoiceEngine()
    voiceprint = _load_voiceprint(profile_path)
    try:
        sample = load_sample(Path(path))
        events = engine.detect_drift(sample.content, voiceprint, datetime.now(timezone.utc), sample_id=sample.id)
    except VoicePrintError as e:
        raise click.ClickException(str(e))

    if not events:
        console.print(f"[green]OK[/green] {sample.title} matches the voice in {voiceprint.id}")
        return

    table = Table(title=f"Drift Events: {sample.title}")
    table.add_column("Dimension", style="cyan")
    table.add_column("Metric")
    table.add_column("Change", justify="right")
    table.add_column("Severity")
    table.add_column("Description", style="dim")
    for event in events:
        style = _SEVERITY_STYLES[event.severity.value]
        table.add_row(
            event.dimension,
            event.metric,
            f"{event.change_percent:+.1f}%",
            f"[{style}]{event.severity.value}[/{style}]",
            event.description,
        )
    console.print(table)


@main.command()
@click.argument("profile", type=click.Path(exists=True))
def traits(profile: str) -> None:
    """Show traits, pitfalls and the narrative summary for a VoicePrint."""
    from voice_fingerprint.engine import VoiceEngine

    result = VoiceEngine().summarize(_load_voiceprint(profile))

    table = Table(title="Traits")
    table.add_column("Trait", style="cyan")
    table.add_column("Category")
    table.add_column("Strength", justify="right", style="green")
    table.add_column("Description", style="dim")
    for trait in result.traits:
        table.add_row(trait.name, trait.category.value, f"{trait.strength:.2f}", trait.description)
    console.print(table)

    if result.pitfalls:
        table = Table(title="Pitfalls")
        table.add_column("Pitfall", style="cyan")
        table.add_column("Severity")
        table.add_column("Suggestion", style="dim")
        for pitfall in result.pitfalls:
            style = _SEVERITY_STYLES[pitfall.severity.value]
            table.add_row(pitfall.name, f"[{style}]{pitfall.severity.value}[/{style}]", pitfall.suggestion)
        console.print(table)

    console.print(f"\n[bold]Summary:[/bold] {result.summary}")


@main.command()
@click.argument("profile_a", type=click.Path(exists=True))
@click.argument("profile_b", type=click.Path(exists=True))
def compare(profile_a: str, profile_b: str) -> None:
    """Compare two VoicePrints (older first) and report how the voice evolved."""
    from voice_fingerprint.engine import VoiceEngine

    engine = VoiceEngine()
    old, new = _load_voiceprint(profile_a), _load_voiceprint(profile_b)
    similarity = engine.compare(old, new)
    evolution = engine.evolution(old, new)

    table = Table(title=f"Voice Comparison: {old.id} vs {new.id}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Similarity", f"{similarity}/100")
    table.add_row("Drift score", str(evolution.drift_score))
    table.add_row("Trend", evolution.trend.value)
    table.add_row("Changed", ", ".join(evolution.changed_dimensions) or "-")
    console.print(table)

    for recommendation in evolution.recommendations:
        console.print(f"  - {recommendation}")


@main.command()
def config() -> None:
    """Show the effective settings."""
    from voice_fingerprint.config import get_settings

    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for name, value in get_settings().model_dump().items():
        table.add_row(name, str(value))
    console.print(table)


if __name__ == "__main__":
    main()
