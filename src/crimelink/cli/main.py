"""Command-line interface for crimelink.

Provides CLI commands for scene comparison, similarity search and
series detection over JSONL scene files.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from crimelink.audit.helpers import get_package_version
from crimelink.scoring.profiles import DEFAULT_PROFILE_NAME, PROFILES

__all__ = ["cli"]

__version__ = get_package_version()


def _profile_options(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Attach --profile and --profile-file options."""
    fn = click.option(
        "--profile-file",
        type=click.Path(exists=True, dir_okay=False),
        default=None,
        help="JSON weight profile file (overrides --profile)",
    )(fn)
    fn = click.option(
        "--profile",
        "-p",
        type=click.Choice(list(PROFILES)),
        default=DEFAULT_PROFILE_NAME,
        show_default=True,
        help="Registered weight profile",
    )(fn)
    return fn


def _resolve_profile(profile: str, profile_file: str | None) -> Any:
    from crimelink.scoring import get_profile, load_profile

    if profile_file:
        return load_profile(profile_file)
    return get_profile(profile)


def _fail(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="crimelink")
def cli() -> None:
    """Crime-scene similarity scoring and series detection.

    Use 'crimelink COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("records", type=click.Path(exists=True, dir_okay=False))
@click.argument("base_id", type=int)
@click.argument("other_id", type=int)
@_profile_options
def compare(
    records: str,
    base_id: int,
    other_id: int,
    profile: str,
    profile_file: str | None,
) -> None:
    """Compare two scenes of RECORDS by id.

    Examples
    --------
        crimelink compare scenes.jsonl 3 7
        crimelink compare scenes.jsonl 3 7 --profile geography-emphasis
    """
    from crimelink.api import find_record, load_records
    from crimelink.scoring import compare_scenes

    try:
        scenes = load_records(records)
        weights = _resolve_profile(profile, profile_file)
        base = find_record(scenes, base_id)
        result = compare_scenes(base, find_record(scenes, other_id), weights)
    except Exception as e:
        _fail(str(e))
        return

    click.echo(f"Scene {base_id} vs scene {other_id} ({result.profile})")
    click.echo(f"  Score: {result.score:.2f}")
    click.echo(f"  Classification: {result.classification.value}")
    for reason in result.reasons:
        click.echo(f"  - {reason}")


@cli.command()
@click.argument("records", type=click.Path(exists=True, dir_okay=False))
@click.argument("base_id", type=int)
@click.option(
    "--threshold",
    "-t",
    type=click.FloatRange(0.0, 100.0),
    default=60.0,
    show_default=True,
    help="Minimum similarity score",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON lines")
@_profile_options
def search(
    records: str,
    base_id: int,
    threshold: float,
    as_json: bool,
    profile: str,
    profile_file: str | None,
) -> None:
    """Rank scenes of RECORDS similar to scene BASE_ID.

    Examples
    --------
        crimelink search scenes.jsonl 3
        crimelink search scenes.jsonl 3 --threshold 75 --json
    """
    from crimelink.api import find_record, load_records
    from crimelink.search import find_similar

    try:
        scenes = load_records(records)
        weights = _resolve_profile(profile, profile_file)
        results = find_similar(find_record(scenes, base_id), scenes, threshold, weights)
    except Exception as e:
        _fail(str(e))
        return

    if as_json:
        for result in results:
            click.echo(json.dumps(result.to_dict(), sort_keys=True))
        return

    if not results:
        click.echo(f"No scenes scoring >= {threshold:g} against scene {base_id}")
        return

    click.echo(f"{len(results)} scene(s) similar to scene {base_id}:")
    for result in results:
        click.echo(
            f"  {result.compared.scene_id:>6}  {result.score:6.2f}  "
            f"{result.classification.value}"
        )


@cli.command()
@click.argument("records", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print series as JSON lines")
@_profile_options
def series(
    records: str,
    as_json: bool,
    profile: str,
    profile_file: str | None,
) -> None:
    """Detect probable crime series in RECORDS.

    A series is a seed scene plus at least two scenes scoring >= 75
    against it.

    Examples
    --------
        crimelink series scenes.jsonl
        crimelink series scenes.jsonl --profile geography-emphasis --json
    """
    from crimelink.api import load_records
    from crimelink.clustering import detect_series

    try:
        scenes = load_records(records)
        weights = _resolve_profile(profile, profile_file)
        groups = detect_series(scenes, weights)
    except Exception as e:
        _fail(str(e))
        return

    if as_json:
        for group in groups:
            click.echo(json.dumps(group.to_dict(), sort_keys=True))
        return

    if not groups:
        click.echo(f"No series detected among {len(scenes)} scenes")
        return

    click.secho(f"✓ Detected {len(groups)} series among {len(scenes)} scenes", fg="green")
    for group in groups:
        ids = ", ".join(str(scene_id) for scene_id in group.member_ids)
        click.echo(f"  {group.series_id}  ({len(group)} scenes): {ids}")


@cli.command()
@click.argument("records", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False),
    default="out",
    help="Output directory for reports (default: out)",
)
@click.option("--base-id", type=int, default=None, help="Also rank scenes similar to this scene")
@click.option(
    "--threshold",
    "-t",
    type=click.FloatRange(0.0, 100.0),
    default=60.0,
    help="Minimum score for --base-id search (default: 60)",
)
@click.option("--strict", is_flag=True, help="Reject scenes without crime type or location")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@_profile_options
def analyze(
    records: str,
    output_dir: str,
    base_id: int | None,
    threshold: float,
    strict: bool,
    verbose: bool,
    profile: str,
    profile_file: str | None,
) -> None:
    """Run a full analysis of RECORDS and write reports.

    Writes series.jsonl, summary.json and events.jsonl (audit log) to
    OUTPUT_DIR, plus similar.jsonl when --base-id is given.

    Examples
    --------
        crimelink analyze scenes.jsonl
        crimelink analyze scenes.jsonl -o reports --base-id 3 --strict
    """
    from crimelink.engine import AnalysisConfig, run_analysis

    if verbose:
        click.echo("Starting analysis...", err=True)
        click.echo(f"  Input: {records}", err=True)
        click.echo(f"  Output: {output_dir}", err=True)
        click.echo(f"  Profile: {profile_file or profile}", err=True)

    try:
        config = AnalysisConfig(
            profile=profile,
            profile_path=Path(profile_file) if profile_file else None,
            threshold=threshold,
            base_id=base_id,
            strict=strict,
            output_dir=Path(output_dir),
        )
    except ValueError as e:
        _fail(str(e))
        return

    result = run_analysis(Path(records), config=config)

    if not result.success:
        click.secho(f"✗ Analysis failed: {result.error_message}", fg="red", err=True)
        sys.exit(1)

    if verbose:
        click.echo("\nOutputs:", err=True)
        for name, path in result.output_files.items():
            click.echo(f"  {name}: {path}", err=True)

    message = (
        f"✓ Analyzed {result.total_records} scenes: {result.total_series} series "
        f"({result.records_in_series} scenes)"
    )
    if base_id is not None:
        message += f", {result.total_similar} similar to scene {base_id}"
    click.secho(message, fg="green")


@cli.command()
def profiles() -> None:
    """List registered weight profiles."""
    from crimelink.scoring import list_profiles

    for weights in list_profiles():
        click.echo(f"{weights.name}: {weights.description}")
        for criterion, weight in weights.weights().items():
            click.echo(f"  {criterion:<16} {weight:5.1f}")


if __name__ == "__main__":
    cli()
