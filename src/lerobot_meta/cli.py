"""Command-line interface for the LeRobot metadata resolver."""

import asyncio
from typing import Any, Callable

import click

from lerobot_meta import __version__
from lerobot_meta.core.constants import (
    DATASET_URL_ENV,
    DEFAULT_DATASET_URL,
    REQUEST_TIMEOUT_SECONDS,
    TOKEN_ENVS,
)
from lerobot_meta.core.exceptions import LeRobotMetaError
from lerobot_meta.core.settings import HubSettings
from lerobot_meta.core.types import SUPPORTED_VERSIONS
from lerobot_meta.hub import build_versioned_url, get_dataset_version, resolve_dataset
from lerobot_meta.utils.logging import setup_logging


def hub_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by commands that talk to the artifact host."""
    func = click.option(
        "--timeout",
        type=float,
        default=REQUEST_TIMEOUT_SECONDS,
        show_default=True,
        help="Overall timeout in seconds, across retries.",
    )(func)
    func = click.option(
        "--token",
        envvar=list(TOKEN_ENVS),
        default=None,
        help="Access token for private or gated datasets.",
    )(func)
    func = click.option(
        "--endpoint",
        envvar=DATASET_URL_ENV,
        default=DEFAULT_DATASET_URL,
        show_default=True,
        help="Artifact host base URL.",
    )(func)
    func = click.option(
        "--base-path", "-b",
        default="",
        help="Sub-folder of the repository holding the dataset.",
    )(func)
    return func


def _fail(error: Exception) -> None:
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """LeRobot Hub Metadata Resolver.

    Check LeRobot datasets (v3.0/v2.1/v2.0) on the Hub and build artifact URLs.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging("DEBUG" if verbose else "WARNING", include_http=verbose)


@main.command()
@click.argument("repo_id")
@hub_options
def info(repo_id: str, base_path: str, endpoint: str, token: str | None, timeout: float) -> None:
    """Resolve a dataset and summarize its metadata."""
    try:
        settings = HubSettings(endpoint=endpoint, token=token, timeout_seconds=timeout)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--timeout")

    result = asyncio.run(resolve_dataset(repo_id, base_path, settings=settings))
    if not result.ok:
        _fail(result.error)

    version, dataset_info = result.unwrap()
    click.echo(f"Dataset: {repo_id}")
    click.echo(f"Codebase version: {version}")
    click.echo(f"Robot type: {dataset_info.robot_type or 'unknown'}")
    click.echo(f"Episodes: {dataset_info.total_episodes}")
    click.echo(f"Frames: {dataset_info.total_frames}")
    click.echo(f"Tasks: {dataset_info.total_tasks}")
    if dataset_info.fps is not None:
        click.echo(f"FPS: {dataset_info.fps}")

    if dataset_info.splits:
        click.echo("\nSplits:")
        for name, episodes in dataset_info.splits.items():
            click.echo(f"  {name}: {episodes}")

    names = dataset_info.feature_names
    click.echo(f"\nFeatures ({len(names)}):")
    for name in names[:20]:
        click.echo(f"  {name}")
    if len(names) > 20:
        click.echo(f"  ... and {len(names) - 20} more")


@main.command()
@click.argument("repo_id")
@hub_options
def version(repo_id: str, base_path: str, endpoint: str, token: str | None, timeout: float) -> None:
    """Print the validated codebase version of a dataset."""
    try:
        settings = HubSettings(endpoint=endpoint, token=token, timeout_seconds=timeout)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--timeout")

    try:
        resolved = asyncio.run(get_dataset_version(repo_id, base_path, settings=settings))
    except LeRobotMetaError as e:
        _fail(e)
    else:
        click.echo(resolved)


@main.command()
@click.argument("repo_id")
@click.argument("path")
@click.option(
    "--codebase-version",
    type=click.Choice(list(SUPPORTED_VERSIONS)),
    default=SUPPORTED_VERSIONS[0],
    show_default=True,
    help="Codebase version the URL is built for.",
)
@click.option(
    "--base-path", "-b",
    default="",
    help="Sub-folder of the repository holding the dataset.",
)
@click.option(
    "--endpoint",
    envvar=DATASET_URL_ENV,
    default=DEFAULT_DATASET_URL,
    show_default=True,
    help="Artifact host base URL.",
)
def url(repo_id: str, path: str, codebase_version: str, base_path: str, endpoint: str) -> None:
    """Print the URL of PATH inside a dataset repository (no network access)."""
    click.echo(build_versioned_url(repo_id, codebase_version, path, base_path, endpoint=endpoint))


if __name__ == "__main__":
    main()
