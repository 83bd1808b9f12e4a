"""Typer CLI entrypoint for the file cleanup job."""

from __future__ import annotations

import json
import signal
from typing import Optional

import typer

from common_utils import configure_logger, parse_s3_uri

from .config import CleanupSettings, ConfigurationError, load_settings
from .object_store import S3Storage
from .service import build_service
from .worker import CleanupWorker

logger = configure_logger(__name__)

app = typer.Typer(help="Delete expired files reported by the management API.", no_args_is_help=True)


def _load() -> CleanupSettings:
    try:
        return load_settings()
    except ConfigurationError as exc:
        for problem in exc.problems:
            typer.echo(f"Configuration error: {problem}", err=True)
        raise typer.Exit(code=2) from exc


@app.command("run")
def run_command(
    as_json: bool = typer.Option(False, "--json", help="Print the full run report as JSON."),
) -> None:
    """Run a single cleanup pass now."""
    settings = _load()
    typer.echo("Starting manual cleanup...")
    service = build_service(settings)
    try:
        report = service.delete_old_files()
    finally:
        service.close()
    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    typer.echo(
        f"Cleanup {report.outcome.value}: candidates={report.candidates} "
        f"deleted={report.deleted} marked={report.marked} failed={report.failed}"
    )


@app.command("serve")
def serve_command(
    interval_hours: Optional[float] = typer.Option(
        None,
        "--interval-hours",
        min=0.001,
        help="Override CLEANUP_INTERVAL_HOURS for this process.",
    ),
) -> None:
    """Run the cleanup continuously until interrupted."""
    settings = _load()
    service = build_service(settings)
    worker = CleanupWorker(service, interval_hours or settings.cleanup_interval_hours)

    def _handle_signal(signum, frame):
        logger.info("Received signal %s", signum)
        worker.stop()

    signal.signal(signal.SIGINT, _handle_signal)
    signal.signal(signal.SIGTERM, _handle_signal)
    try:
        worker.run_forever()
    finally:
        service.close()


@app.command("list-objects")
def list_objects_command(
    bucket: Optional[str] = typer.Option(
        None, "--bucket", help="Bucket name or s3://bucket/prefix URI. Defaults to S3_BUCKET_NAME."
    ),
    prefix: str = typer.Option("", "--prefix", help="Only list keys starting with this prefix."),
) -> None:
    """List stored objects with their sizes."""
    settings = _load()
    target = bucket or settings.bucket_name
    if target.startswith("s3://"):
        target, uri_prefix = parse_s3_uri(target)
        prefix = prefix or uri_prefix
    storage = S3Storage(region_name=settings.aws_region)
    objects = storage.list(target, prefix)
    for obj in objects:
        typer.echo(f"{obj.size:>12}  {obj.key}")
    typer.echo(f"{len(objects)} objects")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
