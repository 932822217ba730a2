from __future__ import annotations

"""Command line interface for biodose using Typer."""

from pathlib import Path
from typing import Dict, List, Optional

import json
import logging

import typer
from pydantic import BaseModel, ValidationError

from ._typer import bad_parameter
from .config import Settings, load_settings
from .core import process_biometric_data
from .dose import available_dose_models, load_dose_model
from .errors import BiodoseError
from .export import export_records
from .ingest import load_bundle
from .types import ProcessedRecord
from .utils.logging import get_logger

app = typer.Typer(help="Hourly biometric deviations and dose recommendations")
logger = logging.getLogger(__name__)


def _parse_override_value(raw: str) -> object:
    lower = raw.lower()
    if lower in {"true", "false"}:
        return lower == "true"
    if lower in {"null", "none"}:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError:
        pass
    if raw.startswith("[") or raw.startswith("{"):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            bad_parameter(f"invalid JSON override value: {raw}", param_hint="--set")
    return raw


def _ensure_path(settings: Settings, keys: List[str]) -> None:
    current: object = settings
    for key in keys:
        if not isinstance(current, BaseModel) or key not in type(current).model_fields:
            bad_parameter(f"unknown configuration key: {'.'.join(keys)}", param_hint="--set")
        current = getattr(current, key)


def _apply_override(data: Dict[str, object], keys: List[str], value: object) -> None:
    target = data
    for key in keys[:-1]:
        existing = target.get(key)
        if not isinstance(existing, dict):
            existing = {}
            target[key] = existing
        target = existing
    target[keys[-1]] = value


def _format_table(records: List[ProcessedRecord]) -> str:
    header = (
        f"{'hour':>4}  {'timestamp':<25} {'hrvDiff':>9} {'rhrDiff':>9} "
        f"{'respDiff':>9} {'dose':>9}"
    )
    lines = [header]
    for r in records:
        lines.append(
            f"{r.hour:>4}  {r.timestamp:<25} {r.hrv_diff:>9.3f} {r.rhr_diff:>9.3f} "
            f"{r.resp_rate_diff:>9.3f} {r.calculated_dose:>9.4f}"
        )
    return "\n".join(lines)


@app.callback()
def init(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        dir_okay=False,
        file_okay=True,
        exists=False,
        help="Path to a YAML or JSON configuration file.",
    ),
    set_overrides: List[str] = typer.Option(
        [],
        "--set",
        help="Override configuration values using dotted paths, e.g. window.size=12",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log diagnostic events"),
) -> None:
    """Initialise the Typer context with validated settings."""

    if config is not None and not config.exists():
        bad_parameter(f"configuration file not found: {config}", param_hint="--config")

    try:
        settings = load_settings(config) if config else Settings()
    except (FileNotFoundError, RuntimeError, TypeError, ValueError) as exc:
        bad_parameter("failed to load configuration", param_hint="--config", cause=exc)

    if set_overrides:
        data = settings.model_dump()
        for override in set_overrides:
            if "=" not in override:
                bad_parameter(
                    "overrides must be of the form --set section.key=value",
                    param_hint="--set",
                )
            key, raw_value = override.split("=", 1)
            if not key:
                bad_parameter("override key cannot be empty", param_hint="--set")
            keys = key.split(".")
            _ensure_path(settings, keys)
            _apply_override(data, keys, _parse_override_value(raw_value))
        try:
            settings = Settings.model_validate(data)
        except ValidationError as exc:
            bad_parameter("invalid configuration override", param_hint="--set", cause=exc)

    level = "DEBUG" if verbose else settings.logging.level
    get_logger("biodose", level=level, fmt=settings.logging.format)
    ctx.obj = settings


@app.command()
def process(
    ctx: typer.Context,
    input: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON bundle with hrv, rhr and respRate series"),
    base_dose: Optional[float] = typer.Option(None, "--base-dose", "-b", min=0.0),
    target_time: Optional[str] = typer.Option(None, "--target-time", "-t"),
    dose_model: Optional[str] = typer.Option(
        None, "--dose-model", "-m", help="Registered model name or module:attribute path"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write records to .json, .csv or .npz"),
    debug: bool = typer.Option(False, "--debug", help="Show tracebacks on failure"),
) -> None:
    """Compute the hourly deviation and dose table for ``input``.

    Base dose, target time and dose model default to the ``dose`` section of
    the configuration.  Without ``--output`` the table is printed.
    """

    cfg: Settings = ctx.obj
    base_dose = cfg.dose.base_dose if base_dose is None else base_dose
    target_time = target_time or cfg.dose.target_time
    if not target_time:
        bad_parameter("a target time is required", param_hint="--target-time")
    if output is not None and output.suffix.lower() not in {".json", ".csv", ".npz"}:
        bad_parameter(f"unsupported export format: {output.suffix or output.name}", param_hint="--output")

    try:
        model = load_dose_model(dose_model or cfg.dose.model)
    except (BiodoseError, ImportError, AttributeError, TypeError, ValueError) as exc:
        bad_parameter("cannot load dose model", param_hint="--dose-model", cause=exc)

    try:
        bundle = load_bundle(input)
        records = process_biometric_data(
            bundle.hrv,
            bundle.rhr,
            bundle.resp_rate,
            base_dose,
            target_time,
            dose_model=model,
            settings=cfg,
        )
    except BiodoseError as exc:
        msg = f"Failed to process {input}: {exc}"
        if debug:
            logger.exception(msg)
            raise
        typer.secho(msg, err=True)
        raise typer.Exit(code=1)

    if output:
        export_records(records, output)
        typer.echo(f"Exported {len(records)} records to {output}")
    else:
        typer.echo(_format_table(records))


@app.command()
def models() -> None:
    """List registered dose models."""

    for name in available_dose_models():
        typer.echo(name)


def main() -> None:  # pragma: no cover - console script entry point
    app(prog_name="biodose")
