from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError

from listzipper.config import AppConfig, RuntimeConfig, load_config
from listzipper.core.transforms import resolve, run_all
from listzipper.utils.logging import setup_logging


app = typer.Typer(add_completion=False)
logger = logging.getLogger("listzipper.cli")


def _parse_values(raw: str) -> List[float]:
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise typer.BadParameter(f"expected comma-separated numbers, got {raw!r}", param_hint="--values")


def _load(
    config_path: Optional[Path],
    values: Optional[str],
    focus: Optional[int],
    transforms: Optional[List[str]],
) -> AppConfig:
    # stderr keeps log lines out of the printed series
    setup_logging(stream=sys.stderr)
    try:
        cfg = load_config(config_path)
    except ValueError as exc:
        logger.error("config load failed", extra={"path": str(config_path)})
        raise typer.BadParameter(str(exc), param_hint="--config")
    setup_logging(cfg.env.LOG_LEVEL, stream=sys.stderr)

    overrides = {}
    if values is not None:
        overrides["samples"] = _parse_values(values)
    if focus is not None:
        overrides["focus_index"] = focus
    if transforms:
        overrides["transforms"] = transforms
    if overrides:
        try:
            cfg.runtime = RuntimeConfig(**{**cfg.runtime.model_dump(), **overrides})
        except ValidationError as ve:
            raise typer.BadParameter(str(ve))
    try:
        resolve(cfg.runtime.transforms)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--transform")
    return cfg


ConfigOpt = typer.Option(None, "--config", "-c", help="YAML file with runtime settings")
ValuesOpt = typer.Option(None, "--values", help="Comma-separated samples, e.g. 1,2,3")
FocusOpt = typer.Option(None, "--focus", help="Focus index of the sample zipper")
TransformOpt = typer.Option(None, "--transform", "-t", help="Transform key (repeatable)")


@app.command()
def show(
    config: Optional[Path] = ConfigOpt,
    values: Optional[str] = ValuesOpt,
    focus: Optional[int] = FocusOpt,
    transform: Optional[List[str]] = TransformOpt,
) -> None:
    """Print the samples and every selected transform as plain lists."""
    cfg = _load(config, values, focus, transform)
    derived = run_all(cfg.runtime)
    logger.debug("transforms computed", extra={"transforms": list(derived)})
    typer.echo(f"samples: {cfg.runtime.samples}")
    for key, series in derived.items():
        typer.echo(f"{key}: {series}")


@app.command()
def chart(
    output: Path = typer.Argument(..., help="Destination HTML file"),
    config: Optional[Path] = ConfigOpt,
    values: Optional[str] = ValuesOpt,
    focus: Optional[int] = FocusOpt,
    transform: Optional[List[str]] = TransformOpt,
) -> None:
    """Render the samples and transforms to a standalone HTML chart."""
    from listzipper.web.chart import build_figure

    cfg = _load(config, values, focus, transform)
    fig = build_figure(cfg.runtime.samples, run_all(cfg.runtime))
    fig.write_html(str(output))
    logger.info("chart written", extra={"path": str(output)})
    typer.echo(f"Wrote {output}")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None),
    port: Optional[int] = typer.Option(None),
    config: Optional[Path] = ConfigOpt,
) -> None:
    from listzipper.web.server import serve as serve_web

    cfg = _load(config, None, None, None)
    serve_web(host=host, port=port, config=cfg)


if __name__ == "__main__":
    app()
