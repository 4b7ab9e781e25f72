from __future__ import annotations

import json
import logging
import math
from pathlib import Path

import typer
import yaml

from .config import EntropyConfig, load_config
from .pipeline import analyze_password

app = typer.Typer(help="Password entropy estimator.", no_args_is_help=True)


@app.command()
def analyze(
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        help="Password to measure (prompted for when omitted).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    zeroize: bool | None = typer.Option(
        None,
        "--zeroize/--no-zeroize",
        help="Override config zeroize flag.",
    ),
    ignore_sequence_case: bool | None = typer.Option(
        None,
        "--ignore-sequence-case/--case-sensitive-sequences",
        help="Override config ignore_sequence_case flag.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Measure a password and emit a JSON summary."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if zeroize is not None:
        cfg.zeroize = zeroize
    if ignore_sequence_case is not None:
        cfg.ignore_sequence_case = ignore_sequence_case

    payload = analyze_password(password, cfg).to_dict()
    # JSON has no infinity; a password with no recognized class reports null.
    if not math.isfinite(payload["entropy"]):
        payload["entropy"] = None
    typer.echo(json.dumps(payload, indent=2, allow_nan=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EntropyConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
