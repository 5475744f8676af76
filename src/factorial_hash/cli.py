"""Command line entry point for factorial-hash."""

from __future__ import annotations

import json

import click
from pydantic import ValidationError

from src.core.contracts import validate_digit_sum_report
from src.factorial_hash import __version__
from src.factorial_hash.logging import configure_logging
from src.factorial_hash.service import BoundOutOfRange, compute_report
from src.factorial_hash.settings import FactorialHashSettings


def _format_settings_error(exc: ValidationError) -> str:
    """One ``Invalid setting`` line per pydantic error, without the traceback."""
    lines = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "settings"
        lines.append(f"Invalid setting {field}: {error['msg']}")
    return "\n".join(lines)


@click.command()
@click.version_option(version=__version__, prog_name="factorial-hash")
@click.argument("n", type=int, required=False)
@click.option("--upper-bound", type=int, default=None, help="Largest accepted n.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("--show-factorial", is_flag=True, help="Include the decimal value of n!.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    n: int | None,
    upper_bound: int | None,
    json_output: bool,
    show_factorial: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Print the sum of the decimal digits of N!."""
    try:
        settings = FactorialHashSettings.from_cli(
            upper_bound=upper_bound,
            json_output=json_output or None,
            include_factorial=show_factorial or None,
            verbose=verbose or None,
            log_json=log_json or None,
        )
    except ValidationError as exc:
        click.echo(_format_settings_error(exc), err=True)
        ctx.exit(1)

    configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    if n is None:
        n = click.prompt(f"Enter a number within range [0,{settings.upper_bound}]", type=int)

    try:
        report = compute_report(n, settings)
    except BoundOutOfRange as exc:
        click.echo(str(exc), err=True)
        ctx.exit(1)

    if settings.json_output:
        payload = report.model_dump(mode="json")
        try:
            validate_digit_sum_report(payload)
        except RuntimeError as exc:
            click.echo(str(exc), err=True)
            ctx.exit(1)
        click.echo(json.dumps(payload, indent=2))
        return

    if report.factorial_decimal is not None:
        click.echo(f"Factorial of {report.n} = {report.factorial_decimal}")
    click.echo(f"Sum of digits of factorial of {report.n} = {report.digit_sum}")


def main() -> None:
    cli()


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    main()
