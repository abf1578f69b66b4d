"""
pwcheck CLI
===========

Click-based command-line interface for the password strength evaluator.

Usage::

    python -m pwcheck evaluate                # prompts with hidden input
    python -m pwcheck evaluate --show         # prompts with visible input
    python -m pwcheck -o json evaluate "p4ssw0rd"
    python -m pwcheck entropy
    python -m pwcheck breach

An empty password is rejected before any evaluation runs. A password passed
as an argument ends up in shell history and the process list; the prompt
does not.
"""

from __future__ import annotations

import asyncio
import json
from contextlib import nullcontext
from pathlib import Path
from typing import Any, Optional

import click

from pwcore.config import PwConfig
from pwcore.console import PwConsole
from pwcore.logger import PwLogger
from pwcore.models import ScanResult

from pwcheck import __version__
from pwcheck.analyzers.breach import BreachChecker
from pwcheck.analyzers.crack_time import CrackTimeEstimator, format_crack_time
from pwcheck.analyzers.entropy import EntropyEstimator
from pwcheck.core.engine import PasswordEvaluator
from pwcheck.core.models import EvaluationResult
from pwcheck.output.console import EvaluationConsoleOutput
from pwcheck.output.report import ReportGenerator


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a pwcheck configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress all console output.",
)
@click.option(
    "--no-breach-check",
    is_flag=True,
    default=False,
    help="Skip the online breach-corpus lookup.",
)
@click.version_option(__version__, prog_name="pwcheck")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
    no_breach_check: bool,
) -> None:
    """pwcheck -- Password Strength Analyzer.

    Estimates entropy and brute-force crack time, flags common passwords,
    and checks the breach corpus using a k-anonymity range lookup.
    """
    ctx.ensure_object(dict)

    pw_config = PwConfig.load(config) if config else PwConfig.load()
    if no_breach_check:
        pw_config.evaluator.breach_check = False

    ctx.obj["config"] = pw_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["console"] = PwConsole(quiet=quiet)

    if not quiet and output == "console":
        ctx.obj["console"].banner(version=__version__)


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _read_password(password: Optional[str], show: bool) -> str:
    """Return *password* or prompt for it; reject empty input."""
    if password is None:
        password = click.prompt(
            "Enter your password",
            hide_input=not show,
            default="",
            show_default=False,
        )
    if not password:
        raise click.UsageError("Password must not be empty.")
    return password


def _breach_checker(ctx: click.Context) -> BreachChecker:
    """Build a checker from config; ``ctx.obj["http_transport"]`` overrides the network."""
    config: PwConfig = ctx.obj["config"]
    settings = config.evaluator
    return BreachChecker(
        api_url=settings.breach_api_url,
        timeout=settings.breach_timeout,
        padding=settings.breach_padding,
        user_agent=settings.user_agent,
        transport=ctx.obj.get("http_transport"),
        logger=PwLogger.from_settings("breach", config.global_settings),
    )


def _spinner(ctx: click.Context, message: str) -> Any:
    if ctx.obj["output_format"] != "console":
        return nullcontext()
    return ctx.obj["console"].status(message)


async def _scan(ctx: click.Context, password: str) -> ScanResult:
    config: PwConfig = ctx.obj["config"]
    checker = _breach_checker(ctx) if config.evaluator.breach_check else None
    async with PasswordEvaluator(config, breach_checker=checker) as evaluator:
        return await evaluator.scan(password)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON or HTML according to the group options."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    console: PwConsole = ctx.obj["console"]
    reporter = ReportGenerator()

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                allow_nan=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            path = Path(ctx.obj["config"].global_settings.output_dir) / "pwcheck_report.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.option("--show", is_flag=True, default=False, help="Echo the password while typing.")
@click.pass_context
def evaluate(ctx: click.Context, password: Optional[str], show: bool) -> None:
    """Run the full evaluation: entropy, crack time, common patterns, breaches.

    Omit PASSWORD to be prompted with hidden input. A PASSWORD given on the
    command line is visible in shell history and the process list.
    """
    password = _read_password(password, show)
    console: PwConsole = ctx.obj["console"]

    with _spinner(ctx, "Analyzing..."):
        result = asyncio.run(_scan(ctx, password))

    if ctx.obj["output_format"] == "console":
        evaluation = EvaluationResult(**result.metadata["evaluation"])
        EvaluationConsoleOutput(console).display_evaluation(
            evaluation,
            masked=result.metadata["password_masked"],
            breach_check=result.metadata["breach_check"],
            guesses_per_second=result.metadata["guesses_per_second"],
        )
        console.findings_table(result.findings)
    else:
        _handle_output(ctx, result)

    if result.metadata["evaluation"].get("error_message"):
        ctx.exit(1)


@cli.command()
@click.argument("password", required=False)
@click.option("--show", is_flag=True, default=False, help="Echo the password while typing.")
@click.pass_context
def entropy(ctx: click.Context, password: Optional[str], show: bool) -> None:
    """Show charset pool, entropy, and brute-force time (offline).

    Omit PASSWORD to be prompted with hidden input. A PASSWORD given on the
    command line is visible in shell history and the process list.
    """
    password = _read_password(password, show)
    config: PwConfig = ctx.obj["config"]

    estimator = EntropyEstimator()
    profile = estimator.profile(password)
    bits = estimator.estimate(password)
    seconds = CrackTimeEstimator(config.evaluator.guesses_per_second).estimate(bits)

    if ctx.obj["output_format"] == "json":
        payload: dict[str, Any] = {
            "length": len(password),
            "charset": profile.model_dump(),
            "charset_size": profile.charset_size,
            "entropy_bits": round(bits, 4),
            "crack_time_display": format_crack_time(seconds),
        }
        click.echo(json.dumps(payload, indent=2, allow_nan=False))
        return

    EvaluationConsoleOutput(ctx.obj["console"]).display_entropy(
        profile, bits, format_crack_time(seconds), len(password)
    )


@cli.command()
@click.argument("password", required=False)
@click.option("--show", is_flag=True, default=False, help="Echo the password while typing.")
@click.pass_context
def breach(ctx: click.Context, password: Optional[str], show: bool) -> None:
    """Look the password up in the breach corpus only.

    Omit PASSWORD to be prompted with hidden input. A PASSWORD given on the
    command line is visible in shell history and the process list.
    """
    password = _read_password(password, show)
    config: PwConfig = ctx.obj["config"]
    console: PwConsole = ctx.obj["console"]

    async def _lookup() -> int:
        async with _breach_checker(ctx) as checker:
            return await checker.check(password)

    with _spinner(ctx, "Checking breach corpus..."):
        count = asyncio.run(_lookup())

    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"breach_count": count}, allow_nan=False))
        return
    EvaluationConsoleOutput(console).display_breach(count)


def main() -> None:
    """Console-script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
