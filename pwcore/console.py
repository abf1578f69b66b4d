"""
pwcore Console Interface
========================

Rich-powered console abstraction giving pwcheck one consistent
presentation layer: banner, section headers, success messages,
a status spinner, and a findings table.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from contextlib import contextmanager
from typing import Any, Generator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

_PW_THEME = Theme(
    {
        "pw.banner": "bold bright_cyan",
        "pw.section": "bold bright_cyan",
        "pw.success": "bold green",
        "pw.info": "bold bright_blue",
        "pw.dim": "dim white",
        "pw.critical": "bold white on red",
        "pw.high": "bold red",
        "pw.medium": "bold yellow",
        "pw.low": "bold bright_cyan",
        "pw.informational": "bold bright_blue",
    }
)

_BANNER_ART = r"""[bright_cyan]
┌─┐┬ ┬┌─┐┬ ┬┌─┐┌─┐┬┌─
├─┘│││├─┘├─┤├┤ │  ├┴┐
┴  └┴┘┴  ┴ ┴└─┘└─┘┴ ┴
[/bright_cyan]"""

_TAGLINE = "Password Strength Analyzer"

_SEVERITY_STYLES: dict[str, str] = {
    "CRITICAL": "pw.critical",
    "HIGH": "pw.high",
    "MEDIUM": "pw.medium",
    "LOW": "pw.low",
    "INFO": "pw.informational",
}


class PwConsole:
    """Unified console interface for pwcheck.

    Usage::

        con = PwConsole()
        con.banner()
        con.section("Evaluation")
        con.success("Report written")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console; *quiet* suppresses all output."""
        self._console = Console(theme=_PW_THEME, quiet=quiet, highlight=False)

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    def banner(self, version: str = "1.0.0") -> None:
        """Display the ASCII-art banner with version and timestamp."""
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[pw.banner]{_TAGLINE}[/pw.banner]\n"
            f"[pw.dim]Version: {version}  |  {now}[/pw.dim]"
        )
        self._console.print(
            Panel(
                Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
                border_style="bright_cyan",
                padding=(0, 2),
            )
        )

    def section(self, title: str) -> None:
        """Print a section rule."""
        self._console.rule(f"  {title}  ", style="pw.section", characters="─")
        self._console.print()

    def success(self, message: str) -> None:
        self._console.print(f"[pw.success][✔] SUCCESS:[/pw.success] {message}")

    # ------------------------------------------------------------------ #
    #  Tables and spinners
    # ------------------------------------------------------------------ #

    def findings_table(self, findings: Sequence[Any]) -> None:
        """Render findings with severity colouring.

        Expects objects with ``severity``, ``title`` and ``description``
        attributes (e.g. :class:`~pwcore.models.Finding`).
        """
        if not findings:
            return

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_cyan",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=10)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            sev = getattr(finding, "severity", "INFO")
            sev_name = sev.value if hasattr(sev, "value") else str(sev).upper()
            style = _SEVERITY_STYLES.get(sev_name)
            tbl.add_row(
                str(idx),
                f"[{style}]{sev_name}[/{style}]" if style else sev_name,
                str(getattr(finding, "title", "")),
                str(getattr(finding, "description", "")),
            )

        self._console.print(tbl)

    @contextmanager
    def status(self, message: str = "Working...") -> Generator[Any, None, None]:
        """Context-manager showing a spinner with a status message.

        Example::

            with con.status("Analyzing..."):
                result = asyncio.run(evaluator.evaluate(password))
        """
        with self._console.status(
            f"[pw.info]{message}[/pw.info]",
            spinner="dots",
            spinner_style="bright_cyan",
        ) as status_obj:
            yield status_obj
