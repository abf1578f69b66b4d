"""
pwcheck Console Output
======================

Rich renderers for evaluation results: a strength meter coloured by
label, entropy and crack time panels, and the breach alert.
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pwcore.console import PwConsole
from pwcheck.core.models import CharsetProfile, EvaluationResult, StrengthLabel

_STRENGTH_COLOURS: dict[Optional[StrengthLabel], str] = {
    StrengthLabel.STRONG: "green",
    StrengthLabel.MODERATE: "yellow",
    StrengthLabel.WEAK: "dark_orange",
    StrengthLabel.VERY_WEAK: "red",
}

_METER_WIDTH = 40


class EvaluationConsoleOutput:
    """Console formatters for pwcheck results.

    Usage::

        output = EvaluationConsoleOutput(PwConsole())
        output.display_evaluation(result, masked="p******d")
    """

    def __init__(self, console: Optional[PwConsole] = None) -> None:
        self.console = console or PwConsole()
        self._rich = self.console.rich

    def display_evaluation(
        self,
        result: EvaluationResult,
        *,
        masked: str = "",
        breach_check: bool = True,
        guesses_per_second: float = 1e9,
    ) -> None:
        """Render the full evaluation: meter, details, breach status."""
        self.console.section("Password Analysis")

        if result.is_error:
            self._rich.print(Panel(
                Text(result.error_message or "", style="bold red"),
                title="Error",
                border_style="red",
            ))
            return

        self._rich.print(self._meter(result))

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_cyan",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        if masked:
            tbl.add_row("Password", masked)
        tbl.add_row("Entropy", f"{result.entropy_bits:.2f} bits")
        tbl.add_row(
            "Estimated Crack Time",
            f"{result.crack_time_display}\n"
            f"[dim]brute force at {guesses_per_second:.0e} guesses/sec[/dim]",
        )
        tbl.add_row("Common Password", "Yes" if result.common_pattern else "No")
        self._rich.print(tbl)

        if breach_check:
            self.display_breach(result.breach_count)

    def _meter(self, result: EvaluationResult) -> Panel:
        colour = _STRENGTH_COLOURS.get(result.strength_label, "white")
        percentage = result.strength_percentage
        filled = max(0, min(_METER_WIDTH, int(percentage / 100 * _METER_WIDTH)))

        meter = Text()
        meter.append("█" * filled, style=colour)
        meter.append("░" * (_METER_WIDTH - filled), style="dim")
        meter.append(f"  {percentage:>3d}%  ")
        meter.append(result.strength_label.value, style=f"bold {colour}")
        return Panel(meter, title="Password Strength", border_style="cyan")

    def display_breach(self, breach_count: int) -> None:
        """Render the breach alert, or the all-clear panel for zero."""
        if breach_count > 0:
            self._rich.print(Panel(
                Text.assemble(
                    (f"This password has been found in {breach_count:,} data breaches!\n", "bold"),
                    ("This password is compromised and should not be used", "dim"),
                ),
                title="Data Breach Alert",
                border_style="red",
            ))
        else:
            self._rich.print(Panel(
                Text.assemble(
                    ("No breaches found for this password\n", "bold"),
                    ("This password hasn't been found in known data breaches", "dim"),
                ),
                title="Breach Check",
                border_style="green",
            ))

    def display_entropy(
        self,
        profile: CharsetProfile,
        entropy_bits: float,
        crack_time_display: str,
        length: int,
    ) -> None:
        """Render the offline entropy breakdown."""
        self.console.section("Entropy")

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_cyan",
            show_lines=True,
        )
        tbl.add_column("Character Class", style="bold")
        tbl.add_column("Present", justify="center")
        tbl.add_column("Pool", justify="right")
        for name, present, size in (
            ("Lowercase", profile.has_lower, 26),
            ("Uppercase", profile.has_upper, 26),
            ("Digits", profile.has_digit, 10),
            ("Symbols", profile.has_symbol, 32),
        ):
            tbl.add_row(
                name,
                "[green]yes[/green]" if present else "[dim]no[/dim]",
                str(size) if present else "-",
            )
        tbl.add_row("[bold]Total[/bold]", "", str(profile.charset_size))
        self._rich.print(tbl)

        self._rich.print(
            f"Length: [bold]{length}[/bold]   "
            f"Entropy: [bold]{entropy_bits:.2f} bits[/bold]   "
            f"Crack time: [bold]{crack_time_display}[/bold]"
        )
