"""
pwcheck Report Generator
========================

Writes a single evaluation as JSON (machine-readable) or as a
self-contained HTML page with inline CSS. Reports carry the masked
password only.
"""

from __future__ import annotations

import html
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from pwcore.models import ScanResult

REPORT_VERSION = "1.0.0"

_LABEL_COLOURS: dict[str, str] = {
    "Strong": "#3fb950",
    "Moderate": "#d29922",
    "Weak": "#db6d28",
    "Very Weak": "#f85149",
}

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>pwcheck Report</title>
<style>
  body {{ font-family: -apple-system, 'Segoe UI', Helvetica, Arial, sans-serif;
         background: #0d1117; color: #c9d1d9; padding: 2rem; line-height: 1.6; }}
  .container {{ max-width: 720px; margin: 0 auto; }}
  h1 {{ color: #58a6ff; text-align: center; }}
  .section {{ background: #161b22; border: 1px solid #30363d; border-radius: 8px;
             padding: 1.25rem; margin-bottom: 1.25rem; }}
  .meter {{ height: 12px; background: #21262d; border-radius: 6px; overflow: hidden; }}
  .meter-fill {{ height: 100%; }}
  table {{ width: 100%; border-collapse: collapse; }}
  th, td {{ padding: 0.5rem 0.75rem; border: 1px solid #30363d; text-align: left; }}
  th {{ background: #21262d; color: #58a6ff; }}
  .finding {{ border-left: 4px solid #30363d; padding: 0.5rem 1rem; margin: 0.75rem 0; }}
  .severity-critical {{ border-color: #f85149; }}
  .severity-high {{ border-color: #db6d28; }}
  .severity-medium {{ border-color: #d29922; }}
  .severity-low, .severity-info {{ border-color: #58a6ff; }}
  .muted {{ color: #8b949e; font-size: 0.85rem; }}
</style>
</head>
<body>
<div class="container">
  <h1>Password Strength Report</h1>
  <p class="muted" style="text-align:center">Generated {generated_at}</p>
  <div class="section">
    <p>Password Strength: <strong style="color:{colour}">{label}</strong></p>
    <div class="meter"><div class="meter-fill" style="width:{percentage}%;background:{colour}"></div></div>
  </div>
  <div class="section">
    <table>
      <tr><th>Password</th><td>{masked}</td></tr>
      <tr><th>Entropy</th><td>{entropy}</td></tr>
      <tr><th>Estimated Crack Time</th><td>{crack_time}</td></tr>
      <tr><th>Breaches</th><td>{breaches}</td></tr>
    </table>
  </div>
  <div class="section">
    <h2>Findings</h2>
    {findings}
  </div>
  <p class="muted">{summary}</p>
</div>
</body>
</html>
"""


class ReportGenerator:
    """Render a :class:`~pwcore.models.ScanResult` to JSON or HTML files."""

    def build_json(self, result: ScanResult) -> dict[str, Any]:
        """Return the JSON report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": REPORT_VERSION,
            },
            "summary": {
                "description": result.summary,
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
            },
            "evaluation": result.metadata.get("evaluation", {}),
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": {
                k: v for k, v in result.metadata.items() if k != "evaluation"
            },
        }

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report and return its path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            json.dumps(
                self.build_json(result),
                indent=2,
                ensure_ascii=False,
                allow_nan=False,
                default=str,
            ),
            encoding="utf-8",
        )
        return output_path

    def generate_html(self, result: ScanResult, output_path: Path) -> Path:
        """Write the HTML report and return its path."""
        evaluation = result.metadata.get("evaluation", {})
        label = evaluation.get("strength_label") or "Error"
        entropy = evaluation.get("entropy_bits", 0.0)

        page = _HTML_TEMPLATE.format(
            generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
            colour=_LABEL_COLOURS.get(label, "#8b949e"),
            label=html.escape(label),
            percentage=result.metadata.get("strength_percentage", 0),
            masked=html.escape(result.metadata.get("password_masked", "")),
            entropy=f"{entropy:.2f} bits",
            crack_time=html.escape(evaluation.get("crack_time_display", "")),
            breaches=f"{evaluation.get('breach_count', 0):,}",
            findings=self._findings_html(result),
            summary=html.escape(result.summary),
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(page, encoding="utf-8")
        return output_path

    @staticmethod
    def _findings_html(result: ScanResult) -> str:
        if not result.findings:
            return '<p class="muted">No findings.</p>'

        parts: list[str] = []
        for finding in result.findings:
            parts.append(
                f'<div class="finding {finding.severity.css_class}">'
                f"<strong>{finding.severity.value}</strong> "
                f"{html.escape(finding.title)}"
                f"<p>{html.escape(finding.description)}</p>"
            )
            if finding.recommendation:
                parts.append(f"<p><em>{html.escape(finding.recommendation)}</em></p>")
            parts.append("</div>")
        return "\n".join(parts)
