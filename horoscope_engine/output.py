"""Output helpers for presenting a chart and its daily reading."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from io import StringIO
from pathlib import Path
from zoneinfo import ZoneInfo

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

from .interpretation import primary_tag, tone_of
from .models import Aspect, AstrologicalCycle, BirthChart, CelestialBody, HoroscopeScores
from .transits import moon_label
from .zodiac import format_position

HOUSE_SYSTEM_NAMES = {
    "E": "Equal",
    "O": "Porphyry",
    "P": "Placidus",
    "K": "Koch",
    "R": "Regiomontanus",
    "C": "Campanus",
    "B": "Alcabitius",
}

INFLUENCE_STYLES = {
    "positive": "green",
    "challenging": "red",
    "transformative": "magenta",
    "neutral": "white",
}


@dataclass
class DailyReport:
    """Everything the report renders for one chart and one day."""

    chart: BirthChart
    day: date
    scores: HoroscopeScores
    transits: list[CelestialBody]
    transit_aspects: list[Aspect]
    insight: str
    weekly_insight: str
    themes: list[str] = field(default_factory=list)
    cycles: list[AstrologicalCycle] = field(default_factory=list)
    category: str | None = None


def _format_coord(value: float, positive_label: str, negative_label: str, precision: int = 4) -> str:
    """Return a signed coordinate with cardinal direction."""

    hemi = positive_label if value >= 0 else negative_label
    return f"{abs(value):.{precision}f}° {hemi}"


def _chart_header_lines(chart: BirthChart) -> list[str]:
    """Human-readable chart basics for the top of the report."""

    birth = chart.birth_data
    utc = birth.utc_instant
    local = utc.astimezone(ZoneInfo(birth.timezone))
    system = HOUSE_SYSTEM_NAMES.get(chart.house_system, chart.house_system)
    return [
        f"Chart: {birth.label or 'Unnamed'}",
        f"Local: {local.strftime('%Y-%m-%d %H:%M:%S')} ({birth.timezone})",
        f"UTC:   {utc.strftime('%Y-%m-%d %H:%M:%S')} (UTC)",
        f"Location: {_format_coord(birth.latitude, 'N', 'S')}, {_format_coord(birth.longitude, 'E', 'W')}",
        f"Sun {chart.sun_sign.value} | Moon {chart.moon_sign.value} | {chart.ascendant_sign.value} rising",
        f"House system: {system} | Zodiac: Tropical",
    ]


def _position(longitude: float, use_symbol: bool) -> str:
    return format_position(longitude, use_symbol=use_symbol)


def _score_style(value: int) -> str:
    if value >= 75:
        return "bold green"
    if value >= 50:
        return "yellow"
    return "red"


def render_report(console: Console, report: DailyReport, use_sign_symbols: bool = True) -> None:
    """Shared rich rendering so the same layout feeds the terminal, Markdown and HTML."""

    chart = report.chart
    header_lines = _chart_header_lines(chart)
    console.print(f"[bold cyan]{header_lines[0]}[/]")
    for line in header_lines[1:]:
        console.print(line)
    console.print()

    body_table = Table(title="Natal Bodies", box=box.ROUNDED, expand=False, padding=(0, 1))
    body_table.add_column("Body", style="cyan", no_wrap=True)
    body_table.add_column("Position", style="magenta", no_wrap=True, justify="right")
    body_table.add_column("House", justify="center", no_wrap=True)
    body_table.add_column("Motion", justify="right", no_wrap=True)
    for body in chart.bodies:
        motion = "[bold red]R[/]" if body.retrograde else f"{body.speed:+.3f}°/d"
        body_table.add_row(
            f"{body.symbol} {body.name}" if use_sign_symbols else body.name,
            _position(body.longitude, use_sign_symbols),
            str(chart.house_of(body.longitude)),
            motion,
        )
    console.print(body_table)

    angle_table = Table(title="Angles", box=box.MINIMAL, expand=False, width=36, padding=(0, 1))
    angle_table.add_column("Point", justify="center", no_wrap=True)
    angle_table.add_column("Position", style="cyan", no_wrap=True)
    angle_table.add_row("Asc", _position(chart.ascendant, use_sign_symbols))
    angle_table.add_row("MC", _position(chart.midheaven, use_sign_symbols))
    console.print(angle_table)

    house_table = Table(
        title=f"Houses ({HOUSE_SYSTEM_NAMES.get(chart.house_system, chart.house_system)})",
        box=box.MINIMAL_DOUBLE_HEAD,
        expand=False,
        width=36,
        padding=(0, 1),
    )
    house_table.add_column("House", justify="center", no_wrap=True)
    house_table.add_column("Cusp", style="magenta", no_wrap=True)
    for house in chart.houses:
        style = "bold" if house.number in (1, 4, 7, 10) else None
        house_table.add_row(f"{house.number:02d}", _position(house.cusp, use_sign_symbols), style=style)
    console.print(house_table)

    console.print()
    console.print(f"[bold]{report.day.isoformat()}[/]  {moon_label(report.transits)}")

    scores = report.scores
    score_table = Table(title="Scores", box=box.SIMPLE, expand=False, padding=(0, 1))
    for name in ("Overall", "Love", "Career", "Wealth"):
        score_table.add_column(name, justify="center", no_wrap=True)
    values = [scores.overall, scores.love, scores.career, scores.wealth]
    score_table.add_row(*(f"[{_score_style(v)}]{v}[/]" for v in values))
    console.print(score_table)

    if report.transit_aspects:
        aspect_table = Table(title="Transits to Natal", box=box.SIMPLE, expand=False, padding=(0, 1))
        aspect_table.add_column("Pair", style="cyan", overflow="fold", max_width=36)
        aspect_table.add_column("Aspect", justify="center", no_wrap=True)
        aspect_table.add_column("Orb", justify="right", style="green", no_wrap=True)
        for aspect in report.transit_aspects[:10]:
            aspect_table.add_row(
                f"{aspect.first.name} → {aspect.second.name}",
                aspect.type.value.lower(),
                f"{aspect.orb:.2f}°",
            )
        console.print(aspect_table)

    tag = primary_tag(report.insight)
    title = "Daily Insight" if report.category is None else f"Daily Insight ({report.category})"
    console.print(
        Panel(
            report.insight,
            title=title,
            subtitle=f"{tag.category} · {tone_of(report.insight)}",
            box=box.ROUNDED,
            expand=False,
            width=80,
        )
    )
    console.print(Panel(report.weekly_insight, title="This Week", box=box.ROUNDED, expand=False, width=80))

    if report.themes:
        console.print("[bold]Themes[/]")
        for theme in report.themes:
            console.print(f"  • {theme}")

    if report.cycles:
        cycle_table = Table(title="Current Cycles", box=box.SIMPLE, expand=False, padding=(0, 1))
        cycle_table.add_column("Cycle", style="cyan", no_wrap=True)
        cycle_table.add_column("Aspect", no_wrap=True)
        cycle_table.add_column("Duration", justify="right", no_wrap=True)
        cycle_table.add_column("Influence", no_wrap=True)
        for cycle in report.cycles:
            influence = cycle.influence.value
            cycle_table.add_row(
                cycle.title,
                cycle.planetary_aspect,
                cycle.duration,
                f"[{INFLUENCE_STYLES[influence]}]{influence}[/]",
            )
        console.print(cycle_table)


def print_rich_report(report: DailyReport, console: Console | None = None) -> None:
    render_report(console or Console(), report, use_sign_symbols=True)


def build_markdown_report(report: DailyReport) -> str:
    """Return a markdown string mirroring the Rich console output."""

    console = Console(record=True, theme=Theme({}), width=100, file=StringIO())
    render_report(console, report, use_sign_symbols=False)
    text = console.export_text()
    return "```\n" + text.rstrip() + "\n```\n"


def export_rich_html(path: str | Path, report: DailyReport) -> None:
    """Export the report to an HTML file with a dark theme."""

    console = Console(record=True, theme=Theme({}), width=100, file=StringIO())
    # Sign symbols are not fixed-width in most HTML fonts.
    render_report(console, report, use_sign_symbols=False)
    html = console.export_html(inline_styles=True)
    dark_css = """
<style>
html, body { background:#0b0b0b !important; color:#eaeaea !important; }
pre, code {
  background:#0b0b0b !important;
  color:#eaeaea !important;
  white-space: pre;
  font-family:'Noto Sans Mono','DejaVu Sans Mono','JetBrains Mono','Menlo','Consolas',monospace;
}
</style>
""".strip()
    if "</head>" in html:
        html = html.replace("</head>", f"{dark_css}\n</head>", 1)
    else:
        html = f"{dark_css}\n{html}"
    Path(path).write_text(html, encoding="utf-8")

