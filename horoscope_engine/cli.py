"""Command line entry point: natal chart plus the reading for one day."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date, datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from . import astro_engine, output
from .astro_engine import SwissEphemerisAdapter
from .errors import HoroscopeEngineError
from .houses import DEFAULT_HOUSE_SYSTEM
from .interpretation import CATEGORIES, category_for_question
from .models import BirthData
from .service import AstrologyService

LOG = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("outputs")
UNAVAILABLE_MESSAGE = "Chart unavailable: {reason}. Check the birth details."


def parse_birth_datetime(value: str) -> datetime:
    """ISO datetime; a trailing Z means UTC and a missing offset means local time."""

    raw = value.strip()
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO datetime: {value!r}") from None


def parse_day(value: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date (YYYY-MM-DD): {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="horoscope",
        description="Compute a natal chart and a deterministic horoscope reading for one day.",
    )
    parser.add_argument("--birth", required=True, type=parse_birth_datetime, help="Birth datetime (ISO).")
    parser.add_argument("--lat", required=True, type=float, help="Birth latitude in decimal degrees (north positive).")
    parser.add_argument("--lon", required=True, type=float, help="Birth longitude in decimal degrees (east positive).")
    parser.add_argument("--tz", default="UTC", help="IANA timezone of the birth place (default: UTC).")
    parser.add_argument("--label", help="Name shown in the report header.")
    parser.add_argument("--day", type=parse_day, help="Day to read (YYYY-MM-DD). Defaults to today.")
    parser.add_argument("--category", choices=CATEGORIES, help="Ask for a category insight instead of the Moon reading.")
    parser.add_argument("--question", help="Free-form question; its keywords pick the insight category.")
    parser.add_argument(
        "--house-system",
        default=DEFAULT_HOUSE_SYSTEM,
        help="House system code: E (Equal), O (Porphyry) or any Swiss Ephemeris code such as P (Placidus).",
    )
    parser.add_argument(
        "--ephe",
        help="Swiss Ephemeris directory. Defaults to SWISSEPH_EPHE; the Moshier ephemeris is used when unset.",
    )
    parser.add_argument("--moshier", action="store_true", help="Force the built-in Moshier ephemeris.")
    parser.add_argument("--md", "--markdown", dest="md", help="Also write the report as Markdown.")
    parser.add_argument("--html", help="Also write the report as HTML.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output.")
    return parser


def configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def resolve_output_path(path_str: str | None) -> Path | None:
    """Bare file names land in ``outputs/``; anything with a directory is kept."""

    if not path_str:
        return None
    p = Path(path_str)
    if not p.is_absolute() and p.parent == Path("."):
        p = DEFAULT_OUTPUT_DIR / p
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def build_report(service: AstrologyService, birth: BirthData, day: date, category: str | None) -> output.DailyReport:
    chart = service.birth_chart(birth)
    transits = service.day_transits(chart, day)
    insights = service.insights
    return output.DailyReport(
        chart=chart,
        day=day,
        scores=service.daily_scores(chart, day),
        transits=transits,
        transit_aspects=service.aspect_engine.aspects_between(transits, list(chart.bodies)),
        insight=insights.daily_insight(chart, transits, day, category),
        weekly_insight=insights.weekly_insight(chart, transits, day),
        themes=insights.themes(chart, transits),
        cycles=insights.cycles(chart, day, transits),
        category=category,
    )


def main(argv: list[str] | None = None) -> int:
    """
    CLI entry point.

    Usage:
        horoscope --birth 1990-05-15T14:30 --tz America/New_York --lat 40.71 --lon -74.01
    """

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    ephe_path = str(Path(args.ephe).expanduser()) if args.ephe else None
    if ephe_path:
        astro_engine.set_ephe_path(ephe_path)

    category = args.category
    if category is None and args.question:
        category = category_for_question(args.question)
    day = args.day or date.today()

    birth = BirthData(
        instant=args.birth,
        latitude=args.lat,
        longitude=args.lon,
        timezone=args.tz,
        label=args.label,
    )

    try:
        adapter = SwissEphemerisAdapter(ephe_path=ephe_path, prefer_moshier=args.moshier)
        service = AstrologyService(adapter, house_system=args.house_system)
        report = build_report(service, birth, day, category)
    except HoroscopeEngineError as exc:
        LOG.debug("chart failed", exc_info=True)
        print(UNAVAILABLE_MESSAGE.format(reason=str(exc).rstrip(".")), file=sys.stderr)
        return 1

    output.print_rich_report(report)

    html_path = resolve_output_path(args.html)
    md_path = resolve_output_path(args.md)
    if html_path:
        output.export_rich_html(html_path, report)
    if md_path:
        md_path.write_text(output.build_markdown_report(report), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
