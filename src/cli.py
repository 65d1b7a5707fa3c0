"""Command-line interface for Lantern."""

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from analyzers.url import ParseError
from blocklist import BlocklistChecker
from config import get_settings
from engine import CATEGORIES, AnalysisResult, URLInspector, rate_score, split_bulk_input
from logging_config import setup_cli_logging

APP_NAME = "Lantern"
APP_VERSION = "0.1.0"

EXIT_OK = 0
EXIT_BLOCKED = 1
EXIT_INVALID = 2

RATING_STYLES = {
    "excellent": "bold green",
    "good": "cyan",
    "warning": "yellow",
    "poor": "bold red",
    "invalid": "bold red",
}

CATEGORY_TITLES = {
    "security": "Security",
    "performance": "Performance",
    "seo": "SEO",
    "accessibility": "Accessibility",
    "best_practices": "Best Practices",
}

console = Console()


def score_markup(score: int, rating: str) -> str:
    style = RATING_STYLES.get(rating, "white")
    return f"[{style}]{score}/100[/]"


def print_analysis_report(result: AnalysisResult) -> None:
    console.rule(f"[bold cyan]{APP_NAME} URL Analysis")
    console.print(f"[bold]Target:[/bold] {escape(result.original)}")

    if not result.is_valid:
        console.print(f"[bold red]Validation error:[/bold red] {escape(result.error)}")
        return

    components = Table(box=box.SIMPLE, expand=True, show_header=False)
    components.add_column("Component", style="bold cyan")
    components.add_column("Value")
    for key, value in result.components.as_dict().items():
        if value not in ("", None):
            components.add_row(key, escape(str(value)))
    console.print(Panel(components, title="URL Components", border_style="cyan"))

    overview = Table(box=box.SIMPLE_HEAVY, expand=True)
    overview.add_column("Category", style="bold cyan")
    overview.add_column("Score", justify="right")
    overview.add_column("Findings")
    for category in CATEGORIES:
        report = result.reports[category]
        findings = [f"⚠ {issue}" for issue in report.issues]
        findings += [f"💡 {rec}" for rec in report.recommendations]
        overview.add_row(
            CATEGORY_TITLES[category],
            score_markup(report.score, rate_score(report.score)),
            "\n".join(findings) or "[green]✓ No issues[/]",
        )
    console.print(Panel(overview, title="Categories", border_style="magenta"))

    console.print(
        f"[bold]Overall Score:[/bold] {score_markup(result.overall_score, result.rating)} "
        f"({result.rating})"
    )


def print_bulk_report(results: list[AnalysisResult]) -> None:
    table = Table(box=box.MINIMAL_DOUBLE_HEAD, expand=True)
    table.add_column("#", justify="right")
    table.add_column("URL", overflow="fold")
    table.add_column("Overall", justify="right")
    table.add_column("Rating")
    for index, result in enumerate(results, start=1):
        if result.is_valid:
            table.add_row(
                str(index),
                escape(result.original),
                score_markup(result.overall_score, result.rating),
                result.rating,
            )
        else:
            table.add_row(str(index), escape(result.original), "-", f"[bold red]{escape(result.error)}[/]")
    console.print(Panel(table, title=f"Bulk Analysis ({len(results)} URLs)", border_style="cyan"))


def cmd_analyze(args, settings) -> int:
    result = URLInspector.from_settings(settings).analyze(args.url)
    if args.json:
        print(json.dumps(result.as_dict(), indent=2, ensure_ascii=False))
    else:
        print_analysis_report(result)
    return EXIT_OK if result.is_valid else EXIT_INVALID


def cmd_check(args, settings) -> int:
    target = args.url
    if not target:
        try:
            target = input("Enter a URL: ").strip()
        except EOFError:
            target = ""

    checker = BlocklistChecker.from_settings(settings)
    try:
        verdict = checker.check(target)
    except ParseError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        return EXIT_INVALID

    if verdict.blocked:
        console.print("[bold red]The URL is blocked.[/]")
        return EXIT_BLOCKED
    console.print("[green]The URL is valid and accessible.[/]")
    return EXIT_OK


def cmd_bulk(args, settings) -> int:
    if args.file == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as e:
            console.print(f"[bold red]Error:[/bold red] Cannot read {args.file}: {e.strerror}")
            return EXIT_INVALID

    results = URLInspector.from_settings(settings).analyze_many(split_bulk_input(text))
    if args.json:
        print(json.dumps([result.as_dict() for result in results], indent=2, ensure_ascii=False))
    else:
        print_bulk_report(results)
    return EXIT_OK if all(result.is_valid for result in results) else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lantern",
        description="Lantern URL inspector (offline heuristic scoring and blocklist lookup)",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"{APP_NAME} v{APP_VERSION}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Score a URL in every category")
    analyze.add_argument("url", help="URL to analyze")
    analyze.add_argument("--json", action="store_true", help="Print the result as JSON")
    analyze.set_defaults(handler=cmd_analyze)

    check = subparsers.add_parser("check", help="Validate a URL and look it up in the blocklist")
    check.add_argument("url", nargs="?", help="URL to check (prompted for when omitted)")
    check.set_defaults(handler=cmd_check)

    bulk = subparsers.add_parser("bulk", help="Score every URL in a file, one per line")
    bulk.add_argument("file", help="Path to a file of URLs, or - for stdin")
    bulk.add_argument("--json", action="store_true", help="Print the results as JSON")
    bulk.set_defaults(handler=cmd_bulk)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_cli_logging(args.verbose)

    return args.handler(args, get_settings())


if __name__ == "__main__":
    sys.exit(main())
