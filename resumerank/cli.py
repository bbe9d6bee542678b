"""
Command line interface for resumerank.

This module exposes two subcommands: ``rank`` ranks a set of PDF
résumés against a job description and optionally exports the result
as CSV, and ``report`` prints a human‑readable report from a
previously exported CSV.  The CLI is intentionally thin and delegates
the work to :class:`~resumerank.pipeline.ResumeRanker` and the
`export` package.
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Sequence

from .config import RankingSettings, load_settings
from .export.write_csv import read_rankings_csv, write_rankings_csv
from .pipeline import ResumeRanker, SourceDocument
from .rank.schema import RankedResult

logger = logging.getLogger("resumerank.cli")


def _read_job_description(args: argparse.Namespace) -> str:
    if args.job_file:
        with open(args.job_file, "r", encoding="utf-8") as f:
            return f.read()
    return args.job_description or ""


def _print_results(results: Sequence[RankedResult], show_keywords: bool) -> None:
    for i, result in enumerate(results):
        print(f"{i+1:02d}. {result.name} – {result.formatted_score}%")
        if show_keywords:
            print(f"   Keywords: {', '.join(result.keywords) or '-'}")


def cmd_rank(args: argparse.Namespace, settings: RankingSettings) -> int:
    """Rank résumé files against a job description."""
    if args.keywords is not None:
        try:
            settings = dataclasses.replace(settings, keyword_count=args.keywords)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    try:
        documents = [SourceDocument.from_path(path) for path in args.files]
        job_description = _read_job_description(args)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    ranker = ResumeRanker(settings=settings)
    results = asyncio.run(ranker.rank(documents, job_description))
    if ranker.error:
        print(ranker.error, file=sys.stderr)
        return 1
    _print_results(results, show_keywords=not args.hide_keywords)
    if args.out:
        write_rankings_csv(results, args.out)
    return 0


def cmd_report(args: argparse.Namespace, settings: RankingSettings) -> int:
    """Print a simple report from an exported rankings CSV."""
    try:
        rows = read_rankings_csv(args.rankings)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    limit = args.limit or len(rows)
    for i, row in enumerate(rows[:limit]):
        print(f"{i+1:02d}. {row['Resume Name']} – {row['Similarity Score (%)']}%")
        if not args.hide_keywords and row["Top Keywords"]:
            print(f"   Keywords: {row['Top Keywords']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="resumerank", description="Rank résumés against a job description")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Rank
    rank_cmd = subparsers.add_parser("rank", help="Rank PDF résumés")
    rank_cmd.add_argument("files", nargs="+", help="Résumé PDF files")
    job_group = rank_cmd.add_mutually_exclusive_group(required=True)
    job_group.add_argument("--job-description", dest="job_description", help="Job description text")
    job_group.add_argument("--job-file", dest="job_file", help="Path to a text file holding the job description")
    rank_cmd.add_argument("--keywords", type=int, help="Number of matching keywords per résumé")
    rank_cmd.add_argument(
        "--out",
        nargs="?",
        const="",
        default=None,
        help="Write results as CSV (defaults to the configured export file name)",
    )
    rank_cmd.add_argument("--hide-keywords", action="store_true", help="Do not print matching keywords")
    rank_cmd.set_defaults(func=cmd_rank)

    # Report
    report_cmd = subparsers.add_parser("report", help="Print a report from a rankings CSV")
    report_cmd.add_argument("--rankings", required=True, help="Path to rankings CSV")
    report_cmd.add_argument("--limit", type=int, default=20, help="Number of résumés to display")
    report_cmd.add_argument("--hide-keywords", action="store_true", help="Do not print matching keywords")
    report_cmd.set_defaults(func=cmd_report)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = load_settings(args.config)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")
    if getattr(args, "out", None) == "":
        args.out = settings.export_filename
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
