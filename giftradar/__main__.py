# coding=utf-8
"""
GiftRadar Main Program

Gifting Article Analytics
Usage: python -m giftradar <categories|rank|stats|explain> [options]
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from giftradar import __version__
from giftradar.context import AppContext
from giftradar.core import default_config, load_config, resolve_criterion, SORT_CRITERIA
from giftradar.utils.errors import GiftRadarError, InvalidParameterError

logger = logging.getLogger("giftradar")


def _split_terms(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [term.strip() for term in raw.split(",") if term.strip()]


def build_context(config_path: Optional[str], data_path: Optional[str]) -> AppContext:
    """Load configuration (built-in defaults when no config file exists)"""
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        if config_path:
            raise
        logger.info("No config file found, using built-in defaults")
        config = default_config()

    if data_path:
        config["DATA_PATH"] = data_path
    return AppContext(config)


def cmd_categories(ctx: AppContext, args) -> None:
    documents = ctx.load_documents()
    print(f"Category metrics over {len(documents)} articles\n")
    for metrics in ctx.category_report(documents, args.limit):
        print(f"• {metrics.category.name}: {metrics.article_count} articles, "
              f"trend {metrics.trend_score}% ({metrics.popularity})")
        for document in metrics.articles:
            print(f"    - {document.title}")


def cmd_rank(ctx: AppContext, args) -> None:
    criterion = resolve_criterion(args.sort)
    if criterion is None:
        raise InvalidParameterError(
            f"Invalid sort criterion: {args.sort}",
            suggestion=f"Supported criteria: {', '.join(SORT_CRITERIA)}"
        )

    terms = _split_terms(args.terms)
    documents = ctx.rank(ctx.load_documents(), criterion, terms)
    for index, document in enumerate(documents[: args.limit], 1):
        line = f"{index:>3}. {document.title} [{document.source}]"
        if terms:
            line += f" score={ctx.score(terms, document).value}"
        print(line)


def cmd_stats(ctx: AppContext, args) -> None:
    stats = ctx.dashboard_stats(ctx.load_documents())
    summary = stats["summary"]
    print(f"Total Articles: {summary['total']}")
    print(f"Sources: {summary['sources']}")
    print(f"Keywords: {summary['keywords']}")
    print(f"Date Range: {summary['earliest'] or '-'} ~ {summary['latest'] or '-'}")

    print("\nArticles by Source:")
    for item in stats["sources"]:
        print(f"  {item['source']}: {item['count']}")

    print("\nTop Keywords:")
    for item in stats["top_keywords"][: args.limit]:
        print(f"  {item['keyword']}: {item['count']}")

    print("\nPublication Timeline:")
    for item in stats["timeline"]:
        print(f"  {item['month']}: {item['count']}")

    print("\nTrend Categories:")
    for item in stats["trend_categories"]:
        print(f"  {item['name']}: {item['count']}")


def cmd_explain(ctx: AppContext, args) -> None:
    terms = _split_terms(args.terms)
    if not terms:
        raise InvalidParameterError("explain needs --terms", suggestion="e.g. --terms eco-friendly,tech")

    documents = ctx.load_documents()
    if args.id:
        documents = [doc for doc in documents if doc.id == args.id]
        if not documents:
            raise InvalidParameterError(f"Unknown document id: {args.id}")

    for document in documents[: args.limit]:
        trace = ctx.explain(terms, document)
        print(f"{document.title} (id={document.id}) score={trace['score']['value']}")
        for result in trace["matches"]:
            strategies = ", ".join(result["strategies"]) or "no match"
            print(f"    {result['term']}: {strategies}")
        for contribution in trace["score"]["contributions"]:
            print(f"    +{contribution['points']} {contribution['term']} ({', '.join(contribution['reasons'])})")


COMMANDS = {
    "categories": cmd_categories,
    "rank": cmd_rank,
    "stats": cmd_stats,
    "explain": cmd_explain,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="giftradar", description="GiftRadar CLI")
    parser.add_argument("command", choices=list(COMMANDS), help="Command to run")
    parser.add_argument("--config", help="Config file (default: CONFIG_PATH or config/config.yaml)")
    parser.add_argument("--data", help="Article JSON file (default: DATA_PATH from config)")
    parser.add_argument("--sort", default="date", help="Sort criterion for rank")
    parser.add_argument("--terms", help="Comma-separated selected terms")
    parser.add_argument("--id", help="Document id for explain")
    parser.add_argument("--limit", type=int, default=10, help="Max rows / sample size")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main program entry point"""
    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    try:
        ctx = build_context(args.config, args.data)
        COMMANDS[args.command](ctx, args)
    except FileNotFoundError as e:
        print(f"❌ Config Error: {e}")
        return 1
    except GiftRadarError as e:
        print(f"❌ {e.message}")
        if e.suggestion:
            print(f"   {e.suggestion}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
