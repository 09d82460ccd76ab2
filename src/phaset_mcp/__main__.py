import json
import logging
import os
import sys

import click
from dotenv import load_dotenv

from phaset_mcp import config
from phaset_mcp.collector import Budgets, BudgetedCollector, discover
from phaset_mcp.collector.config import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_PROFILE

# Configure logging (stderr: stdout carries results and the MCP stream)
logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Phaset MCP - Repository file collector for manifest generation"""
    # Load .env from current working directory
    load_dotenv(os.path.join(os.getcwd(), ".env"))


@cli.command()
@click.argument("root", type=click.Path())
@click.argument("patterns", nargs=-1, required=True)
@click.option("--exclude", "-x", multiple=True, help="Exclusion pattern (repeatable)")
@click.option("--default-excludes", is_flag=True, help="Also apply the built-in exclusion list")
@click.option("--max-depth", type=int, default=None, help="Maximum recursion depth (root = 0)")
def find(root, patterns, exclude, default_excludes, max_depth):
    """List files under ROOT matching PATTERNS."""
    excludes = list(exclude)
    if default_excludes:
        excludes.extend(DEFAULT_EXCLUDE_PATTERNS)
    if max_depth is None:
        max_depth = config.MAX_DEPTH

    try:
        matches = discover(root, patterns, exclude=excludes, max_depth=max_depth)
    except OSError as e:
        click.echo(f"Discovery failed: {e}", err=True)
        sys.exit(1)

    for rel_path in matches:
        click.echo(rel_path)


@cli.command()
@click.argument("root", type=click.Path())
@click.option("--depth", default=DEFAULT_PROFILE, help="Depth profile: minimal, standard or deep")
@click.option("--max-file-chars", type=int, default=None, help="Characters kept per file")
@click.option("--max-tokens", type=int, default=None, help="Aggregate token budget")
@click.option("--max-depth", type=int, default=None, help="Maximum recursion depth (root = 0)")
def collect(root, depth, max_file_chars, max_tokens, max_depth):
    """Collect prioritized files under ROOT and print them as JSON."""
    defaults = config.default_budgets()
    budgets = Budgets(
        max_depth=defaults.max_depth if max_depth is None else max_depth,
        max_file_chars=defaults.max_file_chars if max_file_chars is None else max_file_chars,
        max_total_tokens=defaults.max_total_tokens if max_tokens is None else max_tokens,
    )

    try:
        result = BudgetedCollector(root, budgets=budgets).collect(depth)
    except OSError as e:
        click.echo(f"Collection failed: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(result.to_dict(), indent=2))


@cli.command()
def serve():
    """Run the MCP server on stdio."""
    from phaset_mcp.server import run

    run()


if __name__ == "__main__":
    cli()
