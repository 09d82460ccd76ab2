"""
MCP server for Phaset manifest generation.
Exposes schema retrieval and budgeted repository file collection over STDIO.
"""
import json
import logging
import os
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from . import config
from .collector import BudgetedCollector, CollectionResult
from .collector.config import DEFAULT_PROFILE
from .prompts import render_empty_suggestion, render_suggestion

logger = logging.getLogger(__name__)

SERVER_NAME = "phaset-manifest-generator"

mcp = FastMCP(name=SERVER_NAME)

RepoPath = Annotated[str, Field(description="Absolute path to repository root directory")]
Depth = Annotated[
    str,
    Field(
        description=(
            "How extensively to scan files (minimal=package files only, "
            "standard=includes deployment configs, deep=includes infrastructure)"
        )
    ),
]


def _read_schema() -> str:
    with open(config.SCHEMA_PATH, "r", encoding="utf-8") as fh:
        return fh.read()


def _collect(path: str, depth: str) -> CollectionResult:
    collector = BudgetedCollector(os.path.abspath(path), budgets=config.default_budgets())
    return collector.collect(depth)


# ── Tools ──────────────────────────────────────────────────────


@mcp.tool()
def get_phaset_schema() -> str:
    """Get the Phaset integration API schema (RecordUpdate structure) for manifest generation"""
    try:
        return _read_schema()
    except OSError as e:
        raise ToolError(f"Failed to read Phaset schema: {e}") from e


@mcp.tool()
def collect_repo_files(path: RepoPath, depth: Depth = DEFAULT_PROFILE) -> str:
    """
    Collect relevant files from a repository for Phaset manifest analysis.
    Returns file contents that can be analyzed to generate a manifest.
    """
    try:
        result = _collect(path, depth)
    except OSError as e:
        raise ToolError(f"Failed to collect files: {e}") from e
    return json.dumps(result.to_dict(), indent=2)


@mcp.tool()
def suggest_manifest(path: RepoPath, depth: Depth = DEFAULT_PROFILE) -> str:
    """
    Analyze a repository and generate a Phaset manifest suggestion.
    This orchestrates schema retrieval and file collection, then provides them for AI analysis.
    """
    try:
        result = _collect(path, depth)
        schema = _read_schema()
    except OSError as e:
        raise ToolError(f"Failed to generate manifest suggestion: {e}") from e

    if result.is_empty:
        return render_empty_suggestion(result.root)
    return render_suggestion(result.root, schema, result.files)


def run():
    logger.info(f"{SERVER_NAME} running on stdio")
    mcp.run(transport="stdio")
