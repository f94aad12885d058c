"""Orchestration logic for the toolbelt commands."""

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.clipboard_text_to_query import clipboard_text_to_query
from super_toolbelt.compute_config_hash import compute_config_hash
from super_toolbelt.is_ruby_document import is_ruby_document
from super_toolbelt.load_config import is_feature_enabled, load_config
from super_toolbelt.quick_open import execute_quick_open
from super_toolbelt.scan_cache import ScanCache
from super_toolbelt.scan_report import ScanReport

logger = logging.getLogger(__name__)


def run_scan(args: argparse.Namespace) -> int:
    """List the class declarations of every Ruby document under the paths."""
    config, cache = _init_infra(args)
    documents = collect_documents(args.paths, config)
    if not documents:
        msg = f"No Ruby documents found under: {', '.join(map(str, args.paths))}"
        raise SystemExit(msg)

    report = ScanReport(compute_config_hash(config))
    class_copy = is_feature_enabled(config, "class_copy")

    for document in documents:
        entries = _scan_document(document, cache) if class_copy else []
        report.add_document(str(document), entries)
        for entry in entries:
            print(f"{document}:{entry.line_index + 1}: {entry.qualified_name}")

    _save_cache(cache, config)

    if args.json:
        report.generate_report(args.json)
        logger.info("Report written to %s", args.json)

    return 0


def run_copy(args: argparse.Namespace) -> int:
    """Print the qualified name of the class declared on a given line."""
    config, cache = _init_infra(args)
    if not is_feature_enabled(config, "class_copy"):
        logger.info("Class copy is disabled in settings.")
        return 0

    document = Path(args.file)
    if not document.is_file():
        msg = f"No such file: {document}"
        raise SystemExit(msg)

    entries = _scan_document(document, cache)
    _save_cache(cache, config)

    line_index = args.line - 1
    for entry in entries:
        if entry.line_index == line_index:
            print(entry.qualified_name)
            return 0

    msg = f"No class declaration on line {args.line} of {document}"
    raise SystemExit(msg)


def run_open(args: argparse.Namespace) -> int:
    """Open the file finder narrowed by a copied class name."""
    config = load_config(args.config)
    if not is_feature_enabled(config, "quick_open_from_clipboard"):
        return execute_quick_open("", config)

    text = args.text if args.text is not None else sys.stdin.read()
    query = clipboard_text_to_query(text)
    if not query:
        logger.info("Input is not a qualified class name. Opening without a query.")
    return execute_quick_open(query, config)


def collect_documents(paths: Iterable[Path], config: dict[str, Any]) -> list[Path]:
    """Expand files and directories into a sorted list of Ruby documents."""
    documents: set[Path] = set()
    for path in paths:
        if path.is_dir():
            documents.update(
                p
                for p in path.rglob("*")
                if p.is_file() and is_ruby_document(p, config)
            )
        elif path.is_file():
            # Explicit files are taken as-is
            documents.add(path)
        else:
            logger.warning("Skipping missing path: %s", path)
    return sorted(documents)


def _init_infra(args: argparse.Namespace) -> tuple[dict[str, Any], ScanCache]:
    """Initialize settings and the scan cache."""
    config = load_config(args.config)
    cache_path = None if args.no_cache else config["cache"].get("path")
    cache = ScanCache(cache_path, compute_config_hash(config))
    cache.load()
    return config, cache


def _scan_document(document: Path, cache: ScanCache) -> list[ClassEntry]:
    text = document.read_text(encoding="utf-8-sig", errors="replace")
    return cache.scan(str(document.resolve()), text)


def _save_cache(cache: ScanCache, config: dict[str, Any]) -> None:
    threshold = config["cache"].get("prune_stale_after_runs", 0)
    cache.save(prune_stale_threshold=threshold)
