"""Logic for generating JSON reports of scanned class declarations."""

import json
import time
from collections import Counter
from pathlib import Path
from typing import Any

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.line_patterns import NAMESPACE_SEPARATOR


class ScanReport:
    """Collects class entries across documents and summarizes them."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.results: list[tuple[str, ClassEntry]] = []
        self.documents: list[str] = []
        self.start_time = time.time()

    def add_document(self, document: str, entries: list[ClassEntry]) -> None:
        """Add the entries of a single scanned document to the report."""
        self.documents.append(document)
        self.results.extend((document, entry) for entry in entries)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_documents": len(self.documents),
                "total_classes": len(self.results),
            },
            "results": [
                {
                    "document": document,
                    "line": entry.line_index + 1,
                    "name": entry.qualified_name,
                }
                for document, entry in self.results
            ],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _compute_stats(self) -> dict[str, Any]:
        document_counts: dict[str, int] = {d: 0 for d in self.documents}
        root_counts: Counter[str] = Counter()
        name_counts: Counter[str] = Counter()

        for document, entry in self.results:
            document_counts[document] = document_counts.get(document, 0) + 1
            root_counts[entry.qualified_name.split(NAMESPACE_SEPARATOR)[0]] += 1
            name_counts[entry.qualified_name] += 1

        # Reopened classes show up once per declaration
        reopened = sorted(name for name, count in name_counts.items() if count > 1)

        return {
            "document_counts": document_counts,
            "root_namespace_counts": dict(root_counts),
            "reopened_classes": reopened,
            "documents_without_classes": sorted(
                d for d, count in document_counts.items() if count == 0
            ),
        }
