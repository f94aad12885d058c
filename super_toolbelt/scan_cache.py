"""Logic for caching scan results per document and content stamp."""

import json
import logging
from pathlib import Path
from typing import Any

from super_toolbelt.class_entry import ClassEntry
from super_toolbelt.compute_content_stamp import compute_content_stamp
from super_toolbelt.scan_class_declarations import scan_class_declarations

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION = 1


class ScanCache:
    """Owned cache of class entries keyed by document identity.

    An entry is valid only while the document's content stamp matches the one
    it was stored with. Changing settings drops every entry on load.
    """

    def __init__(self, path: str | None, current_config_hash: str) -> None:
        """Initialize the cache with an optional storage path and config hash."""
        self.path = Path(path) if path else None
        self.current_config_hash = current_config_hash
        # document_id -> {stamp, entries, last_seen}
        self.mapping: dict[str, dict[str, Any]] = {}
        self.meta: dict[str, Any] = {
            "schema_version": CURRENT_SCHEMA_VERSION,
            "config_hash": current_config_hash,
            "run_id": 0,
        }
        self.accessed_ids: set[str] = set()

    def load(self) -> None:
        """Load cached entries from disk."""
        if self.path is None or not self.path.exists():
            return

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))

            schema_ver = data.get("meta", {}).get("schema_version", 0)
            if schema_ver != CURRENT_SCHEMA_VERSION:
                logger.warning(
                    "Schema version mismatch (%s != %s). Ignoring cache.",
                    schema_ver,
                    CURRENT_SCHEMA_VERSION,
                )
                return

            self.meta = data.get("meta", {})
            if "run_id" not in self.meta:
                self.meta["run_id"] = 0

            if self.meta.get("config_hash") != self.current_config_hash:
                logger.info("Settings changed since last run. Dropping cached scans.")
                return

            self.mapping = dict(data.get("mapping", {}))

        except Exception:
            logger.exception("Error loading cache")

    def lookup(self, document_id: str, stamp: str) -> list[ClassEntry] | None:
        """Return cached entries when the stored stamp matches."""
        record = self.mapping.get(document_id)
        if not record or record.get("stamp") != stamp:
            return None
        self.accessed_ids.add(document_id)
        return [ClassEntry(line, name) for line, name in record.get("entries", [])]

    def update(self, document_id: str, stamp: str, entries: list[ClassEntry]) -> None:
        """Store the entries scanned from a document version."""
        self.mapping[document_id] = {
            "stamp": stamp,
            "entries": [[e.line_index, e.qualified_name] for e in entries],
            "last_seen": self.meta.get("run_id", 0),
        }
        self.accessed_ids.add(document_id)

    def invalidate(self, document_id: str) -> None:
        """Drop the cached entries of a document."""
        self.mapping.pop(document_id, None)
        self.accessed_ids.discard(document_id)

    def scan(self, document_id: str, text: str) -> list[ClassEntry]:
        """Return entries for a document, scanning only on a cache miss."""
        stamp = compute_content_stamp(text)
        cached = self.lookup(document_id, stamp)
        if cached is not None:
            logger.debug("Cache hit: %s", document_id)
            return cached

        entries = scan_class_declarations(text)
        self.update(document_id, stamp, entries)
        return entries

    def save(self, prune_stale_threshold: int = 0) -> None:
        """Save the cache to disk.

        Updates run_id and last_seen for accessed documents.
        Prunes documents not seen for > prune_stale_threshold runs.
        """
        if self.path is None:
            return

        current_run_id = self.meta.get("run_id", 0) + 1
        self.meta["run_id"] = current_run_id
        self.meta["config_hash"] = self.current_config_hash
        self.meta["schema_version"] = CURRENT_SCHEMA_VERSION

        for document_id in self.accessed_ids:
            if document_id in self.mapping:
                self.mapping[document_id]["last_seen"] = current_run_id

        if prune_stale_threshold > 0:
            to_remove = [
                document_id
                for document_id, record in self.mapping.items()
                if (current_run_id - record.get("last_seen", 0)) > prune_stale_threshold
            ]
            for document_id in to_remove:
                del self.mapping[document_id]
                logger.info("Pruned stale document: %s", document_id)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(
                {"meta": self.meta, "mapping": self.mapping},
                indent=2,
                sort_keys=True,
            ),
            encoding="utf-8",
        )
