"""Logic for stamping document contents for cache validation."""

import hashlib


def compute_content_stamp(text: str) -> str:
    """Compute a stable hash of a document's text."""
    return hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).hexdigest()
