"""Logic for launching the fuzzy file finder with a query."""

import logging
import subprocess
from collections.abc import Sequence
from typing import Any

logger = logging.getLogger(__name__)

QUERY_PLACEHOLDER = "{query}"


def build_command(template: Sequence[str], query: str) -> list[str]:
    """Substitute the query into every argument of a command template."""
    return [str(arg).replace(QUERY_PLACEHOLDER, query) for arg in template]


def run_command(cmd_list: Sequence[str]) -> None:
    """Run a command, raising if it cannot start or exits non-zero."""
    if not cmd_list:
        msg = "No quick open command configured"
        raise FileNotFoundError(msg)
    logger.info("Running: %s", " ".join(cmd_list))
    subprocess.run(list(cmd_list), check=True)


def execute_quick_open(query: str, config: dict[str, Any]) -> int:
    """Open the finder with the primary command.

    The fallback runs only when the primary command cannot be started. A
    non-zero exit from a finder that did run (no match, cancelled by the user)
    is returned as-is.
    """
    settings = config.get("quick_open", {})
    primary = build_command(settings.get("primary", []), query)
    fallback = build_command(settings.get("fallback", []), query)

    try:
        run_command(primary)
    except subprocess.CalledProcessError as e:
        logger.info("Quick open exited with status %s", e.returncode)
        return e.returncode
    except OSError as e:
        logger.warning("Quick open unavailable (%s). Trying fallback.", e)
    else:
        return 0

    try:
        run_command(fallback)
    except subprocess.CalledProcessError as e:
        logger.error("Fallback quick open failed: %s", e)
        return e.returncode or 1
    except OSError as e:
        logger.error("Fallback quick open failed: %s", e)
        return 1
    return 0
