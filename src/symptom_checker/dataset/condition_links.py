"""
Condition Link Lookup

Optional mapping from condition name to a reference URL. The lookup is a
convenience for presentation: when it is missing or unreadable the links
are simply omitted.
"""

import logging
from pathlib import Path

from symptom_checker.dataset.prevalence import DataLoadError, read_json_source

logger = logging.getLogger(__name__)


def load_condition_links(source: str | Path | None, timeout: float = 30.0) -> dict[str, str]:
    """
    Load the condition -> URL lookup.

    Returns an empty mapping (and logs a warning) instead of raising when
    the source is unavailable or malformed.
    """
    if not source:
        return {}

    try:
        document = read_json_source(source, timeout)
    except DataLoadError as e:
        logger.warning("Condition links unavailable, links disabled: %s", e)
        return {}

    if not isinstance(document, dict):
        logger.warning("Condition links in %s must be a JSON object, links disabled", source)
        return {}

    links: dict[str, str] = {}
    for condition, url in document.items():
        if not isinstance(url, str) or not url:
            logger.warning("Skipping link for %r: URL must be a non-empty string", condition)
            continue
        links[condition] = url

    logger.info("Loaded %d condition links from %s", len(links), source)
    return links
