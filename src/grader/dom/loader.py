# src/grader/dom/loader.py
import logging
from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def parse_document(html: str) -> BeautifulSoup:
    """
    Parses raw HTML into a queryable BeautifulSoup tree.

    Malformed markup is accepted as-is; html.parser repairs what it can and
    never rejects a document.
    """
    # Basic cleanup of potentially dirty HTML (e.g., BOM)
    clean_html = html.replace('\ufeff', '')
    return BeautifulSoup(clean_html, "html.parser")


def load_document(path: Union[str, Path]) -> BeautifulSoup:
    """
    Reads an HTML file fully into memory and parses it.

    Args:
        path: Location of the HTML file.

    Returns:
        BeautifulSoup: The parsed, read-only document.
    """
    raw = Path(path).read_bytes()
    html = raw.decode("utf-8", errors="replace")
    logger.debug("Loaded %d bytes of HTML from %s", len(raw), path)
    return parse_document(html)
