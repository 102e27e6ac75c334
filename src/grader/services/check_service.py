# src/grader/services/check_service.py
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Union

from bs4 import BeautifulSoup
from pydantic import ValidationError

from grader.model import CheckList, ChecksParseError

logger = logging.getLogger(__name__)


def parse_checks(content: str, source: str = "<string>") -> List[str]:
    """
    Parses the text of a checks file into a list of selectors.

    Raises:
        ChecksParseError: If the text is not JSON, or not an array of strings.
    """
    try:
        return CheckList.validate_json(content)
    except ValidationError as e:
        first = e.errors()[0]
        raise ChecksParseError(source, first.get("msg", str(e))) from e


def load_checks(path: Union[str, Path]) -> List[str]:
    """Reads a checks file (a JSON array of CSS selectors) from disk."""
    raw = Path(path).read_bytes()
    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ChecksParseError(str(path), f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e
    checks = parse_checks(content, source=str(path))
    logger.debug("Loaded %d checks from %s", len(checks), path)
    return checks


def is_present(doc: BeautifulSoup, selector: str) -> bool:
    """
    True if at least one element in 'doc' matches the CSS selector.

    A blank selector matches nothing. Invalid or unsupported selectors
    raise soupsieve.SelectorSyntaxError.
    """
    if not selector.strip():
        return False
    return doc.select_one(selector) is not None


def evaluate_checks(doc: BeautifulSoup, checks: Iterable[str]) -> Dict[str, bool]:
    """
    Tests every selector for presence in the document.

    Selectors are evaluated in sorted order and the result keeps that order.
    A selector listed more than once ends up as a single key.
    """
    out: Dict[str, bool] = {}
    for selector in sorted(checks):
        out[selector] = is_present(doc, selector)
        logger.debug("Check %r -> %s", selector, out[selector])
    return out
