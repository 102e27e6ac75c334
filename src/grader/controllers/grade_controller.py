# src/grader/controllers/grade_controller.py
import logging
from pathlib import Path
from typing import Dict, Union

from grader.dom.loader import load_document
from grader.model import GradeReport
from grader.services.check_service import evaluate_checks, load_checks
from grader.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class GradeController:
    """
    Orchestrates a single grading run: validate inputs, load the document
    and the checks, evaluate, and hand back the results.
    """

    def __init__(self, html_file: Union[str, Path], checks_file: Union[str, Path]):
        self.html_file = PathUtils.require_file(html_file)
        self.checks_file = PathUtils.require_file(checks_file)

    def grade(self) -> GradeReport:
        doc = load_document(self.html_file)
        checks = load_checks(self.checks_file)
        results = evaluate_checks(doc, checks)

        report = GradeReport(
            html_file=str(self.html_file),
            checks_file=str(self.checks_file),
            results=results,
        )
        logger.info(
            "Graded %s: %d/%d checks present, %d missing.",
            self.html_file, report.passed, len(report.results), report.failed
        )
        return report


def check_html_file(html_file: Union[str, Path], checks_file: Union[str, Path]) -> Dict[str, bool]:
    """
    Library entry point: returns the selector -> presence map for one file.

    Raises:
        MissingFileError: If either path does not exist.
        ChecksParseError: If the checks file is not a JSON array of strings.
        soupsieve.SelectorSyntaxError: If a selector is not valid CSS.
    """
    return GradeController(html_file, checks_file).grade().results
