# src/grader/model.py
from typing import Dict, List

from pydantic import BaseModel, Field, TypeAdapter

# Validates the raw checks file: a JSON array of selector strings.
CheckList = TypeAdapter(List[str])


class MissingFileError(FileNotFoundError):
    """Raised when a required input path does not resolve to an existing file."""

    def __init__(self, path: str):
        super().__init__(f"{path} does not exist.")
        self.path = path


class ChecksParseError(ValueError):
    """Raised when a checks file is not a valid JSON array of selector strings."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not parse checks file '{path}': {reason}")
        self.path = path
        self.reason = reason


class GradeReport(BaseModel):
    """
    Outcome of grading one HTML file against one checks file.

    `results` maps every (deduplicated) selector to its presence flag, in the
    sorted order the selectors were evaluated.
    """
    html_file: str
    checks_file: str
    results: Dict[str, bool] = Field(default_factory=dict)

    @property
    def passed(self) -> int:
        """Number of selectors found in the document."""
        return sum(1 for present in self.results.values() if present)

    @property
    def failed(self) -> int:
        return len(self.results) - self.passed
