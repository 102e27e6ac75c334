# src/grader/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional, Union

from grader.model import MissingFileError

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and input paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_grader_package_root() -> Path:
        """Returns the directory of the installed 'grader' package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_grader_package_root() / "settings.json"

    # --- Input paths ---

    @staticmethod
    def resolve(path: Union[str, Path], base_dir: Optional[Path] = None) -> Path:
        """
        Resolves a (possibly relative) path against 'base_dir',
        or the current working directory when no base is given.
        """
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return (base_dir or Path.cwd()) / candidate

    @staticmethod
    def require_file(path: Union[str, Path]) -> Path:
        """
        Returns the path if it points to an existing file.

        Raises:
            MissingFileError: If nothing (or a directory) exists at the path.
        """
        candidate = Path(path)
        if not candidate.is_file():
            logger.debug("Required file missing: %s", candidate)
            raise MissingFileError(str(path))
        return candidate
