"""
HTML Grader - command line entry point.

Checks an HTML file for the presence of the CSS selectors listed in a
checks file and prints the result as pretty-printed JSON.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from grader.controllers.grade_controller import check_html_file
from grader.services.json_service import to_json
from grader.utils.config_manager import config_manager
from grader.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)

HTMLFILE_DEFAULT = "index.html"
CHECKSFILE_DEFAULT = "checks.json"


def assert_file_exists(infile: str) -> str:
    """
    argparse coercion for input paths.
    Exits the process with status 1 if the file does not exist.
    """
    instr = str(infile)
    if not os.path.isfile(instr):
        print(f"{instr} does not exist. Exiting.")
        sys.exit(1)
    return instr


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grade an HTML file for the presence of CSS selectors."
    )
    # String defaults pass through the 'type' coercion too, so they are validated as well.
    parser.add_argument(
        "-f", "--file",
        type=assert_file_exists,
        default=config_manager.get_nested("grader.html_file", HTMLFILE_DEFAULT),
        metavar="<html_file>",
        help="Path to index.html",
    )
    parser.add_argument(
        "-c", "--checks",
        type=assert_file_exists,
        default=config_manager.get_nested("grader.checks_file", CHECKSFILE_DEFAULT),
        metavar="<check_file>",
        help="Path to checks.json",
    )
    parser.add_argument(
        "--log-level",
        default=config_manager.get_nested("debug.level", "WARNING"),
        help="Logging level for diagnostics written to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logger(args.log_level)
    logger.debug("Grading %s against %s", args.file, args.checks)

    check_json = check_html_file(args.file, args.checks)
    print(to_json(check_json, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
