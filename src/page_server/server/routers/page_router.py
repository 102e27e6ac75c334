import logging
from pathlib import Path

from flask import Blueprint, Response, current_app

logger = logging.getLogger(__name__)

# Blueprint for the single HTML page served at the root
page_router = Blueprint('page_router', __name__)


@page_router.route('/')
def index():
    """
    Returns the configured index file verbatim.
    The file is read again on every request, so edits show up immediately.
    """
    index_file = current_app.config.get('INDEX_FILE')

    if not index_file:
        logger.error("Page router accessed without an INDEX_FILE in config.")
        return "Error: No index file configured.", 500

    try:
        content = Path(index_file).read_bytes()
    except OSError as e:
        logger.error("Could not read index file %s: %s", index_file, e)
        return "Error: Index file could not be loaded.", 500

    return Response(content, status=200, mimetype="text/html")
