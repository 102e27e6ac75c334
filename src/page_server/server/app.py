"""
Page Server
Minimal Flask application serving one HTML page plus a static assets directory.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from flask import Flask

from page_server.server.routers.page_router import page_router
from page_server.server.config import server_config
from grader.utils.configure_logging import configure_logger
from grader.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

DEFAULT_PORT = 5000


def resolve_port(cli_port: Optional[int] = None) -> int:
    """
    Picks the listening port: explicit argument, then $PORT,
    then settings.json, then the fixed fallback.
    """
    if cli_port is not None:
        return cli_port
    env_port = os.environ.get("PORT")
    if env_port:
        try:
            return int(env_port)
        except ValueError:
            logger.error("Invalid PORT environment variable %r: expected an integer port number.", env_port)
            sys.exit(1)
    return int(server_config.get_nested("server.port", DEFAULT_PORT))


def create_app(
        index_file: Optional[Union[str, Path]] = None,
        static_dir: Optional[Union[str, Path]] = None
) -> Flask:
    """
    Application factory. Relative paths are resolved against the working directory.
    """
    index_path = PathUtils.resolve(index_file or server_config.get_nested("server.index_file", "index.html"))
    static_path = PathUtils.resolve(static_dir or server_config.get_nested("server.static_dir", "public"))

    # static_url_path='' maps the assets directory onto the URL root
    flask_app = Flask(__name__, static_folder=str(static_path), static_url_path="")

    flask_app.config['INDEX_FILE'] = str(index_path)
    flask_app.config['STATIC_DIR'] = str(static_path)

    flask_app.register_blueprint(page_router)

    if not static_path.is_dir():
        logger.warning("Static directory %s does not exist; only '/' will be served.", static_path)

    return flask_app


def main():
    """
    Parses arguments and starts the server.
    """
    parser = argparse.ArgumentParser(description="Static Page Server")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to (default: $PORT or 5000)")
    parser.add_argument(
        "--host",
        type=str,
        default=server_config.get_nested("server.host", "0.0.0.0"),
        help="Host interface to bind to"
    )
    parser.add_argument("--index-file", type=str, default=None, help="HTML file served at '/'")
    parser.add_argument("--static-dir", type=str, default=None, help="Directory of static assets")
    parser.add_argument(
        "--log-level",
        default=server_config.get_nested("debug.level", "WARNING"),
        help="Logging level"
    )
    args = parser.parse_args()

    configure_logger(
        args.log_level,
        module_specific_levels={__name__: "INFO"},
        silenced_loggers=server_config.get_nested("debug.silenced_loggers"),
    )

    app = create_app(args.index_file, args.static_dir)
    port = resolve_port(args.port)

    logger.info("app is running at localhost:%s", port)
    app.run(host=args.host, port=port, use_reloader=False)


if __name__ == '__main__':
    main()
