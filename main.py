import argparse
import logging
import os
import sys

from flask import Flask

from filetree.listing import WalkPool
from helpers import (
    HOST,
    LOG_LEVEL,
    PORT,
    ROOT_DIR,
    WORKERS,
    ServerConfig,
    configure_logging,
    parse_log_level,
    resolve_root,
)
from routes.files import files
from routes.frontend import frontend

logger = logging.getLogger(__name__)

# =====================
# APP SETUP
# =====================

def create_app(config: ServerConfig, test_config=None) -> Flask:
    app = Flask(__name__)

    app.config.from_mapping(
        FILE_ROOT=resolve_root(config.base_dir),
        WALK_WORKERS=config.workers,
    )
    if test_config is not None:
        app.config.update(test_config)

    app.extensions["walk_pool"] = WalkPool(app.config["WALK_WORKERS"])

    app.register_blueprint(files)
    app.register_blueprint(frontend)

    return app

# =====================
# COMMAND LINE
# =====================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filetree-server",
        description="Serve a directory tree as JSON listings and streamed downloads.",
    )
    parser.add_argument(
        "base_dir", nargs="?", default=None,
        help="Optional base directory to serve. Current working directory by default.",
    )
    parser.add_argument("-p", "--port", type=int, default=PORT, help=f"Sets custom port. Default = {PORT}")
    parser.add_argument("-H", "--host", default=HOST, help=f"Sets custom host. Default = {HOST}")
    parser.add_argument("-l", "--loglevel", default=LOG_LEVEL, help=f"Sets log level. Default = {LOG_LEVEL}")
    parser.add_argument(
        "-w", "--workers", type=int, default=WORKERS,
        help=f"Sets number of directory walk worker threads. Default = {WORKERS}",
    )
    return parser


def parse_config(argv=None) -> ServerConfig:
    args = build_parser().parse_args(argv)

    base_dir = args.base_dir if args.base_dir is not None else ROOT_DIR
    if not os.path.exists(base_dir):
        print(f"Error: {base_dir!r} does not exist.", file=sys.stderr)
        sys.exit(1)

    if not os.path.isdir(base_dir):
        print("Error: base_dir is expected to be a directory.", file=sys.stderr)
        print(f"{base_dir!r} is not a directory.", file=sys.stderr)
        sys.exit(2)

    return ServerConfig(
        base_dir=resolve_root(base_dir),
        host=args.host,
        port=args.port,
        log_level=parse_log_level(args.loglevel),
        workers=max(1, args.workers),
    )


def main(argv=None):
    config = parse_config(argv)
    configure_logging(config.log_level)

    logger.info("Starting server with configs: %s", config)
    logger.info("Server will be listening at %s:%s", config.host, config.port)

    app = create_app(config)
    try:
        app.run(host=config.host, port=config.port, threaded=True)
    finally:
        app.extensions["walk_pool"].shutdown(wait=False)


if __name__ == "__main__":
    main()
