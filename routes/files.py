import logging
import os

from flask import Blueprint, Response, current_app, jsonify, request

from filetree.classify import guess_mime_type
from filetree.errors import FileOpenFailure, FileTreeError, NotADirectory, TargetNotFound
from filetree.stream import CHUNK_SIZE, escaped_text_chunks, open_file_stream
from helpers import safe_path

logger = logging.getLogger(__name__)

files = Blueprint('files', __name__)

TRUE_VALUES = {"1", "true", "yes", "on"}


def query_flag(name):
    return request.args.get(name, "").strip().lower() in TRUE_VALUES


def file_root():
    return current_app.config["FILE_ROOT"]


def walk_pool():
    return current_app.extensions["walk_pool"]


def listing_error_detail(exc, path):
    """Client-facing message for a failed listing; never the on-disk path."""
    shown = path or "/"
    if isinstance(exc, TargetNotFound):
        return f"Failed to get metadata for: {shown}"
    if isinstance(exc, NotADirectory):
        return f"{shown} is not a directory"
    return f"Failed to read directory: {shown}"


@files.route('/health-check')
def health_check():
    return "", 200


@files.route('/api/v1/directory-structure/', defaults={'path': ''})
@files.route('/api/v1/directory-structure/<path:path>')
def dir_structure(path):
    root = file_root()
    recursive = query_flag("recursive")

    try:
        target = safe_path(root, path)
    except ValueError as e:
        return jsonify({"detail": str(e)}), 400

    try:
        node = walk_pool().list_directory(root, target, recursive=recursive)
    except FileTreeError as e:
        logger.info("Directory listing failed for %r: %s", path, e)
        return jsonify({"detail": listing_error_detail(e, path)}), 400

    return jsonify(node.to_dict())


@files.route('/api/v1/files/<path:path>')
def serve_static_file(path):
    logger.info("Getting file with path: %s", path)
    root = file_root()

    try:
        target = safe_path(root, path)
    except ValueError as e:
        return jsonify({"detail": str(e)}), 400

    if os.path.isdir(target):
        return jsonify({"detail": f"{path} is a directory"}), 400

    chunk_size = current_app.config.get("CHUNK_SIZE", CHUNK_SIZE)
    try:
        cursor = open_file_stream(target, chunk_size)
    except FileOpenFailure:
        message = f"Failed to get file with path: {path}"
        logger.info(message)
        return jsonify({"detail": message}), 404

    # Force the browser to display the contents as (escaped) plain text
    if query_flag("force-display"):
        return Response(escaped_text_chunks(cursor), content_type="text/plain; charset=utf-8")

    response = Response(cursor, mimetype=guess_mime_type(path), direct_passthrough=True)
    response.content_length = cursor.remaining
    return response
