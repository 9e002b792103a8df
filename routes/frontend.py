from urllib.parse import quote

from flask import Blueprint, abort, current_app
from markupsafe import escape

from filetree.classify import MediaCategory
from filetree.errors import FileTreeError
from filetree.models import DirectoryEntry
from helpers import safe_path

frontend = Blueprint('frontend', __name__)

TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Index of /<!-- TITLE --></title>
<style>
body { font-family: sans-serif; margin: 2rem; }
.dir, .file { display: flex; align-items: center; gap: .5rem; padding: .15rem 0; }
.ico { width: 1rem; height: 1rem; }
.category { color: #888; font-size: .8rem; }
</style>
</head>
<body>
<h1>Index of /<!-- TITLE --></h1>
<!-- FILELIST -->
</body>
</html>
"""

FOLDER_SVG = (
    '<svg class="ico" viewBox="0 0 24 24" fill="none"'
    ' stroke="currentColor" stroke-width="2" stroke-linecap="round"'
    ' stroke-linejoin="round" aria-hidden="true">'
    '<path d="M3 7a2 2 0 0 1 2-2h5l2 2h8a2 2 0 0 1 2 2v9a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V7z"/>'
    '</svg>'
)

FILE_SVG = (
    '<svg class="ico" viewBox="0 0 24 24" fill="none"'
    ' stroke="currentColor" stroke-width="2" stroke-linecap="round"'
    ' stroke-linejoin="round" aria-hidden="true">'
    '<path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V8z"/>'
    '<path d="M14 2v6h6"/>'
    '</svg>'
)


def file_href(entry):
    href = f"/api/v1/files/{quote(entry.path)}"
    if entry.category == MediaCategory.TEXT.value:
        href += "?force-display=true"
    return href


def render_listing(node):
    """HTML rows for one (sorted, sanitized) directory level."""
    rows = []
    if node.path:
        parent = node.path.rpartition("/")[0]
        rows.append(f'<div class="dir"><a href="/browse/{quote(parent)}">..</a></div>')

    for entry in node.children:
        name = escape(entry.name)
        if isinstance(entry, DirectoryEntry):
            rows.append(
                f'<div class="dir">{FOLDER_SVG}'
                f'<a href="/browse/{quote(entry.path)}">{name}/</a>'
                f'</div>'
            )
        else:
            rows.append(
                f'<div class="file">{FILE_SVG}'
                f'<a href="{file_href(entry)}" data-path="{escape(entry.path)}">{name}</a>'
                f'<span class="category">{escape(entry.category)}</span>'
                f'</div>'
            )
    return "\n".join(rows)


@frontend.route('/')
@frontend.route('/browse/', defaults={'path': ''})
@frontend.route('/browse/<path:path>')
def index(path=""):
    root = current_app.config["FILE_ROOT"]

    try:
        target = safe_path(root, path)
        node = current_app.extensions["walk_pool"].list_directory(root, target)
    except (ValueError, FileTreeError):
        abort(404, f"Cannot browse: /{path}")

    html = TEMPLATE.replace("<!-- TITLE -->", str(escape(node.path)))
    return html.replace("<!-- FILELIST -->", render_listing(node))
