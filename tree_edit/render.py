"""Printing a parse tree's source with an editor's changes applied."""

from __future__ import annotations

import io
from typing import Any, BinaryIO

from tree_edit.editor import Editor


def render(stream: BinaryIO, tree: Any, source: bytes, editor: Editor) -> bool:
    """Write ``source`` with the edits of ``editor`` applied to ``stream``.

    An edit that begins inside a previous edit is skipped. Returns whether any
    edit was applied.
    """
    changed = False
    start = 0
    for edit in editor.in_order_edits(source, tree):
        if edit.position < start:
            continue
        changed = True
        stream.write(source[start : edit.position])
        stream.write(edit.insert)
        start = edit.position + edit.delete
    stream.write(source[start:])
    return changed


def render_bytes(tree: Any, source: bytes, editor: Editor) -> bytes:
    """Return ``source`` with the edits of ``editor`` applied."""
    buffer = io.BytesIO()
    render(buffer, tree, source, editor)
    return buffer.getvalue()