# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree writer - renders an ElementNode tree to indented HTML text."""

from __future__ import annotations

from typing import Protocol

from .elements import ContentPosition, HtmlComment, HtmlEmpty
from .node import ElementNode
from .settings import BuilderSettings
from .tags import is_self_closing

ROOT_TAG = 'html'


class TextSink(Protocol):
    """Anything with a write(str) method (io.StringIO, open text files...)."""

    def write(self, text: str) -> object: ...


def _indent_lines(content: str, indent: str) -> str:
    return ''.join(f"{indent}{line}\n" for line in content.splitlines())


def write_tree(
    out: TextSink,
    node: ElementNode | None,
    settings: BuilderSettings,
    level: int = 0,
) -> None:
    """Write node and its descendants to out, depth first.

    Empty nodes, and comments when settings.write_comments is off, write
    nothing themselves: their children are written at the same level.
    A childless node whose tag is self-closing and whose content is blank is
    written as ``<tag/>``. Otherwise the element is opened, its content and
    children are written (order set by content_position), and it is closed.
    Content is written inline unless the node has children or the content
    spans several lines; then every content line is indented one level
    deeper.

    Args:
        out: Text sink receiving the output.
        node: Node to write; None writes nothing.
        settings: Tab size, case and comment settings, read at call time.
        level: Indentation level of node.
    """
    if node is None:
        return

    element = node.element
    case = settings.enforce_proper_case

    if isinstance(element, HtmlEmpty) or (
        isinstance(element, HtmlComment) and not settings.write_comments
    ):
        for child in node.children:
            write_tree(out, child, settings, level)
        return

    indent = ' ' * (level * settings.tab_size)
    has_children = bool(node.children)
    content = element.content

    if (
        not has_children
        and not content.strip()
        and is_self_closing(element.tag_name(True))
    ):
        out.write(indent + element.self_closing(case) + '\n')
        return

    block = has_children or element.is_multiline
    out.write(indent + element.open(case))
    if block:
        out.write('\n')

    formatted = ''
    if content:
        if block:
            formatted = _indent_lines(content, ' ' * ((level + 1) * settings.tab_size))
        else:
            formatted = content
        if element.content_position is ContentPosition.BEFORE_CHILDREN:
            out.write(formatted)

    # children of <html> stay at its level when root indentation is off
    step = 1
    if not settings.indent_root_and_body_tags and element.tag_name(True) == ROOT_TAG:
        step = 0
    for child in node.children:
        write_tree(out, child, settings, level + step)

    if formatted and element.content_position is ContentPosition.AFTER_CHILDREN:
        out.write(formatted)

    if block:
        out.write(indent + element.close(case) + '\n')
    else:
        out.write(element.close(case) + '\n')
