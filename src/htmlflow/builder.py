# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlBuilder - cursor-driven builder for HTML documents."""

from __future__ import annotations

import html
import io
import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Union

from .elements import (
    AnyElement,
    Attribute,
    ContentPosition,
    HtmlComment,
    HtmlDocument,
    HtmlElement,
    HtmlEmpty,
)
from .exceptions import (
    CommentCannotHaveChildrenError,
    DocumentNotFirstError,
    DuplicateSingletonError,
    IllegalNestingError,
    InvalidOperationError,
    InvalidTagNameError,
    NodeNotFoundError,
    NoOpenComponentError,
    NotInitializedError,
    TagNotAllowedForDoctypeError,
    UnsupportedTagError,
)
from .node import ElementNode
from .settings import BuilderSettings
from .shortcuts import TagShortcuts
from .tags import DOCTYPE_SUPPORT, DocumentType, nesting_rules
from .writer import TextSink, write_tree

logger = logging.getLogger(__name__)

AttributesLike = Union[
    Iterable[Union[Attribute, tuple]],
    Mapping[str, Union[str, None]],
    None,
]


class Attach(Enum):
    """Where the next insertion goes relative to the cursor."""

    SIBLING = 0
    CHILD = 1


class Gate(Enum):
    """Whether the next gated operation runs."""

    OPEN = 0
    SKIP = 1


def _coerce_attributes(attributes: AttributesLike) -> list[Attribute]:
    """Accept Attribute instances, (name, value) pairs or a mapping."""
    if attributes is None:
        return []
    if isinstance(attributes, Mapping):
        return [Attribute(name, value) for name, value in attributes.items()]
    result: list[Attribute] = []
    for item in attributes:
        if isinstance(item, Attribute):
            result.append(item)
        else:
            result.append(Attribute(*item))
    return result


class HtmlBuilder(TagShortcuts):
    """Fluent builder for HTML documents.

    The builder keeps a cursor on the last inserted node. Each insertion
    attaches the new element as a sibling of the cursor, or as its child when
    child() was called just before, and moves the cursor to the new node.
    parent() moves the cursor one level up. Every method returns the builder,
    so calls chain:

        >>> builder = HtmlBuilder()
        >>> builder.document().body().div('box').child().p('Hello').parent()
        >>> print(builder)
        <!DOCTYPE html>
        <html>
            <body>
                <div class="box">
                    <p>Hello</p>
                </div>
            </body>
        </html>

    Insertions are checked against the tag tables (see htmlflow.tags):
    the tag must be legal for the document type and must sit under an
    allowed parent. Checks run before the tree changes, so a failed call
    leaves the tree untouched. Use settings to switch checks off.

    Several top-level elements are possible by rooting the tree with an
    HtmlEmpty (empty(), begin_component() or the root argument).

    Args:
        document_type: Document type used for validation and the doctype
            declaration written by document().
        settings: Settings object. Shared by reference when given, a fresh
            BuilderSettings otherwise.
        root: Custom root element, placed immediately; the next insertion
            becomes its child.
    """

    __slots__ = (
        'document_type', 'settings', '_tree', '_cursor',
        '_attach', '_gate', '_components',
    )

    def __init__(
        self,
        document_type: DocumentType = DocumentType.HTML5,
        settings: BuilderSettings | None = None,
        root: AnyElement | None = None,
    ) -> None:
        self.document_type = document_type
        self.settings = settings if settings is not None else BuilderSettings()
        self._tree: ElementNode | None = None
        self._cursor: ElementNode | None = None
        self._attach = Attach.SIBLING
        self._gate = Gate.OPEN
        self._components: list[tuple[str, ElementNode]] = []
        if root is not None:
            self._set_root(root)

    def __repr__(self) -> str:
        return f"HtmlBuilder({self.document_type.name}, tree={self._tree!r})"

    def __str__(self) -> str:
        return self.to_string()

    # ==================== State ====================

    @property
    def dom(self) -> ElementNode:
        """The root node of the tree.

        Raises:
            NotInitializedError: If nothing was added yet.
        """
        if self._tree is None:
            raise NotInitializedError("Add an element first before accessing the DOM.")
        return self._tree

    @property
    def cursor(self) -> ElementNode | None:
        """The node the next insertion is attached to (None before the first)."""
        return self._cursor

    @property
    def open_components(self) -> list[str]:
        """Labels of components begun and not yet ended, innermost last."""
        return [label for label, _ in self._components]

    def _consume_attach(self) -> bool:
        """Return True if the next insertion goes under the cursor; reset."""
        as_child = self._attach is Attach.CHILD
        self._attach = Attach.SIBLING
        return as_child

    def _consume_gate(self) -> bool:
        """Return True if the next gated operation may run; reset."""
        is_open = self._gate is Gate.OPEN
        self._gate = Gate.OPEN
        return is_open

    @staticmethod
    def _container(node: ElementNode) -> ElementNode:
        """Node that receives siblings of node (the root contains its own)."""
        return node.parent if node.parent is not None else node

    def _set_root(self, element: AnyElement) -> None:
        if isinstance(element, HtmlComment):
            self._set_root(HtmlEmpty())
            self._cursor = self._tree.add_child(element)
            self._attach = Attach.SIBLING
            return
        self._tree = ElementNode(element)
        self._cursor = self._tree
        self._attach = Attach.CHILD

    def _place(self, element: AnyElement, as_child: bool, index: int = -1) -> None:
        """Attach element next to or under the cursor and move the cursor."""
        if self._tree is None:
            self._set_root(element)
            return
        target = self._cursor if as_child else self._container(self._cursor)
        if index < 0:
            self._cursor = target.add_child(element)
        else:
            self._cursor = target.insert_child(index, element)

    # ==================== Cursor ====================

    def child(self, callback: Callable[[], Any] | None = None) -> HtmlBuilder:
        """Attach the next insertion as a child of the cursor.

        With a callback: call it with the flag set, then return the cursor to
        its level, like ``child(); callback(); parent()``.

        Raises:
            CommentCannotHaveChildrenError: If the cursor is a comment.
        """
        if self._cursor is not None and isinstance(self._cursor.element, HtmlComment):
            raise CommentCannotHaveChildrenError("HTML comments cannot have child elements")
        self._attach = Attach.CHILD
        if callback is not None:
            callback()
            self.parent()
        return self

    def parent(self) -> HtmlBuilder:
        """Move the cursor to its parent.

        At the root (or before the first insertion) this does nothing.
        """
        if self._cursor is not None and self._cursor.parent is not None:
            self._cursor = self._cursor.parent
        return self

    def only_when(self, condition: bool | Callable[[], bool]) -> HtmlBuilder:
        """Run the next gated operation only if condition holds.

        Gated operations are element insertions (add_element, document,
        comment, empty, shortcuts) and add_attribute. child() and parent()
        are not affected.

        Args:
            condition: A bool, or a callable returning one.
        """
        if callable(condition):
            condition = condition()
        self._gate = Gate.OPEN if condition else Gate.SKIP
        return self

    def set_active_element(self, node: ElementNode) -> HtmlBuilder:
        """Move the cursor to node.

        Raises:
            NodeNotFoundError: If node is not part of this builder's tree.
            NotInitializedError: If the tree is empty.
        """
        if not any(n is node for n in self.dom.descendants_and_self()):
            raise NodeNotFoundError("Element not found")
        self._cursor = node
        return self

    def delete_element(self, node: ElementNode) -> HtmlBuilder:
        """Remove node and its subtree; the cursor moves to its parent.

        Raises:
            NodeNotFoundError: If node is not part of this builder's tree.
            InvalidOperationError: If node is the root.
        """
        if not any(n is node for n in self.dom.descendants_and_self()):
            raise NodeNotFoundError("Element not found")
        if node.parent is None:
            raise InvalidOperationError("Cannot remove root element")
        parent = node.parent
        parent.remove_child(node)
        self._cursor = parent
        logger.debug("Deleted %r", node)
        return self

    # ==================== Validation ====================

    def _check_doctype(self, tag: str, tag_lower: str) -> None:
        if not self.settings.enforce_doctype:
            return
        if self.document_type is DocumentType.UNDEFINED:
            return
        support = DOCTYPE_SUPPORT.get(tag_lower)
        if support is None:
            raise UnsupportedTagError(
                f"<{tag}> is not a valid tag for document type {self.document_type.name}"
            )
        if not support[self.document_type.value]:
            raise TagNotAllowedForDoctypeError(
                f"Tag <{tag}> not supported for document type {self.document_type.name}"
            )

    def _check_nesting(self, tag: str, tag_lower: str, as_child: bool) -> None:
        rules = nesting_rules(tag_lower)
        if not rules:
            return
        reference = self._cursor if as_child else self._container(self._cursor)
        parent_tag = reference.tag
        if not parent_tag:
            # empty nodes accept any parent rule, the first one sets the cardinality
            rule = rules[0]
            where = "an empty node"
        else:
            rule = next((r for r in rules if r.parent == parent_tag), None)
            if rule is None:
                raise IllegalNestingError(
                    f"Tag <{tag}> cannot be nested inside tag <{parent_tag}>. "
                    f"Valid parents: {[r.parent for r in rules]}"
                )
            where = f"tag <{parent_tag}>"
        if rule.single and any(n.tag == tag_lower for n in reference.descendants()):
            raise DuplicateSingletonError(
                f"Tag <{tag}> cannot be nested multiple times inside {where}"
            )

    # ==================== Insertion ====================

    def _insert(
        self,
        index: int,
        tag: str,
        attributes: AttributesLike,
        content: str | None,
        content_position: ContentPosition,
        as_child: bool | None = None,
    ) -> HtmlBuilder:
        """Validate and insert an ordinary element.

        Both one-shot flags are consumed here, whether or not the insertion
        runs. as_child overrides the attach flag when given.
        """
        pending_child = self._consume_attach()
        if as_child is None:
            as_child = pending_child
        if not self._consume_gate():
            logger.debug("Skipped <%s>", tag)
            return self

        if not tag or not tag.strip():
            raise InvalidTagNameError("Tag name cannot be empty")
        tag_lower = tag.lower()

        self._check_doctype(tag, tag_lower)
        if self._tree is not None and self.settings.enforce_nesting:
            self._check_nesting(tag, tag_lower, as_child)

        element = HtmlElement(tag, content, _coerce_attributes(attributes), content_position)
        self._place(element, as_child, index)
        logger.debug("Inserted <%s> under %r", tag, self._cursor.parent)
        return self

    def add_element(
        self,
        tag: str,
        content: str | None = '',
        attributes: AttributesLike = None,
        content_position: ContentPosition = ContentPosition.BEFORE_CHILDREN,
    ) -> HtmlBuilder:
        """Append an element after the cursor (or under it, after child()).

        Args:
            tag: Tag name, letters and digits only.
            content: Text inside the element.
            attributes: Attribute instances, (name, value) pairs or a mapping.
            content_position: Write content before or after the children.

        Raises:
            InvalidTagNameError: If the tag contains other characters.
            UnsupportedTagError: If the tag is unknown (doctype enforcement).
            TagNotAllowedForDoctypeError: If the tag is illegal for the
                document type.
            IllegalNestingError: If the tag cannot live under its new parent.
            DuplicateSingletonError: If a once-only tag is already there.
        """
        return self._insert(-1, tag, attributes, content, content_position)

    def insert_element(
        self,
        index: int,
        tag: str,
        content: str | None = '',
        attributes: AttributesLike = None,
        content_position: ContentPosition = ContentPosition.BEFORE_CHILDREN,
    ) -> HtmlBuilder:
        """Like add_element(), but insert at position index among the siblings."""
        return self._insert(index, tag, attributes, content, content_position)

    def add_element_from(self, element: HtmlElement) -> HtmlBuilder:
        """Append a copy of a pre-built element (tag, attributes, content)."""
        return self._insert(
            -1, element.tag_name(False), list(element.attributes),
            element.content, element.content_position,
        )

    def insert_element_from(self, index: int, element: HtmlElement) -> HtmlBuilder:
        """Insert a copy of a pre-built element at position index."""
        return self._insert(
            index, element.tag_name(False), list(element.attributes),
            element.content, element.content_position,
        )

    def add_attribute(self, name: str, value: str | None = None) -> HtmlBuilder:
        """Add an attribute to the element under the cursor.

        Raises:
            NotInitializedError: If nothing was added yet.
            InvalidOperationError: If the cursor is a comment or empty node.
        """
        if not self._consume_gate():
            return self
        if self._tree is None:
            raise NotInitializedError("Add an element first before accessing the DOM.")
        element = self._cursor.element
        if not isinstance(element, HtmlElement):
            raise InvalidOperationError(
                f"Cannot add attribute '{name}' to {type(element).__name__}"
            )
        element.attributes.append(Attribute(name, value))
        return self

    def document(self, language: str = '') -> HtmlBuilder:
        """Start the document with the <html> element and its doctype.

        Args:
            language: Value of the lang attribute (omitted when blank).

        Raises:
            DocumentNotFirstError: If anything was added before.
        """
        self._consume_attach()
        if not self._consume_gate():
            return self
        if self._tree is not None:
            raise DocumentNotFirstError(
                "The <html> tag must be the first element in an HTML document"
            )
        self._set_root(HtmlDocument(self.document_type, language))
        return self

    def comment(self, content: str) -> HtmlBuilder:
        """Insert a comment. Comments are never validated."""
        as_child = self._consume_attach()
        if not self._consume_gate():
            return self
        self._place(HtmlComment(content), as_child)
        return self

    def empty(self) -> HtmlBuilder:
        """Insert an empty node, writing only its children."""
        as_child = self._consume_attach()
        if not self._consume_gate():
            return self
        self._place(HtmlEmpty(), as_child)
        return self

    # ==================== Components ====================

    def begin_component(self, label: str = '') -> HtmlBuilder:
        """Open a component: write a 'Begin <label>' comment and remember it.

        An empty root is created first if the tree is empty. Components are
        not affected by only_when().
        """
        if not label or not label.strip():
            label = 'Component'
        if self._tree is None:
            self._set_root(HtmlEmpty())
        self._place(HtmlComment(f"Begin {label}"), self._consume_attach())
        self._components.append((label, self._cursor))
        logger.debug("Begin component %r", label)
        return self

    def end_component(self) -> HtmlBuilder:
        """Close the innermost component with an 'End <label>' comment.

        The cursor returns to the 'Begin' comment and the 'End' comment is
        added after it at the same level, however deep the component's own
        content went.

        Raises:
            NoOpenComponentError: If no component is open.
        """
        if not self._components:
            raise NoOpenComponentError(
                "There is no component started with begin_component() left to end"
            )
        label, begin_node = self._components.pop()
        self._cursor = begin_node
        self._attach = Attach.SIBLING
        self._place(HtmlComment(f"End {label}"), self._consume_attach())
        logger.debug("End component %r", label)
        return self

    def component(self, label: str, callback: Callable[[], Any]) -> HtmlBuilder:
        """Wrap callback between begin_component(label) and end_component()."""
        self.begin_component(label)
        callback()
        return self.end_component()

    # ==================== Copying ====================

    def _copy_nodes(self, nodes: Iterable[ElementNode]) -> None:
        for node in nodes:
            element = node.element
            if isinstance(element, HtmlEmpty):
                self._copy_nodes(node.children)
                continue
            if isinstance(element, HtmlComment):
                self.comment(element.content)
            elif isinstance(element, HtmlDocument) and self._tree is None:
                self.document()
            else:
                self.add_element(
                    element.tag_name(False), element.content,
                    list(element.attributes), element.content_position,
                )
            if node.children:
                self.child()
                self._copy_nodes(node.children)
                self.parent()

    def add_elements_from(
        self, source: HtmlBuilder | Iterable[ElementNode]
    ) -> HtmlBuilder:
        """Copy elements from another builder or from a list of nodes.

        Copies pass through the normal insertion checks. When copying a
        builder the cursor is restored afterwards.
        """
        saved = None
        if isinstance(source, HtmlBuilder):
            if source._tree is None:
                return self
            nodes = [source._tree]
            saved = self._cursor
        else:
            nodes = list(source)
        if not nodes:
            return self
        if self._tree is None and (
            len(nodes) > 1 or isinstance(nodes[0].element, HtmlEmpty)
        ):
            # several top-level copies need a shared root
            self._set_root(HtmlEmpty())
        self._copy_nodes(nodes)
        if saved is not None:
            self._cursor = saved
        return self

    # ==================== Output ====================

    def write(self, sink: TextSink) -> None:
        """Append the rendered document to sink (anything with write(str))."""
        logger.debug("Rendering %r", self._tree)
        write_tree(sink, self._tree, self.settings)

    def to_string(self) -> str:
        """Render the document ('' if nothing was added)."""
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def to_html_encoded_string(self) -> str:
        """Render the document with HTML special characters escaped."""
        return html.escape(self.to_string())

    def write_file(
        self,
        path: str | Path,
        append: bool = False,
        encoding: str = 'utf-8',
    ) -> Path:
        """Render the document into a file.

        Args:
            path: Target file.
            append: Append instead of overwriting.
            encoding: Text encoding of the file.

        Returns:
            The file path.
        """
        path = Path(path)
        with path.open('a' if append else 'w', encoding=encoding, newline='') as fh:
            self.write(fh)
        logger.debug("Wrote %s", path)
        return path

    def as_dict(self) -> dict[str, Any] | None:
        """Return the tree as nested dicts (None if nothing was added)."""
        if self._tree is None:
            return None
        return self._tree.as_dict()

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize the tree structure (not the rendered text) to JSON."""
        return json.dumps(self.as_dict(), indent=indent)
