# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementNode - the tree that holds HtmlFlow elements."""

from __future__ import annotations

from typing import Any, Iterator

from .elements import AnyElement, HtmlComment, HtmlDocument, HtmlEmpty
from .exceptions import NodeNotFoundError


class ElementNode:
    """A node in an HtmlFlow document tree.

    Each node has:
    - element: The element it wraps (HtmlElement, HtmlComment, ...)
    - parent: The containing ElementNode, or None for the root
    - children: Ordered list of child ElementNodes

    Nodes are created by HtmlBuilder; the traversal methods below return
    generators that can be restarted by calling them again. They do not take
    a snapshot, so do not mutate the tree while consuming one.

    Example:
        >>> root = ElementNode(HtmlElement('ul'))
        >>> item = root.add_child(HtmlElement('li', 'one'))
        >>> [n.element.content for n in root.descendants()]
        ['one']
    """

    __slots__ = ('element', 'parent', 'children')

    def __init__(
        self,
        element: AnyElement,
        parent: ElementNode | None = None,
    ) -> None:
        """Initialize an ElementNode.

        Args:
            element: The element held by this node.
            parent: The containing node, None for a root.
        """
        self.element = element
        self.parent = parent
        self.children: list[ElementNode] = []

    def __repr__(self) -> str:
        return f"ElementNode({self.element!r}, children={len(self.children)})"

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[ElementNode]:
        return iter(self.children)

    def __getitem__(self, index: int) -> ElementNode:
        return self.children[index]

    def __str__(self) -> str:
        return self.element.to_string()

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    @property
    def root(self) -> ElementNode:
        """Get the root node of this tree."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def depth(self) -> int:
        """Get the depth of this node in the tree (root=0)."""
        depth = 0
        node = self
        while node.parent is not None:
            depth += 1
            node = node.parent
        return depth

    @property
    def tag(self) -> str:
        """Lowercase tag of the element ('' for comments and empty nodes)."""
        return self.element.tag_name(True)

    # ==================== Mutation ====================

    def add_child(self, element: AnyElement) -> ElementNode:
        """Append a new child node holding element and return it."""
        node = ElementNode(element, parent=self)
        self.children.append(node)
        return node

    def insert_child(self, index: int, element: AnyElement) -> ElementNode:
        """Insert a new child node at index, shifting later siblings."""
        node = ElementNode(element, parent=self)
        self.children.insert(index, node)
        return node

    def remove_child(self, node: ElementNode) -> None:
        """Remove a child node by identity.

        Raises:
            NodeNotFoundError: If node is not a child of this node.
        """
        for i, child in enumerate(self.children):
            if child is node:
                del self.children[i]
                node.parent = None
                return
        raise NodeNotFoundError("Element not found")

    # ==================== Traversal ====================

    def iter_children(self) -> Iterator[ElementNode]:
        """Yield direct children in order."""
        yield from self.children

    def children_and_self(self) -> Iterator[ElementNode]:
        """Yield this node, then its direct children."""
        yield self
        yield from self.children

    def descendants(self) -> Iterator[ElementNode]:
        """Yield all descendants in pre-order, excluding this node."""
        stack = list(reversed(self.children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def descendants_and_self(self) -> Iterator[ElementNode]:
        """Yield this node, then all descendants in pre-order."""
        yield self
        yield from self.descendants()

    def ancestors(self) -> Iterator[ElementNode]:
        """Yield parent, grandparent, ... stopping below the root.

        The root itself is never yielded, so children of the root have no
        ancestors.
        """
        node = self.parent
        while node is not None and node.parent is not None:
            yield node
            node = node.parent

    def ancestors_and_self(self) -> Iterator[ElementNode]:
        """Yield this node, then its ancestors."""
        yield self
        yield from self.ancestors()

    # ==================== Conversion ====================

    def as_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (recursive).

        Returns:
            Nested dict with the element kind, tag, attributes, content,
            content position and children.
        """
        element = self.element
        if isinstance(element, HtmlEmpty):
            kind = 'empty'
        elif isinstance(element, HtmlComment):
            kind = 'comment'
        elif isinstance(element, HtmlDocument):
            kind = 'document'
        else:
            kind = 'element'

        result: dict[str, Any] = {
            'kind': kind,
            'tag': element.tag_name(False),
            'attributes': [{'name': a.name, 'value': a.value} for a in element.attributes],
            'content': element.content,
            'is_multiline': element.is_multiline,
            'content_position': element.content_position.name.lower(),
            'children': [child.as_dict() for child in self.children],
        }
        if isinstance(element, HtmlDocument):
            result['document_type'] = element.document_type.name
        return result
