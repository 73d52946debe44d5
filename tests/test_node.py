# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for ElementNode."""

import pytest

from htmlflow import (
    ElementNode,
    HtmlComment,
    HtmlDocument,
    HtmlElement,
    HtmlEmpty,
    NodeNotFoundError,
)


@pytest.fixture
def tree():
    """html > (head > title), (body > ul > li, li)."""
    root = ElementNode(HtmlDocument())
    head = root.add_child(HtmlElement('head'))
    head.add_child(HtmlElement('title', 'T'))
    body = root.add_child(HtmlElement('body'))
    ul = body.add_child(HtmlElement('ul'))
    ul.add_child(HtmlElement('li', 'one'))
    ul.add_child(HtmlElement('li', 'two'))
    return root


def tags(nodes):
    return [n.element.tag_name() for n in nodes]


class TestElementNode:
    """Tests for structure and mutation."""

    def test_root(self):
        """Test a fresh node is a root."""
        node = ElementNode(HtmlElement('div'))
        assert node.is_root
        assert node.parent is None
        assert node.root is node
        assert node.depth == 0
        assert len(node) == 0

    def test_add_child(self):
        """Test appended children keep order and parent link."""
        root = ElementNode(HtmlElement('ul'))
        first = root.add_child(HtmlElement('li', 'a'))
        second = root.add_child(HtmlElement('li', 'b'))
        assert list(root) == [first, second]
        assert first.parent is root
        assert root[1] is second

    def test_insert_child(self):
        """Test insertion at an index shifts later siblings."""
        root = ElementNode(HtmlElement('ul'))
        b = root.add_child(HtmlElement('li', 'b'))
        a = root.insert_child(0, HtmlElement('li', 'a'))
        assert root.children == [a, b]

    def test_remove_child(self):
        """Test removal by identity detaches the node."""
        root = ElementNode(HtmlElement('ul'))
        child = root.add_child(HtmlElement('li'))
        root.remove_child(child)
        assert len(root) == 0
        assert child.parent is None

    def test_remove_missing_child(self):
        """Test removing a foreign node raises."""
        root = ElementNode(HtmlElement('ul'))
        stranger = ElementNode(HtmlElement('li'))
        with pytest.raises(NodeNotFoundError, match="Element not found"):
            root.remove_child(stranger)

    def test_tag(self):
        """Test tag is lowercase, empty for comments and empty nodes."""
        assert ElementNode(HtmlElement('DIV')).tag == 'div'
        assert ElementNode(HtmlComment('x')).tag == ''
        assert ElementNode(HtmlEmpty()).tag == ''

    def test_depth_and_root(self, tree):
        """Test depth counts edges to the root."""
        li = tree[1][0][0]
        assert li.depth == 3
        assert li.root is tree

    def test_str(self):
        """Test str() renders the element alone."""
        assert str(ElementNode(HtmlElement('p', 'x'))) == '<p>x</p>'


class TestTraversal:
    """Tests for traversal generators."""

    def test_children(self, tree):
        """Test direct children."""
        assert tags(tree.iter_children()) == ['head', 'body']
        assert tags(tree.children_and_self()) == ['html', 'head', 'body']

    def test_descendants_preorder(self, tree):
        """Test descendants are yielded depth first, in order."""
        assert tags(tree.descendants()) == ['head', 'title', 'body', 'ul', 'li', 'li']

    def test_descendants_and_self(self, tree):
        """Test the node itself comes first."""
        assert tags(tree.descendants_and_self())[0] == 'html'
        assert len(list(tree.descendants_and_self())) == 7

    def test_descendants_restartable(self, tree):
        """Test calling again restarts the traversal."""
        assert list(tree.descendants()) == list(tree.descendants())

    def test_ancestors_exclude_root(self, tree):
        """Test ancestors stop below the root."""
        li = tree[1][0][0]
        assert tags(li.ancestors()) == ['ul', 'body']
        assert tags(li.ancestors_and_self()) == ['li', 'ul', 'body']

    def test_root_child_has_no_ancestors(self, tree):
        """Test a child of the root has no ancestors."""
        assert list(tree[0].ancestors()) == []
        assert list(tree.ancestors()) == []

    def test_deep_descendants(self):
        """Test iterative traversal on a deep chain."""
        root = ElementNode(HtmlElement('div'))
        node = root
        for _ in range(3000):
            node = node.add_child(HtmlElement('div'))
        assert sum(1 for _ in root.descendants()) == 3000
        assert node.depth == 3000


class TestAsDict:
    """Tests for as_dict()."""

    def test_structure(self, tree):
        """Test nested dict shape."""
        data = tree.as_dict()
        assert data['kind'] == 'document'
        assert data['document_type'] == 'HTML5'
        assert data['tag'] == 'html'
        assert [c['tag'] for c in data['children']] == ['head', 'body']
        title = data['children'][0]['children'][0]
        assert title == {
            'kind': 'element',
            'tag': 'title',
            'attributes': [],
            'content': 'T',
            'is_multiline': False,
            'content_position': 'before_children',
            'children': [],
        }

    def test_comment_and_empty(self):
        """Test kinds of tagless nodes."""
        root = ElementNode(HtmlEmpty())
        root.add_child(HtmlComment('note'))
        data = root.as_dict()
        assert data['kind'] == 'empty'
        assert data['children'][0]['kind'] == 'comment'
        assert data['children'][0]['content'] == 'note'
