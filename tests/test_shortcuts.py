# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for shortcut and dynamic tag methods."""

from collections import namedtuple
from dataclasses import dataclass

import pytest

from htmlflow import (
    DocumentType,
    FormEncodingType,
    FormMethod,
    HtmlBuilder,
    TagNotAllowedForDoctypeError,
)
from htmlflow.shortcuts import attribute_name, table_columns


@pytest.fixture
def builder():
    """Builder rooted with an empty node, so output has no wrapper."""
    b = HtmlBuilder()
    b.empty()
    return b


@dataclass
class Person:
    name: str
    age: int


class Plain:
    def __init__(self, name, age):
        self.name = name
        self.age = age
        self._secret = 'x'


class TestNamedShortcuts:
    """Tests for div, a, p, br, h and body."""

    def test_div(self, builder):
        """Test class, id and content."""
        builder.div('box', 'main', 'hi')
        assert builder.to_string() == '<div class="box" id="main">hi</div>\n'

    def test_div_blank(self, builder):
        """Test blank class and id are omitted."""
        builder.div()
        assert builder.to_string() == '<div></div>\n'

    def test_div_extra_attributes(self, builder):
        """Test extra attributes follow the named ones."""
        builder.div('box', attributes={'role': 'main'})
        assert builder.to_string() == '<div class="box" role="main"></div>\n'

    def test_a(self, builder):
        """Test anchor attributes."""
        builder.a('/home', 'Home', 'nav')
        assert builder.to_string() == '<a class="nav" href="/home">Home</a>\n'

    def test_p(self, builder):
        """Test paragraph."""
        builder.p('text', 'lead')
        assert builder.to_string() == '<p class="lead">text</p>\n'

    def test_br(self, builder):
        """Test line break."""
        builder.p('x').br()
        assert builder.to_string() == '<p>x</p>\n<br/>\n'

    def test_h(self, builder):
        """Test headings."""
        builder.h(2, 'Title')
        assert builder.to_string() == '<h2>Title</h2>\n'

    @pytest.mark.parametrize('level', [0, 7])
    def test_h_out_of_range(self, builder, level):
        """Test heading level bounds."""
        with pytest.raises(ValueError, match="between 1 and 6"):
            builder.h(level)

    def test_body_enters_child(self):
        """Test body() puts the next insertion inside it."""
        builder = HtmlBuilder()
        builder.document().body().p('x')
        assert builder.dom[0].tag == 'body'
        assert builder.dom[0][0].tag == 'p'


class TestHead:
    """Tests for header, meta and link."""

    def test_header(self):
        """Test head with title and meta tags."""
        builder = HtmlBuilder()
        builder.document().header('My Page', 'A page', 'x, y').body().p('Hi')
        assert builder.to_string() == (
            '<!DOCTYPE html>\n'
            '<html>\n'
            '    <head>\n'
            '        <title>My Page</title>\n'
            '        <meta name="description" content="A page" />\n'
            '        <meta name="keywords" content="x, y" />\n'
            '    </head>\n'
            '    <body>\n'
            '        <p>Hi</p>\n'
            '    </body>\n'
            '</html>\n'
        )

    def test_header_without_title(self):
        """Test a blank title is omitted and metas still go inside head."""
        builder = HtmlBuilder()
        builder.document().header(description='A page', keywords='x')
        assert builder.to_string() == (
            '<!DOCTYPE html>\n'
            '<html>\n'
            '    <head>\n'
            '        <meta name="description" content="A page" />\n'
            '        <meta name="keywords" content="x" />\n'
            '    </head>\n'
            '</html>\n'
        )
        assert builder.cursor is builder.dom

    def test_header_blank(self):
        """Test an all-blank header adds an empty head only."""
        builder = HtmlBuilder()
        builder.document().header().body()
        assert [n.tag for n in builder.dom] == ['head', 'body']
        assert len(builder.dom[0]) == 0

    def test_header_after_body(self):
        """Test head is inserted first and the cursor stays."""
        builder = HtmlBuilder()
        builder.document().add_element('body')
        body = builder.cursor
        builder.header('T')
        assert [n.tag for n in builder.dom] == ['head', 'body']
        assert builder.cursor is body

    def test_header_skipped(self):
        """Test a gated header adds nothing."""
        builder = HtmlBuilder()
        builder.document().only_when(False).header('T')
        assert len(builder.dom) == 0

    def test_link_and_meta(self):
        """Test link and meta keep the cursor."""
        builder = HtmlBuilder()
        builder.document().add_element('head').child().add_element('title', 'T')
        title = builder.cursor
        builder.link('stylesheet', 'site.css').meta('author', 'me')
        assert builder.cursor is title
        assert builder.to_string() == (
            '<!DOCTYPE html>\n'
            '<html>\n'
            '    <head>\n'
            '        <title>T</title>\n'
            '        <link rel="stylesheet" href="site.css" />\n'
            '        <meta name="author" content="me" />\n'
            '    </head>\n'
            '</html>\n'
        )

    def test_blank_meta_and_link(self):
        """Test blank meta content or link rel add nothing."""
        builder = HtmlBuilder()
        builder.document().add_element('head').child().add_element('title')
        builder.meta('author', ' ').link('', 'x.css')
        assert len(builder.dom[0]) == 1


class TestForm:
    """Tests for form()."""

    def test_defaults(self, builder):
        """Test default method and encoding; autocomplete is left out when on."""
        builder.form('login', '/login')
        assert builder.to_string() == (
            '<form name="login" action="/login" method="post" '
            'enctype="application/x-www-form-urlencoded"></form>\n'
        )

    def test_options(self, builder):
        """Test explicit options and novalidate."""
        builder.form(
            'upload', '/up',
            method=FormMethod.GET,
            encoding=FormEncodingType.MULTIPART,
            auto_complete=False,
            novalidate=True,
        )
        assert builder.to_string() == (
            '<form name="upload" action="/up" method="get" '
            'enctype="multipart/form-data" autocomplete="off" novalidate></form>\n'
        )


class TestTable:
    """Tests for table()."""

    EXPECTED = (
        '<table>\n'
        '    <caption>People</caption>\n'
        '    <tr>\n'
        '        <th>name</th>\n'
        '        <th>age</th>\n'
        '    </tr>\n'
        '    <tr>\n'
        '        <td>Ann</td>\n'
        '        <td>31</td>\n'
        '    </tr>\n'
        '    <tr>\n'
        '        <td>Bob</td>\n'
        '        <td>42</td>\n'
        '    </tr>\n'
        '</table>\n'
    )

    def test_dataclass_rows(self, builder):
        """Test columns reflected from dataclass fields."""
        builder.table([Person('Ann', 31), Person('Bob', 42)], caption='People')
        assert builder.to_string() == self.EXPECTED

    def test_mapping_rows(self, builder):
        """Test columns reflected from mapping keys."""
        rows = [{'name': 'Ann', 'age': 31}, {'name': 'Bob', 'age': 42}]
        builder.table(rows, caption='People')
        assert builder.to_string() == self.EXPECTED

    def test_plain_rows(self, builder):
        """Test columns reflected from instance attributes."""
        builder.table([Plain('Ann', 31), Plain('Bob', 42)], caption='People')
        assert builder.to_string() == self.EXPECTED

    def test_cursor_on_table(self, builder):
        """Test the cursor ends on the table."""
        builder.table([Person('Ann', 31)], name='people').p('after')
        assert [n.tag for n in builder.dom] == ['table', 'p']
        assert builder.dom[0].element.attributes[0].value == 'people'

    def test_explicit_columns(self, builder):
        """Test a column subset."""
        builder.table([Person('Ann', 31)], columns=['age'])
        assert '<th>age</th>' in builder.to_string()
        assert '<th>name</th>' not in builder.to_string()

    def test_no_rows(self, builder):
        """Test an empty table."""
        builder.table([])
        assert builder.to_string() == '<table></table>\n'

    def test_table_columns(self):
        """Test column reflection per row kind."""
        Row = namedtuple('Row', 'a b')
        assert table_columns(Person('x', 1)) == ['name', 'age']
        assert table_columns({'k': 1}) == ['k']
        assert table_columns(Row(1, 2)) == ['a', 'b']
        assert table_columns(Plain('x', 1)) == ['name', 'age']


class TestDynamicTags:
    """Tests for __getattr__ tag methods."""

    def test_tag_method(self, builder):
        """Test any known tag is a method."""
        builder.ul().child().li('one').li('two', class_='last')
        assert builder.to_string() == (
            '<ul>\n'
            '    <li>one</li>\n'
            '    <li class="last">two</li>\n'
            '</ul>\n'
        )

    def test_keyword_attributes(self, builder):
        """Test attribute name mapping and bare/omitted values."""
        builder.input(type='checkbox', checked=True, disabled=None, data_id=7)
        assert builder.to_string() == '<input type="checkbox" checked data-id="7" />\n'

    def test_reserved_word_tag(self, builder):
        """Test tags that are Python keywords."""
        getattr(builder, 'del')('x')
        builder.del_('y')
        assert builder.to_string() == '<del>x</del>\n<del>y</del>\n'

    def test_unknown_tag(self, builder):
        """Test unknown names raise AttributeError."""
        with pytest.raises(AttributeError, match="not a valid HTML tag"):
            builder.mytag

    def test_private_name(self, builder):
        """Test private names are not tags."""
        with pytest.raises(AttributeError):
            builder._nothing

    def test_validated(self):
        """Test dynamic methods go through validation."""
        builder = HtmlBuilder(DocumentType.HTML4_01_STRICT)
        with pytest.raises(TagNotAllowedForDoctypeError):
            builder.article()

    def test_attribute_name(self):
        """Test keyword to attribute name mapping."""
        assert attribute_name('class_') == 'class'
        assert attribute_name('aria_label') == 'aria-label'
        assert attribute_name('for_') == 'for'
