# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Shortcut methods for common HTML elements.

TagShortcuts is mixed into HtmlBuilder. It adds named helpers for frequent
elements (div, a, p, form, table...) and, through __getattr__, one method
per known tag:

    >>> builder.ul().child().li('one').li('two', class_='last').parent()

Keyword arguments become attributes. A trailing underscore is dropped
(``class_`` -> ``class``) and inner underscores become dashes
(``data_id`` -> ``data-id``). A value of True writes a bare attribute, None
or False leaves it out.

Every helper goes through the builder's regular insertion, so the
attach flag, only_when() gating and validation apply as usual.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Sequence

from .elements import Attribute, ContentPosition
from .tags import is_known_tag

if TYPE_CHECKING:
    from .builder import AttributesLike, HtmlBuilder


class FormMethod(Enum):
    """HTTP method of a form."""

    GET = 'get'
    POST = 'post'


class FormEncodingType(Enum):
    """Encoding of submitted form data."""

    URL_ENCODED = 'application/x-www-form-urlencoded'
    MULTIPART = 'multipart/form-data'
    TEXT_PLAIN = 'text/plain'


def attribute_name(key: str) -> str:
    """Map a Python keyword name to an attribute name."""
    return key.rstrip('_').replace('_', '-')


def _keyword_attributes(attr: dict[str, Any]) -> list[Attribute]:
    result = []
    for key, value in attr.items():
        if value is None or value is False:
            continue
        if value is True:
            result.append(Attribute(attribute_name(key)))
        else:
            result.append(Attribute(attribute_name(key), str(value)))
    return result


def _with(attributes: AttributesLike, *leading: Attribute) -> list:
    """Leading non-empty attributes, then the caller's extras."""
    result: list = [a for a in leading if a.value]
    if attributes is None:
        return result
    if isinstance(attributes, Mapping):
        result.extend(attributes.items())
    else:
        result.extend(attributes)
    return result


def table_columns(row: Any) -> list[str]:
    """Column names reflected from a row.

    Dataclass fields, mapping keys, namedtuple fields and finally the
    instance __dict__ are tried in that order.
    """
    if dataclasses.is_dataclass(row):
        return [f.name for f in dataclasses.fields(row)]
    if isinstance(row, Mapping):
        return list(row.keys())
    if hasattr(row, '_fields'):
        return list(row._fields)
    return [k for k in vars(row) if not k.startswith('_')]


def _cell(row: Any, column: str) -> str:
    value = row[column] if isinstance(row, Mapping) else getattr(row, column)
    return '' if value is None else str(value)


class TagShortcuts:
    """Named helpers and dynamic tag methods for HtmlBuilder."""

    __slots__ = ()

    def __getattr__(self, name: str) -> Callable[..., HtmlBuilder]:
        """Dynamic method for any known tag.

        Raises:
            AttributeError: If name is private or not a known tag.
        """
        if name.startswith('_'):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        tag = name.rstrip('_')
        if is_known_tag(tag):
            return self._make_tag_method(tag)
        raise AttributeError(f"'{name}' is not a valid HTML tag")

    def _make_tag_method(self, tag: str) -> Callable[..., HtmlBuilder]:
        """Create an insertion method for a specific tag."""

        def tag_method(
            content: str = '',
            content_position: ContentPosition = ContentPosition.BEFORE_CHILDREN,
            **attr: Any,
        ) -> HtmlBuilder:
            return self.add_element(tag, content, _keyword_attributes(attr), content_position)

        tag_method.__name__ = tag
        return tag_method

    # ==================== Body ====================

    def body(
        self,
        class_name: str = '',
        content: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        """Add <body>; the next insertion goes inside it."""
        self.add_element('body', content, _with(attributes, Attribute('class', class_name)))
        return self.child()

    def div(
        self,
        class_name: str = '',
        id: str = '',
        content: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        leading = (Attribute('class', class_name), Attribute('id', id))
        return self.add_element('div', content, _with(attributes, *leading))

    def a(
        self,
        href: str = '',
        content: str = '',
        class_name: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        leading = (Attribute('class', class_name), Attribute('href', href))
        return self.add_element('a', content, _with(attributes, *leading))

    def p(
        self,
        content: str = '',
        class_name: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        return self.add_element('p', content, _with(attributes, Attribute('class', class_name)))

    def br(self, attributes: AttributesLike = None) -> HtmlBuilder:
        return self.add_element('br', attributes=attributes)

    def h(
        self,
        level: int,
        content: str = '',
        class_name: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        """Add a heading <h1> ... <h6>.

        Raises:
            ValueError: If level is outside 1..6.
        """
        if not 1 <= level <= 6:
            raise ValueError(f"Heading level must be between 1 and 6, got {level}")
        return self.add_element(
            f'h{level}', content, _with(attributes, Attribute('class', class_name))
        )

    # ==================== Head ====================

    def header(
        self,
        title: str = '',
        description: str = '',
        keywords: str = '',
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        """Insert <head> as the first child, with title and meta tags.

        The head goes at index 0 of the level the next insertion would use,
        so after document() it becomes the first child of <html>. The cursor
        returns to where it was.
        """
        saved = self._cursor
        self.insert_element(0, 'head', attributes=attributes)
        if self._cursor is saved:
            # insertion skipped by only_when()
            return self
        head = self._cursor
        if title and title.strip():
            self._insert(-1, 'title', None, title, ContentPosition.BEFORE_CHILDREN, as_child=True)
        for name, content in (('description', description), ('keywords', keywords)):
            if self._cursor is head:
                self.child()
            self.meta(name, content)
        self._consume_attach()
        self._cursor = saved if saved is not None else self._tree
        return self

    def meta(self, name: str, content: str, attributes: AttributesLike = None) -> HtmlBuilder:
        """Add <meta name=... content=...>; blank content adds nothing.

        The cursor does not move.
        """
        if not content or not content.strip():
            return self
        saved = self._cursor
        leading = (Attribute('name', name), Attribute('content', content))
        self.add_element('meta', attributes=_with(attributes, *leading))
        self._cursor = saved if saved is not None else self._tree
        return self

    def link(self, rel: str, href: str, attributes: AttributesLike = None) -> HtmlBuilder:
        """Add <link rel=... href=...>; blank rel adds nothing.

        The cursor does not move.
        """
        if not rel or not rel.strip():
            return self
        saved = self._cursor
        leading = (Attribute('rel', rel), Attribute('href', href))
        self.add_element('link', attributes=_with(attributes, *leading))
        self._cursor = saved if saved is not None else self._tree
        return self

    # ==================== Forms and tables ====================

    def form(
        self,
        name: str = '',
        action: str = '',
        method: FormMethod = FormMethod.POST,
        encoding: FormEncodingType = FormEncodingType.URL_ENCODED,
        auto_complete: bool = True,
        novalidate: bool = False,
        attributes: AttributesLike = None,
    ) -> HtmlBuilder:
        leading = [
            Attribute('name', name),
            Attribute('action', action),
            Attribute('method', method.value),
            Attribute('enctype', encoding.value),
        ]
        if not auto_complete:
            leading.append(Attribute('autocomplete', 'off'))
        extra = _with(attributes, *leading)
        if novalidate:
            extra.append(Attribute('novalidate'))
        return self.add_element('form', attributes=extra)

    def table(
        self,
        rows: Iterable[Any],
        name: str = '',
        caption: str = '',
        attributes: AttributesLike = None,
        columns: Sequence[str] | None = None,
    ) -> HtmlBuilder:
        """Add a <table> built from rows.

        Column names come from columns, or are reflected from the first row
        (see table_columns). The header row uses <th>, each row one <tr> of
        <td> cells. The cursor ends on the table.

        Args:
            rows: Dataclass instances, mappings, namedtuples or plain objects.
            name: Value of the name attribute.
            caption: Text of the <caption> (omitted when blank).
            attributes: Extra attributes of the <table>.
            columns: Explicit column names.
        """
        rows = list(rows)
        if columns is None:
            columns = table_columns(rows[0]) if rows else []

        saved = self._cursor
        self.add_element('table', attributes=_with(attributes, Attribute('name', name)))
        if self._cursor is saved:
            return self
        table = self._cursor

        self.child()
        if caption and caption.strip():
            self.add_element('caption', caption)
        if columns:
            self.add_element('tr').child()
            for column in columns:
                self.add_element('th', column)
            self.parent()
            for row in rows:
                self.add_element('tr').child()
                for column in columns:
                    self.add_element('td', _cell(row, column))
                self.parent()
        self._consume_attach()
        self._cursor = table
        return self
