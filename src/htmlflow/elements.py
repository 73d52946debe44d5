# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML element classes.

Four element kinds live in an HtmlFlow tree:

- HtmlElement: an ordinary tag with attributes and text content
- HtmlDocument: the <html> element, preceded by a doctype declaration
- HtmlComment: a single-line or multi-line comment
- HtmlEmpty: a placeholder that writes nothing, used to hold several roots

All of them share the same rendering surface (open, close, self_closing,
tag_name, to_string) so the writer can treat them alike. Case folding is
decided by the caller at render time.

Example:
    >>> el = HtmlElement('DiV', 'Hello', [Attribute('CLASS', 'box')])
    >>> el.to_string()
    '<div class="box">Hello</div>'
    >>> el.to_string(enforce_proper_case=False)
    '<DiV CLASS="box">Hello</DiV>'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from .exceptions import InvalidTagNameError
from .tags import DOCTYPE_DECLARATIONS, DocumentType, is_self_closing

_TAG_NAME = re.compile(r'[A-Za-z0-9]+')


class ContentPosition(Enum):
    """Where an element's text goes relative to its children."""

    BEFORE_CHILDREN = 0
    AFTER_CHILDREN = 1


@dataclass(frozen=True)
class Attribute:
    """An attribute inside an opening tag.

    Names and values are written as given: no escaping is performed, quoting
    the value is the caller's business.

    Example:
        >>> Attribute('href', 'index.html').render()
        'href="index.html"'
        >>> Attribute('NOVALIDATE').render()
        'novalidate'
    """

    name: str
    value: str | None = None

    def render(self, enforce_proper_case: bool = True) -> str:
        """Render as ``name`` or ``name="value"``.

        Args:
            enforce_proper_case: Lowercase the name. The value is never touched.
        """
        name = self.name.lower() if enforce_proper_case else self.name
        if self.value is None:
            return name
        return f'{name}="{self.value}"'

    def __str__(self) -> str:
        return self.render(enforce_proper_case=False)


class HtmlElement:
    """An ordinary HTML element.

    Attributes:
        attributes: Ordered list of Attribute instances.
        content_position: Where content is written relative to children.
    """

    __slots__ = ('_tag', '_content', 'attributes', 'content_position')

    def __init__(
        self,
        tag: str,
        content: str | None = '',
        attributes: Iterable[Attribute] | None = None,
        content_position: ContentPosition = ContentPosition.BEFORE_CHILDREN,
        enforce_proper_case: bool = False,
    ) -> None:
        """Initialize an HtmlElement.

        Args:
            tag: Tag name, letters and digits only.
            content: Text written inside the element.
            attributes: Attributes, kept in the given order.
            content_position: Content before or after the children.
            enforce_proper_case: Store the tag lowercased.

        Raises:
            InvalidTagNameError: If the tag contains other characters.
        """
        self._tag = ''
        self.set_tag(tag, enforce_proper_case)
        self.content = content
        self.attributes: list[Attribute] = list(attributes) if attributes else []
        self.content_position = content_position

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._tag!r}, content={self._content!r})"

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str | None) -> None:
        self._content = value or ''

    @property
    def is_multiline(self) -> bool:
        """True if the content spans more than one line."""
        return '\n' in self._content or '\r' in self._content

    def set_tag(self, value: str, enforce_proper_case: bool = False) -> None:
        """Set the tag name, checking it before any case folding."""
        if value is None or not _TAG_NAME.fullmatch(value):
            raise InvalidTagNameError(f"Tag <{value}> contains invalid characters")
        self._tag = value.lower() if enforce_proper_case else value

    def tag_name(self, enforce_proper_case: bool = True) -> str:
        return self._tag.lower() if enforce_proper_case else self._tag

    def _open_body(self, enforce_proper_case: bool) -> str:
        parts = [self.tag_name(enforce_proper_case)]
        parts.extend(a.render(enforce_proper_case) for a in self.attributes)
        return '<' + ' '.join(parts)

    def open(self, enforce_proper_case: bool = True) -> str:
        return self._open_body(enforce_proper_case) + '>'

    def close(self, enforce_proper_case: bool = True) -> str:
        return f"</{self.tag_name(enforce_proper_case)}>"

    def self_closing(self, enforce_proper_case: bool = True) -> str:
        """Return the ``<tag/>`` form (``<tag a="v" />`` with attributes)."""
        if not self.attributes:
            return self._open_body(enforce_proper_case) + '/>'
        return self._open_body(enforce_proper_case) + ' />'

    def to_string(self, enforce_proper_case: bool = True) -> str:
        """Render this element alone, ignoring any children it may have."""
        if not self._content.strip() and is_self_closing(self._tag):
            return self.self_closing(enforce_proper_case)
        return (
            self.open(enforce_proper_case)
            + self._content
            + self.close(enforce_proper_case)
        )

    def __str__(self) -> str:
        return self.to_string()


class HtmlDocument(HtmlElement):
    """The <html> element, prefixed by the doctype declaration.

    Example:
        >>> HtmlDocument(DocumentType.HTML5).open()
        '<!DOCTYPE html>\\n<html>'
    """

    __slots__ = ('document_type',)

    def __init__(
        self,
        document_type: DocumentType = DocumentType.HTML5,
        language: str = '',
    ) -> None:
        attributes = [Attribute('lang', language)] if language and language.strip() else None
        super().__init__('html', attributes=attributes)
        self.document_type = document_type

    def open(self, enforce_proper_case: bool = True) -> str:
        declaration = DOCTYPE_DECLARATIONS.get(self.document_type)
        if declaration is None:
            return super().open(enforce_proper_case)
        return declaration + '\n' + super().open(enforce_proper_case)


class HtmlComment:
    """An HTML comment.

    Single-line comments are written ``<!-- text -->``; comments whose text
    spans several lines put the markers on their own lines. Comments have no
    tag and no attributes, and never hold children.
    """

    __slots__ = ('_content', 'content_position')

    attributes: tuple[Attribute, ...] = ()

    def __init__(self, content: str | None = '') -> None:
        self.content = content
        self.content_position = ContentPosition.BEFORE_CHILDREN

    def __repr__(self) -> str:
        return f"HtmlComment({self._content!r})"

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str | None) -> None:
        self._content = value or ''

    @property
    def is_multiline(self) -> bool:
        return '\n' in self._content or '\r' in self._content

    def tag_name(self, enforce_proper_case: bool = True) -> str:
        return ''

    def open(self, enforce_proper_case: bool = True) -> str:
        return '<!--' if self.is_multiline else '<!-- '

    def close(self, enforce_proper_case: bool = True) -> str:
        return '-->' if self.is_multiline else ' -->'

    def self_closing(self, enforce_proper_case: bool = True) -> str:
        return ''

    def to_string(self, enforce_proper_case: bool = True) -> str:
        if self.is_multiline:
            return f"{self.open()}\n{self._content}\n{self.close()}"
        return self.open() + self._content + self.close()

    def __str__(self) -> str:
        return self.to_string()


class HtmlEmpty:
    """A placeholder element that writes nothing.

    Its children are written as if they were roots, which is how a builder
    produces several top-level elements.
    """

    __slots__ = ()

    attributes: tuple[Attribute, ...] = ()
    content = ''
    content_position = ContentPosition.BEFORE_CHILDREN
    is_multiline = False

    def __repr__(self) -> str:
        return "HtmlEmpty()"

    def tag_name(self, enforce_proper_case: bool = True) -> str:
        return ''

    def open(self, enforce_proper_case: bool = True) -> str:
        return ''

    def close(self, enforce_proper_case: bool = True) -> str:
        return ''

    def self_closing(self, enforce_proper_case: bool = True) -> str:
        return ''

    def to_string(self, enforce_proper_case: bool = True) -> str:
        return ''

    def __str__(self) -> str:
        return ''


AnyElement = HtmlElement | HtmlComment | HtmlEmpty
