# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tag capability tables.

Three read-only tables consulted by HtmlBuilder:

- DOCTYPE_SUPPORT: which tags are legal under which document type
- NESTING: which parent a tag needs, and whether it may appear once or many
  times under that parent
- SELF_CLOSING: tags written as ``<tag/>`` when they have nothing inside

Nesting rules use the form ``'parent:cardinality'``:
    - ``'ul:*'`` = any number of times under <ul>
    - ``'html:1'`` = at most once under <html>

Example:
    >>> is_supported('article', DocumentType.HTML5)
    True
    >>> is_supported('article', DocumentType.HTML4_01_STRICT)
    False
    >>> nesting_rules('li')
    (NestingRule(parent='ul', single=False), ...)
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class DocumentType(Enum):
    """Document types known to the builder.

    The value of each member is its column in DOCTYPE_SUPPORT.
    UNDEFINED disables the doctype declaration and doctype validation.
    """

    XHTML_1_1 = 0
    HTML4_01_FRAMESET = 1
    HTML4_01_STRICT = 2
    HTML4_01_TRANSITIONAL = 3
    HTML5 = 4
    UNDEFINED = 255


DOCTYPE_DECLARATIONS: dict[DocumentType, str] = {
    DocumentType.XHTML_1_1: (
        '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.1//EN" '
        '"http://www.w3.org/TR/xhtml11/DTD/xhtml11.dtd">'
    ),
    DocumentType.HTML4_01_FRAMESET: (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Frameset//EN" '
        '"http://www.w3.org/TR/html4/frameset.dtd">'
    ),
    DocumentType.HTML4_01_STRICT: (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01//EN" '
        '"http://www.w3.org/TR/html4/strict.dtd">'
    ),
    DocumentType.HTML4_01_TRANSITIONAL: (
        '<!DOCTYPE HTML PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN" '
        '"http://www.w3.org/TR/html4/loose.dtd">'
    ),
    DocumentType.HTML5: '<!DOCTYPE html>',
}


# Support profiles, columns:
# XHTML 1.1, HTML 4.01 Frameset, HTML 4.01 Strict, HTML 4.01 Transitional, HTML5
_ALL = (True, True, True, True, True)
_HTML5 = (False, False, False, False, True)
_LEGACY = (True, True, True, True, False)
_LOOSE = (False, True, False, True, False)
_LOOSE_HTML5 = (False, True, False, True, True)
_NO_XHTML = (False, True, True, True, True)
_FRAMESET = (False, True, False, False, False)

DOCTYPE_SUPPORT: dict[str, tuple[bool, bool, bool, bool, bool]] = {
    'a': _ALL,
    'abbr': _ALL,
    'acronym': _LEGACY,
    'address': _ALL,
    'applet': _LOOSE,
    'area': _NO_XHTML,
    'article': _HTML5,
    'aside': _HTML5,
    'audio': _HTML5,
    'b': _ALL,
    'base': _ALL,
    'basefont': _LOOSE,
    'bdi': _HTML5,
    'bdo': _NO_XHTML,
    'big': _LEGACY,
    'blockquote': _ALL,
    'body': _ALL,
    'br': _ALL,
    'button': _ALL,
    'canvas': _HTML5,
    'caption': _ALL,
    'center': _LOOSE,
    'cite': _ALL,
    'code': _ALL,
    'col': _NO_XHTML,
    'colgroup': _NO_XHTML,
    'command': _HTML5,
    'datalist': _HTML5,
    'dd': _ALL,
    'del': _NO_XHTML,
    'details': _HTML5,
    'dfn': _ALL,
    'dir': _LOOSE,
    'div': _ALL,
    'dl': _ALL,
    'dt': _ALL,
    'em': _ALL,
    'embed': _HTML5,
    'fieldset': _ALL,
    'figcaption': _HTML5,
    'figure': _HTML5,
    'font': _LOOSE,
    'footer': _HTML5,
    'form': _ALL,
    'frame': _FRAMESET,
    'frameset': _FRAMESET,
    'h1': _ALL,
    'h2': _ALL,
    'h3': _ALL,
    'h4': _ALL,
    'h5': _ALL,
    'h6': _ALL,
    'head': _ALL,
    'header': _HTML5,
    'hgroup': _HTML5,
    'hr': _ALL,
    'html': _ALL,
    'i': _ALL,
    'iframe': _LOOSE_HTML5,
    'img': _ALL,
    'input': _ALL,
    'ins': _NO_XHTML,
    'kbd': _ALL,
    'keygen': _HTML5,
    'label': _ALL,
    'legend': _ALL,
    'li': _ALL,
    'link': _ALL,
    'map': _NO_XHTML,
    'mark': _HTML5,
    'menu': _LOOSE_HTML5,
    'meta': _ALL,
    'meter': _HTML5,
    'nav': _HTML5,
    'noframes': _LOOSE,
    'noscript': _ALL,
    'object': _ALL,
    'ol': _ALL,
    'optgroup': _ALL,
    'option': _ALL,
    'output': _HTML5,
    'p': _ALL,
    'param': _ALL,
    'pre': _ALL,
    'progress': _HTML5,
    'q': _ALL,
    'rp': _HTML5,
    'rt': _HTML5,
    'ruby': _HTML5,
    's': _LOOSE_HTML5,
    'samp': _ALL,
    'script': _ALL,
    'section': _HTML5,
    'select': _ALL,
    'small': _ALL,
    'source': _HTML5,
    'span': _ALL,
    'strike': _LOOSE,
    'strong': _ALL,
    'style': _ALL,
    'sub': _ALL,
    'summary': _HTML5,
    'sup': _ALL,
    'table': _ALL,
    'tbody': _NO_XHTML,
    'td': _ALL,
    'textarea': _ALL,
    'tfoot': _NO_XHTML,
    'th': _ALL,
    'thead': _NO_XHTML,
    'time': _HTML5,
    'title': _ALL,
    'tr': _ALL,
    'track': _HTML5,
    'tt': _LEGACY,
    'u': _LOOSE,
    'ul': _ALL,
    'var': _ALL,
    'video': _HTML5,
    'wbr': _HTML5,
}


_NESTING_SPECS: dict[str, tuple[str, ...]] = {
    'li': ('ul:*', 'ol:*', 'dir:*'),
    'body': ('html:1',),
    'head': ('html:1',),
    'title': ('head:1',),
    'link': ('head:*',),
    'meta': ('head:*',),
    'tr': ('table:*',),
    'td': ('tr:*',),
    'th': ('tr:*',),
    'caption': ('table:1',),
    'tfoot': ('table:1',),
    'tbody': ('table:1',),
    'thead': ('table:1',),
    'colgroup': ('table:*',),
    'col': ('colgroup:*',),
    'dt': ('dl:*',),
    'dd': ('dt:*',),
    'source': ('audio:*', 'video:*'),
    'track': ('audio:*', 'video:*'),
    'frame': ('frameset:*',),
    'noframes': ('frameset:1',),
    'option': ('select:*', 'datalist:*', 'optgroup:*'),
    'optgroup': ('select:*',),
    'summary': ('details:1',),
    'legend': ('fieldset:1',),
    'figcaption': ('figure:1',),
    'area': ('map:*',),
}


SELF_CLOSING: frozenset[str] = frozenset({
    'area', 'base', 'br', 'col', 'command', 'embed', 'hr', 'img',
    'input', 'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})


class NestingRule(NamedTuple):
    """A parent a tag may be placed under.

    Attributes:
        parent: Lowercase tag of the required parent.
        single: True if the tag may appear only once below that parent.
    """

    parent: str
    single: bool


def parse_nesting_rule(spec: str) -> NestingRule:
    """Parse a nesting rule specification.

    Supports:
        - 'parent:*' = any number of times
        - 'parent:1' = once
        - 'parent' = any number of times

    Raises:
        ValueError: If the cardinality is neither '*' nor '1'.
    """
    parent, _, cardinality = spec.partition(':')
    cardinality = cardinality.strip() or '*'
    if cardinality not in ('*', '1'):
        raise ValueError(f"Invalid nesting cardinality in '{spec}'")
    return NestingRule(parent.strip().lower(), cardinality == '1')


NESTING: dict[str, tuple[NestingRule, ...]] = {
    tag: tuple(parse_nesting_rule(spec) for spec in specs)
    for tag, specs in _NESTING_SPECS.items()
}


def is_known_tag(tag: str) -> bool:
    """True if the tag appears in the doctype support table."""
    return tag.lower() in DOCTYPE_SUPPORT


def is_supported(tag: str, document_type: DocumentType) -> bool:
    """True if the tag is legal for the given document type.

    UNDEFINED accepts every tag.
    """
    if document_type is DocumentType.UNDEFINED:
        return True
    support = DOCTYPE_SUPPORT.get(tag.lower())
    if support is None:
        return False
    return support[document_type.value]


def nesting_rules(tag: str) -> tuple[NestingRule, ...]:
    """Return the nesting rules for a tag (empty if it may go anywhere)."""
    return NESTING.get(tag.lower(), ())


def is_self_closing(tag: str) -> bool:
    """True if the tag may be written as <tag/>."""
    return tag.lower() in SELF_CLOSING
