# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlFlow - Fluent builder for validated, indented HTML documents.

A lightweight, zero-dependency library that builds an HTML element tree
through a cursor-based fluent API, checks every insertion against doctype
and nesting tables, and writes the tree as indented text.
"""

__version__ = "0.1.0"

from .builder import HtmlBuilder
from .elements import (
    Attribute,
    ContentPosition,
    HtmlComment,
    HtmlDocument,
    HtmlElement,
    HtmlEmpty,
)
from .exceptions import (
    CommentCannotHaveChildrenError,
    DocTypeError,
    DocumentNotFirstError,
    DuplicateSingletonError,
    HtmlFlowError,
    IllegalNestingError,
    InvalidOperationError,
    InvalidTagNameError,
    NestingError,
    NodeNotFoundError,
    NoOpenComponentError,
    NotInitializedError,
    TagNotAllowedForDoctypeError,
    UnsupportedTagError,
)
from .node import ElementNode
from .settings import BuilderSettings
from .shortcuts import FormEncodingType, FormMethod
from .tags import DocumentType

__all__ = [
    # Builder
    "HtmlBuilder",
    "BuilderSettings",
    "DocumentType",
    # Tree
    "ElementNode",
    "HtmlElement",
    "HtmlDocument",
    "HtmlComment",
    "HtmlEmpty",
    "Attribute",
    "ContentPosition",
    # Shortcut options
    "FormMethod",
    "FormEncodingType",
    # Exceptions
    "HtmlFlowError",
    "InvalidTagNameError",
    "DocTypeError",
    "UnsupportedTagError",
    "TagNotAllowedForDoctypeError",
    "NestingError",
    "IllegalNestingError",
    "DuplicateSingletonError",
    "DocumentNotFirstError",
    "InvalidOperationError",
    "CommentCannotHaveChildrenError",
    "NotInitializedError",
    "NodeNotFoundError",
    "NoOpenComponentError",
]
