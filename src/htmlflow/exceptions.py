# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlFlow exceptions."""

from __future__ import annotations


class HtmlFlowError(Exception):
    """Base exception for HtmlFlow errors."""

    pass


class InvalidTagNameError(HtmlFlowError, ValueError):
    """Raised when a tag name contains characters outside [A-Za-z0-9]."""

    pass


class DocTypeError(HtmlFlowError):
    """Base for tags rejected by the active document type."""

    pass


class UnsupportedTagError(DocTypeError):
    """Raised when a tag is unknown to every document type."""

    pass


class TagNotAllowedForDoctypeError(DocTypeError):
    """Raised when a known tag is not legal for the active document type."""

    pass


class NestingError(HtmlFlowError):
    """Base for tags placed where the nesting rules forbid them."""

    pass


class IllegalNestingError(NestingError):
    """Raised when a tag is attached under a parent it cannot live in."""

    pass


class DuplicateSingletonError(NestingError):
    """Raised when a once-only tag already exists under its parent."""

    pass


class DocumentNotFirstError(HtmlFlowError):
    """Raised when the <html> document element is not the first insertion."""

    pass


class InvalidOperationError(HtmlFlowError):
    """Raised when an operation does not apply to the current node."""

    pass


class CommentCannotHaveChildrenError(InvalidOperationError):
    """Raised when children are requested under a comment."""

    pass


class NotInitializedError(HtmlFlowError):
    """Raised when the tree is accessed before any element was added."""

    pass


class NodeNotFoundError(HtmlFlowError, LookupError):
    """Raised when a referenced node is not part of the tree."""

    pass


class NoOpenComponentError(HtmlFlowError):
    """Raised by end_component() without a matching begin_component()."""

    pass
