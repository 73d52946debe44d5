# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Output and validation settings for HtmlBuilder.

Settings are read when elements are validated and when the tree is written,
never baked into the nodes: the same tree can be rendered several times with
different settings.

A settings object handed to more than one builder is shared by reference.
This is how a house style is applied to many builders at once, and it also
means that changing it changes the output of all of them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class BuilderSettings:
    """Settings consulted by HtmlBuilder.

    Attributes:
        tab_size: Spaces per indentation level.
        enforce_proper_case: Lowercase tag and attribute names on output.
        enforce_doctype: Reject tags not legal for the document type.
        enforce_nesting: Reject tags placed under a wrong parent.
        indent_root_and_body_tags: Indent the children of <html>.
        write_comments: Emit comments (including component markers).
    """

    tab_size: int = 4
    enforce_proper_case: bool = True
    enforce_doctype: bool = True
    enforce_nesting: bool = True
    indent_root_and_body_tags: bool = True
    write_comments: bool = True

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.tab_size < 0:
            raise ValueError("tab_size must be >= 0")

    def copy(self) -> BuilderSettings:
        """Return an independent copy of these settings."""
        return replace(self)
