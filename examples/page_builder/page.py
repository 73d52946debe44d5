# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Page - Example of a small site page built with HtmlBuilder.

A didactic example showing the cursor API, components, conditional
insertion and validation errors.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from htmlflow import (
    BuilderSettings,
    DocumentType,
    FormMethod,
    HtmlBuilder,
    HtmlFlowError,
)


@dataclass
class Link:
    title: str
    href: str


class Page:
    """A page with a head, a navigation component and a body.

    This is the "cover" class that wraps an HtmlBuilder and exposes a
    page-shaped API.

    Example:
        >>> page = Page('Home', description='Welcome page')
        >>> page.navigation([Link('Docs', '/docs'), Link('Blog', '/blog')])
        >>> page.paragraph('Hello!')
        >>> print(page.render())
    """

    def __init__(self, title: str, description: str = '', settings: BuilderSettings | None = None):
        """Create a page with doctype, head and an open body.

        Args:
            title: Page title.
            description: Meta description.
            settings: Shared settings, if any.
        """
        self._builder = HtmlBuilder(DocumentType.HTML5, settings)
        self._builder.document('en').header(title, description).body()

    @property
    def builder(self) -> HtmlBuilder:
        """Access the underlying HtmlBuilder."""
        return self._builder

    def navigation(self, links: list[Link]) -> Page:
        """Add a navigation list wrapped in component markers."""
        b = self._builder
        b.begin_component('Navigation').ul().child()
        for link in links:
            b.li().child().a(link.href, link.title).parent()
        b.end_component()
        return self

    def greeting(self, now: datetime | None = None) -> Page:
        """Add a time-dependent greeting."""
        hour = (now or datetime.now()).hour
        b = self._builder
        b.only_when(hour < 18).p('Good afternoon!')
        b.only_when(hour >= 18).p('Good evening!')
        return self

    def paragraph(self, text: str, class_name: str = '') -> Page:
        self._builder.p(text, class_name)
        return self

    def contact_form(self) -> Page:
        b = self._builder
        b.form('contact', '/contact', FormMethod.POST).child()
        b.input(type='email', name='email', required=True)
        b.textarea(name='message')
        b.button('Send', type='submit')
        b.parent()
        return self

    def render(self) -> str:
        return self._builder.to_string()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger('page')

    page = Page('Home', description='Welcome page')
    page.navigation([Link('Docs', '/docs'), Link('Blog', '/blog')])
    page.greeting().paragraph('Always shown', 'lead').contact_form()
    print(page.render())

    # Invalid: <li> directly inside <p>
    try:
        page.builder.p('oops').child().li('nope')
    except HtmlFlowError as e:
        log.info("Rejected: %s", e)


if __name__ == '__main__':
    main()
