# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupPage - a complete document with head and body builders."""

from __future__ import annotations

import logging
from pathlib import Path

from .builder import MarkupBuilder
from .node import ElementNode

logger = logging.getLogger(__name__)

DEFAULT_DOCTYPE = '<!DOCTYPE html>'


class MarkupPage:
    """HTML page with an ``html`` root holding ``head`` and ``body``.

    The XHTML flag is set on the root before head and body are spawned,
    so every element created through ``page.head`` or ``page.body``
    inherits it.

    Usage:
        >>> page = MarkupPage()
        >>> page.head.title('My Page')
        >>> page.head.meta(charset='utf-8')
        >>> page.body.div(id='main').p('Hello World')
        >>> html = page.to_html()
    """

    def __init__(self, xhtml: bool = False, doctype: str = DEFAULT_DOCTYPE) -> None:
        """Initialize the page.

        Args:
            xhtml: Render void elements in XHTML form.
            doctype: Declaration emitted before the ``html`` element.
        """
        self.doctype = doctype
        self.html = ElementNode('html').set_is_xhtml(xhtml)
        self.head = MarkupBuilder(self.html.spawn_child('head'))
        self.body = MarkupBuilder(self.html.spawn_child('body'))

    def to_html(self, filename: str | None = None, output_dir: str | None = None) -> str:
        """Render the doctype followed by the ``html`` tree.

        Args:
            filename: Name of a UTF-8 file to write the document to.
            output_dir: Directory for ``filename``, created when missing.
                The current directory when omitted.

        Returns:
            The document text, or the written file path when a filename
            is given.
        """
        document = f"{self.doctype}\n{self.html.render()}"
        if not filename:
            return document

        target_dir = Path.cwd() if output_dir is None else Path(output_dir)
        target_dir.mkdir(parents=True, exist_ok=True)
        output_path = target_dir / filename
        output_path.write_text(document, encoding='utf-8')
        logger.debug("Wrote %d characters to %s", len(document), output_path)
        return str(output_path)
