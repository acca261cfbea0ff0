# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""MarkupBuilder - tag-method front end for ElementNode trees.

Any attribute that is not a builder method is treated as a tag name and
returns a callable that spawns a child element with that tag.

Example:
    Building a navigation list::

        from genro_markup import MarkupBuilder

        nav = MarkupBuilder()
        ul = nav.ul(class_='menu')
        ul.li('Home', data_section='home')
        ul.li('About')
        nav.render()
        # '<div><ul class="menu"><li data-section="home">Home</li>'
        # '<li>About</li></ul></div>'
"""

from __future__ import annotations

from typing import Any, Callable

from .node import ElementNode


def _normalize_name(name: str) -> str:
    """Turn a Python identifier into a markup attribute name.

    Examples:
        >>> _normalize_name('class_')
        'class'
        >>> _normalize_name('data_user_id')
        'data-user-id'
    """
    if name.endswith('_'):
        name = name[:-1]
    return name.replace('_', '-')


class MarkupBuilder:
    """Builder wrapping an ElementNode with dynamic tag methods.

    ``builder.<tag>(value=None, /, **attr)`` spawns a child of the wrapped
    node and returns a new MarkupBuilder around it. Children are created
    with ``spawn_child`` so they inherit the XHTML flag. The body text is
    positional only, so every keyword, ``name``, ``value`` and ``content``
    included, becomes an attribute.

    Keyword attribute names lose one trailing underscore and have their
    remaining underscores turned into hyphens (``class_`` becomes ``class``,
    ``http_equiv`` becomes ``http-equiv``). Tag names only lose the trailing
    underscore, so ``builder.del_()`` creates ``<del>``.

    Usage:
        >>> b = MarkupBuilder(ElementNode('p'))
        >>> b.span('hi', class_='x').render()
        '<span class="x">hi</span>'
    """

    __slots__ = ('_node',)

    def __init__(self, node: ElementNode | None = None, xhtml: bool = False) -> None:
        """Initialize a MarkupBuilder.

        Args:
            node: The node to build into. A new ``div`` when omitted.
            xhtml: If True, set the XHTML flag on the wrapped node.
        """
        self._node = node if node is not None else ElementNode()
        if xhtml:
            self._node.set_is_xhtml(True)

    def __repr__(self) -> str:
        return f"MarkupBuilder({self._node!r})"

    def __str__(self) -> str:
        return self.render()

    def __getattr__(self, name: str) -> Callable[..., MarkupBuilder]:
        """Return a method creating a child with tag ``name``.

        Raises:
            AttributeError: For names starting with an underscore.
        """
        if name.startswith('_'):
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )

        tag_name = name[:-1] if name.endswith('_') else name

        def tag_method(value: Any = None, /, **attr: Any) -> MarkupBuilder:
            return self.tag(tag_name, value, **attr)

        return tag_method

    @property
    def node(self) -> ElementNode:
        """The wrapped ElementNode."""
        return self._node

    @property
    def _(self) -> MarkupBuilder:
        """Return a builder over the parent node.

        Raises:
            NoParentError: If the wrapped node has no parent.
        """
        return MarkupBuilder(self._node._)

    def tag(
        self, tag_name: str, value: Any = None, /, **attr: Any
    ) -> MarkupBuilder:
        """Spawn a child with an explicit tag name.

        Use this for tags whose names clash with builder methods, such as
        ``render`` or ``tag`` itself.

        Args:
            tag_name: The child's tag.
            value: Optional body text for the child.
            **attr: Child attributes; names are normalized.

        Returns:
            A MarkupBuilder wrapping the new child.
        """
        attributes = {_normalize_name(key): item for key, item in attr.items()}
        child = self._node.spawn_child(tag_name, attributes)
        if value is not None:
            child.set_content(value)
        return MarkupBuilder(child)

    def render(self) -> str:
        return self._node.render()
