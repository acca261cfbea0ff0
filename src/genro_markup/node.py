# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ElementNode - a mutable markup element that renders to a string.

An ElementNode owns a tag, an ordered attribute dict, a list of child
nodes and a raw content string. Every mutator returns the node itself,
so trees are built by chaining calls; ``spawn_child`` is the exception
and returns the new child, which allows descent-building chains.

Example:
    Building a small fragment::

        from genro_markup import ElementNode

        ul = ElementNode('ul', {'id': 'menu'}).add_class('nav')
        ul.spawn_child('li').set_content('Home')
        ul.spawn_child('li').set_content('About')
        ul.render()
        # '<ul id="menu" class="nav"><li>Home</li><li>About</li></ul>'

Attribute values are written verbatim between double quotes: no escaping
of any kind is applied to values or content.
"""

from __future__ import annotations

import enum
from typing import Any, Iterable, Iterator, Mapping

from .exceptions import NoParentError

VOID_ELEMENTS = frozenset([
    'area',
    'base',
    'br',
    'col',
    'command',
    'embed',
    'hr',
    'img',
    'input',
    'keygen',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
])

# Marks an omitted argument where None is a legal value
_MISSING = object()


class ContentPlacement(enum.Enum):
    """Where a node's content goes relative to its rendered children."""

    APPEND = 'append'
    PREPEND = 'prepend'


class ElementNode:
    """A single markup element in a tree of ElementNodes.

    Each node has:
    - tag: The element name (``'div'`` when not given)
    - attributes: Ordered dict of attribute name to value
    - children: Ordered list of child ElementNodes
    - content: Raw string emitted inside the element next to the children
    - content_placement: ContentPlacement.APPEND (content after children)
      or ContentPlacement.PREPEND (content before children)
    - parent: The node this one was added to, if any

    The void flag is derived from the tag at construction time and can be
    overridden with ``set_is_void``. The XHTML flag is copied onto children
    created with ``spawn_child``; children attached with ``add_child``
    keep their own flag.

    Example:
        >>> ElementNode('img', {'src': 'a.png'}).render()
        '<img src="a.png">'
        >>> ElementNode('img').set_is_xhtml(True).render()
        '<img />'
    """

    __slots__ = (
        'tag', 'attributes', 'children', 'content', 'content_placement',
        'parent', '_void', '_xhtml',
    )

    def __init__(
        self,
        tag: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize an ElementNode.

        Args:
            tag: The element name. Empty or None means ``'div'``.
            attributes: Optional mapping of attributes.
        """
        self.tag = tag or 'div'
        self.children: list[ElementNode] = []
        self.content = ''
        self.content_placement = ContentPlacement.APPEND
        self.parent: ElementNode | None = None
        self._xhtml = False

        self.set_attributes(attributes or {})
        self.set_is_void(self.is_void_element(self.tag))

    def __repr__(self) -> str:
        return (
            f"ElementNode({self.tag!r}, attributes={len(self.attributes)}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.render()

    @property
    def _(self) -> ElementNode:
        """Return the parent node, to climb back up a spawn chain.

        Example:
            >>> ul = ElementNode('ul')
            >>> ul.spawn_child('li')._.spawn_child('li')._ is ul
            True

        Raises:
            NoParentError: If the node was never added to a parent.
        """
        if self.parent is None:
            raise NoParentError(f"ElementNode '{self.tag}' has no parent")
        return self.parent

    # ------------------------------------------------------------------
    # Tag and flags
    # ------------------------------------------------------------------

    def get_tag(self) -> str:
        return self.tag

    def set_is_void(self, is_void: bool) -> ElementNode:
        """Force this node to render as a void element, or not.

        Useful for custom tags that should never get a body or closing tag.
        """
        self._void = bool(is_void)
        return self

    def is_void_element(self, tag: str | None = None) -> bool:
        """Return whether this node, or the given tag, is void.

        Without an argument the node's own void flag is returned. With a
        tag, the answer only depends on membership in VOID_ELEMENTS (exact,
        case-sensitive match) and the node's state is not consulted.
        """
        if not tag:
            return self._void
        return tag in VOID_ELEMENTS

    def is_xhtml(self) -> bool:
        return self._xhtml

    def set_is_xhtml(self, is_xhtml: bool) -> ElementNode:
        """Set whether void elements render as ``<tag />`` instead of ``<tag>``."""
        self._xhtml = bool(is_xhtml)
        return self

    # ------------------------------------------------------------------
    # Attributes
    # ------------------------------------------------------------------

    def get_attributes(self) -> dict[str, Any]:
        """Return the attribute dict itself, not a copy."""
        return self.attributes

    def get_attribute(self, name: str) -> Any:
        """Return the value of an attribute, or None when it is not set."""
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> ElementNode:
        self.attributes[name] = value
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> ElementNode:
        """Replace all attributes with the given mapping."""
        self.attributes = dict(attributes)
        return self

    def add_attributes(self, attributes: Mapping[str, Any]) -> ElementNode:
        """Merge attributes into the existing ones, later values winning."""
        for name, value in attributes.items():
            self.set_attribute(name, value)
        return self

    def remove_attribute(self, name: str) -> ElementNode:
        self.attributes.pop(name, None)
        return self

    def add_class(self, class_name: str) -> ElementNode:
        """Append a class name to the space separated ``class`` attribute."""
        classes = self.get_attribute('class') or []
        if isinstance(classes, str):
            classes = classes.split(' ')
        else:
            classes = list(classes)
        classes.append(class_name)
        return self.set_attribute('class', ' '.join(classes))

    def add_classes(self, class_names: Iterable[str]) -> ElementNode:
        for class_name in class_names:
            self.add_class(class_name)
        return self

    def remove_class(self, class_name: str) -> ElementNode:
        """Remove the first occurrence of a class name.

        Nothing happens when ``class`` is not set. Otherwise the attribute
        is always written back, even when it ends up empty.
        """
        classes = self.get_attribute('class')
        if classes is None:
            return self

        classes = classes.split(' ')
        if class_name in classes:
            classes.remove(class_name)
        return self.set_attribute('class', ' '.join(classes))

    def set_data(self, key: str, value: Any) -> ElementNode:
        return self.set_attribute(f'data-{key}', value)

    def get_data(self, key: str) -> Any:
        return self.get_attribute(f'data-{key}')

    def remove_data(self, key: str) -> ElementNode:
        return self.remove_attribute(f'data-{key}')

    def data(self, key: str, value: Any = _MISSING) -> Any:
        """Get ``data-<key>`` when value is omitted, set it otherwise.

        Returns:
            The attribute value on get, the node itself on set.
        """
        if value is _MISSING:
            return self.get_data(key)
        return self.set_data(key, value)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def get_content(self) -> str:
        return self.content

    def set_content(self, content: str) -> ElementNode:
        self.content = content
        return self

    def append_content(self, content: str) -> ElementNode:
        self.content += content
        return self

    def prepend_content(self, content: str) -> ElementNode:
        self.content = content + self.content
        return self

    def clear_content(self) -> ElementNode:
        self.content = ''
        return self

    def get_content_placement(self) -> ContentPlacement:
        return self.content_placement

    def set_append_content(self) -> ElementNode:
        """Render content after the children (the default)."""
        self.content_placement = ContentPlacement.APPEND
        return self

    def set_prepend_content(self) -> ElementNode:
        """Render content before the children."""
        self.content_placement = ContentPlacement.PREPEND
        return self

    # ------------------------------------------------------------------
    # Children
    # ------------------------------------------------------------------

    def get_children(self) -> list[ElementNode]:
        return self.children

    def add_child(self, child: ElementNode) -> ElementNode:
        """Append an existing node to the children.

        The tree shape is up to the caller: adding a node under two parents
        or under one of its own descendants is not detected.
        """
        self.children.append(child)
        child.parent = self
        return self

    def spawn_child(
        self,
        tag: str | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> ElementNode:
        """Create a child node, append it and return it.

        The child takes a copy of this node's current XHTML flag. Changing
        the flag on this node later does not affect the child.

        Args:
            tag: The child's tag (``'div'`` when not given).
            attributes: Optional mapping of attributes for the child.

        Returns:
            The new child, not this node.

        Example:
            >>> p = ElementNode('p').set_is_xhtml(True)
            >>> p.spawn_child('br').render()
            '<br />'
        """
        child = ElementNode(tag, attributes)
        child.set_is_xhtml(self.is_xhtml())
        self.add_child(child)
        return child

    def walk(self, _depth: int = 0) -> Iterator[tuple[int, ElementNode]]:
        """Iterate depth-first over this node and its descendants.

        Yields:
            Tuples of (depth, node), starting with (0, self).
        """
        yield _depth, self
        for child in self.children:
            yield from child.walk(_depth + 1)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_attributes(self) -> str:
        """Render attributes as `` name="value"`` pairs in insertion order.

        Returns an empty string when there are no attributes.
        """
        return ''.join(
            f' {name}="{value}"' for name, value in self.attributes.items()
        )

    def render_children(self) -> str:
        return ''.join(child.render() for child in self.children)

    def render(self) -> str:
        """Render this node and all its descendants.

        Void nodes render only their opening tag (with `` /`` in XHTML mode)
        and ignore any children or content they hold. Rendering never
        changes the tree.

        Returns:
            The markup string.
        """
        parts = ['<', self.get_tag(), self.render_attributes()]

        if self.is_void_element():
            if self.is_xhtml():
                parts.append(' /')
            parts.append('>')
            return ''.join(parts)

        parts.append('>')

        body = self.render_children() if self.children else ''
        # None content renders as nothing
        content = '' if self.content is None else str(self.content)
        if self.content_placement is ContentPlacement.PREPEND:
            parts.extend([content, body])
        else:
            parts.extend([body, content])

        parts.extend(['</', self.get_tag(), '>'])
        return ''.join(parts)
