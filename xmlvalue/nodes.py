#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Handles to the nodes of parsed XML trees.

A parsed lxml tree is built once and never changed afterwards: a node handle
is a read-only reference into it, and several handles, also belonging to
different documents, can share the same tree.
"""
from enum import Enum
from typing import Any, Optional

from lxml import etree

from xmlvalue.aliases import XPathItemType
from xmlvalue.etree import etree_deep_equal, etree_deep_hash, etree_tostring


class NodeKind(Enum):
    DOCUMENT = 'document'
    ELEMENT = 'element'
    ATTRIBUTE = 'attribute'
    TEXT = 'text'
    COMMENT = 'comment'
    PROCESSING_INSTRUCTION = 'processing-instruction'
    ENTITY_REFERENCE = 'entity-reference'
    NAMESPACE = 'namespace'

    def __str__(self) -> str:
        return self.value


# Kinds of the nodes whose value can be extracted as a string. CDATA
# sections are reported by lxml as text nodes.
STRING_KINDS = frozenset((NodeKind.TEXT, NodeKind.ATTRIBUTE))

# Kinds of the nodes that can be used as context of an XPath evaluation
# or as input of an XSLT transformation.
TREE_KINDS = frozenset((
    NodeKind.DOCUMENT, NodeKind.ELEMENT, NodeKind.COMMENT,
    NodeKind.PROCESSING_INSTRUCTION, NodeKind.ENTITY_REFERENCE
))


def get_node_kind(item: Any) -> NodeKind:
    """
    Returns the kind of a node-set item returned by lxml XPath evaluation.
    String items are recognized only if they are smart strings.
    """
    if isinstance(item, etree._ElementTree):
        return NodeKind.DOCUMENT
    elif isinstance(item, etree._Element):
        if isinstance(item, etree._Comment):
            return NodeKind.COMMENT
        elif isinstance(item, etree._ProcessingInstruction):
            return NodeKind.PROCESSING_INSTRUCTION
        elif isinstance(item, etree._Entity):
            return NodeKind.ENTITY_REFERENCE
        return NodeKind.ELEMENT
    elif isinstance(item, str):
        if getattr(item, 'is_attribute', False):
            return NodeKind.ATTRIBUTE
        elif getattr(item, 'is_text', False) or getattr(item, 'is_tail', False):
            return NodeKind.TEXT
    elif isinstance(item, tuple) and len(item) == 2:
        return NodeKind.NAMESPACE
    raise TypeError(f"{item!r} is not an XML node")


class DocumentNode:
    """
    A read-only handle to a node of a parsed lxml tree.

    :param item: the lxml tree, an lxml element or a node-set item of an \
    lxml XPath evaluation (a smart string for attributes and text nodes, \
    a couple for namespace nodes).
    """
    __slots__ = ('item', 'kind', '_hash')

    item: Any
    kind: NodeKind
    _hash: Optional[int]

    def __init__(self, item: XPathItemType) -> None:
        object.__setattr__(self, 'item', item)
        object.__setattr__(self, 'kind', get_node_kind(item))
        object.__setattr__(self, '_hash', None)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __repr__(self) -> str:
        if self.name is None:
            return '%s(kind=%r)' % (self.__class__.__name__, self.kind.value)
        return '%s(kind=%r, name=%r)' % (self.__class__.__name__, self.kind.value, self.name)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DocumentNode):
            return NotImplemented
        elif self.item is other.item:
            return True

        root = self.root_element
        other_root = other.root_element
        if root is not None and other_root is not None:
            return etree_deep_equal(root, other_root)
        elif root is not None or other_root is not None:
            return False
        return self.kind == other.kind and self.name == other.name and self.value == other.value

    def __hash__(self) -> int:
        if self._hash is None:
            root = self.root_element
            if root is not None:
                value = etree_deep_hash(root)
            else:
                value = hash((self.kind, self.name, self.value))
            object.__setattr__(self, '_hash', value)
        return self._hash  # type: ignore[return-value]

    @property
    def root_element(self) -> Optional[etree._Element]:
        """The root element of the subtree of the node, `None` for leaf nodes."""
        if self.kind is NodeKind.DOCUMENT:
            return self.item.getroot()
        elif self.kind in TREE_KINDS:
            return self.item
        return None

    @property
    def is_leaf(self) -> bool:
        return self.kind not in TREE_KINDS

    @property
    def name(self) -> Optional[str]:
        """
        The expanded name of elements and attributes, the target of processing
        instructions and the prefix of namespace nodes, `None` for other kinds.
        """
        if self.kind is NodeKind.ELEMENT:
            return self.item.tag
        elif self.kind is NodeKind.ATTRIBUTE:
            return self.item.attrname
        elif self.kind is NodeKind.PROCESSING_INSTRUCTION:
            return self.item.target
        elif self.kind is NodeKind.NAMESPACE:
            return self.item[0]
        return None

    @property
    def value(self) -> str:
        """The string value of the node, as defined by XPath data model."""
        if self.kind in STRING_KINDS:
            return str(self.item)
        elif self.kind is NodeKind.NAMESPACE:
            return self.item[1]
        elif self.kind in (NodeKind.COMMENT, NodeKind.PROCESSING_INSTRUCTION):
            return self.item.text or ''
        elif self.kind is NodeKind.ENTITY_REFERENCE:
            return self.item.text

        root = self.root_element
        if root is None:
            return ''
        return str(root.xpath('string()'))

    @property
    def tree(self) -> Optional[etree._ElementTree]:
        """The lxml tree that contains the node, `None` for namespace nodes."""
        if self.kind is NodeKind.DOCUMENT:
            return self.item
        elif self.kind in TREE_KINDS:
            return self.item.getroottree()
        elif self.kind in STRING_KINDS:
            parent = self.item.getparent()
            return None if parent is None else parent.getroottree()
        return None

    def render(self, pretty_print: bool = True, xml_declaration: Optional[bool] = None) -> str:
        """
        Returns a serialization of the node. Leaf nodes are rendered as their
        string value, trees and elements as XML text.
        """
        if self.is_leaf:
            return self.value
        return etree_tostring(self.item, pretty_print, xml_declaration)


__all__ = ['NodeKind', 'STRING_KINDS', 'TREE_KINDS', 'get_node_kind', 'DocumentNode']
