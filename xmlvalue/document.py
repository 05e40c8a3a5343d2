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
The immutable XML document.
"""
import logging
from typing import Any, Optional

from xmlvalue.aliases import AnyNsmapType, PathArgType, StreamArgType, \
    StylesheetArgType, TreeArgType, XMLTextType, XSLTParamType
from xmlvalue.etree import copy_tree, parse_xml
from xmlvalue.exceptions import NodeKindError
from xmlvalue.namespaces import NamespaceContext
from xmlvalue.nodes import STRING_KINDS, DocumentNode
from xmlvalue.sequences import XPathResultList
from xmlvalue.sources import read_file, read_stream, read_uri, read_url
from xmlvalue.xpath_selectors import Selector
from xmlvalue.xslt import Stylesheet

logger = logging.getLogger(__name__)


class XMLDocument(object):
    """
    An immutable XML document, or a node of a document, with a namespace
    context for resolving the prefixes of XPath queries.

    The instances are thread-safe: the parsed tree is never changed and every
    method that looks like a change returns a new document. Documents derived
    from the same text, by queries or namespace registrations, share the
    parsed tree.

    The namespace context of a new document binds these prefixes::

        xhtml: http://www.w3.org/1999/xhtml
        xs: http://www.w3.org/2001/XMLSchema
        xsi: http://www.w3.org/2001/XMLSchema-instance
        xsl: http://www.w3.org/1999/XSL/Transform
        svg: http://www.w3.org/2000/svg

    :param text: the XML data, a string or bytes.
    :raises XMLParseError: if the data is not a well-formed XML document.
    """
    __slots__ = ('_node', '_namespaces')

    _node: DocumentNode
    _namespaces: NamespaceContext

    def __init__(self, text: XMLTextType) -> None:
        tree = parse_xml(text)
        logger.debug("parsed XML document with root %r", tree.getroot())
        self._init(DocumentNode(tree), NamespaceContext.default())

    def _init(self, node: DocumentNode, namespaces: NamespaceContext) -> None:
        object.__setattr__(self, '_node', node)
        object.__setattr__(self, '_namespaces', namespaces)

    @classmethod
    def _derive(cls, node: DocumentNode, namespaces: NamespaceContext) -> 'XMLDocument':
        document = cls.__new__(cls)
        document._init(node, namespaces)
        return document

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    ###
    # Constructors
    @classmethod
    def from_text(cls, text: XMLTextType) -> 'XMLDocument':
        """Creates a document from XML text, a string or bytes."""
        return cls(text)

    @classmethod
    def from_source(cls, source: TreeArgType) -> 'XMLDocument':
        """
        Creates a document from a copy of an lxml or ElementTree tree or element.
        Changes of the source after the call don't affect the document.
        """
        return cls._derive(DocumentNode(copy_tree(source)), NamespaceContext.default())

    @classmethod
    def from_file(cls, path: PathArgType) -> 'XMLDocument':
        """Creates a document from an XML file."""
        return cls(read_file(path))

    @classmethod
    def from_url(cls, url: str, timeout: Optional[float] = None) -> 'XMLDocument':
        """Creates a document from the XML resource of a URL."""
        return cls(read_url(url, timeout))

    @classmethod
    def from_uri(cls, uri: str, timeout: Optional[float] = None) -> 'XMLDocument':
        """Creates a document from a URI. A URI without a scheme is a local path."""
        return cls(read_uri(uri, timeout))

    @classmethod
    def from_stream(cls, stream: StreamArgType) -> 'XMLDocument':
        """
        Creates a document from a binary or text stream. The stream is read
        completely and closed, also when the read or the parsing fails.
        """
        return cls(read_stream(stream))

    ###
    # Value protocol
    def __eq__(self, other: Any) -> bool:
        if isinstance(other, XMLDocument):
            return self._node == other._node
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._node)

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self._node)

    def __str__(self) -> str:
        return self.render()

    ###
    # Accessors and queries
    @property
    def namespaces(self) -> NamespaceContext:
        """The namespace context used for resolving the prefixes of XPath queries."""
        return self._namespaces

    def node(self) -> DocumentNode:
        """Returns the handle of the document node, without copying the tree."""
        return self._node

    def render(self, pretty_print: bool = True, xml_declaration: Optional[bool] = None) -> str:
        """
        Returns a serialization of the document. The result is equivalent to
        the parsed text by structure, not byte by byte.

        :param pretty_print: indents the elements, `True` for default.
        :param xml_declaration: adds the XML declaration. For default the \
        declaration is added to documents and omitted for the nodes selected \
        from a document.
        """
        return self._node.render(pretty_print, xml_declaration)

    def query(self, path: str) -> XPathResultList[str]:
        """
        Evaluates an XPath expression and returns the string values of
        the matched nodes, that must be text or attribute nodes.

        :param path: the XPath expression.
        :return: the list of the string values, in document order.
        :raises XPathQueryError: if the expression is invalid.
        :raises NodeKindError: if a matched node is not a text or an \
        attribute node. It's a subclass of `TypeError`.
        """
        items = []
        for node in Selector(path, self._namespaces).select(self._node):
            if node.kind not in STRING_KINDS:
                raise NodeKindError(
                    f"only text() nodes or attributes are retrievable with "
                    f"query {path!r}: found a node of kind '{node.kind}'",
                    'err:XPTY0004', path, node.kind.value
                )
            items.append(node.value)

        return XPathResultList(items, self._node, path)

    def nodes(self, path: str) -> XPathResultList['XMLDocument']:
        """
        Evaluates an XPath expression and returns the matched nodes, as new
        documents with the same namespace context.

        :param path: the XPath expression.
        :return: the list of the documents, in document order.
        :raises XPathQueryError: if the expression is invalid.
        """
        items = [self._derive(node, self._namespaces)
                 for node in Selector(path, self._namespaces).select(self._node)]
        return XPathResultList(items, self._node, path)

    ###
    # Derived documents
    def register_namespace(self, prefix: str, uri: str) -> 'XMLDocument':
        """
        Returns a new document with the same tree and *prefix* bound to *uri*.

        :raises ValueError: if the prefix is not valid.
        """
        return self._derive(self._node, self._namespaces.add(prefix, uri))

    def merge_namespaces(self, namespaces: AnyNsmapType) -> 'XMLDocument':
        """
        Returns a new document with the same tree and the namespace context
        merged with the provided one. On a prefix collision the binding of the
        provided context wins.

        :param namespaces: a namespace context or a mapping from prefixes to URIs.
        """
        return self._derive(self._node, self._namespaces.merge(namespaces))

    def transform(self, stylesheet: StylesheetArgType, **params: XSLTParamType) -> 'XMLDocument':
        """
        Applies an XSLT stylesheet and returns the result as a new document
        with the same namespace context.

        :param stylesheet: a :class:`Stylesheet` instance, or the stylesheet \
        as a document, as an lxml tree or element or as XML text.
        :param params: stylesheet parameters.
        :raises XSLTTransformError: if the stylesheet is invalid or the \
        transformation fails.
        """
        if not isinstance(stylesheet, Stylesheet):
            stylesheet = Stylesheet(stylesheet)
        return self._derive(stylesheet.apply(self._node, **params), self._namespaces)


__all__ = ['XMLDocument']
