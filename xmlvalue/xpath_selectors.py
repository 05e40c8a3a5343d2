#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
import logging
from typing import Optional

from lxml import etree

from xmlvalue.aliases import AnyNsmapType
from xmlvalue.exceptions import XPathQueryError
from xmlvalue.namespaces import RESERVED_PREFIXES, NamespaceContext
from xmlvalue.nodes import TREE_KINDS, DocumentNode

logger = logging.getLogger(__name__)


def select(node: DocumentNode,
           path: str,
           namespaces: Optional[AnyNsmapType] = None) -> list[DocumentNode]:
    """
    XPath selector function that apply a *path* expression on a node.

    :param node: the context node, a document or an element.
    :param path: the XPath expression, that must evaluate to a node-set.
    :param namespaces: a namespace context or a dictionary with mapping from \
    namespace prefixes into URIs. For default the common namespaces are used.
    :return: a list with the matched nodes, in document order.
    """
    return Selector(path, namespaces).select(node)


class Selector(object):
    """
    XPath selector class. The expression is compiled at instance creation
    and can be applied to several nodes.

    :param path: the XPath expression.
    :param namespaces: a namespace context or a dictionary with mapping from \
    namespace prefixes into URIs. For default the common namespaces are used.

    :ivar path: the XPath expression.
    :vartype path: str
    :ivar namespaces: the namespace context used for resolving prefixes.
    :vartype namespaces: NamespaceContext
    """
    def __init__(self, path: str, namespaces: Optional[AnyNsmapType] = None) -> None:
        if not isinstance(path, str):
            raise TypeError(f"an XPath expression must be a string, not {type(path)!r}")

        if namespaces is None:
            self.namespaces = NamespaceContext.default()
        elif isinstance(namespaces, NamespaceContext):
            self.namespaces = namespaces
        else:
            self.namespaces = NamespaceContext(namespaces)

        self.path = path
        try:
            self._xpath = etree.XPath(
                path,
                namespaces={k: v for k, v in self.namespaces.items()
                            if k not in RESERVED_PREFIXES},
                smart_strings=True,
            )
        except etree.XPathError as err:
            logger.debug("invalid XPath query %r: %s", path, err)
            raise XPathQueryError(
                f"invalid XPath query {path!r}: {err}", 'err:XPST0003', path, err
            ) from err

    def __repr__(self) -> str:
        return '%s(path=%r)' % (self.__class__.__name__, self.path)

    def select(self, node: DocumentNode) -> list[DocumentNode]:
        """
        Applies the instance's XPath expression on a node.

        :param node: the context node, a document or an element.
        :return: a list with the matched nodes, in document order. An empty \
        list if nothing matches.
        :raises XPathQueryError: if the evaluation fails, for example for an \
        unbound prefix, or if the expression doesn't evaluate to a node-set.
        """
        if node.kind not in TREE_KINDS:
            raise XPathQueryError(
                f"cannot evaluate XPath query {self.path!r} on a node of kind '{node.kind}'",
                'err:XPTY0020', self.path
            )

        try:
            results = self._xpath(node.item)
        except etree.XPathError as err:
            logger.debug("failed evaluation of XPath query %r: %s", self.path, err)
            code = 'err:XPST0081' if 'prefix' in str(err) else 'err:XPST0003'
            raise XPathQueryError(
                f"invalid XPath query {self.path!r}: {err}", code, self.path, err
            ) from err

        if not isinstance(results, list):
            raise XPathQueryError(
                f"XPath query {self.path!r} doesn't evaluate to a node-set: {results!r}",
                'err:XPDY0050', self.path
            )

        logger.debug("XPath query %r on %r matched %d node(s)", self.path, node, len(results))
        return [DocumentNode(item) for item in results]


__all__ = ['select', 'Selector']
