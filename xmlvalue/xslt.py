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
XSLT stylesheets, compiled and applied by lxml (libxslt).
"""
import copy
import logging
from types import MappingProxyType
from typing import Any

from lxml import etree

from xmlvalue.aliases import StylesheetArgType, XSLTParamType
from xmlvalue.etree import is_lxml_etree_document, is_lxml_etree_element, parse_xml
from xmlvalue.exceptions import XMLParseError, XSLTTransformError
from xmlvalue.nodes import NodeKind, DocumentNode

logger = logging.getLogger(__name__)

XSLT_INPUT_KINDS = frozenset((NodeKind.DOCUMENT, NodeKind.ELEMENT))

# Stylesheets can read local files with document(), but cannot write
# files or access the network.
XSLT_ACCESS_OPTIONS = MappingProxyType({
    'read_file': True,
    'write_file': False,
    'create_dir': False,
    'read_network': False,
    'write_network': False,
})


def _get_stylesheet_tree(source: Any) -> Any:
    from xmlvalue.document import XMLDocument

    if isinstance(source, XMLDocument):
        source = source.node()

    if isinstance(source, DocumentNode):
        if source.kind not in XSLT_INPUT_KINDS:
            raise XSLTTransformError(
                f"a node of kind '{source.kind}' is not an XSLT stylesheet", 'err:XTSE0010'
            )
        return source.item
    elif is_lxml_etree_document(source) or is_lxml_etree_element(source):
        return source
    elif isinstance(source, (str, bytes, bytearray)):
        try:
            return parse_xml(source)
        except XMLParseError as err:
            raise XSLTTransformError(
                f"invalid XSLT stylesheet: {err.message}", 'err:XTSE0010', err
            ) from err
    raise TypeError(f"{source!r} is not an XSLT stylesheet source")


def _get_xslt_param(value: XSLTParamType) -> Any:
    if isinstance(value, str):
        return etree.XSLT.strparam(value)
    elif isinstance(value, bool):
        return 'true()' if value else 'false()'
    elif isinstance(value, (int, float)):
        return repr(value)
    raise TypeError(f"invalid XSLT parameter value {value!r}")


class Stylesheet(object):
    """
    A compiled XSLT stylesheet, that can be applied to several documents.
    An instance should not be used by more threads at the same time.

    :param source: the stylesheet, as an XMLDocument, an lxml tree or element, \
    or the XML text.
    :raises XSLTTransformError: if the stylesheet is not a valid XSLT.
    """
    def __init__(self, source: StylesheetArgType) -> None:
        if isinstance(source, Stylesheet):
            self._xslt = source._xslt
            return

        try:
            self._xslt = etree.XSLT(
                _get_stylesheet_tree(source),
                access_control=etree.XSLTAccessControl(**XSLT_ACCESS_OPTIONS),
            )
        except etree.XSLTParseError as err:
            logger.debug("invalid XSLT stylesheet: %s", err)
            raise XSLTTransformError(
                f"invalid XSLT stylesheet: {err}", 'err:XTSE0010', err
            ) from err

    def __repr__(self) -> str:
        return '%s()' % self.__class__.__name__

    def apply(self, node: DocumentNode, **params: XSLTParamType) -> DocumentNode:
        """
        Applies the stylesheet to a node. The input tree is left untouched.

        :param node: the input document or element.
        :param params: stylesheet parameters. String values are passed as XPath \
        string literals, numbers as XPath numbers.
        :return: the root of the new result tree.
        :raises XSLTTransformError: if the transformation fails or produces \
        a result without a root element.
        """
        if node.kind not in XSLT_INPUT_KINDS:
            raise XSLTTransformError(
                f"cannot apply an XSLT stylesheet to a node of kind '{node.kind}'",
                'err:XTDE0000'
            )

        if node.kind is NodeKind.ELEMENT:
            # lxml relinks the tree of an element input during the run
            source = etree.ElementTree(copy.deepcopy(node.item))
        else:
            source = node.item

        xslt_params = {k: _get_xslt_param(v) for k, v in params.items()}
        try:
            result = self._xslt(source, **xslt_params)
        except etree.XSLTApplyError as err:
            logger.debug("XSLT transformation failed: %s", err)
            raise XSLTTransformError(
                f"XSLT transformation failed: {err}", 'err:XTDE0000', err
            ) from err

        if result.getroot() is None:
            raise XSLTTransformError(
                "XSLT transformation produced a result without a root element",
                'err:XTDE0000'
            )

        logger.debug("XSLT transformation of %r produced %r", node, result.getroot())
        return DocumentNode(result)


def apply_stylesheet(source: StylesheetArgType,
                     node: DocumentNode,
                     **params: XSLTParamType) -> DocumentNode:
    """Compiles a stylesheet and applies it to a node."""
    return Stylesheet(source).apply(node, **params)


__all__ = ['XSLT_ACCESS_OPTIONS', 'Stylesheet', 'apply_stylesheet']
