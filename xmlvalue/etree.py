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
A loader module for lxml.etree with a safe shared parser and helper functions.

The parser instances returned by :func:`get_parser` are the only global state
of the package: they are created at first use, never torn down and can be
shared between threads (lxml serializes the parse runs of a parser instance).
"""
import copy
import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Optional
from xml.etree import ElementTree

from lxml import etree

from xmlvalue.aliases import LxmlTreeType, TreeArgType, XMLTextType
from xmlvalue.exceptions import XMLParseError
from xmlvalue.helpers import shorten

logger = logging.getLogger(__name__)

# Options of the shared parser: entities are not expanded, the network is
# never accessed and malformed input is rejected instead of being repaired.
PARSER_OPTIONS = MappingProxyType({
    'resolve_entities': False,
    'no_network': True,
    'strip_cdata': False,
    'remove_blank_text': False,
    'huge_tree': False,
    'recover': False,
})


@lru_cache(maxsize=None)
def get_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    """
    Returns the shared parser for an encoding. With `None` the encoding is
    detected from the input, as the XML specification requires.
    """
    logger.debug("create XML parser (encoding=%r)", encoding)
    return etree.XMLParser(encoding=encoding, **PARSER_OPTIONS)


def parse_xml(text: XMLTextType) -> etree._ElementTree:
    """
    Parses XML data into a new lxml tree.

    :param text: a Unicode string or a bytes object. A string is parsed as UTF-8 \
    data, so an encoding declaration in the string is ignored.
    :raises XMLParseError: if the data is not a well-formed XML document.
    """
    if isinstance(text, str):
        source = text.encode('utf-8')
        parser = get_parser('utf-8')
    elif isinstance(text, (bytes, bytearray)):
        source = bytes(text)
        parser = get_parser()
    else:
        raise TypeError(f"XML data must be a string or bytes, not {type(text)!r}")

    try:
        root = etree.fromstring(source, parser)
    except (etree.XMLSyntaxError, ValueError) as err:
        logger.debug("not well-formed XML %r: %s", shorten(repr(text)), err)
        raise XMLParseError(f"not well-formed XML: {err}", 'err:FODC0006') from err

    return root.getroottree()


def copy_tree(source: TreeArgType) -> etree._ElementTree:
    """
    Returns a new lxml tree with a copy of the provided tree or element, so
    that changes to the source cannot reach the copy.

    :param source: an lxml or an ElementTree tree or element.
    """
    if is_lxml_etree_document(source):
        return copy.deepcopy(source)
    elif is_lxml_etree_element(source):
        return etree.ElementTree(copy.deepcopy(source))
    elif is_etree_document(source):
        root = source.getroot()
        if root is None:
            raise XMLParseError("the source document has no root element", 'err:FODC0006')
        return parse_xml(ElementTree.tostring(root, encoding='unicode'))
    elif is_etree_element(source):
        return parse_xml(ElementTree.tostring(source, encoding='unicode'))
    raise TypeError(f"{source!r} is not an ElementTree or lxml tree or element")


def is_etree_element(obj: Any) -> bool:
    return hasattr(obj, 'tag') and hasattr(obj, 'attrib') and hasattr(obj, 'text')


def is_lxml_etree_element(obj: Any) -> bool:
    return isinstance(obj, etree._Element)


def is_etree_document(obj: Any) -> bool:
    return hasattr(obj, 'getroot') and hasattr(obj, 'parse') and hasattr(obj, 'iter')


def is_lxml_etree_document(obj: Any) -> bool:
    return isinstance(obj, etree._ElementTree)


def etree_deep_equal(e1: etree._Element, e2: etree._Element, with_tail: bool = False) -> bool:
    """
    Compares two elements by structure: names, attributes, text and tails, with
    the surrounding whitespaces ignored, and children in order. The tails of the
    compared elements are ignored unless *with_tail* is `True`.
    """
    if e1.tag != e2.tag:
        return False
    elif e1.tag is etree.PI and e1.target != e2.target:
        return False
    elif (e1.text or '').strip() != (e2.text or '').strip():
        return False
    elif with_tail and (e1.tail or '').strip() != (e2.tail or '').strip():
        return False
    elif dict(e1.attrib) != dict(e2.attrib):
        return False
    elif len(e1) != len(e2):
        return False
    return all(etree_deep_equal(c1, c2, True) for c1, c2 in zip(e1, e2))


def etree_deep_hash(elem: etree._Element, with_tail: bool = False) -> int:
    """A hash value that is consistent with :func:`etree_deep_equal`."""
    return hash((
        elem.tag,
        elem.target if elem.tag is etree.PI else None,
        (elem.text or '').strip(),
        (elem.tail or '').strip() if with_tail else None,
        frozenset(elem.attrib.items()),
        tuple(etree_deep_hash(child, True) for child in elem),
    ))


def etree_tostring(elem: LxmlTreeType,
                   pretty_print: bool = True,
                   xml_declaration: Optional[bool] = None) -> str:
    """
    Serialize an lxml tree or element to a string.

    :param elem: the lxml tree or element.
    :param pretty_print: if `True` (the default) indents the elements that have \
    no text content.
    :param xml_declaration: if `True` inserts the XML declaration at the head. For \
    default the declaration is added to documents and omitted for elements.
    :return: a Unicode string, without ending empty lines.
    """
    if is_lxml_etree_document(elem):
        if xml_declaration is None:
            xml_declaration = True
    elif not is_lxml_etree_element(elem):
        raise TypeError(f"{elem!r} is not an lxml tree or element")

    if xml_declaration:
        xml_text = etree.tostring(elem, encoding='UTF-8', xml_declaration=True,
                                  pretty_print=pretty_print, with_tail=False)
        xml_text = xml_text.decode('utf-8')
    else:
        xml_text = etree.tostring(elem, encoding='unicode',
                                  pretty_print=pretty_print, with_tail=False)

    # Clear ending empty lines
    return xml_text.rstrip('\r\n')


__all__ = ['PARSER_OPTIONS', 'get_parser', 'parse_xml', 'copy_tree', 'is_etree_element',
           'is_lxml_etree_element', 'is_etree_document', 'is_lxml_etree_document',
           'etree_deep_equal', 'etree_deep_hash', 'etree_tostring']
