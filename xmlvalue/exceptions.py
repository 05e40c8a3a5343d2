#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from typing import Optional


class XMLValueError(Exception):
    """
    Base exception class for xmlvalue package.

    :param message: the message related to the error.
    :param code: an optional error code.
    """
    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super(XMLValueError, self).__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if not self.code:
            return self.message
        return '[{}] {}'.format(self.code, self.message)


class XMLParseError(XMLValueError, ValueError):
    """Raised when the input text is not a well-formed XML document."""


class XMLSourceError(XMLValueError, OSError):
    """Raised when a file, a URL or a stream cannot provide the XML text."""


class XPathQueryError(XMLValueError, ValueError):
    """
    Raised when an XPath expression is invalid or cannot be evaluated
    as a node-set.

    :param message: the message related to the error.
    :param code: an optional error code.
    :param expression: the XPath expression text.
    :param cause: the underlying exception, if any.
    """
    def __init__(self, message: str,
                 code: Optional[str] = None,
                 expression: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super(XPathQueryError, self).__init__(message, code)
        self.expression = expression
        self.cause = cause


class NodeKindError(XMLValueError, TypeError):
    """
    Raised when a string extraction query matches a node that has
    no string value to retrieve (eg. an element).

    :param message: the message related to the error.
    :param code: an optional error code.
    :param query: the XPath expression text.
    :param kind: the kind of the offending node.
    """
    def __init__(self, message: str,
                 code: Optional[str] = None,
                 query: Optional[str] = None,
                 kind: Optional[str] = None) -> None:
        super(NodeKindError, self).__init__(message, code)
        self.query = query
        self.kind = kind


class XSLTTransformError(XMLValueError, RuntimeError):
    """
    Raised when a stylesheet cannot be compiled or applied.

    :param message: the message related to the error.
    :param code: an optional error code.
    :param cause: the underlying exception, if any.
    """
    def __init__(self, message: str,
                 code: Optional[str] = None,
                 cause: Optional[BaseException] = None) -> None:
        super(XSLTTransformError, self).__init__(message, code)
        self.cause = cause


XML_ERROR_CODES = {
    # Parsing and resource errors
    'FODC0002': (XMLSourceError, 'Error retrieving resource'),
    'FODC0006': (XMLParseError, 'String is not a well-formed XML document'),

    # XPath errors
    'XPST0003': (XPathQueryError, 'Invalid XPath expression'),
    'XPST0081': (XPathQueryError, 'Unknown namespace'),
    'XPDY0050': (XPathQueryError, 'Expression result is not a node-set'),
    'XPTY0020': (XPathQueryError, 'Context item is not an element or a document'),
    'XPTY0004': (NodeKindError, 'Type is not appropriate for the context'),

    # XSLT errors
    'XTSE0010': (XSLTTransformError, 'Invalid XSLT stylesheet'),
    'XTDE0000': (XSLTTransformError, 'XSLT transformation failed'),
}


def xml_error(code: str, message: Optional[str] = None, prefix: str = 'err') -> XMLValueError:
    """
    Returns an error instance related with a code. Codes are taken from the W3C
    error codes (ref: http://www.w3.org/2005/xqt-errors), with or without prefix.

    :param code: the error code.
    :param message: an optional custom additional message.
    :param prefix: the namespace prefix to apply to the error code, defaults to 'err'.
    """
    if ':' not in code:
        pcode = '%s:%s' % (prefix, code) if prefix else code
    elif not prefix or not code.startswith(prefix + ':'):
        raise ValueError('%r is not an XML error code' % code)
    else:
        pcode = code
        code = code[len(prefix) + 1:]

    try:
        error_class, default_message = XML_ERROR_CODES[code]
    except KeyError:
        raise ValueError(message or 'unknown XML error code %r' % code) from None
    else:
        return error_class(message or default_message, pcode)


__all__ = ['XMLValueError', 'XMLParseError', 'XMLSourceError', 'XPathQueryError',
           'NodeKindError', 'XSLTTransformError', 'XML_ERROR_CODES', 'xml_error']
