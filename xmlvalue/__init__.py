#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
__version__ = '1.0.0'
__author__ = "Davide Brunato"
__contact__ = "brunato@sissa.it"
__copyright__ = "Copyright 2026, SISSA"
__license__ = "MIT"
__status__ = "Production/Stable"

# Imports here are considered as stable API, other internal calls may change.

from . import etree      # Shared parser and helper functions for lxml.etree

from .exceptions import XMLValueError, XMLParseError, XMLSourceError, \
    XPathQueryError, NodeKindError, XSLTTransformError

from .namespaces import NamespaceContext
from .nodes import NodeKind, DocumentNode
from .sequences import XPathResultList
from .xpath_selectors import select, Selector
from .xslt import Stylesheet, apply_stylesheet
from .document import XMLDocument

__all__ = ['etree', 'XMLValueError', 'XMLParseError', 'XMLSourceError',
           'XPathQueryError', 'NodeKindError', 'XSLTTransformError',
           'NamespaceContext', 'NodeKind', 'DocumentNode', 'XPathResultList',
           'select', 'Selector', 'Stylesheet', 'apply_stylesheet', 'XMLDocument']
