#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Type annotation aliases for xmlvalue."""
import os
from collections.abc import Mapping
from typing import Any, IO, Optional, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from lxml import etree  # noqa: F401
    from xml.etree import ElementTree  # noqa: F401
    from .document import XMLDocument  # noqa: F401
    from .namespaces import NamespaceContext  # noqa: F401
    from .xslt import Stylesheet  # noqa: F401

###
# Namespace maps
NamespacesType = Mapping[str, str]
NsmapType = Mapping[Optional[str], str]  # compatible with the nsmap of lxml Element
AnyNsmapType = Union['NamespaceContext', NamespacesType, NsmapType]

###
# Trees and nodes
LxmlTreeType = Union['etree._ElementTree', 'etree._Element']
EtreeTreeType = Union['ElementTree.ElementTree', 'ElementTree.Element']
TreeArgType = Union[LxmlTreeType, EtreeTreeType]

# The raw results of an lxml XPath node-set evaluation
XPathItemType = Union['etree._Element', str, tuple[Optional[str], str]]

###
# Sources
XMLTextType = Union[str, bytes]
PathArgType = Union[str, os.PathLike[str]]
StreamArgType = IO[Any]
StylesheetArgType = Union['Stylesheet', 'XMLDocument', LxmlTreeType, XMLTextType]
XSLTParamType = Union[str, int, float]
