#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Optional

from xmlvalue.aliases import AnyNsmapType
from xmlvalue.helpers import is_ncname

# Namespaces
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"
XHTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSLT_NAMESPACE = "http://www.w3.org/1999/XSL/Transform"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# The bindings of a new document's namespace context
DEFAULT_NAMESPACES = MappingProxyType({
    'xhtml': XHTML_NAMESPACE,
    'xs': XSD_NAMESPACE,
    'xsi': XSI_NAMESPACE,
    'xsl': XSLT_NAMESPACE,
    'svg': SVG_NAMESPACE,
})

RESERVED_PREFIXES = MappingProxyType({
    'xml': XML_NAMESPACE,
    'xmlns': XMLNS_NAMESPACE,
})


def check_binding(prefix: Any, uri: Any) -> None:
    """
    Checks a namespace binding, raising a `ValueError` if the prefix is not an
    NCName, if the URI is not a non-empty string or if a reserved prefix is
    rebound. XPath 1.0 has no default namespace, so a prefix cannot be
    undeclared.
    """
    if not is_ncname(prefix):
        raise ValueError(f"invalid namespace prefix {prefix!r}")
    elif not isinstance(uri, str) or not uri:
        raise ValueError(f"invalid namespace URI {uri!r} for prefix {prefix!r}")
    elif prefix in RESERVED_PREFIXES and RESERVED_PREFIXES[prefix] != uri:
        raise ValueError(f"reserved prefix {prefix!r} cannot be bound to {uri!r}")


class NamespaceContext(Mapping[str, str]):
    """
    An immutable mapping from namespace prefixes to URIs, used for resolving
    the prefixes of XPath expressions. Methods that change bindings return a
    new context and leave the instance untouched.

    :param namespaces: an optional mapping with the initial bindings.
    :param kwargs: other bindings, provided as keyword arguments.
    """
    __slots__ = ('_namespaces', '_hash')

    _namespaces: dict[str, str]
    _hash: Optional[int]

    def __init__(self, namespaces: Optional[AnyNsmapType] = None, **kwargs: str) -> None:
        bindings = {}
        if namespaces is not None:
            bindings.update(_iter_bindings(namespaces))
        bindings.update(_iter_bindings(kwargs))

        object.__setattr__(self, '_namespaces', bindings)
        object.__setattr__(self, '_hash', None)

    @classmethod
    def default(cls) -> 'NamespaceContext':
        """Returns a context with the common namespaces bound to their usual prefixes."""
        return cls(DEFAULT_NAMESPACES)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __getitem__(self, prefix: str) -> str:
        return self._namespaces[prefix]

    def __iter__(self) -> Iterator[str]:
        return iter(self._namespaces)

    def __len__(self) -> int:
        return len(self._namespaces)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NamespaceContext):
            return self._namespaces == other._namespaces
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, '_hash', hash(frozenset(self._namespaces.items())))
        return self._hash  # type: ignore[return-value]

    def __repr__(self) -> str:
        return '%s(%r)' % (self.__class__.__name__, self._namespaces)

    def add(self, prefix: str, uri: str) -> 'NamespaceContext':
        """
        Returns a new context where *prefix* is bound to *uri*, replacing any
        previous binding of the prefix.
        """
        check_binding(prefix, uri)
        context = self.__class__()
        object.__setattr__(context, '_namespaces', {**self._namespaces, prefix: uri})
        return context

    def merge(self, other: AnyNsmapType) -> 'NamespaceContext':
        """
        Returns a new context with the bindings of both contexts. On a prefix
        collision the binding of *other* wins.

        :param other: a namespace context or a mapping. A `None` key, that is \
        the default namespace of an lxml nsmap, is skipped because it cannot \
        be referred in an XPath 1.0 expression.
        """
        context = self.__class__()
        object.__setattr__(
            context, '_namespaces', {**self._namespaces, **dict(_iter_bindings(other))}
        )
        return context

    def resolve(self, prefix: str) -> Optional[str]:
        """Returns the URI bound to *prefix*, or `None` if the prefix is unbound."""
        if prefix in RESERVED_PREFIXES:
            return RESERVED_PREFIXES[prefix]
        return self._namespaces.get(prefix)

    def iter_prefixes(self, uri: str) -> Iterator[str]:
        """Iterates the prefixes bound to *uri*, in binding order."""
        for prefix, ns_uri in self._namespaces.items():
            if ns_uri == uri:
                yield prefix

    def get_prefix(self, uri: str) -> Optional[str]:
        """Returns the first prefix bound to *uri*, or `None` if there is none."""
        for prefix in RESERVED_PREFIXES:
            if RESERVED_PREFIXES[prefix] == uri:
                return prefix
        return next(self.iter_prefixes(uri), None)


def _iter_bindings(namespaces: AnyNsmapType) -> Iterator[tuple[str, str]]:
    for prefix, uri in namespaces.items():
        if prefix is None:
            continue  # default namespace of an lxml nsmap
        check_binding(prefix, uri)
        yield prefix, uri


__all__ = ['XML_NAMESPACE', 'XMLNS_NAMESPACE', 'XHTML_NAMESPACE', 'XSD_NAMESPACE',
           'XSI_NAMESPACE', 'XSLT_NAMESPACE', 'SVG_NAMESPACE', 'DEFAULT_NAMESPACES',
           'RESERVED_PREFIXES', 'check_binding', 'NamespaceContext']
