#
# Copyright (c), 2026, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional, overload, TypeVar, Union

from xmlvalue.helpers import shorten
from xmlvalue.nodes import DocumentNode

__all__ = ['XPathResultList']

T = TypeVar('T')


class XPathResultList(Sequence[T]):
    """
    An immutable sequence with the results of an XPath query. The list keeps
    the queried node and the query text, used for reporting wrong accesses.

    :param items: the result items, in document order.
    :param source: the node on which the query has been evaluated.
    :param query: the XPath expression text.
    """
    __slots__ = ('_items', 'source', 'query')

    _items: tuple[T, ...]
    source: Optional[DocumentNode]
    query: str

    def __init__(self, items: Iterable[T],
                 source: Optional[DocumentNode] = None,
                 query: str = '') -> None:
        object.__setattr__(self, '_items', tuple(items))
        object.__setattr__(self, 'source', source)
        object.__setattr__(self, 'query', query)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__!r} object is immutable")

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> 'XPathResultList[T]': ...

    def __getitem__(self, index: Union[int, slice]) -> Union[T, 'XPathResultList[T]']:
        if isinstance(index, slice):
            return self.__class__(self._items[index], self.source, self.query)

        try:
            return self._items[index]
        except IndexError:
            raise IndexError(
                f"index {index} is out of bounds, there are {len(self._items)} "
                f"items retrieved by XPath query {self.query!r} on {self.describe_source()}"
            ) from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, XPathResultList):
            return self._items == other._items
        elif isinstance(other, (list, tuple)):
            return list(self._items) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return '%s(%r, query=%r)' % (self.__class__.__name__, list(self._items), self.query)

    def describe_source(self) -> str:
        """Returns a short description of the queried node, for error messages."""
        if self.source is None:
            return 'an unknown node'
        return '%r: %s' % (self.source, shorten(self.source.render(False, False)))
