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
Readers of XML data from files, URLs and streams.
"""
import logging
import os
from contextlib import closing
from typing import Optional
from urllib.parse import urlsplit
from urllib.request import urlopen

from xmlvalue.aliases import PathArgType, StreamArgType, XMLTextType
from xmlvalue.exceptions import XMLSourceError

logger = logging.getLogger(__name__)


def read_file(path: PathArgType) -> bytes:
    """Reads the content of a file, as bytes for leaving the encoding to the parser."""
    try:
        with open(path, 'rb') as fp:
            data = fp.read()
    except OSError as err:
        raise XMLSourceError(f"cannot read file {os.fspath(path)!r}: {err}",
                             'err:FODC0002') from err

    logger.debug("read %d bytes from file %r", len(data), os.fspath(path))
    return data


def read_url(url: str, timeout: Optional[float] = None) -> bytes:
    """Reads the resource of a URL, using the handlers of *urllib.request*."""
    try:
        if timeout is None:
            resource = urlopen(url)
        else:
            resource = urlopen(url, timeout=timeout)

        with resource:
            data = resource.read()
    except (OSError, ValueError) as err:
        raise XMLSourceError(f"cannot read URL {url!r}: {err}", 'err:FODC0002') from err

    logger.debug("read %d bytes from URL %r", len(data), url)
    return data


def read_uri(uri: str, timeout: Optional[float] = None) -> bytes:
    """
    Reads the resource of a URI. A URI without a scheme, or with a drive
    letter as scheme, is a local path.
    """
    scheme = urlsplit(uri).scheme
    if not scheme or len(scheme) == 1:
        return read_file(uri)
    return read_url(uri, timeout)


def read_stream(stream: StreamArgType) -> XMLTextType:
    """
    Reads all the content of a binary or a text stream. The stream is closed
    after the read, also if the read fails.
    """
    try:
        with closing(stream):
            data = stream.read()
    except OSError as err:
        raise XMLSourceError(f"cannot read stream {stream!r}: {err}",
                             'err:FODC0002') from err

    if not isinstance(data, (str, bytes)):
        raise XMLSourceError(f"stream {stream!r} doesn't provide text or bytes",
                             'err:FODC0002')

    logger.debug("read %d characters/bytes from stream %r", len(data), stream)
    return data


__all__ = ['read_file', 'read_url', 'read_uri', 'read_stream']
