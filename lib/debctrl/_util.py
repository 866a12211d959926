# Copyright (C) 2026 The debctrl developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

import collections.abc
import io
import re

from typing import Iterable, Iterator, Optional, Union


_RE_LINE_TERMINATOR = re.compile(r'\r?\n\Z')


def _as_lines(stream, encoding):
    # type: (Union[str, bytes, Iterable[Union[str, bytes]]], str) -> Iterable[str]
    if isinstance(stream, bytes):
        stream = stream.decode(encoding)
    if isinstance(stream, str):
        stream = io.StringIO(stream)
    for line in stream:
        if isinstance(line, bytes):
            line = line.decode(encoding)
        yield line


class LineSource(collections.abc.Iterator):
    """Line iterator that keeps track of the physical line number

    Accepts a file open for reading, any iterable of str or bytes lines or a
    single str/bytes blob.  Lines are returned with their terminator removed.
    ``line_no`` is the 1-based number of the line most recently returned by
    ``next()`` (0 before the first line).

    >>> source = LineSource(b'first\\r\\nsecond\\n')
    >>> next(source), source.line_no
    ('first', 1)
    >>> source.readline(), source.readline(), source.line_no
    ('second', None, 2)
    """

    def __init__(self, stream, encoding='utf-8'):
        # type: (Union[str, bytes, Iterable[Union[str, bytes]]], str) -> None
        if isinstance(stream, LineSource):
            raise TypeError("LineSource cannot wrap another LineSource")
        self._stream = iter(_as_lines(stream, encoding))  # type: Iterator[str]
        self._expired = False  # type: bool
        self.line_no = 0  # type: int

    @classmethod
    def wrap(cls, stream, encoding='utf-8'):
        # type: (Union[LineSource, str, bytes, Iterable[Union[str, bytes]]], str) -> LineSource
        if isinstance(stream, LineSource):
            return stream
        return cls(stream, encoding=encoding)

    def __next__(self):
        # type: () -> str
        if self._expired:
            raise StopIteration
        try:
            line = next(self._stream)
        except StopIteration:
            # Stay exhausted even if the underlying file grows
            self._expired = True
            raise
        self.line_no += 1
        return _RE_LINE_TERMINATOR.sub('', line)

    def readline(self):
        # type: () -> Optional[str]
        """Return the next line or None at the end of the input"""
        return next(self, None)
