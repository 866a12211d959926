""" Parse and write paragraphs of Debian control information

Control information is made of paragraphs of ``Field: value`` lines, the
value of a field optionally continuing on following lines that start with
whitespace.  Paragraphs are separated by blank lines.  Some files (like .dsc
and .changes files) are usually wrapped in a PGP signed message.

The low level entry point is :func:`parse_control_data` which reads exactly
one paragraph from a line source and returns its fields in the order they
appeared::

    >>> fields = parse_control_data(['Source: foo\\n',
    ...                              'Binary: foo, libfoo1\\n',
    ...                              'Description: a short summary\\n',
    ...                              ' and a long one\\n'],
    ...                             'debian/control')
    >>> list(fields)
    ['Source', 'Binary', 'Description']
    >>> fields['Description']
    'a short summary\\n and a long one'

The :class:`Control` class associates a kind of control information (see
:class:`debctrl.types.ControlType`) to the fields, which in turn decides the
order used when writing them back::

    >>> c = Control(type=ControlType.PKG_SRC)
    >>> c['Version'] = '1.0-1'
    >>> c['Source'] = 'foo'
    >>> print(c, end='')
    Source: foo
    Version: 1.0-1

Signatures are never verified; the parser only finds where the signed
message starts and ends so that the paragraph inside can be read.
"""

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
import enum
import logging
import re

from typing import (
    Any, Dict, IO, Iterable, Iterator, List, Optional, Union,
)

from debctrl._i18n import g_
from debctrl._util import LineSource
from debctrl.fields import field_capitalize, field_ordered_list
from debctrl.types import ControlType


logger = logging.getLogger(__name__)

_RE_FIELD_LINE = re.compile(r'^(\S+?)\s*:\s*(.*)$')
_RE_CONTINUATION_LINE = re.compile(r'^\s+\S')

PGP_SIGNED_MESSAGE_MARKER = '-----BEGIN PGP SIGNED MESSAGE'
PGP_SIGNATURE_MARKER = '-----BEGIN PGP SIGNATURE'
PGP_SIGNATURE_END_MARKER = '-----END PGP SIGNATURE'

LinesInput = Union[str, bytes, Iterable[Union[str, bytes]], LineSource]


class ControlParseError(ValueError):
    """A paragraph of control information could not be parsed

    The exception records where the problem was found (``source_name`` and
    the 1-based ``line_no``), the ``key`` identifying the kind of problem and
    the human readable ``message``.
    """

    is_user_error = True
    key = 'syntax-error'

    def __init__(self, source_name, line_no, message):
        # type: (str, int, str) -> None
        self.source_name = source_name
        self.line_no = line_no
        self.message = message
        super().__init__(source_name, line_no, message)

    def __str__(self):
        # type: () -> str
        return g_("syntax error in %s at line %d: %s",
                  self.source_name, self.line_no, self.message)


class MalformedLineError(ControlParseError):
    key = 'malformed-line'


class DanglingContinuationError(ControlParseError):
    key = 'dangling-continuation'


class DuplicateFieldError(ControlParseError):
    key = 'duplicate-field'


class EnvelopeNotAllowedError(ControlParseError):
    key = 'envelope-not-allowed'


class MissingSignatureError(ControlParseError):
    key = 'missing-signature'


class UnterminatedSignatureError(ControlParseError):
    key = 'unterminated-signature'


class DuplicatePolicy(enum.Enum):
    """What to do when a field appears twice in the same paragraph"""

    #: Fail with DuplicateFieldError
    REJECT = 'reject'
    #: Keep the position of the first occurrence but use the last value
    OVERWRITE = 'overwrite'

    @classmethod
    def from_flag(cls, allow_duplicate):
        # type: (bool) -> DuplicatePolicy
        return cls.OVERWRITE if allow_duplicate else cls.REJECT


class ControlFields(collections.abc.MutableMapping):
    """Ordered mapping of field names to values

    Field names are case-sensitive.  Replacing the value of an existing
    field keeps the field at its original position.
    """

    def __init__(self, data=None):
        # type: (Optional[Union[Iterable[Any], Dict[str, str]]]) -> None
        self._data = {}  # type: Dict[str, str]
        if data is not None:
            self.update(data)

    def __getitem__(self, key):
        # type: (str) -> str
        return self._data[key]

    def __setitem__(self, key, value):
        # type: (str, str) -> None
        self._data[key] = value

    def __delitem__(self, key):
        # type: (str) -> None
        del self._data[key]

    def __iter__(self):
        # type: () -> Iterator[str]
        return iter(self._data)

    def __len__(self):
        # type: () -> int
        return len(self._data)

    def __repr__(self):
        # type: () -> str
        return '%s(%r)' % (self.__class__.__name__, self._data)


def _skip_pgp_headers(source, source_name):
    # type: (LineSource, str) -> None
    for line in source:
        if not line:
            return
    raise MissingSignatureError(source_name, source.line_no,
                                g_("expected PGP signature, found EOF in PGP headers"))


def _skip_pgp_signature(source, source_name):
    # type: (LineSource, str) -> None
    line = source.readline()
    while line is not None and not line.strip():
        line = source.readline()
    if line is None:
        raise MissingSignatureError(source_name, source.line_no,
                                    g_("expected PGP signature, found EOF after blank line"))
    if not line.startswith(PGP_SIGNATURE_MARKER):
        raise MissingSignatureError(
            source_name, source.line_no,
            g_("expected PGP signature, found something else '%s'", line.rstrip()))
    for line in source:
        if line.startswith(PGP_SIGNATURE_END_MARKER):
            return
    raise UnterminatedSignatureError(source_name, source.line_no,
                                     g_("unfinished PGP signature"))


def parse_control_data(lines,  # type: LinesInput
                       source_name,  # type: str
                       allow_pgp=False,  # type: bool
                       allow_duplicate=False,  # type: bool
                       duplicate_policy=None,  # type: Optional[DuplicatePolicy]
                       encoding='utf-8',  # type: str
                       ):
    # type: (...) -> Optional[ControlFields]
    """Read one paragraph of control information

    :param lines: the input; a file open for reading, an iterable of lines
      (str or bytes), a whole str/bytes text or a :class:`LineSource`.  Pass a
      LineSource (or a file object) to read several paragraphs from the same
      input with repeated calls.
    :param source_name: name of the input, used in error messages.
    :param allow_pgp: accept a paragraph wrapped in a PGP signed message.  The
      signature is skipped, not verified.
    :param allow_duplicate: when a field is repeated, keep the last value
      instead of failing.  Same as ``duplicate_policy=DuplicatePolicy.OVERWRITE``.
    :param duplicate_policy: explicit :class:`DuplicatePolicy`; takes
      precedence over ``allow_duplicate``.
    :param encoding: used to decode bytes input.
    :returns: the fields of the paragraph, or None when the input contained
      no further paragraph.
    :raises ControlParseError: (one of its subclasses) on invalid input.
    """
    if duplicate_policy is None:
        duplicate_policy = DuplicatePolicy.from_flag(allow_duplicate)
    source = LineSource.wrap(lines, encoding=encoding)

    fields = None  # type: Optional[ControlFields]
    current_field = None  # type: Optional[str]
    paragraph_border = True
    expect_pgp_signature = False
    at_paragraph_end = False

    for line in source:
        line = line.rstrip()
        if not line and paragraph_border:
            continue
        if line.startswith('#'):
            continue
        paragraph_border = False

        field_match = _RE_FIELD_LINE.match(line)
        if field_match:
            name, value = field_match.groups()
            if fields is None:
                fields = ControlFields()
            elif name in fields and duplicate_policy is DuplicatePolicy.REJECT:
                raise DuplicateFieldError(
                    source_name, source.line_no,
                    g_("duplicate field %s found", field_capitalize(name)))
            fields[name] = value
            current_field = name
        elif _RE_CONTINUATION_LINE.match(line):
            if current_field is None or fields is None:
                raise DanglingContinuationError(
                    source_name, source.line_no,
                    g_("continued value line not in field"))
            fields[current_field] += '\n' + line
        elif line.startswith(PGP_SIGNED_MESSAGE_MARKER):
            if not allow_pgp:
                raise EnvelopeNotAllowedError(source_name, source.line_no,
                                              g_("PGP signature not allowed here"))
            logger.debug("%s: skipping PGP signed message headers at line %d",
                         source_name, source.line_no)
            expect_pgp_signature = True
            _skip_pgp_headers(source, source_name)
        elif not line:
            at_paragraph_end = True
            break
        else:
            raise MalformedLineError(
                source_name, source.line_no,
                g_("line with unknown format (not field-colon-value)"))

    if expect_pgp_signature and at_paragraph_end:
        _skip_pgp_signature(source, source_name)

    return fields


def iter_control_data(lines,  # type: LinesInput
                      source_name,  # type: str
                      **options  # type: Any
                      ):
    # type: (...) -> Iterator[ControlFields]
    """Iterate over all paragraphs of the input

    Accepts the same options as :func:`parse_control_data`.

    >>> text = 'Source: foo\\nMaintainer: a\\n\\nSource: bar\\n'
    >>> [dict(p) for p in iter_control_data(text, 'example')]
    [{'Source': 'foo', 'Maintainer': 'a'}, {'Source': 'bar'}]
    """
    source = LineSource.wrap(lines, encoding=options.pop('encoding', 'utf-8'))
    count = 0
    while True:
        fields = parse_control_data(source, source_name, **options)
        if fields is None:
            break
        count += 1
        yield fields
    logger.debug("%s: read %d paragraph(s)", source_name, count)


class Control(collections.abc.MutableMapping):
    """A paragraph of control information of a known kind

    The kind (``type`` option, a :class:`ControlType`) selects defaults for
    the other options:

    - ``allow_pgp``: whether :meth:`parse` accepts a PGP signed message.
      True for .dsc and .changes files.
    - ``drop_empty``: whether fields with an empty value are left out when
      writing the paragraph.  False for the paragraphs of debian/control.
    - ``name``: description of the kind of control information, for
      diagnostics.

    It also decides :attr:`output_order`.  Options given explicitly (to the
    constructor or :meth:`set_options`) always override the defaults of the
    kind and are remembered when the kind changes later.

    ``allow_duplicate`` is not tied to the kind and defaults to False.
    """

    _OPTION_NAMES = frozenset(['allow_pgp', 'drop_empty', 'name', 'allow_duplicate'])

    def __init__(self, fields=None, **options):
        # type: (Optional[Union[Iterable[Any], Dict[str, str]]], Any) -> None
        self._fields = ControlFields(fields)
        self._explicit_options = {}  # type: Dict[str, Any]
        self._type = ControlType.UNKNOWN
        self.allow_pgp = False
        self.drop_empty = False
        self.allow_duplicate = False
        self.name = ''
        self.output_order = []  # type: List[str]
        options.setdefault('type', ControlType.UNKNOWN)
        self.set_options(**options)

    def set_options(self, **options):
        # type: (Any) -> None
        """Change one or more options

        If ``type`` is given, the options derived from the kind and the
        output order are computed again; explicitly set options are then
        applied on top of them.
        """
        unknown = set(options) - self._OPTION_NAMES - {'type'}
        if unknown:
            raise TypeError("Unknown option(s): " + ", ".join(sorted(unknown)))

        if 'type' in options:
            self._type = ControlType(options.pop('type'))
            info = self._type.info
            self.allow_pgp = info.allow_pgp
            self.drop_empty = info.drop_empty
            self.name = info.name
            self.output_order = field_ordered_list(self._type)

        self._explicit_options.update(options)
        for option, value in self._explicit_options.items():
            setattr(self, option, value)

    def get_type(self):
        # type: () -> ControlType
        """Return the kind of control information stored"""
        return self._type

    type = property(
        get_type,
        lambda self, value: self.set_options(type=value),
        doc="The kind of control information (assigning it updates the options)",
    )

    @property
    def fields(self):
        # type: () -> ControlFields
        return self._fields

    def __getitem__(self, key):
        # type: (str) -> str
        return self._fields[key]

    def __setitem__(self, key, value):
        # type: (str, str) -> None
        self._fields[key] = value

    def __delitem__(self, key):
        # type: (str) -> None
        del self._fields[key]

    def __iter__(self):
        # type: () -> Iterator[str]
        return iter(self._fields)

    def __len__(self):
        # type: () -> int
        return len(self._fields)

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, Control):
            return NotImplemented
        return self._type is other._type and list(self.items()) == list(other.items())

    def __repr__(self):
        # type: () -> str
        return 'Control(%r, type=%s)' % (dict(self._fields), self._type)

    def parse(self, lines, source_name):
        # type: (LinesInput, str) -> bool
        """Read one paragraph into this object

        The ``allow_pgp`` and ``allow_duplicate`` options of the object are
        used.  Fields already present are overwritten by those read.

        :returns: True if a paragraph was read, False at end of input.
        """
        fields = parse_control_data(lines, source_name,
                                    allow_pgp=self.allow_pgp,
                                    allow_duplicate=self.allow_duplicate)
        if fields is None:
            return False
        self._fields.update(fields)
        return True

    @classmethod
    def iter_paragraphs(cls, lines, source_name, **options):
        # type: (LinesInput, str, Any) -> Iterator[Control]
        """Read each paragraph of the input as a Control of the given kind

        Accepts the options of :class:`Control` and the ``encoding`` used to
        decode bytes input.
        """
        source = LineSource.wrap(lines, encoding=options.pop('encoding', 'utf-8'))
        while True:
            control = cls(**options)
            if not control.parse(source, source_name):
                return
            yield control

    def _iter_output_fields(self):
        # type: () -> Iterator[str]
        seen = set()
        for field in self.output_order:
            if field in self._fields:
                seen.add(field)
                yield field
        for field in self._fields:
            if field not in seen:
                yield field

    def output(self):
        # type: () -> str
        """Return the paragraph as text, fields in their output order"""
        parts = []
        for field in self._iter_output_fields():
            value = self._fields[field]
            if self.drop_empty and not value.strip():
                continue
            first_line, newline, continuation = value.partition('\n')
            if first_line:
                parts.append('%s: %s\n' % (field, first_line))
            else:
                parts.append('%s:\n' % field)
            if newline:
                parts.append(continuation + '\n')
        return ''.join(parts)

    __str__ = output

    def dump(self, fd=None, encoding='utf-8', text_mode=False):
        # type: (Optional[IO[Any]], str, bool) -> Optional[str]
        """Write the paragraph to ``fd``, or return it as text if fd is None

        ``fd`` is assumed to be opened in binary mode unless ``text_mode`` is
        True.
        """
        text = self.output()
        if fd is None:
            return text
        if text_mode:
            fd.write(text)
        else:
            fd.write(text.encode(encoding))
        return None
