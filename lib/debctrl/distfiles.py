""" Read and write the list of files produced by a package build

The list (``debian/files``) has one line per file::

    foo_1.0-1_amd64.deb utils optional
    foo_1.0-1.dsc source optional
    buildinfo-notes misc extra

When the file name is a binary package name of the form
``package_version_arch.type`` it is decomposed into its parts.

    >>> files = DistFiles()
    >>> files.parse(['foo_1.0_amd64.deb utils optional\\n'])
    1
    >>> entry = files.get_file('foo_1.0_amd64.deb')
    >>> entry.package, entry.version, entry.arch, entry.package_type
    ('foo', '1.0', 'amd64', 'deb')

The list is always written sorted by file name.
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

import io
import logging
import re
import warnings

from typing import Any, Dict, IO, Iterator, List, Optional

from debctrl._i18n import g_
from debctrl._util import LineSource
from debctrl.control import ControlParseError, LinesInput


logger = logging.getLogger(__name__)

_RE_PACKAGE_FILE_LINE = re.compile(
    r'^(([-+.0-9a-z]+)_([^_]+)_([-\w]+)\.([a-z0-9.]+)) (\S+) (\S+)$')
_RE_FILE_LINE = re.compile(r'^([-+.,_0-9a-zA-Z]+) (\S+) (\S+)$')


class MalformedManifestLineError(ControlParseError):
    key = 'malformed-manifest-line'


class DuplicateEntryWarning(UserWarning):
    """A file name appears more than once in the files list

    The entry read first is kept.
    """

    key = 'duplicate-entry'

    def __init__(self, filename, line_no, message):
        # type: (str, int, str) -> None
        self.filename = filename
        self.line_no = line_no
        super().__init__(message)


class DistFile(object):
    """One entry of the files list

    ``package``, ``version``, ``arch`` and ``package_type`` are only set when
    the file name could be decomposed, None otherwise.
    """

    __slots__ = ('filename', 'section', 'priority',
                 'package', 'version', 'arch', 'package_type')

    def __init__(self,
                 filename,  # type: str
                 section,  # type: str
                 priority,  # type: str
                 package=None,  # type: Optional[str]
                 version=None,  # type: Optional[str]
                 arch=None,  # type: Optional[str]
                 package_type=None,  # type: Optional[str]
                 ):
        # type: (...) -> None
        self.filename = filename
        self.section = section
        self.priority = priority
        self.package = package
        self.version = version
        self.arch = arch
        self.package_type = package_type

    @classmethod
    def from_line(cls, line):
        # type: (str) -> Optional[DistFile]
        """Parse one line of the files list, None if it is badly formed

        >>> DistFile.from_line('README misc extra')
        DistFile('README', 'misc', 'extra')
        """
        m = _RE_PACKAGE_FILE_LINE.match(line)
        if m:
            filename, package, version, arch, package_type, section, priority = m.groups()
            return cls(filename, section, priority,
                       package=package, version=version, arch=arch,
                       package_type=package_type)
        m = _RE_FILE_LINE.match(line)
        if m:
            return cls(*m.groups())
        return None

    def to_dict(self):
        # type: () -> Dict[str, str]
        return {attr: getattr(self, attr) for attr in self.__slots__
                if getattr(self, attr) is not None}

    def __eq__(self, other):
        # type: (object) -> bool
        if not isinstance(other, DistFile):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        # type: () -> str
        return 'DistFile(%r, %r, %r)' % (self.filename, self.section, self.priority)

    def __str__(self):
        # type: () -> str
        return '%s %s %s' % (self.filename, self.section, self.priority)


class DistFiles(object):
    """The list of files produced by a build, keyed by file name"""

    def __init__(self):
        # type: () -> None
        self._files = {}  # type: Dict[str, DistFile]

    @classmethod
    def load(cls, path, encoding='utf-8'):
        # type: (str, str) -> DistFiles
        files = cls()
        with io.open(path, encoding=encoding) as fh:
            files.parse(fh, source_name=path)
        return files

    def parse(self, lines, source_name=None, encoding='utf-8'):
        # type: (LinesInput, Optional[str], str) -> int
        """Add the entries read from ``lines``

        Entries whose file name is already known are reported with a
        warning and ignored; the first one read is kept.

        :returns: the number of entries added.
        :raises MalformedManifestLineError: on a line that is not made of a
          file name, a section and a priority.
        """
        source = LineSource.wrap(lines, encoding=encoding)
        if source_name is None:
            source_name = getattr(lines, 'name', '<files list>')
        count = 0
        for line in source:
            entry = DistFile.from_line(line)
            if entry is None:
                raise MalformedManifestLineError(
                    source_name, source.line_no,
                    g_("badly formed line in files list file"))
            if entry.filename in self._files:
                message = g_("duplicate files list entry for file %s (line %d)",
                             entry.filename, source.line_no)
                logger.warning(message)
                warnings.warn(DuplicateEntryWarning(entry.filename, source.line_no, message))
                continue
            self._files[entry.filename] = entry
            count += 1
        return count

    def get_file(self, filename):
        # type: (str) -> Optional[DistFile]
        return self._files.get(filename)

    def get_files(self):
        # type: () -> List[DistFile]
        """Return all entries, sorted by file name"""
        return [self._files[f] for f in sorted(self._files)]

    def add_file(self, filename, section, priority):
        # type: (str, str, str) -> None
        """Add an entry, replacing any entry for the same file name

        The file name is not decomposed.
        """
        self._files[filename] = DistFile(filename, section, priority)

    def del_file(self, filename):
        # type: (str) -> None
        self._files.pop(filename, None)

    def __len__(self):
        # type: () -> int
        return len(self._files)

    def __contains__(self, filename):
        # type: (object) -> bool
        return filename in self._files

    def __iter__(self):
        # type: () -> Iterator[DistFile]
        return iter(self.get_files())

    def output(self, fd=None):
        # type: (Optional[IO[Any]]) -> str
        """Return the list as text, also writing it to ``fd`` if given"""
        text = ''.join('%s\n' % entry for entry in self.get_files())
        if fd is not None:
            fd.write(text)
        return text

    __str__ = output

    def save(self, path, encoding='utf-8'):
        # type: (str, str) -> None
        with io.open(path, 'w', encoding=encoding) as fh:
            self.output(fh)
