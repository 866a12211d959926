""" Kinds of control information and the policy attached to each kind

Every paragraph of control data belongs to one of a fixed set of contexts
(a .dsc file, an entry of an APT Packages index, dpkg's status file, ...).
The kind decides whether the paragraph may be wrapped in a PGP signed
message, whether fields with empty values are dropped on output and how the
paragraph is described in diagnostics.

    >>> ControlType.PKG_SRC.info.allow_pgp
    True
    >>> ControlType.INFO_SRC.info.drop_empty
    False
    >>> ControlType.APT_PKG.info.name
    "entry of APT's Packages file"
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

import collections
import enum

from debctrl._i18n import g_


ControlTypeInfo = collections.namedtuple('ControlTypeInfo',
                                         ['allow_pgp', 'drop_empty', 'name'])


class ControlType(enum.Enum):
    """The closed set of control information kinds"""

    UNKNOWN = 'unknown'
    #: First paragraph of debian/control in a source package
    INFO_SRC = 'info-src'
    #: Subsequent (binary package) paragraphs of debian/control
    INFO_PKG = 'info-pkg'
    #: Entry of a Sources index of an APT repository
    APT_SRC = 'apt-src'
    #: Entry of a Packages index of an APT repository
    APT_PKG = 'apt-pkg'
    #: A .dsc file
    PKG_SRC = 'pkg-src'
    #: DEBIAN/control, as generated by dpkg-gencontrol and found in .deb files
    PKG_DEB = 'pkg-deb'
    #: A .changes file
    FILE_CHANGES = 'file-changes'
    #: A vendor file in /etc/dpkg/origins/
    FILE_VENDOR = 'file-vendor'
    #: An entry of /var/lib/dpkg/status
    FILE_STATUS = 'file-status'
    #: The output of dpkg-parsechangelog
    CHANGELOG = 'changelog'

    @property
    def info(self):
        # type: () -> ControlTypeInfo
        return _TYPE_INFO[self]


def _build_type_info():
    signed = {ControlType.PKG_SRC, ControlType.FILE_CHANGES}
    keep_empty = {ControlType.INFO_SRC, ControlType.INFO_PKG}
    names = {
        ControlType.UNKNOWN: g_("control information"),
        ControlType.INFO_SRC: g_("general section of control info file"),
        ControlType.INFO_PKG: g_("package's section of control info file"),
        ControlType.CHANGELOG: g_("parsed version of changelog"),
        ControlType.APT_SRC: g_("entry of APT's %s file", "Sources"),
        ControlType.APT_PKG: g_("entry of APT's %s file", "Packages"),
        ControlType.PKG_SRC: g_("%s file", ".dsc"),
        ControlType.PKG_DEB: g_("control info of a .deb package"),
        ControlType.FILE_CHANGES: g_("%s file", ".changes"),
        ControlType.FILE_VENDOR: g_("vendor file"),
        ControlType.FILE_STATUS: g_("entry in dpkg's status file"),
    }
    return {
        t: ControlTypeInfo(allow_pgp=t in signed,
                           drop_empty=t not in keep_empty,
                           name=names[t])
        for t in ControlType
    }


_TYPE_INFO = _build_type_info()
