""" Canonical field names and output order of control information

The order in which fields are written out depends on the kind of control
information (see :class:`debctrl.types.ControlType`).  Fields that do not
appear in the list for a kind are written after the listed ones, in the
order they were added.
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

from typing import Dict, List

from debctrl.types import ControlType


_CHECKSUM_FIELDS = ['Checksums-Md5', 'Checksums-Sha1', 'Checksums-Sha256']
_CHECKSUM_NAMES = {'md5', 'sha1', 'sha256'}

_PKG_DEP_FIELDS = ['Pre-Depends', 'Depends', 'Recommends', 'Suggests', 'Enhances',
                   'Breaks', 'Conflicts', 'Provides', 'Replaces']
_SRC_DEP_FIELDS = ['Build-Depends', 'Build-Depends-Arch', 'Build-Depends-Indep',
                   'Build-Conflicts', 'Build-Conflicts-Arch', 'Build-Conflicts-Indep']
_VCS_FIELDS = ['Vcs-Browser', 'Vcs-Arch', 'Vcs-Bzr', 'Vcs-Cvs', 'Vcs-Darcs',
               'Vcs-Git', 'Vcs-Hg', 'Vcs-Mtn', 'Vcs-Svn']


def _insert_before(order, existing, *new):
    # type: (List[str], str, str) -> None
    pos = order.index(existing)
    order[pos:pos] = new


def _insert_after(order, existing, *new):
    # type: (List[str], str, str) -> None
    pos = order.index(existing) + 1
    order[pos:pos] = new


def _build_field_order():
    # type: () -> Dict[ControlType, List[str]]
    order = {
        ControlType.INFO_SRC: (
            ['Source', 'Section', 'Priority', 'Maintainer', 'Uploaders', 'Origin', 'Bugs']
            + _SRC_DEP_FIELDS
            + ['Standards-Version', 'Homepage'] + _VCS_FIELDS + ['Testsuite']
        ),
        ControlType.INFO_PKG: (
            ['Package', 'Package-Type', 'Architecture', 'Multi-Arch', 'Section',
             'Priority', 'Essential', 'Build-Profiles']
            + _PKG_DEP_FIELDS
            + ['Built-Using', 'Homepage', 'Description']
        ),
        ControlType.PKG_DEB: (
            ['Package', 'Package-Type', 'Source', 'Version', 'Built-Using',
             'Kernel-Version', 'Architecture', 'Subarchitecture',
             'Installer-Menu-Item', 'Essential', 'Origin', 'Bugs', 'Maintainer',
             'Installed-Size']
            + _PKG_DEP_FIELDS
            + ['Section', 'Priority', 'Multi-Arch', 'Homepage', 'Description', 'Tag', 'Task']
        ),
        ControlType.PKG_SRC: (
            ['Format', 'Source', 'Binary', 'Architecture', 'Version', 'Origin',
             'Maintainer', 'Uploaders', 'Homepage', 'Standards-Version']
            + _VCS_FIELDS + ['Testsuite']
            + _SRC_DEP_FIELDS
            + ['Package-List'] + _CHECKSUM_FIELDS + ['Files']
        ),
        ControlType.FILE_CHANGES: (
            ['Format', 'Date', 'Source', 'Binary', 'Binary-Only', 'Built-For-Profiles',
             'Architecture', 'Version', 'Distribution', 'Urgency', 'Maintainer',
             'Changed-By', 'Description', 'Closes', 'Changes']
            + _CHECKSUM_FIELDS + ['Files']
        ),
        ControlType.CHANGELOG: [
            'Source', 'Binary-Only', 'Version', 'Distribution', 'Urgency',
            'Maintainer', 'Timestamp', 'Date', 'Closes', 'Changes',
        ],
        ControlType.FILE_VENDOR: ['Vendor', 'Vendor-Url', 'Bugs', 'Parent'],
        ControlType.FILE_STATUS: [
            'Package', 'Essential', 'Status', 'Priority', 'Section', 'Installed-Size',
            'Origin', 'Maintainer', 'Bugs', 'Architecture', 'Multi-Arch', 'Source',
            'Version', 'Config-Version', 'Replaces', 'Provides', 'Depends',
            'Pre-Depends', 'Recommends', 'Suggests', 'Breaks', 'Conflicts',
            'Enhances', 'Conffiles', 'Description', 'Triggers-Pending',
            'Triggers-Awaited',
        ],
        ControlType.UNKNOWN: [],
    }

    # The APT Packages index is derived from DEBIAN/control
    apt_pkg = list(order[ControlType.PKG_DEB])
    _insert_before(apt_pkg, 'Section', 'Filename', 'Size', 'MD5sum')
    _insert_after(apt_pkg, 'MD5sum', 'SHA1', 'SHA256')
    order[ControlType.APT_PKG] = apt_pkg

    # ... and the APT Sources index from the .dsc
    apt_src = ['Package' if f == 'Source' else f for f in order[ControlType.PKG_SRC]]
    _insert_after(apt_src, 'Version', 'Priority', 'Section')
    _insert_before(apt_src, 'Checksums-Md5', 'Directory')
    order[ControlType.APT_SRC] = apt_src

    return order


_FIELD_ORDER = _build_field_order()


def field_ordered_list(control_type):
    # type: (ControlType) -> List[str]
    """Return the output order of the fields for the given kind

    >>> field_ordered_list(ControlType.CHANGELOG)[:3]
    ['Source', 'Binary-Only', 'Version']
    >>> field_ordered_list(ControlType.UNKNOWN)
    []
    """
    return list(_FIELD_ORDER[control_type])


def field_capitalize(field):
    # type: (str) -> str
    """Return the name of a field in its canonical capitalisation

    >>> field_capitalize('build-depends-indep')
    'Build-Depends-Indep'
    >>> field_capitalize('md5sum')
    'MD5sum'
    >>> field_capitalize('sha256')
    'SHA256'
    """
    field = field.lower()
    if field == 'md5sum':
        return 'MD5sum'
    if field in _CHECKSUM_NAMES:
        return field.upper()
    return '-'.join(w[:1].upper() + w[1:] for w in field.split('-'))
