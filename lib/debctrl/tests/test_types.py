#!/usr/bin/python3
# vim: fileencoding=utf-8
#
# Tests for the kinds of control information and their field order
#
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

import pytest

from debctrl.fields import field_capitalize, field_ordered_list
from debctrl.types import ControlType, ControlTypeInfo


class TestControlType:

    @pytest.mark.parametrize('control_type', [ControlType.PKG_SRC, ControlType.FILE_CHANGES])
    def test_signed_kinds(self, control_type):
        # type: (ControlType) -> None
        assert control_type.info.allow_pgp

    def test_unsigned_kinds(self):
        # type: () -> None
        unsigned = set(ControlType) - {ControlType.PKG_SRC, ControlType.FILE_CHANGES}
        assert not any(t.info.allow_pgp for t in unsigned)

    def test_drop_empty(self):
        # type: () -> None
        keep = [t for t in ControlType if not t.info.drop_empty]
        assert sorted(keep, key=lambda t: t.value) == [ControlType.INFO_PKG,
                                                      ControlType.INFO_SRC]

    def test_names(self):
        # type: () -> None
        assert ControlType.FILE_STATUS.info == ControlTypeInfo(
            allow_pgp=False, drop_empty=True, name="entry in dpkg's status file")
        assert ControlType.APT_SRC.info.name == "entry of APT's Sources file"
        assert ControlType.PKG_DEB.info.name == "control info of a .deb package"
        assert all(t.info.name for t in ControlType)

    def test_lookup_by_value(self):
        # type: () -> None
        assert ControlType('changelog') is ControlType.CHANGELOG
        with pytest.raises(ValueError):
            ControlType('no-such-kind')


class TestFieldOrder:

    @pytest.mark.parametrize('control_type', list(ControlType))
    def test_no_duplicates(self, control_type):
        # type: (ControlType) -> None
        order = field_ordered_list(control_type)
        assert len(order) == len(set(order))

    def test_returns_copy(self):
        # type: () -> None
        order = field_ordered_list(ControlType.PKG_DEB)
        order.append('X-Extra')
        assert 'X-Extra' not in field_ordered_list(ControlType.PKG_DEB)

    def test_apt_packages(self):
        # type: () -> None
        order = field_ordered_list(ControlType.APT_PKG)
        pos = order.index('Replaces')
        assert order[pos + 1:pos + 7] == ['Filename', 'Size', 'MD5sum', 'SHA1',
                                          'SHA256', 'Section']

    def test_apt_sources(self):
        # type: () -> None
        order = field_ordered_list(ControlType.APT_SRC)
        assert order[:2] == ['Format', 'Package']
        assert 'Source' not in order
        pos = order.index('Version')
        assert order[pos + 1:pos + 3] == ['Priority', 'Section']
        assert order.index('Directory') + 1 == order.index('Checksums-Md5')

    def test_source_paragraph(self):
        # type: () -> None
        order = field_ordered_list(ControlType.INFO_SRC)
        assert order[0] == 'Source'
        assert order.index('Build-Depends') < order.index('Standards-Version')


class TestFieldCapitalize:

    @pytest.mark.parametrize('field,expected', [
        ('source', 'Source'),
        ('BUILD-DEPENDS', 'Build-Depends'),
        ('vcs-git', 'Vcs-Git'),
        ('md5sum', 'MD5sum'),
        ('Sha1', 'SHA1'),
        ('x-python-version', 'X-Python-Version'),
    ])
    def test_capitalize(self, field, expected):
        # type: (str, str) -> None
        assert field_capitalize(field) == expected
