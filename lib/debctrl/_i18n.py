""" Message translation for user visible diagnostics """

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

import gettext

_translation = gettext.translation('debctrl', fallback=True)


def _(template):
    # type: (str) -> str
    return _translation.gettext(template)


def g_(template, *args):
    # type: (str, object) -> str
    """Translate ``template`` and interpolate ``args`` into it

    >>> g_('%s file', '.dsc')
    '.dsc file'
    """
    text = _(template)
    if args:
        return text % args
    return text
