""" Parse and write Debian control information and build file lists

- :mod:`debctrl.control`: paragraphs of ``Field: value`` lines, optionally
  wrapped in a PGP signed message.
- :mod:`debctrl.types`: the kinds of control information.
- :mod:`debctrl.fields`: canonical field order and capitalisation.
- :mod:`debctrl.distfiles`: the list of files produced by a build.
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

__version__ = '0.1.0'
