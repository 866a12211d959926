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

try:
    from typing import Dict, Any
except ImportError:
    pass

import pytest

from debctrl.control import Control, ControlType, parse_control_data


@pytest.fixture(autouse=True)
def doctest_add_control_names(doctest_namespace):
    # type: (Dict[str, Any]) -> None
    # Provide a common namespace for doctests so that short examples in any
    # module can build paragraphs without importing debctrl.control.
    # Use sparingly.
    doctest_namespace['Control'] = Control
    doctest_namespace['ControlType'] = ControlType
    doctest_namespace['parse_control_data'] = parse_control_data
