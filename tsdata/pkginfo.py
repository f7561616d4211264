# -*- coding: utf-8 -*-
#
# This file is part of `tsdata`, a library for data arrays in JavaScript and
# TypeScript modules
#
# Copyright © 2026 by the tsdata authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Meta-information about the tsdata package.

This information is used by the install script, and can be queried
from other applications.

"""

import collections
Version = collections.namedtuple("Version", "major minor patch")


#: name of the package
name = "tsdata"

#: the current version
version = Version(0, 1, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Edit the exported data array of JavaScript and TypeScript modules"

#: long description
long_description = \
    "A Python library to read, edit and write back the array literal " \
    "a JavaScript or TypeScript data module exports."

#: maintainer name
maintainer = "The tsdata authors"

#: license
license = "GPL"
