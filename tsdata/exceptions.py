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
Exceptions raised by tsdata.
"""


class TsDataError(Exception):
    """Base exception for all tsdata errors."""
    pass


class NoExportedArray(TsDataError):
    """Raised when a module has no top-level export of an array literal."""
    def __init__(self, message="no exported array literal found"):
        super().__init__(message)


class NotAnArray(TsDataError):
    """Raised when a value that must be an array is not an array."""
    def __init__(self, kind):
        self.kind = kind
        super().__init__("value is not an array: {}".format(kind))


class DecodeFailure(TsDataError):
    """Raised when a literal can't be decoded.

    The ``diagnostic`` attribute holds the description of the problem.

    """
    def __init__(self, diagnostic):
        self.diagnostic = diagnostic
        super().__init__("can't decode the exported array: {}".format(diagnostic))


class FileTypeRejected(TsDataError):
    """Raised when a file is not a JavaScript or TypeScript module."""
    def __init__(self, filename):
        self.filename = filename
        super().__init__("not a .ts, .tsx, .js or .jsx file: {}".format(filename))


class PathNotFound(TsDataError):
    """Raised when an edit path addresses a non-existing node.

    The ``depth`` attribute is the index of the first segment in ``path``
    that could not be resolved.

    """
    def __init__(self, path, depth):
        self.path = tuple(path)
        self.depth = depth
        super().__init__("path not found: {} (at segment {})".format(list(path), depth))


class UnknownItem(TsDataError):
    """Raised when there is no item with the identity."""
    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__("no item with identity {}".format(item_id))


class ItemFrozen(TsDataError):
    """Raised when an item that is pending removal is edited."""
    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__("item {} is being removed".format(item_id))
