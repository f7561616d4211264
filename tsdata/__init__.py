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
The tsdata module.

Read the array a JavaScript or TypeScript module exports, edit it, and write
the module back::

    >>> import tsdata
    >>> doc = tsdata.loads('export const items = [{"name": "A"}];')
    >>> doc = tsdata.document.append_item(doc)
    >>> print(tsdata.dumps(doc), end='')
    export const items = [
      {
        "name": "A"
      },
      {
        "name": ""
      }
    ];

On first import, the log messages of tsdata are disabled; use
:func:`tsdata.logging_config.setup_logging` to see them.

"""

from loguru import logger

from . import document, registry
from .document import ValueDocument
from .exceptions import FileTypeRejected
from .pkginfo import version, version_string
from .session import Session


__all__ = ('load', 'loads', 'dumps', 'Session', 'ValueDocument', 'version', 'version_string')


logger.disable("tsdata")


def load(filename, encoding=None):
    """Convenience function to read a module from ``filename`` and return a
    :class:`~tsdata.document.ValueDocument`.

    The ``encoding`` defaults to UTF-8. Raises
    :class:`~tsdata.exceptions.FileTypeRejected` if the filename does not
    have a JavaScript or TypeScript extension, and :class:`OSError` if the
    file can't be read.

    """
    if not registry.accepts(filename):
        raise FileTypeRejected(filename)
    with open(filename, encoding=encoding or 'utf-8') as f:
        return loads(f.read())


def loads(text):
    """Return a :class:`~tsdata.document.ValueDocument` for the module text."""
    return document.load_text(text)


def dumps(doc, **options):
    """Return the module text for the document.

    Keyword arguments are given to the :class:`~tsdata.dom.writer.Writer`.

    """
    return document.serialize(doc, **options)
