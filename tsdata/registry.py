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
Registry of the module languages bundled with :mod:`tsdata`.

The registry also decides which files tsdata accepts: only files that have a
filename matching one of the registered patterns can be loaded.

"""

__all__ = ['accepts', 'find', 'registry']


import os.path

import parce.registry


registry = parce.registry.Registry()


def find(filename):
    """Return the root lexicon for the filename, or None if not accepted.

    Only the basename of the filename is used.

    """
    for lexicon_name in registry.suggest(os.path.basename(filename)):
        return registry.lexicon(lexicon_name)


def accepts(filename):
    """Return True if the filename has a JavaScript or TypeScript extension."""
    return bool(filename) and bool(registry.suggest(os.path.basename(filename)))


## register bundled languages here
registry.add("tsdata.lang.module.Module.root",
    name = "JavaScript/TypeScript module",
    desc = "JavaScript or TypeScript module exporting an array literal",
    aliases = ["ts", "tsx", "js", "jsx"],
    filenames = [("*.ts", 1), ("*.tsx", 1), ("*.js", 1), ("*.jsx", 1)],
    mimetypes = [("text/typescript", 1), ("application/javascript", 1), ("text/javascript", 1)],
)
