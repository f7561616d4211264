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
Find the import header and the exported array literal in a module.

The module is never executed. It is lexed with the
:class:`~tsdata.lang.module.Module` language, and the top-level statements
are examined in source order. The first statement of one of these forms is
used::

    export default [ ... ];
    export const name = [ ... ];
    export let name: Type[] = [ ... ], other = [ ... ];

Array literals nested in functions, blocks or parentheses are never found,
and the array must be the complete initializer: ``export default [].concat(x)``
does not qualify.

"""

import collections

from loguru import logger
from parce.transform import Transformer
import parce.action as a

from .exceptions import NoExportedArray
from .lang.module import Module


#: the export name used for ``export default``
DEFAULT_EXPORT = "defaultExport"

#: the export name used when none is known
DEFAULT_EXPORT_NAME = "data"


ExportBinding = collections.namedtuple("ExportBinding", "name literal_text pos end")
ExportBinding.__doc__ = "The exported array literal."
ExportBinding.name.__doc__ = "The exported name, or DEFAULT_EXPORT for a default export."
ExportBinding.literal_text.__doc__ = "The source text of the array literal."
ExportBinding.pos.__doc__ = "The position of the literal in the module text."
ExportBinding.end.__doc__ = "The end position of the literal in the module text."


DECLARATION_KEYWORDS = ('const', 'let', 'var')

# these start a new statement, even on the same line
STATEMENT_KEYWORDS = DECLARATION_KEYWORDS + ('export', 'import', 'function', 'class')

# a prefix operator on a new line does not continue the expression
PREFIX_OPERATORS = ('!', '~', '++', '--')


def parts(text):
    """Return the list of top-level tokens and spans of the module text."""
    return Transformer().transform_text(Module.root, text) or []


def import_header(parts):
    """Return the top-level import statements, joined with newlines."""
    return '\n'.join(p.text for p in parts if p.is_token and p.action is a.Keyword.Import)


def scan(text):
    """Return a two-tuple (import_header, binding) for the module text.

    The ``import_header`` is the text of all top-level import statements, each
    on its own line. The ``binding`` is an :class:`ExportBinding` for the
    first exported array literal.

    Raises :class:`~tsdata.exceptions.NoExportedArray` if no exported array
    literal is found.

    """
    p = parts(text)
    header = import_header(p)
    for binding in _exported_arrays(text, p):
        logger.debug("found exported array {!r} at {}-{}", binding.name, binding.pos, binding.end)
        return header, binding
    raise NoExportedArray()


def _is(part, *texts):
    """Return True if the part is a token with one of the texts."""
    return part is not None and part.is_token and part.text in texts


def _exported_arrays(text, parts):
    """Yield an ExportBinding for every exported array literal, in order."""
    def get(index):
        return parts[index] if index < len(parts) else None

    def end(part):
        return len(text) if part.end is None else part.end

    def is_array(index):
        """Return True if the part at index is an array that ends the expression."""
        part = get(index)
        if part is None or part.is_token or part.name != "array":
            return False
        following = get(index + 1)
        if following is None or _is(following, ';', ','):
            return True
        elif '\n' not in text[end(part):following.pos]:
            return False
        elif following.is_token:
            if following.text.split()[0] in ('as', 'satisfies', '.'):
                return False
            return following.action not in a.Operator or following.text in PREFIX_OPERATORS
        # a template, parenthesis or bracket on the next line continues the expression
        return following.name not in ('array', 'paren', 'index', 'template_literal')

    def skip_type(index):
        """Return the index of the first part after a type annotation."""
        depth = 0   # nesting of <generic> parameters
        while get(index) is not None:
            part = get(index)
            if part.is_token:
                if part.text == '<':
                    depth += 1
                elif part.text in ('>', '>>', '>>>'):
                    depth -= len(part.text)
                elif depth <= 0 and part.text in ('=', ',', ';') + STATEMENT_KEYWORDS:
                    break
            index += 1
        return index

    def binding(name, index):
        part = parts[index]
        return ExportBinding(name, text[part.pos:end(part)], part.pos, end(part))

    for i, part in enumerate(parts):
        if not _is(part, 'export'):
            continue
        i += 1
        if _is(get(i), 'default'):
            if is_array(i + 1):
                yield binding(DEFAULT_EXPORT, i + 1)
        elif _is(get(i), *DECLARATION_KEYWORDS):
            # walk the declarators: name [: type] [= initializer], ...
            i += 1
            while get(i) is not None and get(i).is_token and get(i).action in a.Name:
                name = get(i).text
                i = skip_type(i + 1)
                if _is(get(i), '='):
                    i += 1
                    if _is(get(i), '>'):
                        break   # an arrow in a function type, give up
                    if is_array(i):
                        yield binding(name, i)
                        break
                    while get(i) is not None and not _is(get(i), ',', ';', *STATEMENT_KEYWORDS):
                        i += 1
                if not _is(get(i), ','):
                    break
                i += 1
