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
Module language and transformation definition.

The :class:`Module` language lexes a whole JavaScript or TypeScript module.
It is the JavaScript language of *parce*, extended to recognize top-level
import statements and the TypeScript ``as const`` suffix, and to lex comments
as single tokens. Like every *parce* language it never fails: text it does
not understand is simply skipped.

The :class:`ModuleTransform` flattens the result into a list of top-level
parts: tokens that are not nested in any bracketed or quoted region, and a
:class:`Span` for every such region. The :mod:`tsdata.scan` module walks
this list to find the exported array.

"""

__all__ = ('Module', 'ModuleTransform', 'Span')

import collections
import re

from parce import lexicon
from parce.lang.javascript import JavaScript
from parce.transform import Transform
import parce.action as a


#: A complete import statement, starting at the beginning of a line. The
#: statement ends after the module specifier (and an optional import
#: attributes clause), or, for ``import x = require(...)`` like forms, at the
#: end of the line.
RE_IMPORT_STATEMENT = (
    r'^import\b(?![ \t]*[(.])'
    r'(?:'
        r'(?:(?!\n[ \t]*(?:import|export|const|let|var)\b)[^;\'"])*?'
        r'(?:"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\')'
        r'(?:\s*(?:with|assert)\s*\{[^{}]*\})?[ \t]*;?'
    r'|[^;\n]*;?)'
)


class Module(JavaScript):
    """A JavaScript or TypeScript module."""
    @lexicon(re_flags=re.MULTILINE)
    def root(cls):
        yield RE_IMPORT_STATEMENT, a.Keyword.Import
        yield r'\bas\s+const\b', a.Keyword
        # comments as single tokens, also when unterminated at the end
        yield r'//[^\n]*', a.Comment
        yield r'/\*[\s\S]*?(?:\*/|\Z)', a.Comment
        yield from super().root


class Span(collections.namedtuple("Span", "name pos end")):
    """A bracketed, quoted or template region of the module text.

    The ``name`` is the name of the lexicon, e.g. ``"array"`` for an array
    literal or ``"scope"`` for a block. The ``end`` is the end of the last
    token in the region (normally the closing delimiter), None if the region
    is empty.

    """
    __slots__ = ()
    is_token = False


class ModuleTransform(Transform):
    """Transform a Module to the list of its top-level parts.

    Comments are left out.

    """
    def root(self, items):
        parts = []
        for i in items:
            if i.is_token:
                if i.action not in a.Comment:
                    parts.append(i)
            else:
                # the opening token of a region is in the parent context
                opener = parts.pop()
                parts.append(Span(i.name, opener.pos, i.obj))
        return parts

    def end(self, items):
        """Return the end position of a region."""
        if items:
            last = items[-1]
            return last.end if last.is_token else last.obj

    array = object = scope = paren = call = index = end
    string = template_literal = template_literal_expression = end
