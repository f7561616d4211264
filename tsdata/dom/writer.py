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
Functionality to pretty-print a value tree as JavaScript source text.

The output is deterministic: the same tree always results in the same text.
Empty arrays and objects are written inline, other arrays and objects are
written with one child per line::

    >>> from tsdata.dom.js import s
    >>> from tsdata.dom.writer import Writer
    >>> print(Writer().write(s([{"name": "A", "tags": []}])))
    [
      {
        name: "A",
        tags: []
      }
    ]

"""

import math
import re

from parce.util import Dispatcher

from . import js


_ESCAPES = {
    '\\': '\\\\',
    '"': '\\"',
    '\n': '\\n',
    '\r': '\\r',
    '\t': '\\t',
    '\b': '\\b',
    '\f': '\\f',
    '\v': '\\v',
}


_escape_re = re.compile(r'[\\"\x00-\x1f\u2028\u2029]')

_identifier_re = re.compile(r'(?:[^\W\d]|\$)[\w$]*')


def _escape(match):
    c = match.group()
    try:
        return _ESCAPES[c]
    except KeyError:
        return '\\u{:04x}'.format(ord(c))


def number_text(value):
    """Return the JavaScript textual form of an int or float value."""
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        elif math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        elif value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        # Python writes 1e-07 where JavaScript writes 1e-7
        return re.sub(r'e([-+])0*(\d)', r'e\1\2', text)
    return str(value)


def scalar_text(node):
    """Return the JavaScript ``String()`` representation of a scalar value.

    This is the text a scalar contributes when concatenated to a string.

    """
    if isinstance(node, js.String):
        return node.head
    elif isinstance(node, js.Number):
        return number_text(node.head)
    elif isinstance(node, js.Bool):
        return 'true' if node.head else 'false'
    elif isinstance(node, js.Null):
        return 'null'
    raise ValueError("not a scalar value: {}".format(repr(node)))


class Writer:
    """Writes a value tree as source text.

    Writing preferences can be given on instantiation or by setting the
    attributes of the same name.

    Call :meth:`write` to get the text output of a node.

    """
    def __init__(self,
            indent_width = 2,
            quoted_keys = False,
            escape_strings = False,
            quote_invalid_keys = True,
        ):

        #: the number of spaces per nesting level
        self.indent_width = indent_width

        #: whether object keys are written between double quotes
        self.quoted_keys = quoted_keys

        #: whether backslashes, double quotes and control characters in
        #: strings are escaped (by default they are written unchanged)
        self.escape_strings = escape_strings

        #: whether keys that are not identifiers are double-quoted (and
        #: escaped) even if :attr:`quoted_keys` is False
        self.quote_invalid_keys = quote_invalid_keys

    def write(self, node, level=0):
        """Get the text output of the node, starting at indent ``level``.

        Only the lines after the first line are indented.

        """
        return self._write(type(node), node, level)

    @Dispatcher
    def _write(self, cls, node, level):
        # unsupported value kinds are written best-effort
        return str(node.head)

    @_write(js.Array)
    def write_array(self, node, level):
        if not len(node):
            return '[]'
        return self._block('[', ']', (self.write(n, level + 1) for n in node), level)

    @_write(js.Object)
    def write_object(self, node, level):
        if not len(node):
            return '{}'
        return self._block('{', '}', (
            '{}: {}'.format(self.write_key(p.head), self.write(p.value, level + 1))
            for p in node), level)

    @_write(js.String)
    def write_string(self, node, level):
        text = node.head
        if self.escape_strings:
            text = _escape_re.sub(_escape, text)
        return '"{}"'.format(text)

    @_write(js.Number)
    def write_number(self, node, level):
        return number_text(node.head)

    @_write(js.Bool)
    def write_bool(self, node, level):
        return 'true' if node.head else 'false'

    @_write(js.Null)
    def write_null(self, node, level):
        return 'null'

    def write_key(self, key):
        """Return the key, double-quoted if :attr:`quoted_keys` is True.

        Otherwise the key is written bare, except for a key that is not an
        identifier when :attr:`quote_invalid_keys` is True.

        """
        if self.quoted_keys:
            return '"{}"'.format(key)
        elif self.quote_invalid_keys and not _identifier_re.fullmatch(key):
            return '"{}"'.format(_escape_re.sub(_escape, key))
        return key

    def _block(self, head, tail, lines, level):
        """Return the lines, one per line, separated by commas, between head and tail."""
        indent = ' ' * (self.indent_width * (level + 1))
        body = ',\n'.join(indent + line for line in lines)
        return '{}\n{}\n{}{}'.format(head, body, ' ' * (self.indent_width * level), tail)
