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
Literal and Expression languages and their transformations.

:class:`Literal` is the JSON5 superset of JSON: besides everything JSON
allows, it accepts unquoted identifier keys, single-quoted strings, trailing
commas, comments, hexadecimal numbers, numbers with a leading or trailing
decimal point or an explicit sign, ``Infinity`` and ``NaN``.

:class:`Expression` extends the Literal language with a small set of
side-effect free expressions: template strings, parentheses, the unary
operators ``-``, ``+`` and ``!``, the binary ``+`` operator, the TypeScript
``as const`` suffix, ``undefined``, numeric keys and the modern number forms
(binary, octal, numeric separators and BigInt).

Both transforms build a value tree of :mod:`tsdata.dom.js` elements. Nothing
is ever evaluated beyond the operators mentioned above; identifiers, calls,
member access, spread syntax, computed keys and every other construct make
the transform raise a ValueError describing the first problem found.

"""

__all__ = ('Literal', 'LiteralTransform', 'Expression', 'ExpressionTransform')

import math

from parce import Language, lexicon, skip, default_action
from parce.rule import arg, words
from parce.transform import Transform
import parce.action as a

from ..dom import js
from ..dom.writer import number_text, scalar_text


LITERAL_CONSTANTS = {
    'true': True,
    'false': False,
    'null': None,
}

ESCAPE_CHARS = {
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
    '0': '\0',
}

RE_IDENTIFIER = r'(?:[^\W\d]|\$)[\w$]*'
RE_ESCAPE = r'\\(?:x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|u\{[0-9a-fA-F]+\}|\r\n|[\s\S])'


class Literal(Language):
    """A JSON5 value."""
    @lexicon
    def root(cls):
        yield from cls.values()
        yield from cls.common()

    @classmethod
    def values(cls):
        yield r'\[', a.Delimiter.Bracket.Start, cls.array
        yield r'\{', a.Delimiter.Bracket.Start, cls.object
        yield '"', a.String.Start, cls.string('"')
        yield "'", a.String.Start, cls.string("'")
        yield from cls.numbers()
        yield words(LITERAL_CONSTANTS, r'\b', r'\b'), a.Name.Constant
        yield RE_IDENTIFIER, a.Name

    @classmethod
    def numbers(cls):
        yield (r'[-+]?(?:0[xX][0-9a-fA-F]+'
               r'|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?'
               r'|(?:Infinity|NaN)\b)'), a.Number

    @classmethod
    def common(cls):
        yield r'\s+', skip
        yield r'//[^\n]*', skip
        yield r'/\*[\s\S]*?\*/', skip
        yield default_action, a.Invalid

    @lexicon(consume=True)
    def array(cls):
        yield r'\]', a.Delimiter.Bracket.End, -1
        yield r',', a.Separator
        yield from cls.values()
        yield from cls.common()

    @lexicon(consume=True)
    def object(cls):
        yield r'\}', a.Delimiter.Bracket.End, -1
        yield r',', a.Separator
        yield r':', a.Delimiter
        yield from cls.values()
        yield from cls.common()

    @lexicon(consume=True)
    def string(cls):
        yield arg(), a.String.End, -1
        yield RE_ESCAPE, a.String.Escape
        yield r'\n', a.Invalid
        yield default_action, a.String


class Expression(Literal):
    """A literal value that may contain simple constant expressions."""
    @classmethod
    def values(cls):
        yield r'\(', a.Delimiter.Bracket.Start, cls.paren
        yield '`', a.String.Start, cls.template
        yield r'[-+!]', a.Operator
        yield from super().values()

    @classmethod
    def numbers(cls):
        yield (r'(?:0[xX](?:_?[0-9a-fA-F])+|0[oO](?:_?[0-7])+|0[bB](?:_?[01])+)n?'
               r'|\d+(?:_\d+)*n'
               r'|(?:\d+(?:_\d+)*(?:\.(?:\d+(?:_\d+)*)?)?|\.\d+(?:_\d+)*)(?:[eE][-+]?\d+(?:_\d+)*)?'
               r'|(?:Infinity|NaN)\b'), a.Number

    @lexicon(consume=True)
    def paren(cls):
        yield r'\)', a.Delimiter.Bracket.End, -1
        yield from cls.values()
        yield from cls.common()

    @lexicon(consume=True)
    def template(cls):
        yield '`', a.String.End, -1
        yield r'\$\{', a.Delimiter.Template, cls.substitution
        yield RE_ESCAPE, a.String.Escape
        yield default_action, a.String

    @lexicon(consume=True)
    def substitution(cls):
        yield r'\}', a.Delimiter.Template, -1
        yield from cls.values()
        yield from cls.common()


class LiteralTransform(Transform):
    """Transform a Literal to a value element.

    Raises ValueError if the text contains anything that is not a JSON5 value.

    """
    #: identifiers that denote a value
    constants = LITERAL_CONSTANTS

    ## helper methods
    def unexpected(self, item):
        """Return a ValueError to raise for an unexpected token or item."""
        if item.is_token:
            return ValueError("unexpected {} at position {}".format(repr(item.text), item.pos))
        return ValueError("unexpected {}".format(item.name))

    def check_closed(self, items, name, action=a.Delimiter.Bracket.End):
        """Raise ValueError if the context is not terminated by ``action``."""
        if len(items) < 2 or not items[-1].is_token or items[-1].action is not action:
            raise ValueError("unterminated {} at position {}".format(name, items[0].pos))

    def groups(self, items):
        """Split the items at the separators and return the list of groups.

        A trailing separator is allowed.

        """
        group = []
        groups = [group]
        for i in items:
            if i.is_token and i.action is a.Separator:
                group = []
                groups.append(group)
            else:
                group.append(i)
        if not groups[-1]:
            del groups[-1]
        return groups

    def number(self, text):
        """Return the int or float value of a number token's text."""
        text = text.replace('_', '')
        sign = -1 if text[0] == '-' else 1
        text = text.lstrip('-+')
        if text == 'Infinity':
            return sign * math.inf
        elif text == 'NaN':
            return math.nan
        if text.endswith('n'):
            text = text[:-1]
        radix = {'0x': 16, '0o': 8, '0b': 2}.get(text[:2].lower())
        if radix:
            return sign * int(text[2:], radix)
        elif any(c in text for c in '.eE'):
            return sign * float(text)
        return sign * int(text)

    def unescape(self, text):
        """Return the character an escape sequence denotes."""
        c = text[1:]
        if c[0] == 'x' and len(c) == 3:
            return chr(int(c[1:], 16))
        elif c[0] == 'u' and len(c) > 1:
            return chr(int(c[1:].strip('{}'), 16))
        elif c in ('\n', '\r\n', '\r', '\u2028', '\u2029'):
            return ''   # line continuation
        elif c in 'xu123456789':
            raise ValueError("invalid escape sequence: {}".format(repr(text)))
        return ESCAPE_CHARS.get(c, c)

    def text(self, items):
        """Return the text of the string tokens, with escapes resolved."""
        def gen():
            for t in items:
                if t.action is a.String.Escape:
                    yield self.unescape(t.text)
                elif t.action is a.Invalid:
                    raise self.unexpected(t)
                else:
                    yield t.text
        text = ''.join(gen())
        # combine surrogate pairs that were escaped separately
        return text.encode('utf-16', 'surrogatepass').decode('utf-16', 'surrogatepass')

    def key(self, items):
        """Return the key string of an object property."""
        if not items:
            raise ValueError("missing key")
        elif len(items) > 1:
            raise self.unexpected(items[1])
        item = items[0]
        if not item.is_token:
            if item.name == 'string':
                return item.obj
        elif item.action in a.Name:
            return item.text
        raise self.unexpected(item)

    def primary(self, item):
        """Return the value element for a single token or item."""
        if item.is_token:
            if item.action is a.Number:
                return js.Number(self.number(item.text))
            elif item.action in a.Name and item.text in self.constants:
                return js.s(self.constants[item.text])
        elif item.name == 'string':
            return js.String(item.obj)
        elif item.name in ('array', 'object'):
            return item.obj
        raise self.unexpected(item)

    def value(self, items):
        """Return the value element the items represent."""
        if not items:
            raise ValueError("missing value")
        node = self.primary(items[0])
        if len(items) > 1:
            raise self.unexpected(items[1])
        return node

    ### transforming methods
    def root(self, items):
        return self.value(items)

    def array(self, items):
        self.check_closed(items, "array")
        return js.Array(*(self.value(group) for group in self.groups(items[1:-1])))

    def object(self, items):
        self.check_closed(items, "object")
        node = js.Object()
        for group in self.groups(items[1:-1]):
            if not group:
                raise ValueError("missing property")
            for n, i in enumerate(group):
                if i.is_token and i.action is a.Delimiter:
                    break
            else:
                raise ValueError("expected ':' after {}".format(
                    repr(group[0].text) if group[0].is_token else group[0].name))
            # a duplicate key keeps its position, but gets the later value
            node.set(self.key(group[:n]), self.value(group[n+1:]))
        return node

    def string(self, items):
        self.check_closed(items, "string", a.String.End)
        return self.text(items[1:-1])


class ExpressionTransform(LiteralTransform):
    """Transform an Expression to a value element.

    Raises ValueError if the text contains anything that is not a literal or
    one of the few supported constant expressions.

    """
    constants = dict(LITERAL_CONSTANTS, undefined=None)

    ## helper methods
    def key(self, items):
        """Reimplemented to also allow numbers as key."""
        if len(items) == 1 and items[0].is_token and items[0].action is a.Number:
            return number_text(self.number(items[0].text))
        return super().key(items)

    def primary(self, item):
        """Reimplemented to support parentheses and templates."""
        if not item.is_token:
            if item.name == 'paren':
                return item.obj
            elif item.name == 'template':
                return js.String(item.obj)
        return super().primary(item)

    def value(self, items):
        """Reimplemented to evaluate operators and ``as const``."""
        items = list(items)
        if len(items) > 2 and all(i.is_token and i.action in a.Name
                                  for i in items[-2:]) \
                and [i.text for i in items[-2:]] == ['as', 'const']:
            del items[-2:]
        # split at binary plus operators
        operands = [[]]
        for i in items:
            if i.is_token and i.text == '+' and i.action is a.Operator \
                    and operands[-1] and not self.is_operator(operands[-1][-1]):
                operands.append([])
            else:
                operands[-1].append(i)
        result = self.operand(operands[0])
        for items in operands[1:]:
            result = self.add(result, self.operand(items))
        return result

    def is_operator(self, item):
        """Return True if the item is an operator token."""
        return item.is_token and item.action is a.Operator

    def operand(self, items):
        """Return the value of a primary with optional unary operators."""
        for n, i in enumerate(items):
            if not self.is_operator(i):
                break
        else:
            raise ValueError("missing value")
        node = self.primary(items[n])
        if len(items) > n + 1:
            raise self.unexpected(items[n + 1])
        for op in reversed(items[:n]):
            node = self.unary(op, node)
        return node

    def unary(self, op, node):
        """Apply the unary operator to the node."""
        if op.text == '!':
            if isinstance(node, (js.Array, js.Object)):
                return js.Bool(False)
            value = node.to_python()
            return js.Bool(not value or value != value)     # NaN is falsy
        elif isinstance(node, js.Number):
            return js.Number(-node.head if op.text == '-' else node.head)
        raise ValueError("operator {} at position {} needs a number".format(repr(op.text), op.pos))

    def add(self, left, right):
        """Add two numbers or concatenate strings with scalars."""
        for node in left, right:
            if isinstance(node, (js.Array, js.Object)):
                raise ValueError("can't add {} values".format(node.kind))
        if isinstance(left, js.String) or isinstance(right, js.String):
            return js.String(scalar_text(left) + scalar_text(right))
        elif isinstance(left, js.Number) and isinstance(right, js.Number):
            return js.Number(left.head + right.head)
        raise ValueError("can't add {} and {} values".format(left.kind, right.kind))

    ### transforming methods
    def paren(self, items):
        self.check_closed(items, "parenthesized expression")
        return self.value(items[1:-1])

    def template(self, items):
        self.check_closed(items, "template", a.String.End)
        def gen():
            tokens = []
            for i in items[1:-1]:
                if i.is_token:
                    tokens.append(i)
                else:
                    yield self.text(tokens)
                    yield scalar_text(i.obj)
                    tokens.clear()
            yield self.text(tokens)
        return ''.join(gen())

    def substitution(self, items):
        self.check_closed(items, "template substitution", a.Delimiter.Template)
        node = self.value(items[1:-1])
        if isinstance(node, (js.Array, js.Object)):
            raise ValueError("can't substitute {} value in template".format(node.kind))
        return node
