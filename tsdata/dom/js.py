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
Elements for JavaScript literal values.

Six kinds of value exist: :class:`Array`, :class:`Object`, :class:`String`,
:class:`Number`, :class:`Bool` and :class:`Null`. They all inherit the
:class:`Value` mixin. An Object has :class:`Property` children, each holding
the key in its head value and the value as its only child.

Besides the elements a few functions are provided to make it easier to
manually construct value trees. For example::

    >>> from tsdata.dom.js import s
    >>> s(True)
    <js.Bool True>
    >>> s([{"name": "A", "size": 3}]).dump()
    <js.Array (1 child)>
     ╰╴<js.Object (2 children)>
        ├╴<js.Property 'name' (1 child)>
        │  ╰╴<js.String 'A'>
        ╰╴<js.Property 'size' (1 child)>
           ╰╴<js.Number 3>
    >>> s([{"name": "A", "size": 3}]).to_python()
    [{'name': 'A', 'size': 3}]

"""

import math

from . import element


class Value:
    """Mixin class for all literal value elements."""
    __slots__ = ()

    #: The name of the kind of value, used in messages.
    kind = None

    def to_python(self):
        """Return the plain Python equivalent of this value."""
        raise NotImplementedError


class Array(Value, element.Element):
    """An array ``[ ... ]``, its children are values."""
    __slots__ = ()
    kind = "array"

    def to_python(self):
        return [n.to_python() for n in self]


class Object(Value, element.Element):
    """An object ``{ ... }``, its children are :class:`Property` elements.

    Keys are unique and keep their order.

    """
    __slots__ = ()
    kind = "object"

    def find(self, key):
        """Return the Property with the key, or None."""
        for p in self:
            if p.head == key:
                return p

    def get(self, key, default=None):
        """Return the value element for the key, or ``default``."""
        p = self.find(key)
        return default if p is None else p.value

    def set(self, key, value):
        """Set the value element for the key.

        An existing property keeps its position, a new one is appended.

        """
        p = self.find(key)
        if p is None:
            self.append(Property(key, value))
        else:
            p.value = value

    def keys(self):
        """Return the list of keys."""
        return [p.head for p in self]

    def values(self):
        """Return the list of value elements."""
        return [p.value for p in self]

    def items(self):
        """Return the list of (key, value element) tuples."""
        return [(p.head, p.value) for p in self]

    def to_python(self):
        return {p.head: p.value.to_python() for p in self}


class Property(element.TextElement):
    """A ``key: value`` pair in an Object.

    The key is the head value, the value element is the only child.

    """
    __slots__ = ()

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    @property
    def value(self):
        """The value element."""
        return self[0]

    @value.setter
    def value(self, node):
        if len(self):
            self[0] = node
        else:
            self.append(node)


class String(Value, element.TextElement):
    """A string, the head value is the (unescaped) text."""
    __slots__ = ()
    kind = "string"

    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)

    def to_python(self):
        return self.head


class Number(Value, element.TextElement):
    """A number, the head value is an int or a float.

    Infinity and NaN are represented by the float values ``inf`` and ``nan``.

    """
    __slots__ = ()
    kind = "number"

    @classmethod
    def check_head(cls, head):
        return isinstance(head, (int, float)) and not isinstance(head, bool)

    def body_equals(self, other):
        if isinstance(self.head, float) and isinstance(other.head, float) \
                and math.isnan(self.head) and math.isnan(other.head):
            return True
        return self.head == other.head

    def to_python(self):
        return self.head


class Bool(Value, element.TextElement):
    """``true`` or ``false``, the head value is True or False."""
    __slots__ = ()
    kind = "bool"

    @classmethod
    def check_head(cls, head):
        return isinstance(head, bool)

    def to_python(self):
        return self.head


class Null(Value, element.HeadElement):
    """``null``."""
    __slots__ = ()
    kind = "null"

    def repr_head(self):
        return None

    def to_python(self):
        return None


def path(node):
    """Return the edit path (a list of keys and indices) of the value node.

    The path starts at the root of the tree the node is in. An empty list is
    returned for the root itself.

    """
    result = []
    while True:
        parent = node.parent
        if parent is None:
            break
        if isinstance(parent, Property):
            result.append(parent.head)
            node = parent.parent
            if node is None:
                break
        else:
            result.append(parent.index(node))
            node = parent
    return result[::-1]


def create_element_from_value(value):
    """Convert a regular Python value to a value Element node.

    Python bool, int, float, str and None values are converted into Bool,
    Number, String and Null elements respectively. A list or tuple is
    converted into an Array, a dict into an Object (with the keys converted
    to strings).

    Value elements are returned unchanged, unless they already have a parent,
    in which case a copy is returned.

    A ValueError is raised when there is no conversion for the value's type.

    """
    if isinstance(value, Value):
        return value if value.parent is None else value.copy()
    try:
        factory = _element_mapping[type(value)]
    except KeyError:
        raise ValueError("Can't convert value to Element node: {}".format(repr(value))) from None
    return factory(value)


def s(arg):
    """Same as :func:`create_element_from_value`."""
    return create_element_from_value(arg)


# used in the create_element_from_value function
_element_mapping = {
    bool: Bool,
    int: Number,
    float: Number,
    str: String,
    type(None): (lambda value: Null()),
    list: (lambda value: Array(*map(s, value))),
    tuple: (lambda value: Array(*map(s, value))),
    dict: (lambda value: Object(*(Property(str(k), s(v)) for k, v in value.items()))),
}
