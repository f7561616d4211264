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
This module defines the :class:`Element` class.

An Element describes a value and can have child elements. An Element can
have a ``head`` value, which is the Python value the element represents (for
example the text of a string, or the key of an object property).

Elements are built by the transforms in :mod:`tsdata.lang.literal` when a
literal is decoded, or manually using the normal constructor. You can specify
all child elements in the constructor, so you can build a whole value tree in
one expression.

Writing an element out as source text is done by the :mod:`.writer` module.

:class:`Element` inherits from :class:`~tsdata.node.Node`, and thus from
:class:`list`, to build a reliable and easy to navigate tree structure.

"""

import reprlib

from ..node import Node


class Element(Node):
    """Base class for all element types.

    The Element has no head value. Child elements can be specified directly
    as arguments to the constructor.

    """
    __slots__ = ()

    head = None

    def __repr__(self):
        def result():
            # class name with last part module prepended
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
        return "<{}>".format(" ".join(result()))

    def repr_head(self):
        """Return a representation for the head.

        The default implementation returns None.

        """
        return None


class HeadElement(Element):
    """Element that has a fixed head value, set as a class attribute."""
    __slots__ = ()

    def repr_head(self):
        return repr(self.head)


class TextElement(Element):
    """Element that has a variable/writable head value.

    This value must be given to the constructor, and can be modified later.

    If you want to, you can implement the :meth:`check_head` method, which by
    default returns True, to perform some checking on the ``head`` value of
    this element. This prevents forgetting to set the ``head`` value on manual
    construction, which can lead to unexpected and difficult to debug bugs.
    This method is not called when an element is copied, or when the ``head``
    attribute is modified manually later.

    """
    __slots__ = ('head',)

    def __new__(cls, head, *children):
        if not cls.check_head(head):
            raise TypeError("invalid head value for {}: {}".format(cls.__name__, repr(head)))
        return super().__new__(cls)

    @classmethod
    def _factory(cls, head, *children):
        """Factory bypassing the ``check_head`` check."""
        instance = super().__new__(cls)
        instance.__init__(head, *children)
        return instance

    def __init__(self, head, *children):
        self.head = head
        super().__init__(*children)

    def repr_head(self):
        """Return a repr value for our head value."""
        return reprlib.repr(self.head)

    @classmethod
    def check_head(cls, head):
        """Returns whether the proposed head value is valid."""
        ### Raise error when forgetting the head value, and abusively using the first child
        return not isinstance(head, Element)

    def body_equals(self, other):
        """Compares the head values, called by :meth:`Node.equals() <tsdata.node.Node.equals>`."""
        return self.head == other.head

    def copy(self):
        """Return a deep copy of this element."""
        return self._factory(self.head, *(n.copy() for n in self))
