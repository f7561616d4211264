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
This module defines a :class:`Node` class, the list based tree type the value
elements of :mod:`tsdata.dom` are built on.

A Node is a Python :class:`list` of child nodes that also knows its parent.
The parent is referred to weakly, so a value tree has no reference cycles and
a deep copy is just a recursive :meth:`Node.copy`.

"""

import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """A list of child nodes that knows its parent.

    Adding nodes to a node sets the parent of the nodes; removing nodes does
    not unset the parent of the removed nodes. A node always evaluates to
    True, even if it has no children.

    Nodes compare by identity, so ``node.parent.index(node)`` finds the node
    itself and never an equal sibling. Use :meth:`equals` to compare the
    contents of two value trees.

    """

    __slots__ = ('__weakref__', '_parent')

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        self._parent = _NO_PARENT
        if children:
            list.extend(self, children)
            for node in self:
                node._parent = weakref.ref(self)

    @property
    def parent(self):
        """The parent Node or None."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def copy(self):
        """Return a deep copy, without parent and sharing no nodes."""
        return type(self)(*(n.copy() for n in self))

    def append(self, node):
        node._parent = weakref.ref(self)
        list.append(self, node)

    def extend(self, nodes):
        index = len(self)
        list.extend(self, nodes)
        for node in self[index:]:
            node._parent = weakref.ref(self)

    def insert(self, index, node):
        node._parent = weakref.ref(self)
        list.insert(self, index, node)

    def __setitem__(self, k, new):
        """Set self[k] to the node(s) in ``new``, which get this node as parent."""
        if isinstance(k, slice):
            new = tuple(new)
            for node in new:
                node._parent = weakref.ref(self)
        else:
            new._parent = weakref.ref(self)
        list.__setitem__(self, k, new)

    def equals(self, other):
        """Return True if the other node has the same type, the same
        :meth:`body_equals` result and equal children.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Reimplement to compare the node's own value; returns True."""
        return True

    def descendants(self, reverse=False):
        """Iterate over all the descendants of this node, depth first.

        If ``reverse`` is set to True, the children of every node are visited
        backwards.

        """
        iterate = reversed if reverse else iter
        stack = []
        gen = iterate(self)
        while True:
            for n in gen:
                yield n
                if len(n):
                    stack.append(gen)
                    gen = iterate(n)
                    break
            else:
                if stack:
                    gen = stack.pop()
                else:
                    break

    def dump(self, file=None, style=None, last=()):
        """Print the tree below this node, one node per line.

        The file object defaults to stdout, and the style to "round"; see
        ``DUMP_STYLES`` for the available styles.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]
        prefix = ''.join(d[int(l)] for l in last[:-1])
        if last:
            prefix += d[2 + int(last[-1])]
        print(prefix + repr(self), file=file)
        for i, n in enumerate(self, 1):
            n.dump(file, style, last + (i == len(self),))
