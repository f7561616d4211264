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
The ValueDocument and the operations on it.

A :class:`ValueDocument` holds the decoded array of a module, together with
everything that is needed to write the module back. Documents are never
modified: every edit operation returns a new document, with a new copy of the
value tree. The old document and the new one share no nodes, so an old
document can safely be kept, e.g. to compare with.

Nodes are addressed with an edit path: a sequence of object keys (strings)
and array indices (integers, or strings of digits)::

    >>> from tsdata.document import load_text, read, write, serialize
    >>> doc = load_text('export const items = [{name: "A"}];')
    >>> doc = write(doc, [0, "name"], "B")
    >>> read(doc, [0, "name"])
    <js.String 'B'>
    >>> print(serialize(doc), end='')
    export const items = [
      {
        name: "B"
      }
    ];

The top-level items of a document also have a stable identity, that does not
change when other items are removed. Use :func:`item_index` to find the
current index of an item and :func:`remove_item` to remove it.

"""

import collections
import itertools

from loguru import logger

from . import decode, scan
from .dom import js
from .dom.writer import Writer
from .exceptions import NotAnArray, PathNotFound


# source of item identities, unique within the process
_item_ids = itertools.count(1)


class ValueDocument(collections.namedtuple("ValueDocument",
        "root export_name quoted_keys import_header item_ids")):
    """An editable array of a module.

    ``root``
        The :class:`~tsdata.dom.js.Array` value tree.
    ``export_name``
        The exported name, used when writing the module.
    ``quoted_keys``
        Whether object keys are written between double quotes.
    ``import_header``
        The import statements of the module, written back unchanged.
    ``item_ids``
        A tuple with the identity of every item in ``root``.

    Use :meth:`new` to create a document from an array.

    """
    __slots__ = ()

    @classmethod
    def new(cls, root, export_name=scan.DEFAULT_EXPORT_NAME, quoted_keys=False, import_header=""):
        """Create a new document, giving every item a new identity.

        The ``root`` can be an :class:`~tsdata.dom.js.Array` or a Python list;
        the document gets its own copy.

        """
        root = _element(root)
        if not isinstance(root, js.Array):
            raise NotAnArray(root.kind)
        return cls(root, export_name, quoted_keys, import_header, _new_ids(len(root)))


def _new_ids(count):
    """Return a tuple of ``count`` new item identities."""
    return tuple(itertools.islice(_item_ids, count))


def _element(value):
    """Return a new value element for value, which is never shared."""
    node = js.create_element_from_value(value)
    return node.copy() if node is value else node


def segment_index(segment):
    """Return the array index for the path segment, or None."""
    if isinstance(segment, int) and not isinstance(segment, bool):
        return segment if segment >= 0 else None
    elif isinstance(segment, str) and segment.isdecimal():
        return int(segment)


def _key(segment):
    """Return the object key for the path segment, or None."""
    if isinstance(segment, str):
        return segment
    elif isinstance(segment, int) and not isinstance(segment, bool):
        return str(segment)


def _child(node, segment):
    """Return the child value of the node for the path segment, or None."""
    if isinstance(node, js.Object):
        key = _key(segment)
        if key is not None:
            return node.get(key)
    elif isinstance(node, js.Array):
        index = segment_index(segment)
        if index is not None and index < len(node):
            return node[index]


def _resolve(root, path, full_path=None):
    """Return the node at path; raises PathNotFound if it doesn't exist."""
    node = root
    for depth, segment in enumerate(path):
        node = _child(node, segment)
        if node is None:
            raise PathNotFound(path if full_path is None else full_path, depth)
    return node


def load_text(text):
    """Return a new ValueDocument for the exported array of the module text.

    Raises :class:`~tsdata.exceptions.NoExportedArray`,
    :class:`~tsdata.exceptions.NotAnArray` or
    :class:`~tsdata.exceptions.DecodeFailure` if that array can't be read.

    """
    header, binding = scan.scan(text)
    root = decode.decode(binding.literal_text)
    quoted_keys = decode.infer_quoted_keys(binding.literal_text)
    logger.debug("loaded {} items, export {!r}, quoted keys: {}",
                 len(root), binding.name, quoted_keys)
    return ValueDocument(root, binding.name, quoted_keys, header, _new_ids(len(root)))


def read(doc, path):
    """Return the value node at path.

    The node belongs to the document and must not be modified.

    """
    return _resolve(doc.root, list(path))


def write(doc, path, value):
    """Return a new document with the value at path replaced or created.

    The ``value`` can be a value element or a Python value (see
    :func:`~tsdata.dom.js.create_element_from_value`). All segments of the
    path but the last must exist. The last segment may be a new key of an
    object, or the length of an array, which appends the value.

    An empty path replaces the whole array, giving all items a new identity.

    """
    path = list(path)
    value = _element(value)
    if not path:
        if not isinstance(value, js.Array):
            raise NotAnArray(value.kind)
        logger.debug("replace root with {} items", len(value))
        return doc._replace(root=value, item_ids=_new_ids(len(value)))
    root = doc.root.copy()
    parent = _resolve(root, path[:-1], path)
    segment = path[-1]
    if isinstance(parent, js.Object) and _key(segment) is not None:
        parent.set(_key(segment), value)
    elif isinstance(parent, js.Array) and segment_index(segment) is not None \
            and segment_index(segment) <= len(parent):
        index = segment_index(segment)
        if index == len(parent):
            parent.append(value)
        else:
            parent[index] = value
    else:
        raise PathNotFound(path, len(path) - 1)
    ids = doc.item_ids
    if len(root) > len(ids):
        ids += _new_ids(1)
    logger.debug("write {}", path)
    return doc._replace(root=root, item_ids=ids)


def append_array_element(doc, path):
    """Return a new document with an element appended to the array at path.

    The new element is an empty object if the first element of the array is an
    object, otherwise an empty string.

    """
    path = list(path)
    root = doc.root.copy()
    array = _resolve(root, path)
    if not isinstance(array, js.Array):
        raise NotAnArray(array.kind)
    array.append(js.Object() if len(array) and isinstance(array[0], js.Object) else js.String(""))
    ids = doc.item_ids
    if not path:
        ids += _new_ids(1)
    logger.debug("append element to {}", path)
    return doc._replace(root=root, item_ids=ids)


def append_item(doc):
    """Return a new document with an item appended.

    The new item is an object with the keys of the first item, all with an
    empty string value. If there are no items, or the first item is not an
    object, the new item is an empty object.

    """
    root = doc.root.copy()
    keys = root[0].keys() if len(root) and isinstance(root[0], js.Object) else []
    root.append(js.Object(*(js.Property(key, js.String("")) for key in keys)))
    logger.debug("append item with keys {}", keys)
    return doc._replace(root=root, item_ids=doc.item_ids + _new_ids(1))


def item_index(doc, item_id):
    """Return the current index of the item with the identity, or None."""
    try:
        return doc.item_ids.index(item_id)
    except ValueError:
        return None


def remove_item(doc, item_id):
    """Return a new document with the item with the identity removed.

    The items after it move up one place. If there is no item with the
    identity (any more) the same document is returned.

    """
    index = item_index(doc, item_id)
    if index is None:
        logger.debug("item {} already removed", item_id)
        return doc
    root = doc.root.copy()
    del root[index]
    logger.debug("removed item {} at index {}", item_id, index)
    return doc._replace(root=root, item_ids=doc.item_ids[:index] + doc.item_ids[index+1:])


def serialize(doc, **options):
    """Return the text of the module for the document.

    Keyword arguments are given to the :class:`~tsdata.dom.writer.Writer`;
    ``quoted_keys`` defaults to the document's setting.

    """
    options.setdefault('quoted_keys', doc.quoted_keys)
    array = Writer(**options).write(doc.root)
    text = "export const {} = {};\n".format(doc.export_name, array)
    if doc.import_header:
        return doc.import_header + "\n\n" + text
    return text
