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
The Session keeps the document a user is editing.

A Session holds one live :class:`~tsdata.document.ValueDocument` and applies
the operations of :mod:`tsdata.document` to it. Every operation either fully
succeeds or leaves the document as it was; a failure is logged and its
message stored in :attr:`Session.error`, and the operation returns False.

Removing an item takes a while: :meth:`Session.remove_item` marks the item as
pending removal, and only after :attr:`Session.removal_delay` seconds
:meth:`Session.process_pending` really removes it. In the meantime the item
is still in the document, but it can't be edited anymore. Pending items are
tracked by their identity, so removing an item never affects the other
pending removals.

"""

import asyncio
import collections
import functools
import time

from loguru import logger

from . import document, registry
from .exceptions import (
    DecodeFailure, FileTypeRejected, ItemFrozen, PathNotFound, TsDataError,
    UnknownItem)


PendingRemoval = collections.namedtuple("PendingRemoval", "item_id due")
PendingRemoval.__doc__ = "An item that will be removed."
PendingRemoval.item_id.__doc__ = "The identity of the item."
PendingRemoval.due.__doc__ = "The clock time at which the item will be removed."


def operation(func):
    """Decorator for Session methods that catches and records TsDataError."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        try:
            result = func(self, *args, **kwargs)
        except TsDataError as e:
            self.error = str(e)
            logger.error("{} failed: {}", func.__name__, e)
            return False
        self.error = None
        return result
    return wrapper


class Session:
    """An editing session of one document.

    The ``clock`` is a function returning the current time in seconds, by
    default :func:`time.monotonic`. Other keyword arguments are given to the
    :class:`~tsdata.dom.writer.Writer` when the document is serialized.

    """

    #: seconds between removing an item and the actual removal
    removal_delay = 0.3

    #: the filename used for downloading when no file was uploaded
    default_filename = "data.ts"

    def __init__(self, clock=time.monotonic, **writer_options):
        self.clock = clock
        self.writer_options = writer_options
        #: the current ValueDocument, None if nothing was loaded
        self.document = None
        #: the filename of the last successful upload
        self.filename = None
        #: the message of the last failed operation, None if it succeeded
        self.error = None
        self._pending = {}

    def _document(self):
        """Return the current document; raises TsDataError if there is none."""
        if self.document is None:
            raise TsDataError("no document loaded")
        return self.document

    def _check_path(self, path):
        """Raise ItemFrozen if the path is in an item pending removal."""
        doc = self._document()
        if not self._pending:
            return
        path = list(path)
        if not path:
            raise ItemFrozen(next(iter(self._pending)))
        index = document.segment_index(path[0])
        if index is not None and index < len(doc.item_ids) and doc.item_ids[index] in self._pending:
            raise ItemFrozen(doc.item_ids[index])

    @operation
    def upload(self, filename, data):
        """Load a module from an uploaded file.

        The ``data`` is the file contents, as text or UTF-8 encoded bytes.
        Only files with a ``.ts``, ``.tsx``, ``.js`` or ``.jsx`` extension are
        accepted.

        """
        if not registry.accepts(filename):
            raise FileTypeRejected(filename)
        if isinstance(data, bytes):
            try:
                data = data.decode('utf-8')
            except UnicodeDecodeError as e:
                raise DecodeFailure("not UTF-8 text: {}".format(e)) from e
        self._load(data)
        self.filename = filename
        return True

    @operation
    def load(self, text):
        """Load a module from text."""
        self._load(text)
        return True

    def _load(self, text):
        self.document = document.load_text(text)
        self._pending.clear()
        logger.debug("session loaded document with {} items", len(self.document.root))

    @operation
    def read(self, path):
        """Return the value node at path."""
        return document.read(self._document(), path)

    @operation
    def write(self, path, value):
        """Replace or create the value at path."""
        self._check_path(path)
        self.document = document.write(self._document(), path, value)
        return True

    @operation
    def append_array_element(self, path):
        """Append an element to the array at path."""
        path = list(path)
        if path:
            self._check_path(path)
        self.document = document.append_array_element(self._document(), path)
        return True

    @operation
    def append_item(self):
        """Append an item with the keys of the first item."""
        self.document = document.append_item(self._document())
        return True

    @operation
    def item_id(self, index):
        """Return the identity of the item at index."""
        ids = self._document().item_ids
        i = document.segment_index(index)
        if i is None or i >= len(ids):
            raise PathNotFound([index], 0)
        return ids[i]

    @operation
    def remove_item(self, item_id):
        """Schedule the removal of the item; returns a PendingRemoval.

        Removing an item that is already pending removal returns the existing
        PendingRemoval. There is no way to cancel a removal.

        """
        try:
            return self._pending[item_id]
        except KeyError:
            pass
        if document.item_index(self._document(), item_id) is None:
            raise UnknownItem(item_id)
        pending = self._pending[item_id] = PendingRemoval(item_id, self.clock() + self.removal_delay)
        logger.debug("item {} will be removed at {}", item_id, pending.due)
        return pending

    def pending(self):
        """Return a tuple of the PendingRemoval records, in scheduling order."""
        return tuple(self._pending.values())

    def is_pending(self, item_id):
        """Return True if the item is pending removal."""
        return item_id in self._pending

    def process_pending(self, now=None):
        """Remove the items whose removal is due; returns a list of their records.

        If ``now`` is not given, the clock is asked for the current time.

        """
        if now is None:
            now = self.clock()
        due = [p for p in self._pending.values() if p.due <= now]
        for p in due:
            del self._pending[p.item_id]
            self.document = document.remove_item(self.document, p.item_id)
            logger.debug("item {} removed", p.item_id)
        return due

    async def settle(self):
        """Wait until all pending removals have been processed."""
        while self._pending:
            delay = min(p.due for p in self._pending.values()) - self.clock()
            if delay > 0:
                await asyncio.sleep(delay)
            self.process_pending()

    @operation
    def serialize(self):
        """Return the module text for the current document."""
        return document.serialize(self._document(), **self.writer_options)

    def output_filename(self):
        """Return the name of the uploaded file, or the default filename."""
        return self.filename or self.default_filename

    @operation
    def download(self):
        """Return a two-tuple (filename, text) to save the document."""
        return self.output_filename(), document.serialize(self._document(), **self.writer_options)
