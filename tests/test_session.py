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
Test the editing Session.
"""

### find tsdata
import asyncio
import sys
sys.path.insert(0, '.')

from tsdata import Session
from tsdata.logging_config import setup_logging


module = '''\
import type { Item } from "./types";

export const items: Item[] = [
  { name: "A" },
  { name: "B" },
  { name: "C" },
];
'''


class Clock:
    """A clock that only moves when told so."""
    def __init__(self):
        self.time = 0.0

    def __call__(self):
        return self.time


def names(session):
    return [item["name"] for item in session.document.root.to_python()]


def check_remove():
    """Test removing items after the delay."""
    clock = Clock()
    session = Session(clock)
    assert session.load(module)
    first = session.item_id(0)
    pending = session.remove_item(first)
    assert pending.item_id == first
    assert pending.due == session.removal_delay
    assert session.is_pending(first)
    # removing twice keeps the first schedule
    clock.time = 0.1
    assert session.remove_item(first) is pending
    # nothing happens before the delay
    assert session.process_pending() == []
    assert names(session) == ["A", "B", "C"]
    clock.time = 1.0
    assert session.process_pending() == [pending]
    assert names(session) == ["B", "C"]
    assert session.pending() == ()
    assert not session.is_pending(first)


def check_concurrent_removals():
    """Test that two pending removals never affect each other."""
    clock = Clock()
    session = Session(clock)
    session.load(module)
    a, b, c = (session.item_id(i) for i in range(3))
    session.remove_item(a)
    clock.time = 0.2
    session.remove_item(c)
    clock.time = 0.35
    assert [p.item_id for p in session.process_pending()] == [a]
    assert names(session) == ["B", "C"]
    # C moved from index 2 to index 1, but is still pending
    assert session.is_pending(c)
    assert session.item_id(1) == c
    assert session.write([1, "name"], "X") is False
    assert "being removed" in session.error
    assert session.write([0, "name"], "Y") is True
    clock.time = 1.0
    assert [p.item_id for p in session.process_pending()] == [c]
    assert names(session) == ["Y"]
    assert session.document.item_ids == (b,)


def check_frozen():
    """Test that items pending removal can't be edited."""
    session = Session(Clock())
    session.load(module)
    item = session.item_id(1)
    session.remove_item(item)
    assert session.write([1, "name"], "X") is False
    assert session.write(["1", "name"], "X") is False
    assert session.write([], []) is False
    assert session.append_array_element([1]) is False
    assert session.error is not None
    assert names(session) == ["A", "B", "C"]
    # other items and appending items are still allowed
    assert session.write([2, "name"], "X") is True
    assert session.error is None
    assert session.append_item() is True
    assert session.append_array_element([]) is True
    assert len(session.document.root) == 5


def test_main():
    check_remove()
    check_concurrent_removals()
    check_frozen()


def test_upload():
    session = Session()
    assert session.upload("items.json", module) is False
    assert "items.json" in session.error
    assert session.document is None
    assert session.upload("items.ts", module.encode('utf-8')) is True
    assert session.filename == "items.ts"
    assert session.upload("other.ts", b"export default ['\xff'];") is False
    assert "UTF-8" in session.error
    assert session.upload("other.ts", "export const a = [foo()];") is False
    # the previous document and filename are kept
    assert names(session) == ["A", "B", "C"]
    assert session.output_filename() == "items.ts"


def test_upload_comments():
    session = Session()
    assert session.upload("items.ts", "export const items = [{name: 'A'}];\n/* generated */\n")
    assert names(session) == ["A"]
    assert session.load("export const items = [{name: 'B'}]; // end")
    assert names(session) == ["B"]


def test_errors():
    session = Session()
    assert session.read([0]) is False
    assert session.error == "no document loaded"
    assert session.item_id(0) is False
    assert session.error == "no document loaded"
    assert session.serialize() is False
    session.load(module)
    assert session.item_id(2) == session.document.item_ids[2]
    assert session.item_id(3) is False
    assert "path not found" in session.error
    assert session.item_id(-1) is False
    assert session.read([0, "name"]).head == "A"
    assert session.read([7]) is False
    assert "path not found" in session.error
    assert session.remove_item(-1) is False
    assert "no item" in session.error
    assert session.load("const a = [1];") is False
    assert names(session) == ["A", "B", "C"]
    assert session.read([0]) is not False
    assert session.error is None


def test_download():
    session = Session(indent_width=4)
    session.load(module)
    assert session.output_filename() == "data.ts"
    session.write([0, "name"], "Z")
    filename, text = session.download()
    assert filename == "data.ts"
    assert text == (
        'import type { Item } from "./types";\n'
        '\n'
        'export const items = [\n'
        '    {\n        name: "Z"\n    },\n'
        '    {\n        name: "B"\n    },\n'
        '    {\n        name: "C"\n    }\n'
        '];\n'
    )
    assert session.serialize() == text


def test_settle():
    session = Session()
    session.removal_delay = 0.01
    session.load(module)
    session.remove_item(session.item_id(0))
    session.remove_item(session.item_id(2))
    asyncio.run(session.settle())
    assert names(session) == ["B"]
    assert session.pending() == ()


def test_logging():
    messages = []
    handler = setup_logging("DEBUG", messages.append)
    try:
        session = Session()
        session.load(module)
        session.read([9])
    finally:
        from loguru import logger
        logger.remove(handler)
        logger.disable("tsdata")
    assert any("path not found" in m for m in messages)
    assert any("exported array" in m for m in messages)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
