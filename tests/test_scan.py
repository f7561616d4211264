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
Test finding the import header and the exported array in modules.
"""

### find tsdata
import sys
sys.path.insert(0, '.')

import pytest

from tsdata import registry
from tsdata.exceptions import NoExportedArray
from tsdata.scan import scan, parts, DEFAULT_EXPORT


module = '''\
import React from "react";
import {
  Item,
  Other,
} from './types';
import type { Thing } from "./thing"

// the items
function make() {
  export const nested = [1];
  return [2];
}

export const items: Item[] = [
  { name: "A", url: "a.png" },
  { name: "B", url: "b.png" },
];

export const more = ["x"];
'''


def check_module():
    """Test the import header and the first exported array."""
    header, binding = scan(module)
    assert header == (
        'import React from "react";\n'
        'import {\n  Item,\n  Other,\n} from \'./types\';\n'
        'import type { Thing } from "./thing"'
    )
    assert binding.name == "items"
    assert binding.literal_text.startswith('[\n  { name: "A"')
    assert binding.literal_text.endswith('},\n]')
    assert module[binding.pos:binding.end] == binding.literal_text


def check_forms():
    """Test the various export statements."""
    assert scan("export default [1, 2];")[1].name == DEFAULT_EXPORT
    assert scan("export default [1, 2]")[1].literal_text == "[1, 2]"
    assert scan("export let a = 1, b = [3]")[1].name == "b"
    assert scan("export var c: Array<{ a: string, b: number }> = [];")[1].name == "c"
    assert scan("export const d: Record<string, number>[] = [{}];")[1].name == "d"
    assert scan("export const e = [\n  1\n]\nexport const f = [2];")[1].name == "e"
    assert scan("export const g = [1] /* done */;")[1].literal_text == "[1]"
    header, binding = scan("export const h = ['a', \"b\", `c`];")
    assert header == ""
    assert binding.literal_text == "['a', \"b\", `c`]"


def check_not_found():
    """Test modules that do not export an array literal."""
    for text in (
        "",
        "const a = [1, 2];",
        "export const a = 1;",
        "export default [1, 2].map(f);",
        "export const a = [1, 2] as const;",
        "export const a = [1, 2]\n  .filter(Boolean);",
        "export function f() { return [1]; }",
        "// export const a = [1];",
        "const s = 'export const a = [1];';",
        "{ export const a = [1]; }",
    ):
        with pytest.raises(NoExportedArray):
            scan(text)


def check_precedence():
    """Test that the first array wins and nested arrays are ignored."""
    text = (
        "function f() {\n  const x = [0];\n  return x;\n}\n"
        "export const first = [1];\n"
        "export default [2];\n"
    )
    assert scan(text)[1].name == "first"
    text = "export const broken = {;\nexport const a = [1];"
    with pytest.raises(NoExportedArray):
        scan(text)


def test_main():
    check_module()
    check_forms()
    check_not_found()
    check_precedence()


def test_parts():
    p = parts("import x from 'y';\nexport default [1]; // comment")
    assert [part.text for part in p if part.is_token] == ["import x from 'y';", "export", "default", ";"]
    spans = [part for part in p if not part.is_token]
    assert len(spans) == 1 and spans[0].name == "array"


def test_comments():
    for text in (
        "export const items = [1]; // note",
        "export const items = [1]; // note\n",
        "export const items = [1];\n/* c */",
        "export const items = [1];\n/* c */\n",
        "export const items = [1];\n/* unterminated",
        "/* before */ export const items = /* here */ [1] // after",
        "export const items = [\n  1, // one\n  /* two */ 2,\n];\n// end",
    ):
        header, binding = scan(text)
        assert binding.name == "items"
        assert binding.literal_text.startswith("[")
    with pytest.raises(NoExportedArray):
        scan("/* export const items = [1]; */")
    p = parts("let a; /* a */ // b")
    assert [part.text for part in p] == ["let", "a", ";"]


def test_registry():
    for name in ("data.ts", "data.tsx", "src/data.js", "Data.jsx"):
        assert registry.accepts(name)
    for name in ("data.json", "data.ts.txt", "data", "", None):
        assert not registry.accepts(name)
    assert registry.find("data.ts").name == "root"


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
