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
Test decoding array literals, with the Literal and Expression languages.
"""

### find tsdata
import math
import sys
sys.path.insert(0, '.')

import pytest

from parce.transform import transform_text

from tsdata.decode import decode, infer_quoted_keys
from tsdata.dom import js
from tsdata.exceptions import DecodeFailure, NotAnArray
from tsdata.lang.literal import Literal, Expression


def literal(text):
    """Decode text with the Literal language only."""
    return transform_text(Literal.root, text).to_python()


def expression(text):
    """Decode text with the Expression language only."""
    return transform_text(Expression.root, text).to_python()


def check_json5():
    """Test the JSON5 values the Literal language accepts."""
    assert literal('[1, "two", true, false, null]') == [1, "two", True, False, None]
    assert literal("[{a: 1, 'b': 2, \"c\": 3, $d_1: 4},]") == [{"a": 1, "b": 2, "c": 3, "$d_1": 4}]
    assert literal("[0x1F, -0xa, +1, .5, 5., 1e3, -2.5E-1]") == [31, -10, 1, 0.5, 5.0, 1000.0, -0.25]
    assert literal("[\n  // comment\n  1, /* another */ 2\n]") == [1, 2]
    assert literal(r"['it\'s', 'a\tb', 'é\x41', 'line\
continued', '😀']") == ["it's", "a\tb", "éA", "linecontinued", "\U0001F600"]
    assert literal("[[], {}, [[]]]") == [[], {}, [[]]]
    result = literal("[Infinity, -Infinity, NaN]")
    assert result[:2] == [math.inf, -math.inf] and math.isnan(result[2])
    # a duplicate key keeps the first position but gets the last value
    assert list(literal("[{a: 1, b: 2, a: 3}]")[0].items()) == [("a", 3), ("b", 2)]


def check_json5_errors():
    """Test constructs the Literal language refuses."""
    for text in (
        "",
        "[1, 2",
        "[1,, 2]",
        "[,]",
        "[1 2]",
        "[{a}]",
        "[{a: 1,, b: 2}]",
        "[{[k]: 1}]",
        "[{1: 'a'}]",
        "[-x]",
        "[undefined]",
        "[`template`]",
        "[(1)]",
        "[1 + 2]",
        "['unterminated]",
        "['new\nline']",
        r"['\x4']",
        "[foo()]",
        "[a.b]",
        "[...a]",
        "[1] [2]",
    ):
        with pytest.raises(ValueError):
            literal(text)


def check_expressions():
    """Test the constant expressions the Expression language accepts."""
    assert expression("[-1, +2, !0, !'', !'a', -(3), ((4))]") == [-1, 2, True, True, False, -3, 4]
    assert expression("['a' + 'b', 1 + 2, 'n' + 1, 1 + 2 + 'x', 'x' + null]") == \
        ["ab", 3, "n1", "3x", "xnull"]
    assert expression("[`plain`, `a${1 + 1}b`, `${'x'}${true}`]") == ["plain", "a2b", "xtrue"]
    assert expression("[1_000, 0b101, 0o17, 0xff, 10n]") == [1000, 5, 15, 255, 10]
    assert expression("[{1: 'a', 2.50: 'b'}]") == [{"1": "a", "2.5": "b"}]
    assert expression("[undefined, 1 as const]") == [None, 1]
    assert expression("[{a: [1, 2] as const}]") == [{"a": [1, 2]}]
    assert expression("[1 + -2]") == [-1]


def check_expression_errors():
    """Test that code is never accepted."""
    for text in (
        "[foo]",
        "[foo()]",
        "[a.b]",
        "[...a]",
        "[{a}]",
        "[{[k]: 1}]",
        "[() => 1]",
        "[new Date()]",
        "[1 - 2]",
        "[1 * 2]",
        "[-'a']",
        "[[1] + 2]",
        "[`${[1]}`]",
        "[`${foo}`]",
        "[true + 1]",
        "[(1, 2)]",
        "[()]",
        "[typeof 1]",
        "[function () {}]",
        "[eval('1')]",
    ):
        with pytest.raises(ValueError):
            expression(text)


def test_main():
    check_json5()
    check_json5_errors()
    check_expressions()
    check_expression_errors()


def test_decode():
    root = decode('[{name: "A", url: "a.png"}, {name: "B", url: "b.png"}]')
    assert isinstance(root, js.Array)
    assert len(root) == 2
    # tier 2 is used when tier 1 fails
    assert decode("[`a`, -(1)]").to_python() == ["a", -1]


def test_decode_errors():
    with pytest.raises(NotAnArray) as info:
        decode('{"a": 1}')
    assert info.value.kind == "object"
    with pytest.raises(NotAnArray):
        decode("'text'")
    with pytest.raises(DecodeFailure) as info:
        decode("[alert('hi')]")
    assert "alert" in info.value.diagnostic
    with pytest.raises(DecodeFailure):
        decode("[1, 2")
    with pytest.raises(DecodeFailure):
        decode("[process.exit(1)]")


def test_quoted_keys():
    assert infer_quoted_keys('[{"name": "A"}]')
    assert infer_quoted_keys('[{name: "A", "url" : "x"}]')
    assert not infer_quoted_keys('[{name: "A"}]')
    assert not infer_quoted_keys('[{name: "A:B"}]')
    assert not infer_quoted_keys("[{'name': 'A'}]")


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
