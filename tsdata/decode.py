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
Decode the text of an array literal to a value tree.

Decoding is done in two tiers. First the text is read as a JSON5 value using
the :class:`~tsdata.lang.literal.Literal` language. Only if that fails, the
:class:`~tsdata.lang.literal.Expression` language is tried, which also
understands some simple constant expressions. Neither tier ever executes
code.

"""

import re

from loguru import logger
from parce.transform import Transformer

from .dom import js
from .exceptions import DecodeFailure, NotAnArray
from .lang.literal import Expression, Literal


_quoted_key_re = re.compile(r'"\w+"\s*:')


def decode(literal_text):
    """Return the :class:`~tsdata.dom.js.Array` the literal text denotes.

    Raises :class:`~tsdata.exceptions.NotAnArray` if the text denotes another
    value, and :class:`~tsdata.exceptions.DecodeFailure` if the text can't be
    decoded at all.

    """
    transformer = Transformer()
    try:
        node = transformer.transform_text(Literal.root, literal_text)
    except ValueError as e:
        logger.debug("JSON5 decoding failed ({}), trying expressions", e)
        try:
            node = transformer.transform_text(Expression.root, literal_text)
        except ValueError as e:
            raise DecodeFailure(str(e)) from e
        logger.debug("decoded using expressions")
    if not isinstance(node, js.Array):
        raise NotAnArray(node.kind)
    return node


def infer_quoted_keys(literal_text):
    """Return True if the text contains a double-quoted key."""
    return bool(_quoted_key_re.search(literal_text))
