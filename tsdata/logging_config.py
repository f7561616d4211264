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
Logging setup for applications using tsdata.

tsdata logs with loguru, but disables its own messages on import, as a
library should. Call :func:`setup_logging` to see them.

"""

import sys

from loguru import logger


FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | " \
         "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"


def setup_logging(level="INFO", sink=None):
    """Enable the tsdata log messages and add a human readable sink.

    The ``sink`` defaults to ``sys.stderr``. Returns the handler id, which can
    be given to ``logger.remove()``.

    """
    logger.enable("tsdata")
    return logger.add(
        sys.stderr if sink is None else sink,
        level=level,
        format=FORMAT,
        colorize=sink is None,
        filter="tsdata",
    )
