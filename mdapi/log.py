# Copyright 2026 The mdapi Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

__all__ = ['log', 'configure']

import logging
import sys
from typing import IO, Optional

# Package-wide logger.  Library code only logs through this; handlers are installed by
# the command line entry point via configure().
log = logging.getLogger('mdapi')


class LevelFormatter(logging.Formatter):
    """
    Prefixes messages with the program name and level, colorizing the level when the
    output stream is a terminal.
    """
    COLORS = {
        logging.DEBUG: '\x1b[2m',
        logging.INFO: '\x1b[32m',
        logging.WARNING: '\x1b[33m',
        logging.ERROR: '\x1b[31m',
        logging.CRITICAL: '\x1b[1;31m',
    }

    def __init__(self, color: bool = False):
        super().__init__('[mdapi] %(levelname)s %(message)s')
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        msg = super().format(record)
        if self.color and record.levelno in self.COLORS:
            msg = msg.replace(record.levelname, self.COLORS[record.levelno] + record.levelname + '\x1b[0m', 1)
        return msg


def configure(verbose: bool = False, stream: Optional[IO[str]] = None) -> logging.Logger:
    """
    Installs a single stream handler on the package logger.  Calling this more than
    once replaces the previous handler rather than duplicating output.
    """
    stream = stream or sys.stderr
    level = logging.DEBUG if verbose else logging.INFO
    log.setLevel(level)
    log.propagate = False
    for handler in list(log.handlers):
        log.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(LevelFormatter(color=hasattr(stream, 'isatty') and stream.isatty()))
    log.addHandler(handler)
    return log
