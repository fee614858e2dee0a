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

__all__ = [
    'MdapiError', 'Sentinel', 'recache', 'files_str_to_list', 'coerce_int', 'coerce_flag',
]

import enum
import re
import shlex
from functools import lru_cache
from typing import List, Pattern, Union

from .log import log

# Values for string options that disable the option altogether (e.g. heading = off)
FALSE_VALUES = ('false', 'off', 'no', 'none', '0', '')


class MdapiError(Exception):
    """
    Base class for all errors raised by mdapi.
    """
    pass


class Sentinel(enum.Enum):
    """
    Type friendly sentinel to distinguish between None and lack of argument.
    """
    UNDEF = object()


@lru_cache(maxsize=None)
def recache(pattern: str, flags: int = 0) -> Pattern[str]:
    """
    Returns a compiled regexp pattern, caching the result for subsequent invocations.
    """
    return re.compile(pattern, flags)


def files_str_to_list(s: str) -> List[str]:
    """
    Splits a (possibly multi-line) string of shell-quoted file names into a list.
    """
    files: List[str] = []
    for line in s.strip().splitlines():
        files.extend(shlex.split(line))
    return files


def coerce_int(value, default: int, name: str, absolute: bool = False) -> int:
    """
    Converts the given option value to an int, falling back to the default (and logging
    a warning) if the value isn't numeric.
    """
    if isinstance(value, bool):
        # bool is an int subclass but True is never a sensible heading level.
        value = None
    try:
        n = int(value)
    except (TypeError, ValueError):
        if value is not None:
            log.warning('invalid %s "%s", using default %d', name, value, default)
        return default
    return abs(n) if absolute else n


def coerce_flag(value: Union[str, bool, None]) -> Union[str, bool]:
    """
    Normalizes string options that may be disabled (heading, lang).  Returns False if
    the value disables the option, otherwise the string value.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str) and value.strip().lower() in FALSE_VALUES:
        return False
    return value
