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

__all__ = ['Renderer', 'Options', 'Sink', 'RenderError', 'DEFAULT_HEADING', 'DEFAULT_LANG']

import contextlib
import sys
from dataclasses import dataclass
from typing import IO, Optional, Sequence, Union

from .. import conf
from ..comment import Comment
from ..log import log
from ..utils import MdapiError, coerce_flag, coerce_int

# Default value for the document heading
DEFAULT_HEADING = 'API'
# Default language for fenced code blocks
DEFAULT_LANG = 'javascript'


class RenderError(MdapiError):
    pass


@dataclass
class Options:
    """
    Options consumed by renderers.
    """
    # Starting heading level
    level: int = 1
    # Title of the document heading, or False to omit it
    heading: Union[str, bool] = DEFAULT_HEADING
    # Language for fenced code blocks, or False to omit it
    lang: Union[str, bool] = DEFAULT_LANG
    # Indentation for AST dumps
    indent: int = 2

    @classmethod
    def create(cls, level=None, heading=DEFAULT_HEADING, lang=DEFAULT_LANG, indent=None) -> 'Options':
        """
        Creates an Options from loosely typed values (e.g. from a config file),
        substituting defaults for invalid numeric values.
        """
        level = coerce_int(level, 1, 'level')
        if level < 1:
            log.warning('invalid level "%s", using default 1', level)
            level = 1
        return cls(
            level=level,
            heading=coerce_flag(heading),
            lang=coerce_flag(lang),
            indent=coerce_int(indent, 2, 'indent', absolute=True),
        )


class Sink:
    """
    Append-only destination for rendered output.

    Wraps a text stream and converts I/O failures to RenderError.  Standard output is
    considered always open: it's flushed but never closed.  Any other stream is closed
    once the document is complete, unless keep_open is True.

    Used as a context manager, the sink is closed on exit even when rendering failed.
    A failure to close is only raised if nothing else went wrong, so the error that
    aborted the document is the one the caller sees.
    """
    def __init__(self, stream: Optional[IO[str]] = None, keep_open: bool = False):
        self.stream = stream if stream is not None else sys.stdout
        self.keep_open = keep_open
        self.closed = False

    def __enter__(self) -> 'Sink':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            with contextlib.suppress(RenderError):
                self.close()

    @property
    def is_stdout(self) -> bool:
        return self.stream is sys.stdout or self.stream is sys.__stdout__

    def write(self, s: str) -> None:
        try:
            self.stream.write(s)
        except (OSError, ValueError) as e:
            raise RenderError(f'failed writing output: {e}') from e

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            if self.is_stdout or self.keep_open:
                self.stream.flush()
            else:
                self.stream.close()
        except (OSError, ValueError) as e:
            raise RenderError(f'failed closing output: {e}') from e


class Renderer:
    """
    Base class for renderers.
    """
    def __init__(self, options: Optional[Options] = None, registry: Optional[conf.Registry] = None):
        self.options = options or Options()
        self.registry = registry or conf.registry

    def render(self, comments: Sequence[Comment], sink: Sink) -> None: # pyright: ignore
        """
        Renders the given comments to the sink.  The sink is closed (or, for stdout,
        flushed) after the document is complete, or once rendering has failed.

        RenderError is raised if the sink fails, after which no further output is
        attempted.
        """
        raise NotImplementedError
