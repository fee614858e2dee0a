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

"""
Generates markdown API documentation from ``/** ... */`` documentation comments.

Usage::

    import mdapi
    comments = mdapi.load(['index.js'])
    mdapi.generate(comments, open('API.md', 'w'))
"""

__all__ = [
    'Comment', 'Tag', 'Registry', 'Parser', 'Options', 'Sink', 'MdapiError', 'ParseError',
    'RenderError', 'registry', 'register_tag', 'register_renderer', 'load', 'generate',
]

__version__ = '1.0.0'

from typing import IO, Iterable, List, Optional

from .comment import Comment
from .conf import DispatchTable, Registry, RenderFunc, registry
from .parse import Parser, ParseError
from .render import RENDERERS, Options, Sink, RenderError
from .tags import Tag, TagDef
from .utils import MdapiError


def register_tag(id: str, synonyms: Optional[Iterable[str]] = None) -> TagDef:
    """
    Registers a tag with the process-wide registry.
    """
    return registry.register_tag(id, synonyms=synonyms)


def register_renderer(id: str, func: RenderFunc) -> DispatchTable:
    """
    Registers a render routine with the process-wide registry.
    """
    return registry.register_renderer(id, func)


def load(files: Iterable[str], registry: Optional[Registry] = None, encoding: Optional[str] = None) -> List[Comment]:
    """
    Parses the given files in order and returns their documentation comments.
    """
    return Parser(registry).parse_files(files, encoding=encoding)


def generate(comments: Iterable[Comment], stream: Optional[IO[str]] = None, renderer: str = 'markdown',
             registry: Optional[Registry] = None, **options) -> None:
    """
    Renders comments to the given stream (stdout by default).  Keyword arguments are
    passed to Options.create() (level, heading, lang, indent).  Streams other than
    stdout are closed once rendering is complete.

    RenderError is raised if writing to the stream fails.
    """
    rendercls = RENDERERS[renderer]
    rendercls(Options.create(**options), registry).render(list(comments), Sink(stream))
