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

__all__ = ['MarkdownRenderer', 'RenderState']

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from .. import format
from ..comment import Comment, Info
from ..conf import Kind
from ..log import log
from ..tags import *
from .base import Renderer, RenderError, Sink


@dataclass
class RenderState:
    """
    Context carried from one comment block to the next while rendering a document.
    """
    # Base heading level, which is one below the document heading if there is one
    level: int
    # Heading level for the next block
    depth: int
    # Heading level of the current @module, if any
    in_module: Optional[int] = None
    # The most recent @class or @constructor tag, which owns subsequent @member blocks
    current_class: Optional[Tag] = None


class MarkdownRenderer(Renderer):
    """
    Renders comment blocks as a markdown document.

    Blocks are rendered strictly in the given order, each one by the routine the
    registry's dispatch table holds for the block's resolved type.  Routines write
    through the helper methods here (heading(), fenced(), etc.) and can inspect and
    modify the document's RenderState via the state attribute.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.state: Optional[RenderState] = None
        self.sink: Optional[Sink] = None

    def render(self, comments: Sequence[Comment], sink: Sink) -> None:
        self.sink = sink
        level = self.options.level
        try:
            with sink:
                heading = self.options.heading
                if isinstance(heading, str) and heading:
                    self.heading(heading, level)
                    level += 1
                self.state = RenderState(level=level, depth=level + 1)
                # Custom type ids considered when a block has no built-in type tag
                names = self.registry.renderers.custom_ids()
                for comment in comments:
                    self.render_comment(comment, names)
        finally:
            self.state = None
            self.sink = None

    def render_comment(self, comment: Comment, names: Optional[List[str]] = None) -> None:
        """
        Renders a single comment block, or silently skips it if it's excluded or its
        type couldn't be resolved.
        """
        if comment.is_excluded():
            log.debug('%s:%s: skipping excluded comment', comment.file, comment.line)
            return
        detail = comment.get_detail(names)
        routine = self.registry.renderers.get(detail.id)
        if not routine or not detail.type:
            log.debug('%s:%s: skipping comment without a renderable type', comment.file, comment.line)
            return
        if detail.kind != Kind.CUSTOM and not detail.type.name:
            log.debug('%s:%s: skipping @%s without a name', comment.file, comment.line, detail.id)
            return
        routine(self, detail.type, comment)

    #
    # Helpers used by render routines
    #

    def write(self, s: str) -> None:
        if not self.sink:
            raise RenderError('renderer is not rendering a document')
        self.sink.write(s)

    def newline(self, n: int = 1) -> None:
        self.write('\n' * n)

    def heading(self, text: str, level: int) -> None:
        self.write(format.heading(text, level))
        self.newline(2)

    def paragraph(self, text: str) -> None:
        if text:
            self.write(text)
            self.newline(2)

    def fenced(self, code: str) -> None:
        self.write(format.fenced(code, self.options.lang))
        self.newline(2)

    def list(self, lines: List[str]) -> None:
        if lines:
            self.write('\n'.join(lines))
            self.newline(2)

    def items(self, tags: List[Tag]) -> None:
        self.list([format.parameter(tag) for tag in tags])

    def section(self, title: str, tags: List[Tag], level: int) -> None:
        """
        Writes a sub-heading followed by a list of the given tags, or nothing if there
        are no tags.
        """
        if tags:
            self.heading(title, level)
            self.items(tags)

    def usage(self, comment: Comment) -> None:
        for tag in comment.collect(USAGE):
            code = comment.describe(tag, True)
            if code:
                self.fenced(code)

    def meta(self, comment: Comment) -> None:
        """
        Writes the deprecation notice and the author/version/since list.
        """
        titles = self.registry.titles
        tag = comment.find(DEPRECATED)
        if tag:
            self.paragraph(format.deprecated(tag, titles))
        lines = []
        for id, title in ((AUTHOR, titles.AUTHOR), (VERSION, titles.VERSION), (SINCE, titles.SINCE)):
            lines.extend(format.meta(tag, title) for tag in comment.collect(id))
        self.list(lines)

    def see(self, comment: Comment) -> None:
        self.list([format.link(tag) for tag in comment.collect(SEE)])

    def qualify(self, info: Info) -> Info:
        """
        Returns the info with the @member owner filled in from the current class when
        the @member tag doesn't name one.
        """
        current = self.state.current_class if self.state else None
        if info.is_member and not info.is_member.name and current:
            return replace(info, is_member=replace(info.is_member, name=current.name))
        return info
