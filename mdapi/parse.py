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

__all__ = ['Context', 'Parser', 'ParseError']

import re
import textwrap
from typing import Iterable, List, Optional, Tuple, Union

from . import conf
from .comment import Comment
from .log import log
from .tags import Tag, TagParser, ParseError
from .utils import Sentinel, recache


class Context:
    """
    Keeps track of current file and line being processed.

    There is a single instance held by Parser, used for error reporting.
    """
    UNDEF = Sentinel.UNDEF
    def __init__(self):
        self.file: Optional[str] = None
        self.line: Optional[int] = None

    def update(self, file: Union[str, None, Sentinel]=UNDEF,
               line: Union[int, None, Sentinel]=UNDEF) -> None:
        if file is not Sentinel.UNDEF:
            self.file = file
        if line is not Sentinel.UNDEF:
            self.line = line


class Parser:
    """
    Extracts documentation comments (``/** ... */``) from source code and produces
    Comment objects bound to the given registry.

    Only comment boundaries are recognized: the surrounding code isn't parsed at all.
    """
    RE_BLOCK = re.compile(r'/\*\*(?![*/])(.*?)\*/', re.S)
    # Leading whitespace, an optional asterisk gutter, and a single space after it.
    RE_GUTTER = recache(r'^\s*\*? ?')

    def __init__(self, registry: Optional[conf.Registry] = None) -> None:
        self.registry = registry or conf.registry
        self.ctx = Context()


    def _split_block(self, body: str, lineno: int) -> Tuple[str, List[Tuple[str, int, List[str]]]]:
        """
        Splits the body of a comment block into the block description and a list of
        (tag id, line number, lines) for each tag.  A tag extends over subsequent lines
        until the next tag.
        """
        tagparser = TagParser()
        desc: List[str] = []
        tags: List[Tuple[str, int, List[str]]] = []
        for n, raw in enumerate(body.split('\n')):
            line = self.RE_GUTTER.sub('', raw, count=1).rstrip()
            m = tagparser.match(line)
            if m:
                id, text = m
                tags.append((id, lineno + n, [text]))
            elif tags:
                tags[-1][2].append(line)
            else:
                desc.append(line)
        return textwrap.dedent('\n'.join(desc)).strip(), tags


    def _make_tag(self, tagparser: TagParser, id: str, line: int, lines: List[str]) -> Tag:
        id = self.registry.canonical(id)
        if id not in self.registry.tags:
            log.debug('%s:%s: unrecognized tag @%s', self.ctx.file, line, id)
        if not self.registry.is_raw(id):
            lines = [l.strip() for l in lines]
        else:
            lines = [lines[0]] + textwrap.dedent('\n'.join(lines[1:])).split('\n')
        return tagparser.parse(id, '\n'.join(lines), file=self.ctx.file, line=line)


    def parse_source(self, text: str, file: Optional[str] = None) -> List[Comment]:
        """
        Parses all documentation comments in the given source text, returning a list of
        Comment objects in source order.  Comments with neither a description nor
        tags are ignored.

        ParseError is raised if a tag is malformed.
        """
        self.ctx.update(file=file, line=None)
        raw = [id for id, tagdef in self.registry.tags.items() if tagdef.raw]
        tagparser = TagParser(raw=raw)
        comments: List[Comment] = []
        for m in self.RE_BLOCK.finditer(text):
            lineno = text.count('\n', 0, m.start()) + 1
            self.ctx.update(line=lineno)
            description, tagspecs = self._split_block(m.group(1), lineno)
            tags = [self._make_tag(tagparser, id, line, lines) for id, line, lines in tagspecs]
            if not description and not tags:
                continue
            comments.append(Comment(tags, description, registry=self.registry, file=file, line=lineno))
        log.debug('%s: found %d comments', file or '<string>', len(comments))
        return comments


    def parse_files(self, paths: Iterable[str], encoding: Optional[str] = None) -> List[Comment]:
        """
        Parses the given files in order, returning the comments of all files as a single
        sequence, as if the files were concatenated.

        OSError is raised if a file can't be read.
        """
        comments: List[Comment] = []
        for path in paths:
            log.info('parsing %s', path)
            with open(path, encoding=encoding) as f:
                comments.extend(self.parse_source(f.read(), file=path))
        return comments
