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

__all__ = ['HTMLRenderer']

import html
import io
from typing import Sequence

import commonmark.blocks
import commonmark_extensions.tables

from ..comment import Comment
from .base import Sink
from .markdown import MarkdownRenderer

# Effectively disable implicit code blocks, as comment text is often indented
commonmark.blocks.CODE_INDENT = 1000

PAGE = '''<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
{body}</body>
</html>
'''


class CustomRendererWithTables(commonmark_extensions.tables.RendererWithTables):
    def make_table_node(self, _):
        return '<table class="user">'

# https://github.com/GovReady/CommonMark-py-Extensions/issues/3#issuecomment-756499491
# Thanks to hughdavenport
class TableWaitingForBug3(commonmark_extensions.tables.Table):
    @staticmethod
    def continue_(parser, _=None):
        ln = parser.current_line
        if not parser.indented and commonmark.blocks.peek(ln, parser.next_nonspace) == "|":
            parser.advance_next_nonspace()
            parser.advance_offset(1, False)
        elif not parser.indented and commonmark.blocks.peek(ln, parser.next_nonspace) not in ("", ">", "`", None):
            pass
        else:
            return 1
        return 0
commonmark.blocks.Table = TableWaitingForBug3 # pyright: ignore


class HTMLRenderer(MarkdownRenderer):
    """
    Renders the markdown document and converts it to a standalone HTML page.
    """
    def _markdown_to_html(self, md: str) -> str:
        """
        Renders the given markdown as HTML and returns the result.
        """
        parser = commonmark_extensions.tables.ParserWithTables()
        ast = parser.parse(md)
        return CustomRendererWithTables().render(ast)

    def render(self, comments: Sequence[Comment], sink: Sink) -> None:
        with sink:
            buf = io.StringIO()
            super().render(comments, Sink(buf, keep_open=True))
            heading = self.options.heading
            title = heading if isinstance(heading, str) and heading else 'API'
            body = self._markdown_to_html(buf.getvalue())
            sink.write(PAGE.format(title=html.escape(title), body=body))
