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

__all__ = ['JSONRenderer']

import json
from typing import Any, Dict, List, Sequence

from ..comment import Comment
from ..tags import Tag
from .base import Renderer, Sink


class JSONRenderer(Renderer):
    """
    Dumps the parsed comment blocks rather than rendering documentation.  Useful for
    inspecting how tags were parsed.
    """
    def _generate(self, comments: Sequence[Comment]) -> List[Dict[str, Any]]:
        return [self._render_comment(comment) for comment in comments]

    def _render_comment(self, comment: Comment) -> Dict[str, Any]:
        out: Dict[str, Any] = {'description': comment.description}
        if comment.line is not None:
            out['line'] = comment.line
        out['tags'] = [self._render_tag(tag) for tag in comment.tags]
        return out

    def _render_tag(self, tag: Tag) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            'tag': tag.id,
            'name': tag.name,
            'type': tag.type,
            'description': tag.description,
            'optional': tag.optional,
        }
        if tag.value is not None:
            out['default'] = tag.value
        return out

    def render(self, comments: Sequence[Comment], sink: Sink) -> None:
        """
        Renders comments as JSON, indented per the indent option (0 is compact).
        """
        ast = self._generate(comments)
        indent = self.options.indent or None
        with sink:
            sink.write(json.dumps(ast, indent=indent))
