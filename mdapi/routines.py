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
Built-in render routines.

Every routine is called as ``routine(renderer, type, comment)`` where type is the
resolved type Tag of the comment block.  A routine returns once all of its output has
been written to the renderer; raising aborts the whole document.  Custom routines
registered with Registry.register_renderer() follow the same contract.
"""

__all__ = ['render_class', 'render_function', 'render_property', 'render_usage']

from . import format
from .tags import *


def _enter_class(renderer, type: Tag) -> None:
    """
    Class and constructor blocks become the owner of subsequent members, and are
    rendered one level below the enclosing module (or at the base level outside of any
    module).
    """
    state = renderer.state
    state.current_class = type
    state.depth = state.in_module + 1 if state.in_module is not None else state.level


def render_class(renderer, type: Tag, comment) -> None:
    """
    Renders a @module or @class block.
    """
    state = renderer.state
    cues = renderer.registry.cues
    info = comment.get_info()
    if type.id == MODULE:
        state.depth = renderer.options.level + 1
        state.in_module = state.depth
        # Module names commonly contain spaces (e.g. @module API Documents)
        title = comment.describe(type, True)
        description = comment.description
    else:
        _enter_class(renderer, type)
        title = type.name
        description = comment.describe(type)
    if info.inherits:
        title = format.inherits(type, info, cues)

    renderer.heading(title, state.depth)
    renderer.usage(comment)
    renderer.paragraph(description)
    renderer.meta(comment)
    renderer.see(comment)
    state.depth += 1


def render_function(renderer, type: Tag, comment) -> None:
    """
    Renders a @function, @constructor or @static block.
    """
    state = renderer.state
    cues = renderer.registry.cues
    titles = renderer.registry.titles
    info = comment.get_info(True)
    is_constructor = type.id == CONSTRUCTOR
    title = None
    if is_constructor:
        _enter_class(renderer, type)
        if info.inherits:
            title = format.inherits(type, info, cues)
    level = state.depth
    info = renderer.qualify(info)
    method = format.method(type, info, cues, title)
    params = comment.collect(PARAM)

    renderer.heading(method.title, level)
    renderer.fenced(method.signature + format.signature(params))
    renderer.usage(comment)
    renderer.paragraph(comment.describe(type))
    if info.returns:
        renderer.paragraph(format.returns(comment, info.returns, titles))
    renderer.meta(comment)
    renderer.items(params)
    renderer.section(titles.OPTIONS, comment.collect(OPTION), level + 1)
    renderer.section(titles.THROWS, comment.collect(THROWS), level + 1)
    renderer.section(titles.EVENTS, comment.collect(EVENT), level + 1)
    renderer.see(comment)
    if is_constructor:
        state.depth += 1


def render_property(renderer, type: Tag, comment) -> None:
    """
    Renders a @property or @constant block.
    """
    info = renderer.qualify(comment.get_info(False))
    renderer.heading(type.name, renderer.state.depth)
    renderer.fenced(format.property(type, info))
    renderer.usage(comment)
    renderer.paragraph(comment.describe(type))
    renderer.meta(comment)
    renderer.see(comment)


def render_usage(renderer, type: Tag, comment) -> None:
    """
    Renders a block holding nothing but a code example, where the code is either the
    text of the @usage tag or, if the tag is empty, the block description.
    """
    code = type.description or type.name
    if code:
        renderer.paragraph(comment.description)
    renderer.fenced(code or comment.description)
