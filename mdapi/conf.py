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
Tag registry and render dispatch table.

Every aspect of the output can be modified through a Registry: the recognized tags
and their synonyms, the shorthand tags considered during type resolution, the visual
cues and section titles, and the routines that render each type of block.

A process-wide default registry is available as ``registry``.  Callers that need
isolation (e.g. different custom tags for different documents) construct their own
Registry and pass it to the Parser and renderers.
"""

__all__ = ['Kind', 'Cues', 'Titles', 'DispatchTable', 'Registry', 'RenderFunc', 'registry']

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

from .log import log
from .routines import render_class, render_function, render_property, render_usage
from .tags import *

# Signature of render routines: routine(renderer, type, comment)
RenderFunc = Callable[..., None]


class Kind(enum.Enum):
    """
    The category of a comment block, as determined by its resolved type tag.
    """
    MODULE = 'module'
    CLASS = 'class'
    CONSTRUCTOR = 'constructor'
    FUNCTION = 'function'
    PROPERTY = 'property'
    CUSTOM = 'custom'

    @classmethod
    def of(cls, id: Optional[str]) -> Optional['Kind']:
        """
        Returns the Kind for the given resolved type id, or None if id is None.  Ids
        without a built-in kind are CUSTOM.
        """
        if id is None:
            return None
        return BUILTIN_KINDS.get(id, cls.CUSTOM)


# Maps type tag ids to the built-in kind that renders them.  Shorthand tags that
# establish a type on their own (@static foo, @constant FOO) are included here.
BUILTIN_KINDS: Dict[str, Kind] = {
    MODULE: Kind.MODULE,
    CLASS: Kind.CLASS,
    CONSTRUCTOR: Kind.CONSTRUCTOR,
    FUNCTION: Kind.FUNCTION,
    STATIC: Kind.FUNCTION,
    PROPERTY: Kind.PROPERTY,
    CONSTANT: Kind.PROPERTY,
}

# Type tags in priority order.  The first one present in a comment block establishes
# its type regardless of source order.
TYPES = [MODULE, CLASS, CONSTRUCTOR, FUNCTION, PROPERTY]

# Tags that may carry a {type} sub-annotation establishing the block type, e.g.
# @name {function} foo
SHORTHAND = [NAME, STATIC, CONSTANT, PUBLIC, PRIVATE, PROTECTED]


@dataclass
class Cues:
    """
    Visual cues inserted into headings.
    """
    CONSTRUCTOR: str = ' < '
    MEMBER: str = '.'
    STATIC: str = '#'


@dataclass
class Titles:
    """
    Titles for sub-headings and notices.
    """
    OPTIONS: str = 'Options'
    THROWS: str = 'Throws'
    EVENTS: str = 'Events'
    RETURNS: str = 'Returns'
    DEPRECATED: str = 'Deprecated'
    AUTHOR: str = 'Author'
    VERSION: str = 'Version'
    SINCE: str = 'Since'


class DispatchTable:
    """
    Maps resolved types to render routines.

    Built-in routines are keyed on Kind.  Custom routines are keyed on the type tag id
    and are consulted first, so registering a routine for an id always takes effect,
    even for ids that have a built-in kind.
    """
    def __init__(self):
        self.builtins: Dict[Kind, RenderFunc] = {
            Kind.MODULE: render_class,
            Kind.CLASS: render_class,
            Kind.CONSTRUCTOR: render_function,
            Kind.FUNCTION: render_function,
            Kind.PROPERTY: render_property,
        }
        # Preserves registration order, which is also the order in which custom ids
        # are considered during type resolution.
        self.custom: Dict[str, RenderFunc] = {}

    def __contains__(self, id: str) -> bool:
        return self.get(id) is not None

    def __len__(self) -> int:
        return len(self.builtins) + len(self.custom)

    def register(self, id: str, func: RenderFunc) -> None:
        if id in self.custom:
            log.debug('replacing renderer for @%s', id)
        self.custom[id] = func

    def get(self, id: Optional[str]) -> Optional[RenderFunc]:
        """
        Returns the routine for the given type id, or None if there isn't one.
        """
        kind = Kind.of(id)
        if kind is None:
            return None
        assert(id is not None)
        if id in self.custom:
            return self.custom[id]
        return self.builtins.get(kind)

    def custom_ids(self) -> List[str]:
        """
        Returns ids with a custom routine that are not already built-in type tags.
        These are the extra ids considered by Comment.get_detail().
        """
        return [id for id in self.custom if id not in BUILTIN_KINDS]


class Registry:
    """
    Catalog of recognized tags plus the dispatch table used when rendering.
    """
    def __init__(self):
        self.tags: Dict[str, TagDef] = {}
        # synonym -> canonical tag id
        self.synonyms: Dict[str, str] = {}
        self.shorthand: List[str] = list(SHORTHAND)
        self.types: List[str] = list(TYPES)
        # Blocks carrying this tag are never rendered.  None disables exclusion.
        self.exclude: Optional[str] = PRIVATE
        # Set to None to disable visual cues, in which case function titles are
        # suffixed with () instead.
        self.cues: Optional[Cues] = Cues()
        self.titles = Titles()
        self.renderers = DispatchTable()

        for id in (NAME, STATIC, CONSTANT, PUBLIC, PRIVATE, PROTECTED, MODULE, CLASS,
                   CONSTRUCTOR, INHERITS, MEMBER, DEFAULT, DEPRECATED, AUTHOR, VERSION,
                   SINCE, SEE, OPTION, THROWS, EVENT):
            self.register_tag(id)
        self.register_tag(READONLY, synonyms=['readOnly'])
        self.register_tag(FUNCTION, synonyms=['func', 'method'])
        self.register_tag(PARAM, synonyms=['arg', 'argument'])
        self.register_tag(RETURNS, synonyms=['return'])
        self.register_tag(PROPERTY, synonyms=['prop', 'field'])
        self.register_tag(USAGE, synonyms=[EXAMPLE], raw=True)
        self.register_renderer(USAGE, render_usage)


    def register_tag(self, id: str, synonyms: Optional[Iterable[str]] = None, raw: bool = False) -> TagDef:
        """
        Registers a tag, returning its definition.  Registering an existing id replaces
        the earlier definition.
        """
        old = self.tags.get(id)
        if old:
            for synonym in old.synonyms:
                self.synonyms.pop(synonym, None)
        tagdef = TagDef(name=id, synonyms=list(synonyms or []), raw=raw)
        self.tags[id] = tagdef
        for synonym in tagdef.synonyms:
            self.synonyms[synonym] = id
        return tagdef


    def register_renderer(self, id: str, func: RenderFunc) -> DispatchTable:
        """
        Registers a render routine for blocks whose type resolves to the given id,
        returning the updated dispatch table.  The tag is registered as well if it
        isn't already known.
        """
        if id not in self.tags:
            self.register_tag(id)
        self.renderers.register(id, func)
        return self.renderers


    def canonical(self, id: str) -> str:
        """
        Returns the canonical tag id for the given id or synonym.
        """
        return self.synonyms.get(id, id)


    def is_raw(self, id: str) -> bool:
        tagdef = self.tags.get(self.canonical(id))
        return bool(tagdef and tagdef.raw)


    @property
    def names(self) -> List[str]:
        """
        All recognized tag ids, excluding synonyms.
        """
        return list(self.tags)


# Process-wide default registry
registry = Registry()
