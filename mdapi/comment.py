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

__all__ = ['Comment', 'Detail', 'Info']

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Sequence, Union

from . import conf
from .tags import *


@dataclass
class Detail:
    """
    The result of type resolution for a comment block.
    """
    # Tag supplying the block's name
    name: Optional[Tag] = None
    # Tag establishing the block's category
    type: Optional[Tag] = None

    @property
    def id(self) -> Optional[str]:
        """
        The type tag id, or None if the block has no type (and should be skipped).
        """
        return self.type.id if self.type else None

    @property
    def kind(self) -> Optional[conf.Kind]:
        return conf.Kind.of(self.id)


@dataclass
class Info:
    """
    Flags derived from a comment block that influence how it's formatted.  Each is the
    Tag that set the flag, or None.
    """
    is_module: Optional[Tag] = None
    is_class: Optional[Tag] = None
    is_static: Optional[Tag] = None
    is_constant: Optional[Tag] = None
    is_private: Optional[Tag] = None
    is_public: Optional[Tag] = None
    is_protected: Optional[Tag] = None
    is_read_only: Optional[Tag] = None
    is_member: Optional[Tag] = None
    inherits: Optional[Tag] = None
    # Only resolved for callables
    is_constructor: Optional[Tag] = None
    returns: Optional[Tag] = None
    # Only resolved for data properties
    value: Optional[Tag] = None


class Comment:
    """
    Wraps a single parsed comment block: its description (the text preceding the first
    tag) and its tags in source order.

    Tag lookups go through a cache keyed on canonical tag id that is built on first use.
    When a tag id appears more than once, find() returns the *last* one, so a later
    annotation overrides an earlier one.
    """
    def __init__(self, tags: Iterable[Tag], description: str = '',
                 registry: Optional['conf.Registry'] = None, file: Optional[str] = None,
                 line: Optional[int] = None):
        self.registry = registry or conf.registry
        # Synonyms are replaced by their canonical ids so that resolved types and flags
        # dispatch and format the same regardless of how the tag was spelled.
        self.tags: List[Tag] = [self._canonicalize(tag) for tag in tags]
        self.description = description
        self.file = file
        self.line = line
        self._cache: Optional[Dict[str, Union[Tag, List[Tag]]]] = None

    def __repr__(self) -> str:
        ids = ', '.join('@' + tag.id for tag in self.tags)
        return f'Comment(file={self.file}, line={self.line}, tags=[{ids}])'

    def _canonicalize(self, tag: Tag) -> Tag:
        id = self.registry.canonical(tag.id)
        return tag if id == tag.id else replace(tag, id=id)

    def cache(self) -> Dict[str, Union[Tag, List[Tag]]]:
        """
        Returns the tag cache, building it if necessary.
        """
        if self._cache is None:
            cache: Dict[str, Union[Tag, List[Tag]]] = {}
            for tag in self.tags:
                id = tag.id
                existing = cache.get(id)
                if existing is None:
                    cache[id] = tag
                elif isinstance(existing, list):
                    existing.append(tag)
                else:
                    cache[id] = [existing, tag]
            self._cache = cache
        return self._cache

    def find(self, id: str) -> Optional[Tag]:
        """
        Returns the last tag with the given id, or None if there are none.
        """
        entry = self.cache().get(self.registry.canonical(id))
        if isinstance(entry, list):
            return entry[-1]
        return entry

    def collect(self, id: str) -> List[Tag]:
        """
        Returns all tags with the given id in source order, which may be an empty list.
        """
        entry = self.cache().get(self.registry.canonical(id))
        if entry is None:
            return []
        return list(entry) if isinstance(entry, list) else [entry]

    def get_detail(self, names: Optional[Sequence[str]] = None) -> Detail:
        """
        Resolves the tag that establishes this block's type, along with the tag that
        supplies its name.

        Type tags are considered in the registry's priority order.  Failing that, a
        shorthand tag (e.g. ``@name {function} foo`` or ``@static foo``) can establish the
        type.  The given names are additional (custom) type tag ids considered last.
        """
        registry = self.registry
        name = self.find(NAME)
        type = next((tag for tag in map(self.find, registry.types) if tag), None)

        if not type:
            for id in registry.shorthand:
                tag = self.find(id)
                if not tag:
                    continue
                if tag.type:
                    type = Tag(id=registry.canonical(tag.type), name=tag.name,
                               description=tag.description, line=tag.line)
                    break
                if registry.renderers.get(tag.id):
                    # Shorthand that is itself a type (e.g. @static foo)
                    type = tag
                    break

        if not type and names:
            type = next((tag for tag in map(self.find, names) if tag), None)

        # Cross-populate name and type: "@name foo @function" and "@function foo"
        # resolve the same way.
        if name and type and not type.name:
            type = replace(type, name=name.name)
        if not name and type and type.name:
            name = Tag(id=NAME, name=type.name, line=type.line)
        return Detail(name=name, type=type)

    def get_info(self, callable: Optional[bool] = None) -> Info:
        """
        Returns the formatting flags for this block.  If callable is True, constructor
        and return value information is included; if False, the default value is.
        """
        info = Info(
            is_module=self.find(MODULE),
            is_class=self.find(CLASS),
            is_static=self.find(STATIC),
            is_constant=self.find(CONSTANT),
            is_private=self.find(PRIVATE),
            is_public=self.find(PUBLIC),
            is_protected=self.find(PROTECTED),
            is_read_only=self.find(READONLY),
            is_member=self.find(MEMBER),
            inherits=self.find(INHERITS),
        )
        if callable is True:
            info.is_constructor = self.find(CONSTRUCTOR)
            info.returns = self.find(RETURNS)
        elif callable is False:
            info.value = self.find(DEFAULT)
        return info

    def describe(self, tag: Optional[Tag], concat: Optional[bool] = None) -> str:
        """
        Returns the description for the given tag.

        The block description takes precedence unless concat is given.  If concat is
        true, the tag name and description are joined, which suits tags like
        ``@returns a new component`` where the name is just the first word.
        """
        if self.description and concat is None:
            return self.description
        if not tag:
            return ''
        if not concat:
            return tag.description
        return f'{tag.name} {tag.description}'.strip()

    def is_excluded(self) -> bool:
        """
        Returns True if the block carries the registry's exclude tag.
        """
        exclude = self.registry.exclude
        return bool(exclude and self.find(exclude))
