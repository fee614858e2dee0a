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
    'Tag', 'TagDef', 'TagParser', 'ParseError',
    'NAME', 'STATIC', 'CONSTANT', 'PUBLIC', 'PRIVATE', 'PROTECTED', 'READONLY',
    'MODULE', 'CLASS', 'CONSTRUCTOR', 'INHERITS', 'FUNCTION', 'MEMBER', 'PARAM',
    'RETURNS', 'PROPERTY', 'DEFAULT', 'DEPRECATED', 'AUTHOR', 'VERSION', 'SINCE',
    'SEE', 'USAGE', 'EXAMPLE', 'OPTION', 'THROWS', 'EVENT',
]

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Tuple

from .utils import MdapiError

#
# Canonical tag identifiers.
#
NAME = 'name'
STATIC = 'static'
CONSTANT = 'constant'
PUBLIC = 'public'
PRIVATE = 'private'
PROTECTED = 'protected'
READONLY = 'readonly'
MODULE = 'module'
CLASS = 'class'
CONSTRUCTOR = 'constructor'
INHERITS = 'inherits'
FUNCTION = 'function'
MEMBER = 'member'
PARAM = 'param'
RETURNS = 'returns'
PROPERTY = 'property'
DEFAULT = 'default'
DEPRECATED = 'deprecated'
AUTHOR = 'author'
VERSION = 'version'
SINCE = 'since'
SEE = 'see'
USAGE = 'usage'
EXAMPLE = 'example'
OPTION = 'option'
THROWS = 'throws'
EVENT = 'event'


class ParseError(MdapiError, ValueError):
    pass


@dataclass(frozen=True)
class Tag:
    """
    A single annotation from a comment block, e.g. ``@param {String} [name=x] The name.``

    Tags are immutable.  Where tag resolution needs to fill in missing information (for
    example a @function tag without a name borrowing the name from @name), a new Tag is
    created with dataclasses.replace().
    """
    id: str
    name: str = ''
    type: str = ''
    description: str = ''
    optional: bool = False
    # Default value given in the form [name=value]
    value: Optional[str] = None
    # Source line the tag was parsed from, if known.  Not considered for equality.
    line: Optional[int] = field(default=None, compare=False)


@dataclass
class TagDef:
    """
    Definition of a recognized tag.
    """
    name: str
    synonyms: List[str] = field(default_factory=list)
    # Raw tags don't have their text split into type/name/description: the whole text
    # becomes the description.  Used for code snippets where whitespace matters.
    raw: bool = False


class TagParser:
    """
    Parses the text following an @tag into a Tag object.

    The general form is ``@id {type} name description`` where every part is optional.
    The name may be given as ``[name]`` to denote an optional parameter, or as
    ``[name=value]`` to also provide a default value.
    """
    RE_TAG: Pattern[str] = re.compile(r'^@([A-Za-z_][\w.-]*)\s*(.*)$')

    def __init__(self, raw: Optional[List[str]] = None):
        # Ids of tags whose text is taken verbatim
        self.raw = set(raw or ())


    def match(self, line: str) -> Optional[Tuple[str, str]]:
        """
        Returns a 2-tuple of (tag id, remaining text) if the given (gutter-stripped)
        comment line begins a tag, or None otherwise.
        """
        m = self.RE_TAG.search(line.strip())
        return m.groups() if m else None


    def _split_type(self, text: str) -> Tuple[str, str]:
        """
        Splits off a leading {type} expression, honoring nested braces (e.g.
        ``{Object.<string, {a: number}>}``).
        """
        if not text.startswith('{'):
            return '', text
        depth = 0
        for n, c in enumerate(text):
            if c == '{':
                depth += 1
            elif c == '}':
                depth -= 1
                if depth == 0:
                    return text[1:n].strip(), text[n+1:].strip()
        raise ParseError('unbalanced braces in type expression')


    def _split_name(self, text: str) -> Tuple[str, bool, Optional[str], str]:
        """
        Splits off the name token, returning (name, optional, default value, rest).
        """
        if text.startswith('['):
            end = text.find(']')
            if end < 0:
                raise ParseError('unterminated optional name')
            inner, rest = text[1:end].strip(), text[end+1:].strip()
            name, sep, value = inner.partition('=')
            return name.strip(), True, value.strip() if sep else None, rest
        parts = text.split(None, 1)
        if not parts:
            return '', False, None, ''
        return parts[0], False, None, parts[1].strip() if len(parts) > 1 else ''


    def parse(self, id: str, text: str, file: Optional[str] = None, line: Optional[int] = None) -> Tag:
        """
        Creates a Tag for the given tag id from the text that followed it.

        ParseError is raised if the text is malformed.
        """
        text = text.strip()
        if id in self.raw:
            return Tag(id=id, description=text, line=line)
        try:
            typ, rest = self._split_type(text)
            # Description may span multiple lines but the name is always on the first.
            first, nl, remaining = rest.partition('\n')
            name, optional, value, desc = self._split_name(first.strip())
        except ParseError as e:
            where = f'{file}:{line}: ' if file else ''
            raise ParseError(f'{where}@{id} is invalid: {e.args[0]}') from None
        if nl:
            desc = (desc + '\n' + remaining).strip()
        return Tag(id=id, name=name, type=typ, description=desc, optional=optional, value=value, line=line)
