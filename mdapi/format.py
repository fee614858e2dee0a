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
String formatters producing markdown fragments.

These are pure functions: everything they depend on, including the visual cues and
section titles from the registry, is passed in explicitly.
"""

__all__ = [
    'Method', 'heading', 'fenced', 'meta', 'deprecated', 'signature', 'parameter',
    'returns', 'link', 'access', 'property', 'method', 'inherits',
]

from typing import NamedTuple, Optional, Sequence, Union

from .tags import Tag
from .utils import recache


class Method(NamedTuple):
    # Heading text for the function
    title: str
    # Code signature, without the parameter list
    signature: str


def heading(text: str, level: int) -> str:
    """
    Returns an ATX heading.  Level must be at least 1.
    """
    if level < 1:
        raise ValueError(f'heading level must be at least 1 (got {level})')
    return '#' * level + ' ' + text


def fenced(code: str, lang: Union[str, bool, None] = None) -> str:
    """
    Returns a fenced code block, with the given language as the info string unless
    lang isn't a string.
    """
    info = lang if isinstance(lang, str) else ''
    return '```' + info + '\n' + code + '\n```'


def meta(tag: Tag, title: str) -> str:
    value = ' '.join(s for s in (tag.name, tag.description) if s)
    return f'* **{title}** `{value}`'


def deprecated(tag: Tag, titles) -> str:
    notice = ' '.join(s for s in (tag.name, tag.description) if s)
    return f'> **{titles.DEPRECATED}:** {notice}'.rstrip()


def signature(params: Sequence[Tag]) -> str:
    """
    Returns the parenthesized parameter list, with optional parameters wrapped in
    brackets, e.g. ``(a[, b])``.
    """
    sig = '('
    for n, param in enumerate(params):
        if param.optional:
            sig += '['
        if n:
            sig += ', '
        sig += param.name
        if param.optional:
            sig += ']'
    return sig + ')'


def parameter(tag: Tag) -> str:
    """
    Returns a list item for a @param (or @option, @throws, @event) tag.
    """
    typ = ''
    if tag.type:
        typ = tag.type
        if tag.value is not None:
            typ += '=' + tag.value
        typ += ' '
    return (f'* `{tag.name}` ' + typ + tag.description).rstrip()


def returns(comment, tag: Tag, titles) -> str:
    return f'{titles.RETURNS} ' + comment.describe(tag, True)


def link(tag: Tag) -> str:
    """
    Returns a list item linking to the @see target.  The protocol scheme is stripped
    from the visible text, and the description (if any) is used as the link title.
    """
    url = tag.name
    text = tag.description or tag.name
    text = recache(r'^\w+://').sub('', text)
    ln = f'* [{text}]({url}'
    if tag.description:
        ln += f' "{tag.description}"'
    return ln + ')'


def access(info) -> str:
    """
    Returns the access modifier prefix (including trailing space) for a symbol, or an
    empty string if there are no modifiers.
    """
    parts = []
    prop = info.is_public or info.is_protected or info.is_private
    if prop:
        parts.append(prop.id)
    if info.is_static:
        parts.append(info.is_static.id)
    if info.is_read_only:
        parts.append(info.is_read_only.id)
    return ' '.join(parts) + (' ' if parts else '')


def property(tag: Tag, info) -> str:
    """
    Returns the declaration line for a property or constant.
    """
    decl = tag.name
    if tag.type:
        decl = tag.type + ' ' + decl
    if info.value:
        value = ' '.join(s for s in (info.value.name, info.value.description) if s)
        decl += f' = {value};'
    if info.is_constant:
        decl = 'const ' + decl
    return access(info) + decl


def inherits(tag: Tag, info, cues) -> str:
    """
    Returns the heading title with the inheritance chain, e.g. ``Foo < Bar < Object``.
    Additional ancestors are given as the whitespace-separated description of the
    @inherits tag.
    """
    sep = cues.CONSTRUCTOR if cues else ' < '
    chain = [tag.name]
    if info.inherits.name:
        chain.append(info.inherits.name)
    if info.inherits.description:
        chain.extend(info.inherits.description.split())
    return sep.join(chain)


def method(tag: Tag, info, cues, title: Optional[str] = None) -> Method:
    """
    Returns the heading title and code signature for a function.

    Static and member functions get a visual cue prefixed to the title, and members of
    a named owner are qualified via the owner's prototype in the signature.  When cues
    are disabled, the title is suffixed with ``()`` instead.
    """
    sig = tag.name
    flag = access(info)
    title = title or tag.name

    if cues:
        if info.is_static:
            title = cues.STATIC + tag.name
        elif info.is_member:
            title = cues.MEMBER + tag.name
    else:
        title += '()'

    if info.is_constructor:
        sig = 'new ' + tag.name
    elif info.is_member and info.is_member.name and not info.is_static and cues:
        sig = info.is_member.name + '.prototype.' + tag.name

    if flag and not info.is_constructor:
        sig = flag + sig
    return Method(title, sig)
