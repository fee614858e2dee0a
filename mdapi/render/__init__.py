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

from typing import Dict, Type

from .base import Renderer, Options, Sink, RenderError
from .markdown import MarkdownRenderer, RenderState
from .html import HTMLRenderer
from .json import JSONRenderer
from .yaml import YAMLRenderer

RENDERERS: Dict[str, Type[Renderer]] = {
    'markdown': MarkdownRenderer,
    'html': HTMLRenderer,
    'json': JSONRenderer,
    'yaml': YAMLRenderer,
}
