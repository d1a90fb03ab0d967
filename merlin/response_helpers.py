# Copyright 2013 by Rackspace Hosting, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Utilities for the response helpers."""

from __future__ import annotations

import enum
from typing import Any, Mapping, NamedTuple, Optional, Tuple

from merlin.util.misc import is_status_code

BINARY_TYPES = (bytes, bytearray, memoryview)


class CallShape(enum.Enum):
    """The argument layouts accepted by ``send()``, ``json()``, ``jsonp()``
    and ``redirect()``.
    """  # noqa: D205

    BODY_ONLY = 'body'
    """A single argument: the body (or the redirect target)."""
    STATUS_THEN_BODY = 'status, body'
    """Two arguments, the status code first."""
    BODY_THEN_STATUS = 'body, status'
    """Two arguments, the status code last (kept for backwards compatibility)."""


class CallArgs(NamedTuple):
    shape: CallShape
    status: Optional[int]
    body: Any


def resolve_call_args(name: str, args: Tuple[Any, ...]) -> CallArgs:
    """Resolve positional helper arguments into a tagged :class:`CallArgs`.

    With two arguments, the second one is taken to be the status code if it
    is numeric and the first one is not. In every other case the first
    argument is the status code.

    Args:
        name (str): Name of the helper being called, for error messages.
        args (tuple): The positional arguments as passed by the caller.

    Returns:
        CallArgs: The call shape along with the status (``None`` if not
        given) and the body.

    Raises:
        TypeError: More than two arguments were passed.
    """
    if len(args) > 2:
        raise TypeError(
            '{}() takes at most 2 positional arguments but {} were given'.format(
                name, len(args)
            )
        )

    if len(args) < 2:
        return CallArgs(CallShape.BODY_ONLY, None, args[0] if args else None)

    first, second = args
    if not is_status_code(first) and is_status_code(second):
        return CallArgs(CallShape.BODY_THEN_STATUS, second, first)

    return CallArgs(CallShape.STATUS_THEN_BODY, first, second)


def format_links(links: Mapping[str, str]) -> str:
    """Format a relation -> URL mapping as a ``Link`` header value.

    Relations are rendered in the mapping's iteration order, e.g.::

        <http://api.example.com/users?page=2>; rel="next", <...>; rel="last"
    """
    return ', '.join('<{}>; rel="{}"'.format(url, rel) for rel, url in links.items())


def is_binary(value: Any) -> bool:
    return isinstance(value, BINARY_TYPES)


def encode_text(text: str, charset: str) -> bytes:
    """Encode a text body with the configured charset.

    Raises:
        ValueError: `text` contains characters that `charset` cannot
            represent.
    """
    try:
        return text.encode(charset)
    except UnicodeEncodeError as ex:
        raise ValueError(
            'The response body cannot be encoded as {}: {}'.format(charset, ex.reason)
        ) from ex


def with_charset(media_type: str, charset: str) -> str:
    """Replace any parameters of `media_type` with a charset parameter."""
    return '{}; charset={}'.format(media_type.partition(';')[0], charset)
