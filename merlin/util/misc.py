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

"""Miscellaneous utilities.

This module provides misc. utility functions for apps and the Merlin
helpers themselves. These functions are hoisted into the front-door
`merlin` module for convenience::

    import merlin

    merlin.code_to_reason_phrase(404)  # 'Not Found'
"""

from __future__ import annotations

import functools
import http
from typing import Any, Union

from merlin import status_codes

__all__ = (
    'code_to_http_status',
    'code_to_reason_phrase',
    'http_status_to_code',
    'is_status_code',
    'validate_status_code',
)

_DEFAULT_HTTP_REASON = 'Unknown'


def is_status_code(value: Any) -> bool:
    """Return ``True`` if `value` may stand for a numeric status code.

    Any ``int`` (including members of :class:`http.HTTPStatus`) qualifies,
    with the exception of ``bool``.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def validate_status_code(value: Any) -> int:
    """Return `value` as an ``int`` if it is a status code from 100 through 599.

    Raises:
        ValueError: `value` is not numeric or is out of range.
    """
    if not is_status_code(value) or not 100 <= value <= 599:
        raise ValueError('{!r} is not a valid status code'.format(value))

    return int(value)


@functools.lru_cache(maxsize=64)
def http_status_to_code(status: Union[http.HTTPStatus, int, bytes, str]) -> int:
    """Convert a status code, :class:`http.HTTPStatus` member or status
    line (``str`` or ``bytes``, e.g. ``'404 Not Found'``) to an ``int``.

    Raises:
        ValueError: `status` cannot be interpreted as a status code.
    """  # noqa: D205
    if isinstance(status, http.HTTPStatus):
        return status.value

    if isinstance(status, bool):
        raise ValueError('status must be an int, str, or a member of http.HTTPStatus')

    if isinstance(status, int):
        return status

    if isinstance(status, bytes):
        status = status.decode()

    if not isinstance(status, str):
        raise ValueError('status must be an int, str, or a member of http.HTTPStatus')

    if len(status) < 3:
        raise ValueError('status strings must be at least three characters long')

    try:
        return int(status[:3])
    except ValueError:
        raise ValueError('status strings must start with a three-digit integer')


def code_to_reason_phrase(status: Union[int, http.HTTPStatus]) -> str:
    """Look up the canonical reason phrase for a status code.

    Args:
        status: The status code to look up.

    Returns:
        str: The reason phrase (e.g., ``'Not Found'`` for 404), or
        ``'Unknown'`` for codes missing from the table.
    """
    return status_codes.REASON_PHRASES.get(int(status), _DEFAULT_HTTP_REASON)


@functools.lru_cache(maxsize=64)
def code_to_http_status(status: Union[int, http.HTTPStatus, bytes, str]) -> str:
    """Convert a status code or :class:`http.HTTPStatus` member to a
    status line, e.g. ``'404 Not Found'``.

    Strings and byte strings that already contain a space are taken to
    be status lines and returned as ``str``.

    Raises:
        ValueError: `status` is not a code in the range 100 through 599.
    """  # noqa: D205
    # NOTE(kgriffs): If it is a str but does not have a space, assume it is
    #   just the number by itself.
    if isinstance(status, str) and ' ' in status:
        return status

    if isinstance(status, bytes) and b' ' in status:
        return status.decode()

    try:
        code = int(status)
    except (ValueError, TypeError):
        raise ValueError('{!r} is not a valid status code'.format(status))
    if not 100 <= code <= 599:
        raise ValueError('{!r} is not a valid status code'.format(status))

    return '{} {}'.format(code, code_to_reason_phrase(code))
