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

"""HTTP error classes and other Merlin-specific errors.

All classes are available directly from the `merlin` package namespace::

    import merlin

    try:
        resp.format({'application/json': render_json})
    except merlin.HTTPNotAcceptable as ex:
        resp.status(ex.status_code).send(', '.join(ex.types))
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, MutableMapping, Optional, Type

from merlin.http_error import HTTPError
from merlin.status_codes import HTTP_NOT_ACCEPTABLE

__all__ = (
    'HTTPNotAcceptable',
    'InvalidMediaRange',
    'InvalidMediaType',
    'ResponseCompleteError',
)


class ResponseCompleteError(RuntimeError):
    """The response has already been finalized.

    Raised when a header, the status, or the body of a response is modified
    after the response has been sent. This always indicates a programming
    error in the calling code, such as invoking ``send()`` twice.
    """


class InvalidMediaType(ValueError):
    """The provided media type cannot be parsed into type/subtype."""


class InvalidMediaRange(InvalidMediaType):
    """The media range contains an invalid media type and/or the q value."""


class HTTPNotAcceptable(HTTPError):
    """406 Not Acceptable.

    The target resource does not have a current representation that
    would be acceptable to the user agent, according to the proactive
    negotiation header fields received in the request, and the server
    is unwilling to supply a default representation.

    The server SHOULD generate a payload containing a list of available
    representation characteristics and corresponding resource
    identifiers from which the user or user agent can choose the one
    most appropriate.

    (See also: RFC 7231, Section 6.5.6)

    All the arguments are defined as keyword-only.

    Keyword Args:
        types (iterable of str): The media types that were offered to the
            client, in order of declaration.
        description (str): Human-friendly description of the error, along with
            a helpful suggestion or two. Defaults to a message listing the
            offered `types`.
        headers (dict): A ``dict`` of header names and values
            to set (default ``None``).
    """

    __slots__ = ('types',)

    def __init__(
        self,
        *,
        types: Iterable[str] = (),
        description: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.types = list(types)

        if description is None and self.types:
            description = 'Supported media types: ' + ', '.join(self.types)

        super().__init__(
            HTTP_NOT_ACCEPTABLE,
            description=description,
            headers=headers,
        )

    def to_dict(
        self, obj_type: Type[MutableMapping[str, Any]] = dict
    ) -> MutableMapping[str, Any]:
        obj = super().to_dict(obj_type)
        obj['types'] = list(self.types)
        return obj
