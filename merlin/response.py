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

"""Response class."""

from __future__ import annotations

import http
from typing import Any, Callable, Optional, Union

import merlin
from merlin.errors import ResponseCompleteError
from merlin.util import misc
from merlin.util.structures import CaseInsensitiveDict


class Response:
    """Represents the outgoing HTTP response primitive.

    This is the bare response the helpers operate on: a mutable status
    code, a case-insensitive header store and a finalize operation,
    :meth:`end`. Writing the result to a socket is left to the host
    server; after :meth:`end` has been called, the status, headers and
    :attr:`data` describe exactly what should go over the wire.

    Keyword Arguments:
        options (ResponseOptions): Set of global options passed from the
            application (default ``None``).
    """

    __slots__ = (
        'complete',
        'data',
        'options',
        '_headers',
        '_status_code',
        '__dict__',
    )

    complete: bool
    """Set to ``True`` once :meth:`end` has been called. A complete response
    refuses any further modification.
    """
    data: Optional[bytes]
    """The payload passed to :meth:`end`, or ``None`` if no body bytes are
    to be transmitted.
    """
    options: ResponseOptions
    """Set of global options passed in from the application."""

    def __init__(self, options: Optional[ResponseOptions] = None) -> None:
        self.options = options if options is not None else ResponseOptions()
        self.complete = False
        self.data = None

        self._status_code = 200
        self._headers = CaseInsensitiveDict()

    def __repr__(self) -> str:
        return '<%s: %s>' % (self.__class__.__name__, self.status)

    @property
    def status_code(self) -> int:
        """HTTP status code of the response (default ``200``).

        Only integers in the range 100 through 599 (including members of
        :class:`http.HTTPStatus`) may be assigned.
        """
        return self._status_code

    @status_code.setter
    def status_code(self, value: Union[int, http.HTTPStatus]) -> None:
        self._ensure_incomplete('set the status code')
        self._status_code = misc.validate_status_code(value)

    @property
    def status(self) -> str:
        """HTTP status line derived from :attr:`status_code` (e.g., ``'200 OK'``)."""
        return misc.code_to_http_status(self._status_code)

    @property
    def headers(self) -> CaseInsensitiveDict:
        """Copy of all headers set for the response.

        Note that a new copy is created and returned each time this property is
        referenced.
        """
        return self._headers.copy()

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Retrieve the raw string value for the given header.

        Args:
            name (str): Header name, case-insensitive.

        Keyword Args:
            default: Value to return if the header
                is not found (default ``None``).

        Returns:
            str: The value of the specified header if set, or
            the default value if not set.
        """
        return self._headers.get(name, default)

    def set_header(self, name: str, value: Any) -> None:
        """Set a header for this response to a given value.

        Warning:
            Calling this method overwrites any values already set for this
            header.

        Args:
            name (str): Header name (case-insensitive).
            value: Value for the header; coerced to ``str``.
        """
        self._ensure_incomplete('set the {} header'.format(name))

        self._headers[name] = str(value)

    def delete_header(self, name: str) -> None:
        """Delete a header that was previously set for this response.

        If the header was not previously set, nothing is done (no error is
        raised).

        Args:
            name (str): Header name (case-insensitive).
        """
        self._ensure_incomplete('delete the {} header'.format(name))

        self._headers.pop(name, None)

    def end(self, data: Optional[bytes] = None) -> None:
        """Finalize the response.

        Keyword Args:
            data (bytes): The body bytes to transmit, or ``None`` to
                transmit no body at all.

        Raises:
            ResponseCompleteError: The response has already been finalized.
        """
        self._ensure_incomplete('finalize the response')

        self.data = data
        self.complete = True

    def _ensure_incomplete(self, action: str) -> None:
        if self.complete:
            merlin._logger.warning(
                '[MERLIN] Attempted to %s after the response was sent', action
            )
            raise ResponseCompleteError(
                'Unable to {}: the response has already been sent.'.format(action)
            )


class ResponseOptions:
    """Defines a set of configurable response options.

    An instance of this class may be shared by all responses of an
    application::

        options = merlin.ResponseOptions()
        options.json_spaces = 0
        options.jsonp_callback_name = 'cb'

        resp = merlin.ExtendedResponse(req, options=options)
    """

    json_spaces: int
    """Number of spaces used to indent the output of ``json()`` and
    ``jsonp()`` (default ``2``). Set to ``0`` to keep each nested item on
    its own line without indentation, or to ``None`` for compact output.
    """
    json_dumps: Optional[Callable[[Any], str]]
    """Custom function used in lieu of :func:`json.dumps` to serialize
    ``json()`` and ``jsonp()`` bodies (default ``None``). When set,
    :attr:`json_spaces` is ignored.
    """
    jsonp_callback_name: str
    """Name of the query string parameter holding the JSONP callback
    (default ``'callback'``).
    """
    default_charset: str
    """Encoding used to turn text bodies into bytes (default ``'utf-8'``).
    """

    __slots__ = (
        'default_charset',
        'json_dumps',
        'json_spaces',
        'jsonp_callback_name',
    )

    def __init__(self) -> None:
        self.json_spaces = 2
        self.json_dumps = None
        self.jsonp_callback_name = 'callback'
        self.default_charset = 'utf-8'
