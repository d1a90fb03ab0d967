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

"""Request class."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from merlin.util import mediatypes
from merlin.util.uri import parse_query_string

WSGI_CONTENT_HEADERS = frozenset(['CONTENT_TYPE', 'CONTENT_LENGTH'])


class Request:
    """Represents a client's HTTP request.

    Only the handful of request attributes that the response helpers
    consult are exposed: the method, the path and mount point, request
    headers, query parameters, and Accept header negotiation.

    Args:
        env (dict): A WSGI environment dict passed in from the server. See
            also PEP-3333.

    Keyword Arguments:
        options (RequestOptions): Set of global options passed from the
            application (default ``None``).
    """

    __slots__ = (
        'env',
        'method',
        'options',
        'path',
        'query_string',
        '_params',
    )

    env: Dict[str, Any]
    """Reference to the WSGI environ ``dict`` passed in from the server."""
    method: str
    """HTTP method requested, uppercase (e.g., ``'GET'``, ``'POST'``, etc.)"""
    path: str
    """Path portion of the request URI (not including query string).

    Note:
        `req.path` does not include the mount point (see :attr:`root_path`).
    """
    query_string: str
    """Query string portion of the request URI, without the preceding
    '?' character.
    """
    options: RequestOptions
    """Set of global options passed in from the application."""

    def __init__(
        self, env: Dict[str, Any], options: Optional[RequestOptions] = None
    ) -> None:
        self.env = env
        self.options = options if options is not None else RequestOptions()

        self.method = env['REQUEST_METHOD']

        # NOTE(kgriffs): PEP 3333 specifies that PATH_INFO may be the
        # empty string, so normalize it in that case.
        path: str = env.get('PATH_INFO') or '/'

        # PEP 3333 specifies that the PATH_INFO variable is always
        # "bytes tunneled as latin-1" and must be encoded back.
        if not path.isascii():
            path = path.encode('iso-8859-1').decode('utf-8', 'replace')

        self.path = path

        self.query_string = env.get('QUERY_STRING', '')
        if self.query_string:
            self._params = parse_query_string(
                self.query_string,
                keep_blank=self.options.keep_blank_qs_values,
            )
        else:
            self._params = {}

    def __repr__(self) -> str:
        return '<%s: %s %r>' % (self.__class__.__name__, self.method, self.path)

    @property
    def root_path(self) -> str:
        """Mount point of the application (the ``SCRIPT_NAME``), e.g.
        ``'/blog'``, or ``''`` when it is mounted at the server root.

        Redirect targets without a leading ``/`` are resolved against it.
        Also available as :attr:`mount_path`.
        """
        return self.env.get('SCRIPT_NAME') or ''

    mount_path = root_path

    @property
    def host(self) -> str:
        """Host request header field, as sent by the client.

        The value may include a port (e.g., ``'example.com:8080'``). When
        the header is missing (e.g., HTTP/1.0), it is reconstructed from the
        ``SERVER_NAME`` and ``SERVER_PORT`` environ variables.
        """
        try:
            return self.env['HTTP_HOST']
        except KeyError:
            pass

        # NOTE(kgriffs): According to PEP-3333, this variable
        # will always be present.
        host = self.env['SERVER_NAME']

        scheme = self.env.get('wsgi.url_scheme', 'http')
        port = self.env.get('SERVER_PORT')
        default_port = '443' if scheme == 'https' else '80'
        if port and port != default_port:
            host += ':' + port

        return host

    @property
    def referrer(self) -> Optional[str]:
        """Value of the Referrer header, falling back to the (misspelled,
        but far more common) Referer header.
        """  # noqa: D205
        return self.get_header('Referrer') or self.get_header('Referer')

    @property
    def accept(self) -> Optional[str]:
        """Value of the Accept header, or ``None`` if the header is missing."""
        return self.env.get('HTTP_ACCEPT') or None

    @property
    def params(self) -> Dict[str, Union[str, List[str]]]:
        """Query string parameters, decoded.

        A parameter given more than once maps to a ``list`` of its values.
        """
        return self._params

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a request header by its case-insensitive name.

        Repeated headers are returned as a single comma-separated value,
        the way the WSGI server folded them.

        Args:
            name (str): Header name (e.g., ``'Referer'``).

        Keyword Args:
            default: Returned when the header is missing (default ``None``).
        """

        wsgi_name = name.upper().replace('-', '_')

        try:
            return self.env['HTTP_' + wsgi_name]
        except KeyError:
            # NOTE(kgriffs): There are a couple headers that do not
            # use the HTTP prefix in the env, so try those.
            if wsgi_name in WSGI_CONTENT_HEADERS:
                try:
                    return self.env[wsgi_name]
                except KeyError:
                    pass

            return default

    def get_param(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get the first value of a query string parameter.

        Args:
            name (str): Parameter name, case-sensitive (e.g., ``'callback'``).

        Keyword Args:
            default: Returned when the parameter is missing (default ``None``).
        """
        try:
            value = self._params[name]
        except KeyError:
            return default

        if isinstance(value, list):
            return value[0]

        return value

    def client_accepts(self, media_type: str) -> bool:
        """Check whether the Accept header admits `media_type`.

        `media_type` may also be a shorthand key such as ``'html'``.
        """
        return self.accepts([media_type]) is not None

    def accepts(self, candidates: Iterable[str]) -> Optional[str]:
        """Return the client's preferred type among several choices.

        This is the Accept ranking function consulted by
        ``ExtendedResponse.format()``.

        Args:
            candidates (iterable of str): Media types or shorthand keys
                (e.g., ``'json'``), in order of declaration.

        Returns:
            str: The candidate the client prefers, as it was passed in. If
            the request carries no Accept header, the first candidate is
            returned. ``None`` is returned when none of the candidates is
            acceptable, or when the Accept header is malformed.
        """
        return mediatypes.preferred(candidates, self.accept)


class RequestOptions:
    """Defines a set of configurable request options."""

    keep_blank_qs_values: bool
    """Set to ``True`` to keep query string fields even if they do not have a
    value (default ``False``).
    """

    __slots__ = ('keep_blank_qs_values',)

    def __init__(self) -> None:
        self.keep_blank_qs_values = False
