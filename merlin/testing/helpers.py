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

"""Helpers for simulating requests and the responses built for them.

Everything here is also available from the `testing` package::

    from merlin import testing

    req = testing.create_req(path='/blog/post/1', root_path='/blog')
"""

from __future__ import annotations

import io
import sys
from typing import Any, Dict, Optional

import merlin
from merlin.constants import SINGLETON_HEADERS

DEFAULT_HOST = 'merlin.example.org'
DEFAULT_UA = 'merlin-client/' + merlin.__version__

_DEFAULT_PORTS = {'http': '80', 'https': '443'}


def create_environ(
    path='/',
    query_string='',
    http_version='1.1',
    scheme='http',
    host=DEFAULT_HOST,
    port=None,
    headers=None,
    method='GET',
    root_path=None,
) -> Dict[str, Any]:
    """Build a PEP-3333 environ ``dict`` describing a simulated request.

    Keyword Args:
        path (str): Request path, relative to `root_path` (default ``'/'``).
        query_string (str): Raw query string, without the ``'?'``
            (default ``''``).
        http_version (str): ``'1.1'`` (default) or ``'1.0'``. No Host
            header is simulated for HTTP/1.0.
        scheme (str): ``'http'`` (default) or ``'https'``.
        host (str): Server name (default ``'merlin.example.org'``).
        port (int): Server port; defaults to the scheme's standard port.
            Non-standard ports are appended to the Host header.
        headers: Request headers, as a mapping or an iterable of
            (*name*, *value*) pairs. Repeated names are joined with
            ``','`` unless only a single instance of the header is allowed.
            A User-Agent of ``merlin-client/<version>`` is added unless
            one is given.
        method (str): HTTP method (default ``'GET'``).
        root_path (str): Mount point of the application, i.e. the
            ``SCRIPT_NAME`` (default ``''``).
    """
    if query_string.startswith('?'):
        raise ValueError("query_string should not start with '?'")

    scheme = scheme.lower()
    default_port = _DEFAULT_PORTS.get(scheme, '80')
    port = default_port if port is None else str(int(port))

    root_path = root_path or ''
    if root_path and not root_path.startswith('/'):
        root_path = '/' + root_path

    env = {
        'SERVER_PROTOCOL': 'HTTP/' + http_version,
        'SERVER_SOFTWARE': 'merlin-testing',
        'SCRIPT_NAME': root_path,
        'REQUEST_METHOD': method,
        # NOTE: PEP-3333 strings carry raw bytes tunneled as latin-1.
        'PATH_INFO': path.encode().decode('iso-8859-1'),
        'QUERY_STRING': query_string,
        'SERVER_NAME': host,
        'SERVER_PORT': port,
        'wsgi.version': (1, 0),
        'wsgi.url_scheme': scheme,
        'wsgi.input': io.BytesIO(),
        'wsgi.errors': sys.stderr,
        'wsgi.multithread': False,
        'wsgi.multiprocess': True,
        'wsgi.run_once': False,
    }

    if http_version != '1.0':
        env['HTTP_HOST'] = host if port == default_port else host + ':' + port

    _add_headers_to_environ(env, headers)

    return env


def create_req(options=None, **kwargs) -> merlin.Request:
    """Create a :class:`merlin.Request` for a simulated request.

    Keyword arguments other than `options` (a
    :class:`merlin.RequestOptions`) are passed to :func:`create_environ`.
    """
    return merlin.Request(create_environ(**kwargs), options=options)


def create_resp(options: Optional[merlin.ResponseOptions] = None) -> merlin.Response:
    """Create a blank :class:`merlin.Response`."""
    return merlin.Response(options=options)


def create_extended_resp(
    options: Optional[merlin.ResponseOptions] = None, **kwargs
) -> merlin.ExtendedResponse:
    """Create a :class:`merlin.ExtendedResponse` for a simulated request.

    Keyword arguments other than `options` are passed to
    :func:`create_environ`.
    """
    return merlin.ExtendedResponse(create_req(**kwargs), options=options)


def _add_headers_to_environ(env, headers):
    if headers:
        items = headers.items() if hasattr(headers, 'items') else headers

        for name, value in items:
            wsgi_name = name.upper().replace('-', '_')
            if wsgi_name not in ('CONTENT_TYPE', 'CONTENT_LENGTH'):
                wsgi_name = 'HTTP_' + wsgi_name

            value = '' if value is None else value.strip()

            if wsgi_name in env and name.lower() not in SINGLETON_HEADERS:
                env[wsgi_name] += ',' + value
            else:
                env[wsgi_name] = value

    env.setdefault('HTTP_USER_AGENT', DEFAULT_UA)
