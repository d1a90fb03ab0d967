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

"""HTTP status codes and their canonical reason phrases.

The table is immutable and shared by every response::

    from merlin import status_codes

    status_codes.REASON_PHRASES[404]  # 'Not Found'
"""

from types import MappingProxyType
from typing import Final, Mapping

__all__ = (
    'REASON_PHRASES',
    'HTTP_OK',
    'HTTP_NO_CONTENT',
    'HTTP_MOVED_PERMANENTLY',
    'HTTP_FOUND',
    'HTTP_SEE_OTHER',
    'HTTP_NOT_MODIFIED',
    'HTTP_TEMPORARY_REDIRECT',
    'HTTP_PERMANENT_REDIRECT',
    'HTTP_NOT_ACCEPTABLE',
)

REASON_PHRASES: Final[Mapping[int, str]] = MappingProxyType(
    {
        # 1xx - Informational
        100: 'Continue',
        101: 'Switching Protocols',
        102: 'Processing',
        103: 'Early Hints',
        # 2xx - Success
        200: 'OK',
        201: 'Created',
        202: 'Accepted',
        203: 'Non-Authoritative Information',
        204: 'No Content',
        205: 'Reset Content',
        206: 'Partial Content',
        207: 'Multi-Status',
        208: 'Already Reported',
        226: 'IM Used',
        # 3xx - Redirection
        300: 'Multiple Choices',
        301: 'Moved Permanently',
        302: 'Found',
        303: 'See Other',
        304: 'Not Modified',
        305: 'Use Proxy',
        307: 'Temporary Redirect',
        308: 'Permanent Redirect',
        # 4xx - Client Error
        400: 'Bad Request',
        401: 'Unauthorized',  # <-- Really means "unauthenticated"
        402: 'Payment Required',
        403: 'Forbidden',  # <-- Really means "unauthorized"
        404: 'Not Found',
        405: 'Method Not Allowed',
        406: 'Not Acceptable',
        407: 'Proxy Authentication Required',
        408: 'Request Timeout',
        409: 'Conflict',
        410: 'Gone',
        411: 'Length Required',
        412: 'Precondition Failed',
        413: 'Content Too Large',
        414: 'URI Too Long',
        415: 'Unsupported Media Type',
        416: 'Range Not Satisfiable',
        417: 'Expectation Failed',
        418: "I'm a teapot",
        421: 'Misdirected Request',
        422: 'Unprocessable Entity',
        423: 'Locked',
        424: 'Failed Dependency',
        425: 'Too Early',
        426: 'Upgrade Required',
        428: 'Precondition Required',
        429: 'Too Many Requests',
        431: 'Request Header Fields Too Large',
        451: 'Unavailable For Legal Reasons',
        # 5xx - Server Error
        500: 'Internal Server Error',
        501: 'Not Implemented',
        502: 'Bad Gateway',
        503: 'Service Unavailable',
        504: 'Gateway Timeout',
        505: 'HTTP Version Not Supported',
        506: 'Variant Also Negotiates',
        507: 'Insufficient Storage',
        508: 'Loop Detected',
        510: 'Not Extended',
        511: 'Network Authentication Required',
    }
)

# NOTE: Integer constants for the codes the helpers special-case.
HTTP_OK: Final[int] = 200
HTTP_NO_CONTENT: Final[int] = 204
HTTP_MOVED_PERMANENTLY: Final[int] = 301
HTTP_FOUND: Final[int] = 302
HTTP_SEE_OTHER: Final[int] = 303
HTTP_NOT_MODIFIED: Final[int] = 304
HTTP_TEMPORARY_REDIRECT: Final[int] = 307
HTTP_PERMANENT_REDIRECT: Final[int] = 308
HTTP_NOT_ACCEPTABLE: Final[int] = 406
