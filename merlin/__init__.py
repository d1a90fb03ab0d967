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

"""Primary package for Merlin, chainable helpers for HTTP responses.

Merlin augments a bare HTTP response with a small set of chainable
operations: status and header manipulation, body serialization
(text, JSON, JSONP, binary), content negotiation, and redirects. The
`merlin` package can be used to directly access most of its classes,
functions, and variables::

    import merlin

    resp = merlin.ExtendedResponse(req)
    resp.status(404).send('<p>Not here</p>')
"""

import logging as _logging

__all__ = (
    # Helper interface
    'CallShape',
    'ExtendedResponse',
    'FormatMap',
    'HELPER_METHODS',
    'install',
    'Request',
    'RequestOptions',
    'resolve_location',
    'Response',
    'ResponseOptions',
    # Public constants
    'MEDIA_HTML',
    'MEDIA_JS',
    'MEDIA_JSON',
    'MEDIA_JSON_UTF8',
    'MEDIA_OCTET_STREAM',
    'MEDIA_TEXT',
    'MEDIA_XML',
    # Utilities
    'CaseInsensitiveDict',
    'code_to_http_status',
    'code_to_reason_phrase',
    'http_status_to_code',
    'is_status_code',
    'parse_header',
    'validate_status_code',
    # Error classes
    'HTTPError',
    'HTTPNotAcceptable',
    'InvalidMediaRange',
    'InvalidMediaType',
    'ResponseCompleteError',
)

# NOTE(kgriffs,vytas): Hoist classes and functions into the merlin namespace.
#   Please explicitly list ALL exports.
from merlin.constants import MEDIA_HTML
from merlin.constants import MEDIA_JS
from merlin.constants import MEDIA_JSON
from merlin.constants import MEDIA_JSON_UTF8
from merlin.constants import MEDIA_OCTET_STREAM
from merlin.constants import MEDIA_TEXT
from merlin.constants import MEDIA_XML
from merlin.errors import HTTPNotAcceptable
from merlin.errors import InvalidMediaRange
from merlin.errors import InvalidMediaType
from merlin.errors import ResponseCompleteError
from merlin.extended import ExtendedResponse
from merlin.extended import HELPER_METHODS
from merlin.extended import install
from merlin.http_error import HTTPError
from merlin.negotiation import FormatMap
from merlin.redirects import resolve_location
from merlin.request import Request
from merlin.request import RequestOptions
from merlin.response import Response
from merlin.response import ResponseOptions
from merlin.response_helpers import CallShape
from merlin.util import CaseInsensitiveDict
from merlin.util import code_to_http_status
from merlin.util import code_to_reason_phrase
from merlin.util import http_status_to_code
from merlin.util import is_status_code
from merlin.util import parse_header
from merlin.util import validate_status_code

# Package version
from merlin.version import __version__  # NOQA: F401

# NOTE(kgriffs): Only to be used internally on the rare occasion that we
#   need to log something that we can't communicate any other way.
_logger = _logging.getLogger('merlin')
_logger.addHandler(_logging.NullHandler())
