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

"""Body serialization: send(), json() and jsonp()."""

from __future__ import annotations

import json
import re
from typing import Any, Optional, TYPE_CHECKING

from merlin.constants import MEDIA_HTML
from merlin.constants import MEDIA_JS
from merlin.constants import MEDIA_JSON
from merlin.constants import MEDIA_OCTET_STREAM
from merlin.constants import MEDIA_TEXT
from merlin.response_helpers import CallArgs
from merlin.response_helpers import CallShape
from merlin.response_helpers import encode_text
from merlin.response_helpers import is_binary
from merlin.response_helpers import resolve_call_args
from merlin.response_helpers import with_charset
from merlin.status_codes import HTTP_NO_CONTENT
from merlin.status_codes import HTTP_NOT_MODIFIED
from merlin.util.misc import code_to_reason_phrase
from merlin.util.misc import is_status_code
from merlin.util.misc import validate_status_code

if TYPE_CHECKING:
    from merlin.request import Request
    from merlin.response import Response
    from merlin.response import ResponseOptions

# NOTE: Everything but ASCII word characters, '$', '.', '[' and ']'.
_UNSAFE_CALLBACK_CHARS = re.compile(r'[^\[\]\w$.]', re.ASCII)

_BODYLESS_STATUSES = frozenset([HTTP_NO_CONTENT, HTTP_NOT_MODIFIED])


def sanitize_callback(callback: str) -> str:
    """Strip a JSONP callback name down to ``[A-Za-z0-9_$.[\\]]``."""
    return _UNSAFE_CALLBACK_CHARS.sub('', callback)


class BodyMixin:
    """Body producing operations.

    Expects the host class to provide ``self.req``, ``self.resp`` and
    ``self.options``, along with :class:`~merlin.headers.HeaderMixin`.
    """

    __slots__ = ()

    req: Request
    resp: Response
    options: ResponseOptions

    def send(self, *args: Any):
        """Send a response.

        Examples::

            resp.send(b'wahoo')
            resp.send({'some': 'json'})
            resp.send('<p>some html</p>')
            resp.send(404, 'Sorry, cant find that')
            resp.send(404)

        The body determines the default Content-Type, unless one was set
        explicitly:

        * ``int``: the body is treated as the status code, and replaced by
          its reason phrase (``text/plain``);
        * ``str``: ``text/html``, with the
          :attr:`~merlin.ResponseOptions.default_charset` as its charset;
        * ``None``: an empty body;
        * ``bytes``-like: ``application/octet-stream``;
        * anything else is delegated to :meth:`json`.

        Content-Length is computed from the encoded body. Responses with
        a 204 or 304 status carry neither Content-Type, Content-Length
        nor a body, and no body bytes are ever sent in reply to HEAD.

        Args:
            body or status: The body, or the status followed by the body.
                ``(body, status)`` is also accepted.

        Returns:
            The response context.

        Raises:
            ValueError: A status is not a valid status code, or the body
                cannot be encoded with the configured charset. The
                response is left untouched.
        """
        call = resolve_call_args('send', args)
        body = call.body

        if is_status_code(body):
            return self._send(
                call, code_to_reason_phrase(body), MEDIA_TEXT, body_status=body
            )
        if isinstance(body, str):
            return self._send(call, body, self._with_charset(MEDIA_HTML))
        if body is None:
            return self._send(call, '', None)
        if is_binary(body):
            return self._send(call, body, MEDIA_OCTET_STREAM)

        return self._send_json(call)

    def json(self, *args: Any):
        """Send a JSON response.

        Examples::

            resp.json(None)
            resp.json({'user': 'tj'})
            resp.json(500, 'oh noes!')
            resp.json(404, 'I dont have that')

        The Content-Type defaults to ``application/json`` with the
        :attr:`~merlin.ResponseOptions.default_charset` as its charset.

        Returns:
            The response context.
        """
        return self._send_json(resolve_call_args('json', args))

    def jsonp(self, *args: Any):
        """Send a JSON response with JSONP callback support.

        The callback name is read from the query string parameter named by
        :attr:`~merlin.ResponseOptions.jsonp_callback_name` (``callback``
        by default). Characters other than ASCII letters, digits, ``_``,
        ``$``, ``.``, ``[`` and ``]`` are stripped from it. If anything is
        left, the body is sent as ``text/javascript`` wrapped in a call to
        that function, e.g. ``fn({"user": "tj"});``. Otherwise the
        response is the same as for :meth:`json`.

        Returns:
            The response context.
        """
        call = resolve_call_args('jsonp', args)
        body = self._dump_json(call.body)

        callback = self.req.get_param(self.options.jsonp_callback_name)
        if callback:
            callback = sanitize_callback(callback)

        if callback:
            body = '{}({});'.format(callback, body)
            return self._send(call, body, MEDIA_JS, replace_type=True)

        return self._send(call, body, self._with_charset(MEDIA_JSON))

    def _send(
        self,
        call: CallArgs,
        body: Any,
        media_type: Optional[str],
        body_status: Optional[int] = None,
        replace_type: bool = False,
    ):
        status = None
        if call.shape is not CallShape.BODY_ONLY:
            status = validate_status_code(call.status)
        if body_status is not None:
            status = validate_status_code(body_status)

        if isinstance(body, str):
            data = encode_text(body, self.options.default_charset)
        else:
            data = bytes(body)

        resp = self.resp

        if status is not None:
            resp.status_code = status

        if media_type is not None and (
            replace_type or not resp.get_header('Content-Type')
        ):
            self.type(media_type)

        if resp.get_header('Content-Length') is None:
            resp.set_header('Content-Length', str(len(data)))

        if resp.status_code in _BODYLESS_STATUSES:
            resp.delete_header('Content-Type')
            resp.delete_header('Content-Length')
            data = b''

        resp.end(None if self.req.method == 'HEAD' else data)
        return self

    def _send_json(self, call: CallArgs):
        body = self._dump_json(call.body)
        return self._send(call, body, self._with_charset(MEDIA_JSON))

    def _with_charset(self, media_type: str) -> str:
        return with_charset(media_type, self.options.default_charset)

    def _dump_json(self, obj: Any) -> str:
        dumps = self.options.json_dumps
        if dumps is not None:
            return dumps(obj)

        return json.dumps(obj, indent=self.options.json_spaces, ensure_ascii=False)
