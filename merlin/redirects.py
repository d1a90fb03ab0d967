# Copyright 2015 by Kurt Griffiths
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

"""Redirect target resolution and redirect responses."""

from __future__ import annotations

import html
from typing import Any, TYPE_CHECKING

from merlin.response_helpers import CallShape
from merlin.response_helpers import encode_text
from merlin.response_helpers import resolve_call_args
from merlin.status_codes import HTTP_FOUND
from merlin.util.misc import code_to_reason_phrase
from merlin.util.misc import validate_status_code

if TYPE_CHECKING:
    from merlin.request import Request
    from merlin.response import Response
    from merlin.response import ResponseOptions

_BACK = 'back'
"""Symbolic redirect target standing for the Referrer (or ``/``)."""


def resolve_location(url: str, req: Request) -> str:
    """Resolve a redirect target against the request.

    * ``'back'`` is replaced with the Referrer header value, or ``'/'``.
    * URLs containing ``://`` or starting with ``//`` are returned as-is.
    * URLs starting with ``.`` are relative to the request path,
      e.g. ``'../login'`` from ``/blog/post/1`` yields
      ``/blog/post/1/../login``.
    * Other URLs without a leading ``/`` are relative to the mount point
      (:attr:`~merlin.Request.root_path`), e.g. ``'login'`` for an app
      mounted at ``/blog`` yields ``/blog/login``.

    Anything that is not absolute at this point is made protocol-relative
    by prefixing ``//`` and the Host header value.

    Args:
        url (str): The redirect target.
        req (Request): The request being responded to.

    Returns:
        str: The value for the Location header.
    """
    if url == _BACK:
        url = req.referrer or '/'

    if '://' in url or url.startswith('//'):
        return url

    if url.startswith('.'):
        url = req.path + '/' + url
    elif not url.startswith('/'):
        url = req.root_path + '/' + url

    return '//' + req.host + url


class RedirectMixin:
    """Redirect responses.

    Expects the host class to provide ``self.req``, ``self.resp`` and
    ``self.options``, along with :class:`~merlin.headers.HeaderMixin`
    and :class:`~merlin.negotiation.NegotiationMixin`.
    """

    __slots__ = ()

    req: Request
    resp: Response
    options: ResponseOptions

    def redirect(self, *args: Any) -> None:
        """Redirect to the given `url` with an optional status code.

        The status defaults to 302 Found. The target may be given with
        or without a status, before or after it::

            resp.redirect('/foo/bar')
            resp.redirect('http://example.com')
            resp.redirect(301, 'http://example.com')
            resp.redirect('http://example.com', 301)
            resp.redirect('../login')  # /blog/post/1 -> /blog/post/1/../login
            resp.redirect('back')

        See :func:`resolve_location` for how relative targets are resolved.

        A short notice is negotiated for the body: plain text for
        ``text/plain`` clients, an HTML link for ``text/html`` clients,
        and an empty body otherwise. The response is finalized.

        Args:
            url or status: The redirect target, or the status followed by
                the target. ``(url, status)`` is also accepted.

        Raises:
            ValueError: The status is not a valid status code, or the
                target cannot be encoded with the configured charset. The
                response is left untouched.
        """
        call = resolve_call_args('redirect', args)

        status = HTTP_FOUND if call.shape is CallShape.BODY_ONLY else call.status
        status = validate_status_code(status)

        target = call.body
        if not isinstance(target, str):
            raise TypeError('redirect target must be a str, not {!r}'.format(target))

        url = resolve_location(target, self.req)
        charset = self.options.default_charset
        encode_text(url, charset)

        phrase = code_to_reason_phrase(status)
        body = ''

        def render_text():
            nonlocal body
            body = '{}. Redirecting to {}'.format(phrase, url)

        def render_html():
            nonlocal body
            escaped = html.escape(url)
            body = '<p>{}. Redirecting to <a href="{}">{}</a></p>'.format(
                phrase, escaped, escaped
            )

        def render_nothing():
            nonlocal body
            body = ''

        self.format({'text': render_text, 'html': render_html}, default=render_nothing)

        data = encode_text(body, charset)

        self.status(status)
        self.set('Location', url)
        self.set('Content-Length', len(data))
        self.resp.end(None if self.req.method == 'HEAD' else data)
