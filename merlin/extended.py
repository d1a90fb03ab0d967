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

"""The extended response and the helper installer."""

from __future__ import annotations

from typing import Any, Optional

from merlin.body import BodyMixin
from merlin.headers import HeaderMixin
from merlin.negotiation import NegotiationMixin
from merlin.redirects import RedirectMixin
from merlin.request import Request
from merlin.response import Response
from merlin.response import ResponseOptions
from merlin.util.structures import CaseInsensitiveDict

HELPER_METHODS = (
    'status',
    'set',
    'header',
    'get',
    'links',
    'type',
    'content_type',
    'send',
    'json',
    'jsonp',
    'format',
    'redirect',
)
"""Names of the operations attached by :func:`install`."""


class ExtendedResponse(HeaderMixin, BodyMixin, NegotiationMixin, RedirectMixin):
    """A response primitive augmented with chainable helper operations.

    The wrapper does not alter the primitive response beyond setting its
    status, headers and payload::

        resp = merlin.ExtendedResponse(req)
        resp.status(201).set('X-Request-Id', request_id).json({'id': 1})

        resp.resp.data  # b'{\\n  "id": 1\\n}'

    Args:
        req (Request): The request being responded to.

    Keyword Arguments:
        resp (Response): The primitive response to operate on. A new
            :class:`~merlin.Response` is created if not provided.
        options (ResponseOptions): Response options to use in lieu of
            those of `resp` (default ``None``).
    """

    __slots__ = ('options', 'req', 'resp')

    def __init__(
        self,
        req: Request,
        resp: Optional[Response] = None,
        options: Optional[ResponseOptions] = None,
    ) -> None:
        self.req = req
        self.resp = resp if resp is not None else Response(options=options)

        if options is None:
            options = getattr(self.resp, 'options', None) or ResponseOptions()
        self.options = options

    def __repr__(self) -> str:
        return '<%s: %r>' % (self.__class__.__name__, self.resp)

    @property
    def status_code(self) -> int:
        """Status code of the underlying response."""
        return self.resp.status_code

    @property
    def headers(self) -> CaseInsensitiveDict:
        """Copy of the headers of the underlying response."""
        return self.resp.headers

    @property
    def complete(self) -> bool:
        """``True`` once the response has been finalized."""
        return self.resp.complete

    @property
    def data(self) -> Optional[bytes]:
        """The payload of the finalized response (``None`` if none)."""
        return self.resp.data


def install(resp: Any, req: Request, options: Optional[ResponseOptions] = None) -> None:
    """Attach the helper operations to a response instance.

    Each operation listed in :data:`HELPER_METHODS` is bound to an
    :class:`ExtendedResponse` wrapping `resp` and set as an attribute of
    `resp`, unless `resp` already has an attribute of that name; operations
    supplied by the host are never overridden::

        merlin.install(resp, req)
        resp.set('X-Powered-By', 'merlin').send('<p>hey</p>')

    Note:
        The chainable operations return the wrapping
        :class:`ExtendedResponse`, which offers every helper operation
        as well.

    Args:
        resp: The response primitive. It must provide ``status_code``,
            ``get_header()``, ``set_header()``, ``delete_header()`` and
            ``end()``, and accept new attributes.
        req (Request): The request being responded to.

    Keyword Arguments:
        options (ResponseOptions): Response options (default ``None``).
    """
    context = ExtendedResponse(req, resp, options=options)

    for name in HELPER_METHODS:
        # NOTE: Do not override operations provided by the host.
        if not hasattr(resp, name):
            setattr(resp, name, getattr(context, name))
