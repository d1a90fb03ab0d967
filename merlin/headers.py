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

"""Status and header accessors."""

from __future__ import annotations

import http
from typing import Any, Mapping, Optional, TYPE_CHECKING, Union

from merlin.response_helpers import format_links

if TYPE_CHECKING:
    from merlin.response import Response

_UNSET = object()


class HeaderMixin:
    """Chainable status and header operations.

    Expects the host class to provide the underlying primitive as
    ``self.resp``.
    """

    __slots__ = ()

    resp: Response

    def status(self, code: Union[int, http.HTTPStatus]):
        """Set the response status code.

        Args:
            code (int): The status code, 100 through 599.

        Returns:
            The response context, for chaining.
        """
        self.resp.status_code = code
        return self

    def set(self, field: Union[str, Mapping[str, Any]], value: Any = _UNSET):
        """Set header `field` to `value`, or pass a mapping of header fields.

        All values are coerced to ``str``::

            resp.set('Accept', 'application/json')
            resp.set({'Accept': 'text/plain', 'X-API-Key': 'tobi'})

        Aliased as :meth:`header`.

        Returns:
            The response context, for chaining.
        """
        if value is _UNSET:
            for name, field_value in field.items():
                self.resp.set_header(name, str(field_value))
        else:
            self.resp.set_header(field, str(value))

        return self

    header = set

    def get(self, field: str) -> Optional[str]:
        """Get the value of header `field`, or ``None`` if it is not set."""
        return self.resp.get_header(field)

    def links(self, links: Mapping[str, str]):
        """Set the Link header field with the given `links`.

        Example::

            resp.links({
                'next': 'http://api.example.com/users?page=2',
                'last': 'http://api.example.com/users?page=5',
            })

        Args:
            links (dict): Mapping of relation names to URLs.

        Returns:
            The response context, for chaining.
        """
        return self.set('Link', format_links(links))

    def type(self, media_type: str):
        """Set the Content-Type to `media_type`.

        Aliased as :meth:`content_type`.

        Returns:
            The response context, for chaining.
        """
        return self.set('Content-Type', media_type)

    content_type = type
