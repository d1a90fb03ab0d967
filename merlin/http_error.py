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

"""HTTPError exception class."""

from __future__ import annotations

import json
from typing import Any, Dict, MutableMapping, Optional, Type, Union

from merlin.util import misc

ResponseStatus = Union[int, str]


class HTTPError(Exception):
    """Represents a generic HTTP error.

    Merlin itself never writes error responses; an ``HTTPError`` is raised
    to the surrounding code, which is expected to turn it into an
    appropriate HTTP response for the client (for instance, by catching it
    in the host framework's error handler and rendering :meth:`to_dict`).

    Args:
        status: An ``int`` code, a :class:`http.HTTPStatus` member or a
            status line such as ``'406 Not Acceptable'``.

    Keyword Args:
        title (str): Short error title. Defaults to the status line.
        description (str): Longer, human-friendly explanation
            (default ``None``).
        headers (dict): Extra headers for the error response
            (default ``None``).
    """

    __slots__ = (
        'status',
        'title',
        'description',
        'headers',
    )

    status: ResponseStatus
    title: str
    description: Optional[str]
    headers: Optional[Dict[str, str]]

    def __init__(
        self,
        status: ResponseStatus,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status = status
        self.title = title or misc.code_to_http_status(status)
        self.description = description
        self.headers = headers

    def __repr__(self) -> str:
        return '<%s: %s>' % (self.__class__.__name__, self.status)

    __str__ = __repr__

    @property
    def status_code(self) -> int:
        """The ``status`` as an ``int``."""
        return misc.http_status_to_code(self.status)

    def to_dict(
        self, obj_type: Type[MutableMapping[str, Any]] = dict
    ) -> MutableMapping[str, Any]:
        """Return the title and description (if any) as a ``dict``.

        Args:
            obj_type: The mapping type to populate (default ``dict``).
        """

        obj = obj_type()

        obj['title'] = self.title

        if self.description is not None:
            obj['description'] = self.description

        return obj

    def to_json(self) -> bytes:
        """Serialize :meth:`to_dict` to UTF-8 encoded JSON."""
        return json.dumps(self.to_dict(), ensure_ascii=False).encode()
