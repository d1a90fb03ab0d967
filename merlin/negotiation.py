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

"""Content negotiation: format()."""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Dict, List, Mapping, Optional, TYPE_CHECKING, Union

import merlin
from merlin.errors import HTTPNotAcceptable
from merlin.util.mediatypes import normalize_type
from merlin.util.mediatypes import normalize_types

if TYPE_CHECKING:
    from merlin.request import Request

Handler = Callable[[], Any]

# NOTE: Key recognized by FormatMap.from_mapping() as the fallback handler.
_DEFAULT_KEY = 'default'


@dataclasses.dataclass
class FormatMap:
    """Handlers to choose from when negotiating the response format.

    Attributes:
        handlers (dict): Zero-argument callables keyed by media type
            (e.g., ``'application/json'``) or shorthand (e.g., ``'json'``),
            in order of preference.
        default (callable): Invoked when the client accepts none of the
            `handlers` (default ``None``). It is not itself a candidate.
    """

    handlers: Mapping[str, Handler]
    default: Optional[Handler] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Handler]) -> FormatMap:
        """Split a ``'default'`` entry, if any, off the given handlers."""
        handlers: Dict[str, Handler] = dict(mapping)
        default = handlers.pop(_DEFAULT_KEY, None)
        return cls(handlers, default)

    @property
    def types(self) -> List[str]:
        """Canonical media types of the candidate handlers."""
        return normalize_types(self.handlers)


class NegotiationMixin:
    """Content negotiation against the request's Accept header.

    Expects the host class to provide ``self.req`` along with
    :class:`~merlin.headers.HeaderMixin`.
    """

    __slots__ = ()

    req: Request

    def format(
        self,
        handlers: Union[FormatMap, Mapping[str, Handler]],
        default: Optional[Handler] = None,
    ):
        """Respond with the representation the client prefers.

        Example::

            resp.format({
                'text/plain': lambda: resp.send('hey'),
                'text/html': lambda: resp.send('<p>hey</p>'),
                'json': lambda: resp.send({'message': 'hey'}),
            })

        When the request carries no Accept header, the first handler is
        invoked. The Content-Type is set to the (expanded) media type of
        the chosen key before invoking its handler; the handler may
        still override it. ``Vary: Accept`` is always set.

        Args:
            handlers: A :class:`FormatMap`, or a mapping of media types or
                shorthands to zero-argument callables. A ``'default'`` key
                in a plain mapping is treated the same as `default`.

        Keyword Args:
            default (callable): Invoked when none of the `handlers` is
                acceptable (default ``None``). Takes precedence over the
                default carried by `handlers`.

        Returns:
            The response context, for chaining.

        Raises:
            HTTPNotAcceptable: None of the handlers is acceptable and no
                default was provided. The offered media types are
                available as the ``types`` attribute of the error.
        """
        if not isinstance(handlers, FormatMap):
            handlers = FormatMap.from_mapping(handlers)

        if default is None:
            default = handlers.default

        candidates = list(handlers.handlers)
        key = self.req.accepts(candidates)

        self.set('Vary', 'Accept')

        if key is not None:
            self.set('Content-Type', normalize_type(key))
            handlers.handlers[key]()
        elif default is not None:
            merlin._logger.debug(
                '[MERLIN] No acceptable format among %s; using default', candidates
            )
            default()
        else:
            merlin._logger.debug(
                '[MERLIN] No acceptable format among %s', candidates
            )
            raise HTTPNotAcceptable(types=handlers.types)

        return self
