# Copyright 2023-2024 by Vytautas Liuolia.
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

"""Media (aka MIME) type parsing, matching and shorthand expansion."""

from __future__ import annotations

import dataclasses
import functools
import math
import mimetypes
from typing import Dict, Iterable, List, Optional, Tuple

from merlin import errors
from merlin.constants import _SHORTHAND_MEDIA_TYPES
from merlin.constants import MEDIA_OCTET_STREAM

__all__ = (
    'best_match',
    'normalize_type',
    'normalize_types',
    'parse_header',
    'preferred',
    'quality',
)


def parse_header(line: str) -> Tuple[str, Dict[str, str]]:
    """Split a Content-Type-like header value into its type and parameters.

    Parameter names are lowercased and quoted values unquoted::

        parse_header('text/plain; Charset="utf-8"')
        # ('text/plain', {'charset': 'utf-8'})
    """
    key, _, rest = line.partition(';')

    pdict = {}
    while rest:
        end = rest.find(';')
        # NOTE(vytas): Do not split on a semicolon inside a quoted string.
        while end > 0 and (rest.count('"', 0, end) - rest.count('\\"', 0, end)) % 2:
            end = rest.find(';', end + 1)
        if end < 0:
            end = len(rest)

        name, equals, value = rest[:end].partition('=')
        if equals:
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1].replace('\\\\', '\\').replace('\\"', '"')
            pdict[name.strip().lower()] = value

        rest = rest[end + 1 :]

    return (key.strip(), pdict)


def _parse_media_type_header(media_type: str) -> Tuple[str, str, dict]:
    full_type, params = parse_header(media_type)

    # NOTE(vytas): Workaround from python-mimeparse by J. Gregorio et al.
    # Java URLConnection class sends an Accept header that includes a
    #   single '*'. Turn it into a legal wildcard.
    if full_type == '*':
        full_type = '*/*'

    main_type, separator, subtype = full_type.partition('/')
    if not separator:
        raise errors.InvalidMediaType('The media type value must contain type/subtype.')

    return (main_type.strip(), subtype.strip(), params)


@dataclasses.dataclass
class _MediaType:
    main_type: str
    subtype: str
    params: dict

    __slots__ = ('main_type', 'subtype', 'params')

    @classmethod
    def parse(cls, media_type: str) -> _MediaType:
        return cls(*_parse_media_type_header(media_type))


@dataclasses.dataclass
class _MediaRange:
    main_type: str
    subtype: str
    quality: float
    params: dict

    __slots__ = ('main_type', 'subtype', 'quality', 'params')

    _NOT_MATCHING = (-1, -1, -1, -1, 0.0)

    _Q_VALUE_ERROR_MESSAGE = (
        'If provided, the q parameter must be a real number '
        'in the range 0 through 1.'
    )

    @classmethod
    def parse(cls, media_range: str) -> _MediaRange:
        try:
            main_type, subtype, params = _parse_media_type_header(media_range)
        except errors.InvalidMediaType as ex:
            raise errors.InvalidMediaRange(
                'The media range value must contain type/subtype.'
            ) from ex

        if 'q' not in params:
            return cls(main_type, subtype, 1.0, params)

        try:
            q = float(params.pop('q'))
        except (TypeError, ValueError) as ex:
            raise errors.InvalidMediaRange(cls._Q_VALUE_ERROR_MESSAGE) from ex

        if not (0.0 <= q <= 1.0) or not math.isfinite(q):
            raise errors.InvalidMediaRange(cls._Q_VALUE_ERROR_MESSAGE)

        return cls(main_type, subtype, q, params)

    def match_score(self, media_type: _MediaType) -> Tuple[int, int, int, int, float]:
        if self.main_type == '*' or media_type.main_type == '*':
            main_matches = 0
        elif self.main_type != media_type.main_type:
            return self._NOT_MATCHING
        else:
            main_matches = 1

        if self.subtype == '*' or media_type.subtype == '*':
            sub_matches = 0
        elif self.subtype != media_type.subtype:
            return self._NOT_MATCHING
        else:
            sub_matches = 1

        mr_pnames = frozenset(self.params)
        mt_pnames = frozenset(media_type.params)

        exact_match = 0 if mr_pnames ^ mt_pnames else 1

        matching = mr_pnames & mt_pnames
        for pname in matching:
            if self.params[pname] != media_type.params[pname]:
                return self._NOT_MATCHING

        return (main_matches, sub_matches, exact_match, len(matching), self.quality)


_parse_media_type = functools.lru_cache(_MediaType.parse)


@functools.lru_cache()
def _parse_media_ranges(header: str) -> Tuple[_MediaRange, ...]:
    return tuple(_MediaRange.parse(media_range) for media_range in header.split(','))


@functools.lru_cache()
def quality(media_type: str, header: str) -> float:
    """Return the q-value the `header` assigns to `media_type`.

    Among the media ranges in the ``Accept``-style `header` that match
    `media_type`, the most specific one wins: exact main types beat
    wildcards, then exact subtypes, then exact parameter sets, then the
    number of shared parameters. Ties go to the highest q-value.

    Returns ``0.0`` when no media range matches.

    Raises:
        InvalidMediaType: `media_type` is not of the form type/subtype.
        InvalidMediaRange: `header` is malformed.
    """
    parsed_media_type = _parse_media_type(media_type)
    most_specific = max(
        media_range.match_score(parsed_media_type)
        for media_range in _parse_media_ranges(header)
    )
    return most_specific[-1]


def best_match(media_types: Iterable[str], header: str) -> str:
    """Choose media type with the highest :func:`quality` from a list of candidates.

    When several candidates share the highest quality, the one listed first
    wins.

    Args:
        media_types: An iterable over one or more Internet media types
            to match against the provided header value.
        header: The value of a header that conforms to the format of the
            HTTP ``Accept`` header.

    Returns:
        Best match from the supported candidates, or an empty string if the
        provided header value does not match any of the given types.
    """
    best = ''
    best_quality = 0.0

    for media_type in media_types:
        media_quality = quality(media_type, header)
        if media_quality > best_quality:
            best, best_quality = media_type, media_quality

    return best


@functools.lru_cache()
def _shorthand_media_types() -> Dict[str, str]:
    if not mimetypes.inited:
        mimetypes.init()

    types_map = mimetypes.types_map.copy()
    types_map.update(_SHORTHAND_MEDIA_TYPES)
    return types_map


def normalize_type(key: str) -> str:
    """Expand a shorthand type key to its canonical media type.

    Keys that already contain a ``/`` are returned unchanged. Any other key
    is looked up as a file extension, e.g. ``'html'`` expands to
    ``'text/html'`` and ``'json'`` to ``'application/json'``.

    Args:
        key: A media type, or a shorthand extension (with or without
            the leading dot).

    Returns:
        str: The canonical media type, or ``'application/octet-stream'`` for
        unknown shorthands.
    """
    if '/' in key:
        return key

    ext = key.lower() if key.startswith('.') else '.' + key.lower()
    return _shorthand_media_types().get(ext, MEDIA_OCTET_STREAM)


def normalize_types(keys: Iterable[str]) -> List[str]:
    """Expand each key via :func:`normalize_type`, preserving order."""
    return [normalize_type(key) for key in keys]


def preferred(candidates: Iterable[str], header: Optional[str]) -> Optional[str]:
    """Pick the candidate key best matching an ``Accept`` header value.

    Candidates may be media types or shorthand keys; each is expanded with
    :func:`normalize_type` for matching, but the original key is returned.

    Args:
        candidates: Media types or shorthand keys, in order of declaration.
        header: The ``Accept`` header value, or ``None`` if the client did
            not send one.

    Returns:
        The winning key, or ``None`` if nothing is acceptable. When `header`
        is missing or empty, the first candidate wins.
    """
    keys = list(candidates)
    if not keys:
        return None

    if not header:
        return keys[0]

    by_type: Dict[str, str] = {}
    for key in keys:
        by_type.setdefault(normalize_type(key), key)

    try:
        match = best_match(by_type, header)
    except errors.InvalidMediaRange:
        return None

    return by_type[match] if match else None
