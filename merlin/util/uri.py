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

"""URI utilities.

This module provides utility functions to decode and parse query strings.
"""

from __future__ import annotations

from typing import Dict, List, Union
from urllib.parse import unquote_plus

__all__ = ('decode', 'parse_query_string')


def decode(encoded_uri: str) -> str:
    """Decode percent-encoded characters in a URI or query string.

    Plus signs are decoded to spaces, as is customary for form-encoded
    query strings. Invalid UTF-8 sequences are replaced.
    """
    if '+' not in encoded_uri and '%' not in encoded_uri:
        return encoded_uri

    return unquote_plus(encoded_uri, errors='replace')


def parse_query_string(
    query_string: str, keep_blank: bool = False
) -> Dict[str, Union[str, List[str]]]:
    """Parse a query string into a dict.

    Query string parameters are assumed to use standard form-encoding. Only
    parameters with values are returned. For example, given 'foo=bar&flag',
    this function would ignore 'flag' unless `keep_blank` is set.

    A parameter repeated several times is collected into a ``list`` of
    values in order of appearance.

    Args:
        query_string (str): The query string to parse.
        keep_blank (bool): Set to ``True`` to return fields even if
            they do not have a value (default ``False``).

    Returns:
        dict: A dictionary of (*name*, *value*) pairs, one per query
        parameter. Note that *value* may be a single ``str``, or a
        ``list`` of ``str``.
    """

    params: Dict[str, Union[str, List[str]]] = {}

    for field in query_string.split('&'):
        k, _, v = field.partition('=')
        if not v and (not keep_blank or not k):
            continue

        k = decode(k)
        v = decode(v)

        if k in params:
            # The key was present more than once in the query string.
            # Convert to a list, or append the next value to the list.
            old_value = params[k]
            if isinstance(old_value, list):
                old_value.append(v)
            else:
                params[k] = [old_value, v]
        else:
            params[k] = v

    return params
