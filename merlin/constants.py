import sys

__all__ = (
    'MEDIA_HTML',
    'MEDIA_JS',
    'MEDIA_JSON',
    'MEDIA_JSON_UTF8',
    'MEDIA_OCTET_STREAM',
    'MEDIA_TEXT',
    'MEDIA_XML',
    'SINGLETON_HEADERS',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

MERLIN_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of Merlin supports the current Python version."""

if not MERLIN_SUPPORTED:  # pragma: nocover
    raise ImportError('Merlin requires Python 3.8+.')

MEDIA_JSON = 'application/json'

# NOTE: Default for json() and jsonp() under the default utf-8 charset.
MEDIA_JSON_UTF8 = 'application/json; charset=utf-8'

# NOTE(euj1n0ng): According to RFC 9239, Changed the intended usage of the
#   media type "text/javascript" from OBSOLETE to COMMON. Changed
#   the intended usage for all other script media types to obsolete.
MEDIA_JS = 'text/javascript'

MEDIA_HTML = 'text/html; charset=utf-8'
MEDIA_TEXT = 'text/plain'
MEDIA_XML = 'application/xml'
MEDIA_OCTET_STREAM = 'application/octet-stream'

# NOTE(kgriffs): We do not expect more than one of these in the request
SINGLETON_HEADERS = frozenset(
    [
        'content-length',
        'content-type',
        'cookie',
        'expect',
        'from',
        'host',
        'max-forwards',
        'referer',
        'user-agent',
    ]
)

# NOTE: Shorthand keys accepted by format(), expanded without a charset.
_SHORTHAND_MEDIA_TYPES = tuple(
    (ext, media_type.split(';', 1)[0])
    for ext, media_type in (
        ('.htm', MEDIA_HTML),
        ('.html', MEDIA_HTML),
        ('.js', MEDIA_JS),
        ('.json', MEDIA_JSON),
        ('.mjs', MEDIA_JS),
        ('.text', MEDIA_TEXT),
        ('.txt', MEDIA_TEXT),
        ('.xml', MEDIA_XML),
    )
)
