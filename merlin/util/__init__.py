"""General utilities.

This package includes multiple modules that implement utility functions
and classes that are useful to both apps and the Merlin helpers
themselves.

All utilities in the `structures` and `misc` modules are imported directly
into the front-door `merlin` module for convenience::

    import merlin

    phrase = merlin.code_to_reason_phrase(404)

Conversely, the `uri` and `mediatypes` modules must be imported explicitly::

    from merlin.util import mediatypes

    mediatypes.normalize_type('html')  # 'text/html'
"""

# Hoist misc. utils
from merlin.util.mediatypes import parse_header
from merlin.util.misc import code_to_http_status
from merlin.util.misc import code_to_reason_phrase
from merlin.util.misc import http_status_to_code
from merlin.util.misc import is_status_code
from merlin.util.misc import validate_status_code
from merlin.util.structures import CaseInsensitiveDict

__all__ = (
    'CaseInsensitiveDict',
    'code_to_http_status',
    'code_to_reason_phrase',
    'http_status_to_code',
    'is_status_code',
    'parse_header',
    'validate_status_code',
)
