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

"""Testing utilities for code built on Merlin, and for Merlin itself.

The helpers build simulated PEP-3333 requests to respond to::

    from merlin import testing


    def test_not_found():
        resp = testing.create_extended_resp(path='/missing')
        resp.send(404)

        assert resp.data == b'Not Found'
"""

from merlin.testing.helpers import create_environ
from merlin.testing.helpers import create_extended_resp
from merlin.testing.helpers import create_req
from merlin.testing.helpers import create_resp
from merlin.testing.helpers import DEFAULT_HOST
from merlin.testing.helpers import DEFAULT_UA

__all__ = (
    'create_environ',
    'create_extended_resp',
    'create_req',
    'create_resp',
    'DEFAULT_HOST',
    'DEFAULT_UA',
)
