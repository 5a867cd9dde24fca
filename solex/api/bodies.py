# ########################################################################### #
#    Copyright (c) 2019-2020, California Institute of Technology.
#    All rights reserved.  Based on Government Sponsored Research under
#    contracts NNN12AA01C, NAS7-1407 and/or NAS7-03001.
#
#    Redistribution and use in source and binary forms, with or without
#    modification, are permitted provided that the following conditions
#    are met:
#      1. Redistributions of source code must retain the above copyright
#         notice, this list of conditions and the following disclaimer.
#      2. Redistributions in binary form must reproduce the above copyright
#         notice, this list of conditions and the following disclaimer in
#         the documentation and/or other materials provided with the
#         distribution.
#      3. Neither the name of the California Institute of
#         Technology (Caltech), its operating division the Jet Propulsion
#         Laboratory (JPL), the National Aeronautics and Space
#         Administration (NASA), nor the names of its contributors may be
#         used to endorse or promote products derived from this software
#         without specific prior written permission.
#
#    THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
#    "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
#    LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR
#    A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE CALIFORNIA
#    INSTITUTE OF TECHNOLOGY BE LIABLE FOR ANY DIRECT, INDIRECT, INCIDENTAL,
#    SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT LIMITED
#    TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA, OR
#    PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
#    LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
#    NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS
#    SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# ########################################################################### #
#    Solar System OpenData Explorer (SOLEX)
#    # NOTE: See companion file version.py for version info.
# ########################################################################### #
import logging
import requests
import urllib.parse

from ..constants import API_BASE_URL
from .errors import TransportError
from .models import decode_body, decode_body_list

log = logging.getLogger(__name__)


class SolarSystemOpenData:
    """Client for the Solar System OpenData ``bodies`` collection."""

    def __init__(self, base_url=API_BASE_URL):
        self.base_url = base_url if base_url.endswith('/') else base_url + '/'

        # CONFIGURATIONS
        self.requests_timeout = None  # library default, no override

    def build_url(self, body_id=None):
        """
        Build the request URL
        :param body_id: identifier of a single body, or None for the whole collection
        :return str: the collection endpoint, or the endpoint with body_id appended
        """
        if not body_id:
            return self.base_url
        return f"{self.base_url}{urllib.parse.quote(body_id, safe='', errors='surrogateescape')}"

    def fetch(self, url):
        """
        Issue one GET and return the body of a successful response.
        """
        log.debug(f"GET {url}")
        try:
            response = requests.get(url, timeout=self.requests_timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(str(e)) from e
        log.debug(f"{response.status_code} received, {len(response.content)} bytes")
        return response.text

    def list_bodies(self):
        bodies = decode_body_list(self.fetch(self.build_url()))
        log.debug(f"Decoded {len(bodies)} bodies")
        return bodies

    def body_details(self, body_id):
        return decode_body(self.fetch(self.build_url(body_id)))
