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
from dataclasses import dataclass, fields
import json
import numpy as np

from ..constants import MASS_UNIT, PHYSICAL_ATTRIBUTES
from .errors import DecodeError

# attribute name -> json key
JSON_KEYS = {
    'name': 'name',
    'id': 'id',
    'english_name': 'englishName',
    'is_planet': 'isPlanet',
    'mass': 'mass',
    'body_type': 'bodyType',
}
JSON_KEYS.update({attr: key for attr, key, _, _ in PHYSICAL_ATTRIBUTES})
UNITS = {attr: unit for attr, _, _, unit in PHYSICAL_ATTRIBUTES}


def _number(value):
    # bool is an int subclass, but true/false is never a measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not np.isfinite(value):
        return None
    return value


def _integer(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _string(value):
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class Mass:
    """Mass in scientific notation: value x 10^exponent kg."""
    value: float = None
    exponent: int = None

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            return None
        return cls(value=_number(data.get('massValue')),
                   exponent=_integer(data.get('massExponent')))

    @property
    def is_complete(self):
        return self.value is not None and self.exponent is not None

    def to_quantity(self):
        if not self.is_complete:
            return None
        return self.value * 10. ** self.exponent * MASS_UNIT

    def to_dict(self):
        data = {}
        if self.value is not None:
            data['massValue'] = self.value
        if self.exponent is not None:
            data['massExponent'] = self.exponent
        return data


@dataclass(frozen=True)
class CelestialBody:
    """
    A single body of the solar system as returned by the API.

    Only ``name`` and ``id`` are required. Every other attribute is None when
    the API leaves it out or sends something of the wrong type, except
    ``is_planet`` which defaults to False.
    """
    name: str
    id: str
    english_name: str = None
    is_planet: bool = False
    mass: Mass = None
    density: float = None
    gravity: float = None
    escape: float = None
    mean_radius: float = None
    equa_radius: float = None
    polar_radius: float = None
    flattening: float = None
    sideral_orbit: float = None
    sideral_rotation: float = None
    axial_tilt: float = None
    avg_temp: float = None
    body_type: str = None

    @classmethod
    def from_dict(cls, data):
        """
        Build a body from a decoded JSON object
        :param data: dict parsed from the API response
        :return CelestialBody: the populated record
        :raises DecodeError: if data is not an object or lacks name/id
        """
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object for a body, got {type(data).__name__}")

        for key in ('name', 'id'):
            if not isinstance(data.get(key), str):
                raise DecodeError(f"body is missing required string field '{key}'")

        is_planet = data.get('isPlanet')
        physical = {attr: _number(data.get(key)) for attr, key, _, _ in PHYSICAL_ATTRIBUTES}

        return cls(name=data['name'],
                   id=data['id'],
                   english_name=_string(data.get('englishName')),
                   is_planet=is_planet if isinstance(is_planet, bool) else False,
                   mass=Mass.from_dict(data.get('mass')),
                   body_type=_string(data.get('bodyType')),
                   **physical)

    def quantity(self, attr):
        """Return a physical attribute as an astropy Quantity, or None when absent."""
        if attr == 'mass':
            return self.mass.to_quantity() if self.mass is not None else None
        value = getattr(self, attr)
        if value is None:
            return None
        return value * UNITS[attr]

    def to_dict(self):
        """Re-serialize the populated fields using the API's JSON keys."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Mass):
                value = value.to_dict()
            data[JSON_KEYS[f.name]] = value
        return data


def _load_json(text):
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise DecodeError(f"response is not valid JSON ({e})") from e


def decode_body(text):
    """Decode a detail response: a bare body object."""
    return CelestialBody.from_dict(_load_json(text))


def decode_body_list(text):
    """Decode a list response: ``{"bodies": [<body>, ...]}``."""
    data = _load_json(text)
    if not isinstance(data, dict) or not isinstance(data.get('bodies'), list):
        raise DecodeError("expected a JSON object with a 'bodies' array")
    return [CelestialBody.from_dict(item) for item in data['bodies']]
