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
import astropy.units as u
import numpy as np

from .constants import MASS_INCOMPLETE, MASS_MISSING, NOT_AVAILABLE, PHYSICAL_ATTRIBUTES


def _flag(value):
    return str(bool(value)).lower()


def _or_missing(value):
    return NOT_AVAILABLE if value is None else value


def _plain(value):
    # never let float formatting switch to its own exponent notation
    if isinstance(value, float):
        return np.format_float_positional(value, trim='-')
    return f"{value}"


def _with_unit(value, unit):
    if value is None:
        return NOT_AVAILABLE
    if unit == u.dimensionless_unscaled:
        return _plain(value)
    return f"{_plain(value)} {unit.to_string()}"


def summary_line(body):
    """One line per body for the catalog listing."""
    return f"Name: {body.name}, ID: {body.id}, Is Planet: {_flag(body.is_planet)}"


def mass_line(mass):
    """
    Render a mass in scientific notation
    :param mass: Mass record or None
    :return str: "Mass: <value>e<exponent>" when both parts are known, otherwise a message
    """
    if mass is None:
        return MASS_MISSING
    if not mass.is_complete:
        return MASS_INCOMPLETE
    return f"Mass: {_plain(mass.value)}e{mass.exponent}"


def detail_lines(body):
    """
    Render the full attribute set of a body. Absent attributes are spelled
    out as "not available" rather than replaced with a zero.
    """
    lines = [f"Name: {body.name}, ID: {body.id}, English Name: {_or_missing(body.english_name)}, "
             f"Is Planet: {_flag(body.is_planet)}",
             mass_line(body.mass)]

    for attr, _, label, unit in PHYSICAL_ATTRIBUTES:
        lines.append(f"{label}: {_with_unit(getattr(body, attr), unit)}")

    lines.append(f"Body Type: {_or_missing(body.body_type)}")
    return lines
