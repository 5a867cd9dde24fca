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
import argparse
import logging
from logging.handlers import TimedRotatingFileHandler
import sys

from . import __version__
from .api.bodies import SolarSystemOpenData
from .api.errors import SolexError
from .display import detail_lines, summary_line

# logging -- https://docs.python.org/3/library/logging.html
log = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="solex",
        description="Displays information about planets and other bodies in the solar system.")
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest='command')
    details = subparsers.add_parser('details',
                                    help="Displays detailed information about a specific celestial body.")
    details.add_argument('name',
                         help="The name of the celestial body to fetch details for, e.g. mars.")
    return parser.parse_args(argv)


def main(argv=None, client=None):
    args = parse_args(argv)
    client = client or SolarSystemOpenData()

    log.debug("Starting ...")
    log.debug(f"Python Version: {sys.version}")

    if args.command == 'details':
        try:
            body = client.body_details(args.name)
        except SolexError as e:
            log.debug(f"Lookup of {args.name} failed", exc_info=True)
            print(f"Error fetching details for {args.name}: {e}")
            return 1
        for line in detail_lines(body):
            print(line)
    else:
        try:
            bodies = client.list_bodies()
        except SolexError as e:
            log.debug("Catalog listing failed", exc_info=True)
            print(f"Error fetching data: {e}")
            return 1
        for body in bodies:
            print(summary_line(body))

    log.debug("Stopped ...")
    return 0


def setup_logging(filename="solex.log"):
    root = logging.getLogger("solex")
    root.setLevel(logging.DEBUG)
    fileFormatter = logging.Formatter("%(asctime)s.%(msecs)03d [%(threadName)-12.12s] %(levelname)-5.5s  "
                                      "%(funcName)s:%(lineno)d - %(message)s", f"%Y-%m-%dT%H:%M:%S")
    fileHandler = TimedRotatingFileHandler(filename=filename, when="midnight", backupCount=2)
    fileHandler.setLevel(logging.DEBUG)
    fileHandler.setFormatter(fileFormatter)
    consoleFormatter = logging.Formatter("%(message)s")
    consoleHandler = logging.StreamHandler(sys.stderr)
    consoleHandler.setFormatter(consoleFormatter)
    consoleHandler.setLevel(logging.WARNING)
    root.addHandler(fileHandler)
    root.addHandler(consoleHandler)


def run():
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
