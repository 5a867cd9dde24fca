# ########################################################################### #
# SOLEX version number
# Now adhering to the Semantic Versioning 2.0.0
# Given a version number MAJOR.MINOR.PATCH, increment the:
# MAJOR version when you make incompatible API changes,
# MINOR version when you add functionality in a backwards compatible manner, and
# PATCH version when you make backwards compatible bug fixes.
# https://semver.org, e.g. __version__ = "0.1.0" from the version file import at ./version.py
# ########################################################################### #

__version__ = "0.1.0"
