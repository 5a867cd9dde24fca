#! /usr/bin/env python3
# ##############################################################################
# SETUPTOOLS PLACEHOLDER
# NOTE: This file supports editable-mode installs using pip3, e.g. 'pip install -e'.
#       Project metadata and dependencies live in pyproject.toml.
# ############################### INSTALL TOOLS  ###############################
# pip3 install --upgrade build setuptools twine
# ################################### CLEAN  ###################################
# rm -r build dist __pycache__ *.egg* .egg* ; pip3 uninstall solex -y
# ############################## RELEASE PRODUCT  ##############################
# (1) manually update solex/version.py and pyproject.toml, commit and push
# (2) tag: git tag -a -m "Release version <version>" <version>
# (3) build: python3 -m build --wheel
# (4) upload: twine check dist/* && twine upload --verbose dist/*.whl
# ############################### LOCAL TESTING  ###############################
# pip3 install -e ".[test]" && pytest tests


from setuptools import setup

if __name__ == "__main__":
    setup()
