from pathlib import Path


def read_relative(rel_path):
    here = Path(__file__).resolve().parent.parent
    with open(here / rel_path, 'r') as fp:
        return fp.read()


def version_read(rel_path):
    for line in read_relative(rel_path).splitlines():
        if line.startswith('__version__'):
            delim = '"' if '"' in line else "'"
            return line.split(delim)[1]
    raise RuntimeError(f"ERROR: Unable to parse version string from {rel_path}.")
