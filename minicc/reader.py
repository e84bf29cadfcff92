import os

from minicc.errors import SourceFileError


def fetch_code(filename):
    # validate file extension
    if os.path.splitext(filename)[1] != ".c":
        raise SourceFileError(f'Your code must be written in a .c file: {filename}')

    if not os.path.isfile(filename):
        raise SourceFileError(f'Cannot compile\nMissing source file: {filename}')

    # return source code
    print(f"Reading code from: {filename}")
    with open(filename, "r") as f:
        return f.read()
