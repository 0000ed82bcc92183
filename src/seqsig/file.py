# This source code is part of the Seqsig package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "seqsig"
__author__ = "The Seqsig contributors"
__all__ = ["save_file", "record_lines"]

from collections.abc import Iterable, Mapping
from os import PathLike
from os.path import isfile


_YES = frozenset(["Y", "y", "yes"])
_NO = frozenset(["N", "n", "no"])


def save_file(file_name, record, overwrite=None, prompt=input):
    """
    Write a record as text into a file.

    If the file already exists and `overwrite` is not given, the user
    is asked interactively whether the file should be overwritten.
    The question is repeated until a valid answer is given.

    Parameters
    ----------
    file_name : str or PathLike
        The path of the target file.
    record : str or Mapping or iterable object of str
        The record to be written.
        A string is written as is.
        For a mapping (e.g. the fields of a downloaded entry) each
        value is written into a separate line, in the order of the
        mapping.
        Any other iterable is interpreted as lines of text.
    overwrite : bool, optional
        If true, an existing file is overwritten without asking,
        if false, an existing file is kept without asking.
        By default, the user is asked.
    prompt : callable, optional
        The function that shows the question and returns the answer of
        the user.
        By default the builtin :func:`input()` is used.

    Returns
    -------
    written : bool
        True, if the file was written, false if an existing file was
        kept.

    Raises
    ------
    TypeError
        If `record` cannot be converted into lines of text.
        In this case the file is left untouched.

    Examples
    --------

    >>> import os.path
    >>> file_name = os.path.join(path_to_directory, "record.txt")
    >>> print(save_file(file_name, {"ACCESSION": "NC_012920"}, overwrite=True))
    True
    >>> print(save_file(file_name, "foo", overwrite=False))
    False
    """
    if not is_open_compatible(file_name):
        raise TypeError("A file path is required")
    # An invalid record must not truncate an existing file
    lines = record_lines(record)
    if isfile(file_name):
        if overwrite is None:
            overwrite = _ask_overwrite(file_name, prompt)
        if not overwrite:
            return False
    with open(file_name, "w") as f:
        for line in lines:
            f.write(line + "\n")
    return True


def record_lines(record):
    """
    Get the lines of text that represent a record.

    Parameters
    ----------
    record : str or Mapping or iterable object of str
        The record.

    Returns
    -------
    lines : list of str
        The lines of text, without line break characters at the end.

    Examples
    --------

    >>> print(record_lines("LOCUS\\nDEFINITION\\n"))
    ['LOCUS', 'DEFINITION']
    >>> print(record_lines({"ACCESSION": "NC_012920", "VERSION": "NC_012920.1"}))
    ['NC_012920', 'NC_012920.1']
    """
    if isinstance(record, str):
        return record.splitlines()
    if isinstance(record, Mapping):
        record = record.values()
    elif not isinstance(record, Iterable):
        raise TypeError(
            f"A record must be a string, mapping or iterable object, "
            f"not '{type(record).__name__}'"
        )
    lines = []
    for value in record:
        # A single field might span multiple lines itself
        lines.extend(str(value).splitlines())
    return lines


def _ask_overwrite(file_name, prompt):
    while True:
        answer = prompt(f"{file_name} exists already. Overwrite? [y/n] ")
        answer = answer.rstrip()
        if answer in _YES:
            return True
        elif answer in _NO:
            return False
        print("You should input 'y' or 'n'")


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))
