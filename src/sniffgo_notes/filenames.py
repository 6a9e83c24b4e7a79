"""Helper functions for turning note titles into safe, unused filenames."""

import os.path
import re


FALLBACK_NAME = 'note'

_DISALLOWED = re.compile(r'[^A-Za-z0-9 ._-]')


def sanitize(title: str) -> str:
    """Returns a version of the title that is safe to use as a filename.

    The following adjustments are made:

    * Every character other than ASCII letters, digits, space, ``-``, ``_`` and ``.`` is replaced with ``_``
    * Leading and trailing whitespace is removed

    If nothing is left, ``"note"`` is returned, so the result is never empty.

    For example, ``"  What/why? "`` becomes ``"What_why_"``.
    """
    name = _DISALLOWED.sub('_', title).strip()
    return name or FALLBACK_NAME


def unique_path(notes_dir: str, title: str, extension: str = '.txt') -> str:
    """Returns a path in notes_dir for a new note with the given title, which does not exist yet.

    The filename is the :func:`sanitize`-d title plus the extension. If that is taken, `` (1)``, `` (2)``, etc.
    are inserted before the extension until a free name is found.

    This checks the filesystem every time it is called, but nothing stops another process from creating
    the same file in between.
    """
    base = sanitize(title)
    path = os.path.join(notes_dir, f'{base}{extension}')
    idx = 1
    while os.path.exists(path):
        path = os.path.join(notes_dir, f'{base} ({idx}){extension}')
        idx += 1
    return path
