"""Manages notes stored as plain text files in a single directory.

If you installed via ``pip``, run ``sniffgo-notes`` to start the interactive menu.
Or, run ``python3 -m sniffgo_notes``.

To use the Python API, look at :class:`sniffgo_notes.store.NoteStore`
"""

__version__ = '0.1.0'
