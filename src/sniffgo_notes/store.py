"""Provides the :class:`NoteStore` class, which reads and writes the note files."""

import logging
import os
import os.path
from typing import Iterable, List

from sniffgo_notes.conf import NotesConf
from sniffgo_notes.filenames import unique_path
from sniffgo_notes.models import NoteInfo, EditMode


logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Raised when a :class:`NoteStore` is unable to access a note file or the notes directory."""
    def __init__(self, message: str, path: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause


class NoteStore:
    """Accesses notes directly on the filesystem without any caching.

    Every method looks at the directory as it is at the time of the call, so changes made by other
    programs are always picked up. Content is passed around as lists (or other iterables) of lines,
    without line terminators.

    Methods that write content accept any iterable of lines, and only start consuming it after the file has
    been opened successfully. That means you can pass a generator that prompts the user for each line,
    and the user won't be asked to type anything if the file can't be written.

    .. attribute:: conf
       :type: sniffgo_notes.conf.NotesConf
    """
    def __init__(self, conf: NotesConf):
        self.conf = conf

    @property
    def notes_dir(self) -> str:
        return self.conf.notes_dir

    def ensure_dir(self) -> None:
        """Creates the notes directory, and any missing parents, if it does not exist yet."""
        try:
            os.makedirs(self.notes_dir, exist_ok=True)
        except OSError as e:
            logger.warning('Could not create notes directory %s: %s', self.notes_dir, e)
            raise StoreError('Failed to ensure notes directory exists.', self.notes_dir, e) from e

    def list_notes(self) -> List[NoteInfo]:
        """Returns the notes in the directory, sorted by filename.

        Only regular files directly inside the directory whose names end with the configured extension are
        included. Returns an empty list if the directory does not exist.
        """
        if not os.path.isdir(self.notes_dir):
            return []
        try:
            with os.scandir(self.notes_dir) as entries:
                names = sorted(e.name for e in entries
                               if e.name.endswith(self.conf.extension) and e.is_file())
        except OSError as e:
            logger.warning('Could not list %s: %s', self.notes_dir, e)
            raise StoreError('Failed to list notes', self.notes_dir, e) from e
        logger.debug('Found %d notes in %s', len(names), self.notes_dir)
        return [NoteInfo(os.path.join(self.notes_dir, n)) for n in names]

    def create(self, title: str, lines: Iterable[str]) -> str:
        """Creates a new note and returns its path.

        The filename is derived from the title by :func:`sniffgo_notes.filenames.unique_path`, so an existing
        note is never replaced.
        """
        path = unique_path(self.notes_dir, title, self.conf.extension)
        self._write(path, 'x', lines, 'Failed to create note file')
        logger.debug('Created %s', path)
        return path

    def read(self, path: str) -> List[str]:
        """Returns the lines of the note, in order, without line terminators.

        Only a line feed ends a line; a carriage return stays part of the line it is in. Bytes that are not valid in the configured encoding are shown as U+FFFD.
        """
        try:
            with open(path, 'r', encoding=self.conf.encoding, errors='replace', newline='\n') as file:
                return [line.rstrip('\n') for line in file]
        except OSError as e:
            logger.warning('Could not read %s: %s', path, e)
            raise StoreError('Failed to open', path, e) from e

    def overwrite(self, path: str, lines: Iterable[str]) -> None:
        """Replaces all the content of the note with the given lines."""
        self._write(path, 'w', lines, 'Failed to open for writing')

    def append(self, path: str, lines: Iterable[str]) -> None:
        """Adds the given lines to the end of the note, leaving its current content as it is."""
        self._write(path, 'a', lines, 'Failed to open for appending')

    def edit(self, path: str, mode: EditMode, lines: Iterable[str]) -> None:
        """Calls :meth:`overwrite` or :meth:`append` depending on the mode."""
        if mode == EditMode.OVERWRITE:
            self.overwrite(path, lines)
        elif mode == EditMode.APPEND:
            self.append(path, lines)
        else:
            raise ValueError(f'Unsupported edit mode: {mode}')

    def delete(self, path: str) -> None:
        """Removes the note. Raises :exc:`StoreError` if it is already gone or cannot be removed."""
        try:
            os.remove(path)
        except OSError as e:
            logger.warning('Could not delete %s: %s', path, e)
            raise StoreError('Failed to delete', path, e) from e
        logger.debug('Deleted %s', path)

    def _write(self, path: str, mode: str, lines: Iterable[str], message: str) -> None:
        try:
            file = open(path, mode, encoding=self.conf.encoding, errors='surrogateescape', newline='\n')
        except OSError as e:
            logger.warning('Could not open %s with mode %r: %s', path, mode, e)
            raise StoreError(message, path, e) from e
        try:
            with file:
                for line in lines:
                    file.write(f'{line}\n')
        except (OSError, UnicodeError) as e:
            logger.warning('Could not write %s: %s', path, e)
            raise StoreError('Failed to write', path, e) from e
