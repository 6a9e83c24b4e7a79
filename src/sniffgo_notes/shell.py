"""The interactive, menu-driven interface to a :class:`sniffgo_notes.store.NoteStore`."""

import logging
import sys
from typing import Iterator, List, Optional, TextIO

from sniffgo_notes.models import NoteInfo, EditMode
from sniffgo_notes.store import NoteStore, StoreError


logger = logging.getLogger(__name__)

MENU = """
SniffGo Notes - menu
1) List notes
2) Create note
3) View note
4) Edit note (overwrite/append)
5) Delete note
6) Exit"""

EDIT_MENU = """Edit options:
1) Overwrite
2) Append"""

TERMINATOR = '.'


def read_entry_lines(stream: TextIO) -> Iterator[str]:
    """Yields lines from the stream until one consisting of just a period, or until end of input.

    The terminating line is consumed but not yielded. Line terminators are removed.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        line = line.rstrip('\r\n')
        if line == TERMINATOR:
            return
        yield line


class Shell:
    """Reads menu choices from stdin and runs the corresponding note operations until the user exits.

    The streams default to the process's standard streams; tests pass :class:`io.StringIO` instances.
    """
    def __init__(self, store: NoteStore, stdin: TextIO = None, stdout: TextIO = None, stderr: TextIO = None):
        self.store = store
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.actions = {
            1: self.list_notes,
            2: self.create_note,
            3: self.view_note,
            4: self.edit_note,
            5: self.delete_note,
        }

    def run(self) -> int:
        """Runs the menu loop and returns the exit code."""
        while True:
            self._out(MENU)
            line = self._prompt('Choose: ')
            if line is None:
                break
            try:
                choice = int(line)
            except ValueError:
                self._out('Invalid input.')
                continue
            if choice == 6:
                break
            action = self.actions.get(choice)
            if not action:
                self._out('Unknown option.')
                continue
            logger.debug('Running menu option %d', choice)
            action()
        self._out('Goodbye.')
        return 0

    def list_notes(self) -> Optional[List[NoteInfo]]:
        """Prints the numbered list of notes and returns it, or None if the directory can't be read."""
        try:
            notes = self.store.list_notes()
        except StoreError as e:
            self._err(f'{e.message}: {e.path}')
            return None
        if not notes:
            self._out('No notes found.')
        for i, note in enumerate(notes, start=1):
            self._out(f'{i}) {note.filename}')
        return notes

    def create_note(self) -> None:
        title = self._prompt('Enter note title: ') or ''
        try:
            path = self.store.create(title, self._entry_lines('Enter note content.'))
        except StoreError as e:
            self._err(f'{e.message}: {e.path}')
            return
        self._out(f'Saved: {path}')

    def view_note(self) -> None:
        note = self.pick_note()
        if not note:
            self._out('Invalid selection.')
            return
        try:
            lines = self.store.read(note.path)
        except StoreError as e:
            self._err(f'{e.message}: {e.path}')
            return
        self._out(f'---- {note.filename} ----')
        for line in lines:
            self._out(line)
        self._out('---- end ----')

    def edit_note(self) -> None:
        note = self.pick_note()
        if not note:
            self._out('Invalid selection.')
            return
        self._out(EDIT_MENU)
        opt = self._read_int('Choose: ')
        if opt is None:
            self._out('Invalid input.')
            return
        try:
            mode = EditMode(opt)
        except ValueError:
            self._out('Unknown option.')
            return
        if mode == EditMode.OVERWRITE:
            lines, done = self._entry_lines('Enter new content.'), 'Overwritten.'
        else:
            lines, done = self._entry_lines('Enter content to append.'), 'Appended.'
        try:
            self.store.edit(note.path, mode, lines)
        except StoreError as e:
            self._err(f'{e.message}.')
            return
        self._out(done)

    def delete_note(self) -> None:
        note = self.pick_note()
        if not note:
            self._out('Invalid selection.')
            return
        answer = (self._prompt(f"Delete '{note.filename}'? (y/N): ") or '').strip()
        if answer[:1] not in ('y', 'Y'):
            self._out('Canceled.')
            return
        try:
            self.store.delete(note.path)
        except StoreError as e:
            self._err(f'{e.message}: {e.cause.strerror or e.cause}')
            return
        self._out('Deleted.')

    def pick_note(self) -> Optional[NoteInfo]:
        """Shows the list of notes and asks the user to choose one by number.

        Returns None if the input is not a number or is out of range. The number refers to the list as
        it was displayed. If the list can't be read, returns None without asking.
        """
        notes = self.list_notes()
        if notes is None:
            return None
        choice = self._read_int('Choose note number: ')
        if choice is None or choice < 1 or choice > len(notes):
            return None
        return notes[choice - 1]

    def _entry_lines(self, intro: str) -> Iterator[str]:
        self._out(f'{intro} End with a single line containing only a dot ({TERMINATOR})')
        yield from read_entry_lines(self.stdin)

    def _read_int(self, prompt: str) -> Optional[int]:
        line = self._prompt(prompt)
        try:
            return int(line)
        except (TypeError, ValueError):
            return None

    def _prompt(self, prompt: str) -> Optional[str]:
        """Writes the prompt and reads one whole line. Returns None at end of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip('\r\n')

    def _out(self, text: str) -> None:
        print(text, file=self.stdout)

    def _err(self, text: str) -> None:
        print(text, file=self.stderr)
