from __future__ import annotations
from dataclasses import dataclass, replace
import os.path


USER_CONF_PATH = os.path.join('~', '.sniffgo-notes.conf.py')


@dataclass
class NotesConf:
    notes_dir: str = 'notes'
    """The folder containing the note files. Relative paths are resolved against the working directory.

    It will be created at startup if it does not exist.
    """

    extension: str = '.txt'
    """Only files ending with this are treated as notes, and new notes are created with it."""

    encoding: str = 'utf-8'
    """Text encoding used when reading and writing note files."""

    log_level: str = 'ERROR'
    """Level name passed to :func:`logging.basicConfig` by the command-line tool.

    Messages go to stderr, so anything more verbose than ``ERROR`` will show up between the menu prompts.
    """

    @classmethod
    def for_user(cls) -> NotesConf:
        """Loads the config from ``~/.sniffgo-notes.conf.py``, or returns the defaults if there is no such file.

        The file is a Python script which should assign an instance of this class to the variable ``conf``,
        for example:

        .. code-block:: python

           from sniffgo_notes.conf import NotesConf
           conf = NotesConf(notes_dir='~/Documents/notes')
        """
        path = os.path.expanduser(USER_CONF_PATH)
        if not os.path.exists(path):
            return cls()
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NotesConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self) -> NotesConf:
        return replace(
            self,
            notes_dir=os.path.expanduser(self.notes_dir)
        )

    def instantiate(self):
        from sniffgo_notes.store import NoteStore
        return NoteStore(self.standardize())
