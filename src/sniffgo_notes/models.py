"""Defines classes for representing notes and edit requests."""

from dataclasses import dataclass
from enum import Enum
import os.path


@dataclass
class NoteInfo:
    """Describes a note file found in the notes directory.

    Instances are only valid for the duration of a single operation; the file may be changed or removed by
    anything else at any time.
    """

    path: str
    """Location of the file, inside the notes directory."""

    @property
    def filename(self) -> str:
        """The name of the file without its directory, e.g. ``shopping (1).txt``."""
        return os.path.basename(self.path)


class EditMode(Enum):
    """How new content should be combined with what a note already contains."""

    OVERWRITE = 1
    APPEND = 2
