"""Command-line interface for sniffgo-notes."""


import argparse
import logging
import sys
from sniffgo_notes.conf import NotesConf
from sniffgo_notes.shell import Shell
from sniffgo_notes.store import StoreError


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='sniffgo-notes',
        description='Interactive menu for creating, listing, viewing, editing and deleting notes. Notes are '
                    'stored as .txt files in the "notes" folder under the current directory, unless '
                    'another folder is set in ~/.sniffgo-notes.conf.py.')
    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    argparser().parse_args(args)
    conf = NotesConf.for_user()
    logging.basicConfig(level=conf.log_level, format='%(levelname)s %(name)s: %(message)s')
    store = conf.instantiate()
    try:
        store.ensure_dir()
    except StoreError as e:
        print(e.message, file=sys.stderr)
        return 1
    return Shell(store).run()
