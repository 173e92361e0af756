"""Readline tab completion and input history for explorer prompts."""

import logging
import os

try:
    import readline
except ImportError:  # readline is missing on some non-POSIX builds
    readline = None

logger = logging.getLogger(__name__)


def make_completer(explorer):
    """Complete names of entries in the explorer's current directory."""
    def completer(text, state):
        try:
            names = sorted(os.listdir(explorer.current_path))
        except OSError:
            names = []
        options = [name for name in names if name.startswith(text)]
        if state < len(options):
            return options[state]
        else:
            return None
    return completer


def install_completer(explorer):
    if readline is None:
        return False
    readline.set_completer(make_completer(explorer))
    readline.set_completer_delims('')
    readline.parse_and_bind('tab: complete')
    return True


def load_history(history_file):
    if readline is None or not history_file:
        return
    if os.path.exists(history_file):
        try:
            readline.read_history_file(history_file)
        except OSError as e:
            logger.warning("Could not read history file %s: %s", history_file, e)


def save_history(history_file):
    if readline is None or not history_file:
        return
    try:
        readline.write_history_file(history_file)
    except OSError as e:
        logger.warning("Could not write history file %s: %s", history_file, e)
