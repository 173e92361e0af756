import os

# Environment variable holding the home directory used by navigation
HOME_ENV_VAR = os.environ.get('FILE_EXPLORER_HOME_VAR', 'HOME')

# Readline history file; an empty value turns history off
HISTORY_FILE = os.path.expanduser(
    os.environ.get('FILE_EXPLORER_HISTORY', '~/.file_explorer_history')
)

LOG_LEVEL = os.environ.get('FILE_EXPLORER_LOG_LEVEL', 'WARNING').upper()

# Width of the separator rule printed around listings
RULE_WIDTH = 80
