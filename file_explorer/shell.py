"""
Interactive menu loop and command handlers for the file explorer.

A FileExplorer owns the current directory and runs one handler per menu
choice. Handlers prompt for their own input, call into filecom and print the
outcome; platform errors are reported and never end the session.
"""

import logging
import os
from enum import IntEnum

from rich.console import Console
from rich.text import Text

from file_explorer import config, filecom, identity
from file_explorer.formatting import entry_marker, format_entry_row, get_permissions_string
from file_explorer.help import MAIN_MENU, NAVIGATION_MENU, PERMISSION_MENU, menu_lines
from file_explorer.history import install_completer, load_history, save_history

logger = logging.getLogger(__name__)

DIR_STYLE = "cyan"
FILE_STYLE = "green"
HEADER_STYLE = "bold"
SUCCESS_STYLE = "bold green"
ERROR_STYLE = "bold red"


class Command(IntEnum):
    EXIT = 0
    LIST = 1
    LIST_DETAILED = 2
    NAVIGATE = 3
    COPY = 4
    MOVE = 5
    DELETE = 6
    CREATE_FILE = 7
    CREATE_DIRECTORY = 8
    SEARCH = 9
    PERMISSIONS = 10


def parse_int(text):
    try:
        return int(text.strip())
    except ValueError:
        return None


def parse_command(text):
    """Map raw menu input to a Command, or None when nothing matches."""
    number = parse_int(text)
    if number is None:
        return None
    try:
        return Command(number)
    except ValueError:
        return None


class FileExplorer:
    def __init__(self, start_path=None, console=None, err_console=None,
                 input_func=None, history_file=config.HISTORY_FILE):
        """
        :param start_path: Initial directory; defaults to the process working directory.
        :param console: Console for regular output.
        :param err_console: Console for error output (stderr by default).
        :param input_func: Callable taking a prompt and returning one line of input.
        :param history_file: Readline history file, or None/'' to disable history.
        """
        if start_path is None:
            start_path = os.getcwd()
        self.current_path = os.path.abspath(start_path)
        self.console = console or Console(highlight=False, soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, highlight=False, soft_wrap=True)
        self._input = input_func or self._console_input
        self.history_file = history_file

        self.handlers = {
            Command.LIST: lambda: self.list_files(detailed=False),
            Command.LIST_DETAILED: lambda: self.list_files(detailed=True),
            Command.NAVIGATE: self.navigate,
            Command.COPY: self.copy_file,
            Command.MOVE: self.move_file,
            Command.DELETE: self.delete_file,
            Command.CREATE_FILE: self.create_file,
            Command.CREATE_DIRECTORY: self.create_directory,
            Command.SEARCH: self.search_files,
            Command.PERMISSIONS: self.manage_permissions,
        }

    # Output and input helpers

    def say(self, message, style=None):
        # Text keeps names like "[red]" from being read as markup
        self.console.print(Text(message, style=style or ""))

    def success(self, message):
        self.say(message, style=SUCCESS_STYLE)

    def error(self, message):
        self.err_console.print(Text(message, style=ERROR_STYLE))

    def report(self, label, exc):
        """Print a caught platform error with its operation label."""
        logger.debug("%s", label, exc_info=exc)
        self.error(f"{label}: {exc}")

    def _console_input(self, prompt):
        return self.console.input(Text(prompt))

    def ask(self, prompt):
        return self._input(prompt)

    def ask_int(self, prompt):
        return parse_int(self.ask(prompt))

    def confirm(self, prompt):
        answer = self.ask(prompt).strip()
        return answer[:1] in ('y', 'Y')

    def resolve(self, name):
        return filecom.resolve(self.current_path, name)

    def _set_current(self, path):
        logger.info("Current directory changed to %s", path)
        self.current_path = path

    # Menu loop

    def run(self):
        install_completer(self)
        load_history(self.history_file)
        self.say("=== File Explorer Application ===", style=HEADER_STYLE)
        self.say(f"Current directory: {self.current_path}")
        try:
            while True:
                self.show_menu()
                try:
                    choice = self.ask("Enter your choice: ")
                except KeyboardInterrupt:
                    self.say("\nUse 0 to exit.")
                    continue
                except EOFError:
                    self.say("")
                    choice = str(int(Command.EXIT))
                if not self.handle_choice(choice):
                    break
        finally:
            save_history(self.history_file)

    def show_menu(self):
        self.say("\n=== File Explorer Menu ===", style=HEADER_STYLE)
        self.say(f"Current directory: {self.current_path}")
        for line in menu_lines(MAIN_MENU):
            self.say(line)

    def handle_choice(self, choice):
        """
        Run the handler for one menu choice.

        :param choice: Raw text typed at the menu prompt.
        :return: False once the user asked to exit, True otherwise.
        """
        command = parse_command(choice)
        if command is Command.EXIT:
            self.say("Goodbye!")
            return False
        handler = self.handlers.get(command)
        if handler is None:
            self.say("Invalid choice!")
            return True
        try:
            handler()
        except KeyboardInterrupt:
            self.say("\nOperation cancelled.")
        except EOFError:
            self.say("\nGoodbye!")
            return False
        except Exception as e:
            logger.exception("Unhandled error in %s", command.name)
            self.error(f"Error: {e}")
        return True

    # Listing

    def list_files(self, detailed=False):
        rule = '-' * config.RULE_WIDTH
        self.say(f"\nContents of {self.current_path}:")
        self.say(rule)
        try:
            entries = filecom.list_directory(self.current_path)
        except OSError as e:
            self.report("Error accessing directory", e)
            return

        for entry in entries:
            is_dir = filecom.entry_is_dir(entry)
            if detailed:
                self.display_file_info(entry, is_dir)
            else:
                self.say(f"{entry_marker(is_dir)} {entry.name}",
                         style=DIR_STYLE if is_dir else FILE_STYLE)

        self.say(rule)
        self.say(f"Total: {len(entries)} items")

    def display_file_info(self, entry, is_dir):
        try:
            st = entry.stat()
        except OSError as e:
            logger.debug("stat failed for %s", entry.path, exc_info=e)
            self.error(f"Error getting info for: {entry.path} - {e}")
            return
        row = format_entry_row(
            entry.name,
            is_dir,
            st,
            identity.owner_name(st.st_uid),
            identity.group_name(st.st_gid),
        )
        self.say(row, style=DIR_STYLE if is_dir else FILE_STYLE)

    # Navigation

    def navigate(self):
        self.say("\n=== Navigation ===", style=HEADER_STYLE)
        self.say(f"Current directory: {self.current_path}")
        for line in menu_lines(NAVIGATION_MENU):
            self.say(line)
        option = self.ask_int("Choose option: ")

        try:
            if option == 1:
                self.go_to_parent()
            elif option == 2:
                self.go_to_subdirectory()
            elif option == 3:
                self.go_home()
            elif option == 4:
                self.go_to_path()
            else:
                self.say("Invalid option!")
        except OSError as e:
            self.report("Navigation error", e)

    def go_to_parent(self):
        parent = os.path.dirname(self.current_path)
        if parent == self.current_path:
            self.say("Already at root directory!")
            return
        self._set_current(parent)
        self.say(f"Moved to parent directory: {self.current_path}")

    def go_to_subdirectory(self):
        directories = filecom.list_subdirectories(self.current_path)
        self.say("Available directories:")
        for name in directories:
            self.say(f"- {name}", style=DIR_STYLE)
        if not directories:
            self.say("No subdirectories available.")
            return

        dir_name = self.ask("Enter directory name: ")
        new_path = self.resolve(dir_name)
        if dir_name and os.path.isdir(new_path):
            self._set_current(os.path.abspath(new_path))
            self.say(f"Moved to: {self.current_path}")
        else:
            self.say("Directory not found!")

    def go_home(self):
        home_dir = os.environ.get(config.HOME_ENV_VAR)
        if home_dir and os.path.isdir(home_dir):
            self._set_current(os.path.abspath(home_dir))
            self.say(f"Moved to home directory: {self.current_path}")
        else:
            self.say("Could not find home directory!")

    def go_to_path(self):
        raw = self.ask("Enter full path: ").strip()
        new_path = self.resolve(os.path.expanduser(raw))
        if raw and os.path.isdir(new_path):
            self._set_current(os.path.realpath(new_path))
            self.say(f"Moved to: {self.current_path}")
        else:
            self.say("Path does not exist or is not a directory!")

    # Copy / move / delete

    def _ask_source_and_destination(self, action):
        """
        Prompt for source and destination names and check preconditions.

        Returns the resolved (source, destination) pair, or None when the
        source is missing or the user declined to overwrite.
        """
        source_name = self.ask("Enter source filename: ")
        dest_name = self.ask("Enter destination filename: ")
        source = self.resolve(source_name)
        destination = self.resolve(dest_name)

        if not source_name or not os.path.exists(source):
            self.say("Source file does not exist!")
            return None
        if os.path.exists(destination):
            if not self.confirm("Destination file already exists. Overwrite? (y/n): "):
                self.say(f"{action} cancelled.")
                return None
        return source, destination

    def copy_file(self):
        self.say("\n=== Copy File ===", style=HEADER_STYLE)
        paths = self._ask_source_and_destination("Copy")
        if paths is None:
            return
        try:
            filecom.copy_path(*paths)
        except OSError as e:
            self.report("Copy error", e)
            return
        self.success("File copied successfully!")

    def move_file(self):
        self.say("\n=== Move File ===", style=HEADER_STYLE)
        paths = self._ask_source_and_destination("Move")
        if paths is None:
            return
        try:
            filecom.move_path(*paths)
        except OSError as e:
            self.report("Move error", e)
            return
        self.success("File moved successfully!")

    def delete_file(self):
        self.say("\n=== Delete File ===", style=HEADER_STYLE)
        filename = self.ask("Enter filename to delete: ")
        file_path = self.resolve(filename)

        if not filename or not os.path.lexists(file_path):
            self.say("File does not exist!")
            return

        if os.path.isdir(file_path):
            prompt = "Warning: This is a directory. Delete recursively? (y/n): "
            done = "Directory deleted successfully!"
        else:
            prompt = f"Are you sure you want to delete '{filename}'? (y/n): "
            done = "File deleted successfully!"

        if not self.confirm(prompt):
            self.say("Delete cancelled.")
            return
        try:
            filecom.delete_path(file_path)
        except OSError as e:
            self.report("Delete error", e)
            return
        self.success(done)

    # Creation

    def create_file(self):
        self.say("\n=== Create File ===", style=HEADER_STYLE)
        filename = self.ask("Enter new filename: ")
        file_path = self.resolve(filename)
        if not filename:
            self.say("No filename given!")
            return
        if os.path.lexists(file_path):
            self.say("File already exists!")
            return
        try:
            filecom.create_file(file_path)
        except OSError as e:
            self.report("Create file error", e)
            return
        self.success("File created successfully!")

    def create_directory(self):
        self.say("\n=== Create Directory ===", style=HEADER_STYLE)
        dirname = self.ask("Enter new directory name: ")
        dir_path = self.resolve(dirname)
        if not dirname:
            self.say("No directory name given!")
            return
        if os.path.lexists(dir_path):
            self.say("Directory already exists!")
            return
        try:
            filecom.create_directory(dir_path)
        except OSError as e:
            self.report("Create directory error", e)
            return
        self.success("Directory created successfully!")

    # Search

    def search_files(self):
        self.say("\n=== Search Files ===", style=HEADER_STYLE)
        search_term = self.ask("Enter search term (filename or pattern): ")
        self.say(f"Searching for: {search_term}")
        self.say(f"In directory: {self.current_path}")

        found = False
        try:
            for path, is_dir in filecom.search(self.current_path, search_term):
                self.say(f"{entry_marker(is_dir)} {path}",
                         style=DIR_STYLE if is_dir else FILE_STYLE)
                found = True
        except OSError as e:
            self.report("Search error", e)
            return

        if not found:
            self.say(f"No files or directories found matching: {search_term}")

    # Permissions

    def manage_permissions(self):
        self.say("\n=== Manage Permissions ===", style=HEADER_STYLE)
        if not identity.SUPPORTS_POSIX_PERMISSIONS:
            self.say("Permission management is not supported on this platform.")
            return

        filename = self.ask("Enter filename: ")
        file_path = self.resolve(filename)
        if not filename or not os.path.exists(file_path):
            self.say("File does not exist!")
            return

        try:
            current_perms = filecom.get_permissions(file_path)
        except OSError as e:
            self.report("Permission management error", e)
            return
        self.say(f"Current permissions: {get_permissions_string(current_perms)}")

        self.say("\nPermission options:")
        for line in menu_lines(PERMISSION_MENU):
            self.say(line)
        option = self.ask_int("Choose option: ")

        if option == 8:
            octal_str = self.ask("Enter octal permissions (e.g., 755): ")
            try:
                new_perms = filecom.parse_octal(octal_str)
            except filecom.InvalidOctalError as e:
                logger.debug("Rejected permission input: %s", e)
                self.error("Invalid octal value!")
                return
        else:
            new_perms = None if option is None else filecom.apply_permission_option(current_perms, option)
            if new_perms is None:
                self.say("Invalid option!")
                return

        try:
            filecom.set_permissions(file_path, new_perms)
        except OSError as e:
            self.report("Permission management error", e)
            return
        self.success("Permissions updated successfully!")
        self.say(f"New permissions: {get_permissions_string(new_perms)}")
