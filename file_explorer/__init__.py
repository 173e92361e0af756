"""Interactive, menu-driven file explorer for the terminal."""

from file_explorer.shell import Command, FileExplorer

__all__ = ["Command", "FileExplorer"]
__version__ = "0.1.0"
