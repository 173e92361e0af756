# Menu texts, keyed by the number the user types

MAIN_MENU = {
    1: "List files (basic)",
    2: "List files (detailed)",
    3: "Navigate to directory",
    4: "Copy file",
    5: "Move file",
    6: "Delete file",
    7: "Create file",
    8: "Create directory",
    9: "Search files",
    10: "Manage permissions",
    0: "Exit",
}

NAVIGATION_MENU = {
    1: "Go to parent directory",
    2: "Go to subdirectory",
    3: "Go to home directory",
    4: "Go to specific path",
}

PERMISSION_MENU = {
    1: "Add read permission for all",
    2: "Add write permission for all",
    3: "Add execute permission for all",
    4: "Remove read permission for all",
    5: "Remove write permission for all",
    6: "Remove execute permission for all",
    7: "Set to read-only for all",
    8: "Set custom permissions (octal)",
}


def menu_lines(menu):
    """Render a menu dictionary as numbered lines in insertion order."""
    return [f"{number}. {label}" for number, label in menu.items()]
