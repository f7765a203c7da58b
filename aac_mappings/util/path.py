""" Module for finding user data files by prefixed path strings. """

import os
import sys

# Default user path components are for Linux, since it has several possible platform identifiers.
DEFAULT_USERPATH_COMPONENTS = (".local", "share", "{0}")
# User path components specific to Windows and Mac OS.
PLATFORM_USERPATH_COMPONENTS = {"win32": ("AppData", "Local", "{0}", "{0}"),
                                "darwin": ("Library", "Application Support", "{0}")}


def user_data_directory(app_name:str, platform:str=sys.platform) -> str:
    """ Find an application's user data directory based on a platform-specific path expansion. """
    path_components = PLATFORM_USERPATH_COMPONENTS.get(platform) or DEFAULT_USERPATH_COMPONENTS
    path_fmt = os.path.join("~", *path_components)
    return os.path.expanduser(path_fmt.format(app_name))


class PrefixPathConverter:
    """ Expands path strings that start with special prefixes (such as ~/ for user app data). """

    def __init__(self) -> None:
        self._path_table = []  # Matchable path prefixes paired with their base paths, longest prefix first.

    def add(self, prefix:str, base_path:str) -> None:
        entry = (prefix, os.path.normpath(base_path))
        self._path_table.append(entry)
        self._path_table.sort(key=lambda x: -len(x[0]))

    def expand(self, path:str) -> str:
        """ If <path> starts with a known prefix, replace the prefix with its base path. """
        for prefix, base_path in self._path_table:
            if path.startswith(prefix):
                return os.path.join(base_path, path[len(prefix):])
        return path

    def convert(self, path:str, *, make_dirs=False) -> str:
        """ Expand <path> into a file path usable by open().
            If <make_dirs> is true, create directories as needed to make a valid path for write mode. """
        path = self.expand(path)
        if make_dirs:
            directory = os.path.dirname(path) or "."
            os.makedirs(directory, exist_ok=True)
        return path
