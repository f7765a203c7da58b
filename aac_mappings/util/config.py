""" Module for user settings stored in the .cfg file format. """

import ast
from configparser import ConfigParser, Error as ConfigParserError
from typing import Any, Dict

ConfigDict = Dict[str, Any]
NestedConfigDict = Dict[str, ConfigDict]


def eval_str(s:str) -> Any:
    """ Try to evaluate a string as a Python literal. This fixes crap like bool('False') = True.
        Strings that are read as names will throw an error, in which case they should be left as-is. """
    try:
        return ast.literal_eval(s)
    except (SyntaxError, ValueError):
        return s


class ConfigIO:
    """ Performs file I/O and data type conversion on the contents of CFG files. """

    def __init__(self, *, from_str=eval_str, to_str=str, encoding='utf-8') -> None:
        self._from_str = from_str  # Converts input strings to other values.
        self._to_str = to_str      # Converts output values back to strings.
        self._encoding = encoding  # Character encoding of CFG files.

    def read(self, filename:str) -> NestedConfigDict:
        """ Read settings from a file in .cfg format into a nested mapping by section. """
        parser = ConfigParser()
        with open(filename, 'r', encoding=self._encoding) as fp:
            parser.read_file(fp)
        return {sect: {name: self._from_str(s) for name, s in parser[sect].items()}
                for sect in parser.sections()}

    def write(self, filename:str, options:NestedConfigDict) -> None:
        """ Save a nested mapping of settings to a file in .cfg format by section and name. """
        parser = ConfigParser()
        for sect, page in options.items():
            if page:
                parser.add_section(sect)
                for name, value in page.items():
                    parser.set(sect, name, self._to_str(value))
        with open(filename, 'w', encoding=self._encoding) as fp:
            parser.write(fp)


class SimpleConfigDict(ConfigDict):
    """ Settings dict corresponding to one section of a CFG file. Missing options fall back to defaults. """

    def __init__(self, filename:str, sect:str, defaults:ConfigDict=None, *, io:ConfigIO=None) -> None:
        super().__init__(defaults or {})
        self._filename = filename    # Full name of file in CFG format (it does not need to exist yet).
        self._sect = sect            # Name of our CFG file section.
        self._io = io or ConfigIO()  # Performs whole reads/writes to CFG files.

    def read(self) -> bool:
        """ Try to read settings from the CFG file. Return True if successful. """
        try:
            cfg = self._io.read(self._filename)
        except (OSError, ConfigParserError):
            return False
        self.update(cfg.get(self._sect, {}))
        return True

    def write(self) -> bool:
        """ Write the current settings to the CFG file. Return True if successful. """
        try:
            self._io.write(self._filename, {self._sect: self})
            return True
        except OSError:
            return False
