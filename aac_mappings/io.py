""" Module for reading and writing AAC mapping files.

    The format is line-oriented. A line declares a category by its key and display name, and each
    following line starting with '>' maps an image location in that category to its spoken text:

    one fruit
    >img/apple.png apple
    >img/banana.png banana
    two vegetables
    >img/carrot.png carrot

    Only the first space on a line is a delimiter, so names and spoken text may contain spaces. """

from functools import wraps
from typing import Any, Callable, Iterable, List, Tuple

EntryList = List[Tuple[str, str]]              # (image location, text) pairs in one category.
CategoryRecord = Tuple[str, str, EntryList]    # (category key, display name, entries).


class TextFileIO:

    def __init__(self, *, encoding='utf-8') -> None:
        self._encoding = encoding  # Character encoding. UTF-8 must be explicitly set on some platforms.

    def read(self, filename:str) -> str:
        """ Load a text file into a string. """
        with open(filename, 'r', encoding=self._encoding) as fp:
            return fp.read()

    def write(self, filename:str, s:str) -> None:
        """ Save a string into a text file. """
        with open(filename, 'w', encoding=self._encoding) as fp:
            fp.write(s)


class MappingsIOError(Exception):
    """ General exception for any mapping file IO or decoding error. """


def try_io(action:str) -> Callable:
    """ Decorator to re-raise I/O and decoding exceptions with more general error messages for the end-user. """
    def decorator(func:Callable) -> Callable:
        @wraps(func)
        def call(self, filename:str, *args) -> Any:
            try:
                return func(self, filename, *args)
            except UnicodeError as e:
                raise MappingsIOError(f'{filename} is not valid {self.encoding} text.') from e
            except OSError as e:
                raise MappingsIOError(f'{filename} could not be {action}: {e.strerror or e}') from e
        return call
    return decorator


class MappingsTarget:
    """ Abstract receiver for the contents of a mapping file as it is parsed. """

    def declare_category(self, key:str, name:str) -> None:
        """ Start (or revisit) the category <key> and give it the display <name>. """
        raise NotImplementedError

    def add_entry(self, key:str, image_loc:str, text:str) -> None:
        """ Add an image with its spoken text to the category <key>. """
        raise NotImplementedError


class MappingsParser:
    """ Parses mapping file text line by line. Permissive: lines that don't fit the format are skipped. """

    def __init__(self, *, entry_prefix=">", sep=" ") -> None:
        self._entry_prefix = entry_prefix  # Marks a line as an entry of the last declared category.
        self._sep = sep                    # Delimiter between the first field and the rest of a line.

    def _split(self, line:str) -> List[str]:
        return line.split(self._sep, 1)

    def parse(self, s:str, target:MappingsTarget) -> None:
        """ Send every category declaration and entry in <s> to <target> in file order.
            Exceptions raised by the target stop the parse where it is; nothing is undone. """
        key = None
        for line in s.split("\n"):
            line = line.strip()
            if not line.startswith(self._entry_prefix):
                parts = self._split(line)
                if len(parts) == 2:
                    key, name = parts
                    target.declare_category(key, name)
            elif key is not None:
                parts = self._split(line[len(self._entry_prefix):])
                if len(parts) == 2:
                    image_loc, text = parts
                    target.add_entry(key, image_loc, text)

    def format(self, records:Iterable[CategoryRecord]) -> str:
        """ Format category records as mapping file text. Every line ends with a newline. """
        lines = []
        for key, name, entries in records:
            lines.append(key + self._sep + name)
            for image_loc, text in entries:
                lines.append(self._entry_prefix + image_loc + self._sep + text)
        return "".join([line + "\n" for line in lines])


class MappingsFileIO:
    """ Top-level IO for mapping files. """

    def __init__(self, io:TextFileIO=None, parser:MappingsParser=None, *, encoding='utf-8') -> None:
        self.encoding = encoding                       # Shown in error messages for undecodable files.
        self._io = io or TextFileIO(encoding=encoding)  # IO for text files.
        self._parser = parser or MappingsParser()       # Converts between file text and mapping records.

    @try_io("read")
    def load(self, filename:str, target:MappingsTarget) -> None:
        """ Read an entire mapping file and feed its contents to <target>.
            The file is closed before parsing begins, so target errors never leave it open. """
        s = self._io.read(filename)
        self._parser.parse(s, target)

    @try_io("written")
    def save(self, filename:str, records:Iterable[CategoryRecord]) -> None:
        """ Format every category record and write them all to a mapping file. """
        s = self._parser.format(records)
        self._io.write(filename, s)
