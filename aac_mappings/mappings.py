""" Module for the two-level AAC mapping engine: categories of images, and navigation between them. """

import sys
from typing import Any, Callable, Iterator, List, NamedTuple, Optional

from .assoc import AssociativeArray, KeyNotFoundError, NullKeyError
from .category import AACCategory
from .io import CategoryRecord, MappingsFileIO, MappingsIOError, MappingsTarget
from .page import AACPage
from .util.log import StreamLogger

Logger = Callable[[str], Any]


class NavigationError(Exception):
    """ Base class for a selection that is invalid from the current navigation state. """


class AlreadySelectedError(NavigationError):
    """ Raised when the category being selected is the one already shown. """


class NoCategorySelectedError(NavigationError):
    """ Raised when an image is selected at the top level, where only categories exist. """


class NoCategoriesAvailableError(NavigationError):
    """ Raised on any selection when there are no categories at all. """


class CategoryMissingError(RuntimeError):
    """ Raised when the cursor points to a category that does not exist. This indicates a bug. """


class Cursor(NamedTuple):
    """ Navigation state. Either at the top level (no category), or inside exactly one category. """

    category: Optional[str] = None  # Key of the active category, or None at the top level.

    @property
    def is_root(self) -> bool:
        return self.category is None

    def __str__(self) -> str:
        return "<root>" if self.is_root else self.category


ROOT = Cursor()


class AACMappings(AACPage, MappingsTarget):
    """ Holds the mappings for an AAC board. These are two-level: the first level is a set of categories,
        and inside each category are images with text descriptions to speak. Selecting a category at the
        top level moves the cursor into it; selecting an image inside a category returns its text. """

    def __init__(self, filename:str=None, *, io:MappingsFileIO=None, logger:Logger=None) -> None:
        """ Start at the top level with no categories, then load from <filename> if given.
            A missing or broken file is logged rather than raised; the board just starts out (partially) empty. """
        self._categories = AssociativeArray[str, AACCategory]()  # Categories by key in file order.
        self._labels = AssociativeArray[str, str]()              # User-facing names by category key.
        self._cursor = ROOT                                      # Current navigation state.
        self._io = io or MappingsFileIO()                        # Reads and writes mapping files.
        self._log = logger or StreamLogger(sys.stderr).log       # Destination for load/save failures.
        if filename is not None:
            self.load(filename)

    @property
    def current(self) -> Cursor:
        return self._cursor

    def _current_category(self) -> AACCategory:
        """ Return the active category object. The cursor must not be at the top level. """
        key = self._cursor.category
        try:
            return self._categories.get(key)
        except KeyNotFoundError as e:
            raise CategoryMissingError(f"Category '{key}' does not exist.") from e

    def _create_category(self, key:str) -> None:
        """ Add an empty category under <key> unless one already exists. """
        if not self._categories.has_key(key):
            self._categories.put(key, AACCategory(key))

    def select(self, image_loc:str) -> str:
        """ Choose a category at any level, or an image within the current category.
            Categories take precedence, so a category key always navigates even from inside another category.
            Return the text for an image, or an empty string for a category. """
        if not self._categories.size():
            raise NoCategoriesAvailableError("No categories are available.")
        if self._categories.has_key(image_loc):
            if self._cursor.category == image_loc:
                raise AlreadySelectedError(f"Category '{image_loc}' is already selected.")
            self._cursor = Cursor(image_loc)
            return ""
        if self._cursor.is_root:
            raise NoCategorySelectedError("No category is currently selected.")
        return self._current_category().select(image_loc)

    def reset(self) -> None:
        """ Go back to the top level. """
        self._cursor = ROOT

    def add_item(self, image_loc:str, text:str) -> None:
        """ Add an image and its text to the current category.
            At the top level, there is nowhere to put an image, so <image_loc> instead becomes the key of a
            new (empty) category which is then selected. <text> is unused in that case.
            Keys are saved as-is, and only the first space on a line separates fields in a mapping file.
            A category key or image location containing a space will not survive a save and reload intact:
            the part after the first space ends up in the display name or spoken text instead. """
        if self._cursor.is_root:
            self._create_category(image_loc)
            self._cursor = Cursor(image_loc)
            return
        self._current_category().add_item(image_loc, text)

    def get_category(self) -> str:
        """ Return the display name of the current category, or an empty string at the top level
            or if the category was never given a name. """
        key = self._cursor.category
        if not self._labels.has_key(key):
            return ""
        return self._labels.get(key)

    def list_locations(self) -> List[str]:
        """ Return all category keys at the top level, or all image locations within the current category. """
        if self._cursor.is_root:
            return self._categories.keys()
        return self._current_category().image_ids()

    def get_top_level_categories(self) -> List[str]:
        return self._categories.keys()

    def is_category(self, image_loc:str) -> bool:
        return self._categories.has_key(image_loc)

    def has_image(self, image_loc:str) -> bool:
        """ Return True if <image_loc> is an image in the current category. Never raises. """
        if self._cursor.is_root:
            return False
        try:
            return self._current_category().has_image(image_loc)
        except CategoryMissingError:
            return False

    def declare_category(self, key:str, name:str) -> None:
        """ Set the display name for <key>, creating the category if it is new.
            Existing categories keep their images and their position. """
        self._labels.put(key, name)
        self._create_category(key)

    def add_entry(self, key:str, image_loc:str, text:str) -> None:
        self._categories.get(key).add_item(image_loc, text)

    def load(self, filename:str) -> bool:
        """ Add categories and images from a mapping file. Return True if the whole file was loaded.
            On failure, whatever was read before the error stays in place. """
        try:
            self._io.load(filename, self)
            return True
        except (MappingsIOError, NullKeyError, KeyNotFoundError) as e:
            self._log(f"Error loading mappings from {filename}: {e}")
            return False

    def _records(self) -> Iterator[CategoryRecord]:
        """ Yield every category in order as a record for the file writer.
            Categories without a display name use their key so that they still parse on reload. """
        for i in range(self._categories.size()):
            key = self._categories.get_key(i)
            name = self._labels.get(key) if self._labels.has_key(key) else key
            category = self._categories.get(key)
            entries = [(image_loc, category.select(image_loc)) for image_loc in category.image_ids()]
            yield key, name, entries

    def save(self, filename:str) -> bool:
        """ Save every category and image to a mapping file. Return True if successful. """
        try:
            self._io.save(filename, self._records())
            return True
        except MappingsIOError as e:
            self._log(f"Error writing mappings to {filename}: {e}")
            return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(categories={self._categories}, cursor={self._cursor})"
