""" Package for the mapping engine of an augmentative and alternative communication (AAC) board.
    The board is a set of categories, and each category holds images that speak a piece of text when selected.

    assoc - Every mapping in the package is stored in an associative array: a small ordered key/value container
    with linear lookup. Insertion order matters, since it is the order images appear on the board and the
    order they are saved in.

    category - A single category of images, each mapped to the text it speaks.

    mappings - The engine proper. Tracks which category is currently shown (if any), decides whether a
    selection means "open this category" or "speak this image", and adds new categories and images.

    io - Mappings are loaded from and saved to a plain text file, one category or image per line.

    board - Ties everything together with user options, settings and a log file for use as a library.
    Displaying the board and handling input from the user are left to the application. """

from aac_mappings.assoc import AssociativeArray, KeyNotFoundError, NullKeyError
from aac_mappings.board import AACBoard
from aac_mappings.category import AACCategory
from aac_mappings.mappings import (AACMappings, AlreadySelectedError, CategoryMissingError, Cursor,
                                   NavigationError, NoCategoriesAvailableError, NoCategorySelectedError)
from aac_mappings.options import AACOptions
from aac_mappings.page import AACPage, ItemNotFoundError
