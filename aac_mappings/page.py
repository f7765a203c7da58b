""" Module for the common interface of every selectable page on the board. """

from typing import List

from .assoc import KeyNotFoundError


class ItemNotFoundError(KeyNotFoundError):
    """ Raised when an image location is selected that its page does not have. """


class AACPage:
    """ Abstract class for one page of selectable images. A page may be a single category or the whole board. """

    def add_item(self, image_loc:str, text:str) -> None:
        """ Add an image with the text to speak when it is selected. """
        raise NotImplementedError

    def get_category(self) -> str:
        """ Return the name of the category shown on this page (or empty if there is none). """
        raise NotImplementedError

    def list_locations(self) -> List[str]:
        """ Return the locations of every image on this page in order. """
        raise NotImplementedError

    def select(self, image_loc:str) -> str:
        """ Select an image on this page and return the text to speak (if any). """
        raise NotImplementedError

    def has_image(self, image_loc:str) -> bool:
        """ Return True if this page has an image at <image_loc>. """
        raise NotImplementedError
