""" Module for a single category of images on the board. """

from typing import List

from .assoc import AssociativeArray
from .page import AACPage, ItemNotFoundError


class AACCategory(AssociativeArray[str, str], AACPage):
    """ A single category of images, each mapped to the text it speaks. Images are kept in insertion order. """

    def __init__(self, name:str) -> None:
        super().__init__()
        self.name = name  # Short key identifying this category (not the user-facing label).

    def add_item(self, image_loc:str, text:str) -> None:
        """ Add an image or replace the text of one that exists. A None location raises NullKeyError. """
        self.put(image_loc, text)

    def get_category(self) -> str:
        return self.name

    def image_ids(self) -> List[str]:
        return self.keys()

    def list_locations(self) -> List[str]:
        return self.image_ids()

    def select(self, image_loc:str) -> str:
        """ Return the text associated with the image at <image_loc>. """
        if not self.has_key(image_loc):
            raise ItemNotFoundError(f"Image location not found in category {self.name}: {image_loc}")
        return self.get(image_loc)

    def has_image(self, image_loc:str) -> bool:
        return self.has_key(image_loc)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, {self})"
