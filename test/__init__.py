""" Test package for the AAC mappings engine. __init__.py locates common test resources. """

import os

_data_dir = os.path.join(os.path.dirname(__file__), "data")
SCENARIO_PATH = os.path.join(_data_dir, "scenario.txt")  # Two small categories: one (fruit) and two (veg).
MAPPINGS_PATH = os.path.join(_data_dir, "mappings.txt")  # A realistic board with image paths and long labels.
del _data_dir
