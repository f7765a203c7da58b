from aac_mappings.io import MappingsFileIO
from aac_mappings.mappings import AACMappings
from aac_mappings.options import AACOptions
from aac_mappings.util.config import SimpleConfigDict
from aac_mappings.util.log import open_logger, StreamLogger

CONFIG_SECTION = "aac"
CONFIG_DEFAULTS = {"autosave": False}  # If True, save the mapping file after every added item.


class AACBoard:
    """ Container/factory for all components, and the basis for using an AAC board as a library. """

    def __init__(self, opts:AACOptions=None, *, parse_args=True) -> None:
        if opts is None:
            opts = AACOptions()
        if parse_args:
            opts.parse()
        self._opts = opts
        self.mappings_path = opts.mappings_path()

    class Component:
        """ Property-like descriptor to create a component if it does not exist, then save it over the attribute. """

        def __init__(self, func) -> None:
            self._func = func

        def __get__(self, instance, owner=None) -> object:
            if instance is None:
                return self
            value = self._func(instance)
            setattr(instance, self._func.__name__, value)
            return value

    @Component
    def logger(self) -> StreamLogger:
        """ Open a logger that writes to both stderr and a log file. """
        return open_logger(self._opts.log_path(), to_stderr=True)

    @Component
    def config(self) -> SimpleConfigDict:
        """ Read user settings. A missing config file just means every setting has its default. """
        config = SimpleConfigDict(self._opts.config_path(), CONFIG_SECTION, CONFIG_DEFAULTS)
        if not config.read():
            self.logger.log("No user config found; using defaults.")
        return config

    @Component
    def mappings_io(self) -> MappingsFileIO:
        return MappingsFileIO()

    @Component
    def mappings(self) -> AACMappings:
        """ Load the board's categories and images. Failures are logged and leave the board (partially) empty. """
        return AACMappings(self.mappings_path, io=self.mappings_io, logger=self.logger.log)

    def add_item(self, image_loc:str, text:str) -> None:
        """ Add an item through the mappings, then save them if autosave is on. """
        self.mappings.add_item(image_loc, text)
        if self.config["autosave"]:
            self.save()

    def save(self) -> bool:
        return self.mappings.save(self.mappings_path)
