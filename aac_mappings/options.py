from aac_mappings.util.cmdline import CmdlineOptions
from aac_mappings.util.path import PrefixPathConverter, user_data_directory

# The name of the root package is used as a default path for user files.
ROOT_PACKAGE = __package__.split(".", 1)[0]


class AACOptions(CmdlineOptions):
    """ Contains all command-line options necessary to build an AAC board. """

    USER_PATH_PREFIX = "~/"  # Prefix that indicates local user app data.

    def __init__(self, app_description="AAC board with categories of spoken images.") -> None:
        super().__init__(app_description)
        self.add("mappings", self.USER_PATH_PREFIX + "mappings.txt",
                 "Text file with categories and images to load on start and save to.")
        self.add("log", self.USER_PATH_PREFIX + "status.log",
                 "Text file to log status and errors.")
        self.add("config", self.USER_PATH_PREFIX + "config.cfg",
                 "Config CFG/INI file with user settings.")
        converter = PrefixPathConverter()
        converter.add(self.USER_PATH_PREFIX, user_data_directory(ROOT_PACKAGE))
        self._convert_path = converter.convert

    def mappings_path(self) -> str:
        """ Return the full path to the mapping file, adding directories if necessary since it is also saved. """
        return self._convert_path(self.mappings, make_dirs=True)

    def log_path(self) -> str:
        return self._convert_path(self.log, make_dirs=True)

    def config_path(self) -> str:
        return self._convert_path(self.config, make_dirs=True)
