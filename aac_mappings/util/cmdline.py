""" Module for user-configurable command-line options. """

import os
import sys
from typing import Any, Dict, Iterable, List, TextIO

HELP_KEYS = ("-h", "--help")


class CmdlineOption:
    """ A command-line option holding a single value of one type. Flags (bool options) take no arguments. """

    _TRUE_STRINGS = {"1", "true", "yes", "on"}

    def __init__(self, key:str, desc="No description.", opt_type=str) -> None:
        self.key = key             # Option key (the name prefixed with --).
        self.desc = desc           # Description to be displayed in help.
        self._opt_type = opt_type  # Data type to be produced if the option is specified.

    def __call__(self, *args:str) -> Any:
        """ Convert argument strings to the type required by this option and return it. """
        if self._opt_type is bool:
            if not args:
                return True
            return args[0].lower() in self._TRUE_STRINGS
        if len(args) != 1:
            raise ValueError(f'Option {self.key} takes exactly one argument, got {len(args)}.')
        return self._opt_type(*args)

    def usage(self) -> str:
        if self._opt_type is bool:
            return self.key
        return f'{self.key}=<{self._opt_type.__name__}>'


def _group_args(argv:Iterable[str]) -> List[List[str]]:
    """ Split arguments into groups that each start with a '-' prefixed key string, followed by the
        separate arguments after it. Anything before the first key gets a group of its own with an empty key. """
    groups = [[""]]
    for s in argv:
        if s.startswith('-'):
            groups.append([s])
        else:
            groups[-1].append(s)
    return groups


class CmdlineOptions:
    """ Namespace class for command-line options. Option values are accessed as instance attributes.
        Unparsed options will fall back to default values. """

    def __init__(self, app_description="Command line application.") -> None:
        self._app_description = app_description          # App description shown in command-line help.
        self._options: Dict[str, CmdlineOption] = {}     # Option objects keyed by their destination attributes.
        self._extras = []                                # Arguments from the last parse that matched no option.

    def __getattr__(self, name:str) -> Any:
        raise AttributeError(f'"{name}" is not the name of a valid command-line option.')

    def add(self, name:str, default:Any=None, desc="No description.") -> None:
        """ Add a new option and set its attribute to be the default value (until parsed).
            Since attribute names cannot have hyphens, they are replaced with underscores. """
        opt_type = str if default is None else type(default)
        attr_name = name.replace("-", "_")
        self._options[attr_name] = CmdlineOption("--" + name, desc, opt_type)
        setattr(self, attr_name, default)

    def format_help(self, script:str) -> str:
        usage = "usage: " + script + "".join([f" [{opt.usage()}]" for opt in self._options.values()])
        usage += " [" + "|".join(HELP_KEYS) + "]"
        info = [f"  {opt.key}: {opt.desc}" for opt in self._options.values()]
        return "\n".join([self._app_description, usage, "", *info, ""])

    def parse(self, argv:Iterable[str]=None, *, help_file:TextIO=None) -> None:
        """ Parse options into instance attributes. Arguments are taken from <argv> if provided,
            otherwise from sys.argv. The first argument is always the script name.
            A help option writes usage to <help_file> (default stdout) and exits the program. """
        script, *argv = (argv or sys.argv)
        script = os.path.basename(script)
        opts_by_key = {opt.key: (attr, opt) for attr, opt in self._options.items()}
        (_, *extras), *groups = _group_args(argv)
        parsed = {}
        for raw, *args in groups:
            key, *value = raw.split('=', 1)
            if key in HELP_KEYS:
                (help_file or sys.stdout).write(self.format_help(script))
                sys.exit(0)
            if key not in opts_by_key:
                extras += [raw, *args]
                continue
            args = value + args
            attr, opt = opts_by_key[key]
            parsed[attr] = opt(*args)
        self.__dict__.update(parsed)
        self._extras = extras

    def extras(self) -> List[str]:
        return self._extras[:]
