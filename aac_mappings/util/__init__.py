""" Generic utilities with no knowledge of AAC boards: logging, command-line options, paths and config files. """
