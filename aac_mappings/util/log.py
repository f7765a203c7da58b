import os
import sys
from threading import Lock
from time import strftime
from typing import List, TextIO


class StreamLogger:
    """ Basic logger class. Writes timestamped lines to pre-opened text streams. """

    def __init__(self, *streams:TextIO, time_fmt="[%b %d %Y %H:%M:%S]: ", repeat_mark="*") -> None:
        self._streams: List[TextIO] = [*streams]  # Writable/appendable text streams for logging.
        self._time_fmt = time_fmt                 # Format for time.strftime. If None, do not add timestamps.
        self._repeat_mark = repeat_mark           # Replaces repeated messages. If None, log all messages fully.
        self._last_message = ""                   # Most recent unique message string.
        self._lock = Lock()                       # Only one thread may write to the streams at a time.

    def add_stream(self, stream:TextIO) -> None:
        with self._lock:
            self._streams.append(stream)

    def _replace_if_duplicate(self, message:str) -> str:
        """ Replace <message> with a short 'repeat' mark if identical to the last message to save space. """
        if message == self._last_message:
            return self._repeat_mark
        self._last_message = message
        return message

    def _write_all(self, entry:str) -> None:
        with self._lock:
            for stream in self._streams:
                try:
                    # Flush after every write so that messages don't get lost in the buffer on a crash.
                    stream.write(entry)
                    stream.flush()
                except Exception:
                    # A broken stream must not stop the others from getting the message.
                    continue

    def log(self, message:str) -> None:
        """ Filter, timestamp, and write <message> to all log streams with a trailing newline. """
        if self._repeat_mark is not None:
            message = self._replace_if_duplicate(message)
        if self._time_fmt is not None:
            message = strftime(self._time_fmt) + message
        self._write_all(message + '\n')

    __call__ = log


def open_logger(*filenames:str, encoding='utf-8', to_stdout=False, to_stderr=False, **kwargs) -> StreamLogger:
    """ Open a logger that appends to text files and/or prints to system streams.
        Directories are created for log files that don't exist yet. Files stay open until the program exits. """
    streams = []
    for filename in filenames:
        directory = os.path.dirname(filename) or "."
        os.makedirs(directory, exist_ok=True)
        streams.append(open(filename, 'a', encoding=encoding))
    if to_stdout:
        streams.append(sys.stdout)
    if to_stderr:
        streams.append(sys.stderr)
    return StreamLogger(*streams, **kwargs)
