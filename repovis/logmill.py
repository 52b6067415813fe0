"""Detection and loading of a commit log in a background thread."""

from __future__ import annotations

import enum
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Protocol, Tuple

log = logging.getLogger(__name__)


class LogMillState(enum.IntEnum):
    STARTUP = 0
    FETCHING = 1
    SUCCESS = 2
    FAILURE = 3


class LogMillError(Exception):
    """Raised when no commit log could be produced."""


class CommitLog(Protocol):
    def check_format(self) -> bool: ...

    def is_finished(self) -> bool: ...

    def next_commit(self) -> Optional[Any]: ...

    def buffer_commit(self, commit: Any) -> None: ...


ReaderFactory = Callable[[str], CommitLog]

_MARKERS = (("git", ".git"), ("hg", ".hg"), ("bzr", ".bzr"), ("svn", ".svn"))


def find_repository(path) -> Optional[Tuple[Path, str]]:
    """Walk up from path to the nearest repository; return (directory, format) or None."""
    directory = Path(path).resolve(strict=True)
    while directory.is_dir():
        git = directory / ".git"
        if git.is_dir() or git.is_file():
            return directory, "git"
        for name, marker in _MARKERS[1:]:
            if (directory / marker).is_dir():
                return directory, name
        if directory.parent == directory:
            return None
        directory = directory.parent
    return None


class LogMill:
    """Finds a reader that understands a log file or repository.

    readers is a sequence of (format name, factory) pairs in the order they
    are tried when no format is given; when one is, only the readers of that
    name are tried, in the same order.
    """

    def __init__(
        self,
        logfile: str,
        readers: Iterable[Tuple[str, ReaderFactory]],
        log_format: str = "",
        start_timestamp: int = 0,
        stop_timestamp: int = 0,
    ) -> None:
        self.logfile = logfile
        self.readers: List[Tuple[str, ReaderFactory]] = list(readers)
        self.log_format = log_format
        self.start_timestamp = start_timestamp
        self.stop_timestamp = stop_timestamp
        self.state = LogMillState.STARTUP
        self.error = ""
        self.log: Optional[CommitLog] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        """Run the mill in a background thread."""
        self._thread = threading.Thread(target=self.run, name="logmill", daemon=True)
        self._thread.start()

    def abort(self) -> None:
        """Wait for the background thread to end."""
        if self._thread is None:
            return
        self._thread.join()
        self._thread = None

    def is_finished(self) -> bool:
        return self.state > LogMillState.FETCHING

    def get_log(self) -> CommitLog:
        """Wait for the mill and return the log, or raise LogMillError."""
        self.abort()
        if self.log is None:
            raise LogMillError(self.error or "no log available")
        return self.log

    def run(self) -> None:
        """Detect the format, open the log and skip to the start time."""
        self.state = LogMillState.FETCHING
        log_format = self.log_format

        try:
            log_format, self.log = self._fetch_log(log_format)
            if self.log is not None and self.start_timestamp:
                self._skip_to_start(self.log)
        except OSError:
            self.error = "unable to read log file"
        except LogMillError as exc:
            self.error = str(exc)

        if self.log is None and not self.error:
            if Path(self.logfile).is_dir():
                if log_format:
                    if self.start_timestamp or self.stop_timestamp:
                        self.error = "failed to generate log file for the specified time period"
                    else:
                        self.error = "failed to generate log file"
                else:
                    self.error = "directory not supported"
            else:
                self.error = "unsupported log format (you may need to regenerate your log file)"

        self.state = LogMillState.SUCCESS if self.log is not None else LogMillState.FAILURE

    def _skip_to_start(self, clog: CommitLog) -> None:
        while not clog.is_finished():
            commit = clog.next_commit()
            if commit is not None and commit.timestamp >= self.start_timestamp:
                clog.buffer_commit(commit)
                break

    def _fetch_log(self, log_format: str) -> Tuple[str, Optional[CommitLog]]:
        if not log_format and self.logfile != "-":
            try:
                if Path(self.logfile).is_dir():
                    found = find_repository(self.logfile)
                    if found is not None:
                        repo_path, log_format = found
                        self.logfile = str(repo_path)
            except OSError:
                pass

        if log_format:
            log.debug("log-format = %s", log_format)
            candidates = [(n, f) for n, f in self.readers if n == log_format]
        else:
            candidates = self.readers

        for name, factory in candidates:
            log.debug("trying %s...", name)
            clog = factory(self.logfile)
            if clog.check_format():
                return log_format, clog
        return log_format, None