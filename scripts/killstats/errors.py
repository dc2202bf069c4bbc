"""Error taxonomy. Every fatal condition raises one of these up to main()."""


class KillStatsError(Exception):
    """Base class for errors that abort a run."""


class UsageError(KillStatsError, ValueError):
    """Bad run configuration (e.g. a worker count below 1)."""


class ReadError(KillStatsError):
    """An input directory or file could not be opened or read."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")


class ParseError(KillStatsError):
    """A row could not be decoded into a kill event."""

    def __init__(self, message, path=None, line=None):
        self.path = str(path) if path is not None else None
        self.line = line
        where = ""
        if self.path is not None:
            where = f"{self.path}"
            if line is not None:
                where += f":{line}"
            where += ": "
        super().__init__(f"{where}{message}")


class SerializationError(KillStatsError):
    """The report could not be encoded or written."""
