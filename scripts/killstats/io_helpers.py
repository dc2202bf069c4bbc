"""I/O operations — input listing, CSV reading, JSON writing."""

import csv
import json
import os
import stat
import tempfile
from pathlib import Path

from killstats.constants import CSV_ENCODING
from killstats.errors import ReadError, ParseError, SerializationError


# ─── Input Files ────────────────────────────────────────────────

def list_input_files(directory):
    """Every entry in the directory is an input file, no extension filter.

    Sorted so progress output is the same from run to run.
    """
    directory = Path(directory)
    try:
        return sorted(entry for entry in directory.iterdir())
    except OSError as e:
        raise ReadError(directory, e.strerror or str(e)) from e


def read_kill_rows(path):
    """Yield the data rows of one kill-event CSV, header skipped.

    Open and read failures raise ReadError; undecodable content raises
    ParseError.
    """
    try:
        with open(path, "r", encoding=CSV_ENCODING, newline="") as f:
            reader = csv.reader(f)
            next(reader, None)
            yield from reader
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise ParseError(f"cannot decode CSV: {e}", path=path) from e


# ─── JSON Writers ────────────────────────────────────────────────

def _new_file_mode(path):
    """Mode the report should end up with: the existing file's, else 0666 minus umask."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_json(path, data):
    """Write data as JSON, all or nothing.

    The document is encoded first, written to a temp file next to the
    target and moved into place, so a failed write leaves no output.
    Returns the size in bytes.
    """
    path = Path(path)
    try:
        text = json.dumps(data, indent=2, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"cannot encode report: {e}") from e

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    except OSError as e:
        raise SerializationError(f"cannot write {path}: {e}") from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            os.fchmod(f.fileno(), _new_file_mode(path))
            f.write(text)
        os.replace(tmp_name, path)
    except OSError as e:
        os.unlink(tmp_name)
        raise SerializationError(f"cannot write {path}: {e}") from e

    return path.stat().st_size
