"""File-backed storage for the counter value.

The file holds a single line: the decimal value of the counter. Every
``persist`` rewrites the whole file (seek, truncate, write, flush and, in
durability mode, ``fdatasync``) so no residue of a longer previous value can
survive.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Literal

from tallyfile.core.counter import Counter, format_value, parse_value
from tallyfile.core.exceptions import StorageError
from tallyfile.ui.logging import log

ValueSource = Literal["argument", "file", "default"]

_sync_data = getattr(os, "fdatasync", os.fsync)


@dataclass(frozen=True, slots=True)
class LoadResult:
    """What ``CounterStore.open`` found on disk."""

    value: int
    source: ValueSource
    invalid_content: str | None = None

    @property
    def was_invalid(self) -> bool:
        return self.invalid_content is not None


class CounterStore:
    """Owns the counter file handle and the in-memory ``Counter``."""

    def __init__(
        self,
        path: Path,
        handle: BinaryIO,
        counter: Counter,
        *,
        sync: bool = True,
        trailing_newline: bool = False,
    ) -> None:
        self.path = path
        self.counter = counter
        self.sync = sync
        self.trailing_newline = trailing_newline
        self._fh: BinaryIO | None = handle

    @classmethod
    def open(
        cls,
        path: Path | str,
        start_value: int | None = None,
        *,
        sync: bool = True,
        trailing_newline: bool = False,
    ) -> tuple[CounterStore, LoadResult]:
        """Open (creating if needed) the counter file and work out the initial value.

        Precedence: *start_value* > first line of the file > 0. Nothing is
        written here; an unparseable first line is reported through
        ``LoadResult.invalid_content`` and the counter starts at 0.

        Raises:
            StorageError: If the file cannot be opened or read.
            ValueError: If *start_value* is outside the 64-bit range.
        """
        path = Path(path)
        counter = Counter(start_value) if start_value is not None else Counter()
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
        except OSError as e:
            raise StorageError(path, "open", e.strerror or str(e)) from e
        handle = os.fdopen(fd, "r+b")
        store = cls(path, handle, counter, sync=sync, trailing_newline=trailing_newline)

        if start_value is not None:
            result = LoadResult(value=start_value, source="argument")
        else:
            try:
                result = store._read_initial()
            except StorageError:
                store.close()
                raise
            counter.value = result.value

        log(f"Opened {path} (value {result.value} from {result.source})")
        return store, result

    def _read_initial(self) -> LoadResult:
        assert self._fh is not None
        try:
            raw = self._fh.readline()
        except OSError as e:
            raise StorageError(self.path, "read", e.strerror or str(e)) from e

        if not raw:
            return LoadResult(value=0, source="default")

        # A blank first line is still content: whatever follows it may matter
        line = raw.decode("utf-8", errors="replace")

        value = parse_value(line)
        if value is None:
            log(f"Non-counter data in {self.path}: {line.rstrip()!r}", level="warning")
            return LoadResult(value=0, source="default", invalid_content=line.rstrip("\r\n"))
        return LoadResult(value=value, source="file")

    @property
    def value(self) -> int:
        return self.counter.value

    @property
    def closed(self) -> bool:
        return self._fh is None

    def reset(self, value: int = 0) -> None:
        """Replace the in-memory value without touching the file."""
        self.counter = Counter(value)

    def render(self) -> bytes:
        """Return the exact bytes ``persist`` writes for the current value."""
        text = format_value(self.counter.value)
        if self.trailing_newline:
            text += "\n"
        return text.encode("ascii")

    def persist(self) -> None:
        """Rewrite the file so it holds only the current value.

        Raises:
            StorageError: On any write, flush or sync failure.
        """
        if self._fh is None:
            raise StorageError(self.path, "write", "store is closed")

        data = self.render()
        try:
            self._fh.seek(0)
            self._fh.truncate(0)
            self._fh.write(data)
            self._fh.flush()
        except OSError as e:
            raise StorageError(self.path, "write", e.strerror or str(e)) from e

        if self.sync:
            try:
                _sync_data(self._fh.fileno())
            except OSError as e:
                raise StorageError(self.path, "sync", e.strerror or str(e)) from e

        log(f"Persisted {self.counter.value}", level="debug")

    def close(self) -> None:
        if self._fh is None:
            return
        try:
            self._fh.close()
        finally:
            self._fh = None

    def __enter__(self) -> CounterStore:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["CounterStore", "LoadResult", "ValueSource"]
