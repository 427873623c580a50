import io
import logging
from typing import Iterator, Optional

from synthstore.core.table import Table

logger = logging.getLogger(__name__)


def resolve_end(table: Table, row_start: int, row_end: int) -> Optional[int]:
    """
    Exclusive end row for a read. row_end == 0 means the table's row count,
    which may itself be None (unbounded stream).
    """
    if row_end:
        return row_end
    if table.row_count is None:
        return None
    return max(row_start, table.row_count)


def iter_csv_batches(table: Table, row_start: int, row_end: int,
                     batch_size: Optional[int] = None) -> Iterator[bytes]:
    """
    Yields CSV-encoded batches (no header, one `\\n`-terminated record per row).
    Nothing is generated until the consumer asks for the next batch.
    """
    size = batch_size or table.batch_size
    if size <= 0:
        raise ValueError("batch_size must be positive")
    end = resolve_end(table, row_start, row_end)
    cursor = row_start
    while end is None or cursor < end:
        upper = cursor + size if end is None else min(cursor + size, end)
        df = table.rows(cursor, upper)
        yield df.write_csv(include_header=False).encode("utf-8")
        cursor = upper


class CSVRowsReader(io.RawIOBase):
    """
    Single-pass, non-seekable byte stream over rows [row_start, row_end) of a table.
    Open a new reader to start over.
    """

    def __init__(self, table: Table, row_start: int, row_end: int,
                 batch_size: Optional[int] = None):
        super().__init__()
        self.table = table
        self.row_start = row_start
        self.row_end = resolve_end(table, row_start, row_end)
        self._batches = iter_csv_batches(table, row_start, row_end, batch_size)
        self._buf = b""
        self._pos = 0
        self._exhausted = False

    def readable(self) -> bool:
        return True

    def _fill(self) -> bool:
        while self._pos >= len(self._buf):
            if self._exhausted:
                return False
            try:
                self._buf = next(self._batches)
            except StopIteration:
                self._exhausted = True
                self._buf = b""
                logger.debug("stream over %s [%d, %s) exhausted",
                             self.table.name, self.row_start, self.row_end)
                return False
            self._pos = 0
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        if not len(b) or not self._fill():
            return 0
        n = min(len(b), len(self._buf) - self._pos)
        b[:n] = self._buf[self._pos:self._pos + n]
        self._pos += n
        return n

    def close(self) -> None:
        if not self.closed and hasattr(self, "_batches"):
            self._batches.close()
            self._buf = b""
        super().close()
