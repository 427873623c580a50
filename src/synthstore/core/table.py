from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import polars as pl

# (begin, end) -> DataFrame holding rows [begin, end), one row per index.
BatchFn = Callable[[int, int], pl.DataFrame]


@dataclass(frozen=True)
class Table:
    """
    A named dataset exposed by a generator.

    `batch` must be a pure function of the row indices it is given: the same
    index always yields the same row, whatever batch it is requested in.
    """
    name: str
    columns: Tuple[str, ...]
    batch: BatchFn = field(repr=False, compare=False)
    row_count: Optional[int] = None
    batch_size: int = 1000

    def rows(self, begin: int, end: int) -> pl.DataFrame:
        df = self.batch(begin, end)
        if df.height != end - begin:
            raise RuntimeError(
                f"table {self.name} produced {df.height} rows for [{begin}, {end})")
        return df.select(list(self.columns))

    def row(self, index: int) -> tuple:
        return self.rows(index, index + 1).row(0)
