import sys
from pathlib import Path

import polars as pl
import pytest

# Add src to sys.path so we can import synthstore even if not installed
src_path = str(Path(__file__).parent.parent / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from synthstore.core.generator import BaseGenerator  # noqa: E402
from synthstore.core.registry import GeneratorRegistry  # noqa: E402
from synthstore.core.table import Table  # noqa: E402


class CounterGenerator(BaseGenerator):
    """No flags, one unbounded table: squares(n, square)."""

    def tables(self):
        return [
            Table(
                name="squares",
                columns=("n", "square"),
                batch=lambda b, e: pl.DataFrame({
                    "n": pl.Series(range(b, e), dtype=pl.Int64),
                    "square": pl.Series([i * i for i in range(b, e)], dtype=pl.Int64),
                }),
                row_count=None,
                batch_size=4,
            )
        ]


@pytest.fixture
def counter_generator():
    GeneratorRegistry.register("counter", version="v2-beta")(CounterGenerator)
    yield GeneratorRegistry.get("counter")
    GeneratorRegistry.unregister("counter")
