import polars as pl

_MASK64 = (1 << 64) - 1
_GOLDEN = 0x9E3779B97F4A7C15


def _mix64(z: int) -> int:
    # splitmix64 finalizer; fixed arithmetic, independent of the polars version
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
    return z ^ (z >> 31)


class Randomizer:
    """
    Deterministic pseudo-randomness keyed on the row index.
    Every value is a hash of (seed, salt, index), so a row never depends on
    which batch it was generated in.
    """

    def __init__(self, seed: int = 42):
        self.seed = seed

    def index(self, begin: int, end: int) -> pl.Series:
        return pl.Series("index", range(begin, end), dtype=pl.Int64)

    def hashed(self, index: pl.Series, salt: int = 0) -> pl.Series:
        """
        UInt64 hash of each index, salted to keep columns independent.
        With seed 0 and salt 0, index i yields output i of a splitmix64
        stream started at state 0.
        """
        key = (self.seed + salt * 7919) & _MASK64
        values = [_mix64((key + (i + 1) * _GOLDEN) & _MASK64) for i in index.to_list()]
        return pl.Series("hash", values, dtype=pl.UInt64)

    def uniform_int(self, index: pl.Series, low: int, high: int, salt: int = 0) -> pl.Series:
        """
        Integer in [low, high) per index.
        """
        if high <= low:
            raise ValueError("high must be greater than low")
        span = high - low
        return (self.hashed(index, salt) % span).cast(pl.Int64) + low

    def sample_from_list(self, items: list, index: pl.Series, salt: int = 0) -> pl.Series:
        """
        Picks one item per index, uniformly.
        """
        if not items:
            raise ValueError("items must not be empty")
        positions = (self.hashed(index, salt) % len(items)).cast(pl.Int64)
        return pl.Series(items).gather(positions)

    def digits(self, index: pl.Series, width: int, salt: int = 0) -> pl.Series:
        """
        Fixed-width decimal string of `width` characters per index.
        """
        if width <= 0:
            return pl.Series("digits", [""] * len(index), dtype=pl.String)
        chunks = []
        remaining = width
        part = 0
        while remaining > 0:
            chunk = (self.hashed(index, salt * 31 + part)
                     .cast(pl.String).str.zfill(20).alias(f"part_{part}"))
            chunks.append(chunk)
            remaining -= 20
            part += 1
        joined = pl.DataFrame(chunks).select(
            pl.concat_str(pl.all()).str.slice(0, width)).to_series()
        return joined.rename("digits")
