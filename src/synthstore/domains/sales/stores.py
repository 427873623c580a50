import polars as pl
from synthstore.core.random import Randomizer

# Ciudades soportadas, su región y formatos disponibles
CITIES = {
    "Lima": {"region": "Costa", "formats": ["Hipermercado", "Supermercado", "Express"]},
    "Arequipa": {"region": "Sierra", "formats": ["Supermercado", "Express"]},
    "Trujillo": {"region": "Costa", "formats": ["Supermercado", "Express"]},
    "Cusco": {"region": "Sierra", "formats": ["Supermercado", "Express"]},
    "Piura": {"region": "Costa", "formats": ["Supermercado", "Express"]},
}

# Tamaño en m2 según formato
SIZE_RANGES = {
    "Hipermercado": (4000, 10000),
    "Supermercado": (1000, 4000),
    "Express": (100, 500),
}

STORE_COLUMNS = ("store_id", "name", "city", "region", "format", "size_m2")


class StoreRows:
    """
    Tiendas de una cadena de retail con presencia nacional.
    Lima concentra más tiendas (aparece dos veces en el sorteo).
    """

    def __init__(self, seed: int = 42):
        self.rnd = Randomizer(seed=seed + 10)

    def __call__(self, begin: int, end: int) -> pl.DataFrame:
        rnd = self.rnd
        idx = rnd.index(begin, end)
        weighted_cities = ["Lima"] + list(CITIES)
        city = rnd.sample_from_list(weighted_cities, idx, salt=1)

        df = pl.DataFrame({
            "store_id": idx + 1,
            "city": city,
            "pick": rnd.uniform_int(idx, 0, 1_000_000, salt=2),
            "suffix": rnd.uniform_int(idx, 100, 1000, salt=3),
            "size_pick": rnd.uniform_int(idx, 0, 1_000_000, salt=4),
        })

        region = {c: v["region"] for c, v in CITIES.items()}
        n_formats = {c: len(v["formats"]) for c, v in CITIES.items()}
        df = df.with_columns(
            region=pl.col("city").replace_strict(region, return_dtype=pl.String),
            fmt_idx=pl.col("pick") % pl.col("city").replace_strict(n_formats, return_dtype=pl.Int64),
        )
        formats = {f"{c}|{i}": fmt
                   for c, v in CITIES.items() for i, fmt in enumerate(v["formats"])}
        df = df.with_columns(
            format=pl.concat_str("city", pl.lit("|"), pl.col("fmt_idx").cast(pl.String))
            .replace_strict(formats, return_dtype=pl.String),
        )

        lows = {f: r[0] for f, r in SIZE_RANGES.items()}
        spans = {f: r[1] - r[0] for f, r in SIZE_RANGES.items()}
        df = df.with_columns(
            name=pl.format("Tienda {} {} {}", "city", "format", "suffix"),
            size_m2=pl.col("format").replace_strict(lows, return_dtype=pl.Int64)
            + pl.col("size_pick") % pl.col("format").replace_strict(spans, return_dtype=pl.Int64),
        )
        return df.select(STORE_COLUMNS)
