import polars as pl
from synthstore.core.random import Randomizer

# Catálogo de respaldo: categoría -> componentes del nombre y factor de precio
CATALOG = {
    "Electronics": {"brands": ["Samsung", "Lenovo", "Xiaomi"], "nouns": ["Laptop", "Celular", "Monitor"],
                    "price_factor": 8.0},
    "Clothing": {"brands": ["Topitop", "Adidas", "Nike"], "nouns": ["Polo", "Casaca", "Zapatilla"],
                 "price_factor": 1.5},
    "Home": {"brands": ["Oster", "Imaco", "Record"], "nouns": ["Licuadora", "Olla", "Sarten"],
             "price_factor": 2.0},
    "Food": {"brands": ["Gloria", "Alicorp", "Donofrio"], "nouns": ["Leche", "Aceite", "Galleta"],
             "price_factor": 0.3},
}
ADJECTIVES = ["Standard", "Pro", "Plus", "Max", "Lite"]

PRODUCT_COLUMNS = ("product_id", "name", "category", "brand", "price_cents")


class ProductRows:
    """
    Catálogo de productos.
    """

    def __init__(self, seed: int = 42):
        self.rnd = Randomizer(seed=seed + 1)

    def __call__(self, begin: int, end: int) -> pl.DataFrame:
        rnd = self.rnd
        idx = rnd.index(begin, end)
        categories = list(CATALOG)

        # Aplanar (categoría, marca, sustantivo) para muestrear en un solo paso
        recipes = [(cat, brand, noun)
                   for cat in categories
                   for brand in CATALOG[cat]["brands"]
                   for noun in CATALOG[cat]["nouns"]]
        pick = rnd.sample_from_list(list(range(len(recipes))), idx, salt=1)

        df = pl.DataFrame({
            "product_id": idx,
            "category": pl.Series([recipes[i][0] for i in pick], dtype=pl.String),
            "brand": pl.Series([recipes[i][1] for i in pick], dtype=pl.String),
            "noun": pl.Series([recipes[i][2] for i in pick], dtype=pl.String),
            "adjective": rnd.sample_from_list(ADJECTIVES, idx, salt=2),
            "base_price": rnd.uniform_int(idx, 500, 20_000, salt=3),
        })

        factors = {cat: v["price_factor"] for cat, v in CATALOG.items()}
        df = df.with_columns(
            name=pl.format("{} {} {}", "noun", "brand", "adjective"),
            price_cents=(pl.col("base_price") *
                         pl.col("category").replace_strict(factors, return_dtype=pl.Float64))
            .round(0).cast(pl.Int64),
        )
        return df.select(PRODUCT_COLUMNS)
