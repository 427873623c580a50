import polars as pl
from synthstore.core.random import Randomizer

FIRST_NAMES = ["Juan", "Maria", "Jose", "Ana", "Luis", "Rosa", "Carlos", "Lucia"]
LAST_NAMES = ["Quispe", "Garcia", "Rodriguez", "Flores", "Mamani", "Huaman"]
EMAIL_DOMAINS = ["gmail.com", "hotmail.com", "outlook.com", "yahoo.com"]
CITIES = ["Lima", "Arequipa", "Trujillo", "Cusco", "Piura"]

CUSTOMER_COLUMNS = ("customer_id", "first_name", "last_name",
                    "email", "city", "phone_number", "preferred_store_id")


class CustomerRows:
    """
    Clientes del dominio de ventas.
    preferred_store_id apunta a una tienda existente en [1, stores].
    """

    def __init__(self, seed: int = 42, stores: int = 50):
        self.rnd = Randomizer(seed=seed)
        self.stores = stores

    def __call__(self, begin: int, end: int) -> pl.DataFrame:
        rnd = self.rnd
        idx = rnd.index(begin, end)
        df = pl.DataFrame({
            "customer_id": idx,
            "first_name": rnd.sample_from_list(FIRST_NAMES, idx, salt=1),
            "last_name": rnd.sample_from_list(LAST_NAMES, idx, salt=2),
            "email_domain": rnd.sample_from_list(EMAIL_DOMAINS, idx, salt=3),
            "city": rnd.sample_from_list(CITIES, idx, salt=4),
            "phone_suffix": rnd.uniform_int(idx, 10_000_000, 100_000_000, salt=5),
        })

        df = df.with_columns(
            # Teléfono móvil: 9 + 8 dígitos
            phone_number=pl.lit("9") + pl.col("phone_suffix").cast(pl.String),
            email=(pl.col("first_name").str.to_lowercase() + "." +
                   pl.col("last_name").str.to_lowercase() + "." +
                   pl.col("customer_id").cast(pl.String) + "@" +
                   pl.col("email_domain")),
        )
        if self.stores > 0:
            store = rnd.uniform_int(idx, 1, self.stores + 1, salt=6)
        else:
            store = pl.Series([None] * len(idx), dtype=pl.Int64)
        df = df.with_columns(preferred_store_id=store)
        return df.select(CUSTOMER_COLUMNS)
