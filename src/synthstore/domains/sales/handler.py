import click

from synthstore.core.generator import SEED_MAX, FlagConfigurableGenerator
from synthstore.core.registry import GeneratorRegistry
from synthstore.core.table import Table
from synthstore.domains.sales.customers import CUSTOMER_COLUMNS, CustomerRows
from synthstore.domains.sales.products import PRODUCT_COLUMNS, ProductRows
from synthstore.domains.sales.stores import STORE_COLUMNS, StoreRows

SALES_VERSION = "1.0.0"


@GeneratorRegistry.register(
    "sales", version=SALES_VERSION,
    description="Dimensiones de retail: tiendas, clientes y productos.")
class SalesGenerator(FlagConfigurableGenerator):
    def flag_options(self):
        return [
            click.Option(["--seed"], type=click.IntRange(min=0, max=SEED_MAX), default=42),
            click.Option(["--stores"], type=click.IntRange(min=0), default=50),
            click.Option(["--customers"], type=click.IntRange(min=0), default=10_000),
            click.Option(["--products"], type=click.IntRange(min=0), default=1_000),
        ]

    def tables(self):
        f = self.flag_set
        return [
            Table("stores", STORE_COLUMNS, StoreRows(f["seed"]), row_count=f["stores"]),
            Table("customers", CUSTOMER_COLUMNS,
                  CustomerRows(f["seed"], stores=f["stores"]), row_count=f["customers"]),
            Table("products", PRODUCT_COLUMNS, ProductRows(f["seed"]), row_count=f["products"]),
        ]
