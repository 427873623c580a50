import click
import polars as pl

from synthstore.core.generator import SEED_MAX, FlagConfigurableGenerator
from synthstore.core.random import Randomizer
from synthstore.core.registry import GeneratorRegistry
from synthstore.core.table import Table

BANK_VERSION = "1.0.0"


@GeneratorRegistry.register(
    "bank", version=BANK_VERSION,
    description="Cuentas bancarias con saldo y payload de relleno.")
class BankGenerator(FlagConfigurableGenerator):
    """
    Single-table generator: accounts(id, balance, payload).
    """

    def flag_options(self):
        return [
            click.Option(["--rows"], type=click.IntRange(min=0), default=1000,
                         help="Número de cuentas."),
            click.Option(["--seed"], type=click.IntRange(min=0, max=SEED_MAX), default=42),
            click.Option(["--payload-bytes"], type=click.IntRange(min=0), default=20,
                         help="Longitud del payload por fila."),
        ]

    def tables(self):
        return [
            Table(
                name="accounts",
                columns=("id", "balance", "payload"),
                batch=self._accounts,
                row_count=self.flag_set["rows"],
            )
        ]

    def _accounts(self, begin: int, end: int) -> pl.DataFrame:
        rnd = Randomizer(seed=self.flag_set["seed"])
        idx = rnd.index(begin, end)
        return pl.DataFrame({
            "id": idx,
            # Saldo en centavos, puede ser negativo (sobregiro)
            "balance": rnd.uniform_int(idx, -(1 << 20), 15 << 20, salt=0),
            "payload": rnd.digits(idx, self.flag_set["payload_bytes"], salt=2),
        })
