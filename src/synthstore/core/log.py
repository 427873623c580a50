import logging

from rich.console import Console
from rich.logging import RichHandler

# stdout queda libre para el CSV
err_console = Console(stderr=True)


def configure_logging(level: str = "WARNING") -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Nivel de log desconocido: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
