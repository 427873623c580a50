import io
import logging
import os
import pathlib
import shutil
import sys

import click
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from synthstore.core.binding import bind
from synthstore.core.config import parse_uri
from synthstore.core.errors import SynthStoreError
from synthstore.core.log import configure_logging, err_console as console
from synthstore.core.registry import GeneratorRegistry
from synthstore.core.settings import Settings
from synthstore.core.stream import resolve_end
from synthstore.core.system import DiskGuard
from synthstore.storages.definitions import WorkloadStorage

logger = logging.getLogger(__name__)


def _fail(e: Exception) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
    sys.exit(1)


@click.group()
@click.option("--config-dir", type=click.Path(file_okay=False), default=None,
              help="Directorio con defaults.yaml / main.yaml (por defecto ./config).")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING...")
@click.pass_context
def main(ctx, config_dir, log_level):
    """synthstore: tablas sintéticas expuestas como un archivo CSV de solo lectura."""
    try:
        config = Settings(config_dir).load()
    except (OSError, ValueError) as e:
        console.print(f"[bold red]Error de configuración:[/bold red] {escape(str(e))}")
        sys.exit(1)
    try:
        configure_logging(log_level or config["logging"]["level"])
    except ValueError as e:
        _fail(e)
    ctx.obj = config


@main.command("generators")
def generators_cmd():
    """Lista los generadores registrados."""
    table = Table(title="Generadores Disponibles")
    table.add_column("Nombre", style="cyan")
    table.add_column("Versión", style="green")
    table.add_column("Tablas")
    table.add_column("Descripción", style="dim")

    for meta in GeneratorRegistry.list_generators():
        tables = ", ".join(t.name for t in meta.new().tables())
        table.add_row(meta.name, meta.version, tables, meta.description)

    click.echo(_render(table))


@main.command()
@click.argument("uri")
def describe(uri):
    """Valida un URI workload y muestra la solicitud resultante."""
    try:
        resolved = bind(parse_uri(uri))
    except SynthStoreError as e:
        _fail(e)

    req = resolved.request
    end = resolve_end(resolved.table, req.row_start, req.row_end)
    body = (
        f"Generador: [bold]{req.generator_name}[/bold] @ {escape(req.generator_version)}\n"
        f"Tabla: {req.table_name} ({', '.join(resolved.table.columns)})\n"
        f"Filas: [{req.row_start}, {'∞' if end is None else end})\n"
        f"Flags: {escape(' '.join(req.flags)) or '-'}\n"
        f"URI: {escape(req.to_uri())}"
    )
    click.echo(_render(Panel(body, title="Solicitud")))


@main.command()
@click.argument("uri")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=pathlib.Path),
              default=None, help="Archivo destino (por defecto stdout).")
@click.option("--batch-size", type=click.IntRange(min=1), default=None,
              help="Filas materializadas por lote.")
@click.pass_obj
def read(config, uri, output, batch_size):
    """Transmite las filas del URI como CSV."""
    batch_size = batch_size or config["stream"]["batch_size"]
    try:
        storage = WorkloadStorage.from_uri(uri, batch_size=batch_size)
    except SynthStoreError as e:
        _fail(e)

    with storage:
        if output is None:
            with storage.read_file() as reader:
                try:
                    shutil.copyfileobj(reader, click.get_binary_stream("stdout"))
                except BrokenPipeError:
                    # El consumidor cerró la tubería (ej. `| head`)
                    _silence_stdout()
                    logger.debug("stdout cerrado por el consumidor")
            return

        req = storage.conf()
        end = resolve_end(storage.resolved.table, req.row_start, req.row_end)
        out_cfg = config["output"]
        if end is None:
            _fail(ValueError("la tabla no tiene límite de filas; indique row-end para escribir a archivo"))
        output.parent.mkdir(parents=True, exist_ok=True)
        if out_cfg["validate_disk_space"]:
            estimated = DiskGuard.estimate_size(end - req.row_start, out_cfg["avg_row_bytes"])
            if not DiskGuard.check_space(estimated, out_cfg["min_free_gb"], str(output.parent)):
                _fail(OSError(f"Espacio en disco insuficiente para escribir {output}"))

        with storage.read_file() as reader, open(output, "wb") as f:
            shutil.copyfileobj(reader, f)
        logger.info("escritas filas [%d, %d) en %s", req.row_start, end, output)
        console.print(f"[green]✔[/green] {output}")


def _silence_stdout() -> None:
    """
    Points the stdout descriptor at devnull so the interpreter's final
    flush does not raise a second BrokenPipeError.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, io.UnsupportedOperation):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _render(renderable) -> str:
    with console.capture() as capture:
        console.print(renderable)
    return capture.get()


if __name__ == "__main__":
    main()
