import logging
from dataclasses import dataclass

import click

from synthstore.core.config import GenerationRequest
from synthstore.core.errors import InvalidFlags, UnknownTable, VersionMismatch
from synthstore.core.generator import BaseGenerator, Capability
from synthstore.core.registry import GeneratorMeta, GeneratorRegistry
from synthstore.core.table import Table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedGenerator:
    """
    A configured generator bound to one request and one of its tables.
    Never mutated after bind(), so concurrent readers may share it.
    """
    request: GenerationRequest
    meta: GeneratorMeta
    generator: BaseGenerator
    table: Table


def bind(request: GenerationRequest, registry=GeneratorRegistry) -> ResolvedGenerator:
    """
    Resolves request.generator_name and selects request.table_name.

    Raises:
        UnknownGenerator, VersionMismatch, InvalidFlags, UnknownTable
    """
    meta = registry.get(request.generator_name)

    # Different versions of a generator may produce different rows.
    if meta.version != request.generator_version:
        raise VersionMismatch(meta.name, request.generator_version, meta.version)

    gen = meta.new()
    if Capability.FLAG_CONFIGURABLE in gen.capabilities():
        try:
            gen.flags().parse(request.flags)
        except click.ClickException as e:
            raise InvalidFlags(request.flags, e) from e
    elif request.flags:
        logger.warning("generator %s takes no flags, ignoring %s",
                       meta.name, " ".join(request.flags))

    for table in gen.tables():
        if table.name == request.table_name:
            break
    else:
        raise UnknownTable(request.table_name, meta.name)

    logger.debug("bound %s@%s table %s rows=%s",
                 meta.name, meta.version, table.name, table.row_count)
    return ResolvedGenerator(request=request, meta=meta, generator=gen, table=table)
