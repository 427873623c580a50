import logging
from typing import BinaryIO, List, Optional, Tuple
from urllib.parse import urlsplit

from synthstore.core.binding import ResolvedGenerator, bind
from synthstore.core.config import SCHEME, GenerationRequest, parse_uri
from synthstore.core.errors import (
    ByteRangeNotImplemented,
    OperationNotSupported,
    UnexpectedBasename,
)
from synthstore.core.registry import GeneratorRegistry
from synthstore.core.storage import BaseStorage
from synthstore.core.stream import CSVRowsReader

logger = logging.getLogger(__name__)


class WorkloadStorage(BaseStorage):
    """
    Read-only storage exposing one generator table as a single CSV file.
    """

    def __init__(self, resolved: ResolvedGenerator, batch_size: Optional[int] = None):
        self.resolved = resolved
        self.batch_size = batch_size
        logger.info("external-io.workload: %s@%s/%s",
                    resolved.meta.name, resolved.meta.version, resolved.table.name)

    @classmethod
    def from_request(cls, request: GenerationRequest, registry=GeneratorRegistry,
                     batch_size: Optional[int] = None) -> "WorkloadStorage":
        return cls(bind(request, registry), batch_size=batch_size)

    @classmethod
    def from_uri(cls, uri: str, registry=GeneratorRegistry,
                 batch_size: Optional[int] = None) -> "WorkloadStorage":
        return cls.from_request(parse_uri(uri), registry, batch_size=batch_size)

    def conf(self) -> GenerationRequest:
        return self.resolved.request

    def read_file(self, basename: str = "") -> CSVRowsReader:
        if basename:
            raise UnexpectedBasename(basename)
        req = self.resolved.request
        return CSVRowsReader(self.resolved.table, req.row_start, req.row_end,
                             batch_size=self.batch_size)

    def read_file_at(self, basename: str, offset: int) -> Tuple[BinaryIO, int]:
        raise ByteRangeNotImplemented(offset)

    def write_file(self, basename: str, content: BinaryIO) -> None:
        raise OperationNotSupported("write")

    def list_files(self, pattern: str = "") -> List[str]:
        raise OperationNotSupported("list")

    def delete(self, basename: str) -> None:
        raise OperationNotSupported("delete")

    def size(self, basename: str) -> int:
        raise OperationNotSupported("size")


class StorageFactory:
    @staticmethod
    def get_storage(uri: str, batch_size: Optional[int] = None) -> BaseStorage:
        scheme = urlsplit(uri).scheme
        if scheme == SCHEME:
            return WorkloadStorage.from_uri(uri, batch_size=batch_size)
        else:
            raise ValueError(f"Proveedor de almacenamiento desconocido: {scheme or '(none)'}")
