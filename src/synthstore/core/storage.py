from abc import ABC, abstractmethod
from typing import BinaryIO, List, Tuple


class BaseStorage(ABC):
    """
    Contrato de almacenamiento externo compartido por todos los proveedores.
    Cada archivo se direcciona por su basename relativo a la raíz configurada.
    """

    @abstractmethod
    def conf(self):
        """Configuration the storage was opened with."""
        pass

    @abstractmethod
    def read_file(self, basename: str) -> BinaryIO:
        pass

    @abstractmethod
    def read_file_at(self, basename: str, offset: int) -> Tuple[BinaryIO, int]:
        """
        Returns a stream starting at byte `offset` and the total file size.
        """
        pass

    @abstractmethod
    def write_file(self, basename: str, content: BinaryIO) -> None:
        pass

    @abstractmethod
    def list_files(self, pattern: str) -> List[str]:
        pass

    @abstractmethod
    def delete(self, basename: str) -> None:
        pass

    @abstractmethod
    def size(self, basename: str) -> int:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
