from dataclasses import dataclass
from typing import Callable, Dict, List

from synthstore.core.errors import UnknownGenerator
from synthstore.core.generator import BaseGenerator


@dataclass(frozen=True)
class GeneratorMeta:
    name: str
    version: str
    description: str
    new: Callable[[], BaseGenerator]


class GeneratorRegistry:
    """
    Central registry for available generators.
    """
    _generators: Dict[str, GeneratorMeta] = {}

    @classmethod
    def register(cls, name: str, version: str, description: str = ""):
        """Decorator to register a generator class under a name and version."""
        def decorator(generator_cls):
            cls._generators[name] = GeneratorMeta(
                name=name, version=version, description=description, new=generator_cls)
            return generator_cls
        return decorator

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._generators.pop(name, None)

    @classmethod
    def get(cls, name: str) -> GeneratorMeta:
        _load_builtin_generators()
        meta = cls._generators.get(name)
        if meta is None:
            raise UnknownGenerator(name, list(cls._generators))
        return meta

    @classmethod
    def list_generators(cls) -> List[GeneratorMeta]:
        _load_builtin_generators()
        return [cls._generators[k] for k in sorted(cls._generators)]


def _load_builtin_generators() -> None:
    # Importing the domain modules runs their @register decorators.
    from synthstore.domains.bank import accounts  # noqa: F401
    from synthstore.domains.sales import handler  # noqa: F401
