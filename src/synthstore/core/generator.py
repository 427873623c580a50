from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, List, Optional

from synthstore.core.flags import FlagSet
from synthstore.core.table import Table


# Seeds are reduced to 64 bits by the index hash
SEED_MAX = (1 << 64) - 1


class Capability(Enum):
    CONSTRUCTIBLE = "constructible"
    FLAG_CONFIGURABLE = "flag_configurable"


class BaseGenerator(ABC):
    """
    Base contract for every generator.
    A generator owns one or more uniquely named tables whose rows depend
    only on the row index and the generator's flags.
    """

    def capabilities(self) -> FrozenSet[Capability]:
        return frozenset({Capability.CONSTRUCTIBLE})

    def flags(self) -> Optional[FlagSet]:
        return None

    @abstractmethod
    def tables(self) -> List[Table]:
        """
        Tables as configured by the current flags.
        """
        pass


class FlagConfigurableGenerator(BaseGenerator):
    """
    Generator whose behaviour is tuned through a FlagSet.
    Subclasses declare `flag_options()`; values are read back from `self.flag_set`.
    """

    def __init__(self):
        self.flag_set = FlagSet(type(self).__name__, self.flag_options())

    def capabilities(self) -> FrozenSet[Capability]:
        return super().capabilities() | {Capability.FLAG_CONFIGURABLE}

    def flags(self) -> FlagSet:
        return self.flag_set

    @abstractmethod
    def flag_options(self):
        pass
