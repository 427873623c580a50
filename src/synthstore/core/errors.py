from typing import Sequence


class SynthStoreError(Exception):
    """
    Base error for workload storage.
    Every failure is a deterministic function of the request, never transient.
    """
    transient = False


# --- Configuration -----------------------------------------------------------

class ConfigError(SynthStoreError, ValueError):
    """Raised while parsing a URI, before any generator is touched."""


class MalformedPath(ConfigError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"path must be of the form /<format>/<generator>/<table>: {path}")


class MissingVersion(ConfigError):
    def __init__(self):
        super().__init__("parameter version is required")


class BadRowBound(ConfigError):
    def __init__(self, param: str, value: str, reason: str = "not a base-10 64-bit integer"):
        self.param = param
        self.value = value
        super().__init__(f"invalid {param} {value!r}: {reason}")


class UnsupportedFormat(ConfigError):
    def __init__(self, fmt: str):
        self.format = fmt
        super().__init__(f"unsupported format: {fmt}")


# --- Binding -----------------------------------------------------------------

class BindingError(SynthStoreError):
    """Raised while resolving a generator, before any row is produced."""


class UnknownGenerator(BindingError):
    def __init__(self, name: str, known: Sequence[str] = ()):
        self.name = name
        msg = f"unknown generator: {name}"
        if known:
            msg += f" (available: {', '.join(sorted(known))})"
        super().__init__(msg)


class VersionMismatch(BindingError):
    def __init__(self, generator: str, expected: str, actual: str):
        self.generator = generator
        self.expected = expected
        self.actual = actual
        super().__init__(
            f'expected {generator} version "{expected}" but got "{actual}"')


class InvalidFlags(BindingError):
    def __init__(self, flags: Sequence[str], cause: Exception):
        self.flags = tuple(flags)
        self.cause = cause
        super().__init__(f"parsing parameters {' '.join(self.flags)}: {cause}")


class UnknownTable(BindingError):
    def __init__(self, table: str, generator: str):
        self.table = table
        self.generator = generator
        super().__init__(f"unknown table {table} for generator {generator}")


# --- Operations --------------------------------------------------------------

class OperationError(SynthStoreError):
    """Raised per storage call; the storage itself is left untouched."""


class ByteRangeNotImplemented(OperationError, NotImplementedError):
    def __init__(self, offset: int):
        self.offset = offset
        super().__init__(
            f"reading at byte offset {offset} is not implemented by workload storage")


_OPERATION_PHRASES = {
    "write": "writes",
    "list": "listing files",
    "delete": "deletes",
    "size": "sizing",
}


class OperationNotSupported(OperationError):
    def __init__(self, operation: str):
        self.operation = operation
        phrase = _OPERATION_PHRASES.get(operation, operation)
        super().__init__(f"workload storage does not support {phrase}")


class UnexpectedBasename(OperationError):
    def __init__(self, basename: str):
        self.basename = basename
        super().__init__(
            f"basenames are not supported by workload storage: {basename}")
