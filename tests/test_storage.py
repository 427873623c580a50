import csv
import io
import logging

import pytest

from synthstore.core.errors import (
    ByteRangeNotImplemented,
    MissingVersion,
    OperationNotSupported,
    UnexpectedBasename,
    VersionMismatch,
)
from synthstore.storages.definitions import StorageFactory, WorkloadStorage

EXAMPLE = "workload:///csv/bank/accounts?version=1.0.0&row-start=0&row-end=10"


@pytest.fixture
def storage():
    with WorkloadStorage.from_uri(EXAMPLE) as s:
        yield s


def test_read_example(storage):
    with storage.read_file() as reader:
        rows = list(csv.reader(io.StringIO(reader.read().decode())))
    assert [int(r[0]) for r in rows] == list(range(10))


def test_each_read_starts_fresh(storage):
    first = storage.read_file()
    head = first.read(15)
    full = storage.read_file().read()
    assert full.startswith(head)
    assert first.read() == full[15:]


@pytest.mark.parametrize("basename", ["x", "accounts.csv", "/", "a/b"])
def test_basename_rejected(storage, basename):
    with pytest.raises(UnexpectedBasename):
        storage.read_file(basename)


def test_byte_offset_reads_not_implemented(storage):
    with pytest.raises(ByteRangeNotImplemented):
        storage.read_file_at("", 100)
    with pytest.raises(NotImplementedError):
        storage.read_file_at("", 0)


@pytest.mark.parametrize("call,operation", [
    (lambda s: s.write_file("f.csv", io.BytesIO(b"x")), "write"),
    (lambda s: s.list_files("*"), "list"),
    (lambda s: s.delete("f.csv"), "delete"),
    (lambda s: s.size(""), "size"),
])
def test_mutating_operations_unsupported(storage, call, operation):
    before = storage.read_file().read()
    with pytest.raises(OperationNotSupported) as exc:
        call(storage)
    assert exc.value.operation == operation
    assert "workload storage does not support" in str(exc.value)
    assert storage.read_file().read() == before


def test_conf_round_trips(storage):
    conf = storage.conf()
    assert conf.row_end == 10
    again = WorkloadStorage.from_uri(conf.to_uri())
    assert again.read_file().read() == storage.read_file().read()


def test_errors_surface_from_uri():
    with pytest.raises(MissingVersion):
        WorkloadStorage.from_uri("workload:///csv/bank/accounts")
    with pytest.raises(VersionMismatch):
        WorkloadStorage.from_uri("workload:///csv/bank/accounts?version=0.9")


def test_open_logs_usage(caplog):
    with caplog.at_level(logging.INFO, logger="synthstore.storages.definitions"):
        WorkloadStorage.from_uri(EXAMPLE)
    assert "external-io.workload" in caplog.text


def test_factory_dispatches_on_scheme():
    s = StorageFactory.get_storage(EXAMPLE, batch_size=3)
    assert isinstance(s, WorkloadStorage)
    assert s.read_file().read().count(b"\n") == 10
    with pytest.raises(ValueError):
        StorageFactory.get_storage("s3://bucket/csv/bank/accounts?version=1.0.0")
