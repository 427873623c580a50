import dataclasses
import logging

import pytest

from synthstore.core.binding import bind
from synthstore.core.config import parse_uri
from synthstore.core.errors import (
    BindingError,
    InvalidFlags,
    UnknownGenerator,
    UnknownTable,
    VersionMismatch,
)
from synthstore.core.generator import Capability
from synthstore.core.registry import GeneratorRegistry


def test_bind_bank_accounts():
    resolved = bind(parse_uri("/csv/bank/accounts?version=1.0.0"))
    assert resolved.meta.name == "bank"
    assert resolved.table.name == "accounts"
    assert resolved.table.columns == ("id", "balance", "payload")
    assert resolved.table.row_count == 1000


def test_unknown_generator():
    with pytest.raises(UnknownGenerator) as exc:
        bind(parse_uri("/csv/nope/accounts?version=1.0.0"))
    assert "nope" in str(exc.value)
    assert "bank" in str(exc.value)


@pytest.mark.parametrize("version", ["1.0", "1.0.0%20", "v1.0.0", "1.0.1", ""])
def test_version_mismatch(version):
    with pytest.raises(VersionMismatch) as exc:
        bind(parse_uri(f"/csv/bank/accounts?version={version}"))
    assert exc.value.actual == "1.0.0"
    assert exc.value.expected == parse_uri(f"/csv/bank/accounts?version={version}").generator_version
    assert '"1.0.0"' in str(exc.value)


def test_version_checked_before_flags():
    # Bad flags must not mask the version gate
    with pytest.raises(VersionMismatch):
        bind(parse_uri("/csv/bank/accounts?version=2.0.0&bogus=1"))


def test_flags_configure_generator():
    resolved = bind(parse_uri("/csv/bank/accounts?version=1.0.0&rows=25&payload-bytes=5"))
    assert resolved.table.row_count == 25
    assert resolved.generator.flags()["payload_bytes"] == 5


@pytest.mark.parametrize("query", ["bogus=1", "rows=abc", "rows=-3", "payload-bytes=1.5"])
def test_invalid_flags(query):
    with pytest.raises(InvalidFlags) as exc:
        bind(parse_uri(f"/csv/bank/accounts?version=1.0.0&{query}"))
    assert exc.value.flags == (f"--{query}",)
    assert exc.value.cause is not None
    assert "parsing parameters" in str(exc.value)


def test_unknown_table():
    with pytest.raises(UnknownTable) as exc:
        bind(parse_uri("/csv/bank/orders?version=1.0.0"))
    assert str(exc.value) == "unknown table orders for generator bank"


def test_table_lookup_is_exact():
    with pytest.raises(UnknownTable):
        bind(parse_uri("/csv/bank/Accounts?version=1.0.0"))


def test_sales_tables():
    for table in ("stores", "customers", "products"):
        resolved = bind(parse_uri(f"/csv/sales/{table}?version=1.0.0&stores=7"))
        assert resolved.table.name == table
    assert bind(parse_uri("/csv/sales/stores?version=1.0.0&stores=7")).table.row_count == 7


def test_generator_without_flags(counter_generator, caplog):
    gen = counter_generator.new()
    assert gen.capabilities() == frozenset({Capability.CONSTRUCTIBLE})
    with caplog.at_level(logging.WARNING):
        resolved = bind(parse_uri("/csv/counter/squares?version=v2-beta&ignored=1"))
    assert resolved.table.row_count is None
    assert "takes no flags" in caplog.text


def test_bank_is_flag_configurable():
    gen = GeneratorRegistry.get("bank").new()
    assert Capability.FLAG_CONFIGURABLE in gen.capabilities()


def test_resolved_generator_is_frozen():
    resolved = bind(parse_uri("/csv/bank/accounts?version=1.0.0"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        resolved.table = None


def test_binding_errors_share_base():
    for cls in (UnknownGenerator, VersionMismatch, InvalidFlags, UnknownTable):
        assert issubclass(cls, BindingError)


def test_seed_beyond_64_bits_rejected():
    with pytest.raises(InvalidFlags):
        bind(parse_uri("/csv/bank/accounts?version=1.0.0&seed=18446744073709551616"))
    with pytest.raises(InvalidFlags):
        bind(parse_uri("/csv/sales/stores?version=1.0.0&seed=18446744073709551616"))


def test_largest_seed_binds():
    resolved = bind(parse_uri("/csv/sales/stores?version=1.0.0&seed=18446744073709551615"))
    assert resolved.table.rows(0, 3).height == 3
