"""Tests for SalesLedger mutations and their persistence contract."""

from datetime import date
from decimal import Decimal

import pytest

from pos_ledger import (
    LedgerStateError,
    PersistenceCorruptionError,
    PersistenceWriteError,
    SaleInput,
    SalesLedger,
    ValidationError,
)
from pos_ledger.sales.models import ChartPoint
from pos_ledger.storage import InMemoryStore

TODAY = date(2025, 1, 15)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def ledger(store: InMemoryStore) -> SalesLedger:
    """Loaded ledger with a frozen date and a clock that never advances."""
    ledger = SalesLedger(store, today=lambda: TODAY, clock_ms=lambda: 1_000)
    ledger.load()
    return ledger


def test_record_sale_builds_and_appends(ledger: SalesLedger, store: InMemoryStore) -> None:
    """record_sale stamps date, computes total, appends and saves once."""
    sale = ledger.record_sale(SaleInput("Widget", "Tools", "9.99", 3))

    assert sale.date == TODAY
    assert sale.price == Decimal("9.99")
    assert sale.quantity == 3
    assert sale.total == sale.price * sale.quantity == Decimal("29.97")
    assert ledger.sales == (sale,)
    assert store.save_count == 1


def test_record_sale_strips_text_and_coerces_numbers(ledger: SalesLedger) -> None:
    """Text is trimmed, float prices keep their decimal value."""
    sale = ledger.record_sale(SaleInput("  Widget ", " Tools", 9.99, "2"))

    assert sale.product_name == "Widget"
    assert sale.category == "Tools"
    assert sale.price == Decimal("9.99")
    assert sale.quantity == 2


def test_ids_are_unique_and_increasing_with_stalled_clock(ledger: SalesLedger) -> None:
    """Several sales within one clock tick still get distinct, ordered ids."""
    ids = [ledger.record_sale(SaleInput("Pen", "Office", "1.00", 1)).id for _ in range(3)]

    assert ids == [1_000, 1_001, 1_002]


def test_ids_continue_after_reload(store: InMemoryStore) -> None:
    """After reloading, new ids stay above every stored id."""
    first = SalesLedger(store, today=lambda: TODAY, clock_ms=lambda: 5_000)
    first.load()
    first.record_sale(SaleInput("Pen", "Office", "1.00", 1))

    second = SalesLedger(store, today=lambda: TODAY, clock_ms=lambda: 10)
    second.load()
    sale = second.record_sale(SaleInput("Pen", "Office", "1.00", 1))

    assert sale.id == 5_001


@pytest.mark.parametrize(
    "sale_input",
    [
        SaleInput("", "Tools", "1.00", 1),
        SaleInput("   ", "Tools", "1.00", 1),
        SaleInput("Widget", "", "1.00", 1),
        SaleInput("Widget", "Tools", "0", 1),
        SaleInput("Widget", "Tools", "-1.50", 1),
        SaleInput("Widget", "Tools", "abc", 1),
        SaleInput("Widget", "Tools", "NaN", 1),
        SaleInput("Widget", "Tools", True, 1),
        SaleInput("Widget", "Tools", "1.00", 0),
        SaleInput("Widget", "Tools", "1.00", -2),
        SaleInput("Widget", "Tools", "1.00", 1.5),
        SaleInput("Widget", "Tools", "1.00", True),
    ],
)
def test_invalid_input_is_rejected_without_side_effects(
    ledger: SalesLedger, store: InMemoryStore, sale_input: SaleInput
) -> None:
    """Invalid input raises ValidationError before any mutation or save."""
    with pytest.raises(ValidationError):
        ledger.record_sale(sale_input)

    assert ledger.sales == ()
    assert store.save_count == 0
    assert store.text is None


def test_validation_error_is_a_value_error(ledger: SalesLedger) -> None:
    with pytest.raises(ValueError):
        ledger.record_sale(SaleInput("Widget", "Tools", "-1", 1))


def test_delete_sale_removes_only_matching_record(
    ledger: SalesLedger, store: InMemoryStore
) -> None:
    """delete_sale removes exactly one record and keeps the others in order."""
    a = ledger.record_sale(SaleInput("A", "X", "1.00", 1))
    b = ledger.record_sale(SaleInput("B", "X", "1.00", 1))
    c = ledger.record_sale(SaleInput("C", "X", "1.00", 1))

    ledger.delete_sale(b.id)

    assert ledger.sales == (a, c)
    assert store.load() == [a, c]


def test_delete_unknown_id_is_noop_but_saves(ledger: SalesLedger, store: InMemoryStore) -> None:
    """Deleting a missing id changes nothing; the collection is still saved."""
    a = ledger.record_sale(SaleInput("A", "X", "1.00", 1))
    saves_before = store.save_count

    ledger.delete_sale(999_999)

    assert ledger.sales == (a,)
    assert store.save_count == saves_before + 1


def test_clear_all_empties_and_saves(ledger: SalesLedger, store: InMemoryStore) -> None:
    """clear_all leaves zero sales, empty chart series and an empty snapshot."""
    ledger.record_sale(SaleInput("A", "X", "1.00", 1))
    ledger.record_sale(SaleInput("B", "Y", "2.00", 2))

    ledger.clear_all()

    assert ledger.sales == ()
    assert ledger.kpis().total_sales == 0
    assert ledger.chart_series() == []
    assert store.load() == []


def test_widget_scenario_through_ledger(ledger: SalesLedger) -> None:
    """End-to-end scenario from an empty ledger."""
    ledger.record_sale(SaleInput("Widget", "Tools", Decimal("9.99"), 3))
    ledger.record_sale(SaleInput("Widget", "Tools", Decimal("9.99"), 2))

    kpis = ledger.kpis()

    assert kpis.total_sales == 2
    assert kpis.total_revenue == Decimal("49.95")
    assert kpis.avg_order_value == Decimal("24.975")
    assert kpis.top_product == "Widget"
    assert kpis.top_category == "Tools"
    assert ledger.chart_series() == [ChartPoint(name="Widget", sales=5)]


def test_state_persists_across_ledgers(ledger: SalesLedger, store: InMemoryStore) -> None:
    """A new ledger over the same store sees the same collection."""
    ledger.record_sale(SaleInput("A", "X", "1.25", 2))
    ledger.record_sale(SaleInput("B", "Y", "3.10", 1))

    reopened = SalesLedger(store)

    assert reopened.load() == ledger.sales


def test_use_before_load_raises(store: InMemoryStore) -> None:
    """Ledger operations require load() first."""
    ledger = SalesLedger(store)

    assert ledger.loaded is False
    with pytest.raises(LedgerStateError):
        ledger.sales
    with pytest.raises(LedgerStateError):
        ledger.record_sale(SaleInput("A", "X", "1.00", 1))
    with pytest.raises(LedgerStateError):
        ledger.clear_all()


def test_corrupt_snapshot_falls_back_to_empty() -> None:
    """By default a corrupt snapshot is logged and replaced by an empty collection."""
    ledger = SalesLedger(InMemoryStore("{not json"))

    assert ledger.load() == ()
    assert ledger.loaded is True


def test_corrupt_snapshot_raises_when_strict() -> None:
    ledger = SalesLedger(InMemoryStore('{"id": 1}'))

    with pytest.raises(PersistenceCorruptionError):
        ledger.load(strict=True)
    assert ledger.loaded is False


def test_write_failure_keeps_in_memory_mutation(
    ledger: SalesLedger, store: InMemoryStore
) -> None:
    """A failed save surfaces PersistenceWriteError without rolling back."""
    store.fail_writes = True

    with pytest.raises(PersistenceWriteError):
        ledger.record_sale(SaleInput("Widget", "Tools", "1.00", 1))

    assert len(ledger.sales) == 1
    assert store.text is None

    store.fail_writes = False
    ledger.clear_all()
    assert store.load() == []


def test_reload_keeps_high_precision_revenue(ledger: SalesLedger, store: InMemoryStore) -> None:
    """Revenue computed after a reload matches the revenue before it."""
    ledger.record_sale(SaleInput("A", "X", "1234567890123456.01", 1))
    before = ledger.kpis().total_revenue

    reopened = SalesLedger(store)
    reopened.load()

    assert before == Decimal("1234567890123456.01")
    assert reopened.kpis().total_revenue == before
