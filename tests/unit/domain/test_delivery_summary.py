from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from src.domain.models.delivery_entry import DeliveryEntry, DeliveryItem
from src.domain.models.delivery_type import DeliveryType
from src.domain.models.user import User
from src.domain.services.delivery_summary import summarize_deliveries
from src.domain.value_objects.billing_period import BillingPeriod
from src.domain.value_objects.role import Role

LOCAL = DeliveryType(id=uuid4(), name="Local", unit_value=Decimal("3.70"))
STANDARD = DeliveryType(id=uuid4(), name="Standard", unit_value=Decimal("5.00"))
DISTANT = DeliveryType(id=uuid4(), name="Distant", unit_value=Decimal("7.40"))
EXTRA = DeliveryType(id=uuid4(), name="Extra", unit_value=Decimal("0"), is_extra=True)
TYPES = [LOCAL, STANDARD, DISTANT, EXTRA]

ARIMATEIA = User(id=uuid4(), name="Arimateia", role=Role.DELIVERER)
EWERTON = User(id=uuid4(), name="Ewerton", role=Role.DELIVERER)

FEBRUARY = BillingPeriod.resolve(2, 2024)


def entry(day: date, deliverer: User, *items: DeliveryItem) -> DeliveryEntry:
    return DeliveryEntry(id=uuid4(), date=day, deliverer_id=deliverer.id, items=list(items))


def item(delivery_type: DeliveryType, quantity: int, value: str | None = None) -> DeliveryItem:
    return DeliveryItem(
        type_id=delivery_type.id,
        quantity=quantity,
        value=Decimal(value) if value is not None else delivery_type.unit_value,
    )


def test_arimateia_first_day_of_february_period():
    entries = [entry(date(2024, 1, 26), ARIMATEIA, item(LOCAL, 5), item(EXTRA, 1, "10.00"))]

    summaries = summarize_deliveries(entries, TYPES, [ARIMATEIA], FEBRUARY)

    assert len(summaries) == 1
    summary = summaries[0]
    assert summary.deliverer_name == "Arimateia"
    assert summary.total_deliveries == 6
    assert summary.tally_for(LOCAL.id).quantity == 5
    assert summary.total_extras == 1
    assert summary.extra_values == Decimal("10.00")


def test_every_deliverer_appears_once_in_input_order():
    entries = [entry(date(2024, 2, 1), ARIMATEIA, item(LOCAL, 1))]

    summaries = summarize_deliveries(entries, TYPES, [EWERTON, ARIMATEIA], FEBRUARY)

    assert [s.deliverer_id for s in summaries] == [EWERTON.id, ARIMATEIA.id]
    assert summaries[0].total_deliveries == 0


def test_duplicate_deliverer_is_reported_once():
    summaries = summarize_deliveries([], TYPES, [ARIMATEIA, EWERTON, ARIMATEIA], FEBRUARY)
    assert [s.deliverer_id for s in summaries] == [ARIMATEIA.id, EWERTON.id]


def test_every_type_is_zero_filled():
    entries = [entry(date(2024, 2, 10), ARIMATEIA, item(STANDARD, 2))]

    summaries = summarize_deliveries(entries, TYPES, [ARIMATEIA, EWERTON], FEBRUARY)

    for summary in summaries:
        assert [t.type_id for t in summary.deliveries_by_type] == [t.id for t in TYPES]
    arimateia, ewerton = summaries
    assert {t.type_name: t.quantity for t in arimateia.deliveries_by_type} == {
        "Local": 0,
        "Standard": 2,
        "Distant": 0,
        "Extra": 0,
    }
    assert all(t.quantity == 0 for t in ewerton.deliveries_by_type)
    assert arimateia.tally_for(DISTANT.id).value == Decimal("7.40")


def test_extras_use_each_item_value_and_count_toward_grand_total():
    entries = [
        entry(
            date(2024, 2, 3),
            ARIMATEIA,
            item(EXTRA, 2, "12.50"),
            item(EXTRA, 1, "4.00"),
            item(DISTANT, 3),
        ),
        entry(date(2024, 2, 3), ARIMATEIA, item(LOCAL, 4)),
    ]

    (summary,) = summarize_deliveries(entries, TYPES, [ARIMATEIA], FEBRUARY)

    assert summary.total_extras == 3
    assert summary.extra_values == Decimal("29.00")
    assert summary.total_deliveries == 10
    assert summary.tally_for(EXTRA.id).quantity == 3


def test_period_boundaries_are_inclusive():
    entries = [
        entry(date(2024, 1, 25), ARIMATEIA, item(LOCAL, 100)),
        entry(date(2024, 1, 26), ARIMATEIA, item(LOCAL, 1)),
        entry(date(2024, 2, 25), ARIMATEIA, item(LOCAL, 2)),
        entry(date(2024, 2, 26), ARIMATEIA, item(LOCAL, 200)),
    ]

    (summary,) = summarize_deliveries(entries, TYPES, [ARIMATEIA], FEBRUARY)

    assert summary.total_deliveries == 3


def test_unknown_type_is_skipped_without_touching_totals():
    ghost = DeliveryItem(type_id=uuid4(), quantity=7, value=Decimal("1.00"))
    entries = [entry(date(2024, 2, 5), ARIMATEIA, item(LOCAL, 2), ghost)]

    (summary,) = summarize_deliveries(entries, TYPES, [ARIMATEIA], FEBRUARY)

    assert summary.total_deliveries == 2
    assert summary.total_extras == 0
    assert len(summary.deliveries_by_type) == len(TYPES)


def test_unknown_deliverer_contributes_to_no_summary():
    stranger = User(id=uuid4(), name="Stranger", role=Role.DELIVERER)
    entries = [
        entry(date(2024, 2, 5), stranger, item(LOCAL, 9), item(EXTRA, 1, "50.00")),
        entry(date(2024, 2, 6), ARIMATEIA, item(LOCAL, 1)),
    ]

    summaries = summarize_deliveries(entries, TYPES, [ARIMATEIA, EWERTON], FEBRUARY)

    assert [s.total_deliveries for s in summaries] == [1, 0]
    assert all(s.extra_values == 0 for s in summaries)


def test_same_inputs_give_equal_output():
    entries = [
        entry(date(2024, 2, 1), ARIMATEIA, item(LOCAL, 5), item(EXTRA, 1, "10.00")),
        entry(date(2024, 2, 2), EWERTON, item(DISTANT, 4)),
    ]

    first = summarize_deliveries(entries, TYPES, [ARIMATEIA, EWERTON], FEBRUARY)
    second = summarize_deliveries(entries, TYPES, [ARIMATEIA, EWERTON], FEBRUARY)

    assert first == second
    assert first is not second


def test_inputs_are_not_mutated():
    entries = [entry(date(2024, 2, 1), ARIMATEIA, item(LOCAL, 5))]
    before = [(e.id, e.date, list(e.items)) for e in entries]

    summarize_deliveries(entries, TYPES, [ARIMATEIA], FEBRUARY)

    assert [(e.id, e.date, list(e.items)) for e in entries] == before


@pytest.mark.parametrize("deliverers", [[], [EWERTON]])
def test_no_entries_still_yields_one_summary_per_deliverer(deliverers):
    summaries = summarize_deliveries([], TYPES, deliverers, FEBRUARY)
    assert len(summaries) == len(deliverers)
    assert all(s.total_deliveries == 0 and s.extra_values == 0 for s in summaries)
