"""Unit tests for the temporal index builder"""

import pytest
from decimal import Decimal

from src.ledger import build_version_index, OriginKind
from src.models.events import Sale, SaleItem, Amendment, parse_timestamp as ts


def _sale(invoice_id, date, *items):
    return Sale(
        invoice_id=invoice_id,
        date=ts(date),
        items=[SaleItem(item_id=i, cost=Decimal("100"), tax_rate=Decimal("0.1")) for i in items],
    )


def _amendment(invoice_id, item_id, date, cost="50"):
    return Amendment(
        invoice_id=invoice_id,
        item_id=item_id,
        date=ts(date),
        cost=Decimal(cost),
        tax_rate=Decimal("0.1"),
    )


@pytest.mark.unit
class TestBuildVersionIndex:
    """Test build_version_index"""

    def test_empty_inputs(self):
        assert build_version_index([], []) == {}

    def test_groups_by_invoice_and_item(self, sample_sale, sample_amendment):
        index = build_version_index([sample_sale], [sample_amendment])

        assert set(index) == {("inv-1", "item-1"), ("inv-1", "item-2")}
        assert len(index[("inv-1", "item-1")]) == 1
        assert [v.origin for v in index[("inv-1", "item-2")]] == [OriginKind.SALE, OriginKind.AMENDMENT]

    def test_sales_numbered_before_amendments(self):
        """Amendments continue the counter after every sale item"""
        sales = [
            _sale("inv-1", "2024-01-01T00:00:00Z", "a", "b"),
            _sale("inv-2", "2024-01-02T00:00:00Z", "c"),
        ]
        amendments = [
            _amendment("inv-1", "a", "2023-12-01T00:00:00Z"),
            _amendment("inv-2", "c", "2023-12-02T00:00:00Z"),
        ]

        index = build_version_index(sales, amendments)

        assert [v.sequence for v in index[("inv-1", "a")]] == [0, 3]
        assert [v.sequence for v in index[("inv-1", "b")]] == [1]
        assert [v.sequence for v in index[("inv-2", "c")]] == [2, 4]

    def test_keeps_future_versions(self):
        """No date filtering happens while building"""
        index = build_version_index(
            [_sale("inv-1", "2030-01-01T00:00:00Z", "a")],
            [_amendment("inv-1", "a", "2031-01-01T00:00:00Z")],
        )

        assert len(index[("inv-1", "a")]) == 2

    def test_amendment_without_sale_creates_identity(self):
        index = build_version_index([], [_amendment("ghost", "x", "2024-01-01T00:00:00Z")])

        versions = index[("ghost", "x")]
        assert len(versions) == 1
        assert versions[0].origin == OriginKind.AMENDMENT
        assert versions[0].cost == Decimal("50")

    def test_identity_keys_do_not_collide_on_delimiter(self):
        """("a_b", "c") and ("a", "b_c") are distinct identities"""
        index = build_version_index(
            [_sale("a_b", "2024-01-01T00:00:00Z", "c"), _sale("a", "2024-01-01T00:00:00Z", "b_c")],
            [],
        )

        assert len(index) == 2
        assert ("a_b", "c") in index
        assert ("a", "b_c") in index

    def test_version_carries_sale_date_and_values(self, sample_sale):
        index = build_version_index([sample_sale], [])

        version = index[("inv-1", "item-2")][0]
        assert version.effective_date == ts("2024-02-22T10:00:00Z")
        assert version.cost == Decimal("2000")
        assert version.tax_rate == Decimal("0.2")
        assert version.identity == ("inv-1", "item-2")
