"""Unit tests for position aggregation"""

import pytest
from decimal import Decimal

from src.ledger import LineItemVersion, OriginKind, total_tax, total_payments, net_position
from src.models.events import TaxPayment, parse_timestamp as ts


def _version(cost, rate, n=0):
    return LineItemVersion(
        identity=("inv", f"item-{n}"),
        effective_date=ts("2024-01-01T00:00:00Z"),
        cost=None if cost is None else Decimal(cost),
        tax_rate=None if rate is None else Decimal(rate),
        origin=OriginKind.SALE,
        sequence=n,
    )


@pytest.mark.unit
class TestTotalTax:
    """Test total_tax"""

    def test_sums_cost_times_rate(self):
        assert total_tax([_version("1000", "0.2", 0), _version("2000", "0.2", 1)]) == Decimal("600")

    def test_missing_values_count_as_zero(self):
        versions = [_version(None, "0.2", 0), _version("100", None, 1), _version("50", "0.1", 2)]

        assert total_tax(versions) == Decimal("5")

    def test_no_float_drift(self):
        """0.1 * 0.1 summed ten times is exactly 0.1"""
        versions = [_version("0.1", "0.1", n) for n in range(10)]

        assert total_tax(versions) == Decimal("0.1")

    def test_rate_above_one_and_negative_cost(self):
        assert total_tax([_version("-100", "1.5")]) == Decimal("-150")

    def test_empty(self):
        assert total_tax([]) == Decimal("0")


@pytest.mark.unit
class TestTotalPayments:
    """Test total_payments"""

    def test_only_payments_up_to_date(self):
        payments = [
            TaxPayment(date=ts("2024-02-22T09:00:00Z"), amount=Decimal("500")),
            TaxPayment(date=ts("2024-02-24T14:00:00Z"), amount=Decimal("1000")),
        ]

        assert total_payments(payments, ts("2024-02-23T00:00:00Z")) == Decimal("500")
        assert total_payments(payments, ts("2024-02-24T14:00:00Z")) == Decimal("1500")

    def test_missing_amount_counts_as_zero(self):
        payments = [
            TaxPayment(date=ts("2024-02-22T09:00:00Z"), amount=None),
            TaxPayment(date=ts("2024-02-22T09:00:00Z"), amount=Decimal("0.3")),
        ]

        assert total_payments(payments, ts("2024-03-01T00:00:00Z")) == Decimal("0.3")


@pytest.mark.unit
def test_net_position():
    assert net_position(Decimal("600"), Decimal("500")) == Decimal("100")
    assert net_position(Decimal("0"), Decimal("500")) == Decimal("-500")
