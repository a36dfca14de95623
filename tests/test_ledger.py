"""
Unit tests for the ledger aggregator
"""
import pytest
from decimal import Decimal
from itertools import permutations
from types import SimpleNamespace

from app.core.exceptions import DivisionUndefinedError
from app.modules.loans.calculator import compute_terms
from app.modules.loans.ledger import compute_ledger, remaining_installments


def payments_of(*amounts):
    return [SimpleNamespace(amount=Decimal(a)) for a in amounts]


@pytest.fixture
def terms():
    """totalPayable 120000, EMI 5000"""
    return compute_terms(Decimal("100000"), Decimal("10"), 2)


class TestComputeLedger:
    """Tests for amount paid, balance and EMIs left"""

    @pytest.mark.unit
    def test_partial_repayment(self, terms):
        ledger = compute_ledger(terms, payments_of("20000", "10000"))

        assert ledger.amount_paid == Decimal("30000")
        assert ledger.balance_amount == Decimal("90000")
        assert ledger.emis_left == 18
        assert ledger.payment_count == 2

    @pytest.mark.unit
    def test_no_payments(self, terms):
        ledger = compute_ledger(terms, [])

        assert ledger.amount_paid == 0
        assert ledger.balance_amount == Decimal("120000")
        assert ledger.emis_left == 24
        assert ledger.payment_count == 0

    @pytest.mark.unit
    def test_overpayment(self, terms):
        """Overpaid loans report a negative balance and no EMIs left"""
        ledger = compute_ledger(terms, payments_of("150000"))

        assert ledger.amount_paid == Decimal("150000")
        assert ledger.balance_amount == Decimal("-30000")
        assert ledger.emis_left == 0

    @pytest.mark.unit
    def test_exact_payoff(self, terms):
        ledger = compute_ledger(terms, payments_of("100000", "20000"))

        assert ledger.balance_amount == 0
        assert ledger.emis_left == 0

    @pytest.mark.unit
    def test_partial_installment_rounds_up(self, terms):
        """A balance of 4.5 EMIs still needs 5 payments"""
        ledger = compute_ledger(terms, payments_of("97500"))

        assert ledger.balance_amount == Decimal("22500")
        assert ledger.emis_left == 5

    @pytest.mark.unit
    def test_amount_paid_is_order_independent(self, terms):
        amounts = ["20000", "10000.50", "5000.25", "0.01"]
        results = {
            compute_ledger(terms, payments_of(*order)).amount_paid
            for order in permutations(amounts)
        }

        assert results == {Decimal("35000.76")}

    @pytest.mark.unit
    def test_idempotent(self, terms):
        """Same inputs, same output, inputs untouched"""
        payments = payments_of("20000", "10000")

        first = compute_ledger(terms, payments)
        second = compute_ledger(terms, payments)

        assert first == second
        assert [p.amount for p in payments] == [Decimal("20000"), Decimal("10000")]
        assert terms.total_payable == Decimal("120000")

    @pytest.mark.unit
    def test_accepts_generator(self, terms):
        ledger = compute_ledger(terms, (p for p in payments_of("5000", "5000")))

        assert ledger.amount_paid == Decimal("10000")
        assert ledger.payment_count == 2

    @pytest.mark.unit
    def test_repeated_cents_do_not_drift(self):
        """Ten thousand payments of 0.10 add up exactly"""
        loan = SimpleNamespace(total_payable=Decimal("1000.00"), monthly_installment=Decimal("100"))

        ledger = compute_ledger(loan, payments_of(*["0.10"] * 10000))

        assert ledger.amount_paid == Decimal("1000.00")
        assert ledger.balance_amount == 0
        assert ledger.emis_left == 0

    @pytest.mark.unit
    def test_unrounded_installment(self):
        """EMI of 1000/12 leaves exactly 12 installments on a fresh loan"""
        terms = compute_terms(Decimal("1000"), Decimal("0"), 1)

        assert compute_ledger(terms, []).emis_left == 12


class TestCeiling:
    """Any positive balance needs at least one more EMI"""

    @pytest.mark.unit
    def test_one_cent_on_largest_loan(self):
        """A 0.01 balance against a ~8.3E11 EMI still leaves one EMI"""
        terms = compute_terms(Decimal("9999999999999.99"), Decimal("0"), 1)

        ledger = compute_ledger(terms, payments_of("9999999999999.98"))

        assert ledger.balance_amount == Decimal("0.01")
        assert ledger.emis_left == 1

    @pytest.mark.unit
    def test_tiny_excess_over_whole_installments(self):
        """18 EMIs plus a sliver is 19"""
        loan = SimpleNamespace(
            total_payable=Decimal("120000.0000000000001"),
            monthly_installment=Decimal("5000"),
        )

        assert compute_ledger(loan, payments_of("30000")).emis_left == 19

    @pytest.mark.unit
    def test_truncated_installment_after_partial_payment(self):
        """EMI of 1000/12 with half paid leaves 6"""
        terms = compute_terms(Decimal("1000"), Decimal("0"), 1)

        assert compute_ledger(terms, payments_of("500")).emis_left == 6


class TestZeroInstallment:
    """A zero EMI makes the EMI count undefined"""

    @pytest.mark.unit
    def test_zero_installment_raises(self):
        loan = SimpleNamespace(total_payable=Decimal("1000"), monthly_installment=Decimal("0"))

        with pytest.raises(DivisionUndefinedError):
            compute_ledger(loan, payments_of("10"))

    @pytest.mark.unit
    def test_zero_installment_raises_even_when_paid(self):
        with pytest.raises(DivisionUndefinedError):
            remaining_installments(Decimal("-5"), Decimal("0"))
