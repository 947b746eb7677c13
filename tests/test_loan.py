import pytest

from loan import Loan
from validators import ValidationError


@pytest.fixture
def loan():
    return Loan("ISBN-001", "M001", "2025-11-03", "2025-11-17")

def test_new_loan_is_active(loan):
    assert loan.is_returned() is False
    assert loan.isbn == "ISBN-001"
    assert loan.member_id == "M001"
    assert str(loan) == "Loan: ISBN-001 to M001, from 2025-11-03 to 2025-11-17 (active)"

def test_due_before_start_rejected():
    with pytest.raises(ValidationError, match="Due date cannot be earlier than start date"):
        Loan("ISBN-001", "M001", "2025-11-17", "2025-11-03")

def test_same_day_loan_allowed():
    assert Loan("ISBN-001", "M001", "2025-11-03", "2025-11-03").is_returned() is False

def test_mark_returned_twice(loan):
    loan.mark_returned()
    loan.mark_returned()
    assert loan.is_returned() is True
    assert str(loan).endswith("(returned)")

@pytest.mark.parametrize("today,expected", [
    ("2025-11-18", True),
    ("2025-11-17", False),
    ("2025-11-16", False),
])
def test_is_overdue(loan, today, expected):
    assert loan.is_overdue(today) is expected

def test_returned_loan_never_overdue(loan):
    loan.mark_returned()
    assert loan.is_overdue("2099-01-01") is False

def test_to_dict(loan):
    assert loan.to_dict() == {
        "isbn": "ISBN-001",
        "member_id": "M001",
        "start_date": "2025-11-03",
        "due_date": "2025-11-17",
        "returned": False,
    }
