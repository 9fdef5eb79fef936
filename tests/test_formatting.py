from expense_ledger.formatting import format_amount, format_day


def test_format_amount():
    assert format_amount(4.5) == "₹4.50"
    assert format_amount(1234.567, "$") == "$1234.57"


def test_format_day():
    assert format_day("2024-01-10") == "10 Jan"
    assert format_day("2024-12-01") == "1 Dec"
    assert format_day("garbage") == "garbage"
