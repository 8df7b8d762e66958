import pytest

from converter.services.conversion import ConversionResult
from converter.services.money import (
    currency_symbol,
    format_amount,
    format_money,
    format_rate,
)
from converter.services.presentation import ConverterView, rate_annotation


def _result(**kw):
    base = dict(
        amount=100.0,
        from_currency="USD",
        to_currency="EUR",
        rate=0.92,
        converted_amount=92.0,
        as_of="Mon, 19 Oct 2026 00:00:01 +0000",
    )
    base.update(kw)
    return ConversionResult(**base)


@pytest.mark.parametrize(
    "value,expected",
    [(1, "1.00"), (2.675, "2.68"), (0.005, "0.01"), (1234567.891, "1234567.89"), (1e20, "100000000000000000000.00")],
)
def test_format_amount_half_up(value, expected):
    assert format_amount(value) == expected


def test_format_rate_six_places():
    assert format_rate(0.9213456789) == "0.921346"
    assert format_rate(1500) == "1500.000000"


def test_symbols_fall_back_to_code():
    assert currency_symbol("GBP") == "£"
    assert currency_symbol("ZAR") == "ZAR"
    assert format_money(5, "NGN") == "₦5.00 NGN"
    assert format_money(5, "ZAR") == "ZAR5.00 ZAR"


def test_result_and_error_mutually_exclusive():
    view = ConverterView()
    ticket = view.begin()
    view.show_result(ticket, _result())
    assert view.result_text == "$100.00 USD = €92.00 EUR"
    assert not view.error_visible

    view.show_error("Conversion failed: timeout", ticket)
    assert view.error_visible
    assert not view.result_visible
    assert view.rate_text is None

    view.show_result(ticket, _result())
    assert view.result_visible and not view.error_visible


def test_begin_clears_previous_outcome():
    view = ConverterView()
    view.show_error("old")
    view.begin()
    assert not view.error_visible and not view.result_visible


def test_stale_outcome_is_discarded():
    view = ConverterView()
    first = view.begin()
    second = view.begin()
    assert view.show_result(first, _result()) is False
    assert not view.result_visible
    assert view.show_error("late failure", first) is False
    assert not view.error_visible
    assert view.show_result(second, _result(converted_amount=1.5)) is True
    assert view.result_text.endswith("€1.50 EUR")


def test_rate_annotation_same_currency():
    assert rate_annotation(_result(to_currency="USD", rate=1.0)) == "1 USD = 1 USD"
    assert rate_annotation(_result()) == "1 USD = 0.920000 EUR"


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_values_refused(value):
    with pytest.raises(ValueError, match="non-finite"):
        format_amount(value)
    with pytest.raises(ValueError, match="non-finite"):
        format_rate(value)
