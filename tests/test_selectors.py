from converter.services.selectors import (
    CurrencySelector,
    CurrencySelectors,
    apply_defaults,
    populate,
    swap_selections,
)


def test_populate_replaces_previous_options():
    selectors = CurrencySelectors()
    populate(selectors, ["AAA", "BBB"])
    selectors.to_currency.value = "BBB"
    populate(selectors, ["USD", "EUR", "NGN"])
    assert selectors.from_currency.options == ["USD", "EUR", "NGN"]
    assert selectors.to_currency.options == ["USD", "EUR", "NGN"]
    # first option selected after repopulating
    assert selectors.to_currency.value == "USD"


def test_populate_empty():
    sel = CurrencySelector("from_currency")
    sel.populate([])
    assert sel.options == []
    assert sel.value == ""


def test_defaults_prefer_usd_and_ngn():
    codes = ["EUR", "NGN", "USD"]
    selectors = CurrencySelectors()
    populate(selectors, codes)
    apply_defaults(selectors, codes)
    assert selectors.from_currency.value == "USD"
    assert selectors.to_currency.value == "NGN"


def test_defaults_fall_back_to_eur():
    codes = ["GBP", "EUR", "USD"]
    selectors = CurrencySelectors()
    populate(selectors, codes)
    apply_defaults(selectors, codes)
    assert selectors.to_currency.value == "EUR"


def test_defaults_leave_first_item_when_absent():
    codes = ["GBP", "JPY"]
    selectors = CurrencySelectors()
    populate(selectors, codes)
    apply_defaults(selectors, codes)
    assert selectors.from_currency.value == "GBP"
    assert selectors.to_currency.value == "GBP"


def test_select_unknown_code_clears_selection():
    sel = CurrencySelector("to_currency")
    sel.populate(["USD", "EUR"])
    assert sel.select("eur") is True
    assert sel.value == "EUR"
    assert sel.select("XYZ") is False
    assert sel.value == ""


def test_swap_exchanges_values_only():
    selectors = CurrencySelectors()
    populate(selectors, ["USD", "EUR", "NGN"])
    selectors.from_currency.value = "USD"
    selectors.to_currency.value = "NGN"
    swap_selections(selectors)
    assert selectors.from_currency.value == "NGN"
    assert selectors.to_currency.value == "USD"
    assert selectors.from_currency.options == ["USD", "EUR", "NGN"]
