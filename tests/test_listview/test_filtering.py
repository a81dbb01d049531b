"""Tests for filter evaluation."""

from datetime import date, datetime

import pytest

from orderbrowser.listview import DateRange, FilterState, OrderStatus, filter_orders, matches


def refs(orders):
    return [order.ref for order in orders]


class TestFilterOrders:
    """Tests for filter_orders over small hand-built sets."""

    def test_empty_state_matches_everything(self, order_pair):
        assert filter_orders(order_pair, FilterState()) == order_pair

    def test_status_filter(self, order_pair):
        """Test filtering by status keeps only matching orders."""
        result = filter_orders(order_pair, FilterState(statuses=["Booked"]))
        assert refs(result) == ["A1"]

    def test_status_filter_accepts_enum_values(self, order_pair):
        result = filter_orders(order_pair, FilterState(statuses=[OrderStatus.CLOSED]))
        assert refs(result) == ["A2"]

    def test_values_within_field_are_ored(self, order_pair):
        result = filter_orders(order_pair, FilterState(statuses=["Booked", "Closed"]))
        assert refs(result) == ["A1", "A2"]

    def test_max_price_only(self, order_pair):
        """Test an upper price bound alone excludes pricier orders."""
        result = filter_orders(order_pair, FilterState(price_range=(None, 60)))
        assert refs(result) == ["A2"]

    def test_price_bounds_are_inclusive(self, order_pair):
        result = filter_orders(order_pair, FilterState(price_range=(50, 100)))
        assert refs(result) == ["A1", "A2"]

    def test_zero_lower_bound_is_active(self, make_order):
        """Test a lower bound of 0 still excludes orders without a price."""
        orders = [make_order("P1", price="TBD"), make_order("P2", price="0.00 NOK")]
        result = filter_orders(orders, FilterState(price_range=(0, None)))
        assert refs(result) == ["P2"]

    def test_unparseable_price_excluded_by_active_range(self, make_order):
        orders = [make_order("P1", price="—"), make_order("P2")]
        result = filter_orders(orders, FilterState(price_range=(None, 1000)))
        assert refs(result) == ["P2"]

    def test_search_is_case_insensitive(self, make_order):
        orders = [make_order("QH29", customer="Peter"), make_order("VB58", customer="Ola")]
        assert refs(filter_orders(orders, FilterState(search="qh2"))) == ["QH29"]
        assert refs(filter_orders(orders, FilterState(search="OLA"))) == ["VB58"]

    def test_search_covers_status_and_created(self, make_order):
        orders = [
            make_order("S1", status=OrderStatus.DROPPED, created="03 Aug 2020 10:21"),
            make_order("S2"),
        ]
        assert refs(filter_orders(orders, FilterState(search="dropped"))) == ["S1"]
        assert refs(filter_orders(orders, FilterState(search="03 aug"))) == ["S1"]

    def test_missing_product_tag_excluded(self, make_order):
        orders = [make_order("T1", product_tag=None), make_order("T2", product_tag="E-bike")]
        result = filter_orders(orders, FilterState(product_tags=["E-bike"]))
        assert refs(result) == ["T2"]

    def test_distribution_uses_substring(self, make_order):
        """Test distribution values match inside the distribution text."""
        orders = [
            make_order("D1", distribution="Avdeling 16, Svolvær"),
            make_order("D2", distribution="Grøubøgata 1, Oslo"),
        ]
        result = filter_orders(orders, FilterState(distribution=["Svolvær"]))
        assert refs(result) == ["D1"]

    def test_department_uses_exact_match(self, make_order):
        orders = [make_order("D1", department="Avdeling 16"), make_order("D2", department="Avdeling 1")]
        result = filter_orders(orders, FilterState(departments=["Avdeling 1"]))
        assert refs(result) == ["D2"]

    def test_input_order_preserved(self, make_order):
        orders = [make_order(ref) for ref in ("C", "A", "B")]
        assert refs(filter_orders(orders, FilterState(created_by=["Camilla"]))) == ["C", "A", "B"]


class TestDateRange:
    """Tests for created-date filtering."""

    def test_inclusive_custom_range(self, make_order):
        orders = [
            make_order("D1", created="01 Jul 2020 08:00"),
            make_order("D2", created="03 Jul 2020 23:30"),
            make_order("D3", created="04 Jul 2020 00:00"),
        ]
        state = FilterState(date_range=DateRange.custom(date(2020, 7, 1), date(2020, 7, 3)))
        assert refs(filter_orders(orders, state)) == ["D1", "D2"]

    def test_open_ended_range(self, make_order):
        orders = [make_order("D1", created="01 Jul 2020 08:00"), make_order("D2", created="05 Aug 2020 08:00")]
        state = FilterState(date_range=DateRange("Custom", start=datetime(2020, 8, 1)))
        assert refs(filter_orders(orders, state)) == ["D2"]

    def test_unparseable_created_fails_closed(self, make_order):
        orders = [make_order("D1", created="—"), make_order("D2", created="sometime")]
        state = FilterState(date_range=DateRange("Custom", end=datetime(2030, 1, 1)))
        assert filter_orders(orders, state) == []

    def test_unbounded_range_is_inactive(self, make_order):
        order = make_order("D1", created="—")
        assert matches(order, FilterState(date_range=DateRange("Custom")))

    def test_preset_spans_days_back(self):
        now = datetime(2020, 7, 31, 12, 0)
        date_range = DateRange.preset("Last 7", now=now)
        assert date_range.start == datetime(2020, 7, 24, 12, 0)
        assert date_range.end == now

    def test_unknown_preset_raises(self):
        with pytest.raises(ValueError):
            DateRange.preset("Last decade")


class TestFilterProperties:
    """Algebraic properties of filtering over the demo set."""

    STATES = [
        FilterState(statuses=["Booked"]),
        FilterState(search="gen"),
        FilterState(price_range=(520, 700)),
        FilterState(distribution=["Oslo"], created_by=["Camilla", "Helga"]),
    ]

    @pytest.mark.parametrize("state", STATES)
    def test_filter_is_idempotent(self, sample_store, state):
        once = filter_orders(sample_store, state)
        assert filter_orders(once, state) == once

    def test_and_composition(self, sample_store):
        """Test combining disjoint fields equals intersecting separate results."""
        first = FilterState(statuses=["Booked", "Closed"])
        second = FilterState(price_range=(None, 800))
        combined = FilterState(statuses=["Booked", "Closed"], price_range=(None, 800))

        second_refs = set(refs(filter_orders(sample_store, second)))
        expected = [o for o in filter_orders(sample_store, first) if o.ref in second_refs]

        assert filter_orders(sample_store, combined) == expected
        assert expected

    def test_demo_cheap_orders(self, sample_store):
        result = filter_orders(sample_store, FilterState(price_range=(None, 400)))
        assert refs(result) == ["TS49", "QE50", "AA23"]

    def test_demo_first_three_days(self, sample_store):
        state = FilterState(date_range=DateRange.custom(date(2020, 7, 1), date(2020, 7, 3)))
        assert refs(filter_orders(sample_store, state)) == ["GEN01", "GEN02", "GEN03"]
