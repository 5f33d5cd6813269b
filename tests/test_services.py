"""Tests de resolución de zonas y cálculo de envío."""

import pytest

from apps.shipping.data import DEFAULT_ZONES
from apps.shipping.exceptions import InvalidShippingInput
from apps.shipping.services import (
    calculate_order_totals,
    calculate_shipping,
    find_shipping_zone,
    format_cents,
    get_zone_table,
)
from apps.shipping.zones import Destination, ZoneTable

from .factories import make_table, make_zone


@pytest.fixture
def table():
    return ZoneTable.from_config(DEFAULT_ZONES)


class TestFindShippingZone:
    """Selección de la zona más específica."""

    def test_state_zone_beats_national(self, table):
        zone = find_shipping_zone(table, Destination(country="MX", state="CDMX"))

        assert zone.id == "mx-cdmx"

    def test_state_match_is_case_insensitive(self, table):
        zone = find_shipping_zone(table, Destination(country="mx", state="ciudad de méxico"))

        assert zone.id == "mx-cdmx"

    def test_metro_zone(self, table):
        zone = find_shipping_zone(table, Destination(country="MX", state="Puebla"))

        assert zone.id == "mx-zona-metropolitana"

    def test_country_only_falls_to_national(self, table):
        assert find_shipping_zone(table, Destination(country="MX")).id == "mx-national"
        assert find_shipping_zone(table, Destination(country="CA")).id == "ca-national"

    def test_unknown_state_falls_to_national(self, table):
        zone = find_shipping_zone(table, Destination(country="US", state="Texas"))

        assert zone.id == "us-national"

    def test_country_without_zones(self, table):
        assert find_shipping_zone(table, Destination(country="FR")) is None

    def test_inactive_zone_never_returned(self):
        table = make_table(
            make_zone(id="mx-national", priority=10),
            make_zone(id="mx-cdmx", states=["CDMX"], priority=20, is_active=False),
        )

        zone = find_shipping_zone(table, Destination(country="MX", state="CDMX"))

        assert zone.id == "mx-national"

    def test_only_inactive_zones_means_no_match(self):
        table = make_table(make_zone(id="mx-national", is_active=False))

        assert find_shipping_zone(table, Destination(country="MX")) is None

    def test_postal_code_beats_same_priority_state(self):
        table = make_table(
            make_zone(id="a-jalisco", states=["Jalisco"], priority=10),
            make_zone(id="b-gdl-centro", postal_codes=["44100"], priority=10),
        )

        zone = find_shipping_zone(
            table, Destination(country="MX", state="Jalisco", postal_code="44100")
        )

        assert zone.id == "b-gdl-centro"

    def test_city_beats_same_priority_state(self):
        table = make_table(
            make_zone(id="a-jalisco", states=["Jalisco"], priority=10),
            make_zone(id="b-guadalajara", cities=["Guadalajara"], priority=10),
        )

        zone = find_shipping_zone(
            table, Destination(country="MX", state="Jalisco", city="Guadalajara")
        )

        assert zone.id == "b-guadalajara"

    def test_state_zone_wins_when_city_does_not_match(self):
        table = make_table(
            make_zone(id="a-jalisco", states=["Jalisco"], priority=10),
            make_zone(id="b-guadalajara", cities=["Guadalajara"], priority=10),
        )

        zone = find_shipping_zone(
            table, Destination(country="MX", state="Jalisco", city="Zapopan")
        )

        assert zone.id == "a-jalisco"

    def test_postal_code_with_whitespace_matches(self):
        table = make_table(make_zone(id="mx-centro", postal_codes=["06600"], priority=20))

        zone = find_shipping_zone(table, Destination(country="MX", postal_code=" 06600 "))

        assert zone.id == "mx-centro"

    def test_postal_code_is_exact_match(self):
        table = make_table(
            make_zone(id="mx-centro", postal_codes=["06000"], priority=20),
            make_zone(id="mx-national", priority=10),
        )

        assert find_shipping_zone(table, Destination(country="MX", postal_code="06000")).id == "mx-centro"
        assert find_shipping_zone(table, Destination(country="MX", postal_code="6000")).id == "mx-national"

    def test_city_match(self):
        table = make_table(
            make_zone(id="mx-gdl", cities=["Guadalajara"], priority=20),
            make_zone(id="mx-national", priority=10),
        )

        zone = find_shipping_zone(table, Destination(country="MX", city="GUADALAJARA"))

        assert zone.id == "mx-gdl"

    def test_missing_destination_field_is_not_a_wildcard(self):
        table = make_table(make_zone(id="mx-cdmx", states=["CDMX"], priority=20))

        assert find_shipping_zone(table, Destination(country="MX")) is None
        assert find_shipping_zone(table, Destination(country="MX", city="CDMX")) is None

    def test_priority_wins_over_specificity(self):
        table = make_table(
            make_zone(id="mx-national", priority=30),
            make_zone(id="mx-cdmx", states=["CDMX"], priority=20),
        )

        zone = find_shipping_zone(table, Destination(country="MX", state="CDMX"))

        assert zone.id == "mx-national"

    def test_priority_ties_are_deterministic(self):
        zones = [
            make_zone(id="mx-b", states=["CDMX"], priority=20),
            make_zone(id="mx-a", states=["CDMX"], priority=20),
        ]
        destination = Destination(country="MX", state="CDMX")

        assert find_shipping_zone(make_table(*zones), destination).id == "mx-a"
        assert find_shipping_zone(make_table(*reversed(zones)), destination).id == "mx-a"

    def test_multi_country_zone(self):
        table = make_table(make_zone(id="norteamerica", countries=["US", "CA"]))

        assert find_shipping_zone(table, Destination(country="CA")).id == "norteamerica"


class TestCalculateShipping:
    """Costo de envío y umbral de envío gratis."""

    def test_national_below_threshold(self, table):
        quote = calculate_shipping(table, Destination(country="MX"), 50000)

        assert quote.zone.id == "mx-national"
        assert quote.cost == 15000
        assert quote.is_free is False

    def test_national_above_threshold_is_free(self, table):
        quote = calculate_shipping(table, Destination(country="MX"), 150000)

        assert quote.zone.id == "mx-national"
        assert quote.cost == 0
        assert quote.is_free is True

    def test_threshold_is_inclusive(self, table):
        quote = calculate_shipping(table, Destination(country="MX"), 99900)

        assert quote.is_free is True
        assert quote.cost == 0

    def test_california(self, table):
        quote = calculate_shipping(table, Destination(country="US", state="California"), 4000)

        assert quote.zone.id == "us-california"
        assert quote.cost == 599
        assert quote.is_free is False

    def test_canada_with_zero_total(self, table):
        quote = calculate_shipping(table, Destination(country="CA"), 0)

        assert quote.zone.id == "ca-national"
        assert quote.cost == 1499
        assert quote.is_free is False

    def test_no_zone_is_not_free(self, table):
        quote = calculate_shipping(table, Destination(country="FR"), 10_000_000)

        assert quote.cost == 0
        assert quote.zone is None
        assert quote.is_free is False
        assert quote.is_available is False

    def test_zone_without_threshold_always_charges(self):
        table = make_table(make_zone(id="mx-national", shipping_cost=2500))

        quote = calculate_shipping(table, Destination(country="MX"), 10_000_000)

        assert quote.cost == 2500
        assert quote.is_free is False

    def test_zero_threshold_is_always_free(self):
        table = make_table(make_zone(id="mx-national", free_shipping_threshold=0))

        quote = calculate_shipping(table, Destination(country="MX"), 0)

        assert quote.is_free is True
        assert quote.cost == 0

    @pytest.mark.parametrize("order_total", [-1, 10.5, "100", None, True])
    def test_rejects_invalid_order_total(self, table, order_total):
        with pytest.raises(InvalidShippingInput):
            calculate_shipping(table, Destination(country="MX"), order_total)

    def test_invalid_total_fails_before_resolution(self, table):
        # FR no tiene zona, pero el error de entrada se reporta primero
        with pytest.raises(InvalidShippingInput):
            calculate_shipping(table, Destination(country="FR"), -5)


class TestOrderTotals:

    def test_adds_shipping_to_subtotal(self, table):
        totals = calculate_order_totals(table, Destination(country="MX", state="CDMX"), 30000)

        assert totals.subtotal == 30000
        assert totals.shipping == 8000
        assert totals.total == 38000
        assert totals.quote.zone.id == "mx-cdmx"

    def test_free_shipping_total(self, table):
        totals = calculate_order_totals(table, Destination(country="MX", state="CDMX"), 50000)

        assert totals.shipping == 0
        assert totals.total == 50000


class TestFormatCents:

    def test_formats_minor_units(self):
        assert format_cents(15000, "MXN") == "$150.00 MXN"
        assert format_cents(599) == "$5.99"
        assert format_cents(5, "USD") == "$0.05 USD"

    def test_none_is_zero(self):
        assert format_cents(None) == "$0.00"


class TestLoadedTable:
    """La tabla cargada por la app al iniciar Django."""

    def test_app_loads_default_table(self):
        table = get_zone_table()

        assert len(table) == len(DEFAULT_ZONES)
        assert get_zone_table() is table
