import logging
from typing import NamedTuple

from django.apps import apps

from .exceptions import InvalidShippingInput
from .zones import Destination, ShippingQuote, ShippingZone, ZoneTable, sort_by_priority

logger = logging.getLogger(__name__)


class OrderTotals(NamedTuple):
    """Totales de un pedido con el envío ya aplicado (en centavos)."""

    subtotal: int
    shipping: int
    total: int
    quote: ShippingQuote


def get_zone_table() -> ZoneTable:
    """Tabla de zonas cargada al iniciar la app."""
    return apps.get_app_config("shipping").zone_table


def _validate_amount(value, label: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidShippingInput(f"{label} debe ser un entero en centavos.")
    if value < 0:
        raise InvalidShippingInput(f"{label} no puede ser negativo.")
    return value


def _matches(values, wanted, ignore_case=True) -> bool:
    if not values or not wanted:
        return False
    if not ignore_case:
        return wanted in values
    wanted = wanted.lower()
    return any(v.lower() == wanted for v in values)


def _zone_matches(zone: ShippingZone, destination: Destination) -> bool:
    # Orden fijo: código postal > ciudad > estado > nacional
    if _matches(zone.postal_codes, destination.postal_code, ignore_case=False):
        return True
    if _matches(zone.cities, destination.city):
        return True
    if _matches(zone.states, destination.state):
        return True
    return zone.is_national


def find_shipping_zone(table: ZoneTable, destination: Destination):
    """
    Devuelve la zona activa más específica para el destino, o None.
    None significa "sin envío a este destino", no es un error.
    """
    candidates = [
        z for z in table if z.is_active and destination.country in z.countries
    ]
    if not candidates:
        logger.info("Sin zonas de envío para el país %s", destination.country)
        return None

    ordered = sort_by_priority(candidates)

    for zone in ordered:
        if _zone_matches(zone, destination):
            logger.debug("Destino %s resuelto a la zona %s", destination, zone.id)
            return zone

    # Fallback: zona nacional del país
    zone = next((z for z in ordered if z.is_national), None)
    if zone is None:
        logger.info("Ninguna zona coincide con el destino %s", destination)
    return zone


def calculate_shipping(table: ZoneTable, destination: Destination, order_total: int) -> ShippingQuote:
    """
    Cotiza el envío. Si el total alcanza el umbral de la zona el envío es gratis.
    Sin zona => cost 0, zone None, is_free False.
    """
    _validate_amount(order_total, "El total del pedido")

    zone = find_shipping_zone(table, destination)
    if zone is None:
        return ShippingQuote(cost=0, zone=None, is_free=False)

    threshold = zone.free_shipping_threshold
    is_free = threshold is not None and order_total >= threshold

    return ShippingQuote(
        cost=0 if is_free else zone.shipping_cost,
        zone=zone,
        is_free=is_free,
    )


def calculate_order_totals(table: ZoneTable, destination: Destination, subtotal: int) -> OrderTotals:
    """Subtotal + envío, como en el checkout."""
    quote = calculate_shipping(table, destination, subtotal)
    return OrderTotals(
        subtotal=subtotal,
        shipping=quote.cost,
        total=subtotal + quote.cost,
        quote=quote,
    )


def format_cents(amount, currency: str = "") -> str:
    if amount is None:
        amount = 0
    text = f"${amount // 100}.{amount % 100:02d}"
    return f"{text} {currency}" if currency else text
