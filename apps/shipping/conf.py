"""Configuración de envíos leída desde settings.SHIPPING."""

from django.conf import settings

from .data import DEFAULT_ZONES


def get_config():
    """Mezcla los valores por defecto con settings.SHIPPING."""
    defaults = {
        # Tabla de zonas (lista de dicts)
        "ZONES": DEFAULT_ZONES,
        # Moneda para zonas que no la declaran
        "DEFAULT_CURRENCY": "MXN",
    }

    user_config = getattr(settings, "SHIPPING", {})
    return {**defaults, **user_config}