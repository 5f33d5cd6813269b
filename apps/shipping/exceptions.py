from django.core.exceptions import ImproperlyConfigured


class InvalidShippingInput(ValueError):
    """Datos de entrada inválidos (país faltante, total negativo, etc.)."""


class ZoneConfigurationError(ImproperlyConfigured):
    """
    La tabla de zonas está mal configurada.
    Se lanza al cargar la tabla, nunca al cotizar.
    """

    def __init__(self, message, zone_id=None):
        self.zone_id = zone_id
        if zone_id:
            message = f"Zona '{zone_id}': {message}"
        super().__init__(message)
