import logging

from django.apps import AppConfig

from .exceptions import ZoneConfigurationError

logger = logging.getLogger(__name__)


class ShippingConfig(AppConfig):
    name = "apps.shipping"
    verbose_name = "Envíos"

    zone_table = None

    def ready(self):
        # La tabla se construye una sola vez al arrancar
        from .conf import get_config
        from .zones import ZoneTable

        config = get_config()
        try:
            self.zone_table = ZoneTable.from_config(
                config["ZONES"],
                default_currency=config["DEFAULT_CURRENCY"],
            )
        except ZoneConfigurationError as e:
            logger.error("Tabla de zonas de envío inválida: %s", e)
            raise

        logger.info(
            "Tabla de zonas de envío cargada: %d zonas (%d activas)",
            len(self.zone_table),
            len(self.zone_table.list_active()),
        )
