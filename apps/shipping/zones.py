"""
Tipos de la tabla de zonas de envío.

La tabla se construye una sola vez (ver apps.ShippingConfig.ready) y no se
modifica después. Todas las validaciones de configuración ocurren aquí, al
construir las zonas y la tabla.
"""

from dataclasses import dataclass

from .exceptions import InvalidShippingInput, ZoneConfigurationError


REGION_FIELDS = ("states", "cities", "postal_codes")

REQUIRED_KEYS = {
    "id",
    "name",
    "countries",
    "shipping_cost",
    "estimated_days_min",
    "estimated_days_max",
}
OPTIONAL_KEYS = {
    "description",
    "states",
    "cities",
    "postal_codes",
    "free_shipping_threshold",
    "is_active",
    "priority",
    "currency",
}


def _is_int(value) -> bool:
    # bool es subclase de int; no lo aceptamos como monto
    return isinstance(value, int) and not isinstance(value, bool)


def _as_tuple(value, name, zone_id=None):
    if value is None:
        return None
    if isinstance(value, str):
        return (value,)
    try:
        return tuple(value)
    except TypeError:
        raise ZoneConfigurationError(
            f"'{name}' debe ser una lista de textos.", zone_id
        ) from None


def _specificity(zone) -> int:
    # 0 = código postal, 1 = ciudad, 2 = estado, 3 = nacional
    for rank, name in enumerate(("postal_codes", "cities", "states")):
        if getattr(zone, name):
            return rank
    return 3


def sort_by_priority(zones):
    """
    Prioridad descendente. En empate va primero la zona más específica
    y luego el id ascendente.
    """
    return sorted(zones, key=lambda z: (-z.priority, _specificity(z), z.id))


@dataclass(frozen=True)
class ShippingZone:
    id: str
    name: str
    countries: tuple
    shipping_cost: int
    estimated_days_min: int
    estimated_days_max: int
    description: str = ""
    states: tuple | None = None
    cities: tuple | None = None
    postal_codes: tuple | None = None
    free_shipping_threshold: int | None = None
    is_active: bool = True
    priority: int = 0
    currency: str = "MXN"

    def __post_init__(self):
        for name in ("countries",) + REGION_FIELDS:
            object.__setattr__(self, name, _as_tuple(getattr(self, name), name, self.id))
        if isinstance(self.currency, str):
            object.__setattr__(self, "currency", self.currency.strip().upper())
        self._validate()

        # Ya validados: se guardan sin espacios y los países en mayúsculas
        object.__setattr__(self, "countries", tuple(c.strip().upper() for c in self.countries))
        for name in REGION_FIELDS:
            values = getattr(self, name)
            if values is not None:
                object.__setattr__(self, name, tuple(v.strip() for v in values))

    def _validate(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise ZoneConfigurationError("El id de la zona es obligatorio.")

        zone_id = self.id

        if not self.countries:
            raise ZoneConfigurationError("Debe tener al menos un país.", zone_id)

        for name in REGION_FIELDS:
            values = getattr(self, name)
            if values is not None and len(values) == 0:
                raise ZoneConfigurationError(
                    f"'{name}' está vacío; omítelo si la zona no lo usa.", zone_id
                )

        for name in ("countries",) + REGION_FIELDS:
            for value in getattr(self, name) or ():
                if not isinstance(value, str) or not value.strip():
                    raise ZoneConfigurationError(
                        f"'{name}' solo admite textos no vacíos (recibido {value!r}).",
                        zone_id,
                    )

        if not isinstance(self.currency, str) or not self.currency:
            raise ZoneConfigurationError("'currency' es obligatorio.", zone_id)

        for name in ("shipping_cost", "estimated_days_min", "estimated_days_max"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ZoneConfigurationError(f"'{name}' debe ser un entero.", zone_id)
            if value < 0:
                raise ZoneConfigurationError(f"'{name}' no puede ser negativo.", zone_id)

        threshold = self.free_shipping_threshold
        if threshold is not None:
            if not _is_int(threshold):
                raise ZoneConfigurationError(
                    "'free_shipping_threshold' debe ser un entero.", zone_id
                )
            if threshold < 0:
                raise ZoneConfigurationError(
                    "'free_shipping_threshold' no puede ser negativo.", zone_id
                )

        if self.estimated_days_min > self.estimated_days_max:
            raise ZoneConfigurationError(
                f"estimated_days_min ({self.estimated_days_min}) es mayor que "
                f"estimated_days_max ({self.estimated_days_max}).",
                zone_id,
            )

        if not _is_int(self.priority):
            raise ZoneConfigurationError("'priority' debe ser un entero.", zone_id)

        if not isinstance(self.is_active, bool):
            raise ZoneConfigurationError("'is_active' debe ser booleano.", zone_id)

    def __str__(self) -> str:
        status = "Activa" if self.is_active else "Inactiva"
        return f"{self.name} ({self.id}) - {status}"

    @property
    def is_national(self) -> bool:
        """Zona sin estados, ciudades ni códigos postales."""
        return not (self.states or self.cities or self.postal_codes)

    @property
    def delivery_estimate(self) -> str:
        if self.estimated_days_min == self.estimated_days_max:
            days = self.estimated_days_min
            return f"{days} día" if days == 1 else f"{days} días"
        return f"{self.estimated_days_min}-{self.estimated_days_max} días"

    def to_dict(self) -> dict:
        def _list(values):
            return list(values) if values is not None else None

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "countries": list(self.countries),
            "states": _list(self.states),
            "cities": _list(self.cities),
            "postal_codes": _list(self.postal_codes),
            "shipping_cost": self.shipping_cost,
            "free_shipping_threshold": self.free_shipping_threshold,
            "estimated_days_min": self.estimated_days_min,
            "estimated_days_max": self.estimated_days_max,
            "delivery_estimate": self.delivery_estimate,
            "is_active": self.is_active,
            "priority": self.priority,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class Destination:
    country: str
    state: str | None = None
    city: str | None = None
    postal_code: str | None = None

    def __post_init__(self):
        country = self.country.strip().upper() if isinstance(self.country, str) else ""
        if not country:
            raise InvalidShippingInput("El país de destino es obligatorio.")
        object.__setattr__(self, "country", country)

        # Campos opcionales vacíos cuentan como no informados
        for name in ("state", "city", "postal_code"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise InvalidShippingInput(f"'{name}' debe ser texto (recibido {value!r}).")
            object.__setattr__(self, name, value.strip() or None)


@dataclass(frozen=True)
class ShippingQuote:
    cost: int
    zone: ShippingZone | None
    is_free: bool

    @property
    def is_available(self) -> bool:
        # zone None = destino sin cobertura, no envío gratis
        return self.zone is not None

    def to_dict(self) -> dict:
        return {
            "cost": self.cost,
            "is_free": self.is_free,
            "available": self.is_available,
            "zone": self.zone.to_dict() if self.zone else None,
        }


class ZoneTable:
    """
    Colección ordenada e inmutable de zonas de envío.
    Valida ids únicos y a lo sumo una zona nacional activa por país.
    """

    def __init__(self, zones=()):
        self._zones = tuple(zones)
        self._validate()

    @classmethod
    def from_config(cls, entries, default_currency: str = "MXN") -> "ZoneTable":
        """Construye la tabla desde una lista de dicts (settings.SHIPPING["ZONES"])."""
        zones = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ZoneConfigurationError(
                    f"La entrada #{index} de la tabla de zonas no es un dict."
                )

            zone_id = entry.get("id")
            missing = REQUIRED_KEYS - entry.keys()
            if missing:
                raise ZoneConfigurationError(
                    f"Faltan campos: {', '.join(sorted(missing))}.",
                    zone_id or f"#{index}",
                )
            unknown = entry.keys() - REQUIRED_KEYS - OPTIONAL_KEYS
            if unknown:
                raise ZoneConfigurationError(
                    f"Campos desconocidos: {', '.join(sorted(unknown))}.", zone_id
                )

            data = dict(entry)
            data.setdefault("currency", default_currency)
            zones.append(ShippingZone(**data))

        return cls(zones)

    def _validate(self):
        seen = set()
        national_by_country = {}

        for zone in self._zones:
            if not isinstance(zone, ShippingZone):
                raise ZoneConfigurationError(
                    f"Elemento inválido en la tabla de zonas: {zone!r}"
                )

            if zone.id in seen:
                raise ZoneConfigurationError("El id está duplicado.", zone.id)
            seen.add(zone.id)

            if not (zone.is_active and zone.is_national):
                continue

            for country in zone.countries:
                other = national_by_country.get(country)
                if other:
                    raise ZoneConfigurationError(
                        f"Ya existe una zona nacional activa para {country} ('{other}').",
                        zone.id,
                    )
                national_by_country[country] = zone.id

    def __iter__(self):
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    def __repr__(self) -> str:
        return f"<ZoneTable: {len(self._zones)} zonas>"

    def get(self, zone_id: str):
        for zone in self._zones:
            if zone.id == zone_id:
                return zone
        return None

    def list_active(self) -> list[ShippingZone]:
        """Zonas activas en el orden de la tabla."""
        return [z for z in self._zones if z.is_active]

    def list_by_country(self, country: str) -> list[ShippingZone]:
        """Zonas activas del país, de mayor a menor prioridad."""
        country = (country or "").strip().upper()
        return sort_by_priority(
            z for z in self._zones if z.is_active and country in z.countries
        )
