# Zonas de envío por defecto de la tienda.
# Montos en centavos de la moneda de cada zona.
# Se pueden reemplazar con settings.SHIPPING["ZONES"].

DEFAULT_ZONES = [
    # México
    {
        "id": "mx-national",
        "name": "México - Nacional",
        "description": "Envíos a todo México",
        "countries": ["MX"],
        "shipping_cost": 15000,  # $150 MXN
        "free_shipping_threshold": 99900,  # $999 MXN
        "estimated_days_min": 3,
        "estimated_days_max": 7,
        "is_active": True,
        "priority": 10,
        "currency": "MXN",
    },
    {
        "id": "mx-cdmx",
        "name": "Ciudad de México",
        "description": "Envío express en CDMX",
        "countries": ["MX"],
        "states": ["Ciudad de México", "CDMX"],
        "shipping_cost": 8000,
        "free_shipping_threshold": 50000,
        "estimated_days_min": 1,
        "estimated_days_max": 3,
        "is_active": True,
        "priority": 20,
        "currency": "MXN",
    },
    {
        "id": "mx-zona-metropolitana",
        "name": "Zona Metropolitana",
        "description": "Estado de México, Querétaro, Puebla, Morelos",
        "countries": ["MX"],
        "states": ["Estado de México", "Querétaro", "Puebla", "Morelos"],
        "shipping_cost": 10000,
        "free_shipping_threshold": 75000,
        "estimated_days_min": 2,
        "estimated_days_max": 5,
        "is_active": True,
        "priority": 15,
        "currency": "MXN",
    },
    # Estados Unidos
    {
        "id": "us-national",
        "name": "USA - Nacional",
        "description": "Envíos a todo Estados Unidos",
        "countries": ["US"],
        "shipping_cost": 999,  # $9.99 USD
        "free_shipping_threshold": 7500,
        "estimated_days_min": 5,
        "estimated_days_max": 10,
        "is_active": True,
        "priority": 10,
        "currency": "USD",
    },
    {
        "id": "us-california",
        "name": "California",
        "description": "Envío rápido en California",
        "countries": ["US"],
        "states": ["CA", "California"],
        "shipping_cost": 599,
        "free_shipping_threshold": 5000,
        "estimated_days_min": 2,
        "estimated_days_max": 4,
        "is_active": True,
        "priority": 20,
        "currency": "USD",
    },
    {
        "id": "us-west-coast",
        "name": "Costa Oeste",
        "description": "Washington, Oregón, Nevada",
        "countries": ["US"],
        "states": ["WA", "Washington", "OR", "Oregon", "NV", "Nevada"],
        "shipping_cost": 699,
        "free_shipping_threshold": 6000,
        "estimated_days_min": 3,
        "estimated_days_max": 6,
        "is_active": True,
        "priority": 15,
        "currency": "USD",
    },
    # Canadá
    {
        "id": "ca-national",
        "name": "Canadá - Nacional",
        "description": "Envíos a todo Canadá",
        "countries": ["CA"],
        "shipping_cost": 1499,  # $14.99 CAD
        "free_shipping_threshold": 10000,
        "estimated_days_min": 7,
        "estimated_days_max": 14,
        "is_active": True,
        "priority": 10,
        "currency": "CAD",
    },
]
