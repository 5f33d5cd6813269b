from django.urls import path
from . import views

app_name = "shipping"

urlpatterns = [
    path("api/envios/cotizar/", views.quote_api, name="quote_api"),
    path("api/envios/resolver/", views.resolve_api, name="resolve_api"),
    path("api/envios/zonas/", views.zones_api, name="zones_api"),
    path("api/envios/zonas/<str:country>/", views.zones_by_country_api, name="zones_by_country_api"),
]
