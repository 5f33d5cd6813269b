from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from .forms import DestinationForm, ShippingQuoteForm
from .services import (
    calculate_order_totals,
    find_shipping_zone,
    format_cents,
    get_zone_table,
)


def _form_errors(form):
    return JsonResponse({"ok": False, "errors": form.errors.get_json_data()}, status=400)


@require_http_methods(["GET"])
def quote_api(request):
    """
    Recibe (GET): country, state, city, postal_code, order_total (centavos)
    Devuelve:
      ok, available, cost, is_free, cost_display, zone, subtotal, total
    """
    form = ShippingQuoteForm(request.GET)
    if not form.is_valid():
        return _form_errors(form)

    totals = calculate_order_totals(
        get_zone_table(),
        form.to_destination(),
        form.cleaned_data["order_total"],
    )
    quote = totals.quote
    currency = quote.zone.currency if quote.zone else ""

    return JsonResponse({
        "ok": True,
        **quote.to_dict(),
        "cost_display": format_cents(quote.cost, currency),
        "subtotal": totals.subtotal,
        "total": totals.total,
        "total_display": format_cents(totals.total, currency),
    })


@require_http_methods(["GET"])
def resolve_api(request):
    form = DestinationForm(request.GET)
    if not form.is_valid():
        return _form_errors(form)

    zone = find_shipping_zone(get_zone_table(), form.to_destination())
    return JsonResponse({
        "ok": True,
        "available": zone is not None,
        "zone": zone.to_dict() if zone else None,
    })


# -------------------------
# Listados de zonas (admin / selector de país)
# -------------------------

@require_http_methods(["GET"])
def zones_api(request):
    zones = get_zone_table().list_active()
    return JsonResponse({"ok": True, "zones": [z.to_dict() for z in zones]})


@require_http_methods(["GET"])
def zones_by_country_api(request, country):
    country = country.upper()
    zones = get_zone_table().list_by_country(country)
    return JsonResponse({
        "ok": True,
        "country": country,
        "zones": [z.to_dict() for z in zones],
    })
