import re

from django import forms

from .zones import Destination

COUNTRY_RE = re.compile(r"^[A-Za-z]{2}$")


class DestinationForm(forms.Form):

    # ---------- Destino ----------
    country = forms.CharField(
        label="País",
        required=True,
        max_length=2,
    )

    state = forms.CharField(
        label="Estado",
        required=False,
        max_length=120,
    )

    city = forms.CharField(
        label="Ciudad",
        required=False,
        max_length=120,
    )

    postal_code = forms.CharField(
        label="Código postal",
        required=False,
        max_length=20,
    )

    # ---------- Validaciones ----------
    def clean_country(self):
        v = (self.cleaned_data.get("country") or "").strip().upper()
        if not COUNTRY_RE.match(v):
            raise forms.ValidationError(
                "País inválido. Usa el código ISO de 2 letras (ej: MX)."
            )
        return v

    def to_destination(self) -> Destination:
        data = self.cleaned_data
        return Destination(
            country=data["country"],
            state=data.get("state") or None,
            city=data.get("city") or None,
            postal_code=data.get("postal_code") or None,
        )


class ShippingQuoteForm(DestinationForm):

    # Total del pedido en centavos
    order_total = forms.IntegerField(
        label="Total del pedido",
        required=True,
        min_value=0,
        error_messages={
            "min_value": "El total del pedido no puede ser negativo.",
        },
    )
