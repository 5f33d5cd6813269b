from django.urls import include, path

urlpatterns = [
    path("", include("apps.shipping.urls")),
]
