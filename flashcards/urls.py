from django.urls import include, path

from .views import initialize_data

urlpatterns = [
    path("seed", initialize_data, name="seed"),
    path("", include("scheduler.api.urls")),
]
