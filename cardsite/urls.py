"""URL configuration for cardsite."""

from django.urls import include, path

urlpatterns = [
    path("", include("statscard.urls")),
]
