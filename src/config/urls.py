"""
URL configuration for the product request intake service.
"""

from django.urls import include, path

urlpatterns = [
    path("", include("apps.intake.urls")),
]
