"""Intake app URL configuration."""

from django.urls import path

from . import views

app_name = "intake"

urlpatterns = [
    path("", views.IndexView.as_view(), name="index"),
    path("api/health", views.HealthView.as_view(), name="health"),
    path("api/requests", views.SubmissionRequestsView.as_view(), name="requests"),
    path("uploads/<path:path>", views.UploadedFileView.as_view(), name="upload"),
]
