"""URL configuration for project activity views."""

from __future__ import annotations

from django.urls import path
from django.views.generic import RedirectView

from activity import views

app_name = "activity"

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="activity:custom_graph"), name="index"),
    path("graphs/custom/", views.custom_graph, name="custom_graph"),
]
