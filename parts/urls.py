"""
Parts URLs

URL routing for the parts-search app.
"""

from django.urls import path
from .views import IntentView, SearchView, HealthView

app_name = "parts"

urlpatterns = [
    path("intent/", IntentView.as_view(), name="intent"),
    path("search/", SearchView.as_view(), name="search"),
    path("health/", HealthView.as_view(), name="health"),
]
