# store/urls.py

from django.urls import path

from store.views import PublicStoreSettingsView

app_name = "store"

urlpatterns = [
    path("settings/", PublicStoreSettingsView.as_view(), name="settings"),
]
