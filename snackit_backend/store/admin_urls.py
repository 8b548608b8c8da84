# store/admin_urls.py

from django.urls import path

from store.views import AdminStoreSettingsView

app_name = "store_admin"

urlpatterns = [
    path("settings/", AdminStoreSettingsView.as_view(), name="settings"),
]
