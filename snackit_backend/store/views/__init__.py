from .settings import AdminStoreSettingsView, PublicStoreSettingsView

__all__ = ["AdminStoreSettingsView", "PublicStoreSettingsView"]
