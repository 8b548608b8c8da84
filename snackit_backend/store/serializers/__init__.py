from .settings import PublicStoreSettingsSerializer, StoreSettingsSerializer

__all__ = ["PublicStoreSettingsSerializer", "StoreSettingsSerializer"]
