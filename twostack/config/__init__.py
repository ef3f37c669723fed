from .loader import Settings, SETTINGS_FILE

__all__ = ["Settings", "SETTINGS_FILE"]
