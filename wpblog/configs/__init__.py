from wpblog.configs.settings import Settings, file_logger, settings

__all__ = [
    "Settings",
    "file_logger",
    "settings",
]
