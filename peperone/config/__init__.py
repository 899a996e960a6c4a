from .settings import Settings, default_base_dir

__all__ = ["Settings", "default_base_dir"]
