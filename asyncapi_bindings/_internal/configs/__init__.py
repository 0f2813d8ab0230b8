from .loader import LoaderConfig

__all__ = ("LoaderConfig",)
