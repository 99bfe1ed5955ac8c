from .deepl import DeepLClient

__all__ = ["DeepLClient"]
