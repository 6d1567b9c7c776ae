from nce.status.client import StatusPageClient

__all__ = ["StatusPageClient"]
