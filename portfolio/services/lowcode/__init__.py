# Low-code services - n8n workflows webhook
from .client import LowCodeApiService
from .schemas import LowCodeProject

__all__ = ["LowCodeApiService", "LowCodeProject"]
