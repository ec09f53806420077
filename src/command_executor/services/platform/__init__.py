from .platform_service import PlatformService, SystemInfo

__all__ = ["PlatformService", "SystemInfo"]
