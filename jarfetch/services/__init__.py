"""
JarFetch 服务层

包含业务逻辑服务：上游客户端、版本清单、版本解析。
"""

from jarfetch.services.http_client import UpstreamClient
from jarfetch.services.catalog import CatalogClient
from jarfetch.services.version_resolver import VersionResolver

__all__ = [
    "UpstreamClient",
    "CatalogClient",
    "VersionResolver",
]
