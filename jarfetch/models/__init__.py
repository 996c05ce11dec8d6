"""
JarFetch 数据模型包

包含配置模型和 API 模型定义。
"""

from jarfetch.models.config import (
    ServerConfig,
    UpstreamConfig,
    JarFetchConfig,
)
from jarfetch.models.api import (
    VersionTypeFilter,
    Provider,
    VersionRecord,
    Catalog,
    ResolvedArtifact,
)

__all__ = [
    # 配置模型
    "ServerConfig",
    "UpstreamConfig",
    "JarFetchConfig",
    # API 模型
    "VersionTypeFilter",
    "Provider",
    "VersionRecord",
    "Catalog",
    "ResolvedArtifact",
]
