"""
主协调器

整合服务层和定位层，实现 "解析参数 -> 获取清单 -> 解析版本 -> 查找下载地址" 的流程。
"""

from typing import Optional

from loguru import logger

from jarfetch.exceptions import VersionNotFoundError
from jarfetch.models import (
    Provider,
    ResolvedArtifact,
    UpstreamConfig,
    VersionTypeFilter,
)
from jarfetch.providers import create_locator_registry
from jarfetch.services import CatalogClient, VersionResolver


class JarFetchOrchestrator:
    """
    JarFetch 主协调器

    不保存任何请求间的状态，同样的输入和同样的上游数据总是得到同样的结果。
    """

    def __init__(self, client, upstream: Optional[UpstreamConfig] = None):
        self.upstream = upstream or UpstreamConfig()
        self.client = client
        self.catalog_client = CatalogClient(client, self.upstream.manifest_url)
        self.resolver = VersionResolver()
        self.locators = create_locator_registry(self.upstream)

    async def locate(
        self,
        version: str = "latest",
        version_type: str = "release",
        mod: Optional[str] = None,
    ) -> ResolvedArtifact:
        """
        解析请求并返回下载地址

        Args:
            version: 版本号、版本前缀、latest 或别名
            version_type: release / snapshot，其他值表示取清单第一个版本
            mod: 加载器名称，为空表示原版

        Raises:
            UnsupportedProviderError: 加载器名称无法识别
            VersionNotFoundError: 清单中找不到版本
            ArtifactNotFoundError: 加载器没有对应的下载
            UpstreamTransportError: 上游请求失败
        """
        # 在发起任何网络请求之前拒绝未知的加载器
        provider = Provider.parse(mod)
        type_filter = VersionTypeFilter.parse(version_type)

        catalog = await self.catalog_client.fetch_catalog()
        record = self.resolver.resolve(version, type_filter, catalog)
        if record is None:
            logger.warning(f"找不到版本: {version} (type={version_type})")
            raise VersionNotFoundError(
                context={"version": version, "type": version_type}
            )
        logger.info(f"版本 '{version}' 解析为 {record.id} ({record.type})")

        artifact = await self.locators[provider].locate(record, self.client)
        logger.info(
            f"[{provider.value}] {record.id} -> {artifact.filename} ({artifact.url})"
        )
        return artifact
