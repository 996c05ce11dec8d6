"""
版本清单服务

每次请求都重新获取 Mojang 版本清单，不做任何缓存。
"""

from loguru import logger

from jarfetch.exceptions import UpstreamTransportError
from jarfetch.models import Catalog
from jarfetch.models.config import MOJANG_MANIFEST_URL


class CatalogClient:
    """版本清单客户端"""

    def __init__(self, client, manifest_url: str = MOJANG_MANIFEST_URL):
        self.client = client
        self.manifest_url = manifest_url

    async def fetch_catalog(self) -> Catalog:
        """
        获取并解析版本清单

        Raises:
            UpstreamTransportError: 清单获取失败或结构无法识别
        """
        data = await self.client.get_json(self.manifest_url)
        if not isinstance(data, dict):
            raise UpstreamTransportError(
                "version manifest has an unexpected shape",
                context={"url": self.manifest_url},
            )
        catalog = Catalog.from_manifest(data)
        logger.debug(
            f"[清单] 共 {len(catalog.entries)} 个版本, "
            f"最新正式版 {catalog.latest_release}, 最新快照 {catalog.latest_snapshot}"
        )
        return catalog
