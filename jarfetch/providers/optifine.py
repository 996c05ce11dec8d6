"""
OptiFine 下载地址查找

OptiFine 没有 API，需要抓取下载页面中紧挨着 onclick 的 href。
"""

import re
from typing import Optional
from urllib.parse import urljoin

from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator

DOWNLOAD_LINK_PATTERN = re.compile(r"href='(.*?)' onclick")


def extract_optifine_link(html: str) -> Optional[str]:
    """从 adloadx 页面中提取相对下载链接"""
    match = DOWNLOAD_LINK_PATTERN.search(html)
    if match:
        return match.group(1)
    return None


class OptiFineLocator(ProviderLocator):
    provider = Provider.OPTIFINE

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        filename = f"OptiFine_{record.id}.jar"
        page_url = urljoin(self.upstream.optifine_base, f"adloadx?f={filename}")
        html = await client.get_text(page_url)

        link = extract_optifine_link(html)
        if link is None:
            logger.warning(f"OptiFine 页面中没有找到 {record.id} 的下载链接")
            raise ArtifactNotFoundError(
                "OptiFine download link not found", context={"version": record.id}
            )
        return ResolvedArtifact(
            url=urljoin(self.upstream.optifine_base, link), filename=filename
        )
