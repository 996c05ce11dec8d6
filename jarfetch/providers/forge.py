"""
Forge 下载地址查找

Forge 的版本索引页只给出 adfoc.us 广告跳转地址，真正的安装器地址要跟随跳转后才能拿到。
"""

import re
from typing import Optional

from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator

REDIRECTOR_PATTERN = re.compile(
    r'data-clipboard-text="(https://adfoc\.us/serve/sitelinks/.*?)"'
)


def extract_forge_redirector(html: str) -> Optional[str]:
    """从索引页中提取第一个广告跳转地址"""
    match = REDIRECTOR_PATTERN.search(html)
    if match:
        return match.group(1)
    return None


class ForgeLocator(ProviderLocator):
    provider = Provider.FORGE

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        index_url = f"{self.upstream.forge_base.rstrip('/')}/index_{record.id}.html"
        html = await client.get_text(index_url)

        redirector = extract_forge_redirector(html)
        if redirector is None:
            logger.warning(f"Forge 索引页中没有找到 {record.id} 的下载链接")
            raise ArtifactNotFoundError(
                "Forge download link not found", context={"version": record.id}
            )

        final_url = await client.resolve_redirect(redirector)
        return ResolvedArtifact(
            url=final_url, filename=f"forge-{record.id}-installer.jar"
        )
