from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator


class VanillaLocator(ProviderLocator):
    provider = Provider.VANILLA

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        detail = await client.get_json(record.url)
        try:
            url = detail["downloads"]["client"]["url"]
        except (KeyError, TypeError):
            url = None
        if not url:
            logger.warning(f"版本 {record.id} 没有提供客户端下载")
            raise ArtifactNotFoundError(
                "Minecraft client download not found", context={"version": record.id}
            )
        return ResolvedArtifact(url=url, filename=f"minecraft-{record.id}.jar")
