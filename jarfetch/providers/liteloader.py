from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator


class LiteLoaderLocator(ProviderLocator):
    provider = Provider.LITELOADER

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        data = await client.get_json(self.upstream.liteloader_versions_url)
        try:
            artefact = data["mcVersions"][record.id]["latest"]["artefact"]
            version = artefact["version"]
            file = artefact["file"]
        except (KeyError, TypeError):
            logger.warning(f"没有找到适用于 {record.id} 的 LiteLoader 版本")
            raise ArtifactNotFoundError(
                "LiteLoader version not found", context={"version": record.id}
            ) from None

        base = self.upstream.liteloader_base.rstrip("/")
        return ResolvedArtifact(
            url=f"{base}/{record.id}/{version}/{file}",
            filename=f"liteloader-{record.id}-{version}.jar",
        )
