from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator


class NeoForgeLocator(ProviderLocator):
    provider = Provider.NEOFORGE

    async def _all_versions(self, client) -> list[str]:
        data = await client.get_json(self.upstream.neoforge_versions_url)
        # maven API 返回 {"isSnapshot": ..., "versions": [...]}，也兼容直接返回列表的镜像
        if isinstance(data, dict):
            data = data.get("versions")
        if not isinstance(data, list):
            return []
        return [v for v in data if isinstance(v, str)]

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        versions = await self._all_versions(client)
        # 不排序，按上游返回顺序取第一个
        compatible = next((v for v in versions if v.startswith(record.id)), None)
        if compatible is None:
            logger.warning(f"没有找到适用于 {record.id} 的 NeoForge 版本")
            raise ArtifactNotFoundError(
                "NeoForge version not found", context={"version": record.id}
            )

        base = self.upstream.neoforge_maven.rstrip("/")
        return ResolvedArtifact(
            url=f"{base}/{compatible}/neoforge-{compatible}-installer.jar",
            filename=f"neoforge-{compatible}-installer.jar",
        )
