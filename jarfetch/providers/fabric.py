"""
Fabric 安装器查找

Fabric 安装器与游戏版本无关，但只有 Fabric meta 中存在加载器的游戏版本才提供下载。
"""

from typing import Optional

from loguru import logger

from jarfetch.exceptions import ArtifactNotFoundError
from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.providers.base import ProviderLocator


class FabricLocator(ProviderLocator):
    provider = Provider.FABRIC

    async def _has_loader(self, record: VersionRecord, client) -> bool:
        meta = self.upstream.fabric_meta.rstrip("/")
        loaders = await client.get_json(f"{meta}/versions/loader/{record.id}")
        return isinstance(loaders, list) and len(loaders) > 0

    async def _pick_installer(self, client) -> Optional[dict]:
        meta = self.upstream.fabric_meta.rstrip("/")
        installers = await client.get_json(f"{meta}/versions/installer")
        if not isinstance(installers, list):
            return None
        installers = [
            entry
            for entry in installers
            if isinstance(entry, dict) and entry.get("url") and entry.get("version")
        ]
        if not installers:
            return None
        stable = [entry for entry in installers if entry.get("stable")]
        return stable[0] if stable else installers[0]

    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        installer = None
        if await self._has_loader(record, client):
            installer = await self._pick_installer(client)

        if installer is None:
            logger.warning(f"Fabric 不支持 {record.id} 或没有可用的安装器")
            raise ArtifactNotFoundError(
                "Fabric version not found", context={"version": record.id}
            )

        return ResolvedArtifact(
            url=str(installer["url"]),
            filename=f"fabric-installer-{installer['version']}.jar",
        )
