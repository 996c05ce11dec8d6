from abc import ABC, abstractmethod

from jarfetch.models import Provider, ResolvedArtifact, VersionRecord
from jarfetch.models.config import UpstreamConfig


class ProviderLocator(ABC):
    provider: Provider

    def __init__(self, upstream: UpstreamConfig):
        self.upstream = upstream

    @abstractmethod
    async def locate(self, record: VersionRecord, client) -> ResolvedArtifact:
        """
        根据已解析的版本查找可下载的文件。

        Raises:
            ArtifactNotFoundError: 查找流程完成但没有匹配的文件
            UpstreamTransportError: 上游请求失败
        """
        pass
