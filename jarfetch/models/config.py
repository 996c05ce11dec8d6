"""
配置数据模型

定义服务监听地址和各上游地址的配置结构。
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from jarfetch.exceptions import ConfigValidationError

MOJANG_MANIFEST_URL = "https://launchermeta.mojang.com/mc/game/version_manifest_v2.json"
OPTIFINE_BASE_URL = "https://optifine.net/"
FORGE_BASE_URL = "https://files.minecraftforge.net/maven/net/minecraftforge/forge"
NEOFORGE_VERSIONS_URL = (
    "https://maven.neoforged.net/api/maven/versions/releases/net/neoforged/neoforge"
)
NEOFORGE_MAVEN_URL = "https://maven.neoforged.net/releases/net/neoforged/neoforge"
FABRIC_META_URL = "https://meta.fabricmc.net/v2"
LITELOADER_VERSIONS_URL = "http://dl.liteloader.com/versions/versions.json"
LITELOADER_BASE_URL = "http://dl.liteloader.com/versions"


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """取出配置中的某个表，缺省为空字典"""
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigValidationError(
            f"配置项 [{name}] 必须是一个表", context={"section": name}
        )
    return value


def _reject_unknown(cls, data: Dict[str, Any], name: str) -> None:
    unknown = set(data) - {f.name for f in fields(cls)}
    if unknown:
        raise ConfigValidationError(
            f"未知的 {name} 配置项: {', '.join(sorted(unknown))}",
            context={"section": name, "keys": sorted(unknown)},
        )


@dataclass
class ServerConfig:
    """HTTP 服务配置"""

    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ServerConfig":
        _reject_unknown(cls, data, "server")
        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool) or not 0 < port < 65536:
            raise ConfigValidationError(
                f"server.port 无效: {port!r}", context={"port": port}
            )
        return cls(host=str(data.get("host", "127.0.0.1")), port=port)


@dataclass
class UpstreamConfig:
    """上游地址配置，可替换为镜像站"""

    manifest_url: str = MOJANG_MANIFEST_URL
    optifine_base: str = OPTIFINE_BASE_URL
    forge_base: str = FORGE_BASE_URL
    neoforge_versions_url: str = NEOFORGE_VERSIONS_URL
    neoforge_maven: str = NEOFORGE_MAVEN_URL
    fabric_meta: str = FABRIC_META_URL
    liteloader_versions_url: str = LITELOADER_VERSIONS_URL
    liteloader_base: str = LITELOADER_BASE_URL
    timeout: Optional[float] = None
    user_agent: str = "jarfetch/0.1.0"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UpstreamConfig":
        _reject_unknown(cls, data, "upstream")

        timeout = data.get("timeout")
        if timeout is not None and (
            isinstance(timeout, bool)
            or not isinstance(timeout, (int, float))
            or timeout <= 0
        ):
            raise ConfigValidationError(
                f"upstream.timeout 无效: {timeout!r}", context={"timeout": timeout}
            )

        values = {key: str(value) for key, value in data.items() if key != "timeout"}
        return cls(timeout=timeout, **values)


@dataclass
class JarFetchConfig:
    """JarFetch 完整配置"""

    server: ServerConfig = field(default_factory=ServerConfig)
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JarFetchConfig":
        """从配置文件解析出的字典创建配置"""
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigValidationError("配置文件顶层必须是一个表")
        return cls(
            server=ServerConfig.from_dict(_section(data, "server")),
            upstream=UpstreamConfig.from_dict(_section(data, "upstream")),
        )
