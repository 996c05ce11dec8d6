"""
API 数据模型

定义版本清单、版本记录、加载器类型和解析结果等数据类。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from jarfetch.exceptions import UnsupportedProviderError


class VersionTypeFilter(Enum):
    """请求 latest 时使用的版本类型"""

    RELEASE = "release"
    SNAPSHOT = "snapshot"
    ANY = "any"

    @classmethod
    def parse(cls, value: Optional[str]) -> "VersionTypeFilter":
        """
        解析请求中的 type 参数

        只有精确的 "release" / "snapshot" 会被识别，其余值（包括大小写不同的写法）
        都按 ANY 处理，即取清单中的第一个版本。
        """
        if value == cls.RELEASE.value:
            return cls.RELEASE
        if value == cls.SNAPSHOT.value:
            return cls.SNAPSHOT
        return cls.ANY


class Provider(Enum):
    """下载渠道（原版或模组加载器）"""

    VANILLA = "vanilla"
    OPTIFINE = "optifine"
    FORGE = "forge"
    NEOFORGE = "neoforge"
    FABRIC = "fabric"
    LITELOADER = "liteloader"

    @classmethod
    def parse(cls, name: Optional[str]) -> "Provider":
        """
        解析 mod 参数，不区分大小写

        Raises:
            UnsupportedProviderError: 名称无法识别
        """
        if not name:
            return cls.VANILLA
        try:
            return cls(name.lower())
        except ValueError:
            raise UnsupportedProviderError(context={"mod": name}) from None


@dataclass(frozen=True)
class VersionRecord:
    """
    版本清单中的单个版本。
    """

    id: str
    type: str
    url: str

    @classmethod
    def from_manifest(cls, data: dict) -> "VersionRecord":
        """
        将版本清单中的条目转换为 VersionRecord 对象。
        """
        return cls(
            id=str(data.get("id", "")),
            type=str(data.get("type", "")),
            url=str(data.get("url", "")),
        )


@dataclass(frozen=True)
class Catalog:
    """版本清单快照"""

    entries: Tuple[VersionRecord, ...] = field(default_factory=tuple)
    latest_release: str = ""
    latest_snapshot: str = ""

    @classmethod
    def from_manifest(cls, data: dict) -> "Catalog":
        """
        将 version_manifest_v2.json 转换为 Catalog 对象，保持清单原有顺序。
        """
        latest = data.get("latest") or {}
        entries = []
        for item in data.get("versions") or []:
            if not isinstance(item, dict):
                continue
            record = VersionRecord.from_manifest(item)
            # 没有 id 的条目无法被匹配，直接跳过
            if record.id:
                entries.append(record)
        return cls(
            entries=tuple(entries),
            latest_release=str(latest.get("release", "")),
            latest_snapshot=str(latest.get("snapshot", "")),
        )


@dataclass(frozen=True)
class ResolvedArtifact:
    """最终可下载的文件"""

    url: str
    filename: str
