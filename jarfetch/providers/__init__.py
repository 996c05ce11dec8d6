"""
JarFetch 加载器定位层

每个下载渠道一个定位器，负责把已解析的版本转换为具体的下载地址。
"""

from typing import Dict, Optional

from jarfetch.models import Provider
from jarfetch.models.config import UpstreamConfig
from jarfetch.providers.base import ProviderLocator
from jarfetch.providers.fabric import FabricLocator
from jarfetch.providers.forge import ForgeLocator, extract_forge_redirector
from jarfetch.providers.liteloader import LiteLoaderLocator
from jarfetch.providers.neoforge import NeoForgeLocator
from jarfetch.providers.optifine import OptiFineLocator, extract_optifine_link
from jarfetch.providers.vanilla import VanillaLocator


def create_locator_registry(
    upstream: Optional[UpstreamConfig] = None,
) -> Dict[Provider, ProviderLocator]:
    """创建 Provider -> 定位器 的映射，覆盖所有 Provider 成员"""
    upstream = upstream or UpstreamConfig()
    locators = [
        VanillaLocator(upstream),
        OptiFineLocator(upstream),
        ForgeLocator(upstream),
        NeoForgeLocator(upstream),
        FabricLocator(upstream),
        LiteLoaderLocator(upstream),
    ]
    registry = {locator.provider: locator for locator in locators}
    missing = set(Provider) - set(registry)
    if missing:
        raise RuntimeError(f"缺少定位器: {sorted(p.value for p in missing)}")
    return registry


__all__ = [
    "ProviderLocator",
    "VanillaLocator",
    "OptiFineLocator",
    "ForgeLocator",
    "NeoForgeLocator",
    "FabricLocator",
    "LiteLoaderLocator",
    "create_locator_registry",
    "extract_optifine_link",
    "extract_forge_redirector",
]
