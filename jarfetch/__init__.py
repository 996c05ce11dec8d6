"""
JarFetch - Minecraft 客户端与加载器下载服务

把宽松的版本输入解析为 Mojang 版本清单中的具体版本，再查找原版或加载器的下载地址。
"""

__version__ = "0.1.0"

from jarfetch.orchestrator import JarFetchOrchestrator
from jarfetch.server import JarFetchServer
from jarfetch.exceptions import JarFetchError
from jarfetch.logger import setup_logger

__all__ = [
    "JarFetchOrchestrator",
    "JarFetchServer",
    "JarFetchError",
    "setup_logger",
    "__version__",
]
