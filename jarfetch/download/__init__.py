"""
JarFetch 下载层

负责把解析出的文件转发给调用方或保存到本地。
"""

from jarfetch.download.streamer import ArtifactStreamer, content_disposition

__all__ = [
    "ArtifactStreamer",
    "content_disposition",
]
