"""
文件转发

把上游文件按块转发给 HTTP 调用方，或写入本地目录，整个过程不会把文件完整读入内存。
"""

import os

import aiofiles
from aiohttp import web
from loguru import logger

from jarfetch.exceptions import UpstreamTransportError
from jarfetch.models import ResolvedArtifact
from jarfetch.services.http_client import TRANSPORT_ERRORS

CHUNK_SIZE = 64 * 1024

# 逐跳头以及由 aiohttp 重新计算的头不转发
SKIPPED_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
        "content-length",
        "content-encoding",
        "content-disposition",
    }
)


def content_disposition(filename: str) -> str:
    """生成附件下载头"""
    return f'attachment; filename="{filename}"'


def relay_headers(upstream_headers) -> dict:
    """复制上游响应头，去掉不能原样转发的部分"""
    return {
        key: value
        for key, value in upstream_headers.items()
        if key.lower() not in SKIPPED_HEADERS
    }


class ArtifactStreamer:
    """文件转发器"""

    def __init__(self, client, chunk_size: int = CHUNK_SIZE):
        self.client = client
        self.chunk_size = chunk_size

    async def stream(
        self, request: web.Request, artifact: ResolvedArtifact
    ) -> web.StreamResponse:
        """
        获取 artifact.url 并把响应体转发给调用方

        响应头在第一块数据写出前发送，此后上游出错只能中断连接。
        """
        async with self.client.stream(artifact.url) as upstream:
            headers = relay_headers(upstream.headers)
            headers["Content-Disposition"] = content_disposition(artifact.filename)

            response = web.StreamResponse(status=200, headers=headers)
            await response.prepare(request)

            sent = 0
            try:
                async for chunk in upstream.content.iter_chunked(self.chunk_size):
                    await response.write(chunk)
                    sent += len(chunk)
            except TRANSPORT_ERRORS as e:
                logger.error(f"[转发] {artifact.filename} 在 {sent} 字节处中断: {e}")
                raise
            await response.write_eof()

        logger.info(f"[转发] {artifact.filename} 完成, {sent / (1024 * 1024):.2f} MB")
        return response

    async def save(self, artifact: ResolvedArtifact, download_dir: str) -> str:
        """
        下载到本地目录

        Returns:
            保存的文件路径
        """
        os.makedirs(download_dir, exist_ok=True)
        file_path = os.path.join(download_dir, artifact.filename)

        logger.info(f"[开始] 下载: {artifact.filename}")
        created = False
        try:
            async with self.client.stream(artifact.url) as upstream:
                async with aiofiles.open(file_path, "wb") as f:
                    created = True
                    async for chunk in upstream.content.iter_chunked(self.chunk_size):
                        await f.write(chunk)
        except BaseException as e:
            # 清理不完整的文件
            if created and os.path.exists(file_path):
                try:
                    os.remove(file_path)
                except OSError:
                    pass
            if isinstance(e, TRANSPORT_ERRORS):
                raise UpstreamTransportError(
                    f"download of {artifact.url} failed: {e}",
                    context={"url": artifact.url},
                ) from e
            raise

        logger.success(f"[完成] '{artifact.filename}' 已保存到 {file_path}")
        return file_path
