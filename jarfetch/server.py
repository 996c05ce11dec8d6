"""
HTTP 服务

基于 aiohttp.web，把 version / type / mod 查询参数解析为下载，并把错误映射为纯文本响应。
"""

from typing import Optional

from aiohttp import web
from loguru import logger

from jarfetch.download import ArtifactStreamer
from jarfetch.exceptions import JarFetchError
from jarfetch.models import JarFetchConfig
from jarfetch.orchestrator import JarFetchOrchestrator
from jarfetch.services import UpstreamClient


def error_response(error: JarFetchError) -> web.Response:
    """把异常转换为纯文本响应"""
    return web.Response(status=error.http_status, text=error.response_text())


class JarFetchServer:
    """
    JarFetch HTTP 服务

    上游客户端可以从外部注入（测试时使用假客户端），否则在应用启动时创建、清理时关闭。
    """

    def __init__(self, config: Optional[JarFetchConfig] = None, client=None):
        self._config = config or JarFetchConfig()
        self._client = client
        self._owned_client = client is None
        self._orchestrator: Optional[JarFetchOrchestrator] = None
        self._streamer: Optional[ArtifactStreamer] = None

    def create_app(self) -> web.Application:
        """创建 aiohttp 应用"""
        app = web.Application()
        app.router.add_get("/health", self._health_check)
        app.router.add_get("/{tail:.*}", self._handle_download)
        app.on_startup.append(self._on_startup)
        app.on_cleanup.append(self._on_cleanup)
        return app

    async def _on_startup(self, app: web.Application) -> None:
        if self._client is None:
            upstream = self._config.upstream
            self._client = UpstreamClient(
                timeout=upstream.timeout, user_agent=upstream.user_agent
            )
        self._orchestrator = JarFetchOrchestrator(self._client, self._config.upstream)
        self._streamer = ArtifactStreamer(self._client)
        logger.info(
            f"JarFetch 服务启动于 http://{self._config.server.host}:{self._config.server.port}"
        )

    async def _on_cleanup(self, app: web.Application) -> None:
        if self._owned_client and self._client is not None:
            await self._client.close()
            self._client = None
        logger.info("JarFetch 服务已停止")

    async def _health_check(self, request: web.Request) -> web.Response:
        return web.json_response({"status": "ok"})

    async def _handle_download(self, request: web.Request) -> web.StreamResponse:
        version = request.query.get("version") or "latest"
        version_type = request.query.get("type") or "release"
        mod = request.query.get("mod")

        try:
            artifact = await self._orchestrator.locate(version, version_type, mod)
        except JarFetchError as e:
            logger.warning(f"请求 {request.path_qs} 失败: {e}")
            return error_response(e)
        except Exception as e:
            logger.exception(f"请求 {request.path_qs} 出现未预期的错误: {e}")
            return web.Response(status=500, text=f"Error: {e}")

        # 响应头发出之后的错误无法再返回错误页，直接向上抛出由 aiohttp 中断连接
        try:
            return await self._streamer.stream(request, artifact)
        except JarFetchError as e:
            logger.warning(f"转发 {artifact.url} 失败: {e}")
            return error_response(e)


def run_server(config: JarFetchConfig) -> None:
    """阻塞运行 HTTP 服务直到被中断"""
    server = JarFetchServer(config)
    web.run_app(
        server.create_app(),
        host=config.server.host,
        port=config.server.port,
        print=None,
    )
