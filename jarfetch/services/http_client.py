"""
上游 HTTP 客户端

封装 aiohttp 会话，为版本清单、各加载器的查找流程和文件转发提供统一的网络访问能力。
"""

import asyncio
import json
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

import aiohttp
from loguru import logger

from jarfetch.exceptions import UpstreamTransportError

# aiohttp 的整体超时抛出 asyncio.TimeoutError，它不是 ClientError 的子类
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


class UpstreamClient:
    """上游 HTTP 客户端"""

    def __init__(
        self,
        session: Optional[aiohttp.ClientSession] = None,
        timeout: Optional[float] = None,
        user_agent: str = "jarfetch/0.1.0",
    ):
        self._session = session
        self._owned_session = session is None
        self.timeout = timeout
        self.user_agent = user_agent

    @property
    def session(self) -> aiohttp.ClientSession:
        """获取或创建 aiohttp session"""
        if self._session is None or self._session.closed:
            kwargs = {"headers": {"User-Agent": self.user_agent}}
            if self.timeout is not None:
                kwargs["timeout"] = aiohttp.ClientTimeout(total=self.timeout)
            self._session = aiohttp.ClientSession(**kwargs)
        return self._session

    async def get_json(self, url: str) -> Any:
        """
        获取并解析 JSON

        非 2xx 响应不会直接视为错误，响应体照常解析。

        Raises:
            UpstreamTransportError: 网络错误或响应体不是合法 JSON
        """
        logger.debug(f"[上游] GET {url}")
        try:
            async with self.session.get(url) as response:
                text = await response.text(errors="replace")
        except TRANSPORT_ERRORS as e:
            raise UpstreamTransportError(
                f"request to {url} failed: {e}", context={"url": url}
            ) from e
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise UpstreamTransportError(
                f"invalid JSON from {url}: {e}", context={"url": url}
            ) from e

    async def get_text(self, url: str) -> str:
        """获取页面文本"""
        logger.debug(f"[上游] GET {url}")
        try:
            async with self.session.get(url) as response:
                return await response.text(errors="replace")
        except TRANSPORT_ERRORS as e:
            raise UpstreamTransportError(
                f"request to {url} failed: {e}", context={"url": url}
            ) from e

    async def resolve_redirect(self, url: str) -> str:
        """
        请求跳转地址并返回跟随重定向后的最终 URL

        只关心最终地址，不读取响应体。
        """
        logger.debug(f"[上游] 跟随跳转 {url}")
        try:
            async with self.session.get(url, allow_redirects=True) as response:
                final_url = str(response.url)
        except TRANSPORT_ERRORS as e:
            raise UpstreamTransportError(
                f"request to {url} failed: {e}", context={"url": url}
            ) from e
        logger.debug(f"[上游] {url} -> {final_url}")
        return final_url

    @asynccontextmanager
    async def stream(self, url: str) -> AsyncIterator[aiohttp.ClientResponse]:
        """
        打开一个流式响应，调用方通过 response.content.iter_chunked 读取
        """
        logger.debug(f"[上游] 流式获取 {url}")
        try:
            response = await self.session.get(url)
        except TRANSPORT_ERRORS as e:
            raise UpstreamTransportError(
                f"request to {url} failed: {e}", context={"url": url}
            ) from e
        try:
            yield response
        finally:
            response.release()

    async def close(self):
        """关闭客户端"""
        if self._owned_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """异步上下文管理器入口"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """异步上下文管理器出口"""
        await self.close()
