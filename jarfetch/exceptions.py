"""
JarFetch 统一异常体系

提供分层的异常结构，支持错误代码、HTTP 状态码、上下文信息和 JSON 序列化。
"""

from typing import Any, Dict, Optional


class JarFetchError(Exception):
    """JarFetch 基础异常类"""

    http_status: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self._get_default_code()
        self.context = context or {}

    def _get_default_code(self) -> str:
        """获取默认错误代码"""
        return "E000"

    def response_text(self) -> str:
        """返回给 HTTP 调用方的纯文本内容"""
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """将异常转换为字典格式"""
        return {
            "error": True,
            "code": self.code,
            "message": self.message,
            "context": self.context,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigError(JarFetchError):
    """配置相关错误"""

    def _get_default_code(self) -> str:
        return "E100"


class ConfigParseError(ConfigError):
    """配置解析错误"""

    def _get_default_code(self) -> str:
        return "E101"


class ConfigValidationError(ConfigError):
    """配置验证错误"""

    def _get_default_code(self) -> str:
        return "E102"


class UpstreamTransportError(JarFetchError):
    """上游请求失败（网络错误、响应无法解析）"""

    def _get_default_code(self) -> str:
        return "E200"

    def response_text(self) -> str:
        return f"Error: {self.message}"


class ResolveError(JarFetchError):
    """解析相关错误"""

    http_status = 404

    def _get_default_code(self) -> str:
        return "E300"


class VersionNotFoundError(ResolveError):
    """版本清单中找不到请求的版本"""

    def __init__(
        self,
        message: str = "Version not found",
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, context)

    def _get_default_code(self) -> str:
        return "E301"


class ArtifactNotFoundError(ResolveError):
    """加载器的查找流程完成，但没有找到可下载的文件"""

    def _get_default_code(self) -> str:
        return "E302"


class UnsupportedProviderError(ResolveError):
    """不支持的模组/加载器名称"""

    http_status = 400

    def __init__(
        self,
        message: str = "Unsupported mod type",
        code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, context)

    def _get_default_code(self) -> str:
        return "E303"


__all__ = [
    # 基础异常
    "JarFetchError",
    # 配置异常
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    # 上游异常
    "UpstreamTransportError",
    # 解析异常
    "ResolveError",
    "VersionNotFoundError",
    "ArtifactNotFoundError",
    "UnsupportedProviderError",
]
