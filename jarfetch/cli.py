"""
CLI 模块

命令行接口实现：启动 HTTP 服务、解析下载地址、下载到本地。
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

import click
import toml
import yaml
from loguru import logger

from jarfetch.download import ArtifactStreamer
from jarfetch.exceptions import ConfigParseError, JarFetchError
from jarfetch.logger import setup_logger
from jarfetch.models import JarFetchConfig, ResolvedArtifact
from jarfetch.orchestrator import JarFetchOrchestrator
from jarfetch.server import run_server
from jarfetch.services import UpstreamClient


def load_config(config_path: Optional[str]) -> JarFetchConfig:
    """加载配置文件，未指定时使用默认配置"""
    if not config_path:
        return JarFetchConfig()

    path = Path(config_path)
    if not path.exists():
        raise click.ClickException(f"配置文件不存在: {config_path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = toml.load(config_path)
        elif suffix == ".json":
            data = json.loads(path.read_text())
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(path.read_text())
        else:
            raise click.ClickException(f"不支持的配置文件格式: {suffix}")
    except (toml.TomlDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigParseError(
            f"配置文件解析失败: {e}", context={"path": config_path}
        ) from e

    return JarFetchConfig.from_dict(data)


async def resolve_async(
    config: JarFetchConfig,
    version: str,
    version_type: str,
    mod: Optional[str],
    output_dir: Optional[str] = None,
) -> tuple[ResolvedArtifact, Optional[str]]:
    """解析下载地址，指定 output_dir 时同时下载"""
    upstream = config.upstream
    async with UpstreamClient(
        timeout=upstream.timeout, user_agent=upstream.user_agent
    ) as client:
        orchestrator = JarFetchOrchestrator(client, upstream)
        artifact = await orchestrator.locate(version, version_type, mod)
        saved_path = None
        if output_dir is not None:
            saved_path = await ArtifactStreamer(client).save(artifact, output_dir)
    return artifact, saved_path


def _run_resolve(config_path, version, version_type, mod, output_dir=None):
    try:
        config = load_config(config_path)
        return asyncio.run(
            resolve_async(config, version, version_type, mod, output_dir)
        )
    except JarFetchError as e:
        logger.error(f"{e}")
        detail = json.dumps(e.to_dict(), ensure_ascii=False, default=str)
        logger.debug(f"错误详情: {detail}")
        raise click.ClickException(e.message)


version_option = click.option(
    "-v",
    "--version",
    "version",
    default="latest",
    show_default=True,
    help="版本号、版本前缀、latest、april_fools 或 ancient",
)
type_option = click.option(
    "-t",
    "--type",
    "version_type",
    default="release",
    show_default=True,
    help="latest 使用的版本类型 (release / snapshot / 其他值取第一个)",
)
mod_option = click.option(
    "-m",
    "--mod",
    default=None,
    help="加载器: optifine / forge / neoforge / fabric / liteloader",
)
config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="配置文件路径 (.toml / .json / .yaml)",
)
debug_option = click.option("--debug", is_flag=True, help="启用调试模式")


@click.group()
@click.version_option(version="0.1.0")
def main():
    """JarFetch - Minecraft 客户端与加载器下载服务"""


@main.command()
@config_option
@click.option("--host", default=None, help="监听地址")
@click.option(
    "--port", type=click.IntRange(1, 65535), default=None, help="监听端口"
)
@debug_option
def serve(
    config_path: Optional[str],
    host: Optional[str],
    port: Optional[int],
    debug: bool,
):
    """启动 HTTP 下载服务"""
    setup_logger(level="DEBUG" if debug else None)
    try:
        config = load_config(config_path)
    except JarFetchError as e:
        raise click.ClickException(e.message)

    if host:
        config.server.host = host
    if port is not None:
        config.server.port = port
    run_server(config)


@main.command()
@version_option
@type_option
@mod_option
@config_option
@debug_option
def resolve(
    version: str,
    version_type: str,
    mod: Optional[str],
    config_path,
    debug: bool,
):
    """只解析下载地址，不下载"""
    setup_logger(level="DEBUG" if debug else "WARNING")
    artifact, _ = _run_resolve(config_path, version, version_type, mod)
    click.echo(artifact.url)
    click.echo(artifact.filename)


@main.command()
@version_option
@type_option
@mod_option
@config_option
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="保存目录",
)
@debug_option
def download(
    version: str,
    version_type: str,
    mod: Optional[str],
    config_path,
    output_dir: str,
    debug: bool,
):
    """解析并下载到本地目录"""
    setup_logger(level="DEBUG" if debug else None)
    _, saved_path = _run_resolve(config_path, version, version_type, mod, output_dir)
    click.echo(saved_path)


if __name__ == "__main__":
    main()
