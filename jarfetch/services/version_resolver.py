"""
版本解析服务

把用户输入的版本（latest、精确版本号、版本前缀或别名）解析为清单中的具体版本。
"""

from typing import Callable, Optional

from jarfetch.models import Catalog, VersionRecord, VersionTypeFilter

LATEST = "latest"
APRIL_FOOLS_ALIAS = "april_fools"
ANCIENT_ALIAS = "ancient"
ANCIENT_TYPES = ("old_alpha", "old_beta")


def _first(
    catalog: Catalog, predicate: Callable[[VersionRecord], bool]
) -> Optional[VersionRecord]:
    """按清单顺序返回第一个满足条件的版本"""
    for record in catalog.entries:
        if predicate(record):
            return record
    return None


class VersionResolver:
    """版本解析器"""

    def resolve(
        self,
        token: str,
        type_filter: VersionTypeFilter,
        catalog: Catalog,
    ) -> Optional[VersionRecord]:
        """
        解析版本

        Args:
            token: 用户输入的版本，除两个别名外不做任何大小写或空白处理
            type_filter: 版本类型，仅在 token 为 latest 时生效
            catalog: 版本清单

        Returns:
            匹配的版本记录，找不到时返回 None
        """
        if token == LATEST:
            return self._resolve_latest(type_filter, catalog)

        # 精确匹配优先于前缀匹配
        record = _first(catalog, lambda r: r.id == token)
        if record is None:
            record = _first(catalog, lambda r: r.id.startswith(token))
        if record is None:
            record = self._resolve_alias(token, catalog)
        return record

    def _resolve_latest(
        self, type_filter: VersionTypeFilter, catalog: Catalog
    ) -> Optional[VersionRecord]:
        if type_filter is VersionTypeFilter.RELEASE:
            return _first(catalog, lambda r: r.id == catalog.latest_release)
        if type_filter is VersionTypeFilter.SNAPSHOT:
            return _first(catalog, lambda r: r.id == catalog.latest_snapshot)
        return catalog.entries[0] if catalog.entries else None

    def _resolve_alias(self, token: str, catalog: Catalog) -> Optional[VersionRecord]:
        alias = token.lower()
        if alias == APRIL_FOOLS_ALIAS:
            return _first(catalog, lambda r: "April Fools" in r.id)
        if alias == ANCIENT_ALIAS:
            # 单次扫描，alpha 和 beta 谁在清单中靠前就返回谁
            return _first(catalog, lambda r: r.type in ANCIENT_TYPES)
        return None
