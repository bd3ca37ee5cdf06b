# services/catalog.py

"""
catalog.py

The mocked catalog query service. `filter` is the whole query contract; `query`
wraps it with an artificial delay standing in for `GET /api/assets`.
"""

import logging
import time

from models.vault import ALL, Asset, AssetType

logger = logging.getLogger(__name__)


class CatalogService:
    def __init__(self, assets, latency=0.0):
        self._assets = tuple(assets)
        self._by_id = {}
        for asset in self._assets:
            if asset.id in self._by_id:
                raise ValueError(f"Duplicate asset id in catalog: {asset.id}")
            self._by_id[asset.id] = asset
        self.latency = latency
        logger.info(f"Catalog loaded with {len(self._assets)} assets")

    @classmethod
    def from_records(cls, records, latency=0.0):
        return cls([Asset.from_dict(r) for r in records], latency=latency)

    @property
    def assets(self):
        return list(self._assets)

    def get(self, asset_id):
        return self._by_id.get(asset_id)

    def featured(self):
        """The asset shown in the hero section."""
        return self._assets[0] if self._assets else None

    def types(self):
        return [ALL] + [t.value for t in AssetType]

    def tags(self):
        """All tags in first-seen order, preceded by the catch-all filter."""
        seen = []
        for asset in self._assets:
            for tag in asset.tags:
                if tag not in seen:
                    seen.append(tag)
        return [ALL] + seen

    def filter(self, text='', type_filter=ALL, tag_filter=ALL):
        needle = (text or '').strip().lower()
        type_filter = type_filter or ALL
        tag_filter = tag_filter or ALL

        matches = []
        for asset in self._assets:
            if needle and needle not in asset.title.lower():
                continue
            if type_filter != ALL and asset.type.value != type_filter:
                continue
            if tag_filter != ALL and not asset.has_tag(tag_filter):
                continue
            matches.append(asset)
        return matches

    def query(self, text='', type_filter=ALL, tag_filter=ALL):
        if self.latency:
            time.sleep(self.latency)  # Network latency
        results = self.filter(text, type_filter, tag_filter)
        logger.debug(f"Catalog query q={text!r} type={type_filter} tag={tag_filter} -> {len(results)} results")
        return results
