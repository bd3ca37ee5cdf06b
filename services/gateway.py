# services/gateway.py

"""
gateway.py

Mock stand-ins for the services a real vault would call server-side:
the rewarded-ad callback (`POST /api/ads/callback`) and signed download
link issuance (`POST /api/assets/:id/download`). Both only sleep and answer;
neither can fail.
"""

import logging
import time

logger = logging.getLogger(__name__)


class AdRewardGateway:
    def __init__(self, latency=0.0):
        self.latency = latency

    def watch(self, amount=1):
        """Simulates the viewer sitting through an ad, then reports the reward."""
        if self.latency:
            time.sleep(self.latency)
        logger.info(f"Pretending an ad was watched, rewarding {amount} credit(s)")
        return amount


class DownloadGateway:
    def __init__(self, base_url, latency=0.0):
        self.base_url = base_url.rstrip('/')
        self.latency = latency

    def issue(self, asset_id):
        # In a real app this would be a short-lived signed URL.
        if self.latency:
            time.sleep(self.latency)
        url = f"{self.base_url}/{asset_id}"
        logger.info(f"Issued download link for asset {asset_id}")
        return url
