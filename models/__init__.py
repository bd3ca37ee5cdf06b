"""Vault data models"""

from models.vault import ALL, Asset, AssetType, Notification, NotificationKind, SessionState

__all__ = ["ALL", "Asset", "AssetType", "Notification", "NotificationKind", "SessionState"]
