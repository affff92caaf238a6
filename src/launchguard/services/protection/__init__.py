"""Launch protection service package."""

from launchguard.services.protection.launch_scheduler import LaunchScheduler
from launchguard.services.protection.purchase_gate import PurchaseGate

__all__ = [
    "LaunchScheduler",
    "PurchaseGate",
]
