"""Shared building blocks used by the stores."""

from cmsadmin.shared.observable import Listener, Observable, Unsubscribe

__all__ = ["Listener", "Observable", "Unsubscribe"]
