"""
pushy_proxy – Pushy gateway backend for the push-notification proxy.

Import path convention::

    from pushy_proxy.notifications import PushNotification, PushResponse
    from pushy_proxy.notifications.pushy import PushyNotificationServer, PushySettings
    from pushy_proxy.config.settings import EnvSettingsLoader, SettingsFactory
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
