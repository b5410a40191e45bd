"""
mp_webhooks – webhook registration storage.

Import path convention::

    from mp_webhooks.application.webhooks import DbWebHookStore, WebHook
    from mp_webhooks.adapters.sqlalchemy import RegistrationMixin, create_webhook_store
    from mp_webhooks.kernel.errors import WebHookStoreError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
