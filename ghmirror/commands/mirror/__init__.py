from .service import mirror_account, reconcile

__all__ = ["mirror_account", "reconcile"]
