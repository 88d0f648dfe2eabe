"""In-memory account storage and row normalization."""

from backoffice.store.accounts import AccountStore, account_from_row

__all__ = ["AccountStore", "account_from_row"]
