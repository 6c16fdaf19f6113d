"""Finance bounded context: account categories, accounts and transactions."""
