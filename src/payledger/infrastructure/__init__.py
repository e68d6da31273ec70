"""Infrastructure layer — the ledger object and roster file I/O."""
