"""Infrastructure layer — ledger state, transactions, and SQLite snapshot store.

This layer depends on stdlib, SQLAlchemy, and the domain record models.
It must never import from services, commands, or output.
"""
