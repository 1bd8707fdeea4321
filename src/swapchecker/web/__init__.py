"""Web boundary layer.

Presents quotes, users and swaps over HTTP. Controllers only translate
between contracts and the session; all decisions live in routing/,
ledger/ and services/.
"""

__all__ = [
    "contracts",
    "controllers",
]
