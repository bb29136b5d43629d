"""Transport layer — Connectors between searchlink and the search backend.

Built-in connectors:
  - elasticsearch: URI search over httpx, plus an ``_mget`` backed
    object service

Implement ``SearchTransport`` to connect another backend.
"""
