"""searchlink — Fuzzy full-text search over an Elasticsearch index, resolved to domain objects."""

__version__ = "0.1.0"
