"""Elasticsearch connectors."""

from searchlink.adapters.elasticsearch.adapter import ElasticsearchTransport
from searchlink.adapters.elasticsearch.objects import ElasticsearchObjectService, IndexedObject

__all__ = ["ElasticsearchObjectService", "ElasticsearchTransport", "IndexedObject"]
