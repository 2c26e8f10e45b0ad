"""
Elasticsearch (document) types

A DocType names a type within an index and sends requests relative to its url,
i.e. DocType("news", "article").request("_mapping") requests /news/article/_mapping.
"""

import logging
from typing import Any, Mapping, Optional

from elasticsearch import Elasticsearch

from esmapping.elastic_connection import elastic_connection
from esmapping.mapping import MAPPING_PATH, MappingType
from esmapping.request import Method

JSON_HEADERS = {"accept": "application/json", "content-type": "application/json"}


class DocType:
    def __init__(self, index: str, name: str, elastic: Optional[Elasticsearch] = None):
        self.index = index
        self.name = name
        self._elastic = elastic

    @property
    def elastic(self) -> Elasticsearch:
        if self._elastic is None:
            self._elastic = elastic_connection()
        return self._elastic

    def get_name(self) -> str:
        return self.name

    def get_index(self) -> str:
        return self.index

    def path(self, path: str = "") -> str:
        base = f"/{self.index}/{self.name}"
        return f"{base}/{path.lstrip('/')}" if path else base

    def request(self, path: str, method: Method = Method.GET, body: Optional[Mapping[str, Any]] = None):
        """
        Send a request to path relative to this type, and return the elastic response
        Errors raised by the elasticsearch client are not caught
        """
        url = self.path(path)
        logging.debug(f"{Method(method).value} {url}")
        headers = JSON_HEADERS if body is not None else {"accept": "application/json"}
        return self.elastic.perform_request(Method(method).value, url, headers=headers, body=body)

    def set_mapping(self, mapping: "Mapping[str, Any] | MappingType"):
        """
        Set the mapping of this type from a MappingType or a properties dict
        """
        m = MappingType.create(mapping)
        m.set_type(self)
        return m.send()

    def get_mapping(self) -> dict:
        return dict(self.request(MAPPING_PATH, Method.GET).body)

    def __repr__(self) -> str:
        return f"<DocType {self.index}/{self.name}>"
