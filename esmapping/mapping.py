"""
Type mappings

A MappingType collects the entries of an elasticsearch type mapping (properties, _source, _ttl, ...)
and submits them to the _mapping endpoint of the type it is attached to:

    MappingType(doctype).set_properties({"name": {"type": "string"}}).disable_source().send()

This sends PUT <index>/<type>/_mapping with body {<type>: {"properties": ..., "_source": {"enabled": false}}}.
Entry values are passed on as given, elasticsearch is responsible for validating them.
See http://www.elasticsearch.org/guide/reference/mapping/
"""

import copy
import logging
from typing import Any, Mapping, Optional, Protocol

from esmapping.elastic_mapping import ElasticMappingProperties
from esmapping.exceptions import InvalidException
from esmapping.request import Method

MAPPING_PATH = "_mapping"


class TypeLike(Protocol):
    """The part of a type that a mapping needs: a name and a way to send requests to it"""

    def get_name(self) -> str: ...

    def request(self, path: str, method: Method = ..., body: Optional[Mapping[str, Any]] = None) -> Any: ...


class MappingType:
    def __init__(self, type: Optional[TypeLike] = None, properties: Optional[ElasticMappingProperties] = None):
        self._mapping: dict[str, Any] = {}
        self._type: Optional[TypeLike] = None
        if type is not None:
            self.set_type(type)
        if properties:
            self.set_properties(properties)

    def set_type(self, type: TypeLike) -> "MappingType":
        self._type = type
        return self

    def get_type(self) -> Optional[TypeLike]:
        return self._type

    def set_param(self, key: str, value: Any) -> "MappingType":
        """
        Set a raw mapping entry, overwriting any earlier value for this key.

        Possible keys: _uid, _id, _type, _source, _all, _analyzer, _boost, _parent, _routing,
        _index, _size, _ttl, properties
        """
        self._mapping[key] = copy.deepcopy(value)
        return self

    def get_param(self, key: str) -> Any:
        return self._mapping.get(key)

    def set_properties(self, properties: ElasticMappingProperties) -> "MappingType":
        return self.set_param("properties", properties)

    def set_source(self, source: Mapping[str, Any]) -> "MappingType":
        """To disable the source, use {"enabled": False} (or disable_source())"""
        return self.set_param("_source", source)

    def disable_source(self, enabled: bool = False) -> "MappingType":
        """Disable storing the document source. Pass enabled=True to enable it again"""
        return self.set_source({"enabled": enabled})

    def set_ttl(self, params: Mapping[str, Any]) -> "MappingType":
        """Set the _ttl entry, e.g. {"enabled": True, "default": "1d"}"""
        return self.set_param("_ttl", params)

    def enable_ttl(self, enabled: bool = True) -> "MappingType":
        return self.set_ttl({"enabled": enabled})

    def _require_type(self) -> TypeLike:
        if self._type is None:
            raise InvalidException("Type has to be set")
        return self._type

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """
        Return the mapping as {type_name: entries}
        :raises InvalidException: if no type is set
        """
        type = self._require_type()
        return {type.get_name(): copy.deepcopy(self._mapping)}

    to_array = to_dict

    def send(self) -> Any:
        """
        PUT this mapping to the _mapping endpoint of its type and return the response
        """
        type = self._require_type()
        body = self.to_dict()
        logging.debug(f"Sending mapping for type {type.get_name()!r}: {list(self._mapping)}")
        return type.request(MAPPING_PATH, Method.PUT, body)

    @classmethod
    def create(cls, mapping: "Mapping[str, Any] | MappingType") -> "MappingType":
        """
        Create a mapping from a properties dict, or return the given mapping object unchanged
        :raises InvalidException: if mapping is neither
        """
        if isinstance(mapping, MappingType):
            return mapping
        if isinstance(mapping, Mapping):
            return cls().set_properties(dict(mapping))
        raise InvalidException("Invalid object type")

    def __repr__(self) -> str:
        name = self._type.get_name() if self._type is not None else None
        return f"<MappingType type={name!r} {self._mapping!r}>"
