from typing import Any, Dict, Literal, TypedDict, Union

ElasticType = Literal[
    "string",
    "text",
    "keyword",
    "date",
    "boolean",
    "binary",
    "integer",
    "byte",
    "short",
    "long",
    "float",
    "half_float",
    "double",
    "scaled_float",
    "ip",
    "geo_point",
    "geo_shape",
    "object",
    "nested",
]


class ElasticField(TypedDict, total=False):
    type: ElasticType
    index: Any
    analyzer: str
    store: bool
    format: str


class ElasticNestedField(TypedDict):
    """
    Use 'object' and 'nested' for nested structures
        - object: If the field is a dictionary (not an array of dictionaries)
        - nested: If the field is an array of dictionaries
    """

    type: Literal["object", "nested"]
    properties: Dict[str, Union["ElasticField", "ElasticNestedField"]]


ElasticMappingProperties = Dict[str, ElasticField | ElasticNestedField]

# Helper functions to create object and nested fields without too much boilerplate


def object_field(**properties: Union[ElasticField, ElasticNestedField]) -> ElasticNestedField:
    return {"type": "object", "properties": properties}


def nested_field(**properties: Union[ElasticField, ElasticNestedField]) -> ElasticNestedField:
    return {"type": "nested", "properties": properties}
