from enum import Enum


class Method(str, Enum):
    """HTTP verbs accepted by DocType.request"""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    HEAD = "HEAD"
