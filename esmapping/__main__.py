"""
Submit and inspect elasticsearch type mappings
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from esmapping.config import ENV_PREFIX, Settings, get_settings
from esmapping.doctype import DocType
from esmapping.mapping import MappingType


def read_mapping(args) -> MappingType:
    with Path(args.file).open(encoding="utf-8") as f:
        data = json.load(f)
    if args.full:
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {args.file}, got {type(data).__name__}")
        mapping = MappingType()
        for key, value in data.items():
            mapping.set_param(key, value)
    else:
        mapping = MappingType.create(data)
    if args.disable_source:
        mapping.disable_source()
    if args.enable_ttl:
        mapping.enable_ttl()
    return mapping


def put_mapping(args):
    doctype = DocType(args.index, args.type)
    mapping = read_mapping(args)
    logging.info(f"Putting mapping for {args.index}/{args.type} from {args.file}")
    result = doctype.set_mapping(mapping)
    print(json.dumps(dict(result.body), indent=2))


def get_mapping(args):
    doctype = DocType(args.index, args.type)
    print(json.dumps(doctype.get_mapping(), indent=2))


def create_env(args):
    if os.path.exists(".env"):
        print("*** File .env already exists, quitting ***")
        sys.exit(1)

    host = args.elastic_host
    if not host:
        # the default host depends on whether a password is used
        password = args.elastic_password or get_settings().elastic_password
        host = Settings(elastic_password=password).elastic_host
    env = dict(elastic_host=host)
    if args.elastic_password:
        env["elastic_password"] = args.elastic_password
    with open(".env", "w") as f:
        for key, val in env.items():
            f.write(f"{ENV_PREFIX}{key}={val}\n")
    os.chmod(".env", 0o600)
    print("*** Created .env file ***")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__, prog="python -m esmapping")

    subparsers = parser.add_subparsers(dest="action", title="action", help="Action to perform:", required=True)
    p = subparsers.add_parser("put-mapping", help="Send a mapping read from a JSON file to a type")
    p.add_argument("index", help="Name of the index")
    p.add_argument("type", help="Name of the type within the index")
    p.add_argument("file", help="JSON file with the field properties")
    p.add_argument(
        "--full",
        action="store_true",
        help="The file contains all mapping entries (properties, _source, ...) instead of only the properties",
    )
    p.add_argument("--disable-source", action="store_true", help="Do not store the document source")
    p.add_argument("--enable-ttl", action="store_true", help="Enable _ttl for documents of this type")
    p.set_defaults(func=put_mapping)

    p = subparsers.add_parser("get-mapping", help="Print the current mapping of a type")
    p.add_argument("index", help="Name of the index")
    p.add_argument("type", help="Name of the type within the index")
    p.set_defaults(func=get_mapping)

    p = subparsers.add_parser("create-env", help="Create a .env file with the elasticsearch connection settings")
    p.add_argument("--elastic-host", help="Elasticsearch host")
    p.add_argument("--elastic-password", help="Password of the 'elastic' user")
    p.set_defaults(func=create_env)

    args = parser.parse_args(argv)

    logging.basicConfig(format="[%(levelname)-7s:%(name)-15s] %(message)s", level=logging.INFO)
    es_logger = logging.getLogger("elasticsearch")
    es_logger.setLevel(logging.WARNING)

    args.func(args)


if __name__ == "__main__":
    main()
