#!/usr/bin/env python3
"""
Schema validation for Gigalixir CLI output.
Checks `gigalixir ps` and `gigalixir releases` JSON before it is interpreted.
"""

import json
from functools import lru_cache
from pathlib import Path

import jsonschema

SCHEMA_DIR = Path(__file__).parent.parent.parent / 'schemas'

PS_SCHEMA = 'ps-schema.json'
RELEASES_SCHEMA = 'releases-schema.json'


@lru_cache(maxsize=None)
def load_schema(schema_name):
    with open(SCHEMA_DIR / schema_name, 'r') as f:
        return json.load(f)


def validate_against_schema(payload, schema_name):
    """
    Validate decoded CLI output against a bundled JSON schema.
    Returns (is_valid, errors_list)
    """
    schema = load_schema(schema_name)

    try:
        jsonschema.validate(instance=payload, schema=schema)
        return True, []
    except jsonschema.ValidationError as e:
        error_path = ' -> '.join(str(p) for p in e.path) if e.path else 'root'
        return False, [f"Schema validation failed at '{error_path}': {e.message}"]
    except jsonschema.SchemaError as e:
        return False, [f"Schema file is invalid: {e.message}"]
