"""JSON schema for result tree documents."""
from __future__ import annotations

TREE_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "resultbridge tree",
    "definitions": {
        "result": {
            "type": "object",
            "required": ["state"],
            "additionalProperties": False,
            "properties": {
                "state": {"type": "string"},
                "site": {"type": "string"},
                "duration": {"type": "number", "minimum": 0},
                "asserts": {"type": "integer", "minimum": 0},
                "message": {"type": ["string", "null"]},
                "stack_trace": {"type": ["string", "null"]},
            },
        },
        "node": {
            "type": "object",
            "required": ["id", "name", "fullname"],
            "additionalProperties": False,
            "properties": {
                "id": {"type": "integer"},
                "name": {"type": "string"},
                "fullname": {"type": "string"},
                "suite": {"type": "boolean"},
                "type": {"type": "string"},
                "runstate": {"type": "string"},
                "properties": {
                    "type": "object",
                    "properties": {
                        "_CATEGORIES": {"type": "array", "items": {"type": "string"}},
                    },
                },
                "result": {"$ref": "#/definitions/result"},
                "children": {
                    "type": "array",
                    "items": {"$ref": "#/definitions/node"},
                },
            },
        },
    },
    "$ref": "#/definitions/node",
}
