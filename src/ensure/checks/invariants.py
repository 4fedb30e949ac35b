"""Formal check invariants.

This file documents what each check verifies and what it hands back.
Use it as a reviewer anchor; tests keep it in step with the public API.
"""

CHECK_INVARIANTS = {
    "ensure_true": "condition is truthy",
    "ensure_false": "condition is falsy",
    "fail": "never satisfied (unreachable code)",
    "ensure_not_null": "value is not None",
    "ensure_null": "value is None",
    "ensure_equals": "both None, or expected equals value",
    "ensure_not_equals": "exactly one is None, or expected differs from value",
    "ensure_not_empty": "value is not None and its size is not 0",
    "ensure_empty": "value is None or its size is 0",
    "ensure_instance_of": "type_ is a type (not None); value is not None and an instance of type_",
    "ensure_optional": "the optional holds a value",
    "ensure_one": "collection is not None and its size is exactly 1",
    "ensure_exists": "path is not None and an entry exists at path",
    "ensure_not_exists": "path is not None and no entry exists at path",
    "ensure_directory": "path is not None and is a directory",
}

# What a satisfied check returns
PASS_THROUGH_CHECKS = {
    "ensure_not_null": "value",
    "ensure_equals": "value",
    "ensure_not_equals": "value",
    "ensure_not_empty": "value",
    "ensure_empty": "value",
    "ensure_instance_of": "value",
    "ensure_optional": "value",
    "ensure_exists": "path",
    "ensure_not_exists": "path",
    "ensure_directory": "path",
    "ensure_one": "the single element",
}
