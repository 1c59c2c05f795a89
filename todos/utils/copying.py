import json


def deep_copy(value):
    """
    Return a copy of a JSON-compatible value that shares nothing with the original.

    Scalars (strings, numbers, booleans, None) are returned as they are.
    """
    if not isinstance(value, (dict, list)):
        return value
    return json.loads(json.dumps(value))
