# -*- coding: utf-8 -*-

import copy

from enet_errors import InvalidInputError


def check_params(s, defaults, required=None, strict=True):
    """
    Verifies parameter structure and sets defaults for optional parameters.

    Parameters:
    - s: The parameters structure to check (dict)
    - defaults: The default values for optional parameters (dict)
    - required: The names of the required parameters (list of strings)
    - strict: Reject keys that are neither in `defaults` nor `required`.
      Nested dicts are merged non-strictly.

    Returns:
    - s: The parameters structure with the missing values replaced by defaults

    Note: This function is called by parse_config.py
    """
    if required is None:
        required = []

    for req in required:
        if req not in s:
            raise InvalidInputError(f"Field '{req}' is required")

    if strict:
        known = set(defaults) | set(required)
        unknown = sorted(k for k in s if k not in known)
        if unknown:
            raise InvalidInputError(f"Unknown option(s): {', '.join(unknown)}")

    # Deep copy defaults to avoid mutation
    result = copy.deepcopy(defaults)

    for key, value in s.items():
        if isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = check_params(value, result[key], strict=False)
        else:
            result[key] = value

    return result
