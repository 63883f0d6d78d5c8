# -*- coding: utf-8 -*-

from check_params import check_params
from enet_errors import InvalidInputError


def parse_config(cfg, defaults):
    """
    Parse and validate solver options.

    Parameters:
    - cfg: Configuration to process (dict or None)
    - defaults: Default configuration (dict)

    Returns:
    - cfg: The parsed configuration with defaults applied
    """
    if cfg is None or not cfg:
        cfg = {}

    p = check_params(cfg, defaults)

    if 'alpha' in p:
        a = p['alpha']
        if a is None or not (0.0 <= float(a) <= 1.0):
            raise InvalidInputError(f"alpha must lie in [0, 1], got {a}")
    if 'tol' in p and not p['tol'] > 0:
        raise InvalidInputError(f"tol must be positive, got {p['tol']}")
    if 'max_iter' in p and int(p['max_iter']) < 1:
        raise InvalidInputError(f"max_iter must be at least 1, got {p['max_iter']}")
    if 'nlambda' in p and int(p['nlambda']) < 1:
        raise InvalidInputError(f"nlambda must be at least 1, got {p['nlambda']}")
    if 'lambda_min_ratio' in p and not (0.0 < p['lambda_min_ratio'] < 1.0):
        raise InvalidInputError(f"lambda_min_ratio must lie in (0, 1), got {p['lambda_min_ratio']}")
    if 'kfold' in p and p.get('foldid') is None and int(p['kfold']) < 2:
        raise InvalidInputError(f"kfold must be at least 2, got {p['kfold']}")

    return p
