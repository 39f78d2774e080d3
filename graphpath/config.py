"""
Scenario configuration loaded from YAML.

Keys (defaults in DEFAULT_CONFIG):
    vertices   : number of vertices to create (ids A, B, C, ...)
    edges      : list of [u, v, weight]
    source     : start vertex id
    target     : end vertex id
    queries    : extra [source, target] pairs to evaluate
    trace      : record every iteration of the main loop
    plot       : draw the result with matplotlib
    plot_path  : where to save the drawing (None shows a window)
    log_level  : logging level name
"""

import copy

import yaml

DEFAULT_CONFIG = {
    'vertices': 0,
    'edges': [],
    'source': None,
    'target': None,
    'queries': [],
    'trace': False,
    'plot': False,
    'plot_path': None,
    'log_level': 'WARNING'
}


class ConfigError(ValueError):
    """Malformed scenario file."""


def _check_pairs(name, items, size):
    if not isinstance(items, list):
        raise ConfigError(f"'{name}' must be a list")
    for item in items:
        if not isinstance(item, (list, tuple)) or len(item) != size:
            raise ConfigError(f"'{name}' entries must have {size} items, got {item!r}")


def load_config(path):
    with open(path) as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    config = copy.deepcopy(DEFAULT_CONFIG)
    config.update(data)
    _check_pairs('edges', config['edges'], 3)
    _check_pairs('queries', config['queries'], 2)
    return config
