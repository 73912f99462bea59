"""
Configuration handling for mastercorr.

Settings are read from JSON files and merged over ``DEFAULT_CONFIG``.
"""

import json
import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# RSAM archives hold one sample per minute
DEFAULT_SAMPLES_PER_DAY = 1440

DEFAULT_CONFIG = {
    'threshold': -1.0,
    'pre_trig': None,
    'post_trig': None,
    'samples_per_day': DEFAULT_SAMPLES_PER_DAY,
    'log_level': 'INFO',
}


def load_config(path=None):
    """
    Load a JSON configuration file merged over the defaults.

    Parameters
    ----------
    path : str, optional
        Path to a JSON file. If None, the defaults are returned.

    Returns
    -------
    config : dict
        Merged configuration
    """
    config = dict(DEFAULT_CONFIG)
    if path is None:
        return config

    with open(path) as fh:
        user_cfg = json.load(fh)

    unknown = sorted(set(user_cfg) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown configuration keys in {path}: {', '.join(unknown)}")

    config.update(user_cfg)
    logger.debug(f"Loaded configuration from {path}")
    return config


def extract_kwargs(config):
    """Keyword arguments for ``mastercorr.core.extract`` taken from a config."""
    return {
        'pre_trig': config.get('pre_trig'),
        'post_trig': config.get('post_trig'),
        'threshold': config.get('threshold', -1.0),
    }


def configure_logging(level='INFO'):
    """Set up root logging with the package format."""
    if isinstance(level, str):
        level = getattr(logging, level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
