"""Utilities."""

from .config import Config, expand_env, get_config, reset_config

__all__ = ['Config', 'expand_env', 'get_config', 'reset_config']
