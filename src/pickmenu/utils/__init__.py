"""Utilities for pickmenu."""

from pickmenu.utils.config import Config, get_pickmenu_dir

__all__ = ["Config", "get_pickmenu_dir"]
