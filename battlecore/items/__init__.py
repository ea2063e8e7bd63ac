"""
Items system module for the battlecore combat engine.

This module contains the catalog item record shared by weapons, armor,
shields and consumables.
"""

from .item import Item

__all__ = ["Item"]
