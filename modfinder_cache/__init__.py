"""
modfinder-cache: moves uninstalled mods into a local side cache and restores them.
"""

__version__ = "1.0.0"
