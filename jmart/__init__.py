"""Supermarket simulation: items, inventory, mesh geometry, OBJ and TGA loaders, and cameras."""

__version__ = "0.1.0"