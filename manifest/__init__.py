"""
Manifest module for the README regenerator.

Reads the ordered list of workspace members from the workspace manifest.
"""

from manifest.ManifestReader import ManifestReader, read_manifest

__all__ = ["ManifestReader", "read_manifest"]
