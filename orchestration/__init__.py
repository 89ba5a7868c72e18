"""
Orchestration module for the README regenerator.

Coordinates a run: reads the workspace members, then invokes the generator for
each member and for the workspace root, stopping at the first failure.
"""

from orchestration.Orchestrator import Orchestrator

__all__ = ["Orchestrator"]
