"""Merge subpackage for the merge branch action.

Modules:
    models: Value objects (references, branches, merge request and outcome)
    resolver: Resolution of raw names to repository references
    orchestrator: End-to-end merge flow and outcome reporting
"""

from __future__ import annotations

__all__: list[str] = []
