"""
Utility Primer - small, independent utility components.

Each component under ``primer.components`` exposes pure functions plus
``run_*`` entry points that take an input model and return an output model.
"""

__version__ = "0.1.0"
