"""
Primer components.

Each component is independent: no component imports another.
"""
