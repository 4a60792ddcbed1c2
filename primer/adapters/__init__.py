"""
Adapters - imperative-shell implementations of component ports.
"""
