"""Domain layer — the stand-in and its interception table.

This layer depends only on the standard library.
It must never import from config, plugins, or serialization.
"""
