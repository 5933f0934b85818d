"""Configuration layer — settings discovery and logging setup.

Settings only steer logging. They never change how a stand-in behaves.
"""
