"""Extension layer — test-runner integration.

The pytest plugin is loaded by pytest through the ``pytest11`` entry point.
Nothing here is imported by the core package.
"""
