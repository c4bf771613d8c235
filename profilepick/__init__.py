"""Interactive terminal picker for AWS CLI profiles.

The command-line entrypoint is ``profilepick.cli.main``; the selection state
machine lives under ``profilepick.runtime``.
"""

__version__ = "0.1.0"
