"""Release signing gate and update installer for Android app packages.

Core design goals:
- Fail the packaging run before any work when release signing is unusable
- One signing identity for every release-type variant
- Install dispatch that picks the file exposure the device requires
- Centralized logging, secrets never logged
"""

__all__ = []
