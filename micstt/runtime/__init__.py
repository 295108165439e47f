"""Runtime package.

Keep this module dependency-light: importing `micstt.runtime.*` in unit tests
should not open network clients.
"""

__all__: list[str] = []
