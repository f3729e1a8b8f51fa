"""tinyshell package: a minimal asyncio command shell with pwd, ls and wget.

Entry point is ``tinyshell.main:main``; wiring lives in ``tinyshell.container``.
"""

__all__: list[str] = []
