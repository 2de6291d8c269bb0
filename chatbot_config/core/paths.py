# chatbot_config/core/paths.py
"""
Central path management for chatbot-config.

Every component that needs a file location goes through ConfigPaths.
The workspace defaults to the current working directory and can be
overridden for tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class ConfigPaths:
    """
    Well-known file locations.

    Usage:
        from chatbot_config.core.paths import ConfigPaths

        config_path = ConfigPaths.config()   # ./bin/config.json

        # Override workspace for testing
        ConfigPaths.set_workspace("/tmp/test_workspace")
    """

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """Override the workspace root. Pass None to reset to CWD."""
        if path is None:
            cls._workspace_override = None
        else:
            cls._workspace_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD). Useful in tests."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """Root of the deployment project (default: CWD)."""
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd()

    @classmethod
    def config_dir(cls) -> Path:
        """Directory holding the deployment config: {workspace}/bin/"""
        return cls.workspace() / "bin"

    @classmethod
    def config(cls) -> Path:
        """The SystemConfig document: {workspace}/bin/config.json"""
        return cls.config_dir() / "config.json"
