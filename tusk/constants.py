"""
Constants for the Tusk CLI application.

Note: These constants serve as default fallback values.
Actual values are loaded from .tusk/config.json at runtime via ConfigManager.
"""
from pathlib import Path
from typing import Any, Optional
import json

# =============================================================================
# Default Fallback Values
# These are used if config.json doesn't exist or doesn't specify a value.
# =============================================================================

DEFAULT_DATA_FILE = "task_data.json"
DEFAULT_CONFIG_PATH = Path(".tusk") / "config.json"
DEFAULT_COLOR = True

# Environment variable read by the --data-file option
DATA_FILE_ENVVAR = "TUSK_DATA_FILE"

# User-facing messages (not configurable)
MSG_TASK_ADDED = "Task added to account '{name}'!"
MSG_TASK_DELETED = "Task deleted from account '{name}'!"
MSG_ACCOUNT_CLEARED = "Cleared the account '{name}'!"
MSG_ACCOUNT_NOT_FOUND = "Account '{name}' not found. Please create it first."
MSG_NO_SUCH_TASK = "No such task: {error}"
MSG_NO_TASKS = "No tasks available for account '{name}'!"
MSG_TASKS_HEADER = "Tasks for account '{name}':"
MSG_UNKNOWN_PRIORITY = "⚠ Unknown priority '{text}', defaulting to Low."

HELP_PAGE = """
Welcome to TUSK!

This CLI app helps you manage your tasks across different accounts.

Usage:
    tusk [SUBCOMMAND]

Subcommands:
    add                 Add a new task to an account            tusk add <account> "Task description"
    add-with-priority   Add a task with a priority              tusk add-with-priority <account> "Task description" high|medium|low
    delete              Delete a task from an account           tusk delete <account> <task_id>
    complete            Mark a task as completed                tusk complete <account> <task_id>
    uncomplete          Mark a completed task as incomplete     tusk uncomplete <account> <task_id>
    list                List all tasks for an account           tusk list <account>
    clear               Clear all tasks for an account          tusk clear <account>


Enjoy managing your tasks efficiently with TUSK :)!
"""


# =============================================================================
# Config Loader
# Load values from .tusk/config.json at runtime.
# =============================================================================

_config_manager_instance: Optional['ConfigManager'] = None


class ConfigManager:
    """
    Manages loading configuration from a config.json file with fallback to defaults.

    Usage:
        # With default path (.tusk/config.json)
        config = ConfigManager()
        data_file = config.get_str('data_file', DEFAULT_DATA_FILE)

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/config.json"))
        color = config.get_bool('color', DEFAULT_COLOR)
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Direct path to config.json file. Defaults to .tusk/config.json.
        """
        self._config: Optional[dict] = None
        self._config_path = config_path if config_path is not None else DEFAULT_CONFIG_PATH

    def _load_config(self) -> dict:
        """Load config from config.json file."""
        if self._config is not None:
            return self._config

        if self._config_path.exists():
            try:
                with open(self._config_path, "r") as f:
                    loaded = json.load(f)
                self._config = loaded if isinstance(loaded, dict) else {}
            except (json.JSONDecodeError, IOError):
                self._config = {}
        else:
            self._config = {}

        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a config value with fallback to default.

        Args:
            key: Configuration key name.
            default: Default value if key not found.

        Returns:
            Config value or default.
        """
        config = self._load_config()
        return config.get(key, default)

    def get_str(self, key: str, default: str) -> str:
        """Get a string config value with fallback."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean config value with fallback."""
        value = self.get(key, default)
        return value if isinstance(value, bool) else default

    def reload(self) -> dict:
        """Force reload of config from disk."""
        self._config = None
        return self._load_config()

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path


def get_config_manager(reset: bool = False) -> ConfigManager:
    """
    Get the singleton ConfigManager instance with default path.

    Args:
        reset: If True, reset the singleton and create a new instance.

    Returns:
        ConfigManager singleton instance.
    """
    global _config_manager_instance
    if _config_manager_instance is None or reset:
        _config_manager_instance = ConfigManager()
    return _config_manager_instance


def reset_config_manager() -> None:
    """Reset the singleton ConfigManager instance (useful for testing)."""
    global _config_manager_instance
    _config_manager_instance = None


def get_data_file() -> Path:
    """Get the task data file path from config or default."""
    return Path(get_config_manager().get_str('data_file', DEFAULT_DATA_FILE))


def get_color_enabled() -> bool:
    """Get whether priorities are rendered in color from config or default."""
    return get_config_manager().get_bool('color', DEFAULT_COLOR)
