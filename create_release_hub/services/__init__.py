"""Non-interactive steps of the init command."""

from .config_writer import WriteError, write_config
from .dependency import is_library_installed
from .existing_config import find_config_files, has_existing_config
from .installer import install_dependency
from .package_manager import PackageManager, detect_package_manager

__all__ = [
    "PackageManager",
    "WriteError",
    "detect_package_manager",
    "find_config_files",
    "has_existing_config",
    "install_dependency",
    "is_library_installed",
    "write_config",
]
