"""Package manager handle used by the initializer and template installer."""

from rnscaffold.package_manager.manager import PackageManager, get_yarn_version_if_available, is_project_using_yarn

__all__ = ["PackageManager", "get_yarn_version_if_available", "is_project_using_yarn"]
