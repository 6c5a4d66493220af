from .android import AndroidResourceSource
from .base import ConfigurationSource
from .env_file import DotenvSource
from .plist import PlistSource

__all__ = ["AndroidResourceSource", "ConfigurationSource", "DotenvSource", "PlistSource"]
