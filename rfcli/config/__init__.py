# rfcli/config/__init__.py
from rfcli.config.loader import ConfigError, load_config
from rfcli.config.schema import RfcliConfig

__all__ = ["ConfigError", "RfcliConfig", "load_config"]
