from .config import Config, init_config

__all__ = ["Config", "init_config"]
