"""Config API module."""

from .CtxpackConfig import CtxpackConfig
from .EmbeddingConfig import EmbeddingConfig
from .LogConfig import LogConfig
from .ReleaseConfig import ReleaseConfig
from .StoreConfig import StoreConfig
from .load_config_with_output import load_config_with_output

__all__ = ["CtxpackConfig", "EmbeddingConfig", "LogConfig", "ReleaseConfig", "StoreConfig", "load_config_with_output"]
