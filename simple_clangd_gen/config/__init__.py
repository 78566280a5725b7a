from simple_clangd_gen.config.loader import load_config, parse_config
from simple_clangd_gen.config.schema import CONFIG_SCHEMA

__all__ = ["CONFIG_SCHEMA", "load_config", "parse_config"]
