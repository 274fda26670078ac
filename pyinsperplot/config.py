import os
from dataclasses import dataclass


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class InsperConfig:
    """Settings threaded through themes, font detection and the save helper.

    fonts_loaded: the brand fonts are known to be available to matplotlib,
        so detect_font returns requested families without checking.
    save_height / save_dpi / aspect_ratio: save_insper_plot defaults
        (width = height * aspect_ratio).
    """
    fonts_loaded: bool = False
    save_height: float = 4.3
    save_dpi: int = 300
    aspect_ratio: float = 1.618

    @classmethod
    def from_env(cls):
        """Read INSPERPLOT_FONTS_LOADED from the environment"""
        return cls(fonts_loaded=_env_flag('INSPERPLOT_FONTS_LOADED'))


DEFAULT_CONFIG = InsperConfig()


def resolve_config(config):
    if config is None:
        return DEFAULT_CONFIG
    return config
