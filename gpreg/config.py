# gpreg/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


class _GPRegConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.seed = 1234
        # logger lives in config
        self.logger = logging.getLogger("gpreg")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(_level_from_env())

    def __str__(self):
        return (
            f"GPRegConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"log_level={logging.getLevelName(self.logger.level)})"
        )

    def __repr__(self):
        return (
            f"<GPRegConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"log_level={logging.getLevelName(self.logger.level)!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration key '{k}'")
            setattr(self, k, v)
        return self


def _level_from_env():
    env = os.environ.get("GPREG_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(env)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


_config = _GPRegConfig()


def get_config():
    return _config


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)


def set_seed(seed: int):
    """Re-seed the global generator used by gpreg.num."""
    _config.seed = seed
    import gpreg.num as gnp

    gnp.set_seed(seed)
