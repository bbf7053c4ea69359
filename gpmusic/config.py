# gpmusic/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


def _env_seed(default=1234):
    value = os.environ.get("GPMUSIC_SEED")
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"GPMUSIC_SEED must be an integer, got {value!r}")


class _GPMusicConfig:
    def __init__(self):
        self.version = __version__
        self.seed = _env_seed()
        # default regularization added to the training covariance diagonal
        self.alpha = 1e-10
        # logger lives in config
        self.logger = logging.getLogger("gpmusic")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPMUSIC_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPMusicConfig("
            f"version={self.version}, "
            f"seed={self.seed}, "
            f"alpha={self.alpha})"
        )

    def __repr__(self):
        return (
            f"<GPMusicConfig "
            f"version={self.version!r}, "
            f"seed={self.seed!r}, "
            f"alpha={self.alpha!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"Unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GPMusicConfig()


def get_config():
    return _config


def set_seed(seed: int):
    """Reseed the package random generator used when no ``rng`` is passed."""
    from . import num

    _config.seed = int(seed)
    num.set_seed(_config.seed)


def set_default_alpha(value):
    """Set the alpha used by regressors built without an explicit one."""
    from .core.utils import check_nonnegative

    _config.alpha = check_nonnegative(value, "default alpha")


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
