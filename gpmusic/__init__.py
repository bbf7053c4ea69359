# gpmusic/__init__.py

from . import config
from . import errors
from . import num
from . import core
from . import kernel
from . import walks
from . import misc
from .core import GaussianProcessRegressor, Matrix
from .walks import KernelGenerator

__all__ = [
    "num",
    "kernel",
    "GaussianProcessRegressor",
    "Matrix",
    "KernelGenerator",
    "__version__",
]

__version__ = config.__version__
