# cvek/config.py
# --------------------------------------------------------------
# Author: CVEK developers
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"

# Squared distances below this magnitude are snapped to exactly 0.
DISTANCE_ZERO_TOL = 1e-12

_SUPPORTED_BACKENDS = ("numpy",)


class _CVEKConfig:
    def __init__(self):
        self.version = __version__
        self.backend = None
        # set by the numerical backend on import
        self.dtype_resolved = None
        self.zero_tol = DISTANCE_ZERO_TOL
        self.caches = {}
        # logger lives in config
        self.logger = logging.getLogger("cvek")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"CVEKConfig("
            f"version={self.version}, "
            f"backend={self.backend}, "
            f"dtype={self.dtype_resolved}, "
            f"zero_tol={self.zero_tol}, "
            f"caches={list(self.caches.keys())})"
        )

    def __repr__(self):
        return (
            f"<CVEKConfig "
            f"version={self.version!r}, "
            f"backend={self.backend!r}, "
            f"dtype={self.dtype_resolved!r}, "
            f"zero_tol={self.zero_tol!r}, "
            f"caches={list(self.caches.keys())}>"
        )

    def clear_caches(self, name=None):
        if name is None:
            self.caches.clear()
        else:
            self.caches.pop(name, None)


_config = _CVEKConfig()


def get_config():
    return _config


def _detect_backend():
    env = os.environ.get("CVEK_BACKEND")
    if env:
        return env
    return "numpy"


def init_backend():
    """Idempotent. Detect and store backend, set env for downstream imports."""
    if _config.backend is None:
        backend = _detect_backend()
        _config.backend = backend
        os.environ["CVEK_BACKEND"] = backend
    return _config.backend


def set_backend(backend: str):
    """Force a backend before importing cvek.num."""
    if backend not in _SUPPORTED_BACKENDS:
        raise ValueError(f"backend must be one of {_SUPPORTED_BACKENDS}")
    _config.backend = backend
    os.environ["CVEK_BACKEND"] = backend


def get_backend():
    """Return current backend; triggers detection if not set."""
    return _config.backend or init_backend()


def set_zero_tol(tol: float):
    """Set the threshold under which squared distances are rounded to 0."""
    if not tol >= 0.0:
        raise ValueError("zero_tol must be a nonnegative number")
    _config.zero_tol = float(tol)


def get_zero_tol():
    return _config.zero_tol


def clear_caches(name=None):
    _config.clear_caches(name)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
