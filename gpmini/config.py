# gpmini/config.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
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


class _GPminiConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        self.dtype_resolved = None
        self.seed = 1234
        self.n_jobs = 1
        self.max_condition_number = 1e12
        # logger lives in config
        self.logger = logging.getLogger("gpmini")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(os.environ.get("GPMINI_LOG_LEVEL", "INFO").upper())

    def __str__(self):
        return (
            f"GPminiConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"seed={self.seed}, "
            f"n_jobs={self.n_jobs}, "
            f"max_condition_number={self.max_condition_number})"
        )

    def __repr__(self):
        return (
            f"<GPminiConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"seed={self.seed!r}, "
            f"n_jobs={self.n_jobs!r}, "
            f"max_condition_number={self.max_condition_number!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GPminiConfig()


def get_config():
    return _config


def set_n_jobs(n_jobs: int):
    """Default number of workers used by covariance_matrices (1 = serial)."""
    if int(n_jobs) < 1:
        raise ValueError("n_jobs must be a positive integer")
    _config.n_jobs = int(n_jobs)


def set_max_condition_number(value: float):
    """Largest condition number accepted for a regularized training covariance."""
    if not value > 1.0:
        raise ValueError("max_condition_number must be greater than 1")
    _config.max_condition_number = float(value)


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
