# gpmini/kernel/params.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Hyperparameter structures for the GPmini kernels.

Each kernel owns one frozen dataclass. Fields carry the documented
defaults; instances are immutable and are validated on construction.

Defaults
--------
length_scale          1.0
variance_out          2.0
alpha_weighting       10.0
period                pi / 1.618
constant_variance_out 1.0
offset                0.0
"""
import math
from dataclasses import dataclass, fields, replace as _replace

DEFAULT_LENGTH_SCALE = 1.0
DEFAULT_VARIANCE_OUT = 2.0
DEFAULT_ALPHA_WEIGHTING = 10.0
DEFAULT_PERIOD = math.pi / 1.618
DEFAULT_CONSTANT_VARIANCE_OUT = 1.0
DEFAULT_OFFSET = 0.0


def _check_denominator(name, value):
    if not math.isfinite(value) or value == 0.0:
        raise ValueError(f"{name} must be finite and non-zero, got {value!r}")


def _check_finite(name, value):
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class KernelParams:
    """Base class of kernel hyperparameter structures."""

    # fields that appear in a denominator of the kernel expression
    _denominators = ()

    def __post_init__(self):
        for f in fields(self):
            value = float(getattr(self, f.name))
            object.__setattr__(self, f.name, value)
            if f.name in self._denominators:
                _check_denominator(f.name, value)
            else:
                _check_finite(f.name, value)

    def replace(self, **overrides):
        """Return a copy with some fields replaced (validated again)."""
        names = {f.name for f in fields(self)}
        unknown = set(overrides) - names
        if unknown:
            raise TypeError(
                f"{type(self).__name__} got unexpected hyperparameter(s) "
                f"{sorted(unknown)}; valid names are {sorted(names)}"
            )
        return _replace(self, **overrides)

    def asdict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class SquaredExpParams(KernelParams):
    length_scale: float = DEFAULT_LENGTH_SCALE
    variance_out: float = DEFAULT_VARIANCE_OUT

    _denominators = ("length_scale",)


@dataclass(frozen=True)
class RationalQuadraticParams(KernelParams):
    length_scale: float = DEFAULT_LENGTH_SCALE
    variance_out: float = DEFAULT_VARIANCE_OUT
    alpha_weighting: float = DEFAULT_ALPHA_WEIGHTING

    _denominators = ("length_scale", "alpha_weighting")


@dataclass(frozen=True)
class PeriodicParams(KernelParams):
    length_scale: float = DEFAULT_LENGTH_SCALE
    variance_out: float = DEFAULT_VARIANCE_OUT
    period: float = DEFAULT_PERIOD

    _denominators = ("length_scale", "period")


@dataclass(frozen=True)
class LocallyPeriodicParams(PeriodicParams):
    pass


@dataclass(frozen=True)
class LinearParams(KernelParams):
    constant_variance_out: float = DEFAULT_CONSTANT_VARIANCE_OUT
    variance_out: float = DEFAULT_VARIANCE_OUT
    offset: float = DEFAULT_OFFSET


@dataclass(frozen=True)
class CosineParams(KernelParams):
    period: float = DEFAULT_PERIOD

    _denominators = ("period",)
