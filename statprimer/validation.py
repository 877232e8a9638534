"""Coerce and validate raw inputs before any statistics are computed.

All public functions route their arguments through this module so that every
failure surfaces as :class:`~statprimer.errors.InvalidInputError` with a
message naming the offending argument.
"""

from __future__ import annotations

import numbers
from typing import Any, Tuple

import numpy as np
import pandas as pd

from .errors import InvalidInputError


def _is_real_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _reject_infinite(arr: np.ndarray, name: str) -> np.ndarray:
    n_inf = int(np.sum(np.isinf(arr)))
    if n_inf:
        raise InvalidInputError(
            f"{name} contains {n_inf} infinite value(s); only finite numbers "
            "or missing markers are allowed."
        )
    return arr


def coerce_numeric(values: Any, name: str = "sample") -> np.ndarray:
    """Convert a sample into a one-dimensional float array.

    Args:
        values: List, tuple, numpy array, pandas Series or a single number.
            ``None``, ``NaN`` and ``pandas.NA`` entries are treated as missing.
        name (str): Argument name used in error messages.

    Returns:
        numpy.ndarray: Float array of the same length, with ``NaN`` in place
        of every missing marker.

    Raises:
        InvalidInputError: If the input is not numeric (strings, booleans,
            other objects), holds infinite values, or is not one-dimensional.
    """
    if values is None or isinstance(values, (str, bytes)):
        raise InvalidInputError(f"{name} must be a numeric vector, got {values!r}.")

    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a numeric vector.") from exc

    if raw.ndim == 0:
        raw = raw.reshape(1)
    if raw.ndim != 1:
        raise InvalidInputError(
            f"{name} must be one-dimensional, got {raw.ndim} dimensions."
        )

    if raw.dtype.kind in "iuf":
        return _reject_infinite(raw.astype(float), name)
    if raw.dtype.kind != "O":
        raise InvalidInputError(
            f"{name} must be a numeric vector, got dtype '{raw.dtype}'."
        )

    missing = np.asarray(pd.isna(raw), dtype=bool)
    for item in raw[~missing]:
        if not _is_real_number(item):
            raise InvalidInputError(
                f"{name} must be a numeric vector; found "
                f"{type(item).__name__} value {item!r}."
            )

    out = np.full(raw.shape, np.nan, dtype=float)
    out[~missing] = raw[~missing].astype(float)
    return _reject_infinite(out, name)


def prepare_sample(
    values: Any, *, drop_missing: bool = True, name: str = "sample"
) -> Tuple[np.ndarray, int]:
    """Coerce a sample and strip its missing values.

    Args:
        values: Raw sample, see :func:`coerce_numeric`.
        drop_missing (bool): Remove missing values when ``True``. When
            ``False`` any missing value makes the sample unusable.
        name (str): Argument name used in error messages.

    Returns:
        tuple[numpy.ndarray, int]: Retained values and the number of missing
        markers found in the input.

    Raises:
        InvalidInputError: If the sample is non-numeric, or contains missing
            values while ``drop_missing`` is ``False``.
    """
    arr = coerce_numeric(values, name=name)
    mask = np.isnan(arr)
    n_missing = int(np.sum(mask))
    if n_missing and not drop_missing:
        raise InvalidInputError(
            f"{name} contains {n_missing} missing value(s) and drop_missing is False."
        )
    return arr[~mask], n_missing


def require_observations(
    values: np.ndarray, minimum: int, name: str = "sample"
) -> None:
    """Raise unless ``values`` holds at least ``minimum`` observations."""
    if len(values) < minimum:
        if minimum == 1:
            raise InvalidInputError(f"No non-missing values in {name} to analyze.")
        raise InvalidInputError(
            f"Need at least {minimum} non-missing observations in {name}, "
            f"got {len(values)}."
        )


def validate_confidence_level(confidence_level: Any) -> float:
    """Return ``confidence_level`` as a float strictly inside ``(0, 1)``.

    Raises:
        InvalidInputError: If the level is not a real number or lies outside
            the open unit interval.
    """
    if not _is_real_number(confidence_level):
        raise InvalidInputError(
            f"Confidence level must be a number, got {confidence_level!r}."
        )
    level = float(confidence_level)
    if not 0.0 < level < 1.0:
        raise InvalidInputError(
            f"Confidence level must be between 0 and 1 (exclusive), got {level}."
        )
    return level


def validate_finite(value: Any, name: str) -> float:
    """Return ``value`` as a finite float or raise ``InvalidInputError``."""
    if not _is_real_number(value) or not np.isfinite(float(value)):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}.")
    return float(value)
