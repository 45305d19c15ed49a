import numpy as np
from typing import Any, Dict, Union
from collections.abc import MutableMapping


def handle_bound(value, default_value) -> float:
    """
    Turn a user supplied domain bound into a float,
    falling back to default_value when value is None
    """
    if value is None:
        return float(default_value)
    elif isinstance(value, (bool, np.bool_)):
        raise ValueError("bound must be an int or a float, got bool")
    elif isinstance(value, (int, float, np.integer, np.floating)):
        return float(value)
    else:
        raise ValueError(
            "bound must be an int or a float, "
            f"got {type(value).__name__}"
        )


def evaluate_points(function, xs: np.ndarray) -> np.ndarray:
    """
    Evaluate a univariate function at every entry of xs

    Parameters
    ----------
    function : UnivariateFunction
        if ``function.vectorized`` is True, ``evaluate`` is
        called once with the whole array,
        otherwise once per entry
    xs : numpy.ndarray
        one dimensional array of arguments

    Return
    ------
    numpy.ndarray
        one dimensional float array of the same shape as xs
    """
    xs = np.asarray(xs, dtype=float)
    if xs.ndim != 1:
        raise ValueError(f"xs must be one dimensional, got shape {xs.shape}")

    if getattr(function, 'vectorized', False):
        ys = np.asarray(function.evaluate(xs), dtype=float)
        if ys.ndim == 0:
            # constant output, e.g. f(x) = c
            ys = np.full(xs.shape, float(ys))
        elif ys.shape != xs.shape:
            raise ValueError("a vectorized function must return an array of "
                             f"shape {xs.shape}, but got shape {ys.shape}")
        return ys

    return np.fromiter((function.evaluate(float(x)) for x in xs),
                       dtype=float, count=xs.shape[0])


class ResultDict(MutableMapping):
    """
    A dictionary-like object designed for integrators \n
    Only accepts float values for the 'estimate' key.
    """

    def __init__(self, estimate: float, **kwargs):
        """
        Parameters
        ----------
        estimate : float
            The estimate of the integral.
        **kwargs : Any
            Other keys and values to be added to the dictionary. \n
            - n_evals (int): The number of function evaluations.
            - n_iterations (int): The number of refinement stages.

        Example
        -------
        >>> result = ResultDict(estimate=1.0, n_evals=100)
        >>> result['estimate']
        1.0
        """
        if not isinstance(estimate, float):
            raise TypeError(
                f"'estimate' must be a float, got {type(estimate).__name__}"
            )
        self._data: Dict[str, Any] = {"estimate": estimate}
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key == "estimate":
            if not isinstance(value, float):
                raise TypeError(
                    f"'estimate' must be a float, got {type(value).__name__}"
                )
        elif key in ("n_evals", "n_iterations"):
            if not isinstance(value, int):
                raise TypeError(f"'{key}' must be an int, "
                                f"got {type(value).__name__}")

        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "estimate":
            raise KeyError("'estimate' key cannot be deleted")
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)

    def update(self, other: Union[Dict[str, Any], "ResultDict"]) -> None:
        for key, value in other.items():
            self[key] = value
