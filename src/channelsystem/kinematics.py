"""Data container for a single four-momentum.

.. seealso:: :doc:`numpy:user/basics.dispatch`
"""

from collections import abc
from typing import Optional, Union

import numpy as np
from numpy.lib.mixins import NDArrayOperatorsMixin
from numpy.typing import ArrayLike, DTypeLike


class FourMomentum(NDArrayOperatorsMixin, abc.Sequence):
    """Container for a `numpy.array` with one four-momentum tuple.

    The order of the items has to be :math:`(E, p)` (energy first), in GeV.
    """

    def __init__(self, data: ArrayLike) -> None:
        self.__data = np.array(data, dtype=np.float64)
        if self.__data.shape != (4,):
            raise ValueError(
                f"{self.__class__.__name__} has to be of shape (4,),"
                f" but this data is of shape {self.__data.shape}"
            )

    @classmethod
    def at_rest(cls, mass: float) -> "FourMomentum":
        """On-shell four-momentum of a particle with zero three-momentum."""
        return cls([mass, 0.0, 0.0, 0.0])

    def __array__(
        self, dtype: Optional[DTypeLike] = None, copy: Optional[bool] = None
    ) -> np.ndarray:
        if dtype is None:
            return self.__data
        return self.__data.astype(dtype)

    def __getitem__(self, i: Union[int, slice]) -> np.ndarray:  # type: ignore
        return self.__data[i]

    def __len__(self) -> int:
        return len(self.__data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FourMomentum):
            return bool(np.array_equal(self.__data, np.array(other)))
        return NotImplemented

    def __ne__(self, other: object) -> bool:  # type: ignore
        is_equal = self.__eq__(other)
        if is_equal is NotImplemented:
            return NotImplemented
        return not is_equal

    __hash__ = None  # type: ignore

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.__data.tolist()})"

    @property
    def energy(self) -> float:
        return float(self.__data[0])

    @property
    def three_momentum(self) -> np.ndarray:
        return self.__data[1:]

    @property
    def p_x(self) -> float:
        return float(self.__data[1])

    @property
    def p_y(self) -> float:
        return float(self.__data[2])

    @property
    def p_z(self) -> float:
        return float(self.__data[3])

    def p_norm(self) -> float:
        """Norm of `.three_momentum`."""
        return float(np.sqrt(self.p_squared()))

    def p_squared(self) -> float:
        """Squared norm of `.three_momentum`."""
        return float(np.sum(self.three_momentum ** 2))

    def mass_squared(self) -> float:
        return self.energy ** 2 - self.p_squared()

    def mass(self) -> float:
        """Invariant mass, negative for space-like four-momenta."""
        mass_squared = self.mass_squared()
        return float(np.copysign(np.sqrt(abs(mass_squared)), mass_squared))
