# =============================================================================
# File: tensor.py
# Date: 2026-10-18
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

"""Named numpy tensors and ordered tensor lists."""

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union, overload

import numpy as np
from numpy import ndarray


class Tensor:
    """A numpy array with an optional name."""

    __slots__ = ("name", "array")

    def __init__(self, array: Union[ndarray, Sequence], name: Optional[str] = None):
        self.array = np.asarray(array)
        self.name = name

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.array.shape

    @property
    def dtype(self):
        return self.array.dtype

    def __repr__(self) -> str:
        return f"Tensor(name={self.name!r}, shape={self.shape}, dtype={self.dtype})"


class TensorList:
    """Ordered tensors, indexable by position or looked up by name."""

    def __init__(self, tensors: Optional[Iterable[Tensor]] = None):
        self._tensors: List[Tensor] = list(tensors or [])

    def add(self, tensor: Tensor) -> None:
        self._tensors.append(tensor)

    def get(self, name: str) -> Optional[Tensor]:
        """First tensor with the given name, or None."""
        for tensor in self._tensors:
            if tensor.name == name:
                return tensor
        return None

    @property
    def names(self) -> List[Optional[str]]:
        return [t.name for t in self._tensors]

    @overload
    def __getitem__(self, index: int) -> Tensor: ...

    @overload
    def __getitem__(self, index: slice) -> "TensorList": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return TensorList(self._tensors[index])
        return self._tensors[index]

    def __len__(self) -> int:
        return len(self._tensors)

    def __iter__(self) -> Iterator[Tensor]:
        return iter(self._tensors)

    def __repr__(self) -> str:
        return f"TensorList({self._tensors!r})"
