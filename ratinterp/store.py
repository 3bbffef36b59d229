#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Named storage of polynomials (coefficient vectors)"""

from typing import Dict, Iterator, Tuple

from .matrix import Vector
from .names import DEFAULT_NAME_PREFIX
from .rational import to_vector

__all__ = ['PolynomialStore']


class PolynomialStore:
    """Mapping from names to coefficient vectors

    Polynomials computed by the console are saved under automatic names
    (p1, p2, ...), other vectors may be added under a user-chosen name. The
    counter for automatic names only grows, so names are never reused.

    Example:
        store = PolynomialStore()
        name = store.save([1, 2])   # 'p1'
        store.rename(name, 'g')

    Args:
        name_prefix (optional (str)): (Default: 'p')
            Prefix of automatically generated names.
    """

    def __init__(self, name_prefix: str = DEFAULT_NAME_PREFIX):
        self._polys: Dict[str, Vector] = {}
        self._name_prefix = name_prefix
        self._next_name = 1

    def add(self, name: str, vec) -> None:
        self._polys[name] = to_vector(vec)

    def save(self, vec) -> str:
        """Store a vector under the next automatic name and return that name."""
        name = self._name_prefix + str(self._next_name)
        self._next_name += 1
        self.add(name, vec)
        return name

    def get(self, name: str) -> Vector:
        if name not in self._polys:
            raise KeyError(name)
        return list(self._polys[name])

    def rename(self, old: str, new: str) -> Vector:
        """Move a vector to a new name, replacing anything stored there."""
        vec = self._polys.pop(old)
        self._polys[new] = vec
        return list(vec)

    def remove(self, name: str) -> Vector:
        return self._polys.pop(name)

    def __getitem__(self, name: str) -> Vector:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._polys

    def __len__(self) -> int:
        return len(self._polys)

    def __iter__(self) -> Iterator[Tuple[str, Vector]]:
        for name, vec in list(self._polys.items()):
            yield name, list(vec)

    def __repr__(self) -> str:
        return f"PolynomialStore({len(self)} polynomial(s))"
