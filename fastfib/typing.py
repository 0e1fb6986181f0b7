from abc import ABC, abstractmethod
from typing import Optional


class ModRing(ABC):
    """ The ring Z/mZ as seen by the matrix routines: a modulus plus a storage type for the entries."""

    def __init__(self, modulus: int):
        self.modulus = modulus

    @property
    @abstractmethod
    def dtype(self):
        """ numpy dtype of the stored matrix entries"""
        pass

    @property
    @abstractmethod
    def bits(self) -> Optional[int]:
        """ Width of the domain in bits, None if unbounded"""
        pass

    @property
    @abstractmethod
    def domain(self) -> str:
        pass

    @abstractmethod
    def check(self, value, name: str = 'value') -> int:
        """ Validates an index or modulus for this domain and returns it as a plain int"""
        pass

    @abstractmethod
    def narrow(self, value: int):
        """ Converts a reduced value into the storage scalar type"""
        pass

    @abstractmethod
    def mul_add(self, acc, a, b):
        """ (acc + a * b) % modulus, narrowed"""
        pass

    @abstractmethod
    def matrix(self, rows):
        pass

    def identity(self):
        return self.matrix([[1, 0], [0, 1]])

    def zeros(self):
        return self.matrix([[0, 0], [0, 0]])

    def __eq__(self, other):
        if isinstance(other, ModRing):
            return self.domain == other.domain and self.modulus == other.modulus
        return NotImplemented

    def __hash__(self):
        return hash((self.domain, self.modulus))

    def __repr__(self):
        return f'{type(self).__name__}({self.modulus})'
