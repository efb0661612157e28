from dataclasses import dataclass

import pytest

from vectorkmeans import Coordinate


@dataclass(frozen=True)
class Person:
    age: float
    nlang: int
    wexp: float

    def __len__(self) -> int:
        return 3

    def dimension(self, i: int):
        if i == 0:
            return self.age
        if i == 1:
            return self.nlang
        if i == 2:
            return self.wexp
        raise IndexError("unhandled dimension")

    @property
    def signature(self) -> str:
        return f"{self.age:f}-{self.nlang:d}-{self.wexp:f}"


@pytest.fixture
def color_points():
    return [
        Coordinate(23, 10, 15),
        Coordinate(255, 169, 200),
        Coordinate(230, 150, 215),
        Coordinate(156, 255, 215),
        Coordinate(123, 10, 15),
        Coordinate(77, 0, 47),
        Coordinate(95, 0, 15),
        Coordinate(89, 120, 15),
    ]


@pytest.fixture
def people():
    return [
        Person(age=32, nlang=1, wexp=14),
        Person(age=38, nlang=3, wexp=18),
        Person(age=10, nlang=5, wexp=0),
        Person(age=16, nlang=1, wexp=2),
        Person(age=65, nlang=2, wexp=45),
        Person(age=25, nlang=1, wexp=2),
        Person(age=63, nlang=6, wexp=50),
        Person(age=23, nlang=1, wexp=0),
    ]
