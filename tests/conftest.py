"""
Pytest configuration and shared fixtures for factorymethod tests.
"""
import pytest

from factorymethod import Car, CarFactory, Plane, PlaneFactory


@pytest.fixture(scope='module')
def factory_pairs():
    """Every shipped factory class with the transport class it must build"""
    return [
        (CarFactory, Car),
        (PlaneFactory, Plane),
    ]


@pytest.fixture
def car_factory():
    return CarFactory()


@pytest.fixture
def plane_factory():
    return PlaneFactory()
