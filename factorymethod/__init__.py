"""
Factory Method demo: transports and the factories that build them.

Usage:
    from factorymethod import CarFactory

    factory = CarFactory()
    transport = factory.create()
    transport.perform()     # Car is moving...
"""

from .base import Transport, TransportFactory
from .car import Car, CarFactory
from .plane import Plane, PlaneFactory
from .exceptions import TransportError, TransportCreationError

__all__ = [
    # Base classes
    'Transport',
    'TransportFactory',

    # Transports and factories
    'Car',
    'CarFactory',
    'Plane',
    'PlaneFactory',

    # Exceptions
    'TransportError',
    'TransportCreationError',
]

__version__ = '1.0.0'
