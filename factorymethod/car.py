"""
Car transport and the factory that builds it.
"""

from .base import Transport, TransportFactory


class Car(Transport):
    message = "Car is moving..."

    def perform(self) -> None:
        print(self.message)


class CarFactory(TransportFactory):
    def create(self) -> Transport:
        self.logger.debug("Creating Car")
        return Car()
