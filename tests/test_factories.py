import pytest

from factorymethod import Car, Plane, Transport, TransportFactory


class TestFactories:
    def test_create_returns_paired_transport(self, factory_pairs):
        for factory_class, transport_class in factory_pairs:
            transport = factory_class().create()
            assert transport is not None
            assert type(transport) is transport_class
            assert isinstance(transport, Transport)

    def test_create_never_returns_other_variant(self, car_factory, plane_factory):
        assert not isinstance(car_factory.create(), Plane)
        assert not isinstance(plane_factory.create(), Car)

    def test_create_returns_fresh_instances(self, factory_pairs):
        for factory_class, _ in factory_pairs:
            factory = factory_class()
            first = factory.create()
            second = factory.create()
            assert first is not second
            assert type(first) is type(second)
            assert first.message == second.message

    def test_create_logs_at_debug(self, car_factory, caplog):
        with caplog.at_level('DEBUG', logger='factorymethod'):
            car_factory.create()
        assert "Creating Car" in caplog.text


class TestTransports:
    def test_car_perform(self, capsys):
        Car().perform()
        assert capsys.readouterr().out == "Car is moving...\n"

    def test_plane_perform(self, capsys):
        Plane().perform()
        assert capsys.readouterr().out == "Plane is flying...\n"

    def test_messages_differ(self, car_factory, plane_factory, capsys):
        car_factory.create().perform()
        car_out = capsys.readouterr().out
        plane_factory.create().perform()
        plane_out = capsys.readouterr().out
        assert car_out != plane_out


class TestAbstractions:
    def test_transport_is_abstract(self):
        with pytest.raises(TypeError):
            Transport()

    def test_factory_is_abstract(self):
        with pytest.raises(TypeError):
            TransportFactory()
