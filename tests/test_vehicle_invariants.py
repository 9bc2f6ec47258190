import pytest
from pydantic import ValidationError
from sqlalchemy import insert
from sqlalchemy.exc import IntegrityError

from nova_mobility.models import DroneVehicle, ScooterVehicle, Vehicle
from nova_mobility.schemas import vehicle_create_adapter
from nova_mobility.services.fleet import create_vehicle


def test_payload_kind_selects_vehicle_class(seeded_session):
    payload = vehicle_create_adapter.validate_python(
        {
            "kind": "Scooter",
            "hub_id": 1,
            "scooter_model_id": 2,
            "serial_number": "SCOOT-TEST-1",
        }
    )

    vehicle = create_vehicle(seeded_session, payload)

    assert isinstance(vehicle, ScooterVehicle)
    assert vehicle.type == "Scooter"
    assert vehicle.drone_model_id is None
    assert vehicle.model.id == 2
    assert vehicle.battery_pct == 100


def test_drone_payload_builds_drone(seeded_session):
    payload = vehicle_create_adapter.validate_python(
        {
            "kind": "Drone",
            "hub_id": 2,
            "drone_model_id": 3,
            "serial_number": "DRONE-TEST-1",
            "battery_pct": 42,
        }
    )

    vehicle = create_vehicle(seeded_session, payload)

    assert isinstance(vehicle, DroneVehicle)
    assert vehicle.scooter_model_id is None
    assert vehicle.model.id == 3


def test_payload_rejects_second_model_reference():
    with pytest.raises(ValidationError):
        vehicle_create_adapter.validate_python(
            {
                "kind": "Drone",
                "hub_id": 1,
                "drone_model_id": 1,
                "scooter_model_id": 1,
                "serial_number": "BOTH-1",
            }
        )


def test_payload_rejects_unknown_kind():
    with pytest.raises(ValidationError):
        vehicle_create_adapter.validate_python(
            {"kind": "Truck", "hub_id": 1, "serial_number": "TRUCK-1"}
        )


def test_payload_rejects_battery_over_100():
    with pytest.raises(ValidationError):
        vehicle_create_adapter.validate_python(
            {
                "kind": "Drone",
                "hub_id": 1,
                "drone_model_id": 1,
                "serial_number": "HOT-1",
                "battery_pct": 101,
            }
        )


def test_loaded_vehicles_are_polymorphic(seeded_session):
    assert isinstance(seeded_session.get(Vehicle, 1), DroneVehicle)
    assert isinstance(seeded_session.get(Vehicle, 16), ScooterVehicle)


@pytest.mark.parametrize(
    "values",
    [
        {"type": "Drone", "drone_model_id": 1, "scooter_model_id": 1},
        {"type": "Drone", "drone_model_id": None, "scooter_model_id": 1},
        {"type": "Scooter", "drone_model_id": None, "scooter_model_id": None},
        {"type": "Truck", "drone_model_id": 1, "scooter_model_id": None},
        {
            "type": "Drone",
            "drone_model_id": 1,
            "scooter_model_id": None,
            "battery_pct": 101,
        },
    ],
)
def test_database_rejects_inconsistent_vehicle_rows(seeded_session, values):
    stmt = insert(Vehicle.__table__).values(
        hub_id=1, serial_number="RAW-1", status="Active", **values
    )

    with pytest.raises(IntegrityError):
        seeded_session.execute(stmt)
    seeded_session.rollback()
