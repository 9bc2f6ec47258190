from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, SmallInteger, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, enum_check


class VehicleTypeEnum(str, Enum):
    DRONE = "Drone"
    SCOOTER = "Scooter"


class VehicleStatusEnum(str, Enum):
    ACTIVE = "Active"
    MAINTENANCE = "Maintenance"
    RETIRED = "Retired"


class Vehicle(Base):
    """A drone or a scooter stationed at a hub.

    One table holds both kinds. ``type`` is the discriminator and selects the
    mapped subclass (``DroneVehicle`` or ``ScooterVehicle``); exactly one of
    the two model references is set and it must agree with ``type``.
    """

    __tablename__ = "vehicles"
    __table_args__ = (
        sa.UniqueConstraint("serial_number", name="uq_vehicles_serial_number"),
        enum_check("type", VehicleTypeEnum, "ck_vehicles_type"),
        enum_check("status", VehicleStatusEnum, "ck_vehicles_status"),
        sa.CheckConstraint(
            "battery_pct BETWEEN 0 AND 100", name="ck_vehicles_battery_pct"
        ),
        sa.CheckConstraint(
            "(type = 'Drone' AND drone_model_id IS NOT NULL AND scooter_model_id IS NULL)"
            " OR (type = 'Scooter' AND scooter_model_id IS NOT NULL AND drone_model_id IS NULL)",
            name="ck_vehicles_model_ref",
        ),
        sa.Index("ix_vehicles_hub_id", "hub_id"),
        sa.Index("ix_vehicles_status", "status"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    hub_id: Mapped[int] = mapped_column(ForeignKey("hubs.id"), nullable=False)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    drone_model_id: Mapped[int | None] = mapped_column(ForeignKey("drone_models.id"))
    scooter_model_id: Mapped[int | None] = mapped_column(
        ForeignKey("scooter_models.id")
    )
    serial_number: Mapped[str] = mapped_column(String(120), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    battery_pct: Mapped[int] = mapped_column(
        SmallInteger, nullable=False, server_default=sa.text("100")
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    hub: Mapped["Hub"] = relationship("Hub")

    __mapper_args__ = {"polymorphic_on": "type"}


class DroneVehicle(Vehicle):
    model: Mapped["DroneModel"] = relationship("DroneModel")

    __mapper_args__ = {"polymorphic_identity": VehicleTypeEnum.DRONE.value}


class ScooterVehicle(Vehicle):
    model: Mapped["ScooterModel"] = relationship("ScooterModel")

    __mapper_args__ = {"polymorphic_identity": VehicleTypeEnum.SCOOTER.value}


VEHICLE_CLASSES: dict[str, type[Vehicle]] = {
    VehicleTypeEnum.DRONE.value: DroneVehicle,
    VehicleTypeEnum.SCOOTER.value: ScooterVehicle,
}
