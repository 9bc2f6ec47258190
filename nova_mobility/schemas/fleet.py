from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..models import MaintenancePriorityEnum, VehicleStatusEnum


class _VehicleBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hub_id: int
    serial_number: str = Field(min_length=1, max_length=120)
    status: VehicleStatusEnum = VehicleStatusEnum.ACTIVE
    battery_pct: int = Field(default=100, ge=0, le=100)


class DroneVehicleCreate(_VehicleBase):
    kind: Literal["Drone"] = "Drone"
    drone_model_id: int


class ScooterVehicleCreate(_VehicleBase):
    kind: Literal["Scooter"] = "Scooter"
    scooter_model_id: int


# A vehicle payload carries exactly one model reference, chosen by ``kind``.
VehicleCreate = Annotated[
    DroneVehicleCreate | ScooterVehicleCreate, Field(discriminator="kind")
]

vehicle_create_adapter = TypeAdapter(VehicleCreate)


class MaintenanceOrderCreate(BaseModel):
    vehicle_id: int
    opened_by_user_id: int
    priority: MaintenancePriorityEnum = MaintenancePriorityEnum.MEDIUM
    notes: str | None = Field(default=None, max_length=1000)
