from datetime import datetime
from enum import Enum

import sqlalchemy as sa
from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, BigIntPK, enum_check


class RouteStatusEnum(str, Enum):
    PLANNED = "Planned"
    LIVE = "Live"
    COMPLETED = "Completed"
    ABORTED = "Aborted"


class StopPurposeEnum(str, Enum):
    PICKUP = "Pickup"
    DROPOFF = "Dropoff"


class Route(Base):
    __tablename__ = "routes"
    __table_args__ = (enum_check("status", RouteStatusEnum, "ck_routes_status"),)

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    city_id: Mapped[int] = mapped_column(ForeignKey("cities.id"), nullable=False)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicles.id"), nullable=False)
    planned_start_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    planned_end_at: Mapped[datetime | None] = mapped_column(DateTime)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    vehicle: Mapped["Vehicle"] = relationship("Vehicle")
    stops: Mapped[list["RouteStop"]] = relationship(
        "RouteStop", order_by="RouteStop.sequence_nr", passive_deletes="all"
    )


class RouteStop(Base):
    """A pickup or dropoff on a route.

    ``sequence_nr`` is chosen by the caller and only has to be unique within
    its route.
    """

    __tablename__ = "route_stops"
    __table_args__ = (
        sa.UniqueConstraint(
            "route_id", "sequence_nr", name="uq_route_stops_route_id_sequence_nr"
        ),
        enum_check("purpose", StopPurposeEnum, "ck_route_stops_purpose"),
    )

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    route_id: Mapped[int] = mapped_column(ForeignKey("routes.id"), nullable=False)
    sequence_nr: Mapped[int] = mapped_column(Integer, nullable=False)
    address_id: Mapped[int] = mapped_column(ForeignKey("addresses.id"), nullable=False)
    purpose: Mapped[str] = mapped_column(String(20), nullable=False)
    eta_at: Mapped[datetime | None] = mapped_column(DateTime)
    etf_at: Mapped[datetime | None] = mapped_column(DateTime)


class Assignment(Base):
    __tablename__ = "assignments"

    id: Mapped[int] = mapped_column(BigIntPK, primary_key=True)
    route_stop_id: Mapped[int] = mapped_column(
        ForeignKey("route_stops.id"), nullable=False
    )
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id"), nullable=False)
    package_id: Mapped[int | None] = mapped_column(ForeignKey("packages.id"))
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
