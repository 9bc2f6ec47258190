"""initial schema

Revision ID: 5c1e7a9d3b20
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa


revision = "5c1e7a9d3b20"
down_revision = None
branch_labels = None
depends_on = None

big_id = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
    )


def upgrade() -> None:
    # reference
    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("country_code", sa.CHAR(length=2), nullable=False),
        sa.Column("timezone_iana", sa.String(length=60), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        sa.UniqueConstraint("name", "country_code", name="uq_cities_name_country_code"),
    )
    op.create_index("ix_cities_is_active", "cities", ["is_active"])
    op.create_table(
        "zones",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("name", sa.String(length=150), nullable=False),
        sa.Column("polygon_wkt", sa.Text(), nullable=False),
        sa.Column(
            "is_restricted", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        _created_at(),
        sa.UniqueConstraint("city_id", "code", name="uq_zones_city_id_code"),
    )
    op.create_table(
        "addresses",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("line1", sa.String(length=200), nullable=False),
        sa.Column("line2", sa.String(length=200), nullable=True),
        sa.Column("postal_code", sa.String(length=20), nullable=True),
        sa.Column("latitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("longitude", sa.Numeric(9, 6), nullable=True),
        sa.Column("place_label", sa.String(length=120), nullable=True),
        _created_at(),
    )
    op.create_table(
        "organizations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=160), nullable=False),
        sa.Column("type", sa.String(length=40), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        sa.UniqueConstraint("name", name="uq_organizations_name"),
        sa.CheckConstraint(
            "type IN ('Merchant', 'Partner', 'Internal')",
            name="ck_organizations_type",
        ),
    )
    op.create_table(
        "persons",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("first_name", sa.String(length=80), nullable=False),
        sa.Column("last_name", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        _created_at(),
        sa.UniqueConstraint("email", name="uq_persons_email"),
    )

    # security
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("person_id", big_id, sa.ForeignKey("persons.id"), nullable=False),
        sa.Column("username", sa.String(length=120), nullable=False),
        sa.Column("password_hash", sa.LargeBinary(length=256), nullable=False),
        sa.Column("is_locked", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("last_login_at", sa.DateTime(), nullable=True),
        _created_at(),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_table(
        "roles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=80), nullable=False),
        _created_at(),
        sa.UniqueConstraint("name", name="uq_roles_name"),
    )
    op.create_table(
        "user_roles",
        sa.Column(
            "user_id", sa.Integer(), sa.ForeignKey("users.id"), primary_key=True
        ),
        sa.Column(
            "role_id", sa.Integer(), sa.ForeignKey("roles.id"), primary_key=True
        ),
        sa.Column(
            "assigned_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
    )

    # fleet
    op.create_table(
        "hubs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("address_id", big_id, sa.ForeignKey("addresses.id"), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        _created_at(),
        sa.UniqueConstraint("city_id", "name", name="uq_hubs_city_id_name"),
    )
    op.create_table(
        "drone_models",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("max_payload_kg", sa.Numeric(6, 2), nullable=False),
        sa.Column("range_km", sa.Numeric(6, 2), nullable=False),
        _created_at(),
        sa.UniqueConstraint("name", name="uq_drone_models_name"),
    )
    op.create_table(
        "scooter_models",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("range_km", sa.Numeric(6, 2), nullable=False),
        _created_at(),
        sa.UniqueConstraint("name", name="uq_scooter_models_name"),
    )
    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("hub_id", sa.Integer(), sa.ForeignKey("hubs.id"), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column(
            "drone_model_id",
            sa.Integer(),
            sa.ForeignKey("drone_models.id"),
            nullable=True,
        ),
        sa.Column(
            "scooter_model_id",
            sa.Integer(),
            sa.ForeignKey("scooter_models.id"),
            nullable=True,
        ),
        sa.Column("serial_number", sa.String(length=120), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column(
            "battery_pct", sa.SmallInteger(), nullable=False, server_default=sa.text("100")
        ),
        _created_at(),
        sa.UniqueConstraint("serial_number", name="uq_vehicles_serial_number"),
        sa.CheckConstraint("type IN ('Drone', 'Scooter')", name="ck_vehicles_type"),
        sa.CheckConstraint(
            "status IN ('Active', 'Maintenance', 'Retired')",
            name="ck_vehicles_status",
        ),
        sa.CheckConstraint(
            "battery_pct BETWEEN 0 AND 100", name="ck_vehicles_battery_pct"
        ),
        sa.CheckConstraint(
            "(type = 'Drone' AND drone_model_id IS NOT NULL AND scooter_model_id IS NULL)"
            " OR (type = 'Scooter' AND scooter_model_id IS NOT NULL AND drone_model_id IS NULL)",
            name="ck_vehicles_model_ref",
        ),
    )
    op.create_index("ix_vehicles_hub_id", "vehicles", ["hub_id"])
    op.create_index("ix_vehicles_status", "vehicles", ["status"])
    op.create_table(
        "vehicle_batteries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "vehicle_id", sa.Integer(), sa.ForeignKey("vehicles.id"), nullable=False
        ),
        sa.Column("serial_number", sa.String(length=120), nullable=False),
        sa.Column(
            "health_pct", sa.SmallInteger(), nullable=False, server_default=sa.text("100")
        ),
        sa.Column(
            "cycle_count", sa.Integer(), nullable=False, server_default=sa.text("0")
        ),
        sa.Column(
            "installed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.UniqueConstraint(
            "serial_number", name="uq_vehicle_batteries_serial_number"
        ),
        sa.CheckConstraint(
            "health_pct BETWEEN 0 AND 100", name="ck_vehicle_batteries_health_pct"
        ),
        sa.CheckConstraint("cycle_count >= 0", name="ck_vehicle_batteries_cycle_count"),
    )
    op.create_table(
        "maintenance_orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "vehicle_id", sa.Integer(), sa.ForeignKey("vehicles.id"), nullable=False
        ),
        sa.Column(
            "opened_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.Column(
            "opened_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("closed_at", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.String(length=1000), nullable=True),
        sa.CheckConstraint(
            "status IN ('Open', 'InProgress', 'Closed')",
            name="ck_maintenance_orders_status",
        ),
        sa.CheckConstraint(
            "priority IN ('Low', 'Medium', 'High', 'Critical')",
            name="ck_maintenance_orders_priority",
        ),
    )
    op.create_table(
        "maintenance_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "maintenance_order_id",
            sa.Integer(),
            sa.ForeignKey("maintenance_orders.id"),
            nullable=False,
        ),
        sa.Column(
            "logged_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column("entry_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("entry", sa.String(length=2000), nullable=False),
    )

    # commerce
    op.create_table(
        "merchants",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=False,
        ),
        sa.Column(
            "default_city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False
        ),
        sa.Column("api_key", sa.Uuid(), nullable=False),
        _created_at(),
        sa.UniqueConstraint("api_key", name="uq_merchants_api_key"),
    )
    op.create_table(
        "catalog_items",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "merchant_id", sa.Integer(), sa.ForeignKey("merchants.id"), nullable=False
        ),
        sa.Column("sku", sa.String(length=80), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("weight_kg", sa.Numeric(7, 3), nullable=False),
        sa.Column("length_cm", sa.Numeric(7, 2), nullable=True),
        sa.Column("width_cm", sa.Numeric(7, 2), nullable=True),
        sa.Column("height_cm", sa.Numeric(7, 2), nullable=True),
        sa.Column("hazard_class", sa.String(length=40), nullable=True),
        _created_at(),
        sa.UniqueConstraint(
            "merchant_id", "sku", name="uq_catalog_items_merchant_id_sku"
        ),
    )

    # billing
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("person_id", big_id, sa.ForeignKey("persons.id"), nullable=True),
        sa.Column(
            "organization_id",
            sa.Integer(),
            sa.ForeignKey("organizations.id"),
            nullable=True,
        ),
        sa.Column("default_currency", sa.CHAR(length=3), nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "(person_id IS NOT NULL AND organization_id IS NULL)"
            " OR (person_id IS NULL AND organization_id IS NOT NULL)",
            name="ck_customers_owner",
        ),
    )
    op.create_table(
        "invoices",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False
        ),
        sa.Column("invoice_number", sa.String(length=40), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("currency", sa.CHAR(length=3), nullable=False),
        sa.Column("issue_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=False),
        _created_at(),
        sa.UniqueConstraint("invoice_number", name="uq_invoices_invoice_number"),
        sa.CheckConstraint(
            "status IN ('Draft', 'Open', 'Paid', 'Void')", name="ck_invoices_status"
        ),
    )
    op.create_index("ix_invoices_customer_id", "invoices", ["customer_id"])
    op.create_table(
        "invoice_lines",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("invoice_id", big_id, sa.ForeignKey("invoices.id"), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=False),
        sa.Column("quantity", sa.Numeric(18, 4), nullable=False),
        sa.Column("unit_price", sa.Numeric(18, 4), nullable=False),
        sa.Column(
            "tax_rate_pct", sa.Numeric(5, 2), nullable=False, server_default=sa.text("0")
        ),
        sa.Column(
            "line_total",
            sa.Numeric(18, 4),
            sa.Computed(
                "ROUND(quantity * unit_price * (1 + tax_rate_pct / 100.0), 4)",
                persisted=True,
            ),
            nullable=False,
        ),
    )
    op.create_table(
        "payments",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("invoice_id", big_id, sa.ForeignKey("invoices.id"), nullable=False),
        sa.Column("amount", sa.Numeric(18, 4), nullable=False),
        sa.Column("method", sa.String(length=20), nullable=False),
        sa.Column(
            "received_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("reference", sa.String(length=120), nullable=True),
        sa.CheckConstraint(
            "method IN ('Card', 'Wallet', 'Wire', 'Cash')", name="ck_payments_method"
        ),
    )

    # delivery
    op.create_table(
        "orders",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "merchant_id", sa.Integer(), sa.ForeignKey("merchants.id"), nullable=False
        ),
        sa.Column(
            "customer_id", sa.Integer(), sa.ForeignKey("customers.id"), nullable=False
        ),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column(
            "pickup_address_id", big_id, sa.ForeignKey("addresses.id"), nullable=False
        ),
        sa.Column(
            "dropoff_address_id", big_id, sa.ForeignKey("addresses.id"), nullable=False
        ),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column(
            "requested_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("delivered_at", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.String(length=500), nullable=True),
        sa.CheckConstraint(
            "status IN ('Pending', 'Assigned', 'InTransit', 'Delivered', 'Canceled')",
            name="ck_orders_status",
        ),
    )
    op.create_index("ix_orders_status", "orders", ["status"])
    op.create_index("ix_orders_customer_id", "orders", ["customer_id"])
    op.create_table(
        "order_items",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("order_id", big_id, sa.ForeignKey("orders.id"), nullable=False),
        sa.Column(
            "catalog_item_id", big_id, sa.ForeignKey("catalog_items.id"), nullable=False
        ),
        sa.Column("quantity", sa.Numeric(18, 4), nullable=False),
        sa.Column("declared_value", sa.Numeric(18, 2), nullable=True),
    )
    op.create_table(
        "packages",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("order_id", big_id, sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("label_code", sa.String(length=60), nullable=False),
        sa.Column("weight_kg", sa.Numeric(7, 3), nullable=False),
        sa.Column("hazard_class", sa.String(length=40), nullable=True),
        _created_at(),
        sa.UniqueConstraint("label_code", name="uq_packages_label_code"),
    )
    op.create_table(
        "routes",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=False),
        sa.Column(
            "vehicle_id", sa.Integer(), sa.ForeignKey("vehicles.id"), nullable=False
        ),
        sa.Column("planned_start_at", sa.DateTime(), nullable=False),
        sa.Column("planned_end_at", sa.DateTime(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        _created_at(),
        sa.CheckConstraint(
            "status IN ('Planned', 'Live', 'Completed', 'Aborted')",
            name="ck_routes_status",
        ),
    )
    op.create_table(
        "route_stops",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("route_id", big_id, sa.ForeignKey("routes.id"), nullable=False),
        sa.Column("sequence_nr", sa.Integer(), nullable=False),
        sa.Column(
            "address_id", big_id, sa.ForeignKey("addresses.id"), nullable=False
        ),
        sa.Column("purpose", sa.String(length=20), nullable=False),
        sa.Column("eta_at", sa.DateTime(), nullable=True),
        sa.Column("etf_at", sa.DateTime(), nullable=True),
        sa.UniqueConstraint(
            "route_id", "sequence_nr", name="uq_route_stops_route_id_sequence_nr"
        ),
        sa.CheckConstraint(
            "purpose IN ('Pickup', 'Dropoff')", name="ck_route_stops_purpose"
        ),
    )
    op.create_table(
        "assignments",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "route_stop_id", big_id, sa.ForeignKey("route_stops.id"), nullable=False
        ),
        sa.Column("order_id", big_id, sa.ForeignKey("orders.id"), nullable=False),
        sa.Column("package_id", big_id, sa.ForeignKey("packages.id"), nullable=True),
        _created_at(),
    )
    op.create_table(
        "proofs_of_delivery",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("order_id", big_id, sa.ForeignKey("orders.id"), nullable=False),
        sa.Column(
            "captured_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column(
            "captured_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("method", sa.String(length=20), nullable=False),
        sa.Column("artifact_url", sa.String(length=400), nullable=True),
        sa.CheckConstraint(
            "method IN ('Signature', 'Photo', 'Pin')",
            name="ck_proofs_of_delivery_method",
        ),
    )

    # analytics
    op.create_table(
        "events",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "occurred_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("event_type", sa.String(length=60), nullable=False),
        sa.Column(
            "actor_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True
        ),
        sa.Column("entity_type", sa.String(length=40), nullable=True),
        sa.Column("entity_id_big", sa.BigInteger(), nullable=True),
        sa.Column("city_id", sa.Integer(), sa.ForeignKey("cities.id"), nullable=True),
        sa.Column("payload_json", sa.Text(), nullable=True),
    )
    op.create_index("ix_events_entity", "events", ["entity_type", "entity_id_big"])
    op.create_index("ix_events_occurred_at", "events", ["occurred_at"])

    # support
    op.create_table(
        "tickets",
        sa.Column("id", big_id, primary_key=True),
        sa.Column(
            "opened_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column(
            "related_order_id", big_id, sa.ForeignKey("orders.id"), nullable=True
        ),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("priority", sa.String(length=10), nullable=False),
        sa.Column("subject", sa.String(length=200), nullable=False),
        sa.Column(
            "opened_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("closed_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint(
            "status IN ('Open', 'Pending', 'Resolved', 'Closed')",
            name="ck_tickets_status",
        ),
        sa.CheckConstraint(
            "priority IN ('Low', 'Medium', 'High', 'Urgent')",
            name="ck_tickets_priority",
        ),
    )
    op.create_table(
        "ticket_messages",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("ticket_id", big_id, sa.ForeignKey("tickets.id"), nullable=False),
        sa.Column(
            "sender_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False
        ),
        sa.Column("sent_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("body", sa.String(length=2000), nullable=False),
    )

    # audit
    op.create_table(
        "change_log",
        sa.Column("id", big_id, primary_key=True),
        sa.Column("table_name", sa.String(length=160), nullable=False),
        sa.Column("primary_key_json", sa.String(length=500), nullable=False),
        sa.Column("operation", sa.String(length=10), nullable=False),
        sa.Column(
            "changed_by_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True
        ),
        sa.Column(
            "changed_at", sa.DateTime(), nullable=False, server_default=sa.func.now()
        ),
        sa.Column("snapshot_json", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "operation IN ('INSERT', 'UPDATE', 'DELETE')",
            name="ck_change_log_operation",
        ),
    )


def downgrade() -> None:
    op.drop_table("change_log")
    op.drop_table("ticket_messages")
    op.drop_table("tickets")
    op.drop_index("ix_events_occurred_at", table_name="events")
    op.drop_index("ix_events_entity", table_name="events")
    op.drop_table("events")
    op.drop_table("proofs_of_delivery")
    op.drop_table("assignments")
    op.drop_table("route_stops")
    op.drop_table("routes")
    op.drop_table("packages")
    op.drop_table("order_items")
    op.drop_index("ix_orders_customer_id", table_name="orders")
    op.drop_index("ix_orders_status", table_name="orders")
    op.drop_table("orders")
    op.drop_table("payments")
    op.drop_table("invoice_lines")
    op.drop_index("ix_invoices_customer_id", table_name="invoices")
    op.drop_table("invoices")
    op.drop_table("customers")
    op.drop_table("catalog_items")
    op.drop_table("merchants")
    op.drop_table("maintenance_logs")
    op.drop_table("maintenance_orders")
    op.drop_table("vehicle_batteries")
    op.drop_index("ix_vehicles_status", table_name="vehicles")
    op.drop_index("ix_vehicles_hub_id", table_name="vehicles")
    op.drop_table("vehicles")
    op.drop_table("scooter_models")
    op.drop_table("drone_models")
    op.drop_table("hubs")
    op.drop_table("user_roles")
    op.drop_table("roles")
    op.drop_table("users")
    op.drop_table("persons")
    op.drop_table("organizations")
    op.drop_table("addresses")
    op.drop_table("zones")
    op.drop_index("ix_cities_is_active", table_name="cities")
    op.drop_table("cities")
