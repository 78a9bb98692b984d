# models.py
import sqlalchemy
from event_booking.database import metadata


def _timestamps():
    return [
        sqlalchemy.Column("created_at", sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now()),
        sqlalchemy.Column("updated_at", sqlalchemy.DateTime(timezone=True), server_default=sqlalchemy.func.now()),
    ]


users = sqlalchemy.Table(
    "users",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("email", sqlalchemy.String, unique=True, index=True),
    sqlalchemy.Column("password", sqlalchemy.String),
    *_timestamps(),
)

sessions = sqlalchemy.Table(
    "sessions",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("user_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("users.id")),
    sqlalchemy.Column("token", sqlalchemy.Text, index=True),
    *_timestamps(),
)

enrollments = sqlalchemy.Table(
    "enrollments",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("user_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("users.id"), unique=True),
    sqlalchemy.Column("name", sqlalchemy.String),
    sqlalchemy.Column("cpf", sqlalchemy.String),
    sqlalchemy.Column("birthday", sqlalchemy.DateTime(timezone=True), nullable=True),
    sqlalchemy.Column("phone", sqlalchemy.String, nullable=True),
    *_timestamps(),
)

ticket_types = sqlalchemy.Table(
    "ticket_types",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("name", sqlalchemy.String),
    sqlalchemy.Column("price", sqlalchemy.Integer),
    sqlalchemy.Column("is_remote", sqlalchemy.Boolean, default=False),
    sqlalchemy.Column("includes_hotel", sqlalchemy.Boolean, default=False),
    *_timestamps(),
)

tickets = sqlalchemy.Table(
    "tickets",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("ticket_type_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("ticket_types.id")),
    sqlalchemy.Column("enrollment_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("enrollments.id"), unique=True),
    # RESERVED until payment is confirmed, then PAID
    sqlalchemy.Column("status", sqlalchemy.String, default="RESERVED"),
    *_timestamps(),
)

hotels = sqlalchemy.Table(
    "hotels",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("name", sqlalchemy.String),
    sqlalchemy.Column("image", sqlalchemy.String),
    *_timestamps(),
)

rooms = sqlalchemy.Table(
    "rooms",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("name", sqlalchemy.String),
    sqlalchemy.Column("capacity", sqlalchemy.Integer),
    sqlalchemy.Column("hotel_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("hotels.id")),
    *_timestamps(),
)

# No unique constraint on user_id: one booking per user is enforced by the service
bookings = sqlalchemy.Table(
    "bookings",
    metadata,
    sqlalchemy.Column("id", sqlalchemy.Integer, primary_key=True),
    sqlalchemy.Column("user_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("users.id"), index=True),
    sqlalchemy.Column("room_id", sqlalchemy.Integer, sqlalchemy.ForeignKey("rooms.id"), index=True),
    *_timestamps(),
)
