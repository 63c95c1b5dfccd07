"""SQLAlchemy models for fueleu database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Float,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Route(Base):
    """Voyage route model."""

    __tablename__ = "routes"

    id = Column(Integer, primary_key=True)
    route_id = Column(String(64), unique=True, nullable=False)
    vessel_type = Column(String(32), nullable=False)
    fuel_type = Column(String(32), nullable=False)
    year = Column(Integer, nullable=False)
    ghg_intensity = Column(Float, nullable=False)
    fuel_consumption = Column(Float, nullable=False)
    distance = Column(Float, nullable=False)
    total_emissions = Column(Float, nullable=False)
    is_baseline = Column(Boolean, default=False, nullable=False)


class ShipCompliance(Base):
    """Compliance balance per ship and year."""

    __tablename__ = "ship_compliance"

    id = Column(Integer, primary_key=True)
    ship_id = Column(String(64), nullable=False)
    year = Column(Integer, nullable=False)
    cb_gco2eq = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("ship_id", "year", name="uq_ship_year"),)


class BankEntry(Base):
    """Banking journal model (negative amounts are applications)."""

    __tablename__ = "bank_entries"

    id = Column(Integer, primary_key=True)
    ship_id = Column(String(64), nullable=False, index=True)
    year = Column(Integer, nullable=False)
    amount_gco2eq = Column(Float, nullable=False)


class Pool(Base):
    """Pool model, one per pooling operation."""

    __tablename__ = "pools"

    id = Column(Integer, primary_key=True)
    year = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    members = relationship("PoolMember", back_populates="pool", cascade="all, delete-orphan")


class PoolMember(Base):
    """Pool allocation model."""

    __tablename__ = "pool_members"

    id = Column(Integer, primary_key=True)
    pool_id = Column(Integer, ForeignKey("pools.id"), nullable=False)
    ship_id = Column(String(64), nullable=False)
    cb_before = Column(Float, nullable=False)
    cb_after = Column(Float, nullable=False)

    __table_args__ = (UniqueConstraint("pool_id", "ship_id", name="uq_pool_ship"),)

    # Relationships
    pool = relationship("Pool", back_populates="members")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
