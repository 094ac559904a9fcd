import os
import sys
from decimal import Decimal
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Keep the application engine off the filesystem during tests
os.environ.setdefault("CATALOG_DATABASE_URL", "sqlite://")

# Now import after path is set
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from database import Base, enable_sqlite_foreign_keys
from models import Product, User, Profile, Address


@pytest.fixture
def engine():
    """In-memory database shared by every connection (TestClient runs endpoints in worker threads)"""
    engine = create_engine(
        'sqlite://',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def two_products(db_session):
    """The minimal two-row catalog: Widget at 10, Gadget at 20"""
    products = [
        Product(id=1, name="Widget", price=Decimal("10"), category=1),
        Product(id=2, name="Gadget", price=Decimal("20"), category=1),
    ]
    db_session.add_all(products)
    db_session.commit()
    return products


@pytest.fixture
def catalog(db_session):
    """A small catalog covering several names, prices and categories"""
    products = [
        Product(id=1, name="Widget", price=Decimal("10.00"), category=1, description="A small widget"),
        Product(id=2, name="Gadget", price=Decimal("20.00"), category=1),
        Product(id=3, name="Super Widget Pro", price=Decimal("35.50"), category=2),
        Product(id=4, name="product alpha", price=Decimal("5.00"), category=2, description="Entry level"),
        Product(id=5, name="Product Beta", price=Decimal("15.00"), category=3),
        Product(id=6, name="100% Cotton_Shirt", price=Decimal("25.00"), category=3),
    ]
    db_session.add_all(products)
    db_session.commit()
    return products


@pytest.fixture
def users(db_session):
    """
    Two users:
    - alice: profile, two addresses, tags 'vip' and 'early'
    - bob: profile, no addresses, no tags
    """
    alice = User(id=1, name="Alice", email="alice@example.com", password="secret")
    alice.profile = Profile(bio="Likes widgets", loyalty_points=120)
    alice.add_address(Address(id=10, street="1 Main St", city="Springfield", zip="11111", state="IL"))
    alice.add_address(Address(id=11, street="2 Side Ave", city="Shelbyville", zip="22222"))
    alice.add_tag("vip")
    alice.add_tag("early")

    bob = User(id=2, name="Bob", email="bob@example.com", password="hunter2")
    bob.profile = Profile(bio=None, loyalty_points=0)

    db_session.add_all([alice, bob])
    db_session.commit()
    return [alice, bob]
