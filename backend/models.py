from sqlalchemy import Column, String, Integer, SmallInteger, Numeric, Text, Date, ForeignKey, Table, CheckConstraint, Index
from sqlalchemy.orm import relationship
from database import Base


user_tags = Table(
    'user_tags',
    Base.metadata,
    Column('user_id', Integer, ForeignKey('users.id', ondelete='CASCADE'), primary_key=True),
    Column('tag_id', Integer, ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
)


class User(Base):
    """
    An account holder.

    Relationships:
    - profile: one-to-one, shares the user's primary key
    - addresses: one-to-many, ordered by address id; removing an address from
      the collection deletes it on flush
    - tags: many-to-many through user_tags
    """
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)
    password = Column(String(255), nullable=False)

    profile = relationship("Profile", back_populates="user", uselist=False, cascade="all, delete-orphan")
    addresses = relationship(
        "Address",
        back_populates="user",
        order_by="Address.id",
        cascade="all, delete-orphan",
    )
    tags = relationship("Tag", secondary=user_tags, back_populates="users")

    def add_address(self, address: "Address") -> None:
        self.addresses.append(address)

    def remove_address(self, address: "Address") -> None:
        self.addresses.remove(address)

    def add_tag(self, name: str) -> "Tag":
        tag = Tag(name=name)
        self.tags.append(tag)
        return tag

    def __repr__(self):
        return f"<User(id={self.id}, name={self.name!r}, email={self.email!r})>"


class Profile(Base):
    __tablename__ = 'profiles'

    id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), primary_key=True)
    bio = Column(Text, nullable=True)
    phone_number = Column(String(32), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    loyalty_points = Column(Integer, nullable=False, default=0)

    user = relationship("User", back_populates="profile")

    def __repr__(self):
        return f"<Profile(id={self.id}, loyalty_points={self.loyalty_points})>"


class Address(Base):
    __tablename__ = 'addresses'

    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    zip = Column(String(20), nullable=False)
    state = Column(String(255), nullable=True)
    user_id = Column(Integer, ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    user = relationship("User", back_populates="addresses")

    __table_args__ = (
        Index('idx_addresses_user', 'user_id'),
    )

    def __repr__(self):
        return f"<Address(id={self.id}, street={self.street!r}, city={self.city!r}, zip={self.zip!r})>"


class Tag(Base):
    __tablename__ = 'tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)

    users = relationship("User", secondary=user_tags, back_populates="tags")

    def __repr__(self):
        return f"<Tag(id={self.id}, name={self.name!r})>"


class Product(Base):
    """
    A catalog product.

    price is stored as a fixed-point decimal and surfaces as decimal.Decimal.
    category is a small integer code.
    """
    __tablename__ = 'products'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(SmallInteger, nullable=False)
    description = Column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("name != ''"),
        Index('idx_products_category', 'category'),
    )

    def __repr__(self):
        return (
            f"<Product(id={self.id}, name={self.name!r}, price={self.price}, "
            f"category={self.category})>"
        )
