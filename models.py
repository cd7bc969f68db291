from sqlalchemy import Column, Integer, BigInteger, String, DateTime, JSON, Index, event, CheckConstraint
from sqlalchemy.sql import func
from sqlalchemy.orm import validates
from database import Base
from utils import validators

# ==============================================================================
# ADVOCATE MODEL
# ==============================================================================

class Advocate(Base):
    """
    Advocate model representing one directory entry.

    Attributes:
        id (int): Primary key, auto-incrementing
        first_name (str): Given name
        last_name (str): Family name
        city (str): City the advocate practices in
        degree (str): Credential - must be 'MD', 'PhD', or 'MSW'
        specialties (list[str]): Ordered specialty tags, stored as JSON
        years_of_experience (int): Non-negative years in practice
        phone_number (int): Unformatted 10-digit contact number
        created_at (datetime): Timestamp when the row was created
    """

    __tablename__ = "advocates"

    # ==============================================================================
    # COLUMNS
    # ==============================================================================

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    first_name = Column(String(255), nullable=False, comment="Given name")
    last_name = Column(String(255), nullable=False, comment="Family name")
    city = Column(String(255), nullable=False, comment="City of practice")

    degree = Column(
        String(10),
        nullable=False,
        comment="Credential: MD, PhD, or MSW"
    )

    specialties = Column(
        JSON,
        nullable=False,
        default=list,
        comment="Ordered list of specialty tags"
    )

    years_of_experience = Column(Integer, nullable=False, comment="Years in practice")

    phone_number = Column(
        BigInteger,
        nullable=False,
        comment="Unformatted 10-digit phone number"
    )

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=True,
        comment="Timestamp when advocate was created"
    )

    # ==============================================================================
    # INDEXES AND CONSTRAINTS
    # ==============================================================================

    __table_args__ = (
        Index('idx_advocate_city', 'city'),
        Index('idx_advocate_degree', 'degree'),
        Index('idx_advocate_experience', 'years_of_experience'),
        CheckConstraint(
            "degree IN ('MD', 'PhD', 'MSW')",
            name='check_degree_valid'
        ),
        CheckConstraint(
            "years_of_experience >= 0",
            name='check_experience_non_negative'
        ),
    )

    # ==============================================================================
    # VALIDATION
    # ==============================================================================

    @validates('degree')
    def validate_degree(self, key, degree):
        """Reject credentials outside the enumerated set"""
        return validators.validate_degree(degree)

    @validates('years_of_experience')
    def validate_years_of_experience(self, key, years):
        return validators.validate_years_of_experience(years)

    @validates('phone_number')
    def validate_phone_number(self, key, phone_number):
        """Phone numbers are stored as exactly 10 digits"""
        return validators.validate_phone_number(phone_number)

    # ==============================================================================
    # METHODS
    # ==============================================================================

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"<Advocate(id={self.id}, name='{self.first_name} {self.last_name}', "
            f"degree='{self.degree}', city='{self.city}')>"
        )

    def to_dict(self):
        """
        Convert model to a dictionary keyed by the wire field names.

        Returns:
            dict: Advocate data as dictionary
        """
        data = {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "city": self.city,
            "degree": self.degree,
            "specialties": list(self.specialties or []),
            "yearsOfExperience": self.years_of_experience,
            "phoneNumber": self.phone_number,
        }

        if self.created_at:
            data["createdAt"] = self.created_at.isoformat()

        return data

# ==============================================================================
# EVENT LISTENERS
# ==============================================================================

@event.listens_for(Advocate, 'before_insert')
def receive_before_insert(mapper, connection, target):
    """Trim whitespace from text columns before insert"""
    for attr in ('first_name', 'last_name', 'city'):
        value = getattr(target, attr)
        if value:
            setattr(target, attr, value.strip())
    if target.specialties:
        target.specialties = [s.strip() for s in target.specialties]
