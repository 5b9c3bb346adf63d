"""
Deterministic synthetic user data.

Every field of every record is a pure function of the record index and the
lookup tables below, so two calls always produce identical output.
"""

from datetime import datetime, timedelta
from typing import List, Sequence

from userbench.models import Address, Company, Preferences, User

USER_COUNT = 10_000
BASE_DATE = datetime(2020, 1, 1)

FIRST_NAMES = (
    "James", "Mary", "John", "Patricia", "Robert", "Jennifer", "Michael", "Linda",
    "William", "Barbara", "David", "Elizabeth", "Richard", "Susan", "Joseph", "Jessica",
    "Thomas", "Sarah", "Christopher", "Karen",
)
LAST_NAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin",
)
CITIES = (
    "New York", "Los Angeles", "Chicago", "Houston", "Phoenix", "Philadelphia",
    "San Antonio", "San Diego", "Dallas", "San Jose", "Austin", "Jacksonville",
    "Fort Worth", "Columbus", "Indianapolis", "Charlotte", "San Francisco", "Seattle",
    "Denver", "Washington",
)
STREETS = (
    "Main Street", "Oak Avenue", "Maple Drive", "Cedar Lane", "Pine Road", "Elm Street",
    "Washington Boulevard", "Park Avenue", "Lake Drive", "Hill Street", "River Road",
    "Forest Lane", "Spring Street", "Valley Road", "Mountain View", "Sunset Boulevard",
    "Broadway", "First Avenue", "Second Street", "Third Avenue",
)
STATES = (
    "CA", "NY", "TX", "FL", "PA", "IL", "OH", "GA", "NC", "MI", "NJ", "VA", "WA", "AZ",
    "MA", "TN", "IN", "MO", "MD", "WI",
)
COMPANIES = (
    "TechCorp", "GlobalSystems", "DataWorks", "CloudNine", "InnovateLabs", "FutureSync",
    "AlphaTech", "BetaSoft", "GammaIndustries", "DeltaSolutions", "EpsilonGroup",
    "ZetaDigital", "EtaTechnologies", "ThetaVentures", "IotaEnterprises",
)
DEPARTMENTS = (
    "Engineering", "Sales", "Marketing", "Human Resources", "Finance", "Operations",
    "Customer Support", "Product Management", "Research and Development",
    "Quality Assurance", "Legal", "IT Support", "Business Development", "Accounting",
    "Administration",
)
POSITIONS = (
    "Software Engineer", "Senior Developer", "Product Manager", "Sales Representative",
    "Marketing Specialist", "HR Manager", "Financial Analyst", "Operations Manager",
    "Support Specialist", "QA Engineer", "Team Lead", "Director", "Vice President",
    "Consultant", "Coordinator",
)
TAGS = (
    "VIP", "Premium", "Enterprise", "Verified", "Active", "Beta", "EarlyAdopter",
    "Ambassador", "Partner", "Influencer", "Champion", "Leader", "Expert", "Mentor",
    "Contributor",
)
LANGUAGES = ("en", "es", "fr")


def _add_years(value: datetime, years: int) -> datetime:
    # Only ever applied to January 1st, so no leap day clamping is needed.
    return value.replace(year=value.year + years)


def _add_months(value: datetime, months: int) -> datetime:
    total = value.year * 12 + (value.month - 1) + months
    return value.replace(year=total // 12, month=total % 12 + 1)


def _timestamp(value: datetime) -> str:
    return value.isoformat(timespec="microseconds")


def _tags_for(i: int, table: Sequence[str] = TAGS) -> List[str]:
    picks = (table[(i + j) % len(table)] for j in range(3 + i % 6))
    return list(dict.fromkeys(picks))


def build_user(i: int) -> User:
    """Build the synthetic user with id ``i``."""
    first_name = FIRST_NAMES[(i * 7) % len(FIRST_NAMES)]
    last_name = LAST_NAMES[(i * 11) % len(LAST_NAMES)]
    age = 25 + i % 50
    years_at_company = 1 + i % 15
    day_offset = timedelta(days=i % 365)

    return User(
        id=i,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}{i}@example.com",
        phone_number=f"+1-{200 + i % 800:03d}-{100 + i % 900:03d}-{1000 + i % 9000:04d}",
        date_of_birth=_add_years(BASE_DATE, -age) + day_offset,
        address=Address(
            street=f"{100 + i % 9900} {STREETS[(i * 17) % len(STREETS)]}",
            city=CITIES[(i * 13) % len(CITIES)],
            state=STATES[(i * 19) % len(STATES)],
            zip_code=f"{10000 + i % 89999:05d}",
        ),
        company=Company(
            name=COMPANIES[(i * 23) % len(COMPANIES)],
            department=DEPARTMENTS[(i * 29) % len(DEPARTMENTS)],
            position=POSITIONS[(i * 31) % len(POSITIONS)],
            salary=40000 + i % 160000,
            start_date=_add_years(BASE_DATE, years_at_company) + day_offset,
        ),
        preferences=Preferences(
            theme="Dark" if i % 2 == 0 else "Light",
            language=LANGUAGES[i % 3],
            notifications_enabled=i % 3 != 0,
            newsletter=i % 4 != 0,
            two_factor_enabled=i % 5 == 0,
        ),
        metadata={
            "LastLogin": _timestamp(BASE_DATE + timedelta(days=i % 730)),
            "AccountStatus": "Inactive" if i % 10 == 0 else "Active",
            "VerificationLevel": str(i % 3 + 1),
            "ReferralCode": f"REF{i:06d}",
            "CustomerSince": _timestamp(_add_months(BASE_DATE, -(i % 60))),
        },
        tags=_tags_for(i),
        is_active=i % 10 != 0,
        created_at=BASE_DATE + timedelta(days=i % 1825),
        updated_at=BASE_DATE + timedelta(days=1825 + i % 365),
    )


class UserDataGenerator:
    """
    Produces the fixed list of synthetic users.

    Usage:
        users = UserDataGenerator().generate()
        assert users[0].id == 1
    """

    count: int = USER_COUNT

    def generate(self) -> List[User]:
        return [build_user(i) for i in range(1, self.count + 1)]


def generate_users() -> List[User]:
    """Return exactly 10,000 users with ids 1..10000 in ascending order."""
    return UserDataGenerator().generate()
