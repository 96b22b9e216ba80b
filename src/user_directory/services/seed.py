"""Sample data for empty user stores."""

import logging

from user_directory.domain.models import UserDraft
from user_directory.services.users import UserService

logger = logging.getLogger(__name__)

SAMPLE_USERS: tuple[tuple[str, str, str], ...] = (
    ("John", "Doe", "New York"),
    ("Jane", "Smith", "Los Angeles"),
    ("Michael", "Johnson", "Chicago"),
    ("Emily", "Davis", "Houston"),
    ("David", "Wilson", "Phoenix"),
    ("Sarah", "Miller", "Philadelphia"),
    ("James", "Brown", "San Antonio"),
    ("Jessica", "Garcia", "San Diego"),
    ("Robert", "Rodriguez", "Dallas"),
    ("Lisa", "Martinez", "San Jose"),
    ("William", "Anderson", "Austin"),
    ("Ashley", "Taylor", "Jacksonville"),
    ("Christopher", "Thomas", "Fort Worth"),
    ("Amanda", "Hernandez", "Columbus"),
    ("Matthew", "Moore", "Charlotte"),
    ("Jennifer", "Martin", "San Francisco"),
    ("Joshua", "Jackson", "Indianapolis"),
    ("Stephanie", "Thompson", "Seattle"),
    ("Andrew", "White", "Denver"),
    ("Michelle", "Lopez", "Washington"),
    ("Kevin", "Lee", "Boston"),
    ("Laura", "Gonzalez", "El Paso"),
    ("Brian", "Harris", "Detroit"),
    ("Nicole", "Clark", "Nashville"),
    ("Daniel", "Lewis", "Portland"),
    ("Melissa", "Robinson", "Oklahoma City"),
    ("Anthony", "Walker", "Las Vegas"),
    ("Rebecca", "Perez", "Louisville"),
    ("Mark", "Hall", "Baltimore"),
    ("Kimberly", "Young", "Milwaukee"),
)


def sample_drafts() -> list[UserDraft]:
    """Build create requests for the bundled sample users."""
    return [
        UserDraft(
            first_name=first,
            last_name=last,
            email=f"{first.lower()}.{last.lower()}@example.com",
            phone=f"+1-555-{index:04d}",
            city=city,
        )
        for index, (first, last, city) in enumerate(SAMPLE_USERS, start=1)
    ]


def seed_sample_users(user_service: UserService) -> int:
    """Insert the sample users when the store is empty; return how many were added."""
    existing = user_service.repository.count_users()
    if existing:
        logger.info("Store already holds %s users, skipping sample data", existing)
        return 0
    drafts = sample_drafts()
    for draft in drafts:
        user_service.create_user(draft)
    logger.info("Seeded %s sample users", len(drafts))
    return len(drafts)
