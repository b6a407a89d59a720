from app.models.base import Base  # noqa: F401

from app.models.city import City  # noqa: F401
from app.models.person import Person  # noqa: F401
