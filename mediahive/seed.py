from __future__ import annotations
import logging

from .api import LibrarySystem
from .domain import Admin

logger = logging.getLogger(__name__)


def seed_demo_data(sys: LibrarySystem) -> None:
    # admins
    for username, password in (("admin", "admin"), ("ayham", "1234")):
        sys.admins.add(Admin(admin_id=sys.admins.next_id(), username=username, password=password))

    # users
    sys.register_user("ahmad", "ahmad@gmail.com")
    sys.register_user("mona", "mona@yahoo.com")
    sys.register_user("yazan", "yazan@hotmail.com")

    # books
    sys.add_book("Clean Code", "Robert C. Martin", "ISBN-100")
    sys.add_book("Effective Java", "Joshua Bloch", "ISBN-200")
    sys.add_book("Design Patterns", "GoF", "ISBN-300")
    sys.add_book("Refactoring", "Martin Fowler", "ISBN-400")

    # cds
    sys.add_cd("Greatest Hits", "Michael Jackson")
    sys.add_cd("Classical Collection", "Mozart")
    sys.add_cd("Rock Legends", "Pink Floyd")

    logger.info(
        "seeded | admins=%s users=%s media=%s",
        len(sys.admins.list_all()), len(sys.users.list_all()), len(sys.media.list_all()),
    )
