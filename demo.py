from __future__ import annotations
import logging
from datetime import date

from mediahive import (
    BusinessRuleViolation,
    FixedClock,
    LibrarySystem,
    console_notifier,
    seed_demo_data,
)


def demo_flow() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    clock = FixedClock(date(2024, 1, 1))
    sys = LibrarySystem(clock=clock)
    sys.register_notifier(console_notifier)
    seed_demo_data(sys)

    # Search
    print("\n[demo] search 'martin':", [m.title for m in sys.search("martin")])

    ahmad = sys.user_service.find_by_email("ahmad@gmail.com")
    mona = sys.user_service.find_by_email("mona@yahoo.com")
    clean_code = sys.catalog.search_by_isbn("ISBN-100")[0]
    hits = sys.catalog.search_by_title("greatest")[0]

    book_loan = sys.borrow(ahmad.user_id, clean_code.media_id)
    sys.borrow(mona.user_id, hits.media_id)

    # Thirty days later both loans are overdue
    clock.advance(30)
    print("\n[demo] borrowed media report:")
    for line in sys.borrowed_media_report():
        print("  " + line)

    sys.send_reminders()
    print("\n[demo] emails recorded:", len(sys.outbox.sent))

    # Return the overdue book (fine) and try to borrow again
    sys.return_media(book_loan.loan_id)
    print(f"\n[demo] ahmad owes {ahmad.outstanding_fine} after returning late")
    try:
        sys.borrow(ahmad.user_id, clean_code.media_id)
    except BusinessRuleViolation as exc:
        print("[demo] borrow blocked:", exc)

    sys.pay_fine(ahmad.user_id, 1000)
    print("[demo] ahmad paid, now owes", ahmad.outstanding_fine)

    # Admin unregisters a user without loans
    session = sys.new_session()
    session.login("admin", "admin")
    sys.unregister_user(session, ahmad.user_id)
    print("\n[demo] users left:", [u.name for u in sys.users.list_all()])


if __name__ == "__main__":
    demo_flow()
