from mediahive import Media


def recorder():
    calls = []

    def notify(user, message):
        calls.append((user.user_id, message))

    return notify, calls


def test_one_message_per_user_counts_books_and_cds(system, user, book, cd, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    system.borrow(user.user_id, book.media_id)
    system.borrow(user.user_id, cd.media_id)
    clock.advance(30)

    assert system.send_reminders() == 1
    assert calls == [(user.user_id, "You have 1 overdue book(s) and 1 overdue CD(s).")]
    assert [e.body for e in system.outbox.sent] == [calls[0][1]]
    assert system.outbox.sent[0].to == "alice@example.com"


def test_empty_bucket_reported_as_zero(system, user, cd, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    system.borrow(user.user_id, cd.media_id)
    clock.advance(8)
    system.send_reminders()
    assert calls == [(user.user_id, "You have 0 overdue book(s) and 1 overdue CD(s).")]


def test_no_overdue_loans_is_a_noop(system, user, book):
    notify, calls = recorder()
    system.register_notifier(notify)
    system.borrow(user.user_id, book.media_id)
    assert system.send_reminders() == 0
    assert calls == []


def test_returned_loans_are_not_reminded(system, user, book, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    loan = system.borrow(user.user_id, book.media_id)
    clock.advance(30)
    system.return_media(loan.loan_id)
    system.send_reminders()
    assert calls == []


def test_users_without_email_are_skipped(system, book, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    blank = system.register_user("No Mail", "  ")
    system.borrow(blank.user_id, book.media_id)
    clock.advance(30)
    assert system.send_reminders() == 0
    assert calls == []


def test_other_categories_do_not_drive_reminders(system, user, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    game = Media(media_id=system.media.next_id(), title="Board game")
    system.media.add(game)
    system.borrow(user.user_id, game.media_id)
    clock.advance(30)
    system.send_reminders()
    assert calls == []


def test_failing_notifier_does_not_stop_others(system, user, book, cd, clock, caplog):
    def broken(u, message):
        raise RuntimeError("smtp down")

    notify, calls = recorder()
    system.register_notifier(broken)
    system.register_notifier(notify)
    other = system.register_user("Bob", "bob@example.com")
    system.borrow(user.user_id, book.media_id)
    system.borrow(other.user_id, cd.media_id)
    clock.advance(30)

    system.send_reminders()
    assert sorted(uid for uid, _ in calls) == sorted([user.user_id, other.user_id])
    assert "notifier failed" in caplog.text


def test_none_notifier_ignored(system):
    before = len(system.reminders.notifiers)
    system.register_notifier(None)
    assert len(system.reminders.notifiers) == before


def test_build_report_counts_and_fines(system, user, book, cd, clock):
    system.borrow(user.user_id, book.media_id)
    system.borrow(user.user_id, cd.media_id)
    clock.advance(30)
    report = system.build_report()
    assert report.overdue_counts == {user.user_id: 2}
    # book: 2 days * 10, cd: 23 days * 20
    assert report.fine_totals == {user.user_id: 20 + 23 * 20}
    assert report.users() == {user.user_id}


def test_deleted_media_skipped_by_reminders_but_counted_in_report(system, user, book, clock):
    notify, calls = recorder()
    system.register_notifier(notify)
    system.borrow(user.user_id, book.media_id)
    system.media.delete(book)
    clock.advance(30)

    system.send_reminders()
    assert calls == []

    report = system.build_report()
    assert report.overdue_counts == {user.user_id: 1}
    assert report.fine_totals == {user.user_id: 0}


def test_empty_borrowed_media_report(system):
    assert system.borrowed_media_report() == ["TOTAL OUTSTANDING FINE (for active loans): 0"]


def test_borrowed_media_report_lines(system, user, book, cd, clock):
    book_loan = system.borrow(user.user_id, book.media_id)
    clock.advance(3)
    cd_loan = system.borrow(user.user_id, cd.media_id)
    clock.advance(27)

    lines = system.borrowed_media_report()
    assert lines == [
        f"{book_loan.loan_id} | {book.media_id} - Clean Code | {user.user_id} (alice@example.com) "
        f"| due={book_loan.due_on.isoformat()} | OVERDUE by 2 day(s) | fine=20",
        f"{cd_loan.loan_id} | {cd.media_id} - Greatest Hits | {user.user_id} (alice@example.com) "
        f"| due={cd_loan.due_on.isoformat()} | OVERDUE by 20 day(s) | fine=400",
        "TOTAL OUTSTANDING FINE (for active loans): 420",
    ]


def test_report_due_line_and_fallbacks(system, user, book, clock):
    loan = system.borrow(user.user_id, book.media_id)
    clock.set(loan.due_on)
    lines = system.borrowed_media_report()
    assert lines[0].endswith("| DUE in 0 day(s)")

    system.media.delete(book)
    system.users.delete(user)
    clock.advance(5)
    lines = system.borrowed_media_report()
    assert lines[0] == (
        f"{loan.loan_id} | {loan.media_id} | {loan.user_id} | due={loan.due_on.isoformat()} | OVERDUE by 5 day(s)"
    )
    assert lines[-1] == "TOTAL OUTSTANDING FINE (for active loans): 0"


def test_report_unknown_category_uses_book_rate(system, user, clock):
    game = Media(media_id=system.media.next_id(), title="Board game")
    system.media.add(game)
    system.borrow(user.user_id, game.media_id)
    clock.advance(31)
    assert system.borrowed_media_report()[0].endswith("OVERDUE by 3 day(s) | fine=30")
    assert system.build_report().fine_totals == {user.user_id: 0}
