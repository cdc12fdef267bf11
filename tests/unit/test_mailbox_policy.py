from __future__ import annotations

from dm_service.domain.policies.mailbox import (
    is_visible_to,
    mailbox_view,
    may_continue_thread,
    thread_of,
)
from dm_service.domain.value_objects.enums import Mailbox, SortOrder
from tests.conftest import make_message, make_user

ALICE = make_user()
BOB = make_user(7, "bob")


def test_thread_is_ordered_by_timestamp_then_id():
    later = make_message(message_id=1, minutes=10)
    tie_high = make_message(message_id=5, minutes=0)
    tie_low = make_message(message_id=3, minutes=0)
    other_thread = make_message(message_id=4, thread_id=2)

    result = thread_of([later, tie_high, other_thread, tie_low], 1)

    assert [m.id for m in result] == [3, 5, 1]


def test_archived_message_hidden_only_for_archiving_party():
    message = make_message(sender=ALICE, receiver=BOB, archived_by_sender=True)

    assert not is_visible_to(message, ALICE, Mailbox.OUTBOX)
    assert is_visible_to(message, BOB, Mailbox.INBOX)


def test_message_archived_by_both_is_hidden_from_both():
    message = make_message(
        sender=ALICE, receiver=BOB, archived_by_sender=True, archived_by_receiver=True,
    )

    assert not is_visible_to(message, ALICE, Mailbox.OUTBOX)
    assert not is_visible_to(message, BOB, Mailbox.INBOX)


def test_mailbox_view_sorts_newest_first_by_default():
    messages = [
        make_message(message_id=1, sender=ALICE, receiver=BOB, minutes=0),
        make_message(message_id=2, sender=ALICE, receiver=BOB, minutes=5),
        make_message(message_id=3, sender=BOB, receiver=ALICE, minutes=3),
    ]

    assert [m.id for m in mailbox_view(messages, BOB, Mailbox.INBOX)] == [2, 1]
    assert [m.id for m in mailbox_view(messages, BOB, Mailbox.INBOX, SortOrder.ASC)] == [1, 2]
    assert [m.id for m in mailbox_view(messages, BOB, Mailbox.OUTBOX)] == [3]


def test_only_the_same_pair_may_continue_a_thread():
    carol = make_user(99, "carol")
    thread = [make_message(message_id=1, sender=ALICE, receiver=BOB)]

    assert may_continue_thread(thread, BOB, ALICE)
    assert may_continue_thread(thread, ALICE, BOB)
    assert not may_continue_thread(thread, carol, ALICE)
    assert not may_continue_thread([], ALICE, BOB)
