import pytest

from readinglist.database.errors import ForeignKeyViolation, NotFound, UniquenessViolation
from readinglist.models.entry import RoundupAssociation


def test_add_then_query_both_directions(entries, roundups):
    entry = entries.insert("https://a.example", source_date="2024-01-05")
    entries.update_read_status(entry.id, True)

    assoc = roundups.add("2024-01-07", entry.id)

    assert assoc == RoundupAssociation(date="2024-01-07", entry=entry.id)
    assert list(roundups.roundups_for_entry(entry.id)) == ["2024-01-07"]
    assert [e.id for e in roundups.entries_for_date("2024-01-07")] == [entry.id]


def test_duplicate_pair_is_rejected_and_listed_once(entries, roundups):
    entry = entries.insert("https://a.example")
    roundups.add("2024-01-07", entry.id)
    with pytest.raises(UniquenessViolation):
        roundups.add("2024-01-07", entry.id)
    assert [e.id for e in roundups.entries_for_date("2024-01-07")] == [entry.id]


def test_missing_entry_is_rejected_without_mutation(entries, roundups):
    entry = entries.insert("https://a.example")
    roundups.add("2024-01-07", entry.id)
    with pytest.raises(ForeignKeyViolation):
        roundups.add("2024-01-07", 999)
    assert roundups.list_dates() == ["2024-01-07"]
    assert [e.id for e in roundups.entries_for_date("2024-01-07")] == [entry.id]


def test_entry_may_appear_in_many_roundups(entries, roundups):
    a = entries.insert("https://a.example")
    b = entries.insert("https://b.example")
    roundups.add("2024-02-01", a.id)
    roundups.add("2024-01-01", a.id)
    roundups.add("2024-01-01", b.id)

    assert list(roundups.roundups_for_entry(a.id)) == ["2024-01-01", "2024-02-01"]
    assert [e.url for e in roundups.entries_for_date("2024-01-01")] == [
        "https://a.example",
        "https://b.example",
    ]
    assert roundups.list_dates() == ["2024-01-01", "2024-02-01"]


def test_unknown_date_is_empty(roundups):
    assert list(roundups.entries_for_date("2030-01-01")) == []


def test_roundups_for_missing_entry_raises_on_call(roundups):
    with pytest.raises(NotFound):
        roundups.roundups_for_entry(7)


def test_replace_swaps_contents(entries, roundups):
    a = entries.insert("https://a.example")
    b = entries.insert("https://b.example")
    c = entries.insert("https://c.example")
    roundups.replace("2024-03-01", [a.id, b.id])

    assert roundups.replace("2024-03-01", [c.id, b.id, c.id]) == 2
    assert [e.id for e in roundups.entries_for_date("2024-03-01")] == [b.id, c.id]


def test_replace_rolls_back_on_bad_id(entries, roundups):
    a = entries.insert("https://a.example")
    roundups.replace("2024-03-01", [a.id])
    with pytest.raises(ForeignKeyViolation):
        roundups.replace("2024-03-01", [999])
    assert [e.id for e in roundups.entries_for_date("2024-03-01")] == [a.id]


def test_replace_with_nothing_empties_the_roundup(entries, roundups):
    a = entries.insert("https://a.example")
    roundups.add("2024-03-01", a.id)
    assert roundups.replace("2024-03-01", []) == 0
    assert roundups.list_dates() == []


def test_remove(entries, roundups):
    a = entries.insert("https://a.example")
    roundups.add("2024-03-01", a.id)
    assert roundups.remove("2024-03-01", a.id) is True
    assert roundups.remove("2024-03-01", a.id) is False
    assert list(roundups.roundups_for_entry(a.id)) == []


def test_delete_entry_removes_its_associations(entries, roundups):
    a = entries.insert("https://a.example")
    b = entries.insert("https://b.example")
    roundups.add("2024-01-01", a.id)
    roundups.add("2024-01-08", a.id)
    roundups.add("2024-01-08", b.id)

    assert entries.delete(a.id) == 2

    assert entries.find_by_id(a.id) is None
    assert [e.id for e in roundups.entries_for_date("2024-01-08")] == [b.id]
    assert roundups.list_dates() == ["2024-01-08"]


def test_roundup_counts_orders_least_featured_first(entries, roundups):
    a = entries.insert("https://a.example", source_date="2024-01-01")
    b = entries.insert("https://b.example", source_date="2024-01-03")
    c = entries.insert("https://c.example", source_date="2024-01-02")
    roundups.add("2024-01-07", a.id)
    roundups.add("2024-01-14", a.id)
    roundups.add("2024-01-14", b.id)

    counts = [(entry.id, count) for entry, count in roundups.roundup_counts()]
    assert counts == [(c.id, 0), (b.id, 1), (a.id, 2)]


def test_add_while_iterating_entries_for_date(entries, roundups):
    a = entries.insert("https://a.example")
    b = entries.insert("https://b.example")
    roundups.add("2024-01-07", a.id)
    roundups.add("2024-01-07", b.id)

    for entry in roundups.entries_for_date("2024-01-07"):
        roundups.add("2024-01-14", entry.id)

    assert [e.id for e in roundups.entries_for_date("2024-01-14")] == [a.id, b.id]


def test_writes_after_partial_iteration_of_roundups(entries, roundups):
    a = entries.insert("https://a.example")
    b = entries.insert("https://b.example")
    roundups.add("2024-01-07", a.id)
    roundups.add("2024-01-14", a.id)
    roundups.add("2024-01-07", b.id)

    dates = roundups.roundups_for_entry(a.id)
    assert next(dates) == "2024-01-07"
    roundups.add("2024-01-21", a.id)
    assert list(dates) == ["2024-01-14"]

    members = roundups.entries_for_date("2024-01-07")
    assert next(members).id == a.id
    roundups.replace("2024-01-07", [a.id])
    entries.update_read_status(b.id, True)
    assert [e.id for e in members] == [b.id]
    assert [e.id for e in roundups.entries_for_date("2024-01-07")] == [a.id]
