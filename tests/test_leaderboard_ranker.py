from hackboard.core.config import ANONYMOUS_NAME
from hackboard.models import ParticipantRecord
from hackboard.services.leaderboard import format_time_spent, rank_participants


def _record(record_id, score, name=None, time_spent=None, solved=None):
    return ParticipantRecord(
        id=record_id,
        user_id=f"user-{record_id}",
        score=score,
        profile_name=name,
        time_spent=time_spent,
        solved_problems=solved,
    )


def test_ties_keep_input_order_with_contiguous_ranks():
    records = [
        _record(1, 50, "fifty"),
        _record(2, 80, "first-eighty"),
        _record(3, 80, "second-eighty"),
        _record(4, 10, "ten"),
    ]

    entries = rank_participants(records, limit=10)

    assert [(e.rank, e.score, e.user_name) for e in entries] == [
        (1, 80, "first-eighty"),
        (2, 80, "second-eighty"),
        (3, 50, "fifty"),
        (4, 10, "ten"),
    ]


def test_truncates_to_limit_after_sorting():
    records = [_record(i, score) for i, score in enumerate([5, 40, 30, 20, 10])]

    entries = rank_participants(records, limit=2)

    assert [e.score for e in entries] == [40, 30]
    assert [e.rank for e in entries] == [1, 2]


def test_default_limit_is_ten():
    records = [_record(i, i) for i in range(15)]

    assert len(rank_participants(records)) == 10


def test_missing_fields_default():
    entries = rank_participants([_record(1, None)])

    assert entries[0].score == 0
    assert entries[0].solved_problems == 0
    assert entries[0].time_spent_display == "0h 0m"
    assert entries[0].user_name == ANONYMOUS_NAME


def test_missing_scores_sort_as_zero():
    records = [_record(1, None, "none"), _record(2, -5, "negative"), _record(3, 1, "one")]

    assert [e.user_name for e in rank_participants(records)] == ["one", "none", "negative"]


def test_empty_input_and_non_positive_limit():
    assert rank_participants([]) == []
    assert rank_participants([_record(1, 10)], limit=0) == []


def test_ranking_is_idempotent():
    records = [_record(1, 20, "a", 61, 2), _record(2, 20, "b", 5, 1), _record(3, 30, "c")]

    assert rank_participants(records) == rank_participants(records)


def test_format_time_spent():
    assert format_time_spent(125) == "2h 5m"
    assert format_time_spent(None) == "0h 0m"
    assert format_time_spent(59) == "0h 59m"
    assert format_time_spent(600) == "10h 0m"
