from services.report_service import StudentTally, round_half_up, summarize_entries, tally_entries


def entry(student_id, present):
    return {"studentId": student_id, "present": present, "remarks": ""}


def test_summary_over_three_days():
    records = [
        [entry(1, True), entry(2, False)],
        [entry(1, True), entry(2, True)],
        [entry(1, False)],
    ]

    summary = summarize_entries(records)

    assert summary.days == 3
    assert summary.average == 60.0
    assert summary.perfect_count == 0
    assert summary.below75_count == 2
    # 2/3 = 66.7%, 1/2 = 50% → 둘 다 50% 미만 아님
    assert summary.chronic_absence_count == 0
    assert summary.total_students_tracked == 2
    assert summary.total_present_across_all == 3
    assert summary.total_entries_across_all == 5

    stats = {s.student_id: s for s in summary.students}
    assert (stats[1].present, stats[1].total, stats[1].percentage) == (2, 3, 66.7)
    assert (stats[2].present, stats[2].total, stats[2].percentage) == (1, 2, 50.0)


def test_chronic_absence_overlaps_below_75():
    records = [
        [entry(1, False), entry(2, True)],
        [entry(1, False), entry(2, True)],
        [entry(1, True), entry(2, True)],
    ]

    summary = summarize_entries(records)

    assert summary.perfect_count == 1
    assert summary.below75_count == 1
    assert summary.chronic_absence_count == 1


def test_no_records():
    summary = summarize_entries([])

    assert summary.average == 0
    assert summary.days == 0
    assert summary.perfect_count == 0
    assert summary.below75_count == 0
    assert summary.chronic_absence_count == 0
    assert summary.total_students_tracked == 0
    assert summary.students == []


def test_omitted_student_is_not_absent():
    records = [
        [entry(1, True), entry(2, True)],
        [entry(1, True)],
        [entry(1, True)],
    ]

    summary = summarize_entries(records)

    stats = {s.student_id: s for s in summary.students}
    assert stats[2].total == 1
    assert summary.perfect_count == 2
    assert summary.below75_count == 0
    assert summary.average == 100.0


def test_exact_75_percent_is_not_below():
    records = [[entry(1, True)], [entry(1, True)], [entry(1, True)], [entry(1, False)]]

    summary = summarize_entries(records)

    assert summary.below75_count == 0
    assert summary.students[0].percentage == 75.0


def test_tally_with_zero_entries_is_never_counted():
    tally = StudentTally()

    assert not tally.perfect
    assert not tally.below(75)
    assert not tally.below(50)
    assert tally.percentage == 0.0


def test_tally_keeps_first_seen_order():
    tallies = tally_entries([[entry(3, True), entry(1, False)], [entry(2, True), entry(3, False)]])

    assert list(tallies) == [3, 1, 2]
    assert (tallies[3].present, tallies[3].total) == (1, 2)


def test_ties_round_up():
    # 1/16 = 6.25%, 5/16 = 31.25%
    records = [[entry(1, i == 0), entry(2, i < 5)] for i in range(16)]

    summary = summarize_entries(records)

    stats = {s.student_id: s for s in summary.students}
    assert stats[1].percentage == 6.3
    assert stats[2].percentage == 31.3
    # (1 + 5) / 32 = 18.75%
    assert summary.average == 18.8


def test_round_half_up():
    assert round_half_up(6.25) == 6.3
    assert round_half_up(66.66666666666667) == 66.7
    assert round_half_up(50.0) == 50.0
