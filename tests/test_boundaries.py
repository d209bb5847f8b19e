from fakes import G1, G2, at, group, iv
from timesync.domain.availability.boundaries import collect_boundaries, extract_candidate_windows


def test_no_intervals_gives_no_windows():
    assert extract_candidate_windows([]) == []
    assert extract_candidate_windows([group(G1, {"u1": []})]) == []


def test_single_interval_is_one_window():
    windows = extract_candidate_windows([group(G1, {"u1": [iv(9, 11)]})])
    assert [(w.start, w.end) for w in windows] == [(at(9), at(11))]


def test_boundaries_are_sorted_and_deduplicated():
    groups = [
        group(G1, {"u1": [iv(9, 11)], "u2": [iv(9, 12)]}),
        group(G2, {"u3": [iv(10, 11)], "u4": [iv(9, 11)]}),
    ]
    assert collect_boundaries(groups) == [at(9), at(10), at(11), at(12)]


def test_window_count_and_contiguous_cover():
    groups = [
        group(G1, {"u1": [iv(9, 11), iv(13, 14)], "u2": [iv(10, 12)]}),
        group(G2, {"u3": [iv(8.5, 10)]}),
    ]
    boundaries = collect_boundaries(groups)
    windows = extract_candidate_windows(groups)

    assert len(windows) == len(boundaries) - 1
    assert windows[0].start == min(boundaries)
    assert windows[-1].end == max(boundaries)
    for previous, current in zip(windows, windows[1:]):
        assert previous.end == current.start
        assert previous.start < previous.end


def test_gaps_between_intervals_still_produce_windows():
    # Nobody covers [11, 13) but it is still a candidate window
    windows = extract_candidate_windows([group(G1, {"u1": [iv(9, 11), iv(13, 14)]})])
    assert [(w.start, w.end) for w in windows] == [
        (at(9), at(11)),
        (at(11), at(13)),
        (at(13), at(14)),
    ]
