from o5mreader.codec.deltas import DeltaTracker, NODE_ID, NODE_LAT, NODE_LON


def test_running_sum():
    tracker = DeltaTracker()
    raw = [100, 5, -3, 0, 20]
    assert [tracker.apply(d, NODE_ID) for d in raw] == [100, 105, 102, 102, 122]


def test_keys_are_independent():
    tracker = DeltaTracker()
    assert tracker.apply(10, NODE_LAT) == 10
    assert tracker.apply(-7, NODE_LON) == -7
    assert tracker.apply(1, NODE_LAT) == 11
    assert tracker.apply(1, NODE_LON) == -6
    assert len(tracker) == 2


def test_reset_clears_all_keys():
    tracker = DeltaTracker()
    tracker.apply(10, NODE_LAT)
    tracker.apply(10, NODE_LON)
    tracker.reset()
    assert len(tracker) == 0
    assert tracker.apply(3, NODE_LAT) == 3


def test_zero_delta_updates_by_default():
    tracker = DeltaTracker()
    tracker.apply(50, NODE_ID)
    assert tracker.apply(0, NODE_ID) == 50
    assert tracker.apply(0, "unseen") == 0
    assert tracker.get("unseen") == 0
    assert len(tracker) == 2


def test_zero_delta_passthrough():
    tracker = DeltaTracker(zero_passthrough=True)
    tracker.apply(50, NODE_ID)
    assert tracker.apply(0, NODE_ID) == 0
    assert tracker.apply(1, NODE_ID) == 51
    assert tracker.apply(0, "unseen") == 0
    assert len(tracker) == 1
