"""Unit tests for best-bucket selection and ranked bucket items."""
import copy

from analysis.aggregation import BestBucket, SimpleBucket, build_bucket_items, pick_best_bucket


class TestPickBestBucket:

    def test_empty_stats(self):
        assert pick_best_bucket({}, 0) is None
        assert pick_best_bucket({}, 3) is None

    def test_most_fish_wins(self):
        stats = {
            "Option A": SimpleBucket(trips=5, fish=10),
            "Option B": SimpleBucket(trips=3, fish=15),
            "Option C": SimpleBucket(trips=4, fish=8),
        }

        result = pick_best_bucket(stats, 3)

        assert result == BestBucket(label="Option B", trips=3, fish=15)

    def test_prefers_buckets_meeting_min_trips(self):
        stats = {
            "Option A": SimpleBucket(trips=2, fish=20),
            "Option B": SimpleBucket(trips=5, fish=10),
            "Option C": SimpleBucket(trips=4, fish=8),
        }

        assert pick_best_bucket(stats, 3).label == "Option B"

    def test_falls_back_when_none_qualify(self):
        stats = {
            "A": SimpleBucket(trips=1, fish=20),
            "B": SimpleBucket(trips=2, fish=10),
        }

        assert pick_best_bucket(stats, 5).label == "A"

    def test_tie_keeps_first(self):
        stats = {
            "first": SimpleBucket(trips=3, fish=7),
            "second": SimpleBucket(trips=9, fish=7),
        }

        assert pick_best_bucket(stats, 1).label == "first"

    def test_accepts_plain_mappings(self):
        stats = {"A": {"trips": 4, "fish": 2}, "B": {"trips": 4, "fish": 6}}

        result = pick_best_bucket(stats, 3)

        assert result.to_dict() == {"label": "B", "trips": 4, "fish": 6}

    def test_does_not_mutate_input(self):
        stats = {"A": {"trips": 1, "fish": 2}}
        before = copy.deepcopy(stats)

        pick_best_bucket(stats, 3)

        assert stats == before


class TestBuildBucketItems:

    def test_empty_stats(self):
        assert build_bucket_items({}, 100, 3) == []

    def test_zero_total(self):
        stats = {"A": SimpleBucket(trips=5, fish=10)}
        assert build_bucket_items(stats, 0, 3) == []
        assert build_bucket_items(stats, -1, 3) == []

    def test_share_percentages(self):
        stats = {
            "Option A": SimpleBucket(trips=5, fish=50),
            "Option B": SimpleBucket(trips=3, fish=30),
            "Option C": SimpleBucket(trips=2, fish=20),
        }

        items = build_bucket_items(stats, 100, 1)

        assert [(i.label, i.share) for i in items] == [
            ("Option A", 50), ("Option B", 30), ("Option C", 20)
        ]

    def test_share_rounds_half_up(self):
        stats = {"A": SimpleBucket(trips=1, fish=1), "B": SimpleBucket(trips=1, fish=7)}

        items = build_bucket_items(stats, 8, 1)

        # 7/8 = 87.5%, 1/8 = 12.5%
        assert [i.share for i in items] == [88, 13]

    def test_sorted_by_fish_descending(self):
        stats = {
            "Z": SimpleBucket(trips=5, fish=10),
            "A": SimpleBucket(trips=3, fish=30),
            "M": SimpleBucket(trips=4, fish=20),
        }

        items = build_bucket_items(stats, 60, 1)

        assert [i.label for i in items] == ["A", "M", "Z"]

    def test_ties_keep_input_order(self):
        stats = {
            "Z": SimpleBucket(trips=1, fish=5),
            "A": SimpleBucket(trips=1, fish=5),
            "M": SimpleBucket(trips=1, fish=9),
        }

        items = build_bucket_items(stats, 19, 1)

        assert [i.label for i in items] == ["M", "Z", "A"]

    def test_unknown_dropped_when_others_exist(self):
        stats = {
            "ukendt": SimpleBucket(trips=10, fish=50),
            "Known": SimpleBucket(trips=5, fish=30),
        }

        items = build_bucket_items(stats, 80, 1)

        assert [i.label for i in items] == ["Known"]

    def test_unknown_kept_when_alone(self):
        stats = {"ukendt": SimpleBucket(trips=4, fish=12)}

        items = build_bucket_items(stats, 12, 1)

        assert len(items) == 1
        assert items[0].label == "ukendt"
        assert items[0].share == 100

    def test_min_trips_filter_with_fallback(self):
        stats = {
            "small": SimpleBucket(trips=1, fish=40),
            "big": SimpleBucket(trips=5, fish=10),
        }

        assert [i.label for i in build_bucket_items(stats, 50, 3)] == ["big"]
        assert [i.label for i in build_bucket_items(stats, 50, 10)] == ["small", "big"]

    def test_min_trips_filter_runs_before_unknown_exclusion(self):
        stats = {
            "ukendt": SimpleBucket(trips=6, fish=30),
            "Known": SimpleBucket(trips=1, fish=10),
        }

        items = build_bucket_items(stats, 40, 3)

        assert [i.label for i in items] == ["ukendt"]

    def test_limit(self):
        stats = {
            "A": SimpleBucket(trips=5, fish=10),
            "B": SimpleBucket(trips=5, fish=20),
            "C": SimpleBucket(trips=5, fish=30),
            "D": SimpleBucket(trips=5, fish=40),
        }

        items = build_bucket_items(stats, 100, 1, 2)

        assert [i.label for i in items] == ["D", "C"]

    def test_non_positive_limit_keeps_everything(self):
        stats = {"A": SimpleBucket(trips=1, fish=3), "B": SimpleBucket(trips=1, fish=2)}

        for limit in (-1, 0, None):
            items = build_bucket_items(stats, 5, 1, limit)

            assert [i.label for i in items] == ["A", "B"]

    def test_item_fields(self):
        stats = {"A": {"trips": 3, "fish": 6}}

        item = build_bucket_items(stats, 12, 1)[0]

        assert item.to_dict() == {"label": "A", "trips": 3, "fish": 6, "share": 50}
