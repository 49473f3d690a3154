import unittest

from changelog_builder.grouping.group_model import CommitBuckets


class TestCommitBuckets(unittest.TestCase):
    def test_add_keeps_insertion_order(self) -> None:
        buckets = CommitBuckets()
        buckets.add("fix", "- fix: a")
        buckets.add("feat", "- feat: b")
        buckets.add("fix", "- fix: c")

        self.assertEqual(buckets.types(), ["fix", "feat"])
        self.assertEqual(list(buckets.items()), [("fix", ["- fix: a", "- fix: c"]), ("feat", ["- feat: b"])])

    def test_instances_do_not_share_state(self) -> None:
        first = CommitBuckets()
        first.add("feat", "- feat: a")
        self.assertEqual(CommitBuckets().types(), [])


if __name__ == "__main__":
    unittest.main()
