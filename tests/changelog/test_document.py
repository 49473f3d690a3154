import unittest

from changelog_builder.changelog.document import render_document, resolve_title
from changelog_builder.grouping.group_model import CommitBuckets


def make_buckets(**types) -> CommitBuckets:
    buckets = CommitBuckets()
    for key, lines in types.items():
        for line in lines:
            buckets.add(key, line)
    return buckets


class TestResolveTitle(unittest.TestCase):
    def test_default_capitalises_first_letter_only(self) -> None:
        cases = [
            ("feat", None, "Feat"),
            ("fix", {}, "Fix"),
            ("fixUp", None, "FixUp"),
            ("Feat", None, "Feat"),
            ("feat", {"fix": "Bug Fixes"}, "Feat"),
            ("feat", {"feat": ""}, "Feat"),
        ]
        for key, title_map, expected in cases:
            with self.subTest(key=key, title_map=title_map):
                self.assertEqual(resolve_title(key, title_map), expected)

    def test_override_is_used_verbatim(self) -> None:
        self.assertEqual(resolve_title("feat", {"feat": "Features"}), "Features")
        self.assertEqual(resolve_title("fix", {"fix": "bug fixes 🐛"}), "bug fixes 🐛")


class TestRenderDocument(unittest.TestCase):
    def test_render_with_default_titles(self) -> None:
        buckets = make_buckets(
            feat=["- feat: add X [a1](u/commit/a1)"],
            fix=["- fix: b [b2](u/commit/b2)", "- fix: c [c3](u/commit/c3)"],
        )
        self.assertEqual(
            render_document("1.2.0", buckets),
            "## v1.2.0\n"
            "\n"
            "### Feat\n"
            "- feat: add X [a1](u/commit/a1)\n"
            "\n"
            "### Fix\n"
            "- fix: b [b2](u/commit/b2)\n"
            "- fix: c [c3](u/commit/c3)",
        )

    def test_render_with_title_override(self) -> None:
        buckets = make_buckets(feat=["- feat: a"])
        self.assertEqual(
            render_document("2.0.0", buckets, {"feat": "Features"}),
            "## v2.0.0\n\n### Features\n- feat: a",
        )

    def test_bucket_order_is_preserved(self) -> None:
        buckets = make_buckets(fix=["- fix: a"], feat=["- feat: b"])
        document = render_document("1.0.0", buckets)
        self.assertLess(document.index("### Fix"), document.index("### Feat"))

    def test_empty_buckets_render_heading_only(self) -> None:
        self.assertEqual(render_document("0.0.1", CommitBuckets()), "## v0.0.1")

    def test_markdown_is_not_escaped(self) -> None:
        buckets = make_buckets(feat=["- feat: support *bold* and `code` [x](u/commit/x)"])
        self.assertIn("*bold* and `code`", render_document("1.0.0", buckets))


if __name__ == "__main__":
    unittest.main()
