import unittest

from podsync.errors import PatternError
from podsync.models import SyncRule
from podsync.plan import match_sync_rules, strip_prefix


class TestMatchSyncRules(unittest.TestCase):
    def test_absolute_dest_with_strip_keeps_subdirectories(self) -> None:
        rules = [SyncRule(src="src/**/*.js", dest="/app", strip="src/")]
        dsts = match_sync_rules(rules, "src/a/b.js", "/home/app")
        self.assertEqual(dsts, ["/app/a/b.js"])

    def test_relative_dest_is_joined_onto_working_dir(self) -> None:
        rules = [SyncRule(src="x/*.txt", dest="dist")]
        dsts = match_sync_rules(rules, "x/y.txt", "/home/app")
        self.assertEqual(dsts, ["/home/app/dist/x/y.txt"])

    def test_two_matching_rules_give_two_destinations_in_order(self) -> None:
        rules = [
            SyncRule(src="**/*.py", dest="/b"),
            SyncRule(src="pkg/*.py", dest="/a", strip="pkg/"),
        ]
        dsts = match_sync_rules(rules, "pkg/mod.py", "/wd")
        self.assertEqual(dsts, ["/b/pkg/mod.py", "/a/mod.py"])

    def test_same_destination_is_not_deduplicated(self) -> None:
        rules = [
            SyncRule(src="*.txt", dest="/d"),
            SyncRule(src="a.*", dest="/d"),
        ]
        self.assertEqual(match_sync_rules(rules, "a.txt", "/wd"), ["/d/a.txt", "/d/a.txt"])

    def test_no_match_returns_empty(self) -> None:
        rules = [SyncRule(src="*.css", dest="/static")]
        self.assertEqual(match_sync_rules(rules, "main.go", "/wd"), [])

    def test_single_star_does_not_cross_directories(self) -> None:
        rules = [SyncRule(src="*.js", dest="/app")]
        self.assertEqual(match_sync_rules(rules, "lib/a.js", "/wd"), [])

    def test_globstar_matches_zero_directories(self) -> None:
        rules = [SyncRule(src="src/**/*.js", dest="/app", strip="src/")]
        self.assertEqual(match_sync_rules(rules, "src/b.js", "/wd"), ["/app/b.js"])

    def test_dotfiles_are_matched(self) -> None:
        rules = [SyncRule(src="conf/*", dest="/etc/app", strip="conf/")]
        self.assertEqual(match_sync_rules(rules, "conf/.env", "/wd"), ["/etc/app/.env"])

    def test_strip_not_a_prefix_keeps_full_path(self) -> None:
        rules = [SyncRule(src="src/*.js", dest="/app", strip="lib/")]
        self.assertEqual(match_sync_rules(rules, "src/a.js", "/wd"), ["/app/src/a.js"])

    def test_strip_without_trailing_slash_still_joins_under_dest(self) -> None:
        rules = [SyncRule(src="src/*.js", dest="/app", strip="src")]
        self.assertEqual(match_sync_rules(rules, "src/a.js", "/wd"), ["/app/a.js"])

    def test_malformed_pattern_raises_pattern_error(self) -> None:
        rules = [SyncRule(src="src/[a", dest="/app")]
        with self.assertRaises(PatternError) as ctx:
            match_sync_rules(rules, "src/a", "/wd")
        self.assertEqual(ctx.exception.details["path"], "src/a")
        self.assertIn("src/a", str(ctx.exception))

    def test_unterminated_brace_is_malformed(self) -> None:
        rules = [SyncRule(src="src/{a,b", dest="/app")]
        with self.assertRaises(PatternError):
            match_sync_rules(rules, "src/a", "/wd")

    def test_malformed_pattern_aborts_even_after_earlier_match(self) -> None:
        rules = [
            SyncRule(src="**", dest="/ok"),
            SyncRule(src="[", dest="/bad"),
        ]
        with self.assertRaises(PatternError):
            match_sync_rules(rules, "a.txt", "/wd")

    def test_brace_expansion(self) -> None:
        rules = [SyncRule(src="web/*.{html,css}", dest="/srv", strip="web/")]
        self.assertEqual(match_sync_rules(rules, "web/a.css", "/wd"), ["/srv/a.css"])
        self.assertEqual(match_sync_rules(rules, "web/a.js", "/wd"), [])


class TestStripPrefix(unittest.TestCase):
    def test_strip_prefix(self) -> None:
        self.assertEqual(strip_prefix("src/a.js", "src/"), "a.js")
        self.assertEqual(strip_prefix("src/a.js", ""), "src/a.js")
        self.assertEqual(strip_prefix("src/a.js", "lib/"), "src/a.js")


if __name__ == "__main__":
    unittest.main()
