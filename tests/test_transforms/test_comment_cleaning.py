"""Tests for comment cleaning."""

from linecleaner.transforms.comment_cleaning import clean_comments


class TestCleanComments:
    def test_removes_only_marked_comment(self):
        result = clean_comments(
            "This text %% keep %% has %% remove this comment %%", ["remove this comment"]
        )
        assert result.content == "This text %% keep %% has"
        assert result.removals == 1

    def test_multiple_lines(self):
        text = (
            "This text %% this comment stays %% has comments %% remove this comment %%\n"
            "Another line %% inline comment %% with "
            "%% another comment remove this comment %% text"
        )
        result = clean_comments(text, ["remove this comment"])
        assert result.content == (
            "This text %% this comment stays %% has comments\n"
            "Another line %% inline comment %% with text"
        )
        assert result.removals == 2

    def test_markers_are_ored(self):
        text = "x %% rm-cmt %% y %% remove this comment %% z %% keep %%"
        result = clean_comments(text, ["rm-cmt", "remove this comment"])
        assert result.content == "x y z %% keep %%"
        assert result.removals == 2

    def test_substring_match(self):
        result = clean_comments("a %% please rm-cmt now %% b", ["cmt"])
        assert result.content == "a b"

    def test_comment_spanning_lines(self):
        result = clean_comments("a %% multi\nline rm-cmt %%\nb", ["rm-cmt"])
        assert result.content == "a\nb"

    def test_marker_outside_comments_ignored(self):
        text = "%% keep %% rm-cmt %% keep2 %%"
        result = clean_comments(text, ["rm-cmt"])
        assert result.content == text
        assert result.removals == 0

    def test_unterminated_comment_untouched(self):
        result = clean_comments("a %% rm-cmt", ["rm-cmt"])
        assert result.content == "a %% rm-cmt"
        assert result.removals == 0

    def test_stops_at_unterminated_after_removal(self):
        result = clean_comments("a %% rm-cmt %% b %% rm-cmt", ["rm-cmt"])
        assert result.content == "a b %% rm-cmt"
        assert result.removals == 1

    def test_adjacent_marked_comments(self):
        result = clean_comments("%% rm-cmt %%%% rm-cmt %%end", ["rm-cmt"])
        assert result.content == "end"
        assert result.removals == 2

    def test_blank_markers_are_noop(self):
        text = "a %% anything %% b"
        result = clean_comments(text, ["", "   "])
        assert result.content == text
        assert result.removals == 0

    def test_idempotent(self):
        text = "a %% rm-cmt %% b %% keep %% c %% x rm-cmt y %%"
        once = clean_comments(text, ["rm-cmt"])
        twice = clean_comments(once.content, ["rm-cmt"])
        assert twice.content == once.content
        assert twice.removals == 0
