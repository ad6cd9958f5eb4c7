import pytest

from linecleaner.config.schema import CleanerConfig


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep user/project settings and LINECLEANER_* variables out of tests."""
    import linecleaner.config.hierarchy as hierarchy

    monkeypatch.setattr(hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "home" / "config.yaml")
    for key in list(hierarchy._ENV_MAP):
        monkeypatch.delenv(key, raising=False)
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def default_config():
    return CleanerConfig()


@pytest.fixture
def blank_config():
    """Every marker set blank, every toggle on."""
    return CleanerConfig(
        removal_strings=["", "  "],
        range_start_strings=[" "],
        range_end_strings=[""],
        clean_links_strings=["\t"],
        comment_cleaner_strings=[],
    )


@pytest.fixture
def combined_note():
    return (
        "Keep this [[Important Note|Note]] %% clean me %%\n"
        "Some text %% remove from here %%\n"
        "Delete this content\n"
        "%% remove till here %% keep this\n"
        "Text with %% comment %% and %% comment remove this comment %% more text\n"
        "%% remove line %% This line gets deleted\n"
        "Final line with [Google](https://google.com) %% clean me %%"
    )


@pytest.fixture
def sample_note(tmp_path):
    """Write a markdown note with markers and return its path."""
    path = tmp_path / "notes" / "CoolNote.md"
    path.parent.mkdir()
    path.write_text(
        "# Title\n"
        "keep me\n"
        "%% remove line %% drop me\n"
        "See [[Other Note]] clean-ln\n",
        encoding="utf-8",
    )
    return path
