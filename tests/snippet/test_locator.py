import os
from pathlib import Path

import pytest

from build_dsl.config import LocatorSettings
from build_dsl.snippet.locator import (
    SnippetLocator,
    derive_class_identifier,
    find_snippet_dirs,
    list_snippet_files,
    snippet_path_string,
)
from build_dsl.snippet.model import DerivedClassId, UnmappedClassId


def _tree(tmp_path: Path) -> Path:
    root = tmp_path / "java"
    for relative in (
        "snippet",
        "a/snippet",
        "a/b/c/snippet",
        "a/snippet/snippet",
        "a/snippets",
        "a/Snippet",
        "a/snippet_old",
        "x/mysnippet",
    ):
        (root / relative).mkdir(parents=True)
    (root / "b").mkdir()
    (root / "b/snippet").write_text("a file, not a directory")
    return root


def test_find_snippet_dirs_matches_last_segment_at_any_depth(tmp_path):
    root = _tree(tmp_path)

    found = find_snippet_dirs([root])

    assert found == {
        str(root / "snippet"),
        str(root / "a/snippet"),
        str(root / "a/b/c/snippet"),
        str(root / "a/snippet/snippet"),
    }


def test_find_snippet_dirs_is_case_sensitive_and_exact(tmp_path):
    root = _tree(tmp_path)

    names = {Path(p).name for p in find_snippet_dirs([root])}

    assert names == {"snippet"}


def test_find_snippet_dirs_is_idempotent(tmp_path):
    root = _tree(tmp_path)

    assert find_snippet_dirs([root]) == find_snippet_dirs([root])


def test_find_snippet_dirs_includes_root_and_deduplicates(tmp_path):
    root = _tree(tmp_path)
    snippet_root = root / "a" / "snippet"

    found = find_snippet_dirs([snippet_root, root / "a", snippet_root])

    assert str(snippet_root) in found
    assert str(snippet_root / "snippet") in found
    assert len(found) == 3


def test_find_snippet_dirs_ignores_missing_roots(tmp_path):
    assert find_snippet_dirs([tmp_path / "missing"]) == set()
    assert find_snippet_dirs([]) == set()


def test_find_snippet_dirs_returns_absolute_paths(tmp_path, monkeypatch):
    _tree(tmp_path)
    monkeypatch.chdir(tmp_path)

    found = find_snippet_dirs(["java"])

    assert found
    assert all(os.path.isabs(path) for path in found)


def test_symlinked_directories_followed_only_when_enabled(tmp_path):
    target = tmp_path / "elsewhere"
    (target / "snippet").mkdir(parents=True)
    root = tmp_path / "src"
    root.mkdir()
    (root / "linked").symlink_to(target, target_is_directory=True)

    assert SnippetLocator().find_snippet_dirs([root]) == set()

    locator = SnippetLocator(LocatorSettings(follow_symlinks=True))
    assert locator.find_snippet_dirs([root]) == {str(root / "linked" / "snippet")}


def test_symlink_named_snippet_matches_only_when_following_links(tmp_path):
    target = tmp_path / "elsewhere"
    target.mkdir()
    (target / "A.java").write_text("")
    root = tmp_path / "src"
    root.mkdir()
    (root / "snippet").symlink_to(target, target_is_directory=True)

    assert SnippetLocator().find_snippet_dirs([root]) == set()

    locator = SnippetLocator(LocatorSettings(follow_symlinks=True))
    found = locator.find_snippet_dirs([root])
    assert found == {str(root / "snippet")}
    assert locator.list_snippet_files(found) == [str(root / "snippet" / "A.java")]


def test_list_snippet_files_keeps_direct_regular_files(tmp_path):
    snippet = tmp_path / "snippet"
    (snippet / "nested").mkdir(parents=True)
    (snippet / "nested" / "Deep.java").write_text("")
    (snippet / "B.java").write_text("")
    (snippet / "A.java").write_text("")
    (snippet / "to_dir").symlink_to(snippet / "nested", target_is_directory=True)

    files = list_snippet_files({str(snippet)})

    assert files == [str(snippet / "A.java"), str(snippet / "B.java")]


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="named pipes not supported")
def test_list_snippet_files_excludes_special_files(tmp_path):
    snippet = tmp_path / "snippet"
    snippet.mkdir()
    (snippet / "A.java").write_text("")
    os.mkfifo(snippet / "pipe")

    assert list_snippet_files({str(snippet)}) == [str(snippet / "A.java")]


def test_list_snippet_files_of_empty_set():
    assert list_snippet_files(set()) == []


def test_list_snippet_files_propagates_io_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_snippet_files({str(tmp_path / "vanished" / "snippet")})


def test_derive_class_identifier_strips_snippet_segment_and_suffix():
    result = derive_class_identifier("/work/lib/src/main/java/com/example/snippet/Foo.java")

    assert result == DerivedClassId(identifier="com/example/Foo")
    assert result.value == "com/example/Foo"
    assert result.is_derived


def test_derive_class_identifier_falls_back_without_marker():
    result = derive_class_identifier("/tmp/out/Foo.java")

    assert isinstance(result, UnmappedClassId)
    assert result.value == "/tmp/out/Foo.java"
    assert str(result) == "/tmp/out/Foo.java"
    assert not result.is_derived


def test_derive_class_identifier_keeps_other_extensions():
    result = derive_class_identifier("/w/src/main/java/com/example/snippet/Foo.txt")

    assert result.value == "com/example/Foo.txt"


def test_derive_class_identifier_replacements_are_optional():
    assert derive_class_identifier("/w/src/main/java/com/example/Foo.java").value == "com/example/Foo"
    assert derive_class_identifier("/w/src/main/java/com/example/Foo").value == "com/example/Foo"


def test_derive_class_identifier_removes_only_one_exact_segment():
    result = derive_class_identifier("/w/src/main/java/com/snippets/snippet/snippet/Foo.java")

    assert result.value == "com/snippets/snippet/Foo"


def test_derive_class_identifier_uses_last_marker():
    result = derive_class_identifier("/a/src/main/java/copy/src/main/java/org/snippet/Bar.java")

    assert result.value == "org/Bar"


def test_snippet_path_string_is_none_for_empty_set():
    assert snippet_path_string(set()) is None


def test_snippet_path_string_joins_sorted_paths():
    result = snippet_path_string({"/b/snippet", "/a/snippet"})

    assert result == f"/a/snippet{os.pathsep}/b/snippet"
