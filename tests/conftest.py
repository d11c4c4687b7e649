from pathlib import Path

import pytest


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def sample_build(tmp_path: Path) -> Path:
    """A two-project build with snippet directories in several places.

    root/
      base/   module io.example.base, one java snippet dir, lookalike dirs, libs/
      ext/    java snippet dir and a resources snippet dir
      docs/   plain directory, not a project
    """
    root = tmp_path / "root"
    _write(root / "settings.gradle.kts", 'rootProject.name = "root"\n')

    base = root / "base"
    _write(
        base / "src/main/java/module-info.java",
        "/* header */\nmodule io.example.base {\n\texports io.example;\n}\n",
    )
    _write(base / "src/main/java/io/example/Foo.java", "class Foo {}\n")
    _write(base / "src/main/java/io/example/snippet/FooSnippets.java", "class FooSnippets {}\n")
    (base / "src/main/java/io/example/snippet/nested").mkdir(parents=True)
    _write(base / "src/main/java/io/example/snippets/Plural.java")
    _write(base / "src/main/java/io/example/Snippet/Upper.java")
    _write(base / "src/main/resources/io/example/messages.properties", "key=value\n")
    _write(base / "src/test/java/io/example/FooTest.java", "class FooTest {}\n")
    _write(base / "libs/dep-1.0.jar", "jar")
    _write(base / "libs/readme.txt", "not a jar")

    ext = root / "ext"
    _write(ext / "build.gradle.kts")
    _write(ext / "src/main/java/io/example/ext/Bar.java", "class Bar {}\n")
    _write(ext / "src/main/java/io/example/ext/snippet/BarSnippets.java", "class BarSnippets {}\n")
    _write(ext / "src/main/resources/snippet/usage.txt", "usage\n")

    _write(root / "docs/index.md", "# docs\n")
    (root / ".git").mkdir()
    return root
