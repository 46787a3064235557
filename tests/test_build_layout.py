import os

import build_layout


def test_root_build_dir_moves_next_to_flutter_project(tmp_path):
    android_dir = tmp_path / "android"
    assert build_layout.root_build_dir(str(android_dir)) == str(tmp_path / "build")


def test_subproject_build_dir():
    assert build_layout.subproject_build_dir("build", "app") == os.path.join("build", "app")


def test_clean_removes_tree(tmp_path):
    build_dir = tmp_path / "build"
    (build_dir / "app" / "intermediates").mkdir(parents=True)
    (build_dir / "app" / "intermediates" / "x.txt").write_text("x", encoding="utf-8")

    assert build_layout.clean(str(build_dir)) is True
    assert not build_dir.exists()


def test_clean_missing_dir(tmp_path):
    assert build_layout.clean(str(tmp_path / "build")) is False
