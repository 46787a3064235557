import os
import shutil

# Relative to the default android/build directory, i.e. the Flutter project's build/
RELOCATED_BUILD_DIR = os.path.join("..", "..", "build")


def root_build_dir(android_dir):
    default_build = os.path.join(os.path.abspath(android_dir), "build")
    return os.path.normpath(os.path.join(default_build, RELOCATED_BUILD_DIR))


def subproject_build_dir(root_build, project_name):
    return os.path.join(root_build, project_name)


def clean(build_dir):
    if not os.path.isdir(build_dir):
        return False
    shutil.rmtree(build_dir)
    return True
