import os
import sys

from deep_links import DEEP_LINKS_MARKER

# Gradle build scripts that may carry the navigation.json workaround
INCLUDE_FILENAMES = {
    'build.gradle', 'build.gradle.kts'
}

# Define directories to exclude (generated output and tool caches)
EXCLUDE_DIRS = {
    'build', '.gradle', '.cxx', '.idea', 'intermediates', 'node_modules'
}


def is_excluded(path, root_dir):
    # Normalize path separators
    path = os.path.normpath(path)
    root_dir = os.path.normpath(root_dir)

    rel_path = os.path.relpath(path, root_dir)
    parts = rel_path.split(os.sep)

    for part in parts:
        if part in EXCLUDE_DIRS or (part.startswith('.') and part not in ('.', '..')):
            return True
    return False


def find_build_scripts(root_dir):
    scripts = []
    for root, dirs, files in os.walk(root_dir):
        # Modify dirs in-place to skip excluded directories
        dirs[:] = sorted(d for d in dirs if not is_excluded(os.path.join(root, d), root_dir))

        for file in sorted(files):
            if file in INCLUDE_FILENAMES:
                scripts.append(os.path.join(root, file))
    return scripts


def declares_workaround(file_path):
    with open(file_path, 'r', encoding='utf-8', errors='ignore') as infile:
        content = infile.read()
    return DEEP_LINKS_MARKER in content and 'navigation.json' in content


def find_workarounds(root_dir):
    return [p for p in find_build_scripts(root_dir) if declares_workaround(p)]


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: audit_build_scripts.py <android_dir>")
        return 2

    root_dir = argv[0]
    if not os.path.isdir(root_dir):
        print(f"WARNING: Directory not found: {root_dir}")
        return 2

    print(f"Scanning Gradle build scripts in {root_dir}...")
    matches = find_workarounds(root_dir)
    for file_path in matches:
        print(f"Found: {os.path.relpath(file_path, root_dir)}")

    if len(matches) > 1:
        print(f"\n{'='*80}")
        print(f"WARNING: {len(matches)} build scripts define the {DEEP_LINKS_MARKER} workaround.")
        print("Keep a single canonical copy.")
        print(f"{'='*80}")
        return 1

    print(f"\nScanned OK: {len(matches)} workaround definition(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
