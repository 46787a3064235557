"""Seed navigation.json ahead of a Flutter Android build.

Usage:
  python3 seed_navigation_json.py android
  python3 seed_navigation_json.py android debug release
"""
import sys

import build_layout
import deep_links
from task_seeder import BuildConfigurationError, TaskRegistry

APP_PROJECT = "app"
DEFAULT_VARIANTS = ["debug", "profile", "release"]


def task_name_for(variant):
    return deep_links.DEEP_LINKS_MARKER + variant[:1].upper() + variant[1:]


def seed(android_dir, variants):
    """Run the seeding hooks of every extractDeepLinks task; return the seeded paths."""
    app_build = build_layout.subproject_build_dir(build_layout.root_build_dir(android_dir), APP_PROJECT)

    registry = TaskRegistry()
    deep_links.install(registry, app_build)

    results = []
    # Repeated variants map to the same task
    for variant in dict.fromkeys(variants):
        task = registry.register(task_name_for(variant))
        task.run()
        results.append((deep_links.navigation_json_path(app_build, task.name), True in task.hook_results))
    return results


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("usage: seed_navigation_json.py <android_dir> [variant ...]")
        return 2

    android_dir = argv[0]
    variants = list(dict.fromkeys(argv[1:])) or DEFAULT_VARIANTS

    print(f"Seeding {deep_links.NAVIGATION_JSON} for {', '.join(variants)}...")
    try:
        results = seed(android_dir, variants)
    except BuildConfigurationError as e:
        print(f"Error: {e}")
        return 1

    for path, created in results:
        if created:
            print(f"Added: {path}")
        else:
            print(f"Present: {path}")

    print(f"\nSeeded {sum(1 for _, created in results if created)} of {len(results)} files.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
