"""Placeholder navigation.json for the extractDeepLinks<Variant> tasks.

The deep link extraction step fails outright when its navigation.json input
is missing, so an empty JSON object is written ahead of it.
"""
import os

from task_seeder import register_seeder

DEEP_LINKS_MARKER = "extractDeepLinks"
NAVIGATION_JSON = "navigation.json"
NAVIGATION_JSON_PAYLOAD = b"{}"


def is_deep_link_task(name):
    return DEEP_LINKS_MARKER in name


def variant_for(name):
    suffix = name.replace(DEEP_LINKS_MARKER, "")
    return suffix[:1].lower() + suffix[1:]


def navigation_json_dir(build_dir, name):
    suffix = name.replace(DEEP_LINKS_MARKER, "")
    return os.path.join(
        build_dir,
        "intermediates",
        "navigation_json",
        variant_for(name),
        DEEP_LINKS_MARKER + suffix,
    )


def navigation_json_path(build_dir, name):
    return os.path.join(navigation_json_dir(build_dir, name), NAVIGATION_JSON)


def install(registry, build_dir):
    register_seeder(
        registry,
        is_deep_link_task,
        lambda name: navigation_json_path(build_dir, name),
        NAVIGATION_JSON_PAYLOAD,
    )
