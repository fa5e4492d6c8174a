"""Tests for the Advanced Custom Fields path overrides."""

from wp_essentials.filters import acf_load_json_paths, acf_save_json_path


FIELDS_DIR = "/srv/www/wp-content/fields"


def test_save_path_overrides_default():
    assert acf_save_json_path("/srv/www/wp-content/themes/site/acf-json", fields_dir=FIELDS_DIR) == FIELDS_DIR


def test_load_paths_replace_defaults():
    default_paths = ["/srv/www/wp-content/themes/site/acf-json"]
    assert acf_load_json_paths(default_paths, fields_dir=FIELDS_DIR) == [FIELDS_DIR]


def test_load_paths_from_empty():
    assert acf_load_json_paths([], fields_dir=FIELDS_DIR) == [FIELDS_DIR]
