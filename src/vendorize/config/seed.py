"""Seed data for the defaults tier of the config store.

The built-in seed file ships inside the package at
config/defaults/seed.yaml. Settings.seed_path can point at a replacement
file with the same layout.

A missing or empty seed file is an installation problem, so it raises
SeedFileError instead of silently producing an empty defaults tier.
"""

import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

import vendorize.config.store as store_module
import vendorize.errors as errors


def get_builtin_seed_path() -> _pathlib.Path:
    """Get the path to the bundled seed file."""
    return _pathlib.Path(__file__).parent / "defaults" / "seed.yaml"


def load_seed(path: _pathlib.Path | None = None) -> dict[str, _typing.Any]:
    """
    Load a seed file.

    Args:
        path: Seed file to read. Defaults to the bundled seed file.

    Returns:
        The parsed top-level mapping.

    Raises:
        SeedFileError: If the file is missing, unreadable, malformed, empty,
            or not a mapping at the top level.
    """
    seed_path = path if path is not None else get_builtin_seed_path()
    if not seed_path.exists():
        raise errors.SeedFileError(seed_path, "file not found")

    try:
        content = seed_path.read_text(encoding="utf-8")
    except OSError as e:
        raise errors.SeedFileError(seed_path, f"cannot read file: {e}") from e

    try:
        data = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise errors.SeedFileError(seed_path, f"invalid YAML: {e}") from e

    if not data:
        raise errors.SeedFileError(seed_path, "file is empty")
    if not isinstance(data, dict):
        raise errors.SeedFileError(
            seed_path,
            f"expected a mapping at the top level, got {type(data).__name__}",
        )
    return data


def seed_defaults(
    store: store_module.PathConfigStore,
    data: dict[str, _typing.Any] | None = None,
) -> None:
    """
    Populate the defaults tier of store.

    Args:
        store: Store to seed.
        data: Seed tree. Loaded from the bundled file when omitted.
    """
    store.seed(data if data is not None else load_seed())
