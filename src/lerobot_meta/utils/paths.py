"""Path helpers for dataset sub-folders on the artifact host."""


def normalize_base_path(base_path: str | None) -> str:
    """Normalize a dataset sub-path prefix.

    - Strip leading/trailing slashes
    - Append a single trailing slash when anything is left

    ``"/a/b/"``, ``"a/b/"`` and ``"a/b"`` all become ``"a/b/"``; empty input
    gives ``""``. Applying it twice gives the same result.

    Args:
        base_path: Sub-folder of the repository holding the dataset.

    Returns:
        Prefix ready to be placed in front of a repository-relative path.
    """
    if not base_path:
        return ""

    stripped = base_path.strip("/")
    return f"{stripped}/" if stripped else ""
