"""Utility for turning an absolute source path into a section heading."""


def relative_heading(file_path: str, root_path: str) -> str:
    """Strip the solution directory prefix and normalize separators to '/'.

    Paths outside the root are returned whole, with separators normalized.
    """
    normalized = file_path.replace("\\", "/")
    root = root_path.replace("\\", "/").rstrip("/")
    # Windows paths compare case-insensitively
    if root and normalized.lower().startswith(root.lower() + "/"):
        return normalized[len(root) + 1 :]
    return normalized
