"""Storage key derivation for candidate files."""


def build_storage_key(base_path: str, root_path: str, file_name: str) -> str:
    """Return the object key for ``file_name``.

    ``base_path`` is the configured storage directory. Any ``//<file_name>``
    suffix and every occurrence of ``root_path`` are removed, backslashes are
    turned into forward slashes and the file name is appended. No separator is
    inserted, so ``base_path`` is expected to end with one.
    """
    prefix = base_path.replace("//" + file_name, "")
    if root_path:
        prefix = prefix.replace(root_path, "")
    return prefix.replace("\\", "/") + file_name
