from .paths import join_container_path, relative_to_workspace

__all__ = [
    "join_container_path",
    "relative_to_workspace",
]
