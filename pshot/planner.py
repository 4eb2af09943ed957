def tile_count(total_height: int, tile_height: int) -> int:
    """Number of viewport tiles needed to cover ``total_height`` pixels."""
    if tile_height <= 0:
        raise ValueError(f"tile height must be positive, got {tile_height}")
    if total_height <= 0:
        return 0
    return -(-total_height // tile_height)


def plan_offsets(total_height: int, tile_height: int) -> list[int]:
    """Scroll offsets for each tile, top to bottom.

    The last offset may leave the viewport hanging past ``total_height``;
    the compositor clips that overhang instead of shortening the capture.

    Example:
        plan_offsets(2000, 800) == [0, 800, 1600]
    """
    return [i * tile_height for i in range(tile_count(total_height, tile_height))]
