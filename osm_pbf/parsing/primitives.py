"""String-table and coordinate primitives shared by every group decoder."""
from typing import Sequence

from osm_pbf.models.blocks import NANODEGREE
from osm_pbf.models.elements import Tags


def make_string(index: int, block) -> str:
    """Resolve a string-table index to text.

    Invalid UTF-8 is replaced rather than rejected.

    Args:
        index: Position in ``block.stringtable.s``
        block: PrimitiveBlock-like object

    Returns:
        Decoded string

    Raises:
        IndexError: If the index falls outside the string table
    """
    table = block.stringtable.s
    if index < 0 or index >= len(table):
        raise IndexError(
            f"String table index {index} out of range (table size {len(table)})"
        )
    return bytes(table[index]).decode('utf-8', errors='replace')


def denormalize(value: int, granularity: int, offset: int) -> float:
    """Convert a stored fixed-point coordinate to degrees."""
    # Python ints do not overflow, so the product is exact.
    return NANODEGREE * (offset + granularity * value)


def make_lat(value: int, block) -> float:
    """Convert a stored latitude to degrees using the block's parameters."""
    return denormalize(value, block.granularity, block.lat_offset)


def make_lon(value: int, block) -> float:
    """Convert a stored longitude to degrees using the block's parameters."""
    return denormalize(value, block.granularity, block.lon_offset)


def make_tags(keys: Sequence[int], vals: Sequence[int], block) -> Tags:
    """Build a tag dict from parallel key/value index arrays.

    Only the common prefix of ``keys`` and ``vals`` is used. A repeated key
    keeps its last value.

    Args:
        keys: String-table indices of tag keys
        vals: String-table indices of tag values
        block: PrimitiveBlock-like object

    Returns:
        Dict of tag key-value pairs, sorted by key
    """
    tags = {}
    for k, v in zip(keys, vals):
        tags[make_string(k, block)] = make_string(v, block)
    return dict(sorted(tags.items()))
