"""
Lexicon Duel - Tile Bag

Defines the full tile distribution and the bag primitives: generating a
shuffled bag, drawing from it, refilling a rack and swapping tiles.

Racks and bags are tuples; every operation returns new values and leaves
its inputs untouched.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable

from src.engine.base import RACK_SIZE, ErrorKind, Tile


# ── Tile distribution ──────────────────────────────────────────────────
# Letter -> (count, value). "_" is the blank. Total: 100 tiles.

LETTER_DISTRIBUTION: dict[str, tuple[int, int]] = {
    "A": (9, 1),  "B": (2, 3),  "C": (2, 3),  "D": (4, 2),  "E": (12, 1),
    "F": (2, 4),  "G": (3, 2),  "H": (2, 4),  "I": (9, 1),  "J": (1, 8),
    "K": (1, 5),  "L": (4, 1),  "M": (2, 3),  "N": (6, 1),  "O": (8, 1),
    "P": (2, 3),  "Q": (1, 10), "R": (6, 1),  "S": (4, 1),  "T": (6, 1),
    "U": (4, 1),  "V": (2, 4),  "W": (2, 4),  "X": (1, 8),  "Y": (2, 4),
    "Z": (1, 10), "_": (2, 0),
}

BLANK = "_"

TOTAL_TILES = sum(count for count, _ in LETTER_DISTRIBUTION.values())  # 100


@dataclass(frozen=True)
class DrawResult:
    """
    Result of drawing from the bag.

    Attributes:
        drawn: Tiles taken, in draw order (may be fewer than requested)
        bag: Remaining bag
    """
    drawn: tuple[Tile, ...]
    bag: tuple[Tile, ...]


@dataclass(frozen=True)
class SwapResult:
    """
    Result of a swap attempt.

    On failure ``rack`` and ``bag`` are the unchanged inputs.

    Attributes:
        success: Whether the swap happened
        rack: Rack after the swap
        bag: Bag after the swap
        error: Failure category, if any
        reason: Human-readable reason, if any
        returned: Tiles put back into the bag (blanks reset)
    """
    success: bool
    rack: tuple[Tile, ...]
    bag: tuple[Tile, ...]
    error: ErrorKind | None = None
    reason: str | None = None
    returned: tuple[Tile, ...] = field(default_factory=tuple)


def make_tiles() -> list[Tile]:
    """Return every tile of the distribution, unshuffled, with unique ids."""
    tiles: list[Tile] = []
    for letter, (count, value) in LETTER_DISTRIBUTION.items():
        for _ in range(count):
            tile_id = f"tile-{len(tiles)}"
            if letter == BLANK:
                tiles.append(Tile(id=tile_id, letter="", value=0, is_blank=True))
            else:
                tiles.append(Tile(id=tile_id, letter=letter, value=value))
    return tiles


def generate_bag(rng: random.Random | None = None) -> tuple[Tile, ...]:
    """
    Create a uniformly shuffled bag holding the full distribution.

    Args:
        rng: Optional random source (for reproducible tests)

    Returns:
        Tuple of 100 tiles
    """
    tiles = make_tiles()
    (rng or random).shuffle(tiles)
    return tuple(tiles)


def draw(bag: tuple[Tile, ...], n: int) -> DrawResult:
    """
    Draw up to ``n`` tiles from the end of the bag.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"Cannot draw a negative number of tiles, got {n}.")
    count = min(n, len(bag))
    split = len(bag) - count
    return DrawResult(drawn=tuple(reversed(bag[split:])), bag=bag[:split])


def refill_rack(
    rack: tuple[Tile, ...],
    bag: tuple[Tile, ...],
    capacity: int = RACK_SIZE,
) -> tuple[tuple[Tile, ...], tuple[Tile, ...]]:
    """
    Top the rack up to capacity from the bag.

    Returns:
        Tuple of (new_rack, new_bag); the rack stays short if the bag runs out
    """
    result = draw(bag, max(0, capacity - len(rack)))
    return rack + result.drawn, result.bag


def swap_tiles(
    rack: tuple[Tile, ...],
    bag: tuple[Tile, ...],
    tile_ids: Iterable[str],
    rng: random.Random | None = None,
) -> SwapResult:
    """
    Exchange selected rack tiles for fresh ones from the bag.

    The selected tiles go back into the bag (blanks reset), the bag is
    reshuffled, then the same number of tiles is drawn.

    Args:
        rack: Current rack
        bag: Current bag
        tile_ids: Ids of the rack tiles to exchange
        rng: Optional random source

    Returns:
        SwapResult; rejected without changes when nothing is selected, a
        tile is not on the rack, or the bag holds fewer tiles than selected
    """
    selected = set(tile_ids)
    if not selected:
        return SwapResult(success=False, rack=rack, bag=bag, reason="No tiles selected.")

    rack_ids = {tile.id for tile in rack}
    missing = selected - rack_ids
    if missing:
        return SwapResult(
            success=False,
            rack=rack,
            bag=bag,
            reason=f"Tiles not on rack: {', '.join(sorted(missing))}.",
        )

    if len(selected) > len(bag):
        return SwapResult(
            success=False,
            rack=rack,
            bag=bag,
            error=ErrorKind.RESOURCE_EXHAUSTION,
            reason=f"Not enough tiles in bag ({len(bag)} left, {len(selected)} requested).",
        )

    keeping = tuple(tile for tile in rack if tile.id not in selected)
    returning = tuple(tile.reset() for tile in rack if tile.id in selected)

    pool = list(bag + returning)
    (rng or random).shuffle(pool)
    result = draw(tuple(pool), len(returning))

    return SwapResult(
        success=True,
        rack=keeping + result.drawn,
        bag=result.bag,
        returned=returning,
    )
