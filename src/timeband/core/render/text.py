"""Band renderer: lay out bucketed entries as an indented ASCII timeline.

Each bucket boundary from ``start`` through ``end`` produces one block,
followed by a blank line:

- an empty bucket renders as a lone ``|``;
- an occupied bucket opens with ``| `` and lists its entries ascending by
  ``(label, tag, date)``. The first entry sits after a single space; the
  entry at position ``k > 0`` is prefixed with `` \\`` plus ``k`` more
  backslashes, so overlapping entries form a staircase.

Example (points A@1, B@5, C@9)::

    |  1 CE: A

    |

    |  5 CE: B

    |

    |  9 CE: C

"""

from __future__ import annotations

from collections.abc import Iterable

from timeband.core.bucketer import Buckets, bucket_entries, bucket_index
from timeband.core.contracts.entry import Entry

EMPTY_MARKER = "|\n"
BLOCK_PRELUDE = "| "


def overlap_prefix(position: int) -> str:
    """Return the indentation for the entry at ``position`` within a bucket."""
    if position == 0:
        return " "
    return " \\" + "\\" * position + " "


def render_bucket(entries: list[Entry]) -> str:
    """Render one occupied bucket (without the trailing blank line)."""
    lines = [f"{overlap_prefix(i)}{entry}\n" for i, entry in enumerate(entries)]
    return BLOCK_PRELUDE + "".join(lines)


def render_buckets(buckets: Buckets) -> str:
    """Render every bucket boundary in ascending year order."""
    blocks: list[str] = []
    for year in buckets.boundaries():
        index = bucket_index(buckets.start, year, buckets.interval)
        if index in buckets:
            blocks.append(render_bucket(buckets.ordered(index)))
        else:
            blocks.append(EMPTY_MARKER)
        blocks.append("\n")
    return "".join(blocks)


def render_text(entries: Iterable[Entry]) -> str:
    """Bucket ``entries`` and render them as a single text timeline."""
    return render_buckets(bucket_entries(entries))


__all__ = [
    "BLOCK_PRELUDE",
    "EMPTY_MARKER",
    "overlap_prefix",
    "render_bucket",
    "render_buckets",
    "render_text",
]
