"""Disk geometry guessing from a total sector count ("LBA assist")."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class Geometry:
    """Cylinder/head/sector description of a drive."""

    heads: int = 0
    sectors: int = 0
    tracks: int = 0
    tot_sectors: int = 0


def compute_lba_geometry(geometry: Geometry) -> Geometry:
    """Fill in missing heads, sectors and tracks from ``tot_sectors``.

    Returns a new Geometry; the argument is left unchanged.  Geometries
    that are already complete, or lack a sector count, come back as they are.
    """
    g = replace(geometry)
    if g.heads and g.sectors and g.tracks:
        return g
    tot = g.tot_sectors
    if tot == 0:
        return g

    # Floppy sizes, allowing slightly more sectors per track than standard
    if tot <= 8640 and tot % 40 == 0:
        if tot <= 540:
            g.tracks, g.heads = 40, 1
        elif tot <= 1080:
            if g.heads == 1:
                g.tracks = 80
            else:
                g.tracks, g.heads = 40, 2
        else:
            g.tracks, g.heads = 80, 2
        g.sectors = (tot // g.heads // g.tracks) & 0xFFFF

    if not g.sectors or not g.heads:
        g.sectors = 63
        for heads in (16, 32, 64, 128):
            if tot < heads * g.sectors * 1024:
                g.heads = heads
                break
        else:
            g.heads = 255

    if not g.tracks:
        per_track = g.heads * g.sectors
        g.tracks = (tot + per_track - 1) // per_track
    return g