from dosfloppy.geometry import Geometry, compute_lba_geometry


def test_standard_high_density_floppy():
    g = compute_lba_geometry(Geometry(tot_sectors=2880))
    assert (g.tracks, g.heads, g.sectors) == (80, 2, 18)


def test_single_sided_floppy_uses_one_head():
    g = compute_lba_geometry(Geometry(tot_sectors=360))
    assert g.heads == 1
    assert g.tracks == 40
    assert g.heads * g.tracks * g.sectors == 360


def test_single_head_hint_selects_eighty_tracks():
    g = compute_lba_geometry(Geometry(heads=1, tot_sectors=720))
    assert g.heads == 1
    assert g.tracks == 80
    assert g.heads * g.tracks * g.sectors == 720


def test_double_sided_double_density():
    g = compute_lba_geometry(Geometry(tot_sectors=720))
    assert g.heads == 2
    assert g.tracks == 40
    assert g.heads * g.tracks * g.sectors == 720


def test_complete_geometry_unchanged():
    original = Geometry(heads=4, sectors=17, tracks=100, tot_sectors=2880)
    assert compute_lba_geometry(original) == original


def test_missing_total_unchanged():
    original = Geometry(heads=2)
    assert compute_lba_geometry(original) == original


def test_input_not_mutated():
    original = Geometry(tot_sectors=2880)
    compute_lba_geometry(original)
    assert original == Geometry(tot_sectors=2880)


def test_hard_disk_covers_all_sectors():
    for tot in (1_000_000, 5_000_000, 20_000_000, 300 * 63 * 1024):
        g = compute_lba_geometry(Geometry(tot_sectors=tot))
        assert g.sectors == 63
        assert g.heads in (16, 32, 64, 128, 255)
        per_track = g.heads * g.sectors
        assert g.tracks * per_track >= tot > (g.tracks - 1) * per_track


def test_huge_disk_uses_255_heads():
    g = compute_lba_geometry(Geometry(tot_sectors=300 * 63 * 1024))
    assert g.heads == 255


def test_known_heads_and_sectors_only_fill_tracks():
    g = compute_lba_geometry(Geometry(heads=4, sectors=10, tot_sectors=95))
    assert (g.heads, g.sectors) == (4, 10)
    assert g.tracks * 40 >= 95 > (g.tracks - 1) * 40