from chromapal import Color, LCGRandomSource, distance_ciede2000, sorted_colors, soft_palette_with_rand, SoftPaletteSettings
from chromapal.sort import DisjointSet, minimum_spanning_tree


def test_sort_empty_and_single():
    assert sorted_colors([]) == []
    c = Color(0.2, 0.3, 0.4)
    result = sorted_colors([c])
    assert result == [c]
    assert result[0] is c


def test_sort_does_not_modify_input():
    colors = [Color(1.0, 1.0, 1.0), Color(0.0, 0.0, 0.0), Color(0.5, 0.5, 0.5)]
    before = list(colors)
    sorted_colors(colors)
    assert colors == before


def test_sort_is_a_permutation():
    colors = soft_palette_with_rand(10, SoftPaletteSettings(iterations=5), LCGRandomSource(8))
    result = sorted_colors(colors)
    assert len(result) == len(colors)
    assert sorted(map(id, result)) == sorted(map(id, colors))


def test_sort_starts_with_darkest():
    colors = soft_palette_with_rand(10, SoftPaletteSettings(iterations=5), LCGRandomSource(21))
    black = Color(0.0, 0.0, 0.0)
    darkest = min(colors, key=lambda c: distance_ciede2000(black, c))
    assert sorted_colors(colors)[0] is darkest


def test_sort_grays_by_lightness():
    grays = [Color(v / 10, v / 10, v / 10) for v in range(11)]
    shuffled = [grays[i] for i in (7, 2, 10, 0, 5, 3, 9, 1, 8, 6, 4)]
    assert sorted_colors(shuffled) == grays


def test_disjoint_set():
    sets = DisjointSet(5)
    assert sets.union(0, 1)
    assert sets.union(3, 4)
    assert not sets.union(1, 0)
    assert sets.find(0) == sets.find(1)
    assert sets.find(1) != sets.find(3)
    assert sets.union(1, 4)
    assert sets.find(0) == sets.find(3)
    assert sets.find(2) == 2


def test_minimum_spanning_tree_skips_cycles():
    adjacency = minimum_spanning_tree(3, [(0, 1), (1, 2), (0, 2)])
    assert adjacency == {0: [1], 1: [0, 2], 2: [1]}
