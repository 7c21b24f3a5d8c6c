import copy

import pytest

from yamitools.common import NonCopyable, align16, align32, align8, align_pow2


def test_copy_is_refused():
    resource = NonCopyable()
    with pytest.raises(TypeError):
        resource.__copy__()
    with pytest.raises(TypeError):
        copy.copy(resource)


def test_deepcopy_is_refused():
    resource = NonCopyable()
    with pytest.raises(TypeError):
        resource.__deepcopy__({})
    with pytest.raises(TypeError):
        copy.deepcopy(resource)


def test_deepcopy_inside_container_is_refused():
    with pytest.raises(TypeError):
        copy.deepcopy([NonCopyable()])


@pytest.mark.parametrize("alignment", [1, 2, 4, 8, 16, 32, 64, 4096])
def test_align_pow2_invariants(alignment):
    for value in range(0, 200):
        aligned = align_pow2(value, alignment)
        assert aligned % alignment == 0
        assert value <= aligned < value + alignment


def test_align_already_aligned_values_unchanged():
    for value in (0, 32, 64, 1024):
        assert align8(value) == value
        assert align16(value) == value
        assert align32(value) == value


def test_align_helpers_match_generic():
    for value in range(100):
        assert align8(value) == align_pow2(value, 8)
        assert align16(value) == align_pow2(value, 16)
        assert align32(value) == align_pow2(value, 32)


def test_align_pinned_values():
    assert align8(1) == 8
    assert align16(17) == 32
    assert align32(33) == 64


@pytest.mark.parametrize("alignment", [0, -8, 3, 12])
def test_align_rejects_bad_alignment(alignment):
    with pytest.raises(ValueError):
        align_pow2(5, alignment)