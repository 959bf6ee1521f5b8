"""
Effect library tests

Deterministic effects are checked against exact frames; randomized ones
against their value ranges with a seeded random source.
"""

import random

import pytest

from animations.breathe import BreatheEffect
from animations.fire import FireEffect
from animations.gradient import ColorWheelEffect, GradientEffect, RainbowEffect
from animations.lava_lamp import BOUND, LavaLampEffect
from animations.matrix_rain import MatrixRainEffect
from animations.ocean import OceanWavesEffect
from animations.registry import EFFECTS, create_effect
from animations.sparkle import DiscoEffect, SparkleEffect
from animations.waves import (
    RINGS,
    WaveBottomTopEffect,
    WaveExpandEffect,
    WaveLeftRightEffect,
    WaveRightLeftEffect,
    WaveTopBottomEffect,
)
from models.color import Color

BLUE = Color(0, 0, 255)


class FixedRandom(random.Random):
    """Random source whose random() always returns `value`"""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self):
        return self.value


def lit(frame):
    return [i for i, cell in enumerate(frame) if cell is not None]


def run(effect, ticks):
    """Render `ticks` frames the way the scheduler does"""
    phase = effect.INITIAL_PHASE
    frames = []
    for _ in range(ticks):
        frames.append(effect.render(phase))
        phase = effect.advance(phase)
    return frames


# ============================================================
# Waves
# ============================================================

class TestWaves:

    def test_top_bottom_sweeps_rows_downwards(self):
        frames = run(WaveTopBottomEffect(color=BLUE), 6)
        assert lit(frames[0]) == [0, 1, 2, 3, 4]
        assert lit(frames[1]) == [5, 6, 7, 8, 9]
        assert lit(frames[4]) == [20, 21, 22, 23, 24]
        # wraps back to the top
        assert lit(frames[5]) == lit(frames[0])

    def test_bottom_top_starts_at_bottom_row(self):
        frames = run(WaveBottomTopEffect(color=BLUE), 6)
        assert lit(frames[0]) == [20, 21, 22, 23, 24]
        assert lit(frames[1]) == [15, 16, 17, 18, 19]
        assert lit(frames[5]) == lit(frames[0])

    def test_left_right_sweeps_columns(self):
        frames = run(WaveLeftRightEffect(color=BLUE), 2)
        assert lit(frames[0]) == [0, 5, 10, 15, 20]
        assert lit(frames[1]) == [1, 6, 11, 16, 21]

    def test_right_left_starts_at_last_column(self):
        frames = run(WaveRightLeftEffect(color=BLUE), 2)
        assert lit(frames[0]) == [4, 9, 14, 19, 24]
        assert lit(frames[1]) == [3, 8, 13, 18, 23]

    def test_lit_cells_use_selected_color(self):
        frame = WaveTopBottomEffect(color=BLUE).render(0)
        assert all(cell == BLUE for cell in frame[:5])

    def test_expand_grows_from_center(self):
        frames = run(WaveExpandEffect(color=BLUE), 4)
        assert lit(frames[0]) == [12]
        assert lit(frames[1]) == sorted(RINGS[1])
        assert len(lit(frames[2])) == 16
        assert lit(frames[3]) == [12]

    @pytest.mark.parametrize("phase, pattern", [
        (0, [".....", ".....", "..#..", ".....", "....."]),
        (1, [".....", ".###.", ".#.#.", ".###.", "....."]),
        (2, ["#####", "#...#", "#...#", "#...#", "#####"]),
    ])
    def test_expand_full_frame_per_ring(self, phase, pattern):
        expected = [BLUE if ch == "#" else None for ch in "".join(pattern)]
        assert WaveExpandEffect(color=BLUE).render(phase) == expected

    def test_rings_cover_matrix_once(self):
        cells = [i for ring in RINGS for i in ring]
        assert sorted(cells) == list(range(25))


# ============================================================
# Hue effects
# ============================================================

class TestHueEffects:

    def test_gradient_first_cell_is_red_at_phase_zero(self):
        frame = GradientEffect().render(0.0)
        assert frame[0] == Color(255, 0, 0)
        assert all(cell is not None for cell in frame)

    def test_gradient_is_constant_along_anti_diagonals(self):
        frame = GradientEffect().render(0.3)
        # (0, 1) and (1, 0) share row + col
        assert frame[1] == frame[5]
        assert frame[4] == frame[20]

    def test_rainbow_rows_are_uniform(self):
        frame = RainbowEffect().render(0.0)
        for row in range(5):
            assert len(set(frame[row * 5:row * 5 + 5])) == 1
        assert frame[0] == Color(255, 0, 0)
        assert frame[0] != frame[5]

    def test_color_wheel_center_shows_phase_hue(self):
        assert ColorWheelEffect().render(0.0)[12] == Color(255, 0, 0)
        assert ColorWheelEffect().render(1 / 3)[12] == Color(0, 255, 0)

    def test_gradient_full_frame_at_phase_zero(self):
        # hue per row + col = 0..8, in eighths of the circle
        red, orange, lime, spring = (255, 0, 0), (255, 191, 0), (127, 255, 0), (0, 255, 63)
        cyan, azure, violet, rose = (0, 255, 255), (0, 63, 255), (127, 0, 255), (255, 0, 191)
        expected = [
            red, orange, lime, spring, cyan,
            orange, lime, spring, cyan, azure,
            lime, spring, cyan, azure, violet,
            spring, cyan, azure, violet, rose,
            cyan, azure, violet, rose, red,
        ]
        assert GradientEffect().render(0.0) == [Color(*rgb) for rgb in expected]

    def test_color_wheel_full_frame_at_phase_zero(self):
        expected = [
            (0, 63, 255), (14, 0, 255), (127, 0, 255), (240, 0, 255), (255, 0, 191),
            (0, 142, 255), (0, 63, 255), (127, 0, 255), (255, 0, 191), (255, 0, 112),
            (0, 255, 255), (0, 255, 255), (255, 0, 0), (255, 0, 0), (255, 0, 0),
            (0, 255, 142), (0, 255, 63), (127, 255, 0), (255, 191, 0), (255, 112, 0),
            (0, 255, 63), (14, 255, 0), (127, 255, 0), (240, 255, 0), (255, 191, 0),
        ]
        assert ColorWheelEffect().render(0.0) == [Color(*rgb) for rgb in expected]

    def test_float_phase_wraps_to_zero(self):
        effect = GradientEffect()
        phase = effect.INITIAL_PHASE
        for _ in range(20):
            phase = effect.advance(phase)
        assert phase == pytest.approx(0.0, abs=1e-9)

    def test_float_phase_stays_in_range(self):
        effect = RainbowEffect()
        phase = effect.INITIAL_PHASE
        for _ in range(500):
            phase = effect.advance(phase)
            assert 0.0 <= phase < 1.0


# ============================================================
# Breathe
# ============================================================

class TestBreathe:

    def test_level_bounds(self):
        effect = BreatheEffect()
        levels = [effect.level(p) for p in range(effect.MODULUS)]
        assert min(levels) == pytest.approx(effect.MIN_LEVEL)
        assert max(levels) == pytest.approx(1.0)

    def test_dim_at_start_full_at_half_cycle(self):
        effect = BreatheEffect(color=Color(255, 0, 0))
        assert effect.render(0) == [Color(12, 0, 0)] * 25
        assert effect.render(20) == [Color(255, 0, 0)] * 25

    def test_keeps_hue_of_selected_color(self):
        frame = BreatheEffect(color=BLUE).render(10)
        assert frame[0].r == 0 and frame[0].g == 0 and frame[0].b > 0

    def test_scaled_truncates_and_clamps_factor(self):
        assert Color(255, 128, 10).scaled(0.5) == Color(127, 64, 5)
        assert Color(255, 128, 10).scaled(2.0) == Color(255, 128, 10)
        assert Color(255, 128, 10).scaled(-1.0) == Color(0, 0, 0)

    def test_phase_wraps_after_one_breath(self):
        effect = BreatheEffect()
        assert effect.advance(39) == 0


# ============================================================
# Ocean
# ============================================================

def test_ocean_is_blue_everywhere():
    for phase in (0.0, 0.25, 0.5, 0.75):
        frame = OceanWavesEffect().render(phase)
        for cell in frame:
            assert cell is not None
            assert cell.b > cell.r
            assert cell.b >= cell.g


def test_ocean_is_radially_symmetric():
    frame = OceanWavesEffect().render(0.4)
    assert frame[0] == frame[4] == frame[20] == frame[24]
    assert frame[7] == frame[11] == frame[13] == frame[17]


# ============================================================
# Randomized effects
# ============================================================

class TestFire:

    def test_every_cell_is_a_flame_color(self):
        effect = FireEffect(rng=random.Random(7))
        for frame in run(effect, 20):
            for cell in frame:
                assert cell is not None
                assert cell.b == 0
                assert cell.g <= cell.r

    def test_bottom_row_is_hotter_than_top_row(self):
        frame = FireEffect(rng=random.Random(3)).render(0)
        top = [cell.r for cell in frame[:5]]
        bottom = [cell.r for cell in frame[20:]]
        assert max(top) < min(bottom)

    def test_same_seed_same_frames(self):
        a = run(FireEffect(rng=random.Random(42)), 3)
        b = run(FireEffect(rng=random.Random(42)), 3)
        assert a == b


class TestSparkle:

    def test_three_to_five_cells_lit(self):
        effect = SparkleEffect(rng=random.Random(11))
        for frame in run(effect, 50):
            assert 3 <= len(lit(frame)) <= 5

    def test_disco_lights_everything(self):
        for frame in run(DiscoEffect(rng=random.Random(5)), 10):
            assert len(lit(frame)) == 25


class TestMatrixRain:

    def test_drops_spawn_and_fall(self):
        effect = MatrixRainEffect(rng=FixedRandom(0.0))

        first = effect.render(0)
        assert lit(first) == [0, 1, 2, 3, 4]
        assert first[0] == Color(0, 255, 0)

        second = effect.render(1)
        assert second[5] == Color(0, 255, 0)
        assert second[0] == Color(0, 127, 0)

        third = effect.render(2)
        assert third[10] == Color(0, 255, 0)
        assert third[5] == Color(0, 127, 0)
        assert third[0] == Color(0, 51, 0)

    def test_no_spawn_when_chance_not_met(self):
        effect = MatrixRainEffect(rng=FixedRandom(0.99))
        assert lit(effect.render(0)) == []
        assert effect.drops == {}

    def test_drop_removed_after_tail_leaves(self):
        effect = MatrixRainEffect(rng=FixedRandom(0.0))
        effect.render(0)
        effect.rng = FixedRandom(0.99)
        frames = [effect.render(i) for i in range(1, 8)]
        assert effect.drops == {}
        assert lit(frames[-1]) == []

    def test_only_green_channel(self):
        effect = MatrixRainEffect(rng=random.Random(1))
        for frame in run(effect, 40):
            for cell in frame:
                if cell is not None:
                    assert cell.r == 0 and cell.b == 0


class TestLavaLamp:

    def test_blobs_stay_inside_matrix(self):
        effect = LavaLampEffect(rng=random.Random(9))
        for _ in range(200):
            effect.render(0)
            for blob in effect.blobs:
                assert 0.0 <= blob.x <= BOUND
                assert 0.0 <= blob.y <= BOUND

    def test_something_is_lit(self):
        effect = LavaLampEffect(rng=random.Random(2))
        for frame in run(effect, 20):
            assert len(frame) == 25
            assert lit(frame)

    def test_blobs_move_between_frames(self):
        a = LavaLampEffect(rng=random.Random(4))
        b = LavaLampEffect(rng=random.Random(4))
        run(a, 10)
        assert [blob.x for blob in b.blobs] != [blob.x for blob in a.blobs]


# ============================================================
# Every registered effect
# ============================================================

@pytest.mark.parametrize("effect_id", list(EFFECTS))
def test_every_effect_renders_25_cells(effect_id):
    effect = create_effect(effect_id, color=BLUE, rng=random.Random(0))
    for frame in run(effect, 10):
        assert len(frame) == 25
        assert all(cell is None or isinstance(cell, Color) for cell in frame)
