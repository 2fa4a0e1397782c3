"""Tests for the light buffers and the frame protocol."""

import pygame
import pytest

from lighting.lightmap import LightMap
from lighting.visibility import Vertex

from conftest import rgb

GREY = (51, 51, 51)


def square_fan(color=GREY):
    """A fan covering the whole 100x100 buffer, corners in angle order."""
    return [Vertex(p, color) for p in [(50, 50), (0, 0), (100, 0), (100, 100), (0, 100)]]


class TestDrawSample:

    def test_sample_lights_the_fan(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample(square_fan())
        assert rgb(lm.lightmap, (30, 45)) == GREY
        assert rgb(lm.sketch, (30, 45)) == GREY

    def test_samples_add_up(self):
        """Overlapping samples brighten instead of overwriting."""
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample(square_fan())
            frame.add_sample(square_fan())
        assert rgb(lm.lightmap, (30, 45)) == (102, 102, 102)
        # The sketch only ever holds one sample
        assert rgb(lm.sketch, (30, 45)) == GREY

    def test_addition_saturates(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            for _ in range(6):
                frame.add_sample(square_fan((60, 60, 60)))
        assert rgb(lm.lightmap, (30, 45)) == (255, 255, 255)

    def test_partial_fan(self):
        """Only the triangle's area is lit."""
        lm = LightMap((100, 100))
        fan = [Vertex(p, GREY) for p in [(0, 0), (50, 0), (0, 50)]]
        with lm.frame() as frame:
            frame.add_sample(fan)
        assert rgb(lm.lightmap, (5, 5)) == GREY
        assert rgb(lm.lightmap, (90, 90)) == (0, 0, 0)

    def test_overlap_within_one_sample_is_opaque(self):
        """Overlapping triangles of one fan don't add up in the sketch."""
        lm = LightMap((100, 100))
        fan = [Vertex(p, GREY) for p in [(50, 50), (0, 0), (100, 0), (0, 40)]]
        with lm.frame() as frame:
            frame.add_sample(fan)
        # (40, 35) lies in both the first and the second triangle
        assert rgb(lm.sketch, (40, 35)) == GREY
        assert rgb(lm.lightmap, (40, 35)) == GREY

    def test_source_only_draws_nothing(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample([Vertex((50, 50), GREY)])
        assert rgb(lm.lightmap, (50, 50)) == (0, 0, 0)


class TestFrameProtocol:

    def test_begin_frame_clears(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample(square_fan())
        with lm.frame():
            pass
        assert rgb(lm.lightmap, (30, 45)) == (0, 0, 0)

    def test_sample_count(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample(square_fan())
            frame.add_sample(square_fan())
        assert lm.sample_count == 2
        assert not lm.in_frame

    def test_add_outside_frame(self):
        lm = LightMap((100, 100))
        with pytest.raises(RuntimeError):
            lm.add_sample(square_fan())

    def test_end_without_begin(self):
        with pytest.raises(RuntimeError):
            LightMap((10, 10)).end_frame()

    def test_nested_begin(self):
        lm = LightMap((10, 10))
        lm.begin_frame()
        with pytest.raises(RuntimeError):
            lm.begin_frame()

    def test_frame_ends_on_error(self):
        lm = LightMap((100, 100))
        with pytest.raises(ValueError):
            with lm.frame():
                raise ValueError("boom")
        assert not lm.in_frame


class TestPresent:

    def test_centered_on_screen(self):
        lm = LightMap((100, 100))
        with lm.frame() as frame:
            frame.add_sample(square_fan())
        screen = pygame.Surface((120, 140))
        offset = lm.present(screen)
        assert offset == (10, 20)
        assert rgb(screen, (5, 5)) == (0, 0, 0)
        assert rgb(screen, (40, 65)) == GREY
