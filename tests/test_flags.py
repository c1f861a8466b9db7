"""
Tests for drawing flags onto pygame surfaces.

Only off-screen surfaces are used, no display is opened.
"""

import pygame

from flagquiz.models.flag import BLACK, GOLD, NAVY, RED, design_for
from flagquiz.ui.flags import FlagRenderer, draw_design


class TestDrawDesign:
    def test_surface_size(self):
        surface = draw_design(design_for("France"), 90, 60)
        assert surface.get_size() == (90, 60)

    def test_horizontal_stripes(self):
        surface = draw_design(design_for("Germany"), 90, 60)
        assert surface.get_at((45, 5))[:3] == BLACK
        assert surface.get_at((45, 30))[:3] == RED
        assert surface.get_at((45, 55))[:3] == GOLD

    def test_vertical_stripes(self):
        surface = draw_design(design_for("Italy"), 90, 60)
        left = surface.get_at((5, 30))[:3]
        right = surface.get_at((85, 30))[:3]
        assert left != right
        assert right == RED

    def test_canton_drawn(self):
        surface = draw_design(design_for("US"), 130, 65)
        assert surface.get_at((2, 2))[:3] == NAVY
        assert surface.get_at((128, 2))[:3] == RED


class TestFlagRenderer:
    def test_falls_back_to_drawing(self, tmp_path):
        renderer = FlagRenderer(flags_dir=str(tmp_path), width=60, height=30)
        surface = renderer.surface_for("Poland")
        assert isinstance(surface, pygame.Surface)
        assert surface.get_size() == (60, 30)

    def test_surfaces_cached(self, tmp_path):
        renderer = FlagRenderer(flags_dir=str(tmp_path))
        assert renderer.surface_for("Spain") is renderer.surface_for("Spain")
        renderer.clear()
        assert renderer._cache == {}

    def test_unknown_country_gets_placeholder(self, tmp_path):
        renderer = FlagRenderer(flags_dir=str(tmp_path), width=20, height=10)
        assert renderer.surface_for("Atlantis").get_at((5, 5))[:3] == (128, 128, 128)
