"""
Unit Tests for the stroke state machine
Tests for: Idle/Drawing transitions, segment chaining, tool capture
"""
import pytest

from achievify_doodle.config import Config
from achievify_doodle.surface.stroke_state import StrokePhase, StrokeState
from achievify_doodle.surface.tools import DrawingTool, parse_tool, settings_for


class TestTransitions:
    """Test Idle <-> Drawing transitions"""

    @pytest.fixture
    def state(self):
        return StrokeState()

    def test_starts_idle(self, state):
        """Test a new state machine is idle with default pen and colour"""
        assert state.phase == StrokePhase.IDLE
        assert state.selected_tool == DrawingTool.PEN
        assert state.selected_color == Config.DEFAULT_COLOR
        assert state.last_point is None

    def test_begin_only_anchors(self, state):
        """Test pointer-down anchors the path without producing a segment"""
        state.begin((10, 10))

        assert state.is_drawing
        assert state.last_point == (10.0, 10.0)
        assert state.segment_count == 0

    def test_extend_produces_segment_and_reanchors(self, state):
        """Test each move yields one segment starting at the previous point"""
        state.begin((10, 10))
        segment = state.extend((20, 10))

        assert segment.start == (10.0, 10.0)
        assert segment.end == (20.0, 10.0)
        assert segment.width == Config.PEN_WIDTH
        assert segment.color == Config.DEFAULT_COLOR
        assert state.last_point == (20.0, 10.0)

    def test_n_moves_give_n_chained_segments(self, state):
        """Test N moves produce exactly N segments in event order"""
        points = [(0, 0), (5, 1), (9, 7), (3, 12), (3, 12), (40, 2)]
        state.begin(points[0])
        segments = [state.extend(p) for p in points[1:]]

        assert len(segments) == len(points) - 1
        assert state.segment_count == len(points) - 1
        for segment, start, end in zip(segments, points, points[1:]):
            assert segment.start == (float(start[0]), float(start[1]))
            assert segment.end == (float(end[0]), float(end[1]))

    def test_move_while_idle_is_ignored(self, state):
        """Test a move without a pointer-down renders nothing and changes nothing"""
        assert state.extend((5, 5)) is None
        assert state.phase == StrokePhase.IDLE
        assert state.last_point is None
        assert state.segment_count == 0

    def test_end_is_idempotent(self, state):
        """Test stopping twice only terminates once"""
        state.begin((1, 1))
        state.extend((2, 2))

        assert state.end() is True
        assert state.end() is False
        assert state.phase == StrokePhase.IDLE
        assert state.extend((3, 3)) is None

    def test_segment_count_survives_end(self, state):
        """Test the finished stroke's segment count is still readable"""
        state.begin((0, 0))
        state.extend((1, 0))
        state.extend((2, 0))
        state.end()

        assert state.segment_count == 2

    def test_begin_while_drawing_restarts_path(self, state):
        """Test a second pointer-down re-anchors instead of connecting"""
        state.begin((0, 0))
        state.extend((10, 0))
        state.begin((50, 50))
        segment = state.extend((60, 50))

        assert segment.start == (50.0, 50.0)
        assert state.segment_count == 1


class TestToolCapture:
    """Test tool and colour are captured at stroke start"""

    def test_eraser_uses_background_and_width(self):
        """Test eraser segments use the background colour at width 20"""
        state = StrokeState(tool=DrawingTool.ERASER)
        state.begin((5, 5))
        segment = state.extend((5, 25))

        assert segment.width == Config.ERASER_WIDTH
        assert segment.color == Config.CANVAS_BACKGROUND
        assert segment.tool == DrawingTool.ERASER

    def test_eraser_never_renders_pen_colour(self):
        """Test colour picks before or during an eraser stroke do not leak in"""
        state = StrokeState()
        state.select_color('#ff6b6b')
        state.select_tool('eraser')
        state.begin((0, 0))
        state.select_color('#ffe66d')
        segments = [state.extend((x, 0)) for x in range(1, 5)]

        assert all(s.color == Config.CANVAS_BACKGROUND for s in segments)

    def test_changes_apply_to_next_stroke_only(self):
        """Test switching tool mid-stroke keeps the active stroke unchanged"""
        state = StrokeState()
        state.begin((0, 0))
        state.select_tool(DrawingTool.ERASER)
        state.select_color('#4ecdc4')
        in_progress = state.extend((1, 0))
        state.end()

        state.begin((0, 0))
        next_stroke = state.extend((1, 0))

        assert in_progress.color == Config.DEFAULT_COLOR
        assert in_progress.width == Config.PEN_WIDTH
        assert next_stroke.color == Config.CANVAS_BACKGROUND
        assert state.active_tool == DrawingTool.ERASER

    def test_active_fields_cleared_after_end(self):
        """Test captured tool and colour are dropped with the stroke"""
        state = StrokeState()
        state.begin((0, 0))
        assert state.active_color == Config.DEFAULT_COLOR
        state.end()

        assert state.active_tool is None
        assert state.active_color is None

    def test_colour_outside_palette_rejected(self):
        """Test only palette colours are accepted"""
        state = StrokeState()
        with pytest.raises(ValueError):
            state.select_color('#123456')
        assert state.selected_color == Config.DEFAULT_COLOR

    def test_palette_colour_case_insensitive(self):
        """Test upper-case hex is normalised"""
        state = StrokeState()
        state.select_color('#FF88CC')
        assert state.selected_color == '#ff88cc'


class TestTools:
    """Test tool helpers"""

    def test_parse_tool_by_name(self):
        assert parse_tool('pen') == DrawingTool.PEN
        assert parse_tool('ERASER') == DrawingTool.ERASER
        assert parse_tool(DrawingTool.PEN) == DrawingTool.PEN

    def test_parse_unknown_tool(self):
        with pytest.raises(ValueError):
            parse_tool('brush')

    def test_settings_for_pen(self):
        settings = settings_for(DrawingTool.PEN, '#ffffff')
        assert settings.width == 3
        assert settings.color == '#ffffff'

    def test_palette_has_ten_colours(self):
        assert len(Config.PALETTE) == 10
        assert Config.DEFAULT_COLOR in Config.PALETTE
