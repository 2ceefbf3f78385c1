"""Tests for the plotly timeline figure (no streamlit session needed)."""

from roman_timeline.dashboard.components.timeline_chart import build_timeline_figure


class TestBuildTimelineFigure:
    def test_size_matches_frame(self, pipeline):
        frame = pipeline.render()
        fig = build_timeline_figure(frame)
        assert fig.layout.height == int(frame.total_height)
        assert fig.layout.width == 1220
        assert tuple(fig.layout.yaxis.range) == (frame.total_height, 0)

    def test_one_marker_trace_per_lane_with_markers(self, pipeline):
        fig = build_timeline_figure(pipeline.render())
        # politics has two point markers, military and culture only spans
        assert len(fig.data) == 1
        assert list(fig.data[0].customdata) == ["founding", "ides-of-march"]

    def test_span_and_tick_annotations(self, pipeline):
        frame = pipeline.render()
        fig = build_timeline_figure(frame)
        texts = [a.text for a in fig.layout.annotations]
        for tick in frame.ticks:
            assert tick.label in texts
        assert "<b>Pax Romana</b>" in texts
