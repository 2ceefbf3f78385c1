"""
ROMAN TIMELINE - Timeline Chart Component

Paints a RenderFrame with plotly: era bands, lane rows, spans, markers and
the axis. All geometry comes precomputed from the frame; this module only
maps it onto figure primitives in screen pixels.
"""

import plotly.graph_objects as go
import streamlit as st

from roman_timeline.types import RenderFrame, ShapeKind

LANE_STROKE = "#e0e0e0"
AXIS_COLOR = "#333333"
SELECTED_STROKE = "#000000"
DEFAULT_STROKE = "#ffffff"


def build_timeline_figure(frame: RenderFrame) -> go.Figure:
    """Build the figure for one frame. No streamlit calls."""
    fig = go.Figure()
    range_min, range_max = frame.pixel_range
    width = frame.snapshot.viewport_width

    for band in frame.era_bands:
        fig.add_shape(
            type="rect",
            x0=band.x,
            x1=band.x + band.width,
            y0=0,
            y1=band.height,
            fillcolor=band.color,
            opacity=0.1,
            line_width=0,
            layer="below",
        )
        fig.add_annotation(
            x=band.label_x, y=20, text=band.label, showarrow=False, opacity=0.6
        )

    for row in frame.lanes:
        fig.add_shape(
            type="rect",
            x0=range_min,
            x1=range_max,
            y0=row.y,
            y1=row.y + row.height,
            line=dict(color=LANE_STROKE, width=0.5),
        )
        fig.add_annotation(
            x=10,
            y=row.y + 25,
            text=f"<b>{row.lane.label}</b>",
            showarrow=False,
            xanchor="left",
            font=dict(color=row.lane.color),
        )

        markers = [s for s in row.shapes if s.kind == ShapeKind.MARKER]
        for shape in row.shapes:
            if shape.kind != ShapeKind.SPAN:
                continue
            fig.add_shape(
                type="rect",
                x0=shape.x,
                x1=shape.x + shape.width,
                y0=shape.y,
                y1=shape.y + shape.height,
                fillcolor=shape.color,
                opacity=0.8,
                line=dict(
                    color=SELECTED_STROKE if shape.selected else DEFAULT_STROKE,
                    width=shape.stroke_width,
                ),
            )
            if shape.label is not None:
                fig.add_annotation(
                    x=shape.label_x,
                    y=shape.label_y,
                    text=f"<b>{shape.label}</b>",
                    showarrow=False,
                    font=dict(color="#ffffff", size=11),
                )

        if markers:
            fig.add_trace(
                go.Scatter(
                    x=[s.x for s in markers],
                    y=[s.y for s in markers],
                    mode="markers",
                    name=row.lane.label,
                    customdata=[s.event_id for s in markers],
                    hovertemplate="%{customdata}<extra></extra>",
                    marker=dict(
                        color=row.lane.color,
                        size=[s.radius * 2 for s in markers],
                        line=dict(
                            color=[
                                SELECTED_STROKE if s.selected else DEFAULT_STROKE
                                for s in markers
                            ],
                            width=[s.stroke_width for s in markers],
                        ),
                    ),
                )
            )

    fig.add_shape(
        type="line",
        x0=0,
        x1=range_max,
        y0=frame.axis_y,
        y1=frame.axis_y,
        line=dict(color=AXIS_COLOR, width=2),
    )
    for tick in frame.ticks:
        fig.add_shape(
            type="line",
            x0=tick.x,
            x1=tick.x,
            y0=frame.axis_y,
            y1=frame.axis_y + 10,
            line=dict(color=AXIS_COLOR, width=1),
        )
        fig.add_annotation(
            x=tick.x, y=frame.axis_y + 25, text=tick.label, showarrow=False
        )

    fig.update_layout(
        xaxis=dict(range=[0, width], visible=False, fixedrange=True),
        yaxis=dict(
            range=[frame.total_height, 0], visible=False, fixedrange=True
        ),
        width=int(width),
        height=int(frame.total_height),
        margin=dict(l=0, r=0, t=0, b=0),
        showlegend=False,
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def render_timeline_chart(frame: RenderFrame) -> None:
    """Render the timeline figure."""
    st.plotly_chart(build_timeline_figure(frame), use_container_width=False)
