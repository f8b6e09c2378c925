# led_planner/figures.py
# Plotly preview of the panel grid with cut-out cells shaded.

import plotly.graph_objects as go


def grid_figure(result):
    """Draw the planned panel grid, removed panels filled and the cut-out outlined."""
    panel_w = result.panel.panel_w_m
    panel_h = result.panel.panel_h_m
    cols, rows = result.grid.cols, result.grid.rows
    width_m = result.built_w_m
    height_m = result.built_h_m

    fig = go.Figure()
    # Draw outer rectangle
    fig.add_shape(type="rect", x0=0, y0=0, x1=width_m, y1=height_m, line=dict(width=2))

    for r, c in result.grid.removed_cells:
        fig.add_shape(
            type="rect",
            x0=c * panel_w, y0=r * panel_h,
            x1=(c + 1) * panel_w, y1=(r + 1) * panel_h,
            line=dict(width=0),
            fillcolor="rgba(200, 40, 40, 0.35)",
        )

    # Grid lines (vertical)
    for c in range(1, cols):
        fig.add_shape(type="line", x0=c * panel_w, y0=0, x1=c * panel_w, y1=height_m, line=dict(width=1))

    # Grid lines (horizontal)
    for r in range(1, rows):
        fig.add_shape(type="line", x0=0, y0=r * panel_h, x1=width_m, y1=r * panel_h, line=dict(width=1))

    rect = result.grid.cut_rect
    if rect is not None:
        fig.add_shape(type="rect", x0=rect.cut_left, y0=rect.cut_bottom, x1=rect.cut_right, y1=rect.cut_top,
                      line=dict(width=2, dash="dash", color="#C82828"))

    fig.update_xaxes(range=[-0.05, max(panel_w, width_m) + 0.05], title_text="Width (m)",
                     showgrid=False, zeroline=False)
    fig.update_yaxes(range=[-0.05, max(panel_h, height_m) + 0.05], title_text="Height (m)",
                     scaleanchor="x", scaleratio=1, showgrid=False, zeroline=False)
    fig.update_layout(margin=dict(l=10, r=10, t=10, b=10), height=420, dragmode=False)
    return fig
