"""SVG rendering of a chord path."""

import svg

from models import Chord, Peg


def chords_to_svg(
    chords: "list[Chord]",
    width: int,
    height: int,
    pegs: "tuple[Peg, ...]" = (),
    invert: bool = True,
    stroke_width: float = 0.5,
    stroke_opacity: float = 0.35,
    peg_radius: float = 0.0,
) -> str:
    """Convert committed chords to an SVG string.

    Args:
        chords: Chords in drawing order
        width: Canvas width in pixels
        height: Canvas height in pixels
        pegs: Peg layout, drawn as small dots when peg_radius > 0
        invert: Dark thread on a light background if True,
            light thread on a dark background otherwise
        stroke_width: Thread width in pixels
        stroke_opacity: Per-chord opacity, overlaps build up tone
        peg_radius: Radius of the peg markers, 0 hides them

    Returns:
        SVG content as string
    """
    background = "white" if invert else "black"
    thread = "black" if invert else "white"

    elements: list[svg.Element] = [
        svg.Rect(x=0, y=0, width=width, height=height, fill=background),
    ]

    # AIDEV-NOTE: Pixel centers sit at +0.5 so chords line up with the raster
    for chord in chords:
        elements.append(
            svg.Line(
                x1=chord.start.x + 0.5,
                y1=chord.start.y + 0.5,
                x2=chord.end.x + 0.5,
                y2=chord.end.y + 0.5,
                stroke=thread,
                stroke_width=stroke_width,
                stroke_opacity=stroke_opacity,
                stroke_linecap="round",
            )
        )

    if peg_radius > 0:
        for peg in pegs:
            elements.append(
                svg.Circle(
                    cx=peg.x + 0.5,
                    cy=peg.y + 0.5,
                    r=peg_radius,
                    fill="gray",
                )
            )

    final_svg = svg.SVG(
        width=width,
        height=height,
        viewBox=svg.ViewBoxSpec(0, 0, width, height),
        elements=elements,
    )
    return final_svg.as_str()
