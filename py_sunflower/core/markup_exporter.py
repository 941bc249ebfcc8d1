"""SVG markup export for rendered drawings."""

import math
from xml.etree.ElementTree import Element, SubElement, tostring

import numpy as np

from .renderer import Circle, Drawing, Line

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def format_number(value: float) -> str:
    """
    Format a number the way a browser prints it in markup.

    Integral values lose their fractional part ("250", not "250.0"),
    other values use the shortest round-tripping representation.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return np.format_float_positional(value, trim="-")
    return np.format_float_scientific(value, trim="-", exp_digits=1)


def _shape_attributes(shape) -> dict:
    if isinstance(shape, Circle):
        attrs = {
            "cx": format_number(shape.cx),
            "cy": format_number(shape.cy),
            "r": format_number(shape.r),
        }
        if shape.fill is not None:
            attrs["fill"] = shape.fill
        if shape.stroke is not None:
            attrs["stroke"] = shape.stroke
        return attrs
    if isinstance(shape, Line):
        return {
            "x1": format_number(shape.x1),
            "y1": format_number(shape.y1),
            "x2": format_number(shape.x2),
            "y2": format_number(shape.y2),
            "stroke": shape.stroke,
        }
    raise TypeError(f"Unsupported shape: {type(shape).__name__}")


def drawing_to_element(drawing: Drawing, include_namespace: bool = False) -> Element:
    """Build the <svg> element tree for a drawing."""
    size = format_number(drawing.size)
    offset = format_number(drawing.offset)

    attrs = {}
    if include_namespace:
        attrs["xmlns"] = SVG_NAMESPACE
    attrs.update({
        "viewBox": f"0 0 {size} {size}",
        "width": size,
        "height": size,
    })
    svg = Element("svg", attrs)
    group = SubElement(svg, "g", {"transform": f"translate({offset} {offset})"})

    for shape in drawing.elements:
        tag = "circle" if isinstance(shape, Circle) else "line"
        SubElement(group, tag, _shape_attributes(shape))

    return svg


def export_svg_markup(drawing: Drawing, include_namespace: bool = False) -> str:
    """
    Serialize a drawing to static SVG markup.

    Args:
        drawing: Rendered drawing
        include_namespace: Add the xmlns attribute so the markup can be
            saved as a standalone .svg file

    Returns:
        Markup string with explicit closing tags for every element
    """
    svg = drawing_to_element(drawing, include_namespace=include_namespace)
    return tostring(svg, encoding="unicode", short_empty_elements=False)

