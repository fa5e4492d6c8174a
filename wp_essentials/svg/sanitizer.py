"""Allowlist-based SVG sanitizer.

Documents are parsed with defusedxml, so entity expansion and external
references are refused before any markup is inspected. Elements and attributes
outside the SVG allowlists are dropped, together with event handlers, script
URLs, and (optionally) references to resources outside the document.
"""

import re
from typing import Protocol, runtime_checkable
from xml.etree import ElementTree

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError, fromstring

from ..core.logging import get_logger


logger = get_logger(__name__)


SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"


ALLOWED_ELEMENTS = frozenset(
    {
        "a",
        "altglyph",
        "altglyphdef",
        "altglyphitem",
        "animatecolor",
        "animatemotion",
        "animatetransform",
        "circle",
        "clippath",
        "defs",
        "desc",
        "ellipse",
        "feblend",
        "fecolormatrix",
        "fecomponenttransfer",
        "fecomposite",
        "feconvolvematrix",
        "fediffuselighting",
        "fedisplacementmap",
        "fedistantlight",
        "feflood",
        "fefunca",
        "fefuncb",
        "fefuncg",
        "fefuncr",
        "fegaussianblur",
        "femerge",
        "femergenode",
        "femorphology",
        "feoffset",
        "fepointlight",
        "fespecularlighting",
        "fespotlight",
        "fetile",
        "feturbulence",
        "filter",
        "font",
        "g",
        "glyph",
        "glyphref",
        "hkern",
        "image",
        "line",
        "lineargradient",
        "marker",
        "mask",
        "metadata",
        "mpath",
        "path",
        "pattern",
        "polygon",
        "polyline",
        "radialgradient",
        "rect",
        "stop",
        "style",
        "svg",
        "switch",
        "symbol",
        "text",
        "textpath",
        "title",
        "tref",
        "tspan",
        "use",
        "view",
        "vkern",
    }
)

ALLOWED_ATTRIBUTES = frozenset(
    {
        "accent-height",
        "accumulate",
        "additive",
        "alignment-baseline",
        "ascent",
        "attributename",
        "attributetype",
        "azimuth",
        "basefrequency",
        "baseline-shift",
        "begin",
        "bias",
        "by",
        "class",
        "clip",
        "clip-path",
        "clip-rule",
        "clippathunits",
        "color",
        "color-interpolation",
        "color-interpolation-filters",
        "color-profile",
        "color-rendering",
        "cx",
        "cy",
        "d",
        "diffuseconstant",
        "direction",
        "display",
        "divisor",
        "dominant-baseline",
        "dur",
        "dx",
        "dy",
        "edgemode",
        "elevation",
        "end",
        "fill",
        "fill-opacity",
        "fill-rule",
        "filter",
        "filterunits",
        "flood-color",
        "flood-opacity",
        "font-family",
        "font-size",
        "font-size-adjust",
        "font-stretch",
        "font-style",
        "font-variant",
        "font-weight",
        "fx",
        "fy",
        "g1",
        "g2",
        "glyph-name",
        "glyphref",
        "gradienttransform",
        "gradientunits",
        "height",
        "href",
        "id",
        "image-rendering",
        "in",
        "in2",
        "k",
        "k1",
        "k2",
        "k3",
        "k4",
        "kernelmatrix",
        "kernelunitlength",
        "kerning",
        "keypoints",
        "keysplines",
        "keytimes",
        "lang",
        "lengthadjust",
        "letter-spacing",
        "lighting-color",
        "local",
        "marker-end",
        "marker-mid",
        "marker-start",
        "markerheight",
        "markerunits",
        "markerwidth",
        "mask",
        "maskcontentunits",
        "maskunits",
        "max",
        "media",
        "method",
        "min",
        "mode",
        "name",
        "numoctaves",
        "offset",
        "opacity",
        "operator",
        "order",
        "orient",
        "orientation",
        "origin",
        "overflow",
        "paint-order",
        "path",
        "pathlength",
        "patterncontentunits",
        "patterntransform",
        "patternunits",
        "points",
        "pointsatx",
        "pointsaty",
        "pointsatz",
        "preservealpha",
        "preserveaspectratio",
        "primitiveunits",
        "r",
        "radius",
        "refx",
        "refy",
        "repeatcount",
        "repeatdur",
        "restart",
        "result",
        "role",
        "rotate",
        "rx",
        "ry",
        "scale",
        "seed",
        "shape-rendering",
        "space",
        "specularconstant",
        "specularexponent",
        "spreadmethod",
        "startoffset",
        "stddeviation",
        "stitchtiles",
        "stop-color",
        "stop-opacity",
        "stroke",
        "stroke-dasharray",
        "stroke-dashoffset",
        "stroke-linecap",
        "stroke-linejoin",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "style",
        "surfacescale",
        "systemlanguage",
        "tabindex",
        "targetx",
        "targety",
        "text-anchor",
        "text-decoration",
        "text-rendering",
        "textlength",
        "title",
        "transform",
        "type",
        "u1",
        "u2",
        "unicode",
        "values",
        "version",
        "vert-adv-y",
        "vert-origin-x",
        "vert-origin-y",
        "viewbox",
        "visibility",
        "width",
        "word-spacing",
        "wrap",
        "writing-mode",
        "x",
        "x1",
        "x2",
        "xchannelselector",
        "y",
        "y1",
        "y2",
        "ychannelselector",
        "z",
        "zoomandpan",
    }
)

_SCRIPT_VALUE_RE = re.compile(
    r"(?:java|vb)script\s*:|expression\s*\(|@import|-moz-binding", re.IGNORECASE
)
_URL_FUNCTION_RE = re.compile(r"url\(\s*['\"]?\s*([^'\")\s]*)", re.IGNORECASE)
_SAFE_DATA_URI_RE = re.compile(
    r"^data:image/(?:png|gif|jpe?g|webp);base64,", re.IGNORECASE
)
# ASCII controls and spaces, which browsers ignore inside a URL scheme
_URL_NOISE_RE = re.compile(r"[\x00-\x20\x7f]+")


@runtime_checkable
class SvgSanitizer(Protocol):
    """Anything that can clean raw SVG markup."""

    def sanitize(self, markup: str | bytes) -> str | None:
        """Return sanitized markup, or None when the document is rejected."""
        ...


def _local_name(name: str) -> tuple[str | None, str]:
    if name.startswith("{"):
        namespace, _, local = name[1:].partition("}")
        return namespace, local.lower()
    return None, name.lower()


def _is_local_reference(value: str) -> bool:
    return value.startswith("#")


def _compact(value: str) -> str:
    return _URL_NOISE_RE.sub("", value)


def _strip_namespace(name: str, namespace: str) -> str:
    prefix = f"{{{namespace}}}"
    return name[len(prefix) :] if name.startswith(prefix) else name


def _xlink_prefixed(name: str) -> str:
    local = _strip_namespace(name, XLINK_NS)
    return f"xlink:{local}" if local != name else name


class Sanitizer:
    """Allowlist sanitizer for uploaded SVG documents.

    Args:
        minify: Drop whitespace-only text between elements
        remove_remote_references: Drop href and url() values pointing outside the document
    """

    def __init__(self, minify: bool = True, remove_remote_references: bool = True):
        self.minify = minify
        self.remove_remote_references = remove_remote_references

    def sanitize(self, markup: str | bytes) -> str | None:
        if isinstance(markup, str):
            markup = markup.encode("utf-8")
        if not markup.strip():
            return None

        try:
            root = fromstring(markup)
        except (ParseError, DefusedXmlException) as e:
            logger.info("svg_rejected", reason="unparseable", error=str(e))
            return None

        namespace, tag = _local_name(root.tag)
        if tag != "svg" or namespace not in (None, SVG_NS):
            logger.info("svg_rejected", reason="root_not_svg", root=root.tag)
            return None

        self._clean_attributes(root)
        self._clean_children(root)
        if self.minify:
            self._strip_whitespace(root)
        root.tail = None

        return self._serialize(root)

    def _clean_children(self, parent: ElementTree.Element) -> None:
        previous: ElementTree.Element | None = None
        for child in list(parent):
            if self._element_allowed(child):
                self._clean_attributes(child)
                self._clean_children(child)
                previous = child
                continue

            logger.debug("svg_element_removed", element=child.tag)
            # the removed element's tail belongs to whatever precedes it
            if child.tail:
                if previous is None:
                    parent.text = (parent.text or "") + child.tail
                else:
                    previous.tail = (previous.tail or "") + child.tail
            parent.remove(child)

    def _element_allowed(self, element: ElementTree.Element) -> bool:
        if not isinstance(element.tag, str):
            return False
        namespace, tag = _local_name(element.tag)
        if namespace not in (None, SVG_NS) or tag not in ALLOWED_ELEMENTS:
            return False
        if tag == "style" and element.text and self._value_unsafe(element.text):
            return False
        return True

    def _clean_attributes(self, element: ElementTree.Element) -> None:
        for name, value in list(element.attrib.items()):
            if not self._attribute_allowed(name, value):
                logger.debug("svg_attribute_removed", element=element.tag, attribute=name)
                del element.attrib[name]

    def _attribute_allowed(self, name: str, value: str) -> bool:
        namespace, local = _local_name(name)
        if namespace not in (None, XLINK_NS, XML_NS):
            return False
        if local.startswith("on"):
            return False
        if not (
            local in ALLOWED_ATTRIBUTES
            or local.startswith("aria-")
            or local.startswith("data-")
        ):
            return False
        if local == "href":
            return self._href_allowed(value)
        return not self._value_unsafe(value)

    def _href_allowed(self, value: str) -> bool:
        value = _compact(value)
        if _is_local_reference(value) or _SAFE_DATA_URI_RE.match(value):
            return True
        if _SCRIPT_VALUE_RE.search(value) or value.lower().startswith("data:"):
            return False
        return not self.remove_remote_references

    def _value_unsafe(self, value: str) -> bool:
        if _SCRIPT_VALUE_RE.search(_compact(value)):
            return True
        if self.remove_remote_references:
            for target in _URL_FUNCTION_RE.findall(value):
                if target and not _is_local_reference(target):
                    return True
        return False

    def _serialize(self, root: ElementTree.Element) -> str:
        """Write the tree with literal SVG and xlink prefixes.

        Prefixes are spelled out on the tree instead of registered with
        ElementTree, whose namespace map is shared by the whole process.
        """
        declarations = {"xmlns": SVG_NS}
        for element in root.iter():
            element.tag = _strip_namespace(element.tag, SVG_NS)
            if any(name.startswith(f"{{{XLINK_NS}}}") for name in element.attrib):
                declarations["xmlns:xlink"] = XLINK_NS
                element.attrib = {
                    _xlink_prefixed(name): value for name, value in element.attrib.items()
                }
        root.attrib = {**declarations, **root.attrib}
        return ElementTree.tostring(root, encoding="unicode")

    def _strip_whitespace(self, element: ElementTree.Element) -> None:
        if element.text is not None and not element.text.strip():
            element.text = None
        for child in element:
            self._strip_whitespace(child)
            if child.tail is not None and not child.tail.strip():
                child.tail = None
