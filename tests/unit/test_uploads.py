"""Tests for the upload MIME allowlist and SVG upload sanitization."""

from pathlib import Path

import pytest

from wp_essentials.filters import SVG_MIME_TYPE, allow_svg_mime, sanitize_svg_upload
from wp_essentials.svg import Sanitizer


ERROR_MESSAGE = "Sorry, this file couldn't be sanitized so for security reasons wasn't uploaded"


class TestAllowSvgMime:
    def test_adds_exactly_one_entry(self):
        mimes = {"jpg|jpeg|jpe": "image/jpeg", "png": "image/png"}
        before = dict(mimes)

        result = allow_svg_mime(mimes)

        assert result is mimes
        assert set(result) - set(before) == {"svg"}
        assert result["svg"] == "image/svg+xml"
        assert {k: v for k, v in result.items() if k != "svg"} == before

    def test_idempotent(self):
        once = allow_svg_mime({"png": "image/png"})
        twice = allow_svg_mime(allow_svg_mime({"png": "image/png"}))
        assert once == twice

    def test_overwrites_existing_svg_entry(self):
        assert allow_svg_mime({"svg": "text/plain"}) == {"svg": "image/svg+xml"}


@pytest.fixture
def svg_upload(tmp_path: Path) -> dict:
    tmp_file = tmp_path / "phpA1B2.tmp"
    tmp_file.write_text('<svg xmlns="http://www.w3.org/2000/svg"><script>alert(1)</script></svg>')
    return {
        "name": "logo.svg",
        "type": SVG_MIME_TYPE,
        "tmp_name": str(tmp_file),
        "error": 0,
        "size": tmp_file.stat().st_size,
    }


class TestSanitizeSvgUpload:
    def test_successful_sanitization_rewrites_file(self, svg_upload, stub_sanitizer_factory):
        sanitizer = stub_sanitizer_factory('<svg xmlns="http://www.w3.org/2000/svg" />')
        original = Path(svg_upload["tmp_name"]).read_bytes()

        result = sanitize_svg_upload(
            svg_upload, sanitizer=sanitizer, error_message=ERROR_MESSAGE
        )

        assert result is svg_upload
        assert result["error"] == 0
        assert sanitizer.calls == [original]
        assert Path(svg_upload["tmp_name"]).read_text() == (
            '<svg xmlns="http://www.w3.org/2000/svg" />'
        )

    @pytest.mark.parametrize("failure", [None, ""])
    def test_failed_sanitization_sets_error(self, svg_upload, stub_sanitizer_factory, failure):
        original = Path(svg_upload["tmp_name"]).read_bytes()

        result = sanitize_svg_upload(
            svg_upload,
            sanitizer=stub_sanitizer_factory(failure),
            error_message=ERROR_MESSAGE,
        )

        assert result is svg_upload
        assert result["error"] == ERROR_MESSAGE
        assert Path(svg_upload["tmp_name"]).read_bytes() == original

    @pytest.mark.parametrize("mime", ["image/png", "image/svg", "IMAGE/SVG+XML", None])
    def test_other_types_pass_through(self, svg_upload, stub_sanitizer_factory, mime):
        svg_upload["type"] = mime
        snapshot = dict(svg_upload)
        original = Path(svg_upload["tmp_name"]).read_bytes()
        sanitizer = stub_sanitizer_factory("<svg/>")

        result = sanitize_svg_upload(
            svg_upload, sanitizer=sanitizer, error_message=ERROR_MESSAGE
        )

        assert result is svg_upload
        assert result == snapshot
        assert sanitizer.calls == []
        assert Path(svg_upload["tmp_name"]).read_bytes() == original

    def test_with_real_sanitizer(self, svg_upload):
        sanitize_svg_upload(
            svg_upload,
            sanitizer=Sanitizer(minify=True),
            error_message=ERROR_MESSAGE,
        )

        content = Path(svg_upload["tmp_name"]).read_text()
        assert svg_upload["error"] == 0
        assert "script" not in content
        assert content.startswith("<svg")

    def test_real_sanitizer_rejects_non_svg(self, svg_upload):
        Path(svg_upload["tmp_name"]).write_text("<html><body>hi</body></html>")

        sanitize_svg_upload(
            svg_upload,
            sanitizer=Sanitizer(minify=True),
            error_message=ERROR_MESSAGE,
        )

        assert svg_upload["error"] == ERROR_MESSAGE
        assert Path(svg_upload["tmp_name"]).read_text() == "<html><body>hi</body></html>"
