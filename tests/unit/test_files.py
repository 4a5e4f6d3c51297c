"""Unit tests for backoffice_ui.utils.files – images, polling and deletion."""

from __future__ import annotations

import threading
from pathlib import Path

import pytest
from PIL import Image

from backoffice_ui.utils.files import delete_file, does_file_exist, generate_image, unique_path


@pytest.mark.unit
class TestGenerateImage:
    def test_writes_png_of_requested_size(self, tmp_path):
        path = generate_image(tmp_path / "title.png", 16, 24)

        with Image.open(path) as image:
            assert image.format == "PNG"
            assert image.size == (16, 24)

    def test_default_size_and_absolute_path(self, tmp_path):
        path = generate_image(tmp_path / "nested" / "default.png")

        assert Path(path).is_absolute()
        with Image.open(path) as image:
            assert image.size == (200, 200)


@pytest.mark.unit
class TestDoesFileExist:
    def test_existing_file(self, tmp_path):
        target = tmp_path / "invoice.pdf"
        target.write_bytes(b"%PDF-1.4")

        assert does_file_exist(target, timeout_ms=100) is True

    def test_missing_file_after_timeout(self, tmp_path):
        assert does_file_exist(tmp_path / "ghost.pdf", timeout_ms=200) is False

    def test_file_appearing_before_deadline(self, tmp_path):
        target = tmp_path / "late.pdf"
        timer = threading.Timer(0.2, target.write_bytes, args=(b"%PDF-1.4",))
        timer.start()
        try:
            assert does_file_exist(target, timeout_ms=3000) is True
        finally:
            timer.cancel()


@pytest.mark.unit
class TestDeleteFile:
    def test_deletes_existing_file(self, tmp_path):
        target = tmp_path / "title.png"
        target.write_bytes(b"png")

        delete_file(target)

        assert not target.exists()

    def test_missing_file_is_ignored(self, tmp_path):
        delete_file(tmp_path / "ghost.png")

    def test_other_os_errors_propagate(self, tmp_path):
        directory = tmp_path / "a-directory"
        directory.mkdir()

        with pytest.raises(OSError):
            delete_file(directory)


@pytest.mark.unit
class TestUniquePath:
    def test_free_name_is_kept(self, tmp_path):
        assert unique_path(tmp_path, "invoices.pdf") == tmp_path / "invoices.pdf"

    def test_taken_names_get_a_counter(self, tmp_path):
        (tmp_path / "invoices.pdf").write_bytes(b"%PDF-1.4")
        (tmp_path / "invoices-1.pdf").write_bytes(b"%PDF-1.4")

        assert unique_path(tmp_path, "invoices.pdf") == tmp_path / "invoices-2.pdf"
