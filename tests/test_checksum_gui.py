import time
from pathlib import Path

import pytest
from PySide6.QtCore import QMimeData, QPoint, QPointF, Qt, QUrl
from PySide6.QtGui import QDragEnterEvent, QDropEvent

import checksum_gui
from checksum_gui import ChecksumWindow
from checksum_engine import compute_checksums
from tray_shell import TrayShell
from ui_panels import DropZone
from workers import ChecksumWorker


@pytest.fixture
def window(qapp):
    win = ChecksumWindow()
    yield win
    win.hide_on_close = False
    win.close()


def _wait_for(qapp, condition, timeout=10.0):
    deadline = time.monotonic() + timeout
    while not condition():
        if time.monotonic() > deadline:
            raise AssertionError("timed out waiting for the checksum thread")
        qapp.processEvents()
        time.sleep(0.01)


def test_result_is_displayed(window, make_file):
    path = make_file(b"The quick brown fox jumps over the lazy dog")
    window.file_path = path
    window.checksum_worker = ChecksumWorker(path)

    window.handle_checksum_finished(window.checksum_worker.request, compute_checksums(path))

    panel = window.checksum_panel
    assert panel.value_labels["md5"].text() == "9e107d9d372bb6826bd81d3542a419d6"
    assert panel.value_labels["sha1"].text() == "2fd4e1c67a2d28fced849ee1bb76e7391b93eb12"
    assert window.file_info_panel.size_label.text() == "Size: 43.00 B"
    assert window.checksum_worker is None
    assert not panel.isHidden()


def test_stale_result_is_ignored(window, make_file):
    old_path = make_file(b"old", name="old.txt")
    new_path = make_file(b"new", name="new.txt")
    stale = ChecksumWorker(old_path)
    window.checksum_worker = ChecksumWorker(new_path)

    window.handle_checksum_finished(stale.request, compute_checksums(old_path))

    assert window.checksum_panel.value_labels["md5"].text() == ""
    assert window.checksum_worker is not None


def test_error_is_shown(window, tmp_path, monkeypatch):
    shown = []
    monkeypatch.setattr(checksum_gui.QMessageBox, "critical",
                        lambda parent, title, text: shown.append((title, text)))
    window.checksum_worker = ChecksumWorker(str(tmp_path / "missing"))

    window.handle_checksum_error(window.checksum_worker.request, "Could not read 'missing'")

    assert shown == [("Error Calculating Checksums", "Could not read 'missing'")]
    assert window.status.text().startswith("[ERROR]")


def test_checksum_runs_on_background_thread(window, qapp, make_file):
    path = make_file(b"")
    window.start_checksum(path)
    _wait_for(qapp, lambda: window.checksum_worker is None)

    assert window.checksum_panel.value_labels["sha256"].text() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    for check_thread in list(window.running_checks):
        check_thread.wait()


def test_reset_clears_everything(window, make_file):
    path = make_file(b"abc")
    window.file_path = path
    window.checksum_worker = ChecksumWorker(path)
    window.handle_checksum_finished(window.checksum_worker.request, compute_checksums(path))

    window.reset()

    assert window.file_path is None
    assert window.checksum_worker is None
    assert all(label.text() == "" for label in window.checksum_panel.value_labels.values())
    assert window.file_info_panel.path_label.text() == ""
    assert window.checksum_panel.isHidden()


def test_toggle_theme(window):
    assert window.theme == "dark"
    window.toggle_theme()
    assert window.theme == "light"
    assert window.btn_theme.text() == "Dark"
    window.toggle_theme()
    assert window.theme == "dark"


def test_copy_digest_puts_value_on_clipboard(window, qapp, make_file):
    path = make_file(b"abc")
    window.checksum_worker = ChecksumWorker(path)
    window.handle_checksum_finished(window.checksum_worker.request, compute_checksums(path))

    window.checksum_panel.copy_digest("md5")

    assert qapp.clipboard().text() == "900150983cd24fb0d6963f7d28e17f72"
    assert window.checksum_panel.copy_buttons["md5"].text() == "Copied!"
    window.checksum_panel._reset_copy_button("md5")
    assert window.checksum_panel.copy_buttons["md5"].text() == "Copy"


def test_close_hides_when_tray_keeps_app_alive(window):
    window.show()
    window.hide_on_close = True
    window.close()
    assert not window.isVisible()


def test_tray_shell_commands(window, qapp):
    tray = TrayShell(window, qapp)
    tray.show_window()
    assert window.isVisible()
    tray.toggle_window()
    assert not window.isVisible()
    tray.toggle_window()
    assert window.isVisible()
    tray.hide_window()
    assert not window.isVisible()


def _mime_with_remote_then_local(local_path):
    mime = QMimeData()
    mime.setUrls([QUrl("https://example.com/remote.txt"), QUrl.fromLocalFile(local_path)])
    return mime


def test_drop_zone_picks_first_local_file(qapp, make_file):
    path = make_file(b"dropped", name="dropped.txt")
    mime = _mime_with_remote_then_local(path)
    assert Path(DropZone._first_local_file(mime)) == Path(path)

    remote_only = QMimeData()
    remote_only.setUrls([QUrl("https://example.com/remote.txt")])
    assert DropZone._first_local_file(remote_only) is None


def test_drop_zone_highlights_and_emits_dropped_file(window, qapp, make_file):
    path = make_file(b"dropped", name="dropped.txt")
    zone = DropZone()
    zone.set_styles(window.STYLES)
    dropped = []
    zone.file_dropped.connect(dropped.append)
    mime = _mime_with_remote_then_local(path)

    enter = QDragEnterEvent(QPoint(5, 5), Qt.CopyAction, mime, Qt.LeftButton, Qt.NoModifier)
    zone.dragEnterEvent(enter)
    assert zone.styleSheet() == window.STYLES["drop_active"]

    drop = QDropEvent(QPointF(5, 5), Qt.CopyAction, mime, Qt.LeftButton, Qt.NoModifier)
    zone.dropEvent(drop)
    assert zone.styleSheet() == window.STYLES["drop_idle"]
    assert [Path(p) for p in dropped] == [Path(path)]


def test_repeated_copy_keeps_one_timer_running(window, make_file):
    path = make_file(b"abc")
    window.checksum_worker = ChecksumWorker(path)
    window.handle_checksum_finished(window.checksum_worker.request, compute_checksums(path))
    panel = window.checksum_panel
    timer = panel.copy_timers["sha1"]

    panel.copy_digest("sha1")
    panel.copy_digest("sha1")

    assert panel.copy_timers["sha1"] is timer
    assert timer.isActive()
    assert panel.copy_buttons["sha1"].text() == "Copied!"
    timer.stop()
    timer.timeout.emit()
    assert panel.copy_buttons["sha1"].text() == "Copy"
