"""
UIコンポーネントのスモークテスト。
オフスクリーンのQtプラットフォーム上で画面とダイアログの連携を確認します。
"""
import os

from PIL import Image
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication

from models.app_models import Screen
from ui.components import pil_to_pixmap
from ui.dialogs import AboutDialog, HelpDialog
from ui.handlers.lifecycle_handler import ResumeWatcher
from ui.main_window import MainWindow
from ui.screens import DisplayScreen, InputScreen
from utils.constants import ABOUT_CREATOR, ABOUT_LINKS, ENCODING_ERROR_TEXT, HELP_PAGES, QR_TEXT_KEY


def _make_window(qtbot, controller):
    window = MainWindow(controller)
    qtbot.addWidget(window)
    return window


def test_pil_to_pixmap(qtbot):
    pixmap = pil_to_pixmap(Image.new("RGB", (20, 20), "white"))
    assert not pixmap.isNull()
    assert (pixmap.width(), pixmap.height()) == (20, 20)


def test_main_window_fresh_start_shows_input(qtbot, make_controller):
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()
    assert isinstance(window.centralWidget(), InputScreen)


def test_save_button_switches_to_display(qtbot, make_controller, storage):
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()

    screen = window.centralWidget()
    screen.text_edit.setText("abc")
    screen.save_button.click()

    assert controller.current_screen is Screen.DISPLAY
    assert storage.get(QR_TEXT_KEY) == "abc"
    display = window.centralWidget()
    assert isinstance(display, DisplayScreen)
    assert display.date_label.text() == "Date: 2025-06-01"
    assert not display.code_label.pixmap().isNull()


def test_blank_save_stays_on_input(qtbot, make_controller):
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()

    screen = window.centralWidget()
    screen.text_edit.setText("   ")
    screen.save_button.click()

    assert controller.current_screen is Screen.INPUT
    assert window.centralWidget() is screen


def test_change_text_menu_returns_to_prefilled_input(qtbot, make_controller, storage):
    storage.set(QR_TEXT_KEY, "224195")
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()

    display = window.centralWidget()
    assert isinstance(display, DisplayScreen)
    display.menu_button.click()
    assert controller.display_state.drawer_open
    assert not display.drawer.isHidden()

    display._on_menu_item_clicked(display.drawer.item(0))
    screen = window.centralWidget()
    assert isinstance(screen, InputScreen)
    assert screen.text_edit.text() == "224195"
    assert not display.resume_watcher.attached


def test_encoding_failure_shows_placeholder(qtbot, make_controller, failing_encoder, storage):
    storage.set(QR_TEXT_KEY, "abc")
    controller = make_controller(enc=failing_encoder)
    window = _make_window(qtbot, controller)
    controller.start()

    display = window.centralWidget()
    assert display.code_label.text() == ENCODING_ERROR_TEXT
    assert display.date_label.isHidden()
    assert controller.current_screen is Screen.DISPLAY


def test_help_dialog_follows_controller(qtbot, make_controller):
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()
    screen = window.centralWidget()

    screen.help_button.click()
    dialog = screen.help_dialog
    assert isinstance(dialog, HelpDialog)
    assert dialog.previous_button.isHidden()
    assert not dialog.next_button.isHidden()

    dialog.next_button.click()
    dialog.next_button.click()
    assert controller.input_state.help_image_index == 2
    assert dialog.next_button.isHidden()
    assert not dialog.previous_button.isHidden()

    dialog.close_button.click()
    assert screen.help_dialog is None
    assert not controller.input_state.help_dialog_visible


def test_about_dialog_links_open_without_closing(qtbot, make_controller, opened_links, storage):
    storage.set(QR_TEXT_KEY, "abc")
    controller = make_controller()
    window = _make_window(qtbot, controller)
    controller.start()
    display = window.centralWidget()

    display._on_menu_item_clicked(display.drawer.item(1))
    dialog = display.about_dialog
    assert isinstance(dialog, AboutDialog)

    dialog.link_labels[0].clicked.emit()
    dialog.link_labels[1].clicked.emit()
    assert opened_links == [link.url for link in ABOUT_LINKS]
    assert controller.display_state.about_dialog_visible

    dialog.reject()
    assert display.about_dialog is None
    assert not controller.display_state.about_dialog_visible


def test_about_dialog_shows_creator(qtbot, controller):
    dialog = AboutDialog(controller, ABOUT_CREATOR, ABOUT_LINKS)
    qtbot.addWidget(dialog)
    assert [label.text() for label in dialog.link_labels] == [link.label for link in ABOUT_LINKS]


def test_resume_watcher_attach_detach(qtbot):
    calls = []
    watcher = ResumeWatcher(lambda: calls.append(True))
    watcher.attach()
    assert watcher.attached
    watcher._handle_state_changed(Qt.ApplicationState.ApplicationInactive)
    watcher._handle_state_changed(Qt.ApplicationState.ApplicationActive)
    assert calls == [True]

    watcher.detach()
    assert not watcher.attached
    assert QGuiApplication.instance() is not None


def test_help_pages_ship_with_images():
    for page in HELP_PAGES:
        assert os.path.isfile(page.image_path), page.image_path


def test_help_dialog_shows_bundled_image(qtbot, make_controller):
    controller = make_controller()
    controller.start()
    controller.open_help()
    dialog = HelpDialog(controller, HELP_PAGES)
    qtbot.addWidget(dialog)

    for index, page in enumerate(HELP_PAGES):
        dialog.refresh()
        assert controller.input_state.help_image_index == index
        assert not dialog.image_label.pixmap().isNull()
        assert dialog.image_label.text() == ""
        assert dialog.caption_label.text().startswith(page.caption)
        controller.next_help_image()
